"""Log context for space-scoped operations.

The client only emits events through structlog and leaves renderer and
level configuration to the application. Applications that want the
identifiers in their output include
``structlog.contextvars.merge_contextvars`` in their processor chain.
"""

from collections.abc import Iterator
from contextlib import contextmanager

import structlog


@contextmanager
def space_context(space_id: str, environment_id: str | None = None) -> Iterator[None]:
    """Bind space/environment identifiers to log events inside the block.

    Previously bound values are restored on exit, so nested proxies
    report the innermost scope.

    Args:
        space_id: Space identifier.
        environment_id: Optional environment identifier.
    """
    context = {"space_id": space_id}
    if environment_id is not None:
        context["environment_id"] = environment_id
    with structlog.contextvars.bound_contextvars(**context):
        yield
