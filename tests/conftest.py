"""Shared fixtures."""

from collections.abc import Iterator

import pytest

from contentful_management.observability import RequestMetrics


@pytest.fixture(autouse=True)
def reset_metrics() -> Iterator[None]:
    """Give every test a fresh metrics singleton."""
    RequestMetrics.reset()
    yield
    RequestMetrics.reset()
