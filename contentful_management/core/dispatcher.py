"""Request dispatch with rate-limit retries."""

import time
from typing import TYPE_CHECKING, Any

import httpx
import structlog

from contentful_management.config import ClientConfig
from contentful_management.core.builder import ResourceBuilder
from contentful_management.errors import RateLimitExceededError, RateWaitTooLongError
from contentful_management.observability import RequestMetrics
from contentful_management.resource import BaseResource, ResourceArray
from contentful_management.transport import HttpTransport


if TYPE_CHECKING:
    from contentful_management.client import Client


logger = structlog.get_logger()

BuildResult = BaseResource | ResourceArray | None


class RequestDispatcher:
    """Sends requests, retries rate-limited ones and builds the responses.

    Only HTTP 429 responses are retried. The retry budget is shared by
    every request of the dispatcher and is never replenished.
    """

    def __init__(
        self,
        transport: HttpTransport,
        builder: ResourceBuilder,
        config: ClientConfig,
        owner: "Client | None" = None,
        log: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            transport: Transport used for HTTP calls.
            builder: Builder turning bodies into resources.
            config: Client configuration (hosts and rate-limit policy).
            owner: Client attached to every built resource.
            log: Optional logger; defaults to the module logger.
        """
        self._transport = transport
        self._builder = builder
        self._config = config
        self._owner = owner
        self._remaining_retries = config.max_rate_limit_retries
        self._metrics = RequestMetrics.get_instance()
        self._log = (log or logger).bind(component="dispatcher")

    @property
    def remaining_rate_limit_retries(self) -> int:
        return self._remaining_retries

    def set_owner(self, owner: "Client") -> None:
        self._owner = owner

    def host_for(self, upload: bool) -> str:
        return self._config.host_for(upload)

    def request(
        self,
        method: str,
        uri: str,
        *,
        resource: BaseResource | None = None,
        body: str | bytes | None = None,
        headers: dict[str, str] | None = None,
        host: str | None = None,
    ) -> BuildResult:
        """Send a request and build the response.

        Args:
            method: HTTP method.
            uri: Path relative to the host, or an absolute URL.
            resource: Resource refreshed in place from the response.
            body: Encoded request body.
            headers: Extra request headers.
            host: Host to send to; the management host when None.

        Returns:
            The built resource or array, ``resource`` itself, or None when
            the response has no body and no resource was given.

        Raises:
            RateWaitTooLongError: If the advertised wait exceeds the maximum.
            RateLimitExceededError: If the retry budget is exhausted.
            ApiError: For other error responses.
            httpx.HTTPError: For connection-level failures.
        """
        url = self._url(uri, host)
        try:
            data = self._transport.send(method, url, body=body, headers=headers)
        except RateLimitExceededError as e:
            wait_seconds = e.second_remaining
            if wait_seconds > self._config.max_rate_limit_wait:
                self._log.warning(
                    "rate_limit_wait_too_long",
                    url=url,
                    wait_seconds=wait_seconds,
                    max_wait_seconds=self._config.max_rate_limit_wait,
                )
                if isinstance(e.__cause__, httpx.HTTPError):
                    msg = (
                        f"Rate limit wait of {wait_seconds}s exceeds the "
                        f"maximum of {self._config.max_rate_limit_wait}s"
                    )
                    raise RateWaitTooLongError(
                        msg,
                        status_code=e.status_code,
                        error_id=e.error_id,
                        request_id=e.request_id,
                        details=e.details,
                        response=e.response,
                    ) from e.__cause__
                raise

            if self._remaining_retries <= 0:
                self._log.warning("rate_limit_retries_exhausted", url=url)
                raise

            self._remaining_retries -= 1
            self._metrics.record_rate_limit_retry(wait_seconds)
            self._log.info(
                "rate_limited",
                url=url,
                wait_seconds=wait_seconds,
                remaining_retries=self._remaining_retries,
            )
            time.sleep(wait_seconds)
            return self.request(
                method,
                uri,
                resource=resource,
                body=body,
                headers=headers,
                host=host,
            )

        if not data:
            return resource

        built = self._builder.build(data, resource)
        self._attach_owner(built)
        return built

    def _url(self, uri: str, host: str | None) -> str:
        uri = uri.rstrip("/")
        if uri.startswith(("http://", "https://")):
            return uri
        base = (host or self._config.host).rstrip("/")
        if not uri.startswith("/"):
            uri = f"/{uri}"
        return f"{base}{uri}"

    def _attach_owner(self, built: Any) -> None:
        if self._owner is None:
            return
        if isinstance(built, ResourceArray):
            for item in built.resources():
                item.set_client(self._owner)
        elif isinstance(built, BaseResource):
            built.set_client(self._owner)
