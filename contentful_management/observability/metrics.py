"""Metrics collection for API requests."""

from dataclasses import dataclass, field
from typing import ClassVar

from contentful_management.errors import ApiErrorClass


@dataclass
class RequestMetrics:
    """Metrics for Content Management API requests.

    Singleton class that tracks request counts per status code,
    rate-limit retries, time spent waiting and failures.
    """

    api_requests_total: dict[int, int] = field(default_factory=dict)
    api_rate_limit_retries_total: int = 0
    api_rate_limit_wait_seconds_total: float = 0.0
    api_failures_total: dict[str, int] = field(default_factory=dict)
    api_duration_ms_total: float = 0.0
    api_request_count: int = 0

    _instance: ClassVar["RequestMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "RequestMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_request(self, status_code: int, duration_ms: float) -> None:
        """Record a completed HTTP request.

        Args:
            status_code: HTTP status code.
            duration_ms: Duration in milliseconds.
        """
        self.api_requests_total[status_code] = (
            self.api_requests_total.get(status_code, 0) + 1
        )
        self.api_duration_ms_total += duration_ms
        self.api_request_count += 1

    def record_rate_limit_retry(self, wait_seconds: float) -> None:
        """Record a rate-limit retry and the time waited before it.

        Args:
            wait_seconds: Seconds slept before retrying.
        """
        self.api_rate_limit_retries_total += 1
        self.api_rate_limit_wait_seconds_total += wait_seconds

    def record_failure(self, error_class: ApiErrorClass) -> None:
        """Record a request failure.

        Args:
            error_class: Classification of the failure.
        """
        key = error_class.value
        self.api_failures_total[key] = self.api_failures_total.get(key, 0) + 1

    def to_dict(self) -> dict[str, int | float | dict[str, int] | dict[int, int]]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        return {
            "api_requests_total": dict(self.api_requests_total),
            "api_rate_limit_retries_total": self.api_rate_limit_retries_total,
            "api_rate_limit_wait_seconds_total": (
                self.api_rate_limit_wait_seconds_total
            ),
            "api_failures_total": dict(self.api_failures_total),
            "api_duration_ms_total": self.api_duration_ms_total,
            "api_request_count": self.api_request_count,
        }

    @property
    def avg_duration_ms(self) -> float:
        """Calculate average request duration.

        Returns:
            Average duration in milliseconds.
        """
        if self.api_request_count == 0:
            return 0.0
        return self.api_duration_ms_total / self.api_request_count
