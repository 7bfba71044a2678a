"""Observability module for logging and metrics."""

from contentful_management.observability.logging import space_context
from contentful_management.observability.metrics import RequestMetrics


__all__ = [
    "RequestMetrics",
    "space_context",
]
