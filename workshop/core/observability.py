"""
Observability Infrastructure

Structured logging with correlation tracking, plus the Prometheus metrics
emitted by the work-order lifecycle.
"""

import contextvars
import logging
import sys
import uuid
from typing import Any

import structlog
from prometheus_client import Counter, Gauge

from .config import settings

# Context variables for correlation tracking
correlation_id_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "correlation_id", default=""
)

# Prometheus metrics
REQUEST_COUNT = Counter(
    "workshop_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

WORK_ORDERS_CREATED = Counter(
    "workshop_work_orders_created_total",
    "Work orders created at intake",
    ["status"],
)

WORK_ORDERS_COMPLETED = Counter(
    "workshop_work_orders_completed_total", "Work orders completed"
)

CAPACITY_WARNINGS = Counter(
    "workshop_capacity_warnings_total",
    "Degraded allocations by kind",
    ["kind"],
)

LIVE_WORK_ORDERS = Gauge("workshop_live_work_orders", "Work orders not yet completed")

QUEUED_WORK_ORDERS = Gauge("workshop_queued_work_orders", "Work orders waiting for a bay")


class CorrelationIdProcessor:
    """Structlog processor to add correlation ID to all log entries."""

    def __call__(
        self, logger: Any, name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        correlation_id = correlation_id_var.get("")
        if correlation_id:
            event_dict["correlation_id"] = correlation_id
        return event_dict


def setup_structured_logging() -> None:
    """Configure structured logging with JSON or console output."""
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        CorrelationIdProcessor(),
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.add_log_level,
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(colors=settings.ENVIRONMENT == "local")
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Set correlation ID for request tracking."""
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())

    correlation_id_var.set(correlation_id)
    return correlation_id