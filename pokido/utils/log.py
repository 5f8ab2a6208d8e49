"""Logging configuration using structlog."""

import logging
import sys
import time
from typing import Any, Dict, Optional

import structlog

from .config import settings

ROOT_LOGGER = "pokido"


def configure_logging(level: Optional[str] = None):
    """Configure structured JSON logging.

    Request-scoped values bound with ``bind_request_context`` are merged into
    every event emitted while handling that request.
    """
    level_name = (level or settings.LOG_LEVEL).upper()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level_name, logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """Get a configured logger instance."""
    if not structlog.is_configured():
        configure_logging()

    return structlog.get_logger(name or ROOT_LOGGER)


def bind_request_context(**kwargs: Any) -> None:
    """Attach values to all log events of the current request."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()


class LoggerMixin:
    """Mixin class to add logging capability to any class."""

    @property
    def logger(self) -> structlog.BoundLogger:
        """Get logger for this class."""
        if not hasattr(self, "_logger"):
            self._logger = get_logger(f"{ROOT_LOGGER}.{self.__class__.__name__}")
        return self._logger

    def log_start(self, event: str, **kwargs: Any) -> Dict[str, Any]:
        """Log start of operation and return a timing context."""
        context = {"event": event, "start_time": time.monotonic(), **kwargs}
        self.logger.info(f"{event} started", **_without_event(context))
        return context

    def log_success(self, context: Dict[str, Any], **kwargs: Any):
        """Log successful operation completion with duration."""
        if "start_time" in context:
            kwargs["duration_ms"] = _elapsed_ms(context["start_time"])

        self.logger.info(
            f"{context.get('event', 'operation')} completed",
            **_without_event(context),
            **kwargs,
        )

    def log_error(self, context: Dict[str, Any], error: Exception, **kwargs: Any):
        """Log operation failure with duration and error type."""
        if "start_time" in context:
            kwargs["duration_ms"] = _elapsed_ms(context["start_time"])

        self.logger.error(
            f"{context.get('event', 'operation')} failed",
            **_without_event(context),
            error=str(error),
            error_type=type(error).__name__,
            **kwargs,
        )


def _without_event(context: Dict[str, Any]) -> Dict[str, Any]:
    # "event" is structlog's positional message key
    return {k: v for k, v in context.items() if k not in ("event", "start_time")}


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)
