"""
Centralized error handling for Pokido.

Every failure a user can see is a ``PokidoError`` subclass. Each class carries
the HTTP status it maps to and the locale key of its user-facing message, so
the API and CLI layers can report it without knowing where it came from.
"""

import logging
from typing import Any, Dict, Optional
from dataclasses import dataclass


class PokidoError(Exception):
    """Base exception class for all Pokido errors."""

    status_code: int = 500
    message_key: str = "errorGeneric"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(PokidoError):
    """Raised when required configuration (API keys, paths) is missing or invalid."""
    message_key = "errorConfiguration"


class ValidationError(PokidoError):
    """Raised when request input is missing or malformed."""
    status_code = 400
    message_key = "errorInvalidInput"

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        message_key: Optional[str] = None,
    ):
        super().__init__(message, details)
        if message_key:
            self.message_key = message_key


class UpstreamUnavailable(PokidoError):
    """Raised when an external service is unreachable, times out or answers non-2xx."""
    status_code = 502
    message_key = "errorUpstream"


class UnparsableResponse(PokidoError):
    """Raised when the vision model's answer holds no JSON object."""
    status_code = 502
    message_key = "errorUnparsable"


class NotFound(PokidoError):
    """Raised when no catalog card matches after all fallbacks."""
    status_code = 404
    message_key = "errorNotFound"


class StorageError(PokidoError):
    """Raised when the album store cannot be read or written."""
    message_key = "errorStorage"


@dataclass
class ErrorContext:
    """Context information for error reporting."""
    operation: str
    module: str
    function: str
    input_data: Optional[Dict[str, Any]] = None
    timestamp: Optional[str] = None


def handle_error(
    error: Exception,
    context: ErrorContext,
    logger: Any,
    reraise: bool = True,
    default_return: Any = None
) -> Any:
    """
    Log an error with its context and either re-raise it or return a default.

    ``logger`` may be a structlog or stdlib logger; expected ``PokidoError``s
    are logged at warning level without a traceback, anything else at error
    level with one.
    """
    error_msg = f"Error in {context.module}.{context.function} during {context.operation}"

    if isinstance(error, PokidoError):
        error_msg += f": {error.message}"
    else:
        error_msg += f": {str(error)}"

    fields = {
        "error_type": type(error).__name__,
        "operation": context.operation,
        "error_module": context.module,
        "error_function": context.function,
        "input_data": context.input_data,
        "timestamp": context.timestamp,
    }
    if isinstance(error, PokidoError) and error.details:
        fields["details"] = error.details

    if isinstance(logger, logging.Logger):
        log_kwargs = {"extra": fields}
    else:
        log_kwargs = dict(fields)

    if isinstance(error, PokidoError):
        logger.warning(error_msg, **log_kwargs)
    else:
        logger.error(error_msg, exc_info=True, **log_kwargs)

    if reraise:
        raise error

    return default_return


def status_for(error: Exception) -> int:
    """HTTP status code for an exception; unexpected errors are 500."""
    if isinstance(error, PokidoError):
        return error.status_code
    return 500
