"""
Tests for the error handling system.

Covers the exception hierarchy, the status and message key each error maps
to, and the handle_error logging helper.
"""

import logging
from unittest.mock import Mock

import pytest

from pokido.utils.error_handler import (
    ConfigurationError,
    ErrorContext,
    NotFound,
    PokidoError,
    StorageError,
    UnparsableResponse,
    UpstreamUnavailable,
    ValidationError,
    handle_error,
    status_for,
)


class TestPokidoError:
    """Test the base exception class and its subclasses."""

    def test_base_exception_creation(self):
        """Test basic exception creation with message only."""
        error = PokidoError("Test error message")
        assert str(error) == "Test error message"
        assert error.message == "Test error message"
        assert error.details == {}

    def test_exception_with_details(self):
        """Test exception creation with additional details."""
        details = {"field": "value", "code": 123}
        error = PokidoError("Test error", details)
        assert str(error) == "Test error | Details: {'field': 'value', 'code': 123}"
        assert error.details == details

    def test_exception_inheritance(self):
        """Test that all custom exceptions inherit from PokidoError."""
        for exc_class in [ConfigurationError, ValidationError, UpstreamUnavailable,
                          UnparsableResponse, NotFound, StorageError]:
            assert issubclass(exc_class, PokidoError)

    @pytest.mark.parametrize("exc_class, status, key", [
        (PokidoError, 500, "errorGeneric"),
        (ConfigurationError, 500, "errorConfiguration"),
        (ValidationError, 400, "errorInvalidInput"),
        (UpstreamUnavailable, 502, "errorUpstream"),
        (UnparsableResponse, 502, "errorUnparsable"),
        (NotFound, 404, "errorNotFound"),
        (StorageError, 500, "errorStorage"),
    ])
    def test_status_and_message_key(self, exc_class, status, key):
        error = exc_class("boom")
        assert error.status_code == status
        assert error.message_key == key
        assert status_for(error) == status

    def test_validation_error_message_key_override(self):
        error = ValidationError("No file uploaded", message_key="errorNoFile")
        assert error.message_key == "errorNoFile"
        assert ValidationError("other").message_key == "errorInvalidInput"

    def test_unexpected_errors_are_500(self):
        assert status_for(RuntimeError("boom")) == 500
        assert status_for(KeyError("x")) == 500


class TestHandleError:
    """Test the handle_error utility."""

    @pytest.fixture
    def context(self):
        return ErrorContext(
            operation="resolve",
            module="pokido.resolve.tcgdex",
            function="resolve",
            input_data={"name": "Pikachu"},
        )

    def test_reraises_by_default(self, context):
        logger = Mock()
        error = NotFound("No cards found", {"name": "Pikachu"})

        with pytest.raises(NotFound):
            handle_error(error, context, logger)

        logger.warning.assert_called_once()
        message = logger.warning.call_args.args[0]
        assert message == "Error in pokido.resolve.tcgdex.resolve during resolve: No cards found"
        assert logger.warning.call_args.kwargs["details"] == {"name": "Pikachu"}

    def test_returns_default_without_reraise(self, context):
        logger = Mock()

        result = handle_error(UpstreamUnavailable("down"), context, logger, reraise=False, default_return=[])

        assert result == []

    def test_unexpected_error_logged_with_traceback(self, context):
        logger = Mock()

        handle_error(RuntimeError("kaboom"), context, logger, reraise=False)

        logger.error.assert_called_once()
        assert logger.error.call_args.kwargs["exc_info"] is True
        assert logger.error.call_args.kwargs["error_type"] == "RuntimeError"
        logger.warning.assert_not_called()

    def test_stdlib_logger_gets_extra(self, context):
        logger = Mock(spec=logging.Logger)

        handle_error(StorageError("disk full"), context, logger, reraise=False)

        kwargs = logger.warning.call_args.kwargs
        assert set(kwargs) == {"extra"}
        assert kwargs["extra"]["operation"] == "resolve"
        assert kwargs["extra"]["error_module"] == "pokido.resolve.tcgdex"
