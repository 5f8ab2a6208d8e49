"""
Input validation for requests reaching Pokido.

These helpers normalize user input and raise ``ValidationError`` with a
locale message key, so the caller can report the problem in the user's
language.
"""

from typing import Any, List, Optional

from pokido.core.constants import MAX_UPLOAD_BYTES, SUPPORTED_LOCALES
from pokido.utils.error_handler import ValidationError


def validate_upload(data: Optional[bytes], max_bytes: int = MAX_UPLOAD_BYTES) -> bytes:
    """
    Validate uploaded image bytes.

    Args:
        data: Raw bytes of the uploaded file, or None when no file was sent
        max_bytes: Maximum accepted upload size

    Returns:
        The validated bytes

    Raises:
        ValidationError: If no file was uploaded, it is empty, or too large
    """
    if data is None:
        raise ValidationError("No file uploaded", message_key="errorNoFile")

    if len(data) == 0:
        raise ValidationError(
            "Uploaded file is empty",
            details={"size": 0},
            message_key="errorNoFile",
        )

    if len(data) > max_bytes:
        raise ValidationError(
            f"Uploaded file too large. Maximum size: {max_bytes} bytes",
            details={"size": len(data), "max_bytes": max_bytes},
            message_key="errorFileTooLarge",
        )

    return data


def validate_pokemon_name(name: Optional[str], max_length: int = 64) -> str:
    """
    Validate and normalize a Pokemon name used for a catalog search.

    Args:
        name: Name as typed by the user or returned by the vision model
        max_length: Maximum allowed length

    Returns:
        The name with surrounding whitespace removed

    Raises:
        ValidationError: If the name is missing, blank or too long
    """
    if not isinstance(name, str) or not name.strip():
        raise ValidationError(
            "Pokemon name is required",
            details={"name": name},
            message_key="errorNameRequired",
        )

    normalized = " ".join(name.split())
    if len(normalized) > max_length:
        raise ValidationError(
            f"Pokemon name length {len(normalized)} is above maximum {max_length}",
            details={"length": len(normalized), "max_length": max_length},
            message_key="errorInvalidInput",
        )

    return normalized


def validate_card_number(number: Optional[str], max_length: int = 16) -> Optional[str]:
    """Normalize an optional card number; blank input becomes None."""
    if number is None:
        return None
    if not isinstance(number, str):
        number = str(number)

    normalized = number.strip()
    if not normalized:
        return None

    if len(normalized) > max_length:
        raise ValidationError(
            f"Card number length {len(normalized)} is above maximum {max_length}",
            details={"number": normalized, "max_length": max_length},
            message_key="errorInvalidInput",
        )
    return normalized


def validate_enum_value(
    value: Any,
    allowed_values: List[Any],
    field_name: str = "value"
) -> Any:
    """
    Validate a value is one of the allowed enum values.

    Raises:
        ValidationError: If value is not in the allowed list
    """
    if value not in allowed_values:
        raise ValidationError(
            f"{field_name} '{value}' is not allowed. Allowed values: {allowed_values}",
            details={
                "field_name": field_name,
                "value": value,
                "allowed_values": allowed_values
            }
        )

    return value


def validate_locale(locale: Optional[str], default: str) -> str:
    """Return a supported UI locale; None or a blank value selects ``default``."""
    if locale is None or not locale.strip():
        return default
    return validate_enum_value(locale.strip().lower(), list(SUPPORTED_LOCALES), "lang")
