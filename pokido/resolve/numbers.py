"""Regex helpers for printed card numbers."""

import re
from typing import Optional, Tuple


# Pattern: local/total with optional spaces around the slash, e.g. "099 / 214".
# Leading zeros are allowed on both sides; int() strips them.
CARD_NUMBER_PATTERN = re.compile(r'(\d+)\s*/\s*(\d+)')

# First run of digits, for hints without a total ("25", "SV025").
DIGITS_PATTERN = re.compile(r'\d+')


def parse_card_number(text: Optional[str]) -> Tuple[Optional[int], Optional[int]]:
    """
    Parse a printed card number into (local number, set size).

    Args:
        text: Card number as printed on the card or typed by the user

    Returns:
        Tuple of (local, total); either part is None when it cannot be read

    Examples:
        >>> parse_card_number("132/214")
        (132, 214)
        >>> parse_card_number("099/214")
        (99, 214)
        >>> parse_card_number("25")
        (25, None)
        >>> parse_card_number("n/a")
        (None, None)
    """
    if not text:
        return None, None

    match = CARD_NUMBER_PATTERN.search(text)
    if match:
        return int(match.group(1)), int(match.group(2))

    digits = DIGITS_PATTERN.search(text)
    if digits:
        return int(digits.group(0)), None

    return None, None


def local_number(local_id: Optional[str]) -> Optional[int]:
    """
    Integer value of a catalog local id.

    Only purely numeric ids have a number ("025" -> 25); ids such as "TG05"
    or "SV001" belong to sub-sets and never match a printed number.
    """
    if local_id is None:
        return None
    text = str(local_id).strip()
    if not text.isdigit():
        return None
    return int(text)
