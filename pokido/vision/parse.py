"""Extraction of the card identity JSON from free-form model output."""

import json
import re
from typing import Any, Dict, Optional

from pokido.core.types import CandidateIdentity, Language
from pokido.resolve.numbers import parse_card_number
from pokido.utils.error_handler import UnparsableResponse

FENCE_PATTERN = re.compile(r"```[A-Za-z]*[ \t]*\n?(.*?)```", re.DOTALL)

_decoder = json.JSONDecoder()


def _first_object(text: str) -> Optional[Dict[str, Any]]:
    start = text.find("{")
    while start != -1:
        try:
            obj, _ = _decoder.raw_decode(text, start)
        except json.JSONDecodeError:
            obj = None
        if isinstance(obj, dict):
            return obj
        start = text.find("{", start + 1)
    return None


def find_json_object(text: str) -> Optional[Dict[str, Any]]:
    """
    Locate the first JSON object in model output.

    Fenced code blocks are searched first, then the raw text, so prose
    around the object (or around the fence) is ignored.
    """
    if not text:
        return None

    for block in FENCE_PATTERN.findall(text):
        obj = _first_object(block)
        if obj is not None:
            return obj

    return _first_object(text)


def _text_field(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value if value.strip() else None
    return str(value)


def parse_identity(text: str) -> CandidateIdentity:
    """
    Parse the vision model's answer into a CandidateIdentity.

    Raises:
        UnparsableResponse: If no JSON object can be found in ``text``
    """
    obj = find_json_object(text)
    if obj is None:
        raise UnparsableResponse(
            "Could not parse vision response",
            details={"response": (text or "")[:200]},
        )

    card_number = _text_field(obj.get("cardNumber"))
    _, set_size = parse_card_number(card_number)
    return CandidateIdentity(
        name=_text_field(obj.get("pokemonName")),
        card_number=card_number,
        set_size_hint=set_size,
        set_name=_text_field(obj.get("setName")),
        language=Language.parse(obj.get("language")),
    )
