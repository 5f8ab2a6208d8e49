"""Vision package: card photo to candidate identity."""

from .gemini import GeminiVision, vision_extractor
from .image import prepare_for_vision
from .parse import find_json_object, parse_identity

__all__ = [
    "GeminiVision",
    "vision_extractor",
    "prepare_for_vision",
    "find_json_object",
    "parse_identity",
]
