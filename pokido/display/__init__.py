"""Display package: localization, value estimate and tips."""

from .locale import rarity_label, t, type_label
from .pricing import estimate_value
from .transform import build_tips, present, to_identification, to_record

__all__ = [
    "build_tips",
    "estimate_value",
    "present",
    "rarity_label",
    "t",
    "to_identification",
    "to_record",
    "type_label",
]
