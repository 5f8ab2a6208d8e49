"""Resolve package for catalog card identification."""

from .numbers import local_number, parse_card_number
from .poketcg import find_image
from .tcgdex import TCGdexResolver, catalog_resolver

__all__ = [
    "TCGdexResolver",
    "catalog_resolver",
    "find_image",
    "local_number",
    "parse_card_number",
]
