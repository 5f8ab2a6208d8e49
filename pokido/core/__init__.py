"""Core types and constants."""

from .types import (
    AlbumEntry,
    AlbumState,
    CandidateIdentity,
    CatalogCard,
    Language,
    ResolvedCard,
    SetMeta,
    SetStats,
)

__all__ = [
    "AlbumEntry",
    "AlbumState",
    "CandidateIdentity",
    "CatalogCard",
    "Language",
    "ResolvedCard",
    "SetMeta",
    "SetStats",
]
