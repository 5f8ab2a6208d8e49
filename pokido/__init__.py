"""Pokido - identify Pokemon cards from a photo and keep an album of them."""

__version__ = "1.0.0"
__author__ = "Pokido Team"
__description__ = "Pokemon card scanner backed by Gemini vision and the TCGdex catalog"

from .album.store import AlbumStore, KeyValueAlbumPersistence
from .core.types import AlbumState, CandidateIdentity, CatalogCard, Language, ResolvedCard
from .pipeline import ScanService
from .resolve.tcgdex import TCGdexResolver, catalog_resolver
from .utils.config import settings
from .utils.log import configure_logging, get_logger
from .vision.gemini import GeminiVision, vision_extractor

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__description__",
    # Core components
    "configure_logging",
    "get_logger",
    "settings",
    "AlbumState",
    "AlbumStore",
    "KeyValueAlbumPersistence",
    "CandidateIdentity",
    "CatalogCard",
    "Language",
    "ResolvedCard",
    "ScanService",
    "TCGdexResolver",
    "catalog_resolver",
    "GeminiVision",
    "vision_extractor",
]
