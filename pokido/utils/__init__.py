"""Utilities package."""

from .config import ensure_album_dir, resolve_album_path, settings
from .log import LoggerMixin, configure_logging, get_logger

__all__ = [
    "settings",
    "ensure_album_dir",
    "resolve_album_path",
    "get_logger",
    "LoggerMixin",
    "configure_logging",
]
