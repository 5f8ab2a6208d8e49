"""Shared dependencies for the API routers."""

from functools import lru_cache
from typing import Optional

from fastapi import Query

from pokido.album.store import AlbumStore, KeyValueAlbumPersistence
from pokido.pipeline import ScanService
from pokido.store.kv import SqliteKeyValueStore
from pokido.utils.config import settings
from pokido.utils.validation import validate_locale


@lru_cache
def get_scan_service() -> ScanService:
    return ScanService()


@lru_cache
def get_album_store() -> AlbumStore:
    return AlbumStore(KeyValueAlbumPersistence(SqliteKeyValueStore()))


def get_locale(lang: Optional[str] = Query(None, description="Message locale: he or en")) -> str:
    return validate_locale(lang, settings.DEFAULT_LANGUAGE)
