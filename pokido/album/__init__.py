"""Album package: scanned cards grouped by set."""

from .state import add_card, album_key, completion, set_cards, sets_with_stats, total_stats
from .store import AlbumStore, KeyValueAlbumPersistence, deserialize, serialize

__all__ = [
    "AlbumStore",
    "KeyValueAlbumPersistence",
    "add_card",
    "album_key",
    "completion",
    "deserialize",
    "serialize",
    "set_cards",
    "sets_with_stats",
    "total_stats",
]
