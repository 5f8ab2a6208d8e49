"""Album state store with an injected persistence port."""

import json
from datetime import datetime, timezone
from typing import Callable, List, Optional, Protocol

from pokido.core.constants import COLLECTION_KEY
from pokido.core.types import AlbumEntry, AlbumState, CatalogCard, SetStats
from pokido.store.kv import KeyValueStore
from pokido.utils.log import LoggerMixin

from . import state as reducers


class AlbumPersistence(Protocol):
    def load(self) -> AlbumState: ...

    def save(self, state: AlbumState) -> None: ...


def serialize(state: AlbumState) -> str:
    return json.dumps(state.to_dict(), ensure_ascii=False)


def deserialize(raw: str) -> AlbumState:
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("album document is not an object")
    return AlbumState.from_dict(data)


class KeyValueAlbumPersistence(LoggerMixin):
    """Stores the whole album as one JSON document under a single key."""

    def __init__(self, store: KeyValueStore, key: str = COLLECTION_KEY):
        self.store = store
        self.key = key

    def load(self) -> AlbumState:
        raw = self.store.get(self.key)
        if not raw:
            return AlbumState()
        try:
            return deserialize(raw)
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            self.logger.error("Failed to load collection", key=self.key, error=str(e))
            return AlbumState()

    def save(self, state: AlbumState) -> None:
        self.store.set(self.key, serialize(state))


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class AlbumStore(LoggerMixin):
    """
    In-memory album loaded once from its persistence port.

    Each mutation rewrites the full document. Two stores over the same
    backend do not coordinate; the last save wins.
    """

    def __init__(self, persistence: AlbumPersistence, clock: Optional[Callable[[], str]] = None):
        self.persistence = persistence
        self.clock = clock or utc_now
        self.state = persistence.load()

    def add_card(self, card: CatalogCard) -> AlbumEntry:
        """Record a scan and persist; returns the stored entry."""
        self.state = reducers.add_card(self.state, card, self.clock())
        self.persistence.save(self.state)

        set_id, card_id = reducers.album_key(card)
        entry = next(e for e in self.state.collection[set_id] if e.id == card_id)
        self.logger.info(
            "Card added to album",
            set_id=set_id,
            card_id=card_id,
            scan_count=entry.scan_count,
        )
        return entry

    def sets_with_stats(self) -> List[SetStats]:
        return reducers.sets_with_stats(self.state)

    def set_cards(self, set_id: str) -> List[AlbumEntry]:
        return reducers.set_cards(self.state, set_id)

    def total_stats(self) -> reducers.TotalStats:
        return reducers.total_stats(self.state)
