"""Pure album reducers.

Every function takes an ``AlbumState`` and returns new values without
touching its input, so the store can persist the result as a whole.
"""

from dataclasses import dataclass, replace
from typing import List

from pokido.core.constants import UNKNOWN_SET_ID, UNKNOWN_SET_NAME
from pokido.core.types import AlbumEntry, AlbumState, CatalogCard, SetMeta, SetStats


@dataclass
class TotalStats:
    total_cards: int
    total_sets: int


def album_key(card: CatalogCard) -> tuple:
    """(set id, card id) under which ``card`` is stored."""
    set_id = card.set_id or UNKNOWN_SET_ID
    card_id = card.id or f"{set_id}-{card.local_id}"
    return set_id, card_id


def add_card(state: AlbumState, card: CatalogCard, now: str) -> AlbumState:
    """
    Record a scan of ``card`` at ``now``.

    A card already in its set gets its scan count and timestamp updated;
    otherwise it is appended. The set's metadata is refreshed either way.
    """
    set_id, card_id = album_key(card)

    sets = dict(state.sets)
    sets[set_id] = SetMeta(
        id=set_id,
        name=card.set_name or UNKNOWN_SET_NAME,
        total=card.set_size or 0,
        logo=card.set_logo,
    )

    entries = list(state.collection.get(set_id, []))
    for i, entry in enumerate(entries):
        if entry.id == card_id:
            entries[i] = replace(entry, last_scanned_at=now, scan_count=entry.scan_count + 1)
            break
    else:
        entries.append(AlbumEntry(
            id=card_id,
            name=card.name,
            number=card.local_id,
            image=card.image_url,
            rarity=card.rarity,
            types=list(card.types),
            hp=card.hp,
            last_scanned_at=now,
            scan_count=1,
        ))

    collection = dict(state.collection)
    collection[set_id] = entries
    return AlbumState(collection=collection, sets=sets)


def completion(collected: int, total: int) -> int:
    """Whole percentage, rounded half up; 0 for sets of unknown size."""
    if total <= 0:
        return 0
    return int(collected / total * 100 + 0.5)


def sets_with_stats(state: AlbumState) -> List[SetStats]:
    """One entry per set, most collected first."""
    stats = []
    for meta in state.sets.values():
        collected = len(state.collection.get(meta.id, []))
        stats.append(SetStats(
            id=meta.id,
            name=meta.name,
            total=meta.total,
            logo=meta.logo,
            collected=collected,
            percentage=completion(collected, meta.total),
        ))
    # sorted() is stable, so equal counts keep insertion order
    return sorted(stats, key=lambda s: s.collected, reverse=True)


def set_cards(state: AlbumState, set_id: str) -> List[AlbumEntry]:
    return list(state.collection.get(set_id, []))


def total_stats(state: AlbumState) -> TotalStats:
    return TotalStats(
        total_cards=sum(len(entries) for entries in state.collection.values()),
        total_sets=len(state.sets),
    )
