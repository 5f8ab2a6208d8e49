"""
Album endpoints.

The album is one JSON document; every write rewrites it whole.
"""

from dataclasses import asdict
from typing import Annotated, Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from pokido.album.state import album_key
from pokido.album.store import AlbumStore
from pokido.api.deps import get_album_store
from pokido.core.types import CatalogCard

router = APIRouter(prefix="/api/album", tags=["album"])


class AlbumCardRequest(BaseModel):
    """A resolved card as returned in ``_identification``."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    pokemon_name: str = Field(..., min_length=1)
    card_number: str = ""
    set_total: Optional[int] = None
    set_name: Optional[str] = Field(None, alias="set")
    set_id: Optional[str] = Field(None, alias="setId")
    set_logo: Optional[str] = Field(None, alias="setLogo")
    image: Optional[str] = None
    rarity: Optional[str] = None
    types: List[str] = Field(default_factory=list)
    hp: Optional[int] = None

    def to_card(self) -> CatalogCard:
        return CatalogCard(
            id=self.id or "",
            local_id=self.card_number,
            name=self.pokemon_name,
            set_id=self.set_id,
            set_name=self.set_name,
            set_official_size=self.set_total,
            set_logo=self.set_logo,
            rarity=self.rarity,
            hp=self.hp,
            types=self.types,
            image_url=self.image,
        )


@router.get("")
def album_overview(
    store: Annotated[AlbumStore, Depends(get_album_store)],
) -> Dict[str, Any]:
    """Sets with completion stats, most collected first."""
    totals = store.total_stats()
    return {
        "sets": [asdict(s) for s in store.sets_with_stats()],
        "totalCards": totals.total_cards,
        "totalSets": totals.total_sets,
    }


@router.post("", status_code=201)
def add_to_album(
    body: AlbumCardRequest,
    store: Annotated[AlbumStore, Depends(get_album_store)],
) -> Dict[str, Any]:
    """Save a scanned card; rescans bump its scan count."""
    card = body.to_card()
    entry = store.add_card(card)
    set_id, _ = album_key(card)
    return {"setId": set_id, "card": entry.to_dict()}


@router.get("/{set_id}")
def album_set(
    set_id: str,
    store: Annotated[AlbumStore, Depends(get_album_store)],
) -> Dict[str, Any]:
    return {"setId": set_id, "cards": [e.to_dict() for e in store.set_cards(set_id)]}
