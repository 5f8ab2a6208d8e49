from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Any


class Language(str, Enum):
    ENGLISH = "english"
    JAPANESE = "japanese"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Any) -> "Language":
        """Map a free-form language label; absent values mean English."""
        if value is None:
            return cls.ENGLISH
        label = str(value).strip().lower()
        if not label or label in ("english", "en"):
            return cls.ENGLISH
        if label in ("japanese", "ja", "jp"):
            return cls.JAPANESE
        return cls.OTHER

    @property
    def catalog_code(self) -> str:
        """TCGdex catalog language; only Japanese has its own catalog."""
        return "ja" if self is Language.JAPANESE else "en"


@dataclass
class CandidateIdentity:
    name: Optional[str]
    card_number: Optional[str] = None
    set_size_hint: Optional[int] = None
    set_name: Optional[str] = None
    language: Language = Language.ENGLISH

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pokemonName": self.name,
            "cardNumber": self.card_number,
            "setName": self.set_name,
            "language": self.language.value,
        }


@dataclass
class CatalogCard:
    id: str
    local_id: str
    name: str
    set_id: Optional[str] = None
    set_name: Optional[str] = None
    set_official_size: Optional[int] = None
    set_total_size: Optional[int] = None
    set_logo: Optional[str] = None
    rarity: Optional[str] = None
    hp: Optional[int] = None
    types: List[str] = field(default_factory=list)
    attacks: List[Dict[str, Any]] = field(default_factory=list)
    weaknesses: List[Dict[str, Any]] = field(default_factory=list)
    resistances: List[Dict[str, Any]] = field(default_factory=list)
    retreat_cost: Optional[int] = None
    illustrator: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    image_url: Optional[str] = None
    prices: Dict[str, Any] = field(default_factory=dict)

    @property
    def set_size(self) -> Optional[int]:
        """Printed set size, preferring the official count."""
        return self.set_official_size or self.set_total_size


@dataclass
class ResolvedCard:
    card: CatalogCard
    detected: CandidateIdentity
    locale: str
    type_names: List[str]
    type_colors: List[str]
    rarity_label: str
    stars: str
    estimated_value: int
    tips: List[str]
    description: str


@dataclass
class AlbumEntry:
    id: str
    name: str
    number: str
    image: Optional[str]
    rarity: Optional[str]
    types: List[str]
    hp: Optional[int]
    last_scanned_at: str
    scan_count: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "number": self.number,
            "image": self.image,
            "rarity": self.rarity,
            "types": list(self.types),
            "hp": self.hp,
            "scannedAt": self.last_scanned_at,
            "scanCount": self.scan_count,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AlbumEntry":
        return cls(
            id=data["id"],
            name=data.get("name") or "",
            number=data.get("number") or "",
            image=data.get("image"),
            rarity=data.get("rarity"),
            types=list(data.get("types") or []),
            hp=data.get("hp"),
            last_scanned_at=data.get("scannedAt") or "",
            scan_count=data.get("scanCount") or 0,
        )


@dataclass
class SetMeta:
    id: str
    name: str
    total: int = 0
    logo: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "total": self.total, "logo": self.logo}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SetMeta":
        return cls(
            id=data["id"],
            name=data.get("name") or "",
            total=data.get("total") or 0,
            logo=data.get("logo"),
        )


@dataclass
class SetStats:
    id: str
    name: str
    total: int
    logo: Optional[str]
    collected: int
    percentage: int


@dataclass
class AlbumState:
    collection: Dict[str, List[AlbumEntry]] = field(default_factory=dict)
    sets: Dict[str, SetMeta] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "collection": {
                set_id: [entry.to_dict() for entry in entries]
                for set_id, entries in self.collection.items()
            },
            "sets": {set_id: meta.to_dict() for set_id, meta in self.sets.items()},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AlbumState":
        collection = data.get("collection") or {}
        sets = data.get("sets") or {}
        return cls(
            collection={
                set_id: [AlbumEntry.from_dict(entry) for entry in entries]
                for set_id, entries in collection.items()
            },
            sets={set_id: SetMeta.from_dict(meta) for set_id, meta in sets.items()},
        )
