"""Turns a catalog card into its localized presentation."""

from typing import Any, Dict, List, Optional

from pokido.core.constants import HIGH_HP_THRESHOLD, HIGH_VALUE_THRESHOLD, MIN_DISPLAY_VALUE
from pokido.core.types import CandidateIdentity, CatalogCard, ResolvedCard
from pokido.display.locale import UNKNOWN_TYPE_COLOR, rarity_label, t, type_label
from pokido.display.pricing import estimate_value


def stars_for(rarity: Optional[str]) -> str:
    lowered = (rarity or "").lower()
    if "ultra" in lowered:
        return "⭐⭐⭐⭐⭐"
    if "rare" in lowered:
        return "⭐⭐⭐⭐"
    return "⭐⭐"


def build_tips(rarity: Optional[str], hp: Optional[int], value: int, locale: str = "he") -> List[str]:
    """Advisory strings keyed off rarity, value and HP."""
    lowered = (rarity or "").lower()
    keys = []
    if "ultra" in lowered or "secret" in lowered:
        keys += ["tipVeryRare", "tipFutureValue"]
    elif "holo" in lowered or "rare" in lowered:
        keys += ["tipHolo", "tipCollectible"]
    if value > HIGH_VALUE_THRESHOLD:
        keys.append("tipExpensive")
    if hp is not None and hp > HIGH_HP_THRESHOLD:
        keys.append("tipHighHp")
    if not keys:
        keys = ["tipNiceCard", "tipKeepSafe"]
    return [t(key, locale) for key in keys]


def present(card: CatalogCard, detected: CandidateIdentity, locale: str = "he") -> ResolvedCard:
    """Merge a catalog card with the presentation for ``locale``."""
    labels = [type_label(card_type, locale) for card_type in card.types]
    value = estimate_value(card.prices)

    return ResolvedCard(
        card=card,
        detected=detected,
        locale=locale,
        type_names=[label for label, _ in labels],
        type_colors=[color or UNKNOWN_TYPE_COLOR for _, color in labels],
        rarity_label=rarity_label(card.rarity, locale),
        stars=stars_for(card.rarity),
        estimated_value=value or MIN_DISPLAY_VALUE,
        tips=build_tips(card.rarity, card.hp, value, locale),
        description=card.description or t("cardDescription", locale, name=card.name),
    )


def to_identification(resolved: ResolvedCard) -> Dict[str, Any]:
    """The ``_identification`` block of an API record."""
    card = resolved.card
    return {
        "id": card.id,
        "pokemon_name": card.name,
        "card_number": card.local_id,
        "set_total": card.set_size,
        "set": card.set_name or "Unknown",
        "setId": card.set_id,
        "setLogo": card.set_logo,
        "rarity": card.rarity or "Common",
        "rarityLabel": resolved.rarity_label,
        "stars": resolved.stars,
        "description": resolved.description,
        "image": card.image_url,
        "prices": card.prices,
        "estimatedValue": resolved.estimated_value,
        "tips": resolved.tips,
        "hp": card.hp,
        "types": card.types,
        "typeNames": resolved.type_names,
        "typeColors": resolved.type_colors,
        "attacks": card.attacks,
        "weaknesses": card.weaknesses,
        "resistances": card.resistances,
        "retreat": card.retreat_cost,
        "illustrator": card.illustrator,
        "category": card.category,
        "isJapanese": resolved.detected.language.catalog_code == "ja",
        "geminiDetected": resolved.detected.to_dict(),
    }


def to_record(resolved: ResolvedCard) -> Dict[str, Any]:
    return {"records": [{"_identification": to_identification(resolved)}]}
