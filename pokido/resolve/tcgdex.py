"""TCGdex catalog integration for card resolution."""

import asyncio
import re
import aiohttp
from typing import Any, Awaitable, Callable, Dict, List, Optional

from pokido.core.constants import HIGH_RES_SUFFIX, TCGDEX_ASSETS, TCGDEX_BASE
from pokido.core.types import CatalogCard, Language
from pokido.resolve.numbers import local_number, parse_card_number
from pokido.resolve.poketcg import find_image
from pokido.utils.config import settings
from pokido.utils.error_handler import NotFound, UpstreamUnavailable
from pokido.utils.log import LoggerMixin

ImageLookup = Callable[[str, Optional[str]], Awaitable[Optional[str]]]


def _as_int(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def synthesize_image_url(set_id: str, local_id: str, lang: str) -> str:
    """Asset URL following TCGdex's {lang}/{series}/{set}/{localId} layout."""
    compact_set = set_id.replace(".", "")
    series = re.sub(r"\d+$", "", compact_set)
    return f"{TCGDEX_ASSETS}/{lang}/{series}/{compact_set}/{local_id}{HIGH_RES_SUFFIX}"


def to_catalog_card(card: Dict[str, Any]) -> CatalogCard:
    """Map a TCGdex card record (summary or full detail) to a CatalogCard."""
    card_set = card.get("set") or {}
    counts = card_set.get("cardCount") or {}
    return CatalogCard(
        id=card["id"],
        local_id=str(card.get("localId") or card["id"]),
        name=card.get("name", ""),
        set_id=card_set.get("id"),
        set_name=card_set.get("name"),
        set_official_size=_as_int(counts.get("official")),
        set_total_size=_as_int(counts.get("total")),
        set_logo=card_set.get("logo"),
        rarity=card.get("rarity"),
        hp=_as_int(card.get("hp")),
        types=list(card.get("types") or []),
        attacks=list(card.get("attacks") or []),
        weaknesses=list(card.get("weaknesses") or []),
        resistances=list(card.get("resistances") or []),
        retreat_cost=_as_int(card.get("retreat")),
        illustrator=card.get("illustrator"),
        description=card.get("description") or card.get("flavorText"),
        category=card.get("category"),
        image_url=card.get("image"),
        prices={
            "cardmarket": (card.get("pricing") or {}).get("cardmarket"),
            "tcgplayer": (card.get("pricing") or {}).get("tcgplayer"),
        },
    )


class TCGdexResolver(LoggerMixin):
    """Resolves a detected name and card number to a single TCGdex card."""

    def __init__(
        self,
        base_url: str = TCGDEX_BASE,
        timeout_s: Optional[float] = None,
        tolerance: Optional[int] = None,
        image_lookup: Optional[ImageLookup] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s if timeout_s is not None else settings.CATALOG_TIMEOUT_S
        self.tolerance = tolerance if tolerance is not None else settings.NEAR_NUMBER_TOLERANCE
        self.image_lookup = image_lookup or find_image

    async def _get_json(self, url: str, params: Optional[dict] = None) -> Any:
        """GET a JSON document with this resolver's timeout; no retries."""
        timeout = aiohttp.ClientTimeout(total=self.timeout_s)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as s:
                async with s.get(url, params=params) as r:
                    if r.status >= 400:
                        raise UpstreamUnavailable(
                            f"TCGdex returned HTTP {r.status}",
                            details={"url": url, "status": r.status},
                        )
                    return await r.json()
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise UpstreamUnavailable(
                f"TCGdex request failed: {e or type(e).__name__}",
                details={"url": url},
            ) from e

    async def search(self, name: str, lang: str = "en") -> List[Dict[str, Any]]:
        """Search the catalog by case-folded name; returns summary records."""
        results = await self._get_json(
            f"{self.base_url}/{lang}/cards", {"name": name.casefold()}
        )
        if not isinstance(results, list):
            return []
        return [r for r in results if isinstance(r, dict) and r.get("id")]

    async def get_detail(self, card_id: str, lang: str = "en") -> Dict[str, Any]:
        """Fetch the full record of one card."""
        url = f"{self.base_url}/{lang}/cards/{card_id}"
        card = await self._get_json(url)
        if not isinstance(card, dict) or not card.get("id"):
            raise UpstreamUnavailable("TCGdex returned a malformed card", details={"url": url})
        return card

    def _nearest(self, results: List[Dict[str, Any]], target: int) -> Optional[Dict[str, Any]]:
        """Closest numbered result within the tolerance band; ties keep search order."""
        near = []
        for card in results:
            number = local_number(card.get("localId"))
            if number is not None and abs(number - target) <= self.tolerance:
                near.append((abs(number - target), card))
        if not near:
            return None
        return min(near, key=lambda pair: pair[0])[1]

    async def select(
        self,
        results: List[Dict[str, Any]],
        card_number: Optional[str],
        lang: str,
        details: Dict[str, Dict[str, Any]],
    ) -> Dict[str, Any]:
        """
        Pick one search result for a printed card number.

        Full records fetched while disambiguating are stored in ``details``
        by card id, so the caller does not fetch them twice.
        """
        if not card_number:
            return results[0]

        target, set_size = parse_card_number(card_number)
        if target is None:
            return results[0]

        matches = [c for c in results if local_number(c.get("localId")) == target]
        self.logger.debug(
            "Local number candidates",
            target=target,
            set_size=set_size,
            matches=len(matches),
        )

        if not matches:
            return self._nearest(results, target) or results[0]

        if len(matches) == 1 or set_size is None:
            return matches[0]

        # Same local number in several sets: the printed total decides.
        for card in matches:
            full = await self.get_detail(card["id"], lang)
            details[card["id"]] = full
            counts = (full.get("set") or {}).get("cardCount") or {}
            if set_size in (_as_int(counts.get("official")), _as_int(counts.get("total"))):
                self.logger.debug("Set size match", card_id=card["id"], set_size=set_size)
                return full

        return matches[0]

    async def _normalize_image(self, card: Dict[str, Any], lang: str) -> Optional[str]:
        image = card.get("image")
        if image:
            return image if image.endswith(HIGH_RES_SUFFIX) else f"{image}{HIGH_RES_SUFFIX}"

        image = await self.image_lookup(card.get("name", ""), card.get("localId"))
        if image:
            return image

        set_id = (card.get("set") or {}).get("id")
        local_id = card.get("localId")
        if set_id and local_id:
            return synthesize_image_url(set_id, str(local_id), lang)
        return None

    async def resolve(
        self,
        name: str,
        card_number: Optional[str] = None,
        language: Language = Language.ENGLISH,
    ) -> CatalogCard:
        """
        Resolve a name and optional "local/total" number to one catalog card.

        Raises:
            NotFound: When the search is empty or any catalog call fails
        """
        lang = language.catalog_code
        context = self.log_start("resolve", name=name, card_number=card_number, lang=lang)

        try:
            results = await self.search(name, lang)
            if not results:
                raise NotFound(f"No cards found for {name}", details={"name": name})

            details: Dict[str, Dict[str, Any]] = {}
            selected = await self.select(results, card_number, lang, details)
            full = details.get(selected["id"])
            if full is None:
                full = await self.get_detail(selected["id"], lang)
        except UpstreamUnavailable as e:
            self.log_error(context, e)
            raise NotFound(
                f"Card lookup failed for {name}",
                details={"name": name, "card_number": card_number, "cause": e.message},
            ) from e
        except NotFound as e:
            self.log_error(context, e)
            raise

        card = to_catalog_card(full)
        card.image_url = await self._normalize_image(full, lang)
        self.log_success(context, card_id=card.id, set_id=card.set_id)
        return card


# Global singleton
catalog_resolver = TCGdexResolver()
