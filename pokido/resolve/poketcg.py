"""Pokemon TCG API lookup used as a secondary source for card images."""

import asyncio
import aiohttp
from rapidfuzz import fuzz
from typing import Optional

from pokido.core.constants import POKEMON_TCG_BASE, IMAGE_FALLBACK_PAGE_SIZE
from pokido.utils.config import settings
from pokido.utils.log import get_logger

logger = get_logger(__name__)


async def _fetch_json(url: str, params: dict | None, headers: dict | None, timeout_s: float) -> dict:
    timeout = aiohttp.ClientTimeout(total=timeout_s)
    async with aiohttp.ClientSession(headers=headers, timeout=timeout) as s:
        async with s.get(url, params=params) as r:
            r.raise_for_status()
            return await r.json()


def _pick_image(candidates: list, name: str, number: Optional[str]) -> Optional[str]:
    """Large image of the candidate closest to name/number, if any has one."""
    pool = [c for c in candidates if (c.get("images") or {}).get("large")]
    if number:
        pool = [c for c in pool if str(c.get("number", "")).strip() == str(number).strip()] or pool
    if not pool:
        return None
    pool.sort(key=lambda c: fuzz.ratio(name.lower(), str(c.get("name", "")).lower()), reverse=True)
    return pool[0]["images"]["large"]


async def find_image(name: str, number: Optional[str] = None, api_key: Optional[str] = None) -> Optional[str]:
    """
    Look up a large card image by name and number.

    Best-effort: any failure is logged and yields None, so the caller can
    move on to its next image source.
    """
    query = f"name:{name.lower()}"
    if number:
        query += f" number:{number}"
    params = {"q": query, "pageSize": IMAGE_FALLBACK_PAGE_SIZE}
    key = api_key if api_key is not None else settings.POKEMON_TCG_API_KEY
    headers = {"X-Api-Key": key} if key else {}

    try:
        j = await _fetch_json(POKEMON_TCG_BASE, params, headers, settings.IMAGE_FALLBACK_TIMEOUT_S)
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
        logger.info("Image fallback failed", name=name, number=number, error=str(e))
        return None

    image = _pick_image(j.get("data") or [], name, number)
    logger.debug("Image fallback finished", name=name, number=number, found=bool(image))
    return image
