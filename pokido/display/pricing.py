from typing import Any, Dict, Optional

from pokido.utils.config import settings


def _as_float(value: Any) -> Optional[float]:
    try:
        return float(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def cardmarket_trend_eur(prices: Dict[str, Any]) -> Optional[float]:
    ckm = prices.get("cardmarket") or {}
    return _as_float(ckm.get("trend"))


def tcgplayer_market_usd(prices: Dict[str, Any]) -> Optional[float]:
    """Market price; TCGdex nests it per variant, older payloads carry it flat."""
    tcg = prices.get("tcgplayer") or {}
    flat = _as_float(tcg.get("marketPrice"))
    if flat is not None:
        return flat
    for key in ("normal", "holofoil", "reverse-holofoil", "reverseHolofoil"):
        variant = tcg.get(key) or {}
        market = _as_float(variant.get("marketPrice"))
        if market is not None:
            return market
    return None


def estimate_value(
    prices: Optional[Dict[str, Any]],
    eur_rate: Optional[float] = None,
    usd_rate: Optional[float] = None,
) -> int:
    """Rounded local-currency value; cardmarket trend wins over TCGplayer. 0 when unpriced."""
    if not prices:
        return 0
    eur_rate = eur_rate if eur_rate is not None else settings.EUR_TO_LOCAL_RATE
    usd_rate = usd_rate if usd_rate is not None else settings.USD_TO_LOCAL_RATE

    trend = cardmarket_trend_eur(prices)
    if trend:
        return int(trend * eur_rate + 0.5)
    market = tcgplayer_market_usd(prices)
    if market:
        return int(market * usd_rate + 0.5)
    return 0
