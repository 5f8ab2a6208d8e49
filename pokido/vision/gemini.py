"""Gemini vision adapter: card photo in, candidate identity out."""

import asyncio
import base64
import aiohttp
from typing import Any, Dict, Optional

from pokido.core.constants import (
    GEMINI_BASE,
    VISION_MAX_OUTPUT_TOKENS,
    VISION_PROMPT,
    VISION_TEMPERATURE,
)
from pokido.core.types import CandidateIdentity
from pokido.utils.config import settings
from pokido.utils.error_handler import (
    ConfigurationError,
    UnparsableResponse,
    UpstreamUnavailable,
)
from pokido.utils.log import LoggerMixin
from pokido.vision.parse import parse_identity


def build_request(image_bytes: bytes, prompt: str = VISION_PROMPT) -> Dict[str, Any]:
    """generateContent body with the prompt and the image as inline JPEG data."""
    return {
        "contents": [{
            "parts": [
                {"text": prompt},
                {
                    "inline_data": {
                        "mime_type": "image/jpeg",
                        "data": base64.b64encode(image_bytes).decode("ascii"),
                    }
                },
            ]
        }],
        "generationConfig": {
            "temperature": VISION_TEMPERATURE,
            "maxOutputTokens": VISION_MAX_OUTPUT_TOKENS,
        },
    }


def response_text(payload: Any) -> str:
    """
    Text of the first candidate part.

    Raises:
        UnparsableResponse: If the envelope has no candidate text
    """
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        text = None
    if not isinstance(text, str) or not text.strip():
        raise UnparsableResponse("No response text from Gemini", details={"payload_type": type(payload).__name__})
    return text


class GeminiVision(LoggerMixin):
    """Extracts a card identity from a photo with a Gemini model."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout_s: Optional[float] = None,
    ):
        self.api_key = api_key
        self.model = model or settings.GEMINI_MODEL
        self.timeout_s = timeout_s if timeout_s is not None else settings.VISION_TIMEOUT_S

    @property
    def endpoint(self) -> str:
        return f"{GEMINI_BASE}/{self.model}:generateContent"

    def _key(self) -> str:
        key = self.api_key or settings.GEMINI_API_KEY
        if not key:
            raise ConfigurationError("GEMINI_API_KEY not configured")
        return key

    async def _post(self, body: Dict[str, Any]) -> Any:
        timeout = aiohttp.ClientTimeout(total=self.timeout_s)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as s:
                async with s.post(self.endpoint, params={"key": self._key()}, json=body) as r:
                    if r.status >= 400:
                        error = await r.text()
                        raise UpstreamUnavailable(
                            f"Gemini API error: {r.status}",
                            details={"status": r.status, "body": error[:200]},
                        )
                    return await r.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise UpstreamUnavailable(f"Gemini request failed: {e or type(e).__name__}") from e
        except ValueError as e:
            raise UnparsableResponse(f"Gemini returned invalid JSON: {e}") from e

    async def extract(self, image_bytes: bytes) -> CandidateIdentity:
        """
        Send an image to Gemini and parse the identity it reports.

        Raises:
            ConfigurationError: If no API key is configured
            UpstreamUnavailable: If Gemini is unreachable or answers non-2xx
            UnparsableResponse: If the answer holds no JSON object
        """
        self._key()
        context = self.log_start("vision_extract", model=self.model, image_bytes=len(image_bytes))
        try:
            payload = await self._post(build_request(image_bytes))
            identity = parse_identity(response_text(payload))
        except (UpstreamUnavailable, UnparsableResponse) as e:
            self.log_error(context, e)
            raise

        self.log_success(
            context,
            pokemon_name=identity.name,
            card_number=identity.card_number,
            language=identity.language.value,
        )
        return identity


# Global singleton
vision_extractor = GeminiVision()
