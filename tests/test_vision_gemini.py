"""Tests for the Gemini vision adapter."""

import asyncio
import base64
from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest

from pokido.core.constants import VISION_MAX_OUTPUT_TOKENS, VISION_PROMPT, VISION_TEMPERATURE
from pokido.core.types import Language
from pokido.utils.config import settings
from pokido.utils.error_handler import ConfigurationError, UnparsableResponse, UpstreamUnavailable
from pokido.vision.gemini import GeminiVision, build_request, response_text


def _envelope(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def _mock_session(status=200, payload=None, body="", json_error=None):
    """ClientSession double whose post() yields a single response."""
    mock_response = MagicMock()
    mock_response.status = status
    mock_response.text = AsyncMock(return_value=body)
    if json_error is not None:
        mock_response.json = AsyncMock(side_effect=json_error)
    else:
        mock_response.json = AsyncMock(return_value=payload)

    mock_post = MagicMock()
    mock_post.__aenter__ = AsyncMock(return_value=mock_response)
    mock_post.__aexit__ = AsyncMock(return_value=None)

    mock_session = MagicMock()
    mock_session.__aenter__ = AsyncMock(return_value=mock_session)
    mock_session.__aexit__ = AsyncMock(return_value=None)
    mock_session.post.return_value = mock_post
    return mock_session


class TestBuildRequest:
    """Test the generateContent request body."""

    def test_body_shape(self):
        body = build_request(b"\xff\xd8jpeg")
        parts = body["contents"][0]["parts"]

        assert parts[0]["text"] == VISION_PROMPT
        assert parts[1]["inline_data"]["mime_type"] == "image/jpeg"
        assert base64.b64decode(parts[1]["inline_data"]["data"]) == b"\xff\xd8jpeg"
        assert body["generationConfig"] == {
            "temperature": VISION_TEMPERATURE,
            "maxOutputTokens": VISION_MAX_OUTPUT_TOKENS,
        }

    def test_generation_settings(self):
        assert VISION_TEMPERATURE == 0.1
        assert VISION_MAX_OUTPUT_TOKENS == 256


class TestResponseText:
    """Test unwrapping of the Gemini response envelope."""

    def test_first_candidate_text(self):
        assert response_text(_envelope('{"pokemonName": "Mew"}')) == '{"pokemonName": "Mew"}'

    @pytest.mark.parametrize("payload", [
        {},
        {"candidates": []},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{"text": "   "}]}}]},
        None,
        "not a dict",
    ])
    def test_missing_text(self, payload):
        with pytest.raises(UnparsableResponse):
            response_text(payload)


class TestGeminiVision:
    """Test GeminiVision.extract against a mocked HTTP session."""

    def test_endpoint_uses_model(self):
        vision = GeminiVision(api_key="k", model="gemini-test")
        assert vision.endpoint.endswith("/models/gemini-test:generateContent")

    def test_defaults_from_settings(self):
        vision = GeminiVision(api_key="k")
        assert vision.model == settings.GEMINI_MODEL
        assert vision.timeout_s == settings.VISION_TIMEOUT_S

    @pytest.mark.asyncio
    async def test_missing_key_raises_configuration_error(self):
        vision = GeminiVision()
        with patch.object(settings, "GEMINI_API_KEY", None):
            with patch("pokido.vision.gemini.aiohttp.ClientSession") as session_cls:
                with pytest.raises(ConfigurationError):
                    await vision.extract(b"image")

                session_cls.assert_not_called()

    @pytest.mark.asyncio
    async def test_extract_success(self):
        text = '```json\n{"pokemonName": "Pikachu", "cardNumber": "25/102", "setName": "Base", "language": "english"}\n```'
        session = _mock_session(payload=_envelope(text))
        vision = GeminiVision(api_key="secret", model="gemini-2.0-flash")

        with patch("pokido.vision.gemini.aiohttp.ClientSession", return_value=session):
            identity = await vision.extract(b"image")

        assert identity.name == "Pikachu"
        assert identity.card_number == "25/102"
        assert identity.set_size_hint == 102
        assert identity.language is Language.ENGLISH

        args, kwargs = session.post.call_args
        assert args[0] == vision.endpoint
        assert kwargs["params"] == {"key": "secret"}
        assert kwargs["json"]["contents"][0]["parts"][0]["text"] == VISION_PROMPT

    @pytest.mark.asyncio
    async def test_non_2xx_is_upstream_unavailable(self):
        session = _mock_session(status=503, body="overloaded")
        vision = GeminiVision(api_key="secret")

        with patch("pokido.vision.gemini.aiohttp.ClientSession", return_value=session):
            with pytest.raises(UpstreamUnavailable) as exc_info:
                await vision.extract(b"image")

        assert exc_info.value.details["status"] == 503

    @pytest.mark.asyncio
    async def test_timeout_is_upstream_unavailable(self):
        session = MagicMock()
        session.__aenter__ = AsyncMock(side_effect=asyncio.TimeoutError())
        session.__aexit__ = AsyncMock(return_value=None)
        vision = GeminiVision(api_key="secret")

        with patch("pokido.vision.gemini.aiohttp.ClientSession", return_value=session):
            with pytest.raises(UpstreamUnavailable):
                await vision.extract(b"image")

    @pytest.mark.asyncio
    async def test_connection_error_is_upstream_unavailable(self):
        session = MagicMock()
        session.__aenter__ = AsyncMock(side_effect=aiohttp.ClientConnectionError("refused"))
        session.__aexit__ = AsyncMock(return_value=None)
        vision = GeminiVision(api_key="secret")

        with patch("pokido.vision.gemini.aiohttp.ClientSession", return_value=session):
            with pytest.raises(UpstreamUnavailable):
                await vision.extract(b"image")

    @pytest.mark.asyncio
    async def test_invalid_json_body_is_unparsable(self):
        session = _mock_session(json_error=ValueError("Expecting value"))
        vision = GeminiVision(api_key="secret")

        with patch("pokido.vision.gemini.aiohttp.ClientSession", return_value=session):
            with pytest.raises(UnparsableResponse):
                await vision.extract(b"image")

    @pytest.mark.asyncio
    async def test_refusal_text_is_unparsable(self):
        session = _mock_session(payload=_envelope("I can't identify this card."))
        vision = GeminiVision(api_key="secret")

        with patch("pokido.vision.gemini.aiohttp.ClientSession", return_value=session):
            with pytest.raises(UnparsableResponse):
                await vision.extract(b"image")

    @pytest.mark.asyncio
    async def test_missing_name_is_returned_not_raised(self):
        """Test that deciding what to do with a nameless answer is left to the caller."""
        session = _mock_session(payload=_envelope('{"pokemonName": null, "cardNumber": "12/100"}'))
        vision = GeminiVision(api_key="secret")

        with patch("pokido.vision.gemini.aiohttp.ClientSession", return_value=session):
            identity = await vision.extract(b"image")

        assert identity.name is None
        assert identity.card_number == "12/100"
