"""Request-scoped scan orchestration: image or typed query to a display record."""

import asyncio
from typing import Optional

from pokido.core.types import CandidateIdentity, Language, ResolvedCard
from pokido.display.transform import present
from pokido.resolve.numbers import parse_card_number
from pokido.resolve.tcgdex import TCGdexResolver, catalog_resolver
from pokido.utils.error_handler import ValidationError
from pokido.utils.log import LoggerMixin
from pokido.utils.validation import validate_card_number, validate_pokemon_name, validate_upload
from pokido.vision.gemini import GeminiVision, vision_extractor
from pokido.vision.image import prepare_for_vision


class ScanService(LoggerMixin):
    """Chains the vision adapter, the catalog resolver and the display transform."""

    def __init__(
        self,
        vision: Optional[GeminiVision] = None,
        resolver: Optional[TCGdexResolver] = None,
    ):
        self.vision = vision or vision_extractor
        self.resolver = resolver or catalog_resolver

    async def identify(self, image_bytes: Optional[bytes]) -> CandidateIdentity:
        """Validate and normalize an upload, then ask the vision model who is on it."""
        data = validate_upload(image_bytes)
        loop = asyncio.get_running_loop()
        data = await loop.run_in_executor(None, prepare_for_vision, data)
        identity = await self.vision.extract(data)
        if not identity.name:
            raise ValidationError(
                "No Pokemon name detected in the image",
                details={"detected": identity.to_dict()},
                message_key="errorNoPokemon",
            )
        return identity

    async def lookup(self, identity: CandidateIdentity, locale: str = "he") -> ResolvedCard:
        card = await self.resolver.resolve(identity.name, identity.card_number, identity.language)
        return present(card, identity, locale)

    async def analyze(self, image_bytes: Optional[bytes], locale: str = "he") -> ResolvedCard:
        """Photo to resolved card."""
        context = self.log_start("analyze", locale=locale)
        identity = await self.identify(image_bytes)
        resolved = await self.lookup(identity, locale)
        self.log_success(context, card_id=resolved.card.id, pokemon_name=identity.name)
        return resolved

    async def search(
        self,
        name: Optional[str],
        number: Optional[str] = None,
        locale: str = "he",
        language: Language = Language.ENGLISH,
    ) -> ResolvedCard:
        """Manual lookup without an image."""
        card_number = validate_card_number(number)
        _, set_size = parse_card_number(card_number)
        identity = CandidateIdentity(
            name=validate_pokemon_name(name),
            card_number=card_number,
            set_size_hint=set_size,
            language=language,
        )
        context = self.log_start("search", name=identity.name, card_number=card_number)
        resolved = await self.lookup(identity, locale)
        self.log_success(context, card_id=resolved.card.id)
        return resolved
