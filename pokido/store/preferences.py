"""Persisted UI language preference."""

from ..core.constants import LANGUAGE_KEY, SUPPORTED_LOCALES
from ..utils.config import settings
from .kv import KeyValueStore


class LanguagePreference:
    def __init__(self, store: KeyValueStore, default: str = None):
        self.store = store
        self.default = default or settings.DEFAULT_LANGUAGE

    def get(self) -> str:
        saved = self.store.get(LANGUAGE_KEY)
        if saved in SUPPORTED_LOCALES:
            return saved
        return self.default

    def set(self, locale: str) -> bool:
        """Save ``locale``; unsupported values are ignored and return False."""
        if locale not in SUPPORTED_LOCALES:
            return False
        self.store.set(LANGUAGE_KEY, locale)
        return True

    def toggle(self) -> str:
        new = "en" if self.get() == "he" else "he"
        self.set(new)
        return new
