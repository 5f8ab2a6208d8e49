"""Pytest configuration and shared fixtures for Pokido tests."""

import pytest

from pokido.core.types import CandidateIdentity, CatalogCard, Language
from pokido.store.kv import MemoryKeyValueStore


def tcgdex_summary(card_id, local_id, name="Pikachu", image=None):
    """Search result record as returned by TCGdex /cards?name=."""
    summary = {"id": card_id, "localId": local_id, "name": name}
    if image:
        summary["image"] = image
    return summary


def tcgdex_detail(card_id, local_id, set_id, official, total=None, name="Pikachu", **extra):
    """Full TCGdex card record."""
    detail = {
        "id": card_id,
        "localId": local_id,
        "name": name,
        "image": f"https://assets.tcgdex.net/en/base/{set_id}/{local_id}",
        "rarity": "Common",
        "hp": 60,
        "types": ["Lightning"],
        "set": {
            "id": set_id,
            "name": f"Set {set_id}",
            "cardCount": {"official": official, "total": total or official},
        },
    }
    detail.update(extra)
    return detail


@pytest.fixture
def make_summary():
    return tcgdex_summary


@pytest.fixture
def make_detail():
    return tcgdex_detail


@pytest.fixture
def memory_store():
    """Empty in-memory key/value store."""
    return MemoryKeyValueStore()


@pytest.fixture
def sample_catalog_card():
    """A resolved catalog card for Base Set Charizard."""
    return CatalogCard(
        id="base1-4",
        local_id="4",
        name="Charizard",
        set_id="base1",
        set_name="Base Set",
        set_official_size=102,
        set_total_size=102,
        rarity="Rare Holo",
        hp=120,
        types=["Fire"],
        attacks=[{"name": "Fire Spin", "damage": 100}],
        illustrator="Mitsuhiro Arita",
        image_url="https://assets.tcgdex.net/en/base/base1/4/high.png",
        prices={"cardmarket": {"trend": 250.0}, "tcgplayer": None},
    )


@pytest.fixture
def sample_identity():
    return CandidateIdentity(
        name="Charizard",
        card_number="4/102",
        set_size_hint=102,
        set_name="Base Set",
        language=Language.ENGLISH,
    )


# Configure pytest options
def pytest_configure(config):
    """Configure pytest with custom options."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "slow: marks tests as slow running"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        # Mark integration tests
        if "integration" in item.name.lower() or "api" in item.module.__name__:
            item.add_marker(pytest.mark.integration)

        # Mark unit tests (default)
        if not item.get_closest_marker('integration') and not item.get_closest_marker('slow'):
            item.add_marker(pytest.mark.unit)
