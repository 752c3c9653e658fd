"""Pytest configuration and shared fixtures."""

import pytest
import structlog

from magic_catalog.catalog import Spellbook
from magic_catalog.models import Spell, SpellType


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any structlog configuration a test (e.g. the CLI) applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings afresh."""
    from magic_catalog.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_settings():
    """Provide mock settings for testing."""
    from magic_catalog.config import Settings

    return Settings(
        top_n=2,
        log_level="DEBUG",
        debug=True,
    )


@pytest.fixture
def reference_spells() -> dict[str, Spell]:
    """Provide the reference spells keyed by name."""
    spells = [
        Spell("Fireball", SpellType.FIRE, 80),
        Spell("Inferno", SpellType.FIRE, 95),
        Spell("Blizzard", SpellType.ICE, 90),
        Spell("Cure Wounds", SpellType.HEALING, 30),
        Spell("Resurrection", SpellType.NECROMANCY, 85),
        Spell("Apocalypse", SpellType.NECROMANCY, 100),
        Spell("Shadow Veil", SpellType.ILLUSION, 40),
    ]
    return {spell.name: spell for spell in spells}


@pytest.fixture
def spellbook(reference_spells: dict[str, Spell]) -> Spellbook:
    """Provide a spellbook populated with the reference spells."""
    book = Spellbook()
    for spell in reference_spells.values():
        book.add(spell)
    return book
