"""Magic Catalog - an in-memory spell catalog grouped by spell type.

This package provides a spellbook that groups spells by category, ranks them
by power, computes per-risk aggregates, settles duels, and persists itself
to a versioned binary file.
"""

__version__ = "0.1.0"
__author__ = "Trickl"

from magic_catalog.catalog import DuelOutcome, Spellbook
from magic_catalog.config import Settings, get_settings
from magic_catalog.models import Category, RiskLabel, Spell, SpellType

__all__ = [
    "Category",
    "DuelOutcome",
    "RiskLabel",
    "Settings",
    "Spell",
    "SpellType",
    "Spellbook",
    "get_settings",
    "__version__",
    "__author__",
]
