"""Spell catalog grouped by category.

This package contains the in-memory spellbook with its ranking, aggregate,
duel and persistence operations.
"""

from .spellbook import DuelOutcome, Spellbook

__all__ = ["DuelOutcome", "Spellbook"]
