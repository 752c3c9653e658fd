"""Data models for Magic Catalog.

This module contains the category enumerations and the spell record.
"""

from .category import Category, RiskLabel, SpellType
from .spell import Spell, compare, risk_then_name

__all__ = ["Category", "RiskLabel", "Spell", "SpellType", "compare", "risk_then_name"]
