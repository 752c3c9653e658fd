"""Spell categories and their fixed attributes.

A category is a member of a closed ``Enum`` that carries a cost and a risk
label. ``Category`` has no members of its own so that any fixed enumeration
can subclass it; ``SpellType`` is the enumeration the catalog ships with.
"""

from __future__ import annotations

from enum import Enum


class RiskLabel(str, Enum):
    """Qualitative risk attached to a category."""

    SAFE = "Safe"
    RISKY = "Risky"
    FORBIDDEN = "Forbidden"


class Category(Enum):
    """Base for closed category enumerations.

    Members are declared as ``NAME = (cost, risk_label)``. Each member is
    numbered in declaration order, so members with equal attributes stay
    distinct.
    """

    def __new__(cls, cost: int, risk_label: str) -> Category:
        member = object.__new__(cls)
        member._value_ = len(cls.__members__) + 1
        return member

    def __init__(self, cost: int, risk_label: str) -> None:
        self.cost = cost
        self.risk_label = risk_label

    def beats(self, other: Category) -> bool:
        """Return True if this category always wins a duel against ``other``."""
        return False

    def __str__(self) -> str:
        return self.name


class SpellType(Category):
    """The spell categories of the reference catalog."""

    FIRE = (50, RiskLabel.RISKY)
    ICE = (40, RiskLabel.SAFE)
    HEALING = (30, RiskLabel.SAFE)
    NECROMANCY = (80, RiskLabel.FORBIDDEN)
    ILLUSION = (20, RiskLabel.SAFE)

    def beats(self, other: Category) -> bool:
        return self is SpellType.FIRE and other is SpellType.ICE
