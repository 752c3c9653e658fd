"""Spell record model."""

from __future__ import annotations

from dataclasses import dataclass

from magic_catalog.exceptions import ValidationError
from magic_catalog.models.category import Category


@dataclass(frozen=True, eq=False)
class Spell:
    """A named, ranked entry belonging to exactly one category.

    Spells compare by identity. Their natural ordering is descending by
    rank, so ``sorted(spells)`` lists the strongest first.
    """

    name: str
    category: Category
    rank: int

    def __post_init__(self) -> None:
        # Empty names and negative ranks are accepted as-is.
        if not isinstance(self.category, Category):
            raise ValidationError(
                f"Spell {self.name!r} requires a category, got {self.category!r}"
            )

    def __lt__(self, other: Spell) -> bool:
        if not isinstance(other, Spell):
            return NotImplemented
        return compare(self, other) < 0

    def __gt__(self, other: Spell) -> bool:
        if not isinstance(other, Spell):
            return NotImplemented
        return compare(self, other) > 0

    def __le__(self, other: Spell) -> bool:
        if not isinstance(other, Spell):
            return NotImplemented
        return compare(self, other) <= 0

    def __ge__(self, other: Spell) -> bool:
        if not isinstance(other, Spell):
            return NotImplemented
        return compare(self, other) >= 0

    def __str__(self) -> str:
        return f"{self.name} ({self.category}, Power: {self.rank})"


def compare(a: Spell, b: Spell) -> int:
    """Compare two spells by descending rank.

    Returns:
        -1 if ``a`` orders first, 1 if ``b`` does, 0 on equal rank.
    """
    return (a.rank < b.rank) - (a.rank > b.rank)


def risk_then_name(spell: Spell) -> tuple[str, str]:
    """Sort key ordering spells by risk label, then by name."""
    return (spell.category.risk_label, spell.name)
