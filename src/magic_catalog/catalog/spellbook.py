"""In-memory spell catalog grouped by category.

Spells are kept per category in insertion order, and categories in the order
they were first used. Queries that walk the whole catalog visit spells
category by category, which is also the tiebreak for rankings.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from operator import attrgetter
from pathlib import Path
from typing import TextIO

import structlog

from magic_catalog.exceptions import CatalogIOError, DeserializationError
from magic_catalog.models import Category, Spell, SpellType, risk_then_name
from magic_catalog.storage import decode_groups, encode_groups

logger = structlog.get_logger()


@dataclass(frozen=True)
class DuelOutcome:
    """Result of a duel between two spells."""

    first: Spell
    second: Spell
    winner: Spell
    by_counter: bool

    @property
    def loser(self) -> Spell:
        return self.second if self.winner is self.first else self.first

    @property
    def announcement(self) -> str:
        if self.by_counter:
            return (
                f"{self.winner.name} wins! "
                f"{self.winner.category} beats {self.loser.category}."
            )
        return f"{self.winner.name} wins!"


class Spellbook:
    """Collection of spells grouped by category."""

    def __init__(self, category_type: type[Category] = SpellType) -> None:
        """Create an empty spellbook.

        Args:
            category_type: Enumeration used to resolve category names when
                loading from a file.
        """

        self._category_type = category_type
        self._spells_by_type: dict[Category, list[Spell]] = {}

    @property
    def category_type(self) -> type[Category]:
        return self._category_type

    def add(self, spell: Spell) -> None:
        """Append a spell to its category group."""

        self._spells_by_type.setdefault(spell.category, []).append(spell)
        logger.debug("spell_added", name=spell.name, category=spell.category.name)

    def get_by_category(self, category: Category) -> list[Spell]:
        """Return the spells of one category in insertion order.

        An unused category yields an empty list.
        """

        return list(self._spells_by_type.get(category, ()))

    def categories(self) -> list[Category]:
        """Return the categories holding at least one spell."""

        return list(self._spells_by_type)

    def groups(self) -> list[tuple[Category, list[Spell]]]:
        """Return ``(category, spells)`` pairs in first-use order."""

        return [(category, list(spells)) for category, spells in self._spells_by_type.items()]

    def __iter__(self) -> Iterator[Spell]:
        for spells in self._spells_by_type.values():
            yield from spells

    def __len__(self) -> int:
        return sum(len(spells) for spells in self._spells_by_type.values())

    def find_by_name(self, name: str) -> Spell | None:
        """Return the first spell called ``name``, or None."""

        return next((spell for spell in self if spell.name == name), None)

    def most_powerful(self) -> Spell | None:
        """Return the highest ranked spell, or None for an empty spellbook.

        Among equal ranks the first spell encountered wins.
        """

        return max(self, key=attrgetter("rank"), default=None)

    def average_cost(self, risk_label: str) -> float:
        """Mean category cost over spells whose category carries ``risk_label``.

        Returns 0.0 when no spell matches.
        """

        costs = [spell.category.cost for spell in self if spell.category.risk_label == risk_label]
        if not costs:
            return 0.0
        return sum(costs) / len(costs)

    def top_n(self, n: int) -> list[Spell]:
        """Return the ``n`` strongest spells, strongest first."""

        if n <= 0:
            return []
        return sorted(self)[:n]

    def sorted_by_risk(self) -> list[Spell]:
        """Return all spells ordered by risk label, then name."""

        return sorted(self, key=risk_then_name)

    def display_by_category(self, file: TextIO | None = None) -> None:
        """Print every non-empty category followed by its spells."""

        out = file or sys.stdout
        print("=== Spells by Type ===", file=out)
        for category, spells in self._spells_by_type.items():
            print(f"{category}: [{', '.join(str(spell) for spell in spells)}]", file=out)

    def duel(self, first: Spell, second: Spell, file: TextIO | None = None) -> DuelOutcome:
        """Pit two spells against each other and announce the winner.

        A category that beats the other's wins outright. Otherwise the
        strictly higher rank wins, and equal ranks go to ``second``.
        """

        if first.category.beats(second.category):
            outcome = DuelOutcome(first, second, winner=first, by_counter=True)
        elif second.category.beats(first.category):
            outcome = DuelOutcome(first, second, winner=second, by_counter=True)
        else:
            winner = first if first.rank > second.rank else second
            outcome = DuelOutcome(first, second, winner=winner, by_counter=False)

        out = file or sys.stdout
        print(f"Duel: {first.name} vs {second.name}", file=out)
        print(outcome.announcement, file=out)

        logger.info(
            "spell_duel",
            first=first.name,
            second=second.name,
            winner=outcome.winner.name,
            by_counter=outcome.by_counter,
        )
        return outcome

    def save_to_file(self, path: Path | str) -> None:
        """Write the spellbook to ``path``.

        Raises:
            CatalogIOError: If the file cannot be written.
        """

        path = Path(path)
        data = encode_groups(self._spells_by_type.items())

        try:
            with path.open("wb") as fh:
                fh.write(data)
        except OSError as exc:
            logger.error("spellbook_save_failed", path=str(path), error=str(exc))
            raise CatalogIOError(f"Cannot write spellbook to {path}: {exc}") from exc

        logger.info("spellbook_saved", path=str(path), spells=len(self), size_bytes=len(data))

    @classmethod
    def load_from_file(
        cls, path: Path | str, category_type: type[Category] = SpellType
    ) -> Spellbook:
        """Read a spellbook previously written by :meth:`save_to_file`.

        Raises:
            CatalogIOError: If the file cannot be read.
            DeserializationError: If the contents are not a valid spellbook.
        """

        path = Path(path)

        try:
            with path.open("rb") as fh:
                data = fh.read()
        except OSError as exc:
            logger.error("spellbook_load_failed", path=str(path), error=str(exc))
            raise CatalogIOError(f"Cannot read spellbook from {path}: {exc}") from exc

        try:
            groups = decode_groups(data, category_type)
        except DeserializationError as exc:
            logger.error("spellbook_decode_failed", path=str(path), error=str(exc))
            raise

        book = cls(category_type)
        for spells in groups.values():
            for spell in spells:
                book.add(spell)

        logger.info("spellbook_loaded", path=str(path), spells=len(book))
        return book
