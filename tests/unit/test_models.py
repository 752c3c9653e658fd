"""Unit tests for data models."""

import pytest

from magic_catalog.exceptions import ValidationError
from magic_catalog.models import Category, RiskLabel, Spell, SpellType, compare, risk_then_name


class Element(Category):
    """A custom enumeration used to check categories are not tied to SpellType."""

    WATER = (10, "Calm")
    STORM = (70, "Wild")
    EARTH = (35, "Calm")


class TestSpellType:
    """Test suite for the SpellType enumeration."""

    @pytest.mark.parametrize(
        ("category", "cost", "risk_label"),
        [
            (SpellType.FIRE, 50, RiskLabel.RISKY),
            (SpellType.ICE, 40, RiskLabel.SAFE),
            (SpellType.HEALING, 30, RiskLabel.SAFE),
            (SpellType.NECROMANCY, 80, RiskLabel.FORBIDDEN),
            (SpellType.ILLUSION, 20, RiskLabel.SAFE),
        ],
    )
    def test_attributes(self, category: SpellType, cost: int, risk_label: RiskLabel) -> None:
        """Test each spell type carries its fixed cost and risk label."""
        assert category.cost == cost
        assert category.risk_label == risk_label

    def test_risk_labels_compare_as_strings(self) -> None:
        """Test risk labels can be matched against plain strings."""
        assert SpellType.NECROMANCY.risk_label == "Forbidden"
        assert SpellType.FIRE.risk_label == "Risky"

    def test_str_is_variant_name(self) -> None:
        """Test a category renders as its bare name."""
        assert str(SpellType.HEALING) == "HEALING"

    def test_fire_beats_ice_only(self) -> None:
        """Test FIRE beats ICE and no other pair has a counter."""
        assert SpellType.FIRE.beats(SpellType.ICE)
        assert not SpellType.ICE.beats(SpellType.FIRE)

        counters = [(a, b) for a in SpellType for b in SpellType if a.beats(b)]
        assert counters == [(SpellType.FIRE, SpellType.ICE)]

    def test_lookup_by_name(self) -> None:
        """Test variants resolve from their names."""
        assert SpellType["ILLUSION"] is SpellType.ILLUSION


class TestCustomCategory:
    """Test suite for user-defined category enumerations."""

    def test_custom_enumeration_attributes(self) -> None:
        """Test a custom enumeration carries its own attributes."""
        assert [c.name for c in Element] == ["WATER", "STORM", "EARTH"]
        assert Element.STORM.cost == 70
        assert Element.STORM.risk_label == "Wild"

    def test_equal_attributes_stay_distinct(self) -> None:
        """Test members sharing cost and risk label are separate variants."""

        class Twin(Category):
            FROST = (40, "Safe")
            MIST = (40, "Safe")

        assert [c.name for c in Twin] == ["FROST", "MIST"]
        assert Twin.MIST is not Twin.FROST
        assert Twin.MIST.cost == 40
        assert str(Spell("Fog", Twin.MIST, 5)) == "Fog (MIST, Power: 5)"

    def test_base_category_counters_nothing(self) -> None:
        """Test the default counter rule never fires."""
        assert not Element.STORM.beats(Element.WATER)


class TestSpell:
    """Test suite for the Spell record."""

    def test_spell_creation(self) -> None:
        """Test creating a Spell instance."""
        spell = Spell("Fireball", SpellType.FIRE, 80)

        assert spell.name == "Fireball"
        assert spell.category is SpellType.FIRE
        assert spell.rank == 80

    def test_spell_is_immutable(self) -> None:
        """Test that spell fields cannot be reassigned."""
        spell = Spell("Fireball", SpellType.FIRE, 80)

        with pytest.raises(AttributeError):
            spell.rank = 10  # type: ignore[misc]

    def test_render(self) -> None:
        """Test the display string format."""
        spell = Spell("Shadow Veil", SpellType.ILLUSION, 40)

        assert str(spell) == "Shadow Veil (ILLUSION, Power: 40)"

    def test_missing_category_rejected(self) -> None:
        """Test that a spell requires a category."""
        with pytest.raises(ValidationError):
            Spell("Nothing", None, 10)  # type: ignore[arg-type]

    def test_non_category_rejected(self) -> None:
        """Test that a category name is not accepted in place of a member."""
        with pytest.raises(ValidationError):
            Spell("Fireball", "FIRE", 80)  # type: ignore[arg-type]

    def test_permissive_name_and_rank(self) -> None:
        """Test empty names and negative ranks are accepted."""
        spell = Spell("", Element.WATER, -5)

        assert spell.name == ""
        assert spell.rank == -5

    def test_identity_semantics(self) -> None:
        """Test equal-looking spells remain distinct."""
        a = Spell("Fireball", SpellType.FIRE, 80)
        b = Spell("Fireball", SpellType.FIRE, 80)

        assert a != b
        assert a == a
        assert len({a, b}) == 2


class TestOrdering:
    """Test suite for the natural spell ordering."""

    def test_compare(self) -> None:
        """Test compare orders higher ranks first."""
        strong = Spell("Inferno", SpellType.FIRE, 95)
        weak = Spell("Fireball", SpellType.FIRE, 80)
        other = Spell("Blizzard", SpellType.ICE, 80)

        assert compare(strong, weak) == -1
        assert compare(weak, strong) == 1
        assert compare(weak, other) == 0

    def test_comparison_operators(self) -> None:
        """Test < and > follow descending rank."""
        strong = Spell("Inferno", SpellType.FIRE, 95)
        weak = Spell("Fireball", SpellType.FIRE, 80)

        assert strong < weak
        assert weak > strong
        assert not weak < strong

    def test_non_strict_operators(self) -> None:
        """Test <= and >= follow descending rank and hold on ties."""
        strong = Spell("Inferno", SpellType.FIRE, 95)
        weak = Spell("Fireball", SpellType.FIRE, 80)
        tied = Spell("Blizzard", SpellType.ICE, 80)

        assert strong <= weak
        assert not weak <= strong
        assert weak >= strong
        assert weak <= tied
        assert weak >= tied

    def test_sorted_is_descending_and_stable(self) -> None:
        """Test sorting lists strongest first and keeps order among ties."""
        first_tie = Spell("A", SpellType.ICE, 50)
        second_tie = Spell("B", SpellType.FIRE, 50)
        strongest = Spell("C", SpellType.HEALING, 90)
        weakest = Spell("D", SpellType.ILLUSION, -1)

        ordered = sorted([first_tie, weakest, second_tie, strongest])

        assert ordered == [strongest, first_tie, second_tie, weakest]

    def test_risk_then_name(self) -> None:
        """Test the secondary key orders by risk label, then name."""
        spells = [
            Spell("Inferno", SpellType.FIRE, 95),
            Spell("Blizzard", SpellType.ICE, 90),
            Spell("Apocalypse", SpellType.NECROMANCY, 100),
            Spell("Aurora", SpellType.ILLUSION, 10),
        ]

        names = [s.name for s in sorted(spells, key=risk_then_name)]

        assert names == ["Apocalypse", "Inferno", "Aurora", "Blizzard"]
