"""Tests for ability scores and modifiers."""

import pytest

from cygnus.models import Abilities, Ability, AbilityName, calculate_modifier


class TestAbilityModifiers:
    """Tests for the score // 2 - 5 modifier formula."""

    def test_modifier_reference_values(self):
        """Test the usual reference points."""
        assert calculate_modifier(10) == 0
        assert calculate_modifier(11) == 0
        assert calculate_modifier(8) == -1
        assert calculate_modifier(20) == 5

    def test_modifier_low_values(self):
        """Odd scores round down."""
        assert calculate_modifier(0) == -5
        assert calculate_modifier(1) == -5
        assert calculate_modifier(9) == -1

    def test_modifier_formula(self):
        """Verify modifier follows floor(s / 2) - 5 across the score range."""
        for score in range(0, 31):
            assert calculate_modifier(score) == score // 2 - 5

    def test_ability_modifier_property(self):
        """Ability exposes its modifier."""
        assert Ability(15).modifier == 2

    def test_negative_score_rejected(self):
        """Negative scores are not valid."""
        with pytest.raises(ValueError):
            Ability(-1)


class TestAbilityName:
    """Tests for ability identifiers."""

    def test_abbreviations(self):
        """Abbreviations are the three letter upper-case forms."""
        assert AbilityName.STRENGTH.abbreviation == "STR"
        assert AbilityName.CHARISMA.abbreviation == "CHA"

    def test_canonical_order(self):
        """Abilities iterate in sheet order."""
        assert [ability.abbreviation for ability in AbilityName] == [
            "STR",
            "DEX",
            "CON",
            "INT",
            "WIS",
            "CHA",
        ]


class TestAbilities:
    """Tests for partial ability score sets."""

    def test_missing_ability_reads_none(self):
        """Abilities that were never set read as None."""
        abilities = Abilities.from_scores(strength=12)
        assert abilities.get_score(AbilityName.STRENGTH) == 12
        assert abilities.get_score(AbilityName.DEXTERITY) is None
        assert abilities.get_modifier(AbilityName.DEXTERITY) is None

    def test_uniform(self):
        """uniform sets every ability."""
        abilities = Abilities.uniform(8)
        assert len(abilities) == 6
        assert all(entry.score == 8 for _, entry in abilities)

    def test_set_score_replaces(self):
        """Setting a score overwrites the old one."""
        abilities = Abilities.from_scores(wisdom=10)
        abilities.set_score(AbilityName.WISDOM, 14)
        assert abilities.get_modifier(AbilityName.WISDOM) == 2

    def test_set_score_accepts_string_name(self):
        """Ability names can be given as their string values."""
        abilities = Abilities()
        abilities.set_score("dexterity", 13)
        assert abilities.get_score(AbilityName.DEXTERITY) == 13

    def test_set_negative_score_rejected(self):
        """Negative scores raise ValueError."""
        with pytest.raises(ValueError):
            Abilities().set_score(AbilityName.STRENGTH, -2)

    def test_add_sums_shared_abilities(self):
        """Abilities present on both sides are summed."""
        combined = Abilities.uniform(8) + Abilities.from_scores(intelligence=2)
        assert combined.get_score(AbilityName.INTELLIGENCE) == 10
        assert combined.get_score(AbilityName.STRENGTH) == 8

    def test_add_keeps_one_sided_and_skips_absent(self):
        """One-sided values carry over and abilities on neither side stay absent."""
        left = Abilities.from_scores(strength=10)
        right = Abilities.from_scores(dexterity=3)
        combined = left + right
        assert combined.get_score(AbilityName.STRENGTH) == 10
        assert combined.get_score(AbilityName.DEXTERITY) == 3
        assert AbilityName.CHARISMA not in combined
        assert len(combined) == 2

    def test_add_is_commutative_and_associative(self):
        """Order and grouping do not matter."""
        a = Abilities.from_scores(strength=10, wisdom=12)
        b = Abilities.from_scores(strength=1, charisma=2)
        c = Abilities.from_scores(wisdom=1, dexterity=5)
        assert a + b == b + a
        assert (a + b) + c == a + (b + c)

    def test_add_does_not_mutate_operands(self):
        """Addition returns a new set."""
        a = Abilities.from_scores(strength=10)
        b = Abilities.from_scores(strength=2)
        _ = a + b
        assert a.get_score(AbilityName.STRENGTH) == 10
        assert b.get_score(AbilityName.STRENGTH) == 2

    def test_to_dict(self):
        """to_dict keys by ability value in canonical order."""
        abilities = Abilities.from_scores(charisma=9, strength=11)
        assert abilities.to_dict() == {"strength": 11, "charisma": 9}
