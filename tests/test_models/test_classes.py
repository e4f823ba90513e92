"""Tests for classes, multiclassing and hit points."""

import pytest

from cygnus.errors import MissingFieldError
from cygnus.models import (
    AbilityName,
    Class,
    ClassBuilder,
    Classes,
    Feat,
    HPIncreases,
    IncorrectNumberOfIncreasesError,
    LevelOutOfBoundsError,
    Proficiency,
    calculate_proficiency_bonus,
)


class TestProficiencyBonus:
    """Tests for proficiency bonus by total level."""

    def test_level_zero(self):
        """No levels, no bonus."""
        assert calculate_proficiency_bonus(0) == 0

    @pytest.mark.parametrize(
        "levels,expected",
        [
            (range(1, 5), 2),
            (range(5, 9), 3),
            (range(9, 13), 4),
            (range(13, 17), 5),
            (range(17, 21), 6),
        ],
    )
    def test_level_bands(self, levels, expected):
        """Bonus steps up every four levels."""
        for level in levels:
            assert calculate_proficiency_bonus(level) == expected


class TestHPIncreases:
    """Tests for hit point progressions."""

    def test_starts_with_hit_die(self):
        """A new progression holds the hit die."""
        assert HPIncreases(10).to_list() == [10]

    def test_empty_progression(self):
        """Without a hit die there are no hit points, whatever the constitution."""
        assert HPIncreases().hit_points(0) == 0
        assert HPIncreases().hit_points(3) == 0

    def test_sums_with_constitution(self):
        """Constitution modifier is added once per increase."""
        progression = HPIncreases.from_list([8, 5, 5, 5, 5])
        assert progression.hit_points(0) == 28
        assert progression.hit_points(2) == 38

    def test_negative_constitution_not_clamped(self):
        """A low constitution can push hit points below zero."""
        assert HPIncreases.from_list([1, 1]).hit_points(-5) == -8

    def test_from_list_limit(self):
        """Up to twenty increases are accepted, more are not."""
        assert len(HPIncreases.from_list([5] * 20)) == 20
        with pytest.raises(IncorrectNumberOfIncreasesError):
            HPIncreases.from_list([5] * 21)

    def test_add_increase_limit(self):
        """add_increase fails once twenty entries exist."""
        progression = HPIncreases.from_list([5] * 19)
        progression.add_increase(5)
        with pytest.raises(IncorrectNumberOfIncreasesError):
            progression.add_increase(5)
        assert len(progression) == 20


class TestClass:
    """Tests for a single class."""

    def test_set_level_bounds(self, wizard):
        """Levels outside 0..20 are rejected and the old level kept."""
        wizard.set_level(20)
        assert wizard.level == 20
        with pytest.raises(LevelOutOfBoundsError):
            wizard.set_level(21)
        with pytest.raises(LevelOutOfBoundsError):
            wizard.set_level(-1)
        assert wizard.level == 20

    def test_saving_throws(self, wizard):
        """Only the class's own saves are proficient."""
        assert wizard.get_saving_throw_proficiency(AbilityName.WISDOM) == Proficiency.PROFICIENT
        assert wizard.get_saving_throw_proficiency(AbilityName.STRENGTH) is None

    def test_add_feat(self, wizard):
        """Feats can be added after construction."""
        wizard.add_feat(Feat("Arcane Recovery"))
        assert [feat.name for feat in wizard.feats] == ["Arcane Recovery"]


class TestClasses:
    """Tests for multiclass aggregation."""

    def test_empty(self):
        """No classes means level 0 and no saves."""
        classes = Classes()
        assert classes.level == 0
        assert classes.proficiency_bonus == 0
        assert classes.saving_throw_proficiency(AbilityName.INTELLIGENCE) is None
        assert classes.hit_points(2) == 0

    def test_level_is_summed(self, wizard, artificer):
        """Total level is the sum of class levels."""
        wizard.set_level(3)
        artificer.set_level(2)
        classes = Classes([wizard, artificer])
        assert classes.level == 5
        assert classes.proficiency_bonus == 3

    def test_saves_come_from_primary_class(self, wizard, artificer):
        """Only the first class grants saving throws."""
        classes = Classes()
        classes.add_class(wizard)
        classes.add_class(artificer)
        assert classes.saving_throw_proficiency(AbilityName.WISDOM) == Proficiency.PROFICIENT
        assert classes.saving_throw_proficiency(AbilityName.INTELLIGENCE) == Proficiency.PROFICIENT
        assert classes.saving_throw_proficiency(AbilityName.CONSTITUTION) is None

    def test_hit_points_summed(self, wizard, artificer):
        """Each class adds its own progression with the constitution modifier."""
        classes = Classes([wizard, artificer])
        assert classes.hit_points(1) == (6 + 1) + (8 + 1)

    def test_feats_in_class_order(self, wizard, artificer):
        """Feats follow class order."""
        artificer.add_feat(Feat("Magical Tinkering"))
        wizard.add_feat(Feat("Arcane Recovery"))
        classes = Classes([wizard, artificer])
        assert [feat.name for feat in classes.feats()] == ["Arcane Recovery", "Magical Tinkering"]

    def test_summary(self, wizard, artificer):
        """str renders each class with its level."""
        wizard.set_level(3)
        artificer.set_level(2)
        assert str(Classes([wizard, artificer])) == "Wizard 3 / Artificer 2"


class TestClassBuilder:
    """Tests for ClassBuilder."""

    def test_build(self):
        """Builder carries every field through."""
        character_class = (
            ClassBuilder()
            .name("Fighter")
            .level(4)
            .hp_increases(HPIncreases.from_list([10, 6, 6, 6]))
            .add_saving_throw_proficiency(AbilityName.STRENGTH)
            .add_feat(Feat("Second Wind"))
            .build()
        )
        assert isinstance(character_class, Class)
        assert character_class.level == 4
        assert character_class.hit_points(0) == 28
        assert character_class.spell_list is None

    def test_missing_every_field(self):
        """All missing required fields are listed at once."""
        with pytest.raises(MissingFieldError) as exc_info:
            ClassBuilder().build()
        assert exc_info.value.fields == ["name", "level"]

    def test_missing_level(self):
        """Level is required."""
        with pytest.raises(MissingFieldError) as exc_info:
            ClassBuilder().name("Rogue").build()
        assert exc_info.value.fields == ["level"]

    def test_level_validated_eagerly(self):
        """Out of range levels fail at the setter."""
        with pytest.raises(LevelOutOfBoundsError):
            ClassBuilder().level(21)
