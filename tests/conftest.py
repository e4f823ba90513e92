"""Shared fixtures for all tests."""

import pytest

from cygnus.config import get_settings
from cygnus.models import (
    Abilities,
    AbilityName,
    Alignment,
    ArmorClass,
    Character,
    Class,
    ClassBuilder,
    Classes,
    Condition,
    Conformity,
    DamageType,
    HPIncreases,
    Item,
    ItemBuilder,
    Language,
    Morality,
    Race,
    RaceBuilder,
)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings fresh from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def human() -> Race:
    """Human: +1 to every ability, speaks Common."""
    builder = RaceBuilder().name("Human").add_language(Language.COMMON)
    for ability in AbilityName:
        builder.add_ability(ability, 1)
    return builder.build()


@pytest.fixture
def shadar_kai() -> Race:
    """Shadar-kai: +2 INT, +1 DEX, necrotic resistance, immune to magical sleep."""
    return (
        RaceBuilder()
        .name("Shadar-kai")
        .add_ability(AbilityName.INTELLIGENCE, 2)
        .add_ability(AbilityName.DEXTERITY, 1)
        .add_damage_resistance(DamageType.NECROTIC)
        .add_condition_immunity(Condition.MAGICAL_SLEEP)
        .add_language(Language.COMMON)
        .add_language(Language.UNDERCOMMON)
        .build()
    )


@pytest.fixture
def plain_race() -> Race:
    """Race with no ability bonuses, so base scores are effective scores."""
    return RaceBuilder().name("Plainfolk").build()


@pytest.fixture
def wizard() -> Class:
    """Level 1 wizard: d6 hit die, INT and WIS saves."""
    return (
        ClassBuilder()
        .name("Wizard")
        .level(1)
        .hp_increases(HPIncreases(6))
        .add_saving_throw_proficiency(AbilityName.INTELLIGENCE)
        .add_saving_throw_proficiency(AbilityName.WISDOM)
        .build()
    )


@pytest.fixture
def artificer() -> Class:
    """Level 1 artificer: d8 hit die, INT and CON saves."""
    return (
        ClassBuilder()
        .name("Artificer")
        .level(1)
        .hp_increases(HPIncreases(8))
        .add_saving_throw_proficiency(AbilityName.INTELLIGENCE)
        .add_saving_throw_proficiency(AbilityName.CONSTITUTION)
        .build()
    )


@pytest.fixture
def dummy_character(human: Race) -> Character:
    """Classless human with every base score at 8 (effective 9, modifier -1)."""
    return Character(
        name="Dummy",
        alignment=Alignment(Conformity.NEUTRAL, Morality.NEUTRAL),
        race=human,
        base_ability_scores=Abilities.uniform(8),
        classes=Classes(),
    )


@pytest.fixture
def weak_character(plain_race: Race) -> Character:
    """Classless character with effective strength 8: encumbered over 40 lb, heavily over 80."""
    return Character(
        name="Weakling",
        alignment=Alignment(Conformity.CHAOTIC, Morality.GOOD),
        race=plain_race,
        base_ability_scores=Abilities.uniform(8),
        classes=Classes(),
    )


@pytest.fixture
def chain_mail() -> Item:
    return (
        ItemBuilder()
        .name("Chain Mail")
        .weight(55)
        .add_type("armor")
        .armor_class(ArmorClass.heavy(16))
        .build()
    )


@pytest.fixture
def breastplate() -> Item:
    return (
        ItemBuilder()
        .name("Breastplate")
        .weight(20)
        .add_type("armor")
        .armor_class(ArmorClass.medium(14))
        .build()
    )


@pytest.fixture
def rapier() -> Item:
    return ItemBuilder().name("Rapier").weight(2).add_type("weapon").add_type("hand").build()
