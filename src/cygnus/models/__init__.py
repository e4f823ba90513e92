"""Rules models - abilities, races, classes, items, equipment and characters."""

from .ability import Abilities, Ability, AbilityName, calculate_modifier
from .background import (
    Background,
    BackgroundBuilder,
    BackgroundProficiencies,
    Feature,
)
from .character import (
    Alignment,
    Character,
    CharacterBuilder,
    CharacterEquipmentError,
    CharacterError,
    CharacterInventoryError,
    Conformity,
    Gender,
    Morality,
)
from .characteristics import Characteristics, CharacteristicsBuilder
from .classes import (
    Class,
    ClassBuilder,
    Classes,
    HPIncreases,
    IncorrectNumberOfIncreasesError,
    LevelOutOfBoundsError,
    calculate_proficiency_bonus,
)
from .dice import Roll
from .feat import Feat
from .item import ArmorCategory, ArmorClass, Item, ItemBuilder, ItemNotFoundError, Items
from .modifiers import Encumbrance, Proficiency, Resistance
from .personality import Personality
from .proficiencies import Proficiencies
from .race import (
    Condition,
    CreatureType,
    DamageType,
    Language,
    Race,
    RaceBuilder,
    Size,
)
from .senses import Senses
from .skill import SkillName, Skills
from .slot import (
    InvalidItemError,
    ItemSlots,
    ItemSlotsError,
    Slot,
    SlotEmptyError,
    SlotError,
    SlotFullError,
    SlotNotFoundError,
    SlotProblemError,
    accepts_any,
    accepts_armor,
    accepts_types,
)
from .spell import AttackKind, Component, School, Spell, SpellList
from .units import Distance, Duration, TimeUnit, Weight

__all__ = [
    # Abilities
    "Abilities",
    "Ability",
    "AbilityName",
    "calculate_modifier",
    # Modifiers
    "Encumbrance",
    "Proficiency",
    "Resistance",
    # Races
    "Condition",
    "CreatureType",
    "DamageType",
    "Language",
    "Race",
    "RaceBuilder",
    "Size",
    # Classes
    "Class",
    "ClassBuilder",
    "Classes",
    "HPIncreases",
    "IncorrectNumberOfIncreasesError",
    "LevelOutOfBoundsError",
    "calculate_proficiency_bonus",
    # Items and equipment
    "ArmorCategory",
    "ArmorClass",
    "Item",
    "ItemBuilder",
    "ItemNotFoundError",
    "Items",
    "InvalidItemError",
    "ItemSlots",
    "ItemSlotsError",
    "Slot",
    "SlotEmptyError",
    "SlotError",
    "SlotFullError",
    "SlotNotFoundError",
    "SlotProblemError",
    "accepts_any",
    "accepts_armor",
    "accepts_types",
    # Skills and senses
    "SkillName",
    "Skills",
    "Senses",
    "Proficiencies",
    # Spells
    "AttackKind",
    "Component",
    "Roll",
    "School",
    "Spell",
    "SpellList",
    # Descriptive
    "Background",
    "BackgroundBuilder",
    "BackgroundProficiencies",
    "Characteristics",
    "CharacteristicsBuilder",
    "Feat",
    "Feature",
    "Personality",
    "Distance",
    "Duration",
    "TimeUnit",
    "Weight",
    # Characters
    "Alignment",
    "Character",
    "CharacterBuilder",
    "CharacterEquipmentError",
    "CharacterError",
    "CharacterInventoryError",
    "Conformity",
    "Gender",
    "Morality",
]
