"""Races (ancestries) and the creature traits they grant.

A race is a single data record: ability bonuses, size, speed, resistances
and languages. Concrete races such as Human or Shadar-kai are data loaded
from YAML, not subclasses.
"""

from dataclasses import dataclass, field
from enum import StrEnum

from cygnus.errors import MissingFieldError

from .ability import Abilities, AbilityName
from .feat import Feat
from .modifiers import Resistance

DEFAULT_WALKING_SPEED = 30


class CreatureType(StrEnum):
    ABERRATION = "aberration"
    BEAST = "beast"
    CELESTIAL = "celestial"
    CONSTRUCT = "construct"
    DRAGON = "dragon"
    ELEMENTAL = "elemental"
    FEY = "fey"
    FIEND = "fiend"
    GIANT = "giant"
    HUMANOID = "humanoid"
    MONSTROSITY = "monstrosity"
    OOZE = "ooze"
    PLANT = "plant"
    UNDEAD = "undead"


class Size(StrEnum):
    TINY = "tiny"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    HUGE = "huge"
    GARGANTUAN = "gargantuan"


class DamageType(StrEnum):
    ACID = "acid"
    BLUDGEONING = "bludgeoning"
    COLD = "cold"
    FIRE = "fire"
    FORCE = "force"
    LIGHTNING = "lightning"
    NECROTIC = "necrotic"
    PIERCING = "piercing"
    POISON = "poison"
    PSYCHIC = "psychic"
    RADIANT = "radiant"
    SLASHING = "slashing"
    THUNDER = "thunder"


class Condition(StrEnum):
    BLINDED = "blinded"
    CHARMED = "charmed"
    FRIGHTENED = "frightened"
    MAGICAL_SLEEP = "magical_sleep"
    PARALYZED = "paralyzed"
    POISONED = "poisoned"
    RESTRAINED = "restrained"
    UNCONSCIOUS = "unconscious"


class Language(StrEnum):
    COMMON = "Common"
    DWARVISH = "Dwarvish"
    ELVISH = "Elvish"
    GIANT = "Giant"
    GNOMISH = "Gnomish"
    GOBLIN = "Goblin"
    HALFLING = "Halfling"
    ORC = "Orc"
    ABYSSAL = "Abyssal"
    CELESTIAL = "Celestial"
    DRACONIC = "Draconic"
    INFERNAL = "Infernal"
    PRIMORDIAL = "Primordial"
    SYLVAN = "Sylvan"
    UNDERCOMMON = "Undercommon"


@dataclass
class Race:
    """
    A playable race.

    Everything is fixed at construction except the feat list, which can be
    appended to as the character gains racial feats.
    """

    name: str
    creature_type: CreatureType = CreatureType.HUMANOID
    size: Size = Size.MEDIUM
    walking_speed: int = DEFAULT_WALKING_SPEED
    abilities: Abilities = field(default_factory=Abilities)
    damage_resistances: dict[DamageType, Resistance] = field(default_factory=dict)
    condition_resistances: dict[Condition, Resistance] = field(default_factory=dict)
    languages: list[Language] = field(default_factory=list)
    feats: list[Feat] = field(default_factory=list)

    def get_damage_resistance(self, damage_type: DamageType) -> Resistance | None:
        return self.damage_resistances.get(damage_type)

    def get_condition_resistance(self, condition: Condition) -> Resistance | None:
        return self.condition_resistances.get(condition)

    def damage_multiplier(self, damage_type: DamageType) -> float:
        """Multiplier applied to incoming damage of this type (1.0 when unaffected)."""
        resistance = self.get_damage_resistance(damage_type)
        return resistance.damage_multiplier if resistance else 1.0

    def can_speak(self, language: Language) -> bool:
        return language in self.languages

    def add_feat(self, feat: Feat) -> None:
        self.feats.append(feat)


class RaceBuilder:
    """
    Collects race fields through chained setters.

    Only the name is required; a race otherwise defaults to a Medium
    humanoid with a 30 ft walking speed.
    """

    def __init__(self) -> None:
        self._name: str | None = None
        self._creature_type: CreatureType | None = None
        self._size: Size | None = None
        self._walking_speed: int | None = None
        self._abilities = Abilities()
        self._damage_resistances: dict[DamageType, Resistance] = {}
        self._condition_resistances: dict[Condition, Resistance] = {}
        self._languages: list[Language] = []
        self._feats: list[Feat] = []

    def name(self, name: str) -> "RaceBuilder":
        self._name = name
        return self

    def creature_type(self, creature_type: CreatureType) -> "RaceBuilder":
        self._creature_type = creature_type
        return self

    def size(self, size: Size) -> "RaceBuilder":
        self._size = size
        return self

    def walking_speed(self, walking_speed: int) -> "RaceBuilder":
        if walking_speed < 0:
            raise ValueError(f"Walking speed cannot be negative: {walking_speed}")
        self._walking_speed = walking_speed
        return self

    def add_ability(self, ability: AbilityName, bonus: int) -> "RaceBuilder":
        self._abilities.set_score(ability, bonus)
        return self

    def add_damage_resistance(self, damage_type: DamageType) -> "RaceBuilder":
        self._damage_resistances[damage_type] = Resistance.RESISTANT
        return self

    def add_damage_immunity(self, damage_type: DamageType) -> "RaceBuilder":
        self._damage_resistances[damage_type] = Resistance.IMMUNE
        return self

    def add_damage_vulnerability(self, damage_type: DamageType) -> "RaceBuilder":
        self._damage_resistances[damage_type] = Resistance.VULNERABLE
        return self

    def add_condition_resistance(self, condition: Condition) -> "RaceBuilder":
        self._condition_resistances[condition] = Resistance.RESISTANT
        return self

    def add_condition_immunity(self, condition: Condition) -> "RaceBuilder":
        self._condition_resistances[condition] = Resistance.IMMUNE
        return self

    def add_language(self, language: Language) -> "RaceBuilder":
        if language not in self._languages:
            self._languages.append(language)
        return self

    def add_feat(self, feat: Feat) -> "RaceBuilder":
        self._feats.append(feat)
        return self

    def build(self) -> Race:
        """
        Build the race.

        Raises:
            MissingFieldError: If no name was given
        """
        if not self._name:
            raise MissingFieldError(["name"], entity="Race")

        return Race(
            name=self._name,
            creature_type=self._creature_type or CreatureType.HUMANOID,
            size=self._size or Size.MEDIUM,
            walking_speed=(
                self._walking_speed if self._walking_speed is not None else DEFAULT_WALKING_SPEED
            ),
            abilities=self._abilities.copy(),
            damage_resistances=dict(self._damage_resistances),
            condition_resistances=dict(self._condition_resistances),
            languages=list(self._languages),
            feats=list(self._feats),
        )
