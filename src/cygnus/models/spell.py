"""Spells and spell lists.

Spell damage scales by threshold: a cantrip's dice grow at character levels
5, 11 and 17, a levelled spell's dice grow with the slot it is cast from.
Both are stored in a LowerBoundMap keyed by the level where the roll starts
to apply.
"""

from dataclasses import dataclass, field
from enum import StrEnum

from cygnus.utils.lower_bound_map import LowerBoundMap

from .ability import AbilityName
from .dice import Roll
from .race import DamageType
from .units import Duration

MAX_SPELL_LEVEL = 9


class School(StrEnum):
    ABJURATION = "abjuration"
    CONJURATION = "conjuration"
    DIVINATION = "divination"
    ENCHANTMENT = "enchantment"
    EVOCATION = "evocation"
    ILLUSION = "illusion"
    NECROMANCY = "necromancy"
    TRANSMUTATION = "transmutation"


class Component(StrEnum):
    VERBAL = "V"
    SOMATIC = "S"
    MATERIAL = "M"


class AttackKind(StrEnum):
    """How a damaging spell reaches its target."""

    MELEE = "melee"
    RANGED = "ranged"
    SAVE = "save"


@dataclass
class Spell:
    """A spell definition."""

    name: str
    level: int
    school: School
    casting_time: str = "1 action"
    range_feet: int | None = None
    components: tuple[Component, ...] = ()
    duration: Duration = field(default_factory=Duration.instantaneous)
    concentration: bool = False
    description: str = ""
    attack_kind: AttackKind | None = None
    save_ability: AbilityName | None = None
    damage_type: DamageType | None = None
    damage_rolls: LowerBoundMap[int, Roll] = field(default_factory=LowerBoundMap)

    def __post_init__(self) -> None:
        if not 0 <= self.level <= MAX_SPELL_LEVEL:
            raise ValueError(f"Spell level must be between 0 and {MAX_SPELL_LEVEL}: {self.level}")
        if self.attack_kind == AttackKind.SAVE and self.save_ability is None:
            raise ValueError(f"Spell '{self.name}' forces a save but names no save ability")

    @property
    def is_cantrip(self) -> bool:
        return self.level == 0

    def damage_roll(self, level: int) -> Roll | None:
        """
        Get the damage roll that applies at a level.

        Args:
            level: Character level for cantrips, slot level for levelled spells

        Returns:
            Roll for the nearest threshold at or below the level, None if below all of them
        """
        return self.damage_rolls.get(level)


class SpellList:
    """Ordered collection of spells known by a class."""

    def __init__(self, spells: list[Spell] | None = None) -> None:
        self._spells: list[Spell] = list(spells or [])

    def add_spell(self, spell: Spell) -> None:
        self._spells.append(spell)

    def get(self, name: str) -> Spell | None:
        """Find a spell by name (case-insensitive)."""
        wanted = name.lower()
        for spell in self._spells:
            if spell.name.lower() == wanted:
                return spell
        return None

    def cantrips(self) -> list[Spell]:
        return [spell for spell in self._spells if spell.is_cantrip]

    def of_level(self, level: int) -> list[Spell]:
        return [spell for spell in self._spells if spell.level == level]

    def __iter__(self):
        return iter(self._spells)

    def __len__(self) -> int:
        return len(self._spells)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None
