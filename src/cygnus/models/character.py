"""The character aggregate.

A Character owns its race, classes, ability scores, skills, inventory and
equipment. It stores only those inputs plus two counters (damage taken and
exhaustion level); every derived value is recomputed on each call.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

import structlog

from cygnus.errors import MissingFieldError

from .ability import Abilities, AbilityName
from .classes import Class, Classes
from .feat import Feat
from .item import Item, ItemNotFoundError, Items
from .modifiers import Encumbrance, Proficiency
from .personality import Personality
from .proficiencies import Proficiencies
from .race import CreatureType, DamageType, Language, Race, Size
from .senses import Senses
from .skill import SkillName, Skills
from .slot import ItemSlots, ItemSlotsError, Validator, accepts_any

logger = structlog.get_logger(__name__)

# Carrying more than STR x this many pounds encumbers
ENCUMBERED_MULTIPLIER = 5
HEAVILY_ENCUMBERED_MULTIPLIER = 10

# Exhaustion levels at which walking speed is halved, then dropped to zero
EXHAUSTION_HALVES_SPEED = 2
EXHAUSTION_STOPS_MOVEMENT = 5


class Conformity(StrEnum):
    LAWFUL = "lawful"
    NEUTRAL = "neutral"
    CHAOTIC = "chaotic"


class Morality(StrEnum):
    GOOD = "good"
    NEUTRAL = "neutral"
    EVIL = "evil"


@dataclass(frozen=True)
class Alignment:
    """Conformity and morality, rendered like "Lawful Good"."""

    conformity: Conformity
    morality: Morality

    def __str__(self) -> str:
        return f"{self.conformity.value.capitalize()} {self.morality.value.capitalize()}"


class Gender(StrEnum):
    MALE = "male"
    FEMALE = "female"

    def __str__(self) -> str:
        return self.value.capitalize()


class CharacterError(Exception):
    """Base class for failed character mutations.

    Attributes:
        origin: Which part of the character failed ("equipment" or "inventory")
        error: The underlying error
    """

    origin: str = ""

    def __init__(self, error: Exception) -> None:
        self.error = error
        super().__init__(f"{self.origin.capitalize()}: {error}")


class CharacterEquipmentError(CharacterError):
    """Raised when equipping or unequipping fails."""

    origin = "equipment"


class CharacterInventoryError(CharacterError):
    """Raised when the inventory cannot satisfy a request."""

    origin = "inventory"


def calculate_encumbrance(weight_carried: float, strength: int) -> Encumbrance | None:
    """
    Encumbrance tier for a carried weight.

    Both thresholds are exclusive: carrying exactly 5x strength is still
    unencumbered and exactly 10x strength is only encumbered.
    """
    if weight_carried > strength * HEAVILY_ENCUMBERED_MULTIPLIER:
        return Encumbrance.HEAVILY_ENCUMBERED
    if weight_carried > strength * ENCUMBERED_MULTIPLIER:
        return Encumbrance.ENCUMBERED
    return None


def calculate_walking_speed(
    base_speed: int, encumbrance: Encumbrance | None, exhaustion_level: int
) -> int:
    """
    Apply encumbrance then exhaustion to a base walking speed.

    Args:
        base_speed: Race walking speed in feet
        encumbrance: Current encumbrance tier, None if unencumbered
        exhaustion_level: Current exhaustion level

    Returns:
        Speed in feet, never negative
    """
    if exhaustion_level >= EXHAUSTION_STOPS_MOVEMENT:
        return 0

    penalty = encumbrance.speed_penalty if encumbrance else 0
    speed = max(base_speed - penalty, 0)

    if exhaustion_level >= EXHAUSTION_HALVES_SPEED:
        speed //= 2

    return speed


class Character:
    """
    A player character.

    Build one with CharacterBuilder or the YAML loader rather than directly.
    """

    def __init__(
        self,
        name: str,
        alignment: Alignment,
        race: Race,
        base_ability_scores: Abilities,
        classes: Classes,
        gender: Gender | None = None,
        personality: Personality | None = None,
        skills: Skills | None = None,
        inventory: Items | None = None,
        equipment: ItemSlots | None = None,
        senses: Senses | None = None,
        proficiencies: Proficiencies | None = None,
    ) -> None:
        self.name = name
        self.alignment = alignment
        self.gender = gender
        self.personality = personality or Personality()
        self.race = race
        self.base_ability_scores = base_ability_scores
        self.classes = classes
        self.skills = skills or Skills()
        self.inventory = inventory if inventory is not None else Items()
        self.equipment = equipment if equipment is not None else ItemSlots()
        self.senses = senses or Senses()
        self.proficiencies = proficiencies or Proficiencies()
        self._exhaustion_level = 0
        self._damage = 0

    # ------------------------------------------------------------------
    # Descriptive
    # ------------------------------------------------------------------

    @property
    def race_name(self) -> str:
        return self.race.name

    @property
    def class_details(self) -> str:
        """Class summary such as "Wizard 3 / Artificer 2"."""
        return str(self.classes)

    @property
    def creature_type(self) -> CreatureType:
        return self.race.creature_type

    @property
    def size(self) -> Size:
        return self.race.size

    @property
    def darkvision(self) -> int | None:
        return self.senses.darkvision

    def languages(self) -> list[Language]:
        """Languages the character knows, then racial ones, without repeats."""
        combined: list[Language] = []
        for language in [*self.proficiencies.languages, *self.race.languages]:
            if language not in combined:
                combined.append(language)
        return combined

    def languages_string(self) -> str:
        return ", ".join(str(language) for language in self.languages())

    def armor_proficiencies_string(self) -> str:
        return self.proficiencies.armor_string()

    def weapon_proficiencies_string(self) -> str:
        return self.proficiencies.weapons_string()

    def tool_proficiencies_string(self) -> str:
        return self.proficiencies.tools_string()

    # ------------------------------------------------------------------
    # Abilities and proficiency
    # ------------------------------------------------------------------

    def abilities(self) -> Abilities:
        """Effective ability scores: base scores plus racial bonuses."""
        return self.base_ability_scores + self.race.abilities

    def ability_score(self, ability: AbilityName) -> int:
        score = self.abilities().get_score(ability)
        return score if score is not None else 0

    def ability_modifier(self, ability: AbilityName) -> int:
        modifier = self.abilities().get_modifier(ability)
        return modifier if modifier is not None else 0

    @property
    def level(self) -> int:
        return self.classes.level

    def proficiency_bonus(self) -> int:
        return self.classes.proficiency_bonus

    def saving_throw_proficiency(self, ability: AbilityName) -> Proficiency | None:
        return self.classes.saving_throw_proficiency(ability)

    def saving_throw_modifier(self, ability: AbilityName) -> int:
        """Ability modifier, plus the proficiency bonus if the primary class grants the save."""
        bonus = self.proficiency_bonus() if self.saving_throw_proficiency(ability) else 0
        return bonus + self.ability_modifier(ability)

    @property
    def initiative(self) -> int:
        return self.ability_modifier(AbilityName.DEXTERITY)

    # ------------------------------------------------------------------
    # Skills
    # ------------------------------------------------------------------

    def skill_proficiency(self, skill: SkillName) -> Proficiency | None:
        return self.skills.get_proficiency(skill)

    def skill_modifier(self, skill: SkillName) -> int:
        skill = SkillName(skill)
        return self.skills.get_modifier(
            skill,
            self.ability_modifier(skill.default_ability),
            self.proficiency_bonus(),
        )

    def set_skill_proficiency(self, skill: SkillName, proficiency: Proficiency | None) -> None:
        self.skills.set_proficiency(skill, proficiency)
        logger.debug(
            "skill_proficiency_set",
            character=self.name,
            skill=str(skill),
            proficiency=proficiency.name if proficiency else None,
        )

    def passive_perception(self) -> int:
        return self.senses.passive_perception(self.skill_modifier(SkillName.PERCEPTION))

    def passive_investigation(self) -> int:
        return self.senses.passive_investigation(self.skill_modifier(SkillName.INVESTIGATION))

    def passive_insight(self) -> int:
        return self.senses.passive_insight(self.skill_modifier(SkillName.INSIGHT))

    # ------------------------------------------------------------------
    # Combat values
    # ------------------------------------------------------------------

    def armor_class(self) -> int:
        """Sum of the armor contributions of every equipped armored item."""
        dexterity_modifier = self.ability_modifier(AbilityName.DEXTERITY)
        return sum(
            item.armor_class.contribution(dexterity_modifier)
            for item in self.equipment.equipped_items()
            if item.armor_class is not None
        )

    def max_hit_points(self) -> int:
        return self.classes.hit_points(self.ability_modifier(AbilityName.CONSTITUTION))

    def current_hit_points(self) -> int:
        """Maximum hit points minus damage taken. Can go below zero."""
        return self.max_hit_points() - self._damage

    @property
    def damage(self) -> int:
        return self._damage

    def set_damage(self, damage: int) -> None:
        if damage < 0:
            raise ValueError(f"Damage cannot be negative: {damage}")
        self._damage = damage
        logger.debug("damage_set", character=self.name, damage=damage)

    def damage_multiplier(self, damage_type: DamageType) -> float:
        return self.race.damage_multiplier(damage_type)

    @property
    def exhaustion_level(self) -> int:
        return self._exhaustion_level

    def set_exhaustion_level(self, level: int) -> None:
        if level < 0:
            raise ValueError(f"Exhaustion level cannot be negative: {level}")
        self._exhaustion_level = level
        logger.debug("exhaustion_level_set", character=self.name, exhaustion_level=level)

    # ------------------------------------------------------------------
    # Carrying and movement
    # ------------------------------------------------------------------

    def total_weight_carried(self) -> float:
        """Inventory weight plus the weight of everything equipped."""
        return self.inventory.total_weight() + self.equipment.total_weight()

    def encumbrance(self) -> Encumbrance | None:
        return calculate_encumbrance(
            self.total_weight_carried(), self.ability_score(AbilityName.STRENGTH)
        )

    def walking_speed(self) -> int:
        return calculate_walking_speed(
            self.race.walking_speed, self.encumbrance(), self._exhaustion_level
        )

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    def inventory_items(self) -> list[Item]:
        return list(self.inventory)

    def equipped_items(self) -> list[Item]:
        return self.equipment.equipped_items()

    def has_item_equipped_matching(self, predicate: Callable[[Item], bool]) -> bool:
        return self.equipment.has_item_matching(predicate)

    def add_item(self, item: Item) -> None:
        self.inventory.add_item(item)
        logger.debug("item_added", character=self.name, item=item.name)

    def remove_item(self, name: str) -> Item:
        """
        Take an item out of the inventory.

        Raises:
            CharacterInventoryError: If no carried item has that name
        """
        try:
            item = self.inventory.remove_item(name)
        except ItemNotFoundError as e:
            raise CharacterInventoryError(e) from e

        logger.debug("item_removed", character=self.name, item=name)
        return item

    def add_equipment_slot(self, slot_name: str, validator: Validator = accepts_any) -> None:
        self.equipment.add_slot(slot_name, validator)

    def equip_item(self, item: Item, slot_name: str) -> None:
        """
        Equip an item into a slot.

        Raises:
            CharacterEquipmentError: If the slot is unknown, full or rejects the item
        """
        try:
            self.equipment.equip(item, slot_name)
        except ItemSlotsError as e:
            raise CharacterEquipmentError(e) from e

    def unequip_item(self, slot_name: str) -> Item:
        """
        Remove the item from a slot and hand it back.

        Raises:
            CharacterEquipmentError: If the slot is unknown or empty
        """
        try:
            return self.equipment.unequip(slot_name)
        except ItemSlotsError as e:
            raise CharacterEquipmentError(e) from e

    def equip_from_inventory(self, item_name: str, slot_name: str) -> None:
        """
        Move an item from the inventory into a slot.

        The item goes back into the inventory if the slot refuses it.

        Raises:
            CharacterInventoryError: If the item is not carried
            CharacterEquipmentError: If the slot refuses the item
        """
        item = self.remove_item(item_name)
        try:
            self.equip_item(item, slot_name)
        except CharacterEquipmentError:
            self.inventory.add_item(item)
            raise

    def stow_item(self, slot_name: str) -> Item:
        """
        Move the item in a slot into the inventory.

        Raises:
            CharacterEquipmentError: If the slot is unknown or empty
        """
        item = self.unequip_item(slot_name)
        self.add_item(item)
        return item

    # ------------------------------------------------------------------
    # Classes and feats
    # ------------------------------------------------------------------

    def add_class(self, character_class: Class) -> None:
        self.classes.add_class(character_class)
        logger.debug(
            "class_added",
            character=self.name,
            class_name=character_class.name,
            level=character_class.level,
        )

    def feats(self) -> list[Feat]:
        """Class feats in class order, followed by racial feats."""
        return [*self.classes.feats(), *self.race.feats]

    def __repr__(self) -> str:
        return (
            f"Character(name={self.name!r}, race={self.race_name!r}, "
            f"classes={self.class_details!r})"
        )


class CharacterBuilder:
    """
    Chained construction of a Character.

    Required: name, alignment, race, ability scores and at least one class.
    Everything else has an empty default.
    """

    def __init__(self) -> None:
        self._name: str | None = None
        self._alignment: Alignment | None = None
        self._gender: Gender | None = None
        self._personality: Personality | None = None
        self._race: Race | None = None
        self._base_ability_scores: Abilities | None = None
        self._classes: Classes | None = None
        self._skills = Skills()
        self._inventory = Items()
        self._equipment = ItemSlots()
        self._senses: Senses | None = None
        self._proficiencies = Proficiencies()

    def name(self, name: str) -> "CharacterBuilder":
        if not name:
            raise ValueError("Character name cannot be empty")
        self._name = name
        return self

    def alignment(self, alignment: Alignment) -> "CharacterBuilder":
        self._alignment = alignment
        return self

    def gender(self, gender: Gender) -> "CharacterBuilder":
        self._gender = gender
        return self

    def personality(self, personality: Personality) -> "CharacterBuilder":
        self._personality = personality
        return self

    def race(self, race: Race) -> "CharacterBuilder":
        self._race = race
        return self

    def base_ability_scores(self, abilities: Abilities) -> "CharacterBuilder":
        self._base_ability_scores = abilities
        return self

    def add_class(self, character_class: Class) -> "CharacterBuilder":
        if self._classes is None:
            self._classes = Classes()
        self._classes.add_class(character_class)
        return self

    def add_skill_proficiency(self, skill: SkillName) -> "CharacterBuilder":
        self._skills.set_proficiency(skill, Proficiency.PROFICIENT)
        return self

    def add_skill_expertise(self, skill: SkillName) -> "CharacterBuilder":
        self._skills.set_proficiency(skill, Proficiency.EXPERT)
        return self

    def inventory(self, inventory: Items) -> "CharacterBuilder":
        self._inventory = inventory
        return self

    def add_item_to_inventory(self, item: Item) -> "CharacterBuilder":
        self._inventory.add_item(item)
        return self

    def equipment(self, equipment: ItemSlots) -> "CharacterBuilder":
        self._equipment = equipment
        return self

    def add_equipment_slot(
        self, slot_name: str, validator: Validator = accepts_any
    ) -> "CharacterBuilder":
        self._equipment.add_slot(slot_name, validator)
        return self

    def senses(self, senses: Senses) -> "CharacterBuilder":
        self._senses = senses
        return self

    def add_armor_proficiency(self, armor: str) -> "CharacterBuilder":
        self._proficiencies.add_armor_proficiency(armor)
        return self

    def add_weapon_proficiency(self, weapon: str) -> "CharacterBuilder":
        self._proficiencies.add_weapon_proficiency(weapon)
        return self

    def add_tool_proficiency(self, tool: str) -> "CharacterBuilder":
        self._proficiencies.add_tool_proficiency(tool)
        return self

    def add_language(self, language: Language) -> "CharacterBuilder":
        self._proficiencies.add_language(language)
        return self

    def build(self) -> Character:
        """
        Build the character.

        Raises:
            MissingFieldError: Naming every required field that was never set
        """
        required = {
            "name": self._name,
            "alignment": self._alignment,
            "race": self._race,
            "ability scores": self._base_ability_scores,
            "class(es)": self._classes,
        }
        missing = [field_name for field_name, value in required.items() if value is None]
        if missing:
            raise MissingFieldError(missing, entity="Character")

        character = Character(
            name=self._name,
            alignment=self._alignment,
            gender=self._gender,
            personality=self._personality,
            race=self._race,
            base_ability_scores=self._base_ability_scores,
            classes=self._classes,
            skills=self._skills,
            inventory=self._inventory,
            equipment=self._equipment,
            senses=self._senses,
            proficiencies=self._proficiencies,
        )

        logger.debug(
            "character_built",
            character=character.name,
            race=character.race_name,
            classes=character.class_details,
        )
        return character
