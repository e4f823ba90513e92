"""
Game data loader for Cygnus.

Loads races, classes, items and spells from YAML files, validates them with
pydantic templates and turns them into rules models. Character sheets are
loaded the same way and resolved against the loaded game data.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from cygnus.errors import MissingFieldError
from cygnus.models import (
    Abilities,
    AbilityName,
    Alignment,
    ArmorCategory,
    ArmorClass,
    AttackKind,
    Character,
    CharacterBuilder,
    CharacterError,
    Class,
    ClassBuilder,
    Component,
    Condition,
    Conformity,
    CreatureType,
    DamageType,
    Duration,
    Feat,
    Gender,
    HPIncreases,
    IncorrectNumberOfIncreasesError,
    Item,
    ItemBuilder,
    Language,
    LevelOutOfBoundsError,
    Morality,
    Personality,
    Proficiency,
    Race,
    RaceBuilder,
    Resistance,
    Roll,
    School,
    Senses,
    Size,
    SkillName,
    Spell,
    SpellList,
    TimeUnit,
    accepts_any,
    accepts_types,
)
from cygnus.utils import LowerBoundMap

logger = structlog.get_logger(__name__)

RACES_FILE = "races.yaml"
CLASSES_FILE = "classes.yaml"
ITEMS_FILE = "items.yaml"
SPELLS_FILE = "spells.yaml"


class DataLoadError(Exception):
    """Raised when a data file is missing, unparseable or has the wrong shape."""

    pass


class DataValidationError(Exception):
    """Raised when data fails validation or references something that does not exist."""

    pass


# ----------------------------------------------------------------------------
# Templates
# ----------------------------------------------------------------------------


class FeatTemplate(BaseModel):
    name: str = Field(..., description="Feat name")
    description: str = Field(default="", description="Rules text")


class RaceTemplate(BaseModel):
    """
    Race definition loaded from YAML data.

    Attributes:
        id: Unique identifier referenced by character sheets (e.g., "shadar-kai")
        name: Display name (e.g., "Shadar-kai")
        abilities: Ability score bonuses keyed by ability name
        damage_resistances: Damage type to vulnerable/resistant/immune
        condition_resistances: Condition to resistant/immune
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., description="Unique race identifier")
    name: str = Field(..., description="Display name of the race")
    creature_type: CreatureType = Field(
        default=CreatureType.HUMANOID, description="Creature type"
    )
    size: Size = Field(default=Size.MEDIUM, description="Size category")
    walking_speed: int = Field(default=30, ge=0, description="Base walking speed in feet")
    abilities: dict[AbilityName, int] = Field(
        default_factory=dict, description="Ability score bonuses"
    )
    damage_resistances: dict[DamageType, Resistance] = Field(
        default_factory=dict, description="Damage resistances, immunities and vulnerabilities"
    )
    condition_resistances: dict[Condition, Resistance] = Field(
        default_factory=dict, description="Condition resistances and immunities"
    )
    languages: list[Language] = Field(default_factory=list, description="Racial languages")
    feats: list[FeatTemplate] = Field(default_factory=list, description="Racial feats")


class ClassTemplate(BaseModel):
    """
    Class definition loaded from YAML data.

    Levels and hit point rolls belong to a character, so they live on the
    character sheet rather than here.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., description="Unique class identifier")
    name: str = Field(..., description="Display name of the class")
    hit_die: int = Field(..., gt=0, description="Sides of the class hit die")
    saving_throws: list[AbilityName] = Field(
        default_factory=list, description="Saving throw proficiencies"
    )
    spells: list[str] | None = Field(
        default=None, description="Spell IDs on the class spell list; omit for non-casters"
    )
    feats: list[FeatTemplate] = Field(default_factory=list, description="Class feats")


class ArmorTemplate(BaseModel):
    category: ArmorCategory = Field(..., description="light, medium or heavy")
    base: int = Field(..., ge=0, description="Base armor class")


class ItemTemplate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., description="Unique item identifier")
    name: str = Field(..., description="Display name of the item")
    weight: float = Field(default=0, ge=0, description="Weight in pounds")
    types: list[str] = Field(default_factory=list, description="Free-text type tags")
    armor: ArmorTemplate | None = Field(default=None, description="Armor rating, if any")


class DurationTemplate(BaseModel):
    unit: TimeUnit = Field(default=TimeUnit.INSTANTANEOUS, description="Time unit")
    amount: int = Field(default=0, ge=0, description="Number of units")


class SpellTemplate(BaseModel):
    """
    Spell definition loaded from YAML data.

    The damage mapping is keyed by the level at which each roll starts to
    apply: character level for cantrips, slot level for levelled spells.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., description="Unique spell identifier")
    name: str = Field(..., description="Display name of the spell")
    level: int = Field(..., ge=0, le=9, description="Spell level, 0 for cantrips")
    school: School = Field(..., description="School of magic")
    casting_time: str = Field(default="1 action", description="Casting time")
    range_feet: int | None = Field(default=None, ge=0, description="Range in feet")
    components: list[Component] = Field(default_factory=list, description="V, S and/or M")
    duration: DurationTemplate = Field(
        default_factory=DurationTemplate, description="Spell duration"
    )
    concentration: bool = Field(default=False, description="Requires concentration")
    description: str = Field(default="", description="Rules text")
    attack: AttackKind | None = Field(default=None, description="melee, ranged or save")
    save_ability: AbilityName | None = Field(default=None, description="Ability for saves")
    damage_type: DamageType | None = Field(default=None, description="Damage type dealt")
    damage: dict[int, str] = Field(
        default_factory=dict, description="Level threshold to dice notation"
    )

    @field_validator("damage")
    @classmethod
    def validate_damage_rolls(cls, value: dict[int, str]) -> dict[int, str]:
        for notation in value.values():
            Roll.parse(notation)
        return value


class AlignmentTemplate(BaseModel):
    conformity: Conformity
    morality: Morality


class SheetClass(BaseModel):
    id: str = Field(..., description="Class ID from classes.yaml")
    level: int = Field(..., description="Levels taken in this class")
    hp_increases: list[int] | None = Field(
        default=None, description="Hit points gained per level; defaults to the hit die alone"
    )


class SheetSlot(BaseModel):
    name: str = Field(..., description="Slot name (e.g., 'armor', 'left hand')")
    accepts: list[str] = Field(
        default_factory=list, description="Item type tags accepted; empty accepts anything"
    )


class SheetProficiencies(BaseModel):
    armor: list[str] = Field(default_factory=list)
    weapons: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
    languages: list[Language] = Field(default_factory=list)


class SheetPersonality(BaseModel):
    traits: list[str] = Field(default_factory=list)
    ideals: list[str] = Field(default_factory=list)
    bonds: list[str] = Field(default_factory=list)
    flaws: list[str] = Field(default_factory=list)


class SheetSenses(BaseModel):
    blindsight: int | None = Field(default=None, ge=0)
    darkvision: int | None = Field(default=None, ge=0)
    tremorsense: int | None = Field(default=None, ge=0)
    truesight: int | None = Field(default=None, ge=0)


class CharacterSheet(BaseModel):
    """
    Character sheet loaded from YAML.

    Attributes:
        race: Race ID from races.yaml
        classes: Class entries in order; the first is the primary class
        abilities: Base ability scores before racial bonuses
        skills: Skill name to proficient/expert
        slots: Equipment slots in declaration order
        equipped: Slot name to item ID
        inventory: Carried item IDs
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, description="Character name")
    alignment: AlignmentTemplate = Field(..., description="Conformity and morality")
    gender: Gender | None = Field(default=None, description="Gender")
    race: str = Field(..., description="Race ID")
    classes: list[SheetClass] = Field(..., min_length=1, description="Class entries")
    abilities: dict[AbilityName, int] = Field(..., description="Base ability scores")
    skills: dict[SkillName, str] = Field(default_factory=dict, description="Skill proficiencies")
    slots: list[SheetSlot] = Field(default_factory=list, description="Equipment slots")
    equipped: dict[str, str] = Field(default_factory=dict, description="Slot name to item ID")
    inventory: list[str] = Field(default_factory=list, description="Carried item IDs")
    senses: SheetSenses = Field(default_factory=SheetSenses, description="Special senses")
    proficiencies: SheetProficiencies = Field(
        default_factory=SheetProficiencies, description="Armor, weapon, tool and languages"
    )
    personality: SheetPersonality = Field(
        default_factory=SheetPersonality, description="Traits, ideals, bonds and flaws"
    )

    @field_validator("skills")
    @classmethod
    def validate_skill_tiers(cls, value: dict[SkillName, str]) -> dict[SkillName, str]:
        for skill, tier in value.items():
            if tier not in PROFICIENCY_TIERS:
                raise ValueError(
                    f"Skill '{skill}' has invalid proficiency '{tier}' "
                    f"(must be one of: {', '.join(PROFICIENCY_TIERS)})"
                )
        return value


PROFICIENCY_TIERS = {
    "proficient": Proficiency.PROFICIENT,
    "expert": Proficiency.EXPERT,
}


@dataclass
class GameData:
    """Everything loaded from a data directory, keyed by ID."""

    races: dict[str, Race] = field(default_factory=dict)
    classes: dict[str, ClassTemplate] = field(default_factory=dict)
    items: dict[str, Item] = field(default_factory=dict)
    spells: dict[str, Spell] = field(default_factory=dict)


# ----------------------------------------------------------------------------
# File loading
# ----------------------------------------------------------------------------


def load_yaml_file(file_path: Path, key: str) -> Any:
    """
    Load a YAML file and return the value stored under its top-level key.

    Args:
        file_path: Path to the YAML file
        key: Required top-level key (e.g., "races")

    Returns:
        The value under the key

    Raises:
        DataLoadError: If the file cannot be read, parsed or lacks the key
    """
    try:
        with open(file_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise DataLoadError(f"File not found: {file_path}") from e
    except UnicodeDecodeError as e:
        raise DataLoadError(f"Invalid encoding in {file_path}: {e}") from e
    except yaml.YAMLError as e:
        raise DataLoadError(f"YAML parsing error in {file_path}: {e}") from e
    except OSError as e:
        raise DataLoadError(f"Error loading {file_path}: {e}") from e

    if not data:
        raise DataLoadError(f"Empty YAML file: {file_path}")

    if not isinstance(data, dict) or key not in data:
        raise DataLoadError(f"Missing '{key}' key in {file_path}")

    return data[key]


def load_yaml_list(file_path: Path, key: str) -> list[dict[str, Any]]:
    """
    Load a YAML file whose top-level key holds a list of definitions.

    Raises:
        DataLoadError: If the file cannot be loaded or the key is not a list
    """
    entries = load_yaml_file(file_path, key)
    if not isinstance(entries, list):
        raise DataLoadError(f"'{key}' must be a list in {file_path}")
    return entries


def _validate_templates(
    model: type[BaseModel], entries: list[dict[str, Any]], file_path: Path
) -> list[Any]:
    templates = []
    seen_ids: set[str] = set()

    for entry in entries:
        try:
            template = model.model_validate(entry)
        except ValidationError as e:
            entry_id = entry.get("id", "unknown") if isinstance(entry, dict) else "unknown"
            raise DataValidationError(f"Invalid entry '{entry_id}' in {file_path}: {e}") from e

        if template.id in seen_ids:
            logger.warning("duplicate_id", id=template.id, file=str(file_path))
            continue

        seen_ids.add(template.id)
        templates.append(template)

    return templates


# ----------------------------------------------------------------------------
# Template conversion
# ----------------------------------------------------------------------------


def create_race_from_template(template: RaceTemplate) -> Race:
    builder = (
        RaceBuilder()
        .name(template.name)
        .creature_type(template.creature_type)
        .size(template.size)
        .walking_speed(template.walking_speed)
    )

    for ability, bonus in template.abilities.items():
        builder.add_ability(ability, bonus)

    damage_setters = {
        Resistance.RESISTANT: builder.add_damage_resistance,
        Resistance.IMMUNE: builder.add_damage_immunity,
        Resistance.VULNERABLE: builder.add_damage_vulnerability,
    }
    for damage_type, resistance in template.damage_resistances.items():
        damage_setters[resistance](damage_type)

    for condition, resistance in template.condition_resistances.items():
        if resistance == Resistance.IMMUNE:
            builder.add_condition_immunity(condition)
        elif resistance == Resistance.RESISTANT:
            builder.add_condition_resistance(condition)
        else:
            raise DataValidationError(
                f"Race '{template.id}' cannot be vulnerable to condition '{condition}'"
            )

    for language in template.languages:
        builder.add_language(language)

    for feat in template.feats:
        builder.add_feat(Feat(feat.name, feat.description))

    return builder.build()


def create_item_from_template(template: ItemTemplate) -> Item:
    builder = ItemBuilder().name(template.name).weight(template.weight)

    for item_type in template.types:
        builder.add_type(item_type)

    if template.armor is not None:
        builder.armor_class(ArmorClass(template.armor.category, template.armor.base))

    return builder.build()


def create_spell_from_template(template: SpellTemplate) -> Spell:
    """
    Create a Spell from its template.

    Raises:
        DataValidationError: If the spell definition is inconsistent
    """
    damage_rolls = LowerBoundMap(
        (threshold, Roll.parse(notation)) for threshold, notation in template.damage.items()
    )

    try:
        return Spell(
            name=template.name,
            level=template.level,
            school=template.school,
            casting_time=template.casting_time,
            range_feet=template.range_feet,
            components=tuple(template.components),
            duration=Duration(template.duration.unit, template.duration.amount),
            concentration=template.concentration,
            description=template.description,
            attack_kind=template.attack,
            save_ability=template.save_ability,
            damage_type=template.damage_type,
            damage_rolls=damage_rolls,
        )
    except ValueError as e:
        raise DataValidationError(f"Invalid spell '{template.id}': {e}") from e


def create_class(
    template: ClassTemplate,
    level: int,
    spells: dict[str, Spell],
    hp_increases: list[int] | None = None,
) -> Class:
    """
    Create a Class at a given level from its template.

    Args:
        template: Class definition
        level: Levels taken in the class
        spells: Loaded spells keyed by ID, used to resolve the spell list
        hp_increases: Hit points gained per level; None means only the hit die

    Returns:
        A new Class

    Raises:
        DataValidationError: If the level or hit points are out of bounds, or a spell is unknown
    """
    builder = ClassBuilder().name(template.name)

    try:
        builder.level(level)
        builder.hp_increases(
            HPIncreases.from_list(hp_increases)
            if hp_increases is not None
            else HPIncreases(template.hit_die)
        )
    except (LevelOutOfBoundsError, IncorrectNumberOfIncreasesError) as e:
        raise DataValidationError(f"Class '{template.id}': {e}") from e

    for ability in template.saving_throws:
        builder.add_saving_throw_proficiency(ability)

    if template.spells is not None:
        spell_list = SpellList()
        for spell_id in template.spells:
            if spell_id not in spells:
                raise DataValidationError(
                    f"Class '{template.id}' references unknown spell '{spell_id}'"
                )
            spell_list.add_spell(spells[spell_id])
        builder.spell_list(spell_list)

    for feat in template.feats:
        builder.add_feat(Feat(feat.name, feat.description))

    return builder.build()


# ----------------------------------------------------------------------------
# Game data
# ----------------------------------------------------------------------------


def load_races(file_path: Path) -> dict[str, Race]:
    """
    Load race definitions.

    Raises:
        DataLoadError: If the file cannot be loaded
        DataValidationError: If a race definition is invalid
    """
    templates = _validate_templates(RaceTemplate, load_yaml_list(file_path, "races"), file_path)
    races = {}
    for template in templates:
        try:
            races[template.id] = create_race_from_template(template)
        except ValueError as e:
            raise DataValidationError(f"Invalid race '{template.id}' in {file_path}: {e}") from e
    logger.info("races_loaded", count=len(races), file=str(file_path))
    return races


def load_class_templates(file_path: Path) -> dict[str, ClassTemplate]:
    """
    Load class definitions.

    Raises:
        DataLoadError: If the file cannot be loaded
        DataValidationError: If a class definition is invalid
    """
    templates = _validate_templates(ClassTemplate, load_yaml_list(file_path, "classes"), file_path)
    classes = {template.id: template for template in templates}
    logger.info("classes_loaded", count=len(classes), file=str(file_path))
    return classes


def load_items(file_path: Path) -> dict[str, Item]:
    """
    Load item definitions.

    Raises:
        DataLoadError: If the file cannot be loaded
        DataValidationError: If an item definition is invalid
    """
    templates = _validate_templates(ItemTemplate, load_yaml_list(file_path, "items"), file_path)
    items = {template.id: create_item_from_template(template) for template in templates}
    logger.info("items_loaded", count=len(items), file=str(file_path))
    return items


def load_spells(file_path: Path) -> dict[str, Spell]:
    """
    Load spell definitions.

    Raises:
        DataLoadError: If the file cannot be loaded
        DataValidationError: If a spell definition is invalid
    """
    templates = _validate_templates(SpellTemplate, load_yaml_list(file_path, "spells"), file_path)
    spells = {template.id: create_spell_from_template(template) for template in templates}
    logger.info("spells_loaded", count=len(spells), file=str(file_path))
    return spells


def load_game_data(data_dir: Path) -> GameData:
    """
    Load every game data file from a directory.

    Class spell lists are checked against the loaded spells so that a bad
    reference fails here rather than when a character is built.

    Args:
        data_dir: Directory containing races.yaml, classes.yaml, items.yaml and spells.yaml

    Returns:
        GameData with all definitions keyed by ID

    Raises:
        DataLoadError: If the directory or a file cannot be loaded
        DataValidationError: If any definition is invalid
    """
    if not data_dir.is_dir():
        raise DataLoadError(f"Not a directory: {data_dir}")

    spells = load_spells(data_dir / SPELLS_FILE)
    classes = load_class_templates(data_dir / CLASSES_FILE)

    for template in classes.values():
        for spell_id in template.spells or []:
            if spell_id not in spells:
                raise DataValidationError(
                    f"Class '{template.id}' references unknown spell '{spell_id}'"
                )

    game_data = GameData(
        races=load_races(data_dir / RACES_FILE),
        classes=classes,
        items=load_items(data_dir / ITEMS_FILE),
        spells=spells,
    )

    logger.info(
        "game_data_loaded",
        data_dir=str(data_dir),
        races=len(game_data.races),
        classes=len(game_data.classes),
        items=len(game_data.items),
        spells=len(game_data.spells),
    )
    return game_data


# ----------------------------------------------------------------------------
# Character sheets
# ----------------------------------------------------------------------------


def load_character_sheet(file_path: Path) -> CharacterSheet:
    """
    Load and validate a character sheet.

    Raises:
        DataLoadError: If the file cannot be loaded
        DataValidationError: If the sheet is invalid
    """
    data = load_yaml_file(file_path, "character")
    if not isinstance(data, dict):
        raise DataLoadError(f"'character' must be a mapping in {file_path}")

    try:
        return CharacterSheet.model_validate(data)
    except ValidationError as e:
        raise DataValidationError(f"Invalid character sheet {file_path}: {e}") from e


def _lookup(collection: dict[str, Any], kind: str, item_id: str, sheet_name: str) -> Any:
    if item_id not in collection:
        raise DataValidationError(f"Character '{sheet_name}' references unknown {kind} '{item_id}'")
    return collection[item_id]


def create_character_from_sheet(sheet: CharacterSheet, game_data: GameData) -> Character:
    """
    Resolve a sheet against game data and build the character.

    Items are looked up by ID; a sheet may list the same ID several times.
    Equipped items are placed in their slots after all slots are declared.

    Raises:
        DataValidationError: If a reference is unknown or the character cannot be built
    """
    race = _lookup(game_data.races, "race", sheet.race, sheet.name)

    try:
        base_abilities = Abilities(dict(sheet.abilities))
    except ValueError as e:
        raise DataValidationError(f"Character '{sheet.name}' has invalid abilities: {e}") from e

    builder = (
        CharacterBuilder()
        .name(sheet.name)
        .alignment(Alignment(sheet.alignment.conformity, sheet.alignment.morality))
        .race(race)
        .base_ability_scores(base_abilities)
        .senses(Senses(**sheet.senses.model_dump()))
        .personality(Personality(**sheet.personality.model_dump()))
    )

    if sheet.gender is not None:
        builder.gender(sheet.gender)

    for entry in sheet.classes:
        template = _lookup(game_data.classes, "class", entry.id, sheet.name)
        builder.add_class(create_class(template, entry.level, game_data.spells, entry.hp_increases))

    for skill, tier in sheet.skills.items():
        if PROFICIENCY_TIERS[tier] == Proficiency.EXPERT:
            builder.add_skill_expertise(skill)
        else:
            builder.add_skill_proficiency(skill)

    for slot in sheet.slots:
        validator = accepts_types(*slot.accepts) if slot.accepts else accepts_any
        builder.add_equipment_slot(slot.name, validator)

    for item_id in sheet.inventory:
        builder.add_item_to_inventory(_lookup(game_data.items, "item", item_id, sheet.name))

    for armor in sheet.proficiencies.armor:
        builder.add_armor_proficiency(armor)
    for weapon in sheet.proficiencies.weapons:
        builder.add_weapon_proficiency(weapon)
    for tool in sheet.proficiencies.tools:
        builder.add_tool_proficiency(tool)
    for language in sheet.proficiencies.languages:
        builder.add_language(language)

    try:
        character = builder.build()
    except MissingFieldError as e:
        raise DataValidationError(f"Character '{sheet.name}' is incomplete: {e}") from e

    for slot_name, item_id in sheet.equipped.items():
        item = _lookup(game_data.items, "item", item_id, sheet.name)
        try:
            character.equip_item(item, slot_name)
        except CharacterError as e:
            raise DataValidationError(
                f"Character '{sheet.name}' cannot equip '{item_id}' in '{slot_name}': {e}"
            ) from e

    logger.info(
        "character_loaded",
        character=character.name,
        race=character.race_name,
        classes=character.class_details,
    )
    return character


def load_character(file_path: Path, game_data: GameData) -> Character:
    """
    Load a character sheet and build the character.

    Raises:
        DataLoadError: If the file cannot be loaded
        DataValidationError: If the sheet is invalid or references unknown data
    """
    return create_character_from_sheet(load_character_sheet(file_path), game_data)
