"""Main entry point for the Cygnus character sheet viewer."""

import argparse
import sys
from pathlib import Path

import structlog

from cygnus.config import get_settings
from cygnus.data import DataLoadError, DataValidationError, load_character, load_game_data
from cygnus.logging_config import configure_logging
from cygnus.models import AbilityName, Character, Proficiency, SkillName

logger = structlog.get_logger(__name__)

PROFICIENCY_MARKERS = {None: " ", Proficiency.PROFICIENT: "*", Proficiency.EXPERT: "E"}


def _signed(value: int) -> str:
    return f"{value:+d}"


def render_character_sheet(character: Character) -> str:
    """
    Render a character's derived values as plain text.

    Args:
        character: Character to describe

    Returns:
        Multi-line character sheet
    """
    encumbrance = character.encumbrance()
    lines = [
        character.name,
        f"{character.race_name} {character.class_details}",
        f"{character.alignment}",
        "",
        f"Armor Class: {character.armor_class()}",
        f"Hit Points: {character.current_hit_points()} / {character.max_hit_points()}",
        f"Speed: {character.walking_speed()} ft.",
        f"Initiative: {_signed(character.initiative)}",
        f"Proficiency Bonus: {_signed(character.proficiency_bonus())}",
        f"Encumbrance: {encumbrance.value.replace('_', ' ') if encumbrance else 'none'}",
        "",
        "Abilities:",
    ]

    for ability in AbilityName:
        lines.append(
            f"  {ability.abbreviation} {character.ability_score(ability):>2} "
            f"({_signed(character.ability_modifier(ability))})"
        )

    lines.append("")
    lines.append("Saving Throws:")
    for ability in AbilityName:
        marker = "*" if character.saving_throw_proficiency(ability) else " "
        lines.append(
            f" {marker}{ability.abbreviation} {_signed(character.saving_throw_modifier(ability))}"
        )

    lines.append("")
    lines.append("Skills:")
    for skill in SkillName:
        proficiency = character.skill_proficiency(skill)
        marker = PROFICIENCY_MARKERS[proficiency]
        lines.append(
            f" {marker}{skill.display_name} ({skill.default_ability.abbreviation}) "
            f"{_signed(character.skill_modifier(skill))}"
        )

    lines.extend(
        [
            "",
            f"Passive Perception: {character.passive_perception()}",
            f"Passive Investigation: {character.passive_investigation()}",
            f"Passive Insight: {character.passive_insight()}",
        ]
    )

    if character.darkvision:
        lines.append(f"Darkvision: {character.darkvision} ft.")

    lines.append("")
    lines.append(f"Languages: {character.languages_string()}")
    if character.armor_proficiencies_string():
        lines.append(f"Armor: {character.armor_proficiencies_string()}")
    if character.weapon_proficiencies_string():
        lines.append(f"Weapons: {character.weapon_proficiencies_string()}")
    if character.tool_proficiencies_string():
        lines.append(f"Tools: {character.tool_proficiencies_string()}")

    equipped = character.equipped_items()
    if equipped:
        lines.append("")
        lines.append("Equipped:")
        lines.extend(f"  {item.format_short_description()}" for item in equipped)

    carried = character.inventory_items()
    if carried:
        lines.append("")
        lines.append("Inventory:")
        lines.extend(f"  {item.format_short_description()}" for item in carried)

    feats = character.feats()
    if feats:
        lines.append("")
        lines.append("Feats:")
        lines.extend(f"  {feat.name}" for feat in feats)

    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cygnus character sheet viewer")
    parser.add_argument(
        "character",
        nargs="?",
        help="Character sheet YAML file (defaults to the configured sample character)",
    )
    parser.add_argument("--data-dir", type=Path, help="Game data directory")
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Load game data and a character sheet, then print the sheet.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit code: 0 on success, 1 if loading or building failed
    """
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)

    args = build_parser().parse_args(argv)
    data_dir = args.data_dir or settings.data_dir
    characters_dir = args.data_dir / "characters" if args.data_dir else settings.characters_dir
    sheet_path = (
        Path(args.character) if args.character else characters_dir / settings.default_character
    )

    try:
        game_data = load_game_data(data_dir)
        character = load_character(sheet_path, game_data)
    except (DataLoadError, DataValidationError) as e:
        logger.error(
            "character_load_failed",
            sheet=str(sheet_path),
            data_dir=str(data_dir),
            error=str(e),
            exc_info=True,
        )
        return 1

    print(render_character_sheet(character))
    return 0


def run() -> None:
    """
    Synchronous entry point used by the ``cygnus`` console script.
    """
    sys.exit(main())


if __name__ == "__main__":
    run()
