"""Bundled game data and the YAML loader that reads it."""

from .loader import (
    CharacterSheet,
    ClassTemplate,
    DataLoadError,
    DataValidationError,
    GameData,
    ItemTemplate,
    RaceTemplate,
    SpellTemplate,
    create_character_from_sheet,
    create_class,
    load_character,
    load_character_sheet,
    load_game_data,
)

__all__ = [
    "CharacterSheet",
    "ClassTemplate",
    "DataLoadError",
    "DataValidationError",
    "GameData",
    "ItemTemplate",
    "RaceTemplate",
    "SpellTemplate",
    "create_character_from_sheet",
    "create_class",
    "load_character",
    "load_character_sheet",
    "load_game_data",
]
