"""Armor, weapon, tool and language proficiencies."""

from dataclasses import dataclass, field

from .race import Language


@dataclass
class Proficiencies:
    """
    Free-text proficiency lists plus known languages.

    Armor, weapon and tool entries are plain names ("Light Armor",
    "Simple Weapons", "Alchemist's Supplies"); they are displayed, never
    checked against items.
    """

    armor: list[str] = field(default_factory=list)
    weapons: list[str] = field(default_factory=list)
    tools: list[str] = field(default_factory=list)
    languages: list[Language] = field(default_factory=list)

    def add_armor_proficiency(self, armor: str) -> None:
        self.armor.append(armor)

    def add_weapon_proficiency(self, weapon: str) -> None:
        self.weapons.append(weapon)

    def add_tool_proficiency(self, tool: str) -> None:
        self.tools.append(tool)

    def add_language(self, language: Language) -> None:
        if language not in self.languages:
            self.languages.append(language)

    def armor_string(self) -> str:
        return ", ".join(self.armor)

    def weapons_string(self) -> str:
        return ", ".join(self.weapons)

    def tools_string(self) -> str:
        return ", ".join(self.tools)
