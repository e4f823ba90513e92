"""Skills and skill proficiency.

Every skill is keyed to one default ability. The mapping is fixed game
data, not something a character can change.
"""

from enum import StrEnum

from .ability import AbilityName
from .modifiers import Proficiency, proficiency_multiplier


class SkillName(StrEnum):
    """The eighteen skills."""

    ACROBATICS = "acrobatics"
    ANIMAL_HANDLING = "animal_handling"
    ARCANA = "arcana"
    ATHLETICS = "athletics"
    DECEPTION = "deception"
    HISTORY = "history"
    INSIGHT = "insight"
    INTIMIDATION = "intimidation"
    INVESTIGATION = "investigation"
    MEDICINE = "medicine"
    NATURE = "nature"
    PERCEPTION = "perception"
    PERFORMANCE = "performance"
    PERSUASION = "persuasion"
    RELIGION = "religion"
    SLEIGHT_OF_HAND = "sleight_of_hand"
    STEALTH = "stealth"
    SURVIVAL = "survival"

    @property
    def default_ability(self) -> AbilityName:
        return SKILL_TO_ABILITY[self]

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


SKILL_TO_ABILITY: dict[SkillName, AbilityName] = {
    SkillName.ACROBATICS: AbilityName.DEXTERITY,
    SkillName.ANIMAL_HANDLING: AbilityName.WISDOM,
    SkillName.ARCANA: AbilityName.INTELLIGENCE,
    SkillName.ATHLETICS: AbilityName.STRENGTH,
    SkillName.DECEPTION: AbilityName.CHARISMA,
    SkillName.HISTORY: AbilityName.INTELLIGENCE,
    SkillName.INSIGHT: AbilityName.WISDOM,
    SkillName.INTIMIDATION: AbilityName.CHARISMA,
    SkillName.INVESTIGATION: AbilityName.INTELLIGENCE,
    SkillName.MEDICINE: AbilityName.WISDOM,
    SkillName.NATURE: AbilityName.INTELLIGENCE,
    SkillName.PERCEPTION: AbilityName.WISDOM,
    SkillName.PERFORMANCE: AbilityName.CHARISMA,
    SkillName.PERSUASION: AbilityName.CHARISMA,
    SkillName.RELIGION: AbilityName.INTELLIGENCE,
    SkillName.SLEIGHT_OF_HAND: AbilityName.DEXTERITY,
    SkillName.STEALTH: AbilityName.DEXTERITY,
    SkillName.SURVIVAL: AbilityName.WISDOM,
}


def calculate_skill_modifier(
    ability_modifier: int, proficiency_bonus: int, proficiency: Proficiency | None
) -> int:
    """
    Calculate a skill check modifier.

    Args:
        ability_modifier: Modifier of the skill's ability
        proficiency_bonus: Character's proficiency bonus
        proficiency: Proficiency tier in the skill, None if untrained

    Returns:
        ability_modifier + proficiency_bonus * (0, 1 or 2)
    """
    return ability_modifier + proficiency_bonus * proficiency_multiplier(proficiency)


class Skills:
    """Proficiency state for every skill. All skills start untrained."""

    def __init__(self) -> None:
        self._proficiencies: dict[SkillName, Proficiency | None] = {
            skill: None for skill in SkillName
        }

    def get_proficiency(self, skill: SkillName) -> Proficiency | None:
        return self._proficiencies[SkillName(skill)]

    def set_proficiency(self, skill: SkillName, proficiency: Proficiency | None) -> None:
        self._proficiencies[SkillName(skill)] = proficiency

    def get_modifier(self, skill: SkillName, ability_modifier: int, proficiency_bonus: int) -> int:
        return calculate_skill_modifier(
            ability_modifier, proficiency_bonus, self.get_proficiency(skill)
        )

    def proficient_skills(self) -> dict[SkillName, Proficiency]:
        """Skills with any proficiency, in canonical order."""
        return {
            skill: proficiency
            for skill, proficiency in self._proficiencies.items()
            if proficiency is not None
        }
