"""Ability scores and modifiers.

Six fixed abilities, each with an integer score. The modifier formula is the
usual fifth-edition one: score // 2 - 5, so 10 and 11 give +0, 8 gives -1
and 20 gives +5.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum


class AbilityName(StrEnum):
    """Core character abilities."""

    STRENGTH = "strength"
    DEXTERITY = "dexterity"
    CONSTITUTION = "constitution"
    INTELLIGENCE = "intelligence"
    WISDOM = "wisdom"
    CHARISMA = "charisma"

    @property
    def abbreviation(self) -> str:
        """Three letter abbreviation, e.g. "STR"."""
        return self.value[:3].upper()

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


def calculate_modifier(score: int) -> int:
    """Calculate the ability modifier for a score.

    Args:
        score: The ability score (non-negative)

    Returns:
        The modifier: score // 2 - 5

    Examples:
        >>> calculate_modifier(10)
        0
        >>> calculate_modifier(8)
        -1
        >>> calculate_modifier(20)
        5
    """
    return score // 2 - 5


@dataclass(frozen=True)
class Ability:
    """A single ability score."""

    score: int

    def __post_init__(self) -> None:
        if self.score < 0:
            raise ValueError(f"Ability score cannot be negative: {self.score}")

    @property
    def modifier(self) -> int:
        return calculate_modifier(self.score)

    def __add__(self, other: "Ability") -> "Ability":
        return Ability(self.score + other.score)


class Abilities:
    """
    A partial set of ability scores.

    Not every ability has to be present: a race only carries the abilities it
    improves. Missing abilities read as None rather than raising.
    """

    def __init__(self, scores: dict[AbilityName, int] | None = None) -> None:
        self._scores: dict[AbilityName, Ability] = {}
        for ability, score in (scores or {}).items():
            self.set_score(ability, score)

    @classmethod
    def from_scores(
        cls,
        strength: int | None = None,
        dexterity: int | None = None,
        constitution: int | None = None,
        intelligence: int | None = None,
        wisdom: int | None = None,
        charisma: int | None = None,
    ) -> "Abilities":
        """Create an Abilities set from keyword scores, skipping the ones left as None."""
        given = {
            AbilityName.STRENGTH: strength,
            AbilityName.DEXTERITY: dexterity,
            AbilityName.CONSTITUTION: constitution,
            AbilityName.INTELLIGENCE: intelligence,
            AbilityName.WISDOM: wisdom,
            AbilityName.CHARISMA: charisma,
        }
        return cls({ability: score for ability, score in given.items() if score is not None})

    @classmethod
    def uniform(cls, score: int) -> "Abilities":
        """Create an Abilities set with every ability at the same score."""
        return cls({ability: score for ability in AbilityName})

    def set_score(self, ability: AbilityName, score: int) -> None:
        """
        Set the score for an ability, replacing any previous value.

        Raises:
            ValueError: If the score is negative
        """
        self._scores[AbilityName(ability)] = Ability(score)

    def get_score(self, ability: AbilityName) -> int | None:
        entry = self._scores.get(ability)
        return entry.score if entry else None

    def get_modifier(self, ability: AbilityName) -> int | None:
        entry = self._scores.get(ability)
        return entry.modifier if entry else None

    def copy(self) -> "Abilities":
        return Abilities({ability: entry.score for ability, entry in self})

    def to_dict(self) -> dict[str, int]:
        """Return the scores keyed by ability name, in canonical order."""
        return {ability.value: entry.score for ability, entry in self}

    def __add__(self, other: "Abilities") -> "Abilities":
        # Both present: sum. One present: that value. Neither: absent.
        combined = Abilities()
        for ability in AbilityName:
            mine = self._scores.get(ability)
            theirs = other._scores.get(ability)
            if mine is not None and theirs is not None:
                combined._scores[ability] = mine + theirs
            elif mine is not None:
                combined._scores[ability] = mine
            elif theirs is not None:
                combined._scores[ability] = theirs
        return combined

    def __iter__(self) -> Iterator[tuple[AbilityName, Ability]]:
        for ability in AbilityName:
            if ability in self._scores:
                yield ability, self._scores[ability]

    def __len__(self) -> int:
        return len(self._scores)

    def __contains__(self, ability: object) -> bool:
        return ability in self._scores

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Abilities):
            return NotImplemented
        return self._scores == other._scores

    def __repr__(self) -> str:
        return f"Abilities({self.to_dict()!r})"
