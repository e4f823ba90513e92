"""Character classes and multiclass progression.

A character may take levels in several classes. The first class added is
the primary one: it alone grants saving throw proficiencies. Total level,
proficiency bonus and hit points are summed across all of them.
"""

from collections.abc import Iterable, Iterator

from cygnus.errors import MissingFieldError

from .ability import AbilityName
from .feat import Feat
from .modifiers import Proficiency
from .spell import SpellList

MAX_LEVEL = 20


class LevelOutOfBoundsError(Exception):
    """Raised when a class level falls outside 0..20."""

    def __init__(self, level: int) -> None:
        self.level = level
        super().__init__(f"Level must be between 0 and {MAX_LEVEL}, got {level}.")


class IncorrectNumberOfIncreasesError(Exception):
    """Raised when a hit point progression would exceed one entry per level."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"Cannot have more increases than maximum level ({count} > {MAX_LEVEL})."
        )


def calculate_proficiency_bonus(level: int) -> int:
    """
    Proficiency bonus for a total character level.

    Examples:
        >>> calculate_proficiency_bonus(0)
        0
        >>> calculate_proficiency_bonus(5)
        3
        >>> calculate_proficiency_bonus(17)
        6
    """
    if level <= 0:
        return 0
    return (level - 1) // 4 + 2


def _check_level(level: int) -> int:
    if not 0 <= level <= MAX_LEVEL:
        raise LevelOutOfBoundsError(level)
    return level


class HPIncreases:
    """
    Hit points rolled (or taken as average) at each class level.

    The first entry is normally the full hit die granted at level one.
    """

    def __init__(self, hit_die: int | None = None) -> None:
        self._increases: list[int] = [hit_die] if hit_die is not None else []

    @classmethod
    def from_list(cls, increases: Iterable[int]) -> "HPIncreases":
        """
        Create a progression from explicit per-level increases.

        Raises:
            IncorrectNumberOfIncreasesError: If more than 20 increases are given
        """
        values = list(increases)
        if len(values) > MAX_LEVEL:
            raise IncorrectNumberOfIncreasesError(len(values))

        progression = cls()
        progression._increases = values
        return progression

    def add_increase(self, increase: int) -> None:
        """
        Record the hit points gained at the next level.

        Raises:
            IncorrectNumberOfIncreasesError: If 20 increases are already recorded
        """
        if len(self._increases) >= MAX_LEVEL:
            raise IncorrectNumberOfIncreasesError(len(self._increases) + 1)
        self._increases.append(increase)

    def hit_points(self, constitution_modifier: int) -> int:
        """Sum of increases plus the constitution modifier once per increase. Not clamped."""
        return sum(self._increases) + constitution_modifier * len(self._increases)

    def to_list(self) -> list[int]:
        return list(self._increases)

    def __len__(self) -> int:
        return len(self._increases)


class Class:
    """A class a character has taken levels in."""

    def __init__(
        self,
        name: str,
        level: int = 0,
        saving_throw_proficiencies: dict[AbilityName, Proficiency] | None = None,
        spell_list: SpellList | None = None,
        hp_increases: HPIncreases | None = None,
        feats: list[Feat] | None = None,
    ) -> None:
        self.name = name
        self._level = _check_level(level)
        self.saving_throw_proficiencies = dict(saving_throw_proficiencies or {})
        self.spell_list = spell_list
        self.hp_increases = hp_increases if hp_increases is not None else HPIncreases()
        self._feats: list[Feat] = list(feats or [])

    @property
    def level(self) -> int:
        return self._level

    def set_level(self, level: int) -> None:
        """
        Change the class level.

        Raises:
            LevelOutOfBoundsError: If level is negative or above 20
        """
        self._level = _check_level(level)

    def get_saving_throw_proficiency(self, ability: AbilityName) -> Proficiency | None:
        return self.saving_throw_proficiencies.get(ability)

    def hit_points(self, constitution_modifier: int) -> int:
        return self.hp_increases.hit_points(constitution_modifier)

    @property
    def feats(self) -> list[Feat]:
        return list(self._feats)

    def add_feat(self, feat: Feat) -> None:
        self._feats.append(feat)

    def __str__(self) -> str:
        return f"{self.name} {self.level}"

    def __repr__(self) -> str:
        return f"Class(name={self.name!r}, level={self.level})"


class Classes:
    """Ordered class list. Index 0 is the primary class."""

    def __init__(self, classes: Iterable[Class] | None = None) -> None:
        self._classes: list[Class] = list(classes or [])

    def add_class(self, character_class: Class) -> None:
        self._classes.append(character_class)

    @property
    def primary(self) -> Class | None:
        return self._classes[0] if self._classes else None

    @property
    def level(self) -> int:
        return sum(character_class.level for character_class in self._classes)

    @property
    def proficiency_bonus(self) -> int:
        return calculate_proficiency_bonus(self.level)

    def saving_throw_proficiency(self, ability: AbilityName) -> Proficiency | None:
        """Saving throw proficiency granted by the primary class only."""
        primary = self.primary
        if primary is None:
            return None
        return primary.get_saving_throw_proficiency(ability)

    def hit_points(self, constitution_modifier: int) -> int:
        return sum(
            character_class.hit_points(constitution_modifier) for character_class in self._classes
        )

    def feats(self) -> list[Feat]:
        return [feat for character_class in self._classes for feat in character_class.feats]

    def __iter__(self) -> Iterator[Class]:
        return iter(self._classes)

    def __len__(self) -> int:
        return len(self._classes)

    def __str__(self) -> str:
        return " / ".join(str(character_class) for character_class in self._classes)


class ClassBuilder:
    """Chained construction of a Class. Name and level are required."""

    def __init__(self) -> None:
        self._name: str | None = None
        self._level: int | None = None
        self._saving_throw_proficiencies: dict[AbilityName, Proficiency] = {}
        self._spell_list: SpellList | None = None
        self._hp_increases: HPIncreases | None = None
        self._feats: list[Feat] = []

    def name(self, name: str) -> "ClassBuilder":
        if not name:
            raise ValueError("Class name cannot be empty")
        self._name = name
        return self

    def level(self, level: int) -> "ClassBuilder":
        self._level = _check_level(level)
        return self

    def add_saving_throw_proficiency(self, ability: AbilityName) -> "ClassBuilder":
        self._saving_throw_proficiencies[AbilityName(ability)] = Proficiency.PROFICIENT
        return self

    def spell_list(self, spell_list: SpellList) -> "ClassBuilder":
        self._spell_list = spell_list
        return self

    def hp_increases(self, hp_increases: HPIncreases) -> "ClassBuilder":
        self._hp_increases = hp_increases
        return self

    def add_feat(self, feat: Feat) -> "ClassBuilder":
        self._feats.append(feat)
        return self

    def build(self) -> Class:
        """
        Build the class.

        Raises:
            MissingFieldError: Listing every missing required field
        """
        missing = []
        if self._name is None:
            missing.append("name")
        if self._level is None:
            missing.append("level")
        if missing:
            raise MissingFieldError(missing, entity="Class")

        return Class(
            name=self._name,
            level=self._level,
            saving_throw_proficiencies=self._saving_throw_proficiencies,
            spell_list=self._spell_list,
            hp_increases=self._hp_increases,
            feats=self._feats,
        )
