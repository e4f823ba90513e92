"""Character backgrounds.

A background grants a feature and one of three proficiency packages:
two skills with two tools, two skills with two languages, or two skills
with one tool and one language.
"""

from dataclasses import dataclass

from cygnus.errors import MissingFieldError

from .skill import SkillName


@dataclass(frozen=True)
class Feature:
    """Named background feature with its rules text."""

    name: str
    description: str


@dataclass(frozen=True)
class BackgroundProficiencies:
    """Skills, tools and languages granted by a background."""

    skills: tuple[SkillName, SkillName]
    tools: tuple[str, ...] = ()
    languages: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if len(self.tools) + len(self.languages) != 2:
            raise ValueError("A background grants exactly two tools and/or languages")

    @classmethod
    def two_skills_two_tools(
        cls, skill1: SkillName, skill2: SkillName, tool1: str, tool2: str
    ) -> "BackgroundProficiencies":
        return cls(skills=(skill1, skill2), tools=(tool1, tool2))

    @classmethod
    def two_skills_two_languages(
        cls, skill1: SkillName, skill2: SkillName, language1: str, language2: str
    ) -> "BackgroundProficiencies":
        return cls(skills=(skill1, skill2), languages=(language1, language2))

    @classmethod
    def two_skills_one_tool_one_language(
        cls, skill1: SkillName, skill2: SkillName, tool: str, language: str
    ) -> "BackgroundProficiencies":
        return cls(skills=(skill1, skill2), tools=(tool,), languages=(language,))


@dataclass(frozen=True)
class Background:
    name: str
    description: str
    feature: Feature
    proficiencies: BackgroundProficiencies


class BackgroundBuilder:
    """Chained construction of a Background. Every field is required."""

    def __init__(self) -> None:
        self._name: str | None = None
        self._description: str | None = None
        self._feature: Feature | None = None
        self._proficiencies: BackgroundProficiencies | None = None

    def name(self, name: str) -> "BackgroundBuilder":
        self._name = name
        return self

    def description(self, description: str) -> "BackgroundBuilder":
        self._description = description
        return self

    def feature(self, feature: Feature) -> "BackgroundBuilder":
        self._feature = feature
        return self

    def proficiencies(self, proficiencies: BackgroundProficiencies) -> "BackgroundBuilder":
        self._proficiencies = proficiencies
        return self

    def build(self) -> Background:
        """
        Build the background.

        Raises:
            MissingFieldError: Listing every field that was never set
        """
        required = {
            "name": self._name,
            "description": self._description,
            "feature": self._feature,
            "proficiencies": self._proficiencies,
        }
        missing = [field_name for field_name, value in required.items() if value is None]
        if missing:
            raise MissingFieldError(missing, entity="Background")

        return Background(
            name=self._name,
            description=self._description,
            feature=self._feature,
            proficiencies=self._proficiencies,
        )
