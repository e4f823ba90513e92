"""Physical and descriptive characteristics of a character."""

from dataclasses import dataclass

from cygnus.errors import MissingFieldError

from .character import Alignment, Gender
from .race import Size
from .units import Distance, Duration, Weight


@dataclass(frozen=True)
class Characteristics:
    alignment: Alignment
    size: Size
    eye_color: str
    height: Distance
    hair_color: str
    skin_tone: str
    age: Duration
    weight: Weight
    gender: Gender | None = None
    faith: str | None = None


class CharacteristicsBuilder:
    """Chained construction of Characteristics. Gender and faith are optional."""

    def __init__(self) -> None:
        self._alignment: Alignment | None = None
        self._gender: Gender | None = None
        self._size: Size | None = None
        self._eye_color: str | None = None
        self._height: Distance | None = None
        self._faith: str | None = None
        self._hair_color: str | None = None
        self._skin_tone: str | None = None
        self._age: Duration | None = None
        self._weight: Weight | None = None

    def alignment(self, alignment: Alignment) -> "CharacteristicsBuilder":
        self._alignment = alignment
        return self

    def gender(self, gender: Gender) -> "CharacteristicsBuilder":
        self._gender = gender
        return self

    def size(self, size: Size) -> "CharacteristicsBuilder":
        self._size = size
        return self

    def eye_color(self, eye_color: str) -> "CharacteristicsBuilder":
        self._eye_color = eye_color
        return self

    def height(self, height: Distance) -> "CharacteristicsBuilder":
        self._height = height
        return self

    def faith(self, faith: str) -> "CharacteristicsBuilder":
        self._faith = faith
        return self

    def hair_color(self, hair_color: str) -> "CharacteristicsBuilder":
        self._hair_color = hair_color
        return self

    def skin_tone(self, skin_tone: str) -> "CharacteristicsBuilder":
        self._skin_tone = skin_tone
        return self

    def age(self, age: Duration) -> "CharacteristicsBuilder":
        self._age = age
        return self

    def weight(self, weight: Weight) -> "CharacteristicsBuilder":
        self._weight = weight
        return self

    def build(self) -> Characteristics:
        """
        Build the characteristics.

        Raises:
            MissingFieldError: Naming every required field that was never set
        """
        required = {
            "alignment": self._alignment,
            "size": self._size,
            "eye_color": self._eye_color,
            "height": self._height,
            "hair_color": self._hair_color,
            "skin_tone": self._skin_tone,
            "age": self._age,
            "weight": self._weight,
        }
        missing = [field_name for field_name, value in required.items() if value is None]
        if missing:
            raise MissingFieldError(missing, entity="Characteristics")

        return Characteristics(
            alignment=self._alignment,
            size=self._size,
            eye_color=self._eye_color,
            height=self._height,
            hair_color=self._hair_color,
            skin_tone=self._skin_tone,
            age=self._age,
            weight=self._weight,
            gender=self._gender,
            faith=self._faith,
        )
