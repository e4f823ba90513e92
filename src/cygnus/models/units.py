"""Measurement units used in descriptive character data."""

from dataclasses import dataclass
from enum import StrEnum


class TimeUnit(StrEnum):
    """Units for durations (spell durations, ages)."""

    INSTANTANEOUS = "instantaneous"
    ROUNDS = "rounds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    YEARS = "years"


@dataclass(frozen=True)
class Duration:
    """An amount of time. Instantaneous durations carry no amount."""

    unit: TimeUnit
    amount: int = 0

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"Duration cannot be negative: {self.amount}")

    @classmethod
    def instantaneous(cls) -> "Duration":
        return cls(TimeUnit.INSTANTANEOUS)

    def __str__(self) -> str:
        if self.unit == TimeUnit.INSTANTANEOUS:
            return "Instantaneous"
        unit = self.unit.value if self.amount != 1 else self.unit.value.rstrip("s")
        return f"{self.amount} {unit}"


@dataclass(frozen=True)
class Distance:
    """A length in feet and inches, normalised so inches stay below 12."""

    feet: int = 0
    inches: int = 0

    def __post_init__(self) -> None:
        if self.feet < 0 or self.inches < 0:
            raise ValueError("Distance cannot be negative")
        if self.inches >= 12:
            object.__setattr__(self, "feet", self.feet + self.inches // 12)
            object.__setattr__(self, "inches", self.inches % 12)

    @property
    def total_inches(self) -> int:
        return self.feet * 12 + self.inches

    def __str__(self) -> str:
        return f"{self.feet}'{self.inches}\""


@dataclass(frozen=True)
class Weight:
    """A weight in pounds."""

    pounds: float

    def __post_init__(self) -> None:
        if self.pounds < 0:
            raise ValueError(f"Weight cannot be negative: {self.pounds}")

    def __str__(self) -> str:
        return f"{self.pounds:g} lb."
