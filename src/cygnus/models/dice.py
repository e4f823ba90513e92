"""Dice roll notation."""

import re
from dataclasses import dataclass

ROLL_PATTERN = re.compile(r"^\s*(\d+)\s*d\s*(\d+)\s*(?:([+-])\s*(\d+))?\s*$", re.IGNORECASE)


@dataclass(frozen=True)
class Roll:
    """A dice expression such as 2d10 or 6d8+3. Cygnus never rolls it, only describes it."""

    count: int
    sides: int
    modifier: int = 0

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"Dice count cannot be negative: {self.count}")
        if self.sides < 1:
            raise ValueError(f"Dice must have at least one side: {self.sides}")

    @classmethod
    def parse(cls, notation: str) -> "Roll":
        """
        Parse dice notation.

        Args:
            notation: String like "1d10", "6d8+3" or "1d4 - 1"

        Returns:
            The parsed Roll

        Raises:
            ValueError: If the notation is not valid
        """
        match = ROLL_PATTERN.match(notation)
        if not match:
            raise ValueError(f"Invalid dice notation: {notation!r}")

        count, sides, sign, amount = match.groups()
        modifier = int(amount) if amount else 0
        if sign == "-":
            modifier = -modifier
        return cls(int(count), int(sides), modifier)

    @property
    def minimum(self) -> int:
        return self.count + self.modifier

    @property
    def maximum(self) -> int:
        return self.count * self.sides + self.modifier

    @property
    def average(self) -> float:
        return self.count * (self.sides + 1) / 2 + self.modifier

    def __str__(self) -> str:
        if self.modifier > 0:
            return f"{self.count}d{self.sides}+{self.modifier}"
        if self.modifier < 0:
            return f"{self.count}d{self.sides}{self.modifier}"
        return f"{self.count}d{self.sides}"
