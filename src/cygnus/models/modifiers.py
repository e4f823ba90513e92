"""Small tagged values used as multipliers by the rules models."""

from enum import Enum, IntEnum


class Proficiency(IntEnum):
    """Proficiency tier, used as a multiplier against the proficiency bonus."""

    PROFICIENT = 1
    EXPERT = 2


def proficiency_multiplier(proficiency: Proficiency | None) -> int:
    """Return 0 for no proficiency, 1 for proficient, 2 for expertise."""
    return int(proficiency) if proficiency is not None else 0


class Resistance(Enum):
    """How a creature takes a particular damage type or condition."""

    VULNERABLE = "vulnerable"
    RESISTANT = "resistant"
    IMMUNE = "immune"

    @property
    def damage_multiplier(self) -> float:
        return RESISTANCE_MULTIPLIERS[self]


RESISTANCE_MULTIPLIERS = {
    Resistance.VULNERABLE: 2.0,
    Resistance.RESISTANT: 0.5,
    Resistance.IMMUNE: 0.0,
}


class Encumbrance(Enum):
    """Carried-weight penalty tiers. An unencumbered character has no tier (None)."""

    ENCUMBERED = "encumbered"
    HEAVILY_ENCUMBERED = "heavily_encumbered"

    @property
    def speed_penalty(self) -> int:
        """Walking speed lost at this tier, in feet."""
        return ENCUMBRANCE_SPEED_PENALTY[self]


ENCUMBRANCE_SPEED_PENALTY = {
    Encumbrance.ENCUMBERED: 10,
    Encumbrance.HEAVILY_ENCUMBERED: 20,
}
