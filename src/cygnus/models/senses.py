"""Special senses and passive checks."""

from dataclasses import dataclass

PASSIVE_BASE = 10


def passive_score(skill_modifier: int) -> int:
    """Passive check value for a skill: 10 + modifier."""
    return PASSIVE_BASE + skill_modifier


@dataclass(frozen=True)
class Senses:
    """Ranges, in feet, of the special senses a character has. None means the sense is absent."""

    blindsight: int | None = None
    darkvision: int | None = None
    tremorsense: int | None = None
    truesight: int | None = None

    def __post_init__(self) -> None:
        for sense in ("blindsight", "darkvision", "tremorsense", "truesight"):
            distance = getattr(self, sense)
            if distance is not None and distance < 0:
                raise ValueError(f"{sense} range cannot be negative: {distance}")

    def passive_perception(self, perception_modifier: int) -> int:
        return passive_score(perception_modifier)

    def passive_investigation(self, investigation_modifier: int) -> int:
        return passive_score(investigation_modifier)

    def passive_insight(self, insight_modifier: int) -> int:
        return passive_score(insight_modifier)
