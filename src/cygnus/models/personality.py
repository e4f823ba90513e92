"""Roleplaying personality notes."""

from dataclasses import dataclass, field


@dataclass
class Personality:
    traits: list[str] = field(default_factory=list)
    ideals: list[str] = field(default_factory=list)
    bonds: list[str] = field(default_factory=list)
    flaws: list[str] = field(default_factory=list)

    def add_trait(self, personality_trait: str) -> "Personality":
        self.traits.append(personality_trait)
        return self

    def add_ideal(self, ideal: str) -> "Personality":
        self.ideals.append(ideal)
        return self

    def add_bond(self, bond: str) -> "Personality":
        self.bonds.append(bond)
        return self

    def add_flaw(self, flaw: str) -> "Personality":
        self.flaws.append(flaw)
        return self

    def is_empty(self) -> bool:
        return not (self.traits or self.ideals or self.bonds or self.flaws)
