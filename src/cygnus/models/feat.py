"""Feats granted by classes and races."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Feat:
    """A named feat with its rules text."""

    name: str
    description: str = ""
