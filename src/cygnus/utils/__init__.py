"""Generic helpers used by the rules models."""

from .lower_bound_map import LowerBoundMap

__all__ = ["LowerBoundMap"]
