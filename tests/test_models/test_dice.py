"""Tests for dice notation."""

import pytest

from cygnus.models import Roll


class TestRoll:
    """Tests for parsing and describing dice rolls."""

    def test_parse_simple(self):
        """Parse NdS."""
        assert Roll.parse("2d10") == Roll(2, 10)

    def test_parse_modifiers(self):
        """Parse positive and negative flat modifiers."""
        assert Roll.parse("6d8+3") == Roll(6, 8, 3)
        assert Roll.parse("1d4 - 1") == Roll(1, 4, -1)

    def test_parse_invalid(self):
        """Garbage notation is rejected."""
        with pytest.raises(ValueError):
            Roll.parse("d20")
        with pytest.raises(ValueError):
            Roll.parse("two dice")

    def test_str(self):
        """Rolls render back to notation."""
        assert str(Roll(2, 10)) == "2d10"
        assert str(Roll(6, 8, 3)) == "6d8+3"
        assert str(Roll(1, 4, -1)) == "1d4-1"

    def test_bounds_and_average(self):
        """Minimum, maximum and average."""
        roll = Roll(3, 4, 3)
        assert roll.minimum == 6
        assert roll.maximum == 15
        assert roll.average == 10.5

    def test_zero_sides_rejected(self):
        """Dice need at least one side."""
        with pytest.raises(ValueError):
            Roll(1, 0)
