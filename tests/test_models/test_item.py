"""Tests for items, armor ratings and the inventory."""

import pytest

from cygnus.errors import MissingFieldError
from cygnus.models import ArmorClass, Item, ItemBuilder, ItemNotFoundError, Items


class TestArmorClass:
    """Tests for how much AC each armor category contributes."""

    def test_light_adds_full_dexterity(self):
        """Light armor adds the whole dex modifier, positive or negative."""
        assert ArmorClass.light(11).contribution(3) == 14
        assert ArmorClass.light(11).contribution(-1) == 10

    def test_medium_caps_dexterity(self):
        """Medium armor adds at most +2."""
        assert ArmorClass.medium(14).contribution(3) == 16
        assert ArmorClass.medium(14).contribution(1) == 15
        assert ArmorClass.medium(14).contribution(-1) == 13

    def test_heavy_ignores_dexterity(self):
        """Heavy armor ignores dex entirely."""
        assert ArmorClass.heavy(16).contribution(5) == 16
        assert ArmorClass.heavy(16).contribution(-2) == 16


class TestItem:
    """Tests for Item."""

    def test_negative_weight_rejected(self):
        """Items cannot weigh less than nothing."""
        with pytest.raises(ValueError):
            Item("Feather", weight=-1)

    def test_types_and_description(self, rapier):
        """Type tags and short description."""
        assert rapier.has_type("weapon")
        assert not rapier.has_type("armor")
        assert not rapier.is_armor
        assert rapier.format_short_description() == "Rapier (2 lbs)"


class TestItemBuilder:
    """Tests for ItemBuilder."""

    def test_build(self):
        """All fields are carried through."""
        item = (
            ItemBuilder()
            .name("Shield")
            .weight(6)
            .add_type("hand")
            .armor_class(ArmorClass.heavy(2))
            .build()
        )
        assert item.name == "Shield"
        assert item.weight == 6
        assert item.types == frozenset({"hand"})
        assert item.armor_class == ArmorClass.heavy(2)

    def test_missing_name(self):
        """Building without a name lists the missing field."""
        with pytest.raises(MissingFieldError) as exc_info:
            ItemBuilder().weight(3).build()
        assert exc_info.value.fields == ["name"]

    def test_negative_weight(self):
        """Negative weight is rejected immediately."""
        with pytest.raises(ValueError):
            ItemBuilder().weight(-5)


class TestItems:
    """Tests for the carried inventory."""

    def test_total_weight(self, rapier, chain_mail):
        """Weight is the sum of carried items."""
        items = Items([rapier, chain_mail])
        assert items.total_weight() == 57
        assert len(items) == 2

    def test_remove_item(self, rapier, chain_mail):
        """Removing by name returns the item."""
        items = Items([rapier, chain_mail])
        assert items.remove_item("Rapier") == rapier
        assert list(items) == [chain_mail]

    def test_remove_missing_item(self):
        """Removing an absent item raises with the name."""
        with pytest.raises(ItemNotFoundError) as exc_info:
            Items().remove_item("Bag of Holding")
        assert exc_info.value.name == "Bag of Holding"
