"""Tests for equipment slots."""

import pytest

from cygnus.models import (
    ArmorCategory,
    ArmorClass,
    InvalidItemError,
    Item,
    ItemSlots,
    Slot,
    SlotEmptyError,
    SlotFullError,
    SlotNotFoundError,
    SlotProblemError,
    accepts_any,
    accepts_armor,
    accepts_types,
)


class TestSlot:
    """Tests for a single validator-gated slot."""

    def test_equip_then_unequip_returns_item(self, rapier):
        """Unequipping hands back the same item and empties the slot."""
        slot = Slot(accepts_any)
        slot.equip(rapier)
        assert slot.item == rapier
        assert slot.unequip() == rapier
        assert slot.is_empty

    def test_equip_twice_fails_full(self, rapier):
        """A second equip before unequip fails."""
        slot = Slot(accepts_any)
        slot.equip(rapier)
        with pytest.raises(SlotFullError):
            slot.equip(rapier)

    def test_full_checked_before_validator(self, rapier, chain_mail):
        """An occupied slot reports full even for an item it would reject."""
        slot = Slot(accepts_types("hand"))
        slot.equip(rapier)
        with pytest.raises(SlotFullError):
            slot.equip(chain_mail)

    def test_unequip_fresh_slot_fails_empty(self):
        """Unequipping a fresh slot fails."""
        with pytest.raises(SlotEmptyError):
            Slot(accepts_any).unequip()

    def test_validator_rejects_item(self, rapier):
        """Items the validator refuses are not equipped."""
        slot = Slot(accepts_types("armor"))
        with pytest.raises(InvalidItemError):
            slot.equip(rapier)
        assert slot.is_empty


class TestValidators:
    """Tests for the validator helpers."""

    def test_accepts_types_matches_any_tag(self, rapier):
        """At least one tag has to match."""
        assert accepts_types("hand", "cloak")(rapier)
        assert not accepts_types("cloak")(rapier)

    def test_accepts_armor_any_category(self, chain_mail, rapier):
        """Without categories, any armored item is accepted."""
        validator = accepts_armor()
        assert validator(chain_mail)
        assert not validator(rapier)

    def test_accepts_armor_limited_categories(self, chain_mail, breastplate):
        """Categories restrict which armor fits."""
        validator = accepts_armor(ArmorCategory.LIGHT, ArmorCategory.MEDIUM)
        assert validator(breastplate)
        assert not validator(chain_mail)


class TestItemSlots:
    """Tests for named slot sets."""

    def test_unknown_slot(self, rapier):
        """Equipping into an undeclared slot fails with the slot name."""
        slots = ItemSlots()
        with pytest.raises(SlotNotFoundError) as exc_info:
            slots.equip(rapier, "tail")
        assert exc_info.value.slot == "tail"

    def test_slot_problem_wraps_original_error(self, rapier):
        """Slot failures keep the underlying error as .error and __cause__."""
        slots = ItemSlots()
        slots.add_slot("main hand")
        slots.equip(rapier, "main hand")
        with pytest.raises(SlotProblemError) as exc_info:
            slots.equip(rapier, "main hand")
        assert isinstance(exc_info.value.error, SlotFullError)
        assert exc_info.value.__cause__ is exc_info.value.error

    def test_unequip_empty_slot(self):
        """Unequipping an empty named slot is a slot problem."""
        slots = ItemSlots()
        slots.add_slot("cloak")
        with pytest.raises(SlotProblemError) as exc_info:
            slots.unequip("cloak")
        assert isinstance(exc_info.value.error, SlotEmptyError)

    def test_equipped_items_and_weight(self, rapier, chain_mail):
        """Equipped items are listed in slot order and their weight summed."""
        slots = ItemSlots()
        slots.add_slot("armor", accepts_armor())
        slots.add_slot("main hand")
        slots.add_slot("cloak")
        slots.equip(rapier, "main hand")
        slots.equip(chain_mail, "armor")
        assert slots.equipped_items() == [chain_mail, rapier]
        assert slots.total_weight() == 57
        assert slots.slot_names() == ["armor", "main hand", "cloak"]
        assert "cloak" in slots
        assert "tail" not in slots

    def test_equipped_items_is_snapshot(self, rapier):
        """Mutating the returned list does not touch the slots."""
        slots = ItemSlots()
        slots.add_slot("main hand")
        slots.equip(rapier, "main hand")
        slots.equipped_items().clear()
        assert slots.get_item("main hand") == rapier

    def test_has_item_matching(self, rapier):
        """Predicates run over equipped items only."""
        slots = ItemSlots()
        slots.add_slot("main hand")
        assert not slots.has_item_matching(lambda item: item.has_type("weapon"))
        slots.equip(rapier, "main hand")
        assert slots.has_item_matching(lambda item: item.has_type("weapon"))

    def test_armor_helpers(self):
        """ArmorClass constructors set the category."""
        item = Item("Padded", weight=8, armor_class=ArmorClass.light(11))
        assert item.is_armor
        assert item.armor_class.category == ArmorCategory.LIGHT
