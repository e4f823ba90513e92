"""Equipment slots.

A slot holds at most one item and only accepts items its validator allows.
A character declares whatever slots it likes ("armor", "left hand",
"cloak"); slots know nothing about each other.
"""

from collections.abc import Callable
from typing import Generic, TypeVar

import structlog

from .item import ArmorCategory, Item

logger = structlog.get_logger(__name__)

T = TypeVar("T")

Validator = Callable[[Item], bool]


class SlotError(Exception):
    """Base class for errors raised by a single slot."""


class SlotFullError(SlotError):
    """Raised when equipping into a slot that already holds something."""

    def __init__(self) -> None:
        super().__init__("Slot already contains something.")


class SlotEmptyError(SlotError):
    """Raised when unequipping from an empty slot."""

    def __init__(self) -> None:
        super().__init__("Cannot remove something from empty slot.")


class InvalidItemError(SlotError):
    """Raised when the slot's validator rejects an item."""

    def __init__(self) -> None:
        super().__init__("Attempted to equip invalid value.")


class Slot(Generic[T]):
    """
    Single-occupant container gated by a validator.

    States: empty, or occupied by one value. Equipping an occupied slot
    fails with SlotFullError before the validator is consulted.
    """

    def __init__(self, validator: Callable[[T], bool]) -> None:
        self._value: T | None = None
        self._validator = validator

    @property
    def item(self) -> T | None:
        return self._value

    @property
    def is_empty(self) -> bool:
        return self._value is None

    def equip(self, value: T) -> None:
        """
        Put a value into the slot.

        Raises:
            SlotFullError: If the slot is occupied
            InvalidItemError: If the validator rejects the value
        """
        if self._value is not None:
            raise SlotFullError()

        if not self._validator(value):
            raise InvalidItemError()

        self._value = value

    def unequip(self) -> T:
        """
        Take the value out of the slot.

        Raises:
            SlotEmptyError: If the slot is empty
        """
        if self._value is None:
            raise SlotEmptyError()

        value, self._value = self._value, None
        return value


# ----------------------------------------------------------------------------
# Validators
# ----------------------------------------------------------------------------


def accepts_any(item: Item) -> bool:
    """Validator that lets every item in."""
    return True


def accepts_types(*item_types: str) -> Validator:
    """Validator accepting items tagged with at least one of the given types."""
    wanted = frozenset(item_types)

    def validator(item: Item) -> bool:
        return not wanted.isdisjoint(item.types)

    return validator


def accepts_armor(*categories: ArmorCategory) -> Validator:
    """Validator accepting armor, optionally limited to some categories."""
    allowed = frozenset(categories)

    def validator(item: Item) -> bool:
        if item.armor_class is None:
            return False
        return not allowed or item.armor_class.category in allowed

    return validator


# ----------------------------------------------------------------------------
# Slot sets
# ----------------------------------------------------------------------------


class ItemSlotsError(Exception):
    """Base class for errors raised by a set of named slots."""


class SlotNotFoundError(ItemSlotsError):
    """Raised when a slot name is not registered."""

    def __init__(self, slot: str) -> None:
        self.slot = slot
        super().__init__(f"{slot} slot does not exist.")


class SlotProblemError(ItemSlotsError):
    """Raised when the named slot itself refused the operation."""

    def __init__(self, slot: str, error: SlotError) -> None:
        self.slot = slot
        self.error = error
        super().__init__(str(error))


class ItemSlots:
    """Named item slots owned by one character."""

    def __init__(self) -> None:
        self._slots: dict[str, Slot[Item]] = {}

    def add_slot(self, slot_name: str, validator: Validator = accepts_any) -> None:
        """Register a slot. Re-registering a name replaces the previous slot."""
        self._slots[slot_name] = Slot(validator)

    def _get_slot(self, slot_name: str) -> Slot[Item]:
        slot = self._slots.get(slot_name)
        if slot is None:
            raise SlotNotFoundError(slot_name)
        return slot

    def equip(self, item: Item, slot_name: str) -> None:
        """
        Equip an item into a named slot.

        Raises:
            SlotNotFoundError: If no slot has that name
            SlotProblemError: If the slot is full or rejects the item
        """
        slot = self._get_slot(slot_name)
        try:
            slot.equip(item)
        except SlotError as e:
            raise SlotProblemError(slot_name, e) from e

        logger.debug("item_equipped", item=item.name, slot=slot_name)

    def unequip(self, slot_name: str) -> Item:
        """
        Remove and return the item in a named slot.

        Raises:
            SlotNotFoundError: If no slot has that name
            SlotProblemError: If the slot is empty
        """
        slot = self._get_slot(slot_name)
        try:
            item = slot.unequip()
        except SlotError as e:
            raise SlotProblemError(slot_name, e) from e

        logger.debug("item_unequipped", item=item.name, slot=slot_name)
        return item

    def get_item(self, slot_name: str) -> Item | None:
        return self._get_slot(slot_name).item

    def has_item_matching(self, predicate: Callable[[Item], bool]) -> bool:
        """Check whether any equipped item satisfies the predicate."""
        return any(predicate(item) for item in self.equipped_items())

    def total_weight(self) -> float:
        return sum(item.weight for item in self.equipped_items())

    def equipped_items(self) -> list[Item]:
        """Snapshot of the items currently equipped, in slot registration order."""
        return [slot.item for slot in self._slots.values() if slot.item is not None]

    def slot_names(self) -> list[str]:
        return list(self._slots)

    def __contains__(self, slot_name: object) -> bool:
        return slot_name in self._slots

    def __len__(self) -> int:
        return len(self._slots)
