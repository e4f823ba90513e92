"""Items, armor ratings and the carried inventory."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import StrEnum

from cygnus.errors import MissingFieldError

# Medium armor never adds more than this much dexterity
MEDIUM_ARMOR_DEX_CAP = 2


class ArmorCategory(StrEnum):
    """Armor weight categories. They decide how much dexterity counts towards AC."""

    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"


@dataclass(frozen=True)
class ArmorClass:
    """Armor rating carried by an item: a category and its base AC."""

    category: ArmorCategory
    base: int

    @classmethod
    def light(cls, base: int) -> "ArmorClass":
        return cls(ArmorCategory.LIGHT, base)

    @classmethod
    def medium(cls, base: int) -> "ArmorClass":
        return cls(ArmorCategory.MEDIUM, base)

    @classmethod
    def heavy(cls, base: int) -> "ArmorClass":
        return cls(ArmorCategory.HEAVY, base)

    def contribution(self, dexterity_modifier: int) -> int:
        """
        AC this piece adds for a wearer with the given dexterity modifier.

        Light armor adds the full modifier, medium armor caps it at +2 and
        heavy armor ignores it.
        """
        if self.category == ArmorCategory.LIGHT:
            return self.base + dexterity_modifier
        if self.category == ArmorCategory.MEDIUM:
            return self.base + min(dexterity_modifier, MEDIUM_ARMOR_DEX_CAP)
        return self.base


@dataclass(frozen=True)
class Item:
    """An inert item: something that can be carried and possibly equipped."""

    name: str
    weight: float = 0
    types: frozenset[str] = field(default_factory=frozenset)
    armor_class: ArmorClass | None = None

    def __post_init__(self) -> None:
        if self.weight < 0:
            raise ValueError(f"Item weight cannot be negative: {self.weight}")
        object.__setattr__(self, "types", frozenset(self.types))

    def has_type(self, item_type: str) -> bool:
        return item_type in self.types

    @property
    def is_armor(self) -> bool:
        return self.armor_class is not None

    def format_short_description(self) -> str:
        """Format like "Chain Mail (55 lbs)"."""
        return f"{self.name} ({self.weight:g} lbs)"


class ItemNotFoundError(Exception):
    """Raised when an item is not in the inventory."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No item named '{name}' in inventory.")


class Items:
    """Unordered inventory of carried (not equipped) items."""

    def __init__(self, items: Iterable[Item] | None = None) -> None:
        self._items: list[Item] = list(items or [])

    def add_item(self, item: Item) -> None:
        self._items.append(item)

    def remove_item(self, name: str) -> Item:
        """
        Remove the first item with the given name.

        Raises:
            ItemNotFoundError: If no carried item has that name
        """
        for index, item in enumerate(self._items):
            if item.name == name:
                return self._items.pop(index)
        raise ItemNotFoundError(name)

    def total_weight(self) -> float:
        return sum(item.weight for item in self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


class ItemBuilder:
    """Chained construction of an Item. Only the name is required."""

    def __init__(self) -> None:
        self._name: str | None = None
        self._weight: float = 0
        self._types: list[str] = []
        self._armor_class: ArmorClass | None = None

    def name(self, name: str) -> "ItemBuilder":
        self._name = name
        return self

    def weight(self, weight: float) -> "ItemBuilder":
        if weight < 0:
            raise ValueError(f"Item weight cannot be negative: {weight}")
        self._weight = weight
        return self

    def add_type(self, item_type: str) -> "ItemBuilder":
        self._types.append(item_type)
        return self

    def armor_class(self, armor_class: ArmorClass) -> "ItemBuilder":
        self._armor_class = armor_class
        return self

    def build(self) -> Item:
        """
        Build the item.

        Raises:
            MissingFieldError: If no name was given
        """
        if not self._name:
            raise MissingFieldError(["name"], entity="Item")

        return Item(
            name=self._name,
            weight=self._weight,
            types=frozenset(self._types),
            armor_class=self._armor_class,
        )
