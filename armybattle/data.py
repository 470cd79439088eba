"""Item catalogue and unit model for the army battle simulation."""

from __future__ import annotations

from dataclasses import dataclass

NUMBER_OF_ITEMS = 16
MAX_NAME = 100
MIN_ARMY = 1
MAX_ARMY = 5
UNIT_HP = 100


@dataclass(frozen=True)
class Item:
    """An inventory item a unit can carry."""

    name: str
    att: int
    defense: int
    slots: int
    range: int
    radius: int


@dataclass
class Unit:
    """A combat unit carrying up to two items."""

    name: str
    item1: Item | None = None
    item2: Item | None = None
    hp: int = UNIT_HP

    @property
    def items(self) -> tuple[Item, ...]:
        return tuple(item for item in (self.item1, self.item2) if item is not None)

    def defense(self) -> int:
        """Total defence of the items the unit carries."""
        return sum(item.defense for item in self.items)


ITEMS: tuple[Item, ...] = (
    # one-slot items, ordered by attack
    Item("wand", 12, 4, 1, 4, 2),
    Item("fireball", 11, 0, 1, 3, 3),
    Item("sword", 9, 2, 1, 0, 0),
    Item("spear", 6, 1, 1, 1, 1),
    Item("dagger", 4, 0, 1, 0, 0),
    Item("rock", 3, 0, 1, 2, 1),
    Item("armor", 2, 7, 1, 0, 0),
    Item("shield", 2, 6, 1, 0, 0),
    Item("gloves", 1, 4, 1, 0, 0),
    Item("helmet", 1, 5, 1, 0, 0),
    Item("aura", 0, 8, 1, 0, 0),
    # two-slot items, ordered by attack
    Item("cannon", 12, 0, 2, 4, 4),
    Item("axe", 10, 2, 2, 1, 1),
    Item("hammer", 8, 2, 2, 1, 2),
    Item("crossbow", 5, 1, 2, 3, 0),
    Item("slingshot", 2, 0, 2, 2, 1),
)

_ITEMS_BY_NAME = {item.name: item for item in ITEMS}


def find_item(name: str) -> Item | None:
    """Return the catalogue item with the given name, or None."""
    return _ITEMS_BY_NAME.get(name)