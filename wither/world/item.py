"""Item stacks, rarity and item categories."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Rarity(str, Enum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"


_SWORDS = frozenset({818, 823, 828, 833, 838, 843})
_HELMETS = frozenset({856, 876, 794, 860, 868, 872, 864})
_CHESTPLATES = frozenset({857, 877, 861, 869, 873, 865, 773})
_LEGGINGS = frozenset({858, 878, 862, 870, 874, 866})
_BOOTS = frozenset({859, 879, 863, 871, 875, 867})


def _check_range(name: str, value: object, upper: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= upper:
        raise ValueError(f"{name} must be an integer in 0..={upper}, got {value!r}")


@dataclass(frozen=True, eq=False)
class ItemStack:
    """A stack of items; ``item_id`` is the numeric protocol id.

    Two stacks are equal when they hold the same item, whatever their counts.
    """

    item_count: int
    item_id: int

    def __post_init__(self) -> None:
        _check_range("item_count", self.item_count, 0xFF)
        _check_range("item_id", self.item_id, 0xFFFF)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ItemStack):
            return NotImplemented
        return self.item_id == other.item_id

    def __hash__(self) -> int:
        return hash(self.item_id)

    def is_sword(self) -> bool:
        return self.item_id in _SWORDS

    def is_helmet(self) -> bool:
        return self.item_id in _HELMETS

    def is_chestplate(self) -> bool:
        return self.item_id in _CHESTPLATES

    def is_leggings(self) -> bool:
        return self.item_id in _LEGGINGS

    def is_boots(self) -> bool:
        return self.item_id in _BOOTS