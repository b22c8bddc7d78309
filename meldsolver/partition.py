from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from .inventory import Inventory
from .meld import Meld


@dataclass(frozen=True)
class Found:
    melds: Tuple[Meld, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "melds", tuple(self.melds))

    @property
    def found(self) -> bool:
        return True

    def jokers_used(self) -> int:
        return sum(meld.joker_count() for meld in self.melds)


@dataclass(frozen=True)
class NotFound:
    @property
    def found(self) -> bool:
        return False


NOT_FOUND = NotFound()

PartitionResult = Union[Found, NotFound]


def verify_partition(inventory: Inventory, melds: Iterable[Meld]) -> Tuple[bool, str]:
    """Check that ``melds`` are valid and consume exactly the real tiles of ``inventory``.

    Jokers may be left over; the melds may not use more than the inventory holds.
    """
    consumed = Inventory.empty()
    for meld in melds:
        ok, reason = meld.is_valid()
        if not ok:
            return False, f"invalid meld: {reason}"
        for tile in meld.tiles:
            consumed.add(tile)

    if consumed.counts != inventory.counts:
        return False, "melds must consume exactly the real tiles of the hand"
    if consumed.jokers > inventory.jokers:
        return False, "melds use more jokers than the hand holds"
    return True, ""
