from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .tiles import GRID_SIZE


class SearchMode(str, Enum):
    GREEDY = "greedy"
    EXHAUSTIVE = "exhaustive"


class MemoKeying(str, Enum):
    STRUCTURAL = "structural"
    FINGERPRINT = "fingerprint"


@dataclass(frozen=True)
class Ruleset:
    copies_per_tiletype: int = 2
    num_jokers: int = 2
    initial_hand_size: int = 0
    search_mode: SearchMode = SearchMode.EXHAUSTIVE
    memo_capacity: Optional[int] = None
    memo_keying: MemoKeying = MemoKeying.STRUCTURAL

    def __post_init__(self) -> None:
        if not 1 <= self.copies_per_tiletype <= 4:
            raise ValueError("copies_per_tiletype must be in 1..4")
        if self.num_jokers < 0:
            raise ValueError("num_jokers must be non-negative")
        if not 0 <= self.initial_hand_size <= self.supply_size():
            raise ValueError("initial_hand_size must fit in the supply")
        if self.memo_capacity is not None and self.memo_capacity < 1:
            raise ValueError("memo_capacity must be positive")

    def supply_size(self) -> int:
        return GRID_SIZE * self.copies_per_tiletype + self.num_jokers
