from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple

from .tiles import Tile


class MeldKind(str, Enum):
    RUN = "RUN"
    GROUP = "GROUP"


@dataclass(frozen=True)
class Meld:
    tiles: Tuple[Tile, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tiles", tuple(self.tiles))
        if any(not tile.is_assigned() for tile in self.tiles):
            raise ValueError("meld jokers must stand in for a number and color")

    @property
    def kind(self) -> MeldKind:
        colors = {tile.color for tile in self.tiles}
        return MeldKind.RUN if len(colors) == 1 else MeldKind.GROUP

    def is_run(self) -> bool:
        return self.kind == MeldKind.RUN

    def is_group(self) -> bool:
        return self.kind == MeldKind.GROUP

    def real_tiles(self) -> List[Tile]:
        return [tile for tile in self.tiles if not tile.is_joker]

    def joker_count(self) -> int:
        return sum(1 for tile in self.tiles if tile.is_joker)

    def __len__(self) -> int:
        return len(self.tiles)

    def canonicalize(self) -> "Meld":
        run = self.is_run()
        return Meld(
            tuple(
                sorted(
                    self.tiles,
                    key=lambda t: (t.number if run else t.color, t.color if run else t.number, t.is_joker),
                )
            )
        )

    def is_valid(self) -> Tuple[bool, str]:
        if len(self.tiles) < 3:
            return False, "meld too short"
        numbers = [tile.number for tile in self.tiles]
        colors = [tile.color for tile in self.tiles]

        if self.is_run():
            if numbers != list(range(numbers[0], numbers[0] + len(numbers))):
                return False, "run must be consecutive"
            return True, ""

        if len(self.tiles) not in (3, 4):
            return False, "group must have length 3 or 4"
        if len(set(numbers)) != 1:
            return False, "group must share number"
        if len(set(colors)) != len(colors):
            return False, "group colors must be distinct"
        return True, ""

    def signature(self) -> Tuple:
        canon = self.canonicalize()
        return (canon.kind.value, tuple(tile.signature() for tile in canon.tiles))

    @classmethod
    def from_effective_run(cls, color: int, start: int, length: int, jokers_at: Iterable[int] = ()) -> "Meld":
        joker_numbers = set(jokers_at)
        return cls(
            tuple(
                Tile(number, color, is_joker=number in joker_numbers)
                for number in range(start, start + length)
            )
        )

    @classmethod
    def from_effective_group(cls, number: int, colors: Iterable[int], jokers_at: Iterable[int] = ()) -> "Meld":
        joker_colors = set(jokers_at)
        return cls(tuple(Tile(number, color, is_joker=color in joker_colors) for color in colors))
