from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

RED = 0
BLUE = 1
YELLOW = 2
BLACK = 3

COLORS = 4
VALUES = 13
GRID_SIZE = COLORS * VALUES

COLOR_NAMES = ("Red", "Blue", "Yellow", "Black")


def tile_id_of(number: int, color: int) -> int:
    return color * VALUES + (number - 1)


def color_of(tile_id: int) -> int:
    return tile_id // VALUES


def value_of(tile_id: int) -> int:
    return (tile_id % VALUES) + 1


def _check_cell(number: int, color: int) -> None:
    if not 1 <= number <= VALUES:
        raise ValueError(f"tile number must be in 1..{VALUES}, got {number}")
    if not 0 <= color < COLORS:
        raise ValueError(f"tile color must be in 0..{COLORS - 1}, got {color}")


@dataclass(frozen=True)
class Tile:
    number: int | None
    color: int | None
    is_joker: bool = False

    def __post_init__(self) -> None:
        if self.number is None or self.color is None:
            if not self.is_joker:
                raise ValueError("only a joker may be unassigned")
            if self.number is not None or self.color is not None:
                raise ValueError("joker must be fully assigned or fully unassigned")
            return
        _check_cell(self.number, self.color)

    @property
    def tile_id(self) -> int:
        if self.number is None or self.color is None:
            raise ValueError("Unassigned joker")
        return tile_id_of(self.number, self.color)

    def is_assigned(self) -> bool:
        return self.number is not None

    def signature(self) -> Tuple[int, int, int]:
        return (
            -1 if self.number is None else self.number,
            -1 if self.color is None else self.color,
            int(self.is_joker),
        )

    @classmethod
    def joker(cls, number: int | None = None, color: int | None = None) -> "Tile":
        return cls(number, color, is_joker=True)

    @classmethod
    def from_id(cls, tile_id: int) -> "Tile":
        if not 0 <= tile_id < GRID_SIZE:
            raise ValueError(f"tile id must be in 0..{GRID_SIZE - 1}")
        return cls(value_of(tile_id), color_of(tile_id))


def iter_full_supply(copies: int) -> Iterable[Tile]:
    for _ in range(copies):
        for color in range(COLORS):
            for number in range(1, VALUES + 1):
                yield Tile(number, color)
