from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, List, Sequence, Tuple

from .tiles import COLORS, GRID_SIZE, VALUES, Tile, tile_id_of

if TYPE_CHECKING:
    from .meld import Meld

InventoryKey = Tuple[Tuple[int, ...], int]

FINGERPRINT_CELL_BITS = 4
FINGERPRINT_CELL_MAX = (1 << FINGERPRINT_CELL_BITS) - 1
FINGERPRINT_JOKER_SHIFT = GRID_SIZE * FINGERPRINT_CELL_BITS


def _validate_counts(counts: Sequence[int], jokers: int) -> None:
    if len(counts) != GRID_SIZE:
        raise ValueError(f"inventory length must be {GRID_SIZE}")
    if any(c < 0 for c in counts):
        raise ValueError("inventory counts must be non-negative")
    if jokers < 0:
        raise ValueError("joker count must be non-negative")


@dataclass
class Inventory:
    """Tile counts indexed by tile id, plus a separate joker count.

    Two inventories are interchangeable for solving iff their counts and joker
    counts match, so equality and hashing use exactly that pair.
    """

    counts: List[int]
    jokers: int = 0

    def __post_init__(self) -> None:
        _validate_counts(self.counts, self.jokers)

    @classmethod
    def empty(cls) -> "Inventory":
        return cls([0] * GRID_SIZE)

    @classmethod
    def from_tiles(cls, tiles: Iterable[Tile], jokers: int = 0) -> "Inventory":
        inventory = cls([0] * GRID_SIZE, jokers)
        for tile in tiles:
            inventory.add(tile)
        return inventory

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]], jokers: int = 0) -> "Inventory":
        """Build from a ``grid[number - 1][color]`` table."""
        if len(grid) != VALUES or any(len(row) != COLORS for row in grid):
            raise ValueError(f"grid must be {VALUES}x{COLORS}")
        counts = [0] * GRID_SIZE
        for row_index, row in enumerate(grid):
            for color, count in enumerate(row):
                counts[tile_id_of(row_index + 1, color)] = count
        return cls(counts, jokers)

    def count(self, number: int, color: int) -> int:
        return self.counts[tile_id_of(number, color)]

    def has(self, number: int, color: int) -> bool:
        return self.counts[tile_id_of(number, color)] > 0

    def add(self, tile: Tile) -> None:
        if tile.is_joker:
            self.jokers += 1
        else:
            self.counts[tile.tile_id] += 1

    def add_joker(self, count: int = 1) -> None:
        self.jokers += count

    def remove(self, tile: Tile) -> None:
        if tile.is_joker:
            if self.jokers <= 0:
                raise ValueError("cannot remove joker: none left")
            self.jokers -= 1
            return
        if self.counts[tile.tile_id] <= 0:
            raise ValueError(f"cannot remove tile {tile.number}/{tile.color}: none left")
        self.counts[tile.tile_id] -= 1

    def without_meld(self, meld: "Meld") -> "Inventory":
        remaining = self.copy()
        for tile in meld.tiles:
            remaining.remove(tile)
        return remaining

    def real_total(self) -> int:
        return sum(self.counts)

    def total(self) -> int:
        return sum(self.counts) + self.jokers

    def copy(self) -> "Inventory":
        return Inventory(list(self.counts), self.jokers)

    def iter_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (number, color) cells holding real tiles, number-major."""
        for number in range(1, VALUES + 1):
            for color in range(COLORS):
                if self.counts[tile_id_of(number, color)] > 0:
                    yield number, color

    def tiles(self) -> List[Tile]:
        out = []
        for number, color in self.iter_cells():
            out.extend([Tile(number, color)] * self.count(number, color))
        out.extend([Tile.joker()] * self.jokers)
        return out

    def grid(self) -> List[List[int]]:
        return [[self.count(number, color) for color in range(COLORS)] for number in range(1, VALUES + 1)]

    def key(self) -> InventoryKey:
        return (tuple(self.counts), self.jokers)

    def fingerprint(self) -> int:
        """Pack the inventory into one integer.

        Each count gets its own 4-bit field and the joker count sits above all
        of them, so the packing is injective while every count is at most 15.
        """
        packed = 0
        for shift, count in enumerate(self.counts):
            if count > FINGERPRINT_CELL_MAX:
                raise ValueError(f"count {count} does not fit a {FINGERPRINT_CELL_BITS}-bit field")
            packed |= count << (shift * FINGERPRINT_CELL_BITS)
        return packed | (self.jokers << FINGERPRINT_JOKER_SHIFT)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Inventory) and self.key() == other.key()

    def __hash__(self) -> int:
        return hash(self.key())
