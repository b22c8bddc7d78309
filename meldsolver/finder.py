"""Meld construction from an inventory.

``find_group`` and ``find_run`` build one meld greedily in color/number order.
They only ever propose a single candidate per number (groups) and per
(number, color) start (runs): a four-color group is never tried as a three-tile
group, and a run is never cut shorter than its greedy extent. A search built on
them can therefore miss partitions that need a different meld boundary.

``iter_group_candidates`` and ``iter_run_candidates`` enumerate every meld that
contains a given real tile and are what the exhaustive search uses.

Every function reads ``inventory.jokers`` as the joker budget of the single
meld being built; reserving jokers across melds is up to the caller.
"""

from __future__ import annotations

from itertools import combinations
from typing import Iterable, List, Optional, Sequence, Tuple

from .inventory import Inventory
from .meld import Meld
from .tiles import COLORS, VALUES, Tile

MIN_MELD_SIZE = 3
MAX_GROUP_SIZE = 4


def find_group(inventory: Inventory, number: int) -> Optional[Meld]:
    jokers = inventory.jokers
    tiles: List[Tile] = []
    for color in range(COLORS):
        if inventory.has(number, color):
            tiles.append(Tile(number, color))
        elif jokers > 0:
            tiles.append(Tile.joker(number, color))
            jokers -= 1
        if len(tiles) == MIN_MELD_SIZE:
            break
    if len(tiles) < MIN_MELD_SIZE or all(tile.is_joker for tile in tiles):
        return None
    return Meld(tuple(tiles))


def find_run(inventory: Inventory, start: int, color: int) -> Optional[Meld]:
    jokers = inventory.jokers
    tiles: List[Tile] = []
    for number in range(start, VALUES + 1):
        if inventory.has(number, color):
            tiles.append(Tile(number, color))
        elif jokers > 0:
            tiles.append(Tile.joker(number, color))
            jokers -= 1
        else:
            break
    if len(tiles) < MIN_MELD_SIZE:
        return None
    return Meld(tuple(tiles))


def _fillings(inventory: Inventory, cells: Sequence[Tuple[int, int]], fixed: Tuple[int, int]) -> Iterable[Meld]:
    # Empty cells must take a joker; cells holding a real tile may still take
    # one while the budget lasts. ``fixed`` always keeps its real tile.
    missing = [cell for cell in cells if not inventory.has(*cell)]
    spare = inventory.jokers - len(missing)
    if spare < 0:
        return
    optional = [cell for cell in cells if cell != fixed and inventory.has(*cell)]
    for extra in range(min(spare, len(optional)) + 1):
        for swapped in combinations(optional, extra):
            jokers = set(missing).union(swapped)
            yield Meld(tuple(Tile(number, color, is_joker=(number, color) in jokers) for number, color in cells))


def iter_group_candidates(inventory: Inventory, number: int, color: int) -> Iterable[Meld]:
    """Yield every group holding the real tile at (number, color)."""
    if not inventory.has(number, color):
        return
    others = [c for c in range(COLORS) if c != color]
    for size in range(MIN_MELD_SIZE, MAX_GROUP_SIZE + 1):
        for combo in combinations(others, size - 1):
            cells = [(number, c) for c in sorted(combo + (color,))]
            yield from _fillings(inventory, cells, (number, color))


def iter_run_candidates(inventory: Inventory, number: int, color: int) -> Iterable[Meld]:
    """Yield every run holding the real tile at (number, color), shortest spans first."""
    if not inventory.has(number, color):
        return
    for length in range(MIN_MELD_SIZE, VALUES + 1):
        for start in range(max(1, number - length + 1), min(number, VALUES - length + 1) + 1):
            cells = [(n, color) for n in range(start, start + length)]
            yield from _fillings(inventory, cells, (number, color))
