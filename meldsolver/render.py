from __future__ import annotations

from typing import List

from .inventory import Inventory
from .meld import Meld
from .partition import Found, PartitionResult
from .tiles import COLOR_NAMES, COLORS, Tile

JOKER_LABEL = "J"
COLOR_LETTERS = "RBYK"


def format_tile(tile: Tile) -> str:
    if not tile.is_assigned():
        return JOKER_LABEL
    label = f"{COLOR_LETTERS[tile.color]}{tile.number}"
    if tile.is_joker:
        return f"{JOKER_LABEL}({label})"
    return label


def format_meld(meld: Meld) -> str:
    tiles = " ".join(format_tile(tile) for tile in meld.tiles)
    return f"{meld.kind.value:<5} [{tiles}]"


def format_grid(inventory: Inventory) -> str:
    """Render the hand as a table of counts, one row per number."""
    header = "    | " + " | ".join(f"{name:>6}" for name in COLOR_NAMES)
    lines: List[str] = [header, "-" * len(header)]
    for index, row in enumerate(inventory.grid()):
        cells = " | ".join(f"{row[color]:>6}" for color in range(COLORS))
        lines.append(f"{index + 1:>3} | {cells}")
    lines.append(f"Jokers: {inventory.jokers}")
    return "\n".join(lines)


def format_result(result: PartitionResult, hand_size: int) -> str:
    if not isinstance(result, Found):
        return f"{hand_size} tiles: no partition"
    lines = [f"{hand_size} tiles: {len(result.melds)} melds"]
    lines.extend(f"  {format_meld(meld)}" for meld in result.melds)
    return "\n".join(lines)
