"""Rummikub hand partition solver package."""

from .rules import MemoKeying, Ruleset, SearchMode
from .tiles import Tile
from .inventory import Inventory
from .meld import Meld, MeldKind
from .finder import find_group, find_run
from .partition import Found, NotFound, NOT_FOUND, PartitionResult, verify_partition
from .memo import MemoKeyCollisionError, MemoTable
from .solver import PartitionSolver, solve
from .supply import EmptySupplyError, TileSupply
from .session import DrawOutcome, DrawSession

__all__ = [
    "Ruleset",
    "SearchMode",
    "MemoKeying",
    "Tile",
    "Inventory",
    "Meld",
    "MeldKind",
    "find_group",
    "find_run",
    "Found",
    "NotFound",
    "NOT_FOUND",
    "PartitionResult",
    "verify_partition",
    "MemoTable",
    "MemoKeyCollisionError",
    "PartitionSolver",
    "solve",
    "TileSupply",
    "EmptySupplyError",
    "DrawSession",
    "DrawOutcome",
]
