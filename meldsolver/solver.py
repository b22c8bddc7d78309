from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Set, Tuple

from .finder import find_group, find_run, iter_group_candidates, iter_run_candidates
from .inventory import Inventory
from .meld import Meld
from .memo import MemoTable
from .partition import NOT_FOUND, Found, PartitionResult
from .rules import SearchMode


@dataclass
class SolverStats:
    calls: int = 0
    explored: int = 0
    max_depth: int = 0


def _greedy_candidates(inventory: Inventory) -> Iterable[Meld]:
    seen: Set[Tuple] = set()
    for number, color in inventory.iter_cells():
        for meld in (find_group(inventory, number), find_run(inventory, number, color)):
            if meld is None or meld.tiles in seen:
                continue
            seen.add(meld.tiles)
            yield meld


def _exhaustive_candidates(inventory: Inventory) -> Iterable[Meld]:
    # The lowest real tile has to sit in some meld, so only melds through it
    # need trying.
    number, color = next(inventory.iter_cells())
    yield from iter_group_candidates(inventory, number, color)
    yield from iter_run_candidates(inventory, number, color)


class PartitionSolver:
    """Depth-first search for an exact partition of a hand into melds.

    In ``GREEDY`` mode each cell proposes at most one group and one run, as
    built by :func:`find_group` and :func:`find_run`; this can report
    ``NotFound`` for hands that do have a partition. ``EXHAUSTIVE`` mode tries
    every meld through the lowest remaining tile and is a decision procedure.
    """

    def __init__(self, memo: Optional[MemoTable] = None, mode: SearchMode = SearchMode.GREEDY) -> None:
        self.memo = memo if memo is not None else MemoTable()
        self.mode = SearchMode(mode)
        if self.memo.mode is None:
            self.memo.mode = self.mode
        elif self.memo.mode != self.mode:
            raise ValueError(f"memo table holds {self.memo.mode.value} results, cannot serve a {self.mode.value} search")
        self.stats = SolverStats()

    def candidates(self, inventory: Inventory) -> Iterable[Meld]:
        if self.mode == SearchMode.EXHAUSTIVE:
            return _exhaustive_candidates(inventory)
        return _greedy_candidates(inventory)

    def solve(self, inventory: Inventory) -> PartitionResult:
        return self._solve(inventory.copy(), 0)

    def _solve(self, inventory: Inventory, depth: int) -> PartitionResult:
        self.stats.calls += 1
        self.stats.max_depth = max(self.stats.max_depth, depth)

        cached = self.memo.get(inventory)
        if cached is not None:
            return cached
        self.stats.explored += 1

        if inventory.real_total() == 0:
            result: PartitionResult = Found(())
            self.memo.put(inventory, result)
            return result

        for meld in self.candidates(inventory):
            sub = self._solve(inventory.without_meld(meld), depth + 1)
            if isinstance(sub, Found):
                result = Found((meld,) + sub.melds)
                self.memo.put(inventory, result)
                return result

        self.memo.put(inventory, NOT_FOUND)
        return NOT_FOUND


def solve(
    inventory: Inventory, memo: Optional[MemoTable] = None, mode: SearchMode = SearchMode.GREEDY
) -> PartitionResult:
    return PartitionSolver(memo, mode).solve(inventory)
