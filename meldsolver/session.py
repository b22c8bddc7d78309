from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

import structlog

from .inventory import Inventory
from .memo import MemoTable
from .partition import Found, PartitionResult, verify_partition
from .rules import Ruleset
from .solver import PartitionSolver
from .supply import TileSupply
from .tiles import Tile

logger = structlog.wrap_logger(logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger)


@dataclass(frozen=True)
class DrawOutcome:
    tile: Tile
    hand_size: int
    result: PartitionResult

    def is_win(self) -> bool:
        # A hand of jokers alone solves to an empty partition; that is not a win.
        return isinstance(self.result, Found) and bool(self.result.melds)


@dataclass
class DrawSession:
    """Draw tiles into a hand one at a time and solve the hand after each draw."""

    ruleset: Ruleset = field(default_factory=Ruleset)
    rng_seed: Optional[int] = None
    memo: Optional[MemoTable] = None
    hand: Inventory = field(default_factory=Inventory.empty)
    outcomes: List[DrawOutcome] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.memo is None:
            self.memo = MemoTable.for_keying(self.ruleset.memo_keying, self.ruleset.memo_capacity)
        self.supply = TileSupply.full(self.ruleset, random.Random(self.rng_seed))
        self.solver = PartitionSolver(self.memo, self.ruleset.search_mode)
        for _ in range(self.ruleset.initial_hand_size):
            self.supply.draw_into(self.hand)

    def step(self) -> DrawOutcome:
        tile = self.supply.draw_into(self.hand)
        result = self.solver.solve(self.hand)
        if isinstance(result, Found):
            ok, reason = verify_partition(self.hand, result.melds)
            if not ok:
                raise RuntimeError(f"solver returned an invalid partition: {reason}")
        outcome = DrawOutcome(tile=tile, hand_size=self.hand.total(), result=result)
        self.outcomes.append(outcome)
        logger.debug("tile drawn", tile=tile.signature(), hand_size=outcome.hand_size, found=result.found)
        return outcome

    def run(self, max_draws: Optional[int] = None) -> Optional[DrawOutcome]:
        """Step until the hand wins, the supply runs dry or ``max_draws`` is hit."""
        last: Optional[DrawOutcome] = None
        draws = 0
        while not self.supply.is_empty():
            if max_draws is not None and draws >= max_draws:
                break
            last = self.step()
            draws += 1
            if last.is_win():
                logger.info(
                    "winning hand",
                    hand_size=last.hand_size,
                    melds=len(last.result.melds),
                    memo_entries=len(self.memo),
                    explored=self.solver.stats.explored,
                )
                return last
        logger.info("session ended without a win", hand_size=self.hand.total(), draws=draws)
        return last
