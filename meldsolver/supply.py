from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

from .inventory import Inventory
from .rules import Ruleset
from .tiles import Tile, iter_full_supply


class EmptySupplyError(ValueError):
    """A draw was requested from a supply with nothing left in it."""


@dataclass
class TileSupply:
    pool: Inventory
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def full(cls, ruleset: Ruleset | None = None, rng: Optional[random.Random] = None) -> "TileSupply":
        ruleset = ruleset or Ruleset()
        pool = Inventory.from_tiles(iter_full_supply(ruleset.copies_per_tiletype), jokers=ruleset.num_jokers)
        return cls(pool, rng or random.Random())

    def remaining(self) -> int:
        return self.pool.total()

    def is_empty(self) -> bool:
        return self.pool.total() == 0

    def draw(self) -> Tile:
        """Remove one unit, uniform over everything left, jokers included."""
        remaining = self.pool.total()
        if remaining == 0:
            raise EmptySupplyError("cannot draw from an empty supply")
        pick = self.rng.randrange(remaining)
        if pick < self.pool.jokers:
            self.pool.jokers -= 1
            return Tile.joker()
        pick -= self.pool.jokers
        for tile_id, count in enumerate(self.pool.counts):
            if pick < count:
                self.pool.counts[tile_id] -= 1
                return Tile.from_id(tile_id)
            pick -= count
        raise AssertionError("draw index out of range")

    def draw_into(self, hand: Inventory) -> Tile:
        tile = self.draw()
        hand.add(tile)
        return tile
