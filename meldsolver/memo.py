from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Hashable, Optional, Tuple

import structlog

from .inventory import Inventory, InventoryKey
from .partition import PartitionResult
from .rules import MemoKeying, SearchMode

logger = structlog.wrap_logger(logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger)

KeyFunction = Callable[[Inventory], Hashable]


class MemoKeyCollisionError(RuntimeError):
    """Two different inventories mapped to the same memo key."""


def structural_key(inventory: Inventory) -> InventoryKey:
    return inventory.key()


def fingerprint_key(inventory: Inventory) -> int:
    return inventory.fingerprint()


KEY_FUNCTIONS = {
    MemoKeying.STRUCTURAL: structural_key,
    MemoKeying.FINGERPRINT: fingerprint_key,
}


@dataclass
class MemoStats:
    hits: int = 0
    misses: int = 0
    stores: int = 0
    evictions: int = 0


class MemoTable:
    """Solve results cached per inventory state.

    Entries keep the structural key of the inventory they were stored for, and
    a lookup that lands on an entry for a different inventory raises instead of
    returning a result that belongs to another hand. With ``capacity`` set, the
    least recently used entry is evicted once the table is full.
    """

    def __init__(self, capacity: Optional[int] = None, key_fn: KeyFunction = structural_key) -> None:
        if capacity is not None and capacity < 1:
            raise ValueError("memo capacity must be positive")
        self.capacity = capacity
        self.key_fn = key_fn
        self.mode: Optional[SearchMode] = None
        self.stats = MemoStats()
        self._entries: "OrderedDict[Hashable, Tuple[InventoryKey, PartitionResult]]" = OrderedDict()

    @classmethod
    def for_keying(cls, keying: MemoKeying, capacity: Optional[int] = None) -> "MemoTable":
        return cls(capacity=capacity, key_fn=KEY_FUNCTIONS[MemoKeying(keying)])

    def get(self, inventory: Inventory) -> Optional[PartitionResult]:
        key = self.key_fn(inventory)
        entry = self._entries.get(key)
        if entry is None:
            self.stats.misses += 1
            return None
        stored_for, result = entry
        if stored_for != inventory.key():
            raise MemoKeyCollisionError(f"memo key {key!r} is shared by two different inventories")
        self.stats.hits += 1
        if self.capacity is not None:
            self._entries.move_to_end(key)
        return result

    def put(self, inventory: Inventory, result: PartitionResult) -> None:
        key = self.key_fn(inventory)
        existing = self._entries.get(key)
        if existing is not None and existing[0] != inventory.key():
            raise MemoKeyCollisionError(f"memo key {key!r} is shared by two different inventories")
        self._entries[key] = (inventory.key(), result)
        self._entries.move_to_end(key)
        self.stats.stores += 1
        if self.capacity is not None:
            while len(self._entries) > self.capacity:
                self._entries.popitem(last=False)
                self.stats.evictions += 1

    def clear(self) -> None:
        logger.debug("memo cleared", entries=len(self._entries))
        self._entries.clear()
        self.stats = MemoStats()
        self.mode = None

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, inventory: object) -> bool:
        if not isinstance(inventory, Inventory):
            return False
        return self.key_fn(inventory) in self._entries
