import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from meldsolver.inventory import Inventory
from meldsolver.memo import MemoKeyCollisionError, MemoTable
from meldsolver.partition import NOT_FOUND, Found
from meldsolver.rules import MemoKeying, SearchMode
from meldsolver.solver import PartitionSolver
from meldsolver.tiles import BLUE, RED, YELLOW, Tile


def _hand(*tiles, jokers=0):
    return Inventory.from_tiles([Tile(number, color) for number, color in tiles], jokers=jokers)


def test_get_and_put_round_trip():
    memo = MemoTable()
    hand = _hand((1, RED))
    assert memo.get(hand) is None
    memo.put(hand, NOT_FOUND)
    assert memo.get(_hand((1, RED))) is NOT_FOUND
    assert memo.stats.hits == 1
    assert memo.stats.misses == 1
    assert memo.stats.stores == 1


def test_fingerprint_keying_behaves_like_structural():
    memo = MemoTable.for_keying(MemoKeying.FINGERPRINT)
    a = _hand((1, RED), jokers=1)
    b = _hand((1, RED))
    memo.put(a, Found(()))
    memo.put(b, NOT_FOUND)
    assert memo.get(a.copy()) == Found(())
    assert memo.get(b.copy()) is NOT_FOUND
    assert len(memo) == 2


def test_narrow_key_collision_fails_fast():
    memo = MemoTable(key_fn=lambda inventory: inventory.total())
    memo.put(_hand((1, RED), (2, RED)), NOT_FOUND)
    with pytest.raises(MemoKeyCollisionError):
        memo.get(_hand((1, BLUE), (2, BLUE)))
    with pytest.raises(MemoKeyCollisionError):
        memo.put(_hand((1, RED), jokers=1), Found(()))


def test_colliding_keys_surface_through_the_solver():
    memo = MemoTable(key_fn=lambda inventory: inventory.real_total())
    solver = PartitionSolver(memo)
    solver.solve(_hand((1, RED), (2, BLUE)))
    with pytest.raises(MemoKeyCollisionError):
        solver.solve(_hand((7, RED), (8, RED)))


def test_capacity_evicts_least_recently_used():
    memo = MemoTable(capacity=2)
    a, b, c = _hand((1, RED)), _hand((2, RED)), _hand((3, RED))
    memo.put(a, NOT_FOUND)
    memo.put(b, NOT_FOUND)
    memo.get(a)
    memo.put(c, NOT_FOUND)

    assert len(memo) == 2
    assert a in memo
    assert b not in memo
    assert c in memo
    assert memo.stats.evictions == 1


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        MemoTable(capacity=0)


def test_bounded_memo_still_solves():
    solver = PartitionSolver(MemoTable(capacity=3))
    hand = _hand((5, RED), (5, BLUE), (5, YELLOW), (7, BLUE), (8, BLUE), (9, BLUE))
    result = solver.solve(hand)
    assert isinstance(result, Found)
    assert len(solver.memo) <= 3


def test_clear_resets_entries_and_mode():
    memo = MemoTable()
    PartitionSolver(memo, SearchMode.EXHAUSTIVE).solve(_hand((1, RED)))
    assert len(memo) > 0
    memo.clear()
    assert len(memo) == 0
    assert memo.mode is None
    PartitionSolver(memo, SearchMode.GREEDY)
