import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from meldsolver.meld import Meld, MeldKind
from meldsolver.tiles import BLACK, BLUE, RED, YELLOW, Tile


def test_kind_is_derived_from_colors():
    run = Meld.from_effective_run(RED, 7, 3)
    group = Meld.from_effective_group(5, [RED, BLUE, YELLOW])
    assert run.kind == MeldKind.RUN
    assert group.kind == MeldKind.GROUP
    assert run.is_run() and not run.is_group()
    assert group.is_group() and not group.is_run()


def test_valid_run_and_group():
    assert Meld.from_effective_run(BLUE, 1, 13).is_valid() == (True, "")
    assert Meld.from_effective_group(9, [RED, BLUE, YELLOW, BLACK]).is_valid() == (True, "")
    assert Meld.from_effective_run(RED, 7, 3, jokers_at=[8]).is_valid() == (True, "")


def test_invalid_melds_report_reason():
    ok, reason = Meld((Tile(1, RED), Tile(2, RED))).is_valid()
    assert not ok and reason == "meld too short"

    ok, reason = Meld((Tile(1, RED), Tile(2, RED), Tile(4, RED))).is_valid()
    assert not ok and reason == "run must be consecutive"

    ok, reason = Meld((Tile(3, RED), Tile(3, BLUE), Tile(4, YELLOW))).is_valid()
    assert not ok and reason == "group must share number"

    ok, reason = Meld((Tile(3, RED), Tile(3, BLUE), Tile(3, BLUE))).is_valid()
    assert not ok and reason == "group colors must be distinct"

    five = Meld((Tile(3, RED), Tile(3, BLUE), Tile(3, YELLOW), Tile(3, BLACK), Tile(3, BLUE)))
    ok, reason = five.is_valid()
    assert not ok and reason == "group must have length 3 or 4"


def test_unassigned_joker_cannot_be_placed():
    with pytest.raises(ValueError):
        Meld((Tile(1, RED), Tile.joker(), Tile(3, RED)))


def test_joker_accounting():
    meld = Meld.from_effective_group(4, [RED, BLUE, BLACK], jokers_at=[BLUE])
    assert meld.joker_count() == 1
    assert meld.real_tiles() == [Tile(4, RED), Tile(4, BLACK)]
    assert len(meld) == 3


def test_signature_ignores_tile_order():
    a = Meld((Tile(5, YELLOW), Tile(5, RED), Tile(5, BLUE)))
    b = Meld((Tile(5, RED), Tile(5, BLUE), Tile(5, YELLOW)))
    assert a.signature() == b.signature()
    assert a.canonicalize() == b
