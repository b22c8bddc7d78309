from __future__ import annotations

import argparse
import logging
import time
from typing import List, Optional

import structlog

from .logging import setup_logging
from .memo import MemoTable
from .render import format_grid, format_result
from .rules import MemoKeying, Ruleset, SearchMode
from .session import DrawSession

logger = structlog.wrap_logger(logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Draw Rummikub tiles until the hand splits exactly into melds."
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible draws.")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in SearchMode],
        default=SearchMode.EXHAUSTIVE.value,
        help="Partition search: exhaustive (default) or the faster-per-step but incomplete greedy heuristic.",
    )
    parser.add_argument("--initial-hand", type=int, default=0, help="Tiles dealt before the first solve.")
    parser.add_argument("--games", type=int, default=1, help="Number of sessions sharing one memo table.")
    parser.add_argument("--memo-capacity", type=int, default=None, help="Evict old memo entries past this size.")
    parser.add_argument(
        "--keying",
        choices=[keying.value for keying in MemoKeying],
        default=MemoKeying.STRUCTURAL.value,
        help="Memo key: exact structural tuple or packed fingerprint.",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print the final hand of each session.")
    return parser


def run_games(ruleset: Ruleset, games: int, seed: Optional[int] = None, quiet: bool = False) -> List[bool]:
    memo = MemoTable.for_keying(ruleset.memo_keying, ruleset.memo_capacity)
    wins: List[bool] = []
    for game in range(games):
        session = DrawSession(ruleset=ruleset, rng_seed=None if seed is None else seed + game, memo=memo)
        outcome = session.run()
        if not quiet:
            for step in session.outcomes:
                print(format_result(step.result, step.hand_size))
        print(format_grid(session.hand))
        if outcome is not None and outcome.is_win():
            print(f"Solution found with {outcome.hand_size} tiles")
            print(format_result(outcome.result, outcome.hand_size))
            wins.append(True)
        else:
            print("Supply exhausted without a solution")
            wins.append(False)
    logger.info("memo usage", entries=len(memo), hits=memo.stats.hits, evictions=memo.stats.evictions)
    return wins


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        ruleset = Ruleset(
            initial_hand_size=args.initial_hand,
            search_mode=SearchMode(args.mode),
            memo_capacity=args.memo_capacity,
            memo_keying=MemoKeying(args.keying),
        )
    except ValueError as exc:
        parser.error(str(exc))
    setup_logging()
    start = time.perf_counter()
    wins = run_games(ruleset, max(1, args.games), seed=args.seed, quiet=args.quiet)
    print(f"Time elapsed in solving is: {time.perf_counter() - start:.3f}s")
    return 0 if all(wins) else 1


if __name__ == "__main__":
    raise SystemExit(main())
