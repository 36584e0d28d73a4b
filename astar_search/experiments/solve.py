#!/usr/bin/env python3
from __future__ import annotations
import argparse, logging, sys
from dataclasses import dataclass
from typing import List, Optional

from astar_search.domains import magic_square as ms
from astar_search.domains.sliding_puzzle import InvalidPuzzleState, SlidingPuzzle
from astar_search.heuristics.tiles import HEURISTICS, make_heuristic
from astar_search.search.a_star import TIE_BREAKS, a_star_search
from astar_search.search.cost import MAX_COST, unit_weight
from astar_search.search.ida_star import ida_star_search
from astar_search.search.path import SearchResult

logger = logging.getLogger(__name__)


@dataclass
class PuzzleOptions:
    dim: int = 3
    max_cost: float = MAX_COST
    use_ida: bool = False
    state: Optional[List[int]] = None
    seed: Optional[int] = None
    heuristic: str = "manhattan"
    tie_break: str = "h"


def solve_puzzle(opts: PuzzleOptions) -> SearchResult:
    """Solve the given (or a shuffled) puzzle; raises InvalidPuzzleState for bad input."""
    puzzle = SlidingPuzzle(opts.dim)
    if opts.state:
        start = puzzle.validate(opts.state)
    else:
        start = puzzle.shuffle(opts.seed)

    print("Start puzzle state:")
    print(puzzle.render(start), end="\n\n")
    print("Goal puzzle state:")
    print(puzzle.render(puzzle.GOAL), end="\n\n")

    hfun = make_heuristic(opts.heuristic, puzzle)
    if opts.use_ida:
        res = ida_star_search(start, puzzle.expand, hfun, unit_weight,
                              is_goal=puzzle.is_solved, max_cost=opts.max_cost)
    else:
        res = a_star_search(start, puzzle.expand, hfun, unit_weight,
                            is_goal=puzzle.is_solved, max_cost=opts.max_cost, tie_break=opts.tie_break)

    if not res:
        print(f"Couldn't find path to goal ({res.termination})")
    else:
        print(f"Found path ({res.moves} moves):")
        for s in res.path:
            print(puzzle.render(s), end="\n\n")
    logger.info("%s: expanded=%d generated=%d time=%.3fs", res.algorithm, res.expanded, res.generated, res.time)
    return res


def cmd_puzzle(args: argparse.Namespace) -> int:
    opts = PuzzleOptions(
        dim=args.dim, max_cost=args.max_cost, use_ida=args.ida,
        state=args.state, seed=args.seed, heuristic=args.heuristic, tie_break=args.tie_break,
    )
    try:
        res = solve_puzzle(opts)
    except InvalidPuzzleState as e:
        print(f"Puzzle state is not a valid or solvable puzzle state: {e}", file=sys.stderr)
        return 1
    return 0 if res else 2


def cmd_magic(args: argparse.Namespace) -> int:
    try:
        cost, path = ms.forming_magic_square(args.square)
    except ms.InvalidSquare as e:
        print(f"Invalid square: {e}", file=sys.stderr)
        return 1
    for sq in path:
        print(ms.render(sq), end="\n\n")
    print(f"Min cost is {cost}")
    return 0


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Solve sliding puzzles and magic squares with A*/IDA*")
    p.add_argument("--log-level", default="WARNING")
    sub = p.add_subparsers(dest="cmd", required=True)

    z = sub.add_parser("puzzle", help="solve an N×N sliding puzzle")
    z.add_argument("--dim", type=int, choices=[2, 3, 4], default=3)
    z.add_argument("--state", type=int, nargs="+", default=None, help="Row-major tiles, 0 is the blank")
    z.add_argument("--seed", type=int, default=None, help="Seed for the random start state")
    z.add_argument("--heuristic", choices=list(HEURISTICS) + ["taxicab"], default="manhattan")
    z.add_argument("--ida", action="store_true", help="Use IDA* instead of A*")
    z.add_argument("--max_cost", type=float, default=MAX_COST)
    z.add_argument("--tie_break", choices=list(TIE_BREAKS), default="h")
    z.set_defaults(func=cmd_puzzle)

    m = sub.add_parser("magic", help="cheapest conversion of a 3×3 square into a magic square")
    m.add_argument("--square", type=int, nargs=9, required=True, help="Nine values, row-major")
    m.set_defaults(func=cmd_magic)
    return p


def main(argv: Optional[List[str]] = None):
    args = build_argparser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
