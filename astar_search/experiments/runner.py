from __future__ import annotations
import argparse, csv, logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from astar_search.domains.sliding_puzzle import SlidingPuzzle, State
from astar_search.heuristics.tiles import HEURISTICS, make_heuristic
from astar_search.search.a_star import TIE_BREAKS, a_star_search
from astar_search.search.cost import MAX_COST, unit_weight
from astar_search.search.ida_star import ida_star_search
from astar_search.search.path import SearchResult

logger = logging.getLogger(__name__)

HEADER = [
    "algorithm", "heuristic", "rows", "cols", "depth", "seed",
    "expanded", "generated", "g", "time_sec",
    "peak_open", "peak_closed", "peak_recursion", "iterations", "bound_final",
    "tie_break", "termination", "solvable",
]


@dataclass
class Instance:
    seed: int
    depth: int
    state: State


@dataclass
class RunConfig:
    rows: int = 3
    cols: int = 3
    algo: str = "both"
    heuristic: str = "manhattan"
    depths: List[int] = field(default_factory=lambda: [6, 10, 14, 18])
    per_depth: int = 10
    tie_break: str = "h"
    max_cost: float = MAX_COST
    include_unsolvable: bool = False
    out: Path = Path("results/last_run.csv")

    @property
    def algorithms(self) -> Tuple[str, ...]:
        return {"a": ("a",), "ida": ("ida",), "both": ("a", "ida")}[self.algo]


def generate_instances(puzzle: SlidingPuzzle, depths: List[int], per_depth: int,
                       start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            s = puzzle.scramble(d, seed)
            attempts += 1
            if puzzle.is_solvable(s):
                out.append(Instance(seed=seed, depth=d, state=s))
                made += 1
            seed += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out


def make_unsolvable_variant(s: State) -> State:
    """Swap the first two tiles, flipping the permutation parity."""
    lst = list(s)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)


def solve(puzzle: SlidingPuzzle, state: State, algo: str, hfun: Callable[[State], int],
          tie_break: str = "h", max_cost: float = MAX_COST) -> SearchResult:
    if algo == "a":
        return a_star_search(state, puzzle.expand, hfun, unit_weight, goal=puzzle.GOAL,
                             max_cost=max_cost, tie_break=tie_break)
    if algo == "ida":
        return ida_star_search(state, puzzle.expand, hfun, unit_weight, goal=puzzle.GOAL,
                               max_cost=max_cost)
    raise ValueError(f"unknown algorithm {algo!r}")


def result_row(res: SearchResult, cfg: RunConfig, inst: Instance, solvable: int) -> Dict[str, object]:
    row = res.as_row()
    row.update({
        "heuristic": cfg.heuristic, "rows": cfg.rows, "cols": cfg.cols,
        "depth": inst.depth, "seed": inst.seed,
        "tie_break": res.extra.get("tie_break", ""), "solvable": solvable,
    })
    return {k: ("" if row.get(k) is None else row[k]) for k in HEADER}


def run(cfg: RunConfig) -> int:
    """Run the configured sweep and write one CSV row per search; returns the row count."""
    puzzle = SlidingPuzzle(cfg.rows, cfg.cols)
    hfun = make_heuristic(cfg.heuristic, puzzle)
    insts = generate_instances(puzzle, cfg.depths, cfg.per_depth)
    cfg.out.parent.mkdir(parents=True, exist_ok=True)

    rows = 0
    with cfg.out.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=HEADER)
        w.writeheader()
        for inst in insts:
            variants = [(inst.state, 1)]
            # unsolvable variants exhaust half the state space; keep them to small boards
            if cfg.include_unsolvable:
                variants.append((make_unsolvable_variant(inst.state), 0))
            for state, solvable in variants:
                for algo in cfg.algorithms:
                    res = solve(puzzle, state, algo, hfun, cfg.tie_break, cfg.max_cost)
                    logger.info("%s depth=%d seed=%d -> %s (expanded=%d)",
                                res.algorithm, inst.depth, inst.seed, res.termination, res.expanded)
                    w.writerow(result_row(res, cfg, inst, solvable))
                    rows += 1
    return rows


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="A*/IDA* sliding-puzzle experiment runner")
    ap.add_argument("--algo", choices=["a", "ida", "both"], default="both")
    ap.add_argument("--heuristic", choices=list(HEURISTICS), default="manhattan")
    ap.add_argument("--depths", type=int, nargs="+", default=[6, 10, 14, 18])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--tie_break", choices=list(TIE_BREAKS), default="h")
    ap.add_argument("--max_cost", type=float, default=MAX_COST)
    ap.add_argument("--n", type=int, default=3, help="Square board size (N×N)")
    ap.add_argument("--rows", type=int, default=None, help="Rows for rectangular board")
    ap.add_argument("--cols", type=int, default=None, help="Cols for rectangular board")
    ap.add_argument("--include_unsolvable", action="store_true", help="Also run parity-flipped variants")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    ap.add_argument("--log-level", default="WARNING")
    return ap


def config_from_args(args: argparse.Namespace) -> RunConfig:
    rows = args.rows if args.rows is not None else args.n
    cols = args.cols if args.cols is not None else rows
    return RunConfig(
        rows=rows, cols=cols, algo=args.algo, heuristic=args.heuristic,
        depths=args.depths, per_depth=args.per_depth, tie_break=args.tie_break,
        max_cost=args.max_cost, include_unsolvable=args.include_unsolvable, out=args.out,
    )


def main(argv: Optional[List[str]] = None):
    args = build_argparser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    cfg = config_from_args(args)
    n = run(cfg)
    print(f"Wrote {cfg.out} ({n} runs)")


if __name__ == "__main__":
    main()
