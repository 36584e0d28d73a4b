#!/usr/bin/env python3
from __future__ import annotations
import argparse, os
from pathlib import Path
from typing import List, Optional

import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from astar_search.domains.sliding_puzzle import SlidingPuzzle, State
from astar_search.experiments.runner import solve
from astar_search.heuristics.tiles import HEURISTICS, make_heuristic


def draw_board(state: State, puzzle: SlidingPuzzle, out_path: Path, title: str = ""):
    R, C = puzzle.R, puzzle.C
    fig, ax = plt.subplots(figsize=(C, R))
    ax.set_xlim(0, C); ax.set_ylim(0, R)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    for i in range(R + 1):
        ax.plot([0, C], [i, i], linewidth=1, color="black")
    for j in range(C + 1):
        ax.plot([j, j], [0, R], linewidth=1, color="black")
    for idx, t in enumerate(state):
        if t == 0:
            continue
        r, c = divmod(idx, C)
        ax.text(c + 0.5, r + 0.55, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title, fontsize=9)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(out_path, dpi=100)
    plt.close(fig)


def save_frames(path: List[State], puzzle: SlidingPuzzle, outdir: Path) -> List[Path]:
    frames = []
    for i, s in enumerate(path):
        p = outdir / f"step_{i:03d}.png"
        draw_board(s, puzzle, p, title=f"move {i}")
        frames.append(p)
    return frames


def main(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--algo", choices=["a", "ida"], default="a")
    p.add_argument("--heuristic", choices=list(HEURISTICS), default="manhattan")
    p.add_argument("--n", type=int, default=3)
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", type=Path, default=Path("results/figs/example_path"))
    args = p.parse_args(argv)

    puzzle = SlidingPuzzle(args.n)
    start = puzzle.scramble(args.depth, args.seed)
    res = solve(puzzle, start, args.algo, make_heuristic(args.heuristic, puzzle))
    if not res:
        print("No path found. Try smaller depth.")
        return

    frames = save_frames(res.path, puzzle, args.outdir)
    print(f"Saved {len(frames)} frames to {args.outdir}")


if __name__ == "__main__":
    main()
