#!/usr/bin/env python3
"""Standard sweep: 8-puzzle A* vs IDA* per heuristic, then summary and plots."""
import subprocess, sys
from pathlib import Path

SWEEPS = [
    # heuristic, depths, instances per depth
    ("manhattan", "6 10 14 18", 10),
    ("linear_conflict", "6 10 14 18", 10),
    ("misplaced", "6 10 14", 5),
]


def step(module, args):
    cmd = [sys.executable, "-m", f"astar_search.experiments.{module}", *args.split()]
    print("Running:", " ".join(cmd))
    rc = subprocess.call(cmd)
    if rc != 0:
        sys.exit(rc)


def main():
    Path("results").mkdir(exist_ok=True)
    csvs = []
    for heur, depths, per_depth in SWEEPS:
        out = f"results/{heur}.csv"
        step("runner", f"--algo both --heuristic {heur} --depths {depths} --per_depth {per_depth} --out {out}")
        csvs.append(out)
    step("analyze", " ".join(csvs[:2]))
    step("plot", " ".join(csvs[:2]) + " --ratio time_sec --save results/plots")


if __name__ == "__main__":
    main()
