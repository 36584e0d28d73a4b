#!/usr/bin/env python3
from __future__ import annotations
import argparse, os
from pathlib import Path
from typing import List, Optional

import matplotlib
# Headless unless the caller picked a backend
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

from astar_search.experiments.analyze import METRICS, load_results, ratio_table

# IDA* points are nudged right so error bars stay readable
_X_OFFSET = {"A*": -0.12, "IDA*": 0.12}


def plot_metric(ax, df: pd.DataFrame, metric: str, log: bool = False):
    agg = df.groupby(["algorithm", "depth"])[metric].agg(["mean", "std"]).reset_index()
    for algo, grp in agg.groupby("algorithm"):
        xs = grp["depth"] + _X_OFFSET.get(algo, 0.0)
        ax.errorbar(xs, grp["mean"], yerr=grp["std"].fillna(0.0), marker="o", capsize=3, label=algo)
    if log:
        ax.set_yscale("log")
    ax.set(xlabel="Scramble depth", ylabel=metric, title=f"{metric} by depth")
    ax.grid(True, alpha=0.4)
    ax.legend()


def plot_ratio(ax, df: pd.DataFrame, metric: str):
    table = ratio_table(df, metric)
    ax.plot(table["depth"], table["ratio"], marker="s", color="tab:purple")
    ax.axhline(1.0, linestyle="--", color="grey")
    ax.set(xlabel="Scramble depth", ylabel=f"IDA* / A* {metric}", title=f"{metric} ratio")
    ax.grid(True, alpha=0.4)


def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    print(f"Saved: {path}")
    return path


def plot_all(df: pd.DataFrame, outdir: Path, base: str) -> List[Path]:
    """Three-panel overview, then log-scale single panels for expanded and time."""
    fig, axes = plt.subplots(1, len(METRICS), figsize=(5 * len(METRICS), 5))
    for ax, metric in zip(axes, METRICS):
        plot_metric(ax, df, metric)
    fig.tight_layout()
    saved = [save_fig(fig, outdir, f"{base}_combined")]

    for metric in ("expanded", "time_sec"):
        fig, ax = plt.subplots(figsize=(8, 6))
        plot_metric(ax, df, metric, log=True)
        fig.tight_layout()
        saved.append(save_fig(fig, outdir, f"{base}_{metric}"))
    return saved


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Plot runner CSVs to PNG files.")
    ap.add_argument("csv", nargs="+", type=Path)
    ap.add_argument("--save", type=Path, default=Path("results/plots"), help="Output directory")
    ap.add_argument("--ratio", choices=list(METRICS), default=None,
                    help="Also plot the IDA*/A* ratio of this metric")
    ap.add_argument("--show", action="store_true", help="Open windows after saving")
    args = ap.parse_args(argv)

    df = load_results(args.csv)
    if df.empty:
        print("Nothing to plot: no successful runs in input.")
        return

    base = "combo" if len(args.csv) > 1 else args.csv[0].stem
    plot_all(df, args.save, base)
    if args.ratio:
        fig, ax = plt.subplots(figsize=(8, 5))
        plot_ratio(ax, df, args.ratio)
        save_fig(fig, args.save, f"{base}_{args.ratio}_ratio")
    if args.show:
        plt.show()


if __name__ == "__main__":
    main()
