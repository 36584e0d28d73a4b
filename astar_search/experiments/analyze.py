#!/usr/bin/env python3
from __future__ import annotations
import argparse
from pathlib import Path
from typing import Iterable, List, Optional

import numpy as np
import pandas as pd

METRICS = ("expanded", "generated", "time_sec")


def load_results(paths: Iterable[Path]) -> pd.DataFrame:
    """Concatenate runner CSVs, keeping successful runs with numeric metrics."""
    dfs = []
    for p in paths:
        df = pd.read_csv(p)
        df["__src__"] = Path(p).name
        dfs.append(df)
    if not dfs:
        return pd.DataFrame(columns=["algorithm", "depth", *METRICS])
    df = pd.concat(dfs, ignore_index=True, sort=False)

    term = df["termination"] if "termination" in df.columns else pd.Series("ok", index=df.index)
    df = df[term.fillna("ok") == "ok"].copy()
    for c in ("depth", "seed", *METRICS):
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    return df.dropna(subset=["algorithm", "depth"])


def summarize(df: pd.DataFrame, metrics=METRICS) -> pd.DataFrame:
    """mean / median / std / min / max per (algorithm, depth)."""
    present = [m for m in metrics if m in df.columns]
    return df.groupby(["algorithm", "depth"])[present].agg(["mean", "median", "std", "min", "max"])


def ratio_table(df: pd.DataFrame, metric: str = "time_sec",
                num: str = "IDA*", den: str = "A*") -> pd.DataFrame:
    """Mean metric of num over den per depth, where both algorithms have runs."""
    means = df.groupby(["depth", "algorithm"])[metric].mean().unstack("algorithm")
    if num not in means.columns or den not in means.columns:
        return pd.DataFrame(columns=["depth", num, den, "ratio"])
    out = means[[num, den]].dropna().reset_index()
    out["ratio"] = np.where(out[den] > 0, out[num] / out[den].where(out[den] > 0, 1.0), np.inf)
    return out


def first_crossover(table: pd.DataFrame) -> Optional[int]:
    """First depth where the ratio drops to <= 1 (numerator becomes cheaper)."""
    hit = table[table["ratio"] <= 1.0]
    if hit.empty:
        return None
    return int(hit["depth"].min())


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Summarize runner CSVs: A* vs IDA*")
    ap.add_argument("csv", nargs="+", type=Path)
    ap.add_argument("--metric", choices=list(METRICS), default="time_sec")
    args = ap.parse_args(argv)

    df = load_results(args.csv)
    if df.empty:
        print("No successful runs in input.")
        return

    with pd.option_context("display.width", 160, "display.max_columns", 30):
        print("=" * 80)
        print("Per-depth statistics")
        print("=" * 80)
        print(summarize(df))
        table = ratio_table(df, args.metric)
        print("\n" + "=" * 80)
        print(f"Ratio IDA*/A* ({args.metric})")
        print("=" * 80)
        print(table.to_string(index=False))
    d = first_crossover(table)
    if d is not None:
        print(f"\nIDA* first matches or beats A* at depth {d}")


if __name__ == "__main__":
    main()
