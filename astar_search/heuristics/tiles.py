from __future__ import annotations
from typing import Callable

from astar_search.domains.sliding_puzzle import SlidingPuzzle, State
from astar_search.search.cost import zero_heuristic

HEURISTICS = ("manhattan", "misplaced", "linear_conflict", "zero")

_ALIASES = {
    "taxicab": "manhattan",
    "m": "manhattan",
    "lc": "linear_conflict",
    "linear": "linear_conflict",
}


def make_heuristic(name: str, puzzle: SlidingPuzzle) -> Callable[[State], int]:
    """Look up a tile heuristic by name for the given board."""
    key = _ALIASES.get(name.lower(), name.lower())
    if key == "manhattan":
        return puzzle.manhattan
    if key == "misplaced":
        return puzzle.misplaced
    if key == "linear_conflict":
        return puzzle.linear_conflict
    if key == "zero":
        return zero_heuristic
    raise ValueError(f"unknown heuristic {name!r}, expected one of {HEURISTICS}")
