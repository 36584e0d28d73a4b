from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Tuple
import math

import numpy as np

Coord = Tuple[int, int]

# 8-connected neighbourhood
DELTAS: Tuple[Coord, ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


def distance(a: Coord, b: Coord) -> float:
    """Euclidean distance; edge weight between neighbours and admissible heuristic."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


@dataclass
class GridMap:
    """Rectangular grid of cells indexed (x, y); True in blocked marks an obstacle."""
    blocked: np.ndarray

    @staticmethod
    def with_obstacles(width: int, height: int, obstacles: Iterable[Coord]) -> "GridMap":
        blocked = np.zeros((width, height), dtype=bool)
        for x, y in obstacles:
            blocked[x, y] = True
        return GridMap(blocked)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.blocked.shape

    def in_bounds(self, p: Coord) -> bool:
        x, y = p
        w, h = self.blocked.shape
        return 0 <= x < w and 0 <= y < h

    def is_blocked(self, p: Coord) -> bool:
        return bool(self.blocked[p[0], p[1]])

    def expand(self, p: Coord) -> List[Coord]:
        x, y = p
        out: List[Coord] = []
        for dx, dy in DELTAS:
            q = (x + dx, y + dy)
            if self.in_bounds(q) and not self.is_blocked(q):
                out.append(q)
        return out

    def heuristic_to(self, goal: Coord):
        return lambda p: distance(p, goal)
