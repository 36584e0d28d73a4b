from __future__ import annotations
from typing import List, Sequence, Tuple

import numpy as np

from astar_search.search.a_star import a_star_search
from astar_search.search.cost import Cost

# 3×3 square flattened row-major
Square = Tuple[int, ...]

LO_SHU = np.array([[4, 9, 2],
                   [3, 5, 7],
                   [8, 1, 6]])

MAGIC_SUM = 15


class InvalidSquare(ValueError):
    pass


def _symmetries(grid: np.ndarray) -> List[np.ndarray]:
    rots = [np.rot90(grid, k) for k in range(4)]
    return rots + [np.fliplr(r) for r in rots]


# All eight 3×3 magic squares: the Lo Shu square under rotation and reflection.
MAGIC_SQUARES: Tuple[Square, ...] = tuple(
    sorted({tuple(int(v) for v in g.flatten()) for g in _symmetries(LO_SHU)})
)


def to_square(rows: Sequence[Sequence[int]]) -> Square:
    arr = np.asarray(rows, dtype=int)
    if arr.shape == (9,):
        arr = arr.reshape(3, 3)
    if arr.shape != (3, 3):
        raise InvalidSquare(f"expected a 3x3 square, got shape {arr.shape}")
    return tuple(int(v) for v in arr.flatten())


def square_diff(a: Square, b: Square) -> int:
    """Cost of turning a into b: sum of absolute cell differences."""
    return sum(abs(x - y) for x, y in zip(a, b))


def heuristic(sq: Square) -> int:
    """Distance to the nearest magic square (admissible: every change costs |delta|)."""
    return min(square_diff(sq, m) for m in MAGIC_SQUARES)


def is_magic_square(sq: Square) -> bool:
    if sorted(sq) != list(range(1, 10)):
        return False
    g = np.asarray(sq).reshape(3, 3)
    sums = list(g.sum(axis=0)) + list(g.sum(axis=1)) + [np.trace(g), np.trace(np.fliplr(g))]
    return all(int(s) == MAGIC_SUM for s in sums)


def expand(sq: Square) -> List[Square]:
    """Replace one cell with the value some magic square holds there."""
    out: List[Square] = []
    seen = set()
    for i in range(9):
        for m in MAGIC_SQUARES:
            if m[i] != sq[i] and (i, m[i]) not in seen:
                seen.add((i, m[i]))
                nxt = list(sq)
                nxt[i] = m[i]
                out.append(tuple(nxt))
    return out


def expand_all(sq: Square) -> List[Square]:
    """Replace one cell with any other digit 1..9 (much larger branching)."""
    out: List[Square] = []
    for i in range(9):
        for v in range(1, 10):
            if v != sq[i]:
                nxt = list(sq)
                nxt[i] = v
                out.append(tuple(nxt))
    return out


def forming_magic_square(rows: Sequence[Sequence[int]]) -> Tuple[Cost, List[Square]]:
    """Minimal cost of converting rows into a magic square, and the squares visited."""
    start = to_square(rows)
    res = a_star_search(start, expand, heuristic, square_diff, is_magic_square)
    if not res.found:
        raise RuntimeError(f"no magic square reachable from {start}")
    return res.cost, res.path


def render(sq: Square) -> str:
    return "\n".join(" ".join(str(v) for v in sq[r * 3:(r + 1) * 3]) for r in range(3))
