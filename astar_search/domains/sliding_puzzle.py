from __future__ import annotations
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple
import random

from astar_search.domains.cycle_decomposition import is_even_permutation

State = Tuple[int, ...]


class InvalidPuzzleState(ValueError):
    pass


class MoveType(Enum):
    """Direction the blank moves in."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


MOVES = (MoveType.UP, MoveType.DOWN, MoveType.LEFT, MoveType.RIGHT)


class SlidingPuzzle:
    """
    Generic R×C sliding-tile puzzle (0 is the blank).

    Square boards are the usual 8-puzzle (3×3) and 15-puzzle (4×4). States
    are plain tuples in row-major order; the solved state is 1..R*C-1 with
    the blank in the lower-right corner.
    """
    def __init__(self, rows: int, cols: Optional[int] = None):
        cols = rows if cols is None else cols
        if rows < 2 or cols < 2:
            raise ValueError(f"invalid puzzle dimension {rows}x{cols}")
        self.R = rows
        self.C = cols
        self.size = rows * cols
        self.GOAL: State = tuple(list(range(1, self.size)) + [0])

        # Goal positions for each tile
        self._goal_pos: Dict[int, Tuple[int, int]] = {}
        for t in range(1, self.size):
            self._goal_pos[t] = divmod(t - 1, cols)

    # ---------- Geometry ----------
    def row_col(self, idx: int) -> Tuple[int, int]:
        return divmod(idx, self.C)

    def blank_row_col(self, s: State) -> Tuple[int, int]:
        return self.row_col(s.index(0))

    def can_move(self, s: State, mt: MoveType) -> bool:
        r, c = self.blank_row_col(s)
        if mt is MoveType.UP:    return r > 0
        if mt is MoveType.DOWN:  return r < self.R - 1
        if mt is MoveType.LEFT:  return c > 0
        return c < self.C - 1

    # ---------- Core dynamics ----------
    def move(self, s: State, mt: MoveType) -> Optional[State]:
        """State after moving the blank, or None if the move is illegal."""
        if not self.can_move(s, mt):
            return None
        z = s.index(0)
        if mt is MoveType.UP:      j = z - self.C
        elif mt is MoveType.DOWN:  j = z + self.C
        elif mt is MoveType.LEFT:  j = z - 1
        else:                      j = z + 1
        lst = list(s)
        lst[z], lst[j] = lst[j], lst[z]
        return tuple(lst)

    def expand(self, s: State) -> List[State]:
        """All states one legal blank move away."""
        out: List[State] = []
        for mt in MOVES:
            nxt = self.move(s, mt)
            if nxt is not None:
                out.append(nxt)
        return out

    def move_between(self, a: State, b: State) -> Optional[MoveType]:
        """The single blank move turning a into b, if there is one."""
        for mt in MOVES:
            if self.move(a, mt) == b:
                return mt
        return None

    def is_solved(self, s: State) -> bool:
        return s == self.GOAL

    # ---------- Validation ----------
    def _blank_to_lower_right(self, s: State) -> State:
        r, c = self.blank_row_col(s)
        for _ in range(self.R - 1 - r):
            s = self.move(s, MoveType.DOWN)
        for _ in range(self.C - 1 - c):
            s = self.move(s, MoveType.RIGHT)
        return s

    def is_solvable(self, s: Sequence[int]) -> bool:
        """
        With the blank parked in the lower-right corner, a configuration is
        reachable from GOAL iff it is an even permutation of GOAL.
        """
        s = tuple(s)
        if len(s) != self.size or 0 not in s:
            return False
        parked = self._blank_to_lower_right(s)
        return is_even_permutation(self.GOAL, parked)

    def validate(self, s: Sequence[int]) -> State:
        s = tuple(int(x) for x in s)
        if len(s) != self.size:
            raise InvalidPuzzleState(f"expected {self.size} tiles, got {len(s)}")
        if sorted(s) != list(range(self.size)):
            raise InvalidPuzzleState(f"state {s} is not a permutation of 0..{self.size - 1}")
        if not self.is_solvable(s):
            raise InvalidPuzzleState(f"state {s} cannot reach the solved configuration")
        return s

    # ---------- Instance generation ----------
    def shuffle(self, seed: Optional[int] = None) -> State:
        """Uniformly random solvable configuration other than GOAL."""
        rng = random.Random(seed)
        tiles = list(self.GOAL[:-1])
        while True:
            rng.shuffle(tiles)
            cand = tuple(tiles) + (0,)
            if cand != self.GOAL and is_even_permutation(self.GOAL, cand):
                break
        # move the blank from the corner to a random cell
        r = rng.randrange(self.R)
        c = rng.randrange(self.C)
        s: State = cand
        for _ in range(self.R - 1 - r):
            s = self.move(s, MoveType.UP)
        for _ in range(self.C - 1 - c):
            s = self.move(s, MoveType.LEFT)
        return s

    def scramble(self, depth: int, seed: int) -> State:
        """Depth-limited random walk from GOAL with no immediate backtrack."""
        rng = random.Random(seed)
        s = self.GOAL
        prev: Optional[State] = None
        for _ in range(depth):
            cand = [n for n in self.expand(s) if n != prev]
            if not cand:
                cand = self.expand(s)
            prev, s = s, rng.choice(cand)
        return s

    # ---------- Heuristics ----------
    def manhattan(self, s: State) -> int:
        dist = 0
        for idx, tile in enumerate(s):
            if tile == 0:
                continue
            r, c = divmod(idx, self.C)
            gr, gc = self._goal_pos[tile]
            dist += abs(r - gr) + abs(c - gc)
        return dist

    def misplaced(self, s: State) -> int:
        return sum(1 for t, g in zip(s, self.GOAL) if t != 0 and t != g)

    def linear_conflict(self, s: State) -> int:
        """Manhattan + 2 per pair of linearly-conflicting tiles (rows & cols)."""
        m = self.manhattan(s)
        R, C = self.R, self.C
        # Row conflicts
        for r in range(R):
            row = s[r * C:(r + 1) * C]
            goal_cols = [self._goal_pos[t][1] for t in row if t != 0 and self._goal_pos[t][0] == r]
            m += 2 * _inversions(goal_cols)
        # Column conflicts
        for c in range(C):
            col = [s[c + r * C] for r in range(R)]
            goal_rows = [self._goal_pos[t][0] for t in col if t != 0 and self._goal_pos[t][1] == c]
            m += 2 * _inversions(goal_rows)
        return m

    # ---------- Display ----------
    def render(self, s: State) -> str:
        width = len(str(self.size - 1))
        lines = []
        for r in range(self.R):
            cells = [(str(t) if t else " ").rjust(width) for t in s[r * self.C:(r + 1) * self.C]]
            lines.append("[ " + " ".join(cells) + " ]")
        return "\n".join(lines)


def _inversions(xs: List[int]) -> int:
    n = 0
    for i in range(len(xs)):
        for j in range(i + 1, len(xs)):
            if xs[i] > xs[j]:
                n += 1
    return n
