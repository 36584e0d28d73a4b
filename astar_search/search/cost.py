from __future__ import annotations
from typing import Callable, Hashable, Iterable, TypeVar, Union
import math
from fractions import Fraction

Node = TypeVar("Node", bound=Hashable)

# Any ordered, additive numeric type works: int, float, Fraction, numpy scalars.
Cost = Union[int, float, Fraction]

# Sentinel for "unreachable": compares greater than every finite cost.
MAX_COST: float = math.inf

ExpandFn = Callable[[Node], Iterable[Node]]
HeuristicFn = Callable[[Node], Cost]
WeightFn = Callable[[Node, Node], Cost]
GoalFn = Callable[[Node], bool]


def is_max_cost(c) -> bool:
    return c == MAX_COST


def goal_test(is_goal: GoalFn | None = None, goal=None) -> GoalFn:
    """Build the goal predicate from either a callable or an explicit goal node."""
    if (is_goal is None) == (goal is None):
        raise TypeError("pass exactly one of is_goal= or goal=")
    if is_goal is not None:
        return is_goal
    return lambda n: n == goal


def zero_heuristic(_node) -> int:
    return 0


def unit_weight(_a, _b) -> int:
    return 1
