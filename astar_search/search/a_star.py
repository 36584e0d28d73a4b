from __future__ import annotations
from typing import Any, Hashable, List, MutableSequence, Optional, Tuple
import heapq
import itertools
import logging
from time import perf_counter

from astar_search.search.cost import MAX_COST, Cost, ExpandFn, GoalFn, HeuristicFn, WeightFn, goal_test
from astar_search.search.path import SearchResult, emit, reconstruct_path
from astar_search.search.registry import NodeRegistry, NodeStatus

logger = logging.getLogger(__name__)

TIE_BREAKS = ("h", "g", "fifo", "lifo")

# heap item: (priority tuple, f, node)
FrontierItem = Tuple[Tuple[Any, ...], Cost, Hashable]


class Frontier:
    """
    Min-priority queue of (node, f) entries.

    Entries are never purged when a node's cost improves; the older entry just
    becomes stale. Equal-f entries are ordered by tie_break:
      h    - lower h first (default)
      g    - higher g first
      fifo - insertion order
      lifo - reverse insertion order
    """

    def __init__(self, tie_break: str = "h"):
        if tie_break not in TIE_BREAKS:
            raise ValueError(f"unknown tie_break {tie_break!r}, expected one of {TIE_BREAKS}")
        self.tie_break = tie_break
        self._heap: List[FrontierItem] = []
        self._counter = itertools.count()
        self.peak = 0

    def _priority(self, f: Cost, g: Cost, h: Cost) -> Tuple[Any, ...]:
        ctr = next(self._counter)
        if self.tie_break == "h":    return (f, h, ctr)
        if self.tie_break == "g":    return (f, -g, ctr)
        if self.tie_break == "fifo": return (f, 0, ctr)
        return (f, 0, -ctr)

    def push(self, node, f: Cost, g: Cost, h: Cost) -> None:
        heapq.heappush(self._heap, (self._priority(f, g, h), f, node))
        if len(self._heap) > self.peak:
            self.peak = len(self._heap)

    def pop(self) -> Tuple[Hashable, Cost]:
        _, f, node = heapq.heappop(self._heap)
        return node, f

    def __len__(self) -> int:
        return len(self._heap)


def a_star_search(
    start,
    expand: ExpandFn,
    heuristic: HeuristicFn,
    weight: WeightFn,
    is_goal: Optional[GoalFn] = None,
    *,
    goal=None,
    max_cost: Cost = MAX_COST,
    tie_break: str = "h",
    skip_closed: bool = True,
    out: Optional[MutableSequence] = None,
) -> SearchResult:
    """
    Implicit-graph A* search.

    expand(node) yields neighbours, heuristic(node) must be admissible and
    weight(a, b) nonnegative. The goal is given either as a predicate
    (is_goal) or as a node compared by equality (goal).

    The search stops with failure as soon as the smallest f on the frontier
    exceeds max_cost. On success the path (start..goal) is returned in the
    result and, if out is given, appended to it; result.cost is the f of the
    popped goal entry.

    With skip_closed=False, popped entries whose node was already expanded
    are expanded again instead of being discarded.
    """
    goal_fn = goal_test(is_goal, goal)
    t0 = perf_counter()

    registry: NodeRegistry = NodeRegistry()
    frontier = Frontier(tie_break)

    h0 = heuristic(start)
    registry.discover(start, 0, NodeStatus.OPEN)
    frontier.push(start, h0, 0, h0)

    expanded = 0
    generated = 0
    last_f: Optional[Cost] = None

    def result(path, found: bool, termination: str) -> SearchResult:
        return SearchResult(
            path=path, cost=last_f, found=found, algorithm="A*",
            termination=termination, expanded=expanded, generated=generated,
            time=perf_counter() - t0, peak_frontier=frontier.peak,
            peak_registry=registry.peak, extra={"tie_break": tie_break},
        )

    while frontier:
        node, f = frontier.pop()
        last_f = f

        if f > max_cost:
            # f is a lower bound on every solution still reachable
            logger.debug("A*: f=%s exceeds max_cost=%s after %d expansions", f, max_cost, expanded)
            return result([], False, "max_cost")

        rec = registry.lookup(node)
        if skip_closed and rec.status is NodeStatus.CLOSED:
            continue

        if goal_fn(node):
            path = reconstruct_path(registry, node)
            emit(path, out)
            logger.debug("A*: goal reached, cost=%s, expanded=%d, generated=%d", f, expanded, generated)
            return result(path, True, "ok")

        rec.status = NodeStatus.CLOSED
        expanded += 1

        for nb in expand(node):
            generated += 1
            nb_rec = registry.lookup(nb)
            if nb_rec is not None and nb_rec.status is NodeStatus.CLOSED:
                continue

            g2 = rec.g + weight(node, nb)
            h2 = heuristic(nb)
            f2 = g2 + h2

            if nb_rec is None:
                registry.discover(nb, g2, NodeStatus.OPEN, parent=node)
            elif g2 < nb_rec.g:
                registry.update(nb, g2, node)
            else:
                continue   # suboptimal rediscovery

            frontier.push(nb, f2, g2, h2)

    logger.debug("A*: frontier exhausted after %d expansions", expanded)
    return result([], False, "exhausted")
