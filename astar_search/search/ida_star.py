from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterator, List, MutableSequence, Optional, Tuple
import logging
from operator import itemgetter
from time import perf_counter

from astar_search.search.cost import MAX_COST, Cost, ExpandFn, GoalFn, HeuristicFn, WeightFn, goal_test, is_max_cost
from astar_search.search.path import SearchResult, drain_path_stack, emit
from astar_search.search.registry import NodeRecord, NodeRegistry, NodeStatus

logger = logging.getLogger(__name__)


@dataclass
class _Counters:
    expanded: int = 0
    generated: int = 0
    peak_depth: int = 0


@dataclass
class _Frame:
    """An expanded node on the active path, with its remaining children."""
    rec: NodeRecord
    children: Iterator[Tuple[Cost, Any]]
    t_min: Cost = MAX_COST


def bounded_search(
    path: List[NodeRecord],
    registry: NodeRegistry,
    expand: ExpandFn,
    heuristic: HeuristicFn,
    weight: WeightFn,
    is_goal: GoalFn,
    bound: Cost,
    max_cost: Cost = MAX_COST,
    h: Optional[Cost] = None,
    counters: Optional[_Counters] = None,
) -> Tuple[bool, Cost]:
    """
    Depth-first step of IDA*, starting from the node on top of path.

    Returns (True, f) when the goal is reached; path then holds the whole
    start..goal sequence. Otherwise returns (False, t) where t is the
    smallest f that exceeded bound, or MAX_COST when nothing below the
    start had eligible children at all.

    The descent keeps one frame per expanded node instead of recursing, so
    path length is not limited by the interpreter stack. h may carry the
    already computed heuristic of the top node.
    """
    if counters is None:
        counters = _Counters()

    frames: List[_Frame] = []
    h_top = heuristic(path[-1].node) if h is None else h

    while True:
        # visit the node on top of path
        rec = path[-1]
        if len(path) > counters.peak_depth:
            counters.peak_depth = len(path)
        f = rec.g + h_top

        t: Optional[Cost] = None
        if f > bound or f > max_cost:
            t = f
        elif is_goal(rec.node):
            return True, f
        else:
            counters.expanded += 1
            # cheapest-looking children first; ordering only, not correctness
            children = sorted(((heuristic(nb), nb) for nb in expand(rec.node)), key=itemgetter(0))
            frames.append(_Frame(rec, iter(children)))

        # unwind finished nodes until some frame has a child left to try
        while True:
            if t is not None:
                if not frames:
                    return False, t
                done = path.pop()
                registry.remove(done.node)
                if t < frames[-1].t_min:
                    frames[-1].t_min = t

            frame = frames[-1]
            for h_nb, nb in frame.children:
                if nb not in registry:   # skip nodes already on the active path
                    break
            else:
                frames.pop()
                t = frame.t_min
                continue

            counters.generated += 1
            g_nb = frame.rec.g + weight(frame.rec.node, nb)
            path.append(registry.discover(nb, g_nb, NodeStatus.ON_PATH, parent=frame.rec.node))
            h_top = h_nb
            break


def ida_star_search(
    start,
    expand: ExpandFn,
    heuristic: HeuristicFn,
    weight: WeightFn,
    is_goal: Optional[GoalFn] = None,
    *,
    goal=None,
    max_cost: Cost = MAX_COST,
    out: Optional[MutableSequence] = None,
) -> SearchResult:
    """
    Iterative-deepening A*.

    Memory is proportional to the length of the current path: only nodes on
    the active path are registered, so revisiting a node after backtracking
    costs a full rediscovery. Same callback contract as a_star_search.

    The bound starts at heuristic(start) and is raised each round to the
    smallest f that exceeded it. The search fails when no f exceeded the
    bound (no path exists) or when the next bound is above max_cost.
    """
    goal_fn = goal_test(is_goal, goal)
    t0 = perf_counter()
    counters = _Counters()

    h0 = heuristic(start)
    bound: Cost = h0
    iterations = 0
    peak_registry = 0

    def result(path, found: bool, cost, termination: str) -> SearchResult:
        return SearchResult(
            path=path, cost=cost, found=found, algorithm="IDA*",
            termination=termination, expanded=counters.expanded,
            generated=counters.generated, time=perf_counter() - t0,
            peak_registry=peak_registry, peak_depth=counters.peak_depth,
            iterations=iterations, bound_final=bound,
        )

    while True:
        iterations += 1
        registry: NodeRegistry = NodeRegistry()
        stack: List[NodeRecord] = [registry.discover(start, 0, NodeStatus.ON_PATH)]

        found, t = bounded_search(stack, registry, expand, heuristic, weight, goal_fn,
                                  bound, max_cost, h0, counters)
        peak_registry = max(peak_registry, registry.peak)

        if found:
            path = drain_path_stack(stack)
            emit(path, out)
            logger.debug("IDA*: goal reached at bound=%s after %d iterations", t, iterations)
            return result(path, True, t, "ok")

        if is_max_cost(t):
            logger.debug("IDA*: no path at any bound (last bound=%s)", bound)
            return result([], False, bound, "exhausted")

        logger.debug("IDA*: iteration %d bound=%s -> next bound=%s", iterations, bound, t)
        bound = t
        if bound > max_cost:
            logger.debug("IDA*: bound %s exceeds max_cost=%s", bound, max_cost)
            return result([], False, bound, "max_cost")
