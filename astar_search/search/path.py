from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, MutableSequence, Optional

from astar_search.search.cost import Cost
from astar_search.search.registry import NodeRecord, NodeRegistry


@dataclass
class SearchResult:
    """Outcome of one A* or IDA* call plus the counters the experiments record."""
    path: List[Any]
    cost: Optional[Cost]
    found: bool
    algorithm: str
    termination: str = "ok"        # ok | exhausted | max_cost
    expanded: int = 0
    generated: int = 0
    time: float = 0.0
    peak_frontier: Optional[int] = None
    peak_registry: Optional[int] = None
    peak_depth: Optional[int] = None
    iterations: Optional[int] = None
    bound_final: Optional[Cost] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return self.found

    @property
    def moves(self) -> int:
        return max(len(self.path) - 1, 0)

    def as_row(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "expanded": self.expanded,
            "generated": self.generated,
            "g": self.cost if self.found else None,
            "time_sec": round(self.time, 6),
            "peak_open": self.peak_frontier,
            "peak_closed": self.peak_registry,
            "peak_recursion": self.peak_depth,
            "iterations": self.iterations,
            "bound_final": self.bound_final,
            "termination": self.termination,
        }


def reconstruct_path(registry: NodeRegistry, goal) -> List[Any]:
    """Follow predecessor keys from goal back to the start, then reverse."""
    path: List[Any] = []
    rec = registry.lookup(goal)
    while rec is not None:
        path.append(rec.node)
        rec = registry.lookup(rec.parent) if rec.parent is not None else None
    path.reverse()
    return path


def drain_path_stack(stack: List[NodeRecord]) -> List[Any]:
    """Empty an IDA* path stack (start at the bottom) into start->goal order."""
    path: deque = deque()
    while stack:
        path.appendleft(stack.pop().node)
    return list(path)


def emit(path: List[Any], out: Optional[MutableSequence]) -> None:
    if out is not None:
        out.extend(path)


def path_cost(path, weight: Callable[[Any, Any], Cost]) -> Cost:
    """Sum of edge weights along consecutive pairs of path."""
    total: Cost = 0
    for a, b in zip(path, path[1:]):
        total = total + weight(a, b)
    return total
