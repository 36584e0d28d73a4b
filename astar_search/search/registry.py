from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Generic, Hashable, Iterator, Optional, TypeVar

from astar_search.search.cost import Cost

N = TypeVar("N", bound=Hashable)


class NodeStatus(Enum):
    OPEN = "open"
    CLOSED = "closed"
    ON_PATH = "on_path"   # IDA*: node is on the active path


@dataclass
class NodeRecord(Generic[N]):
    node: N
    status: NodeStatus
    g: Cost
    parent: Optional[N] = None   # key of the predecessor record, None for start


class NodeRegistry(Generic[N]):
    """
    Bookkeeping for discovered nodes, keyed by node identity.

    A* keeps one registry for the whole search; IDA* keeps only the nodes on
    the active path and removes them again on backtrack.
    """

    def __init__(self):
        self._records: Dict[N, NodeRecord[N]] = {}
        self.peak = 0

    def discover(self, node: N, g: Cost, status: NodeStatus = NodeStatus.OPEN,
                 parent: Optional[N] = None) -> NodeRecord[N]:
        """Create a record for node if absent; return the (possibly existing) record."""
        rec = self._records.get(node)
        if rec is None:
            rec = NodeRecord(node=node, status=status, g=g, parent=parent)
            self._records[node] = rec
            if len(self._records) > self.peak:
                self.peak = len(self._records)
        return rec

    def update(self, node: N, g: Cost, parent: Optional[N]) -> NodeRecord[N]:
        # callers only invoke this on a strict improvement of g
        rec = self._records[node]
        rec.g = g
        rec.parent = parent
        return rec

    def lookup(self, node: N) -> Optional[NodeRecord[N]]:
        return self._records.get(node)

    def remove(self, node: N) -> None:
        del self._records[node]

    def clear(self) -> None:
        self._records.clear()

    def __contains__(self, node) -> bool:
        return node in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[N]:
        return iter(self._records)
