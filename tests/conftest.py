from typing import Dict, List

import pytest

from astar_search.search.a_star import a_star_search
from astar_search.search.ida_star import ida_star_search

AdjGraph = Dict[str, Dict[str, int]]

WEIGHTED_GRAPH: AdjGraph = {
    "a": {"b": 4, "c": 3},
    "b": {"a": 4, "e": 12, "f": 5},
    "c": {"a": 3, "d": 7, "e": 10},
    "d": {"c": 7, "e": 2},
    "e": {"c": 10, "d": 2, "b": 12, "z": 5},
    "f": {"b": 5, "z": 16},
    "z": {"f": 16, "e": 5},
}


class GraphCallbacks:
    """expand / weight callbacks over an explicit adjacency map, counting calls."""

    def __init__(self, graph: AdjGraph):
        self.graph = graph
        self.expand_calls: List[str] = []

    def expand(self, n: str) -> List[str]:
        self.expand_calls.append(n)
        return list(self.graph.get(n, {}))

    def weight(self, n: str, m: str) -> int:
        return self.graph[n][m]


@pytest.fixture
def weighted_graph() -> GraphCallbacks:
    return GraphCallbacks(WEIGHTED_GRAPH)


@pytest.fixture(params=[a_star_search, ida_star_search], ids=["astar", "idastar"])
def search(request):
    return request.param
