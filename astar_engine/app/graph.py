from abc import ABC, abstractmethod
from typing import Callable, Generic, Hashable, Iterable, NamedTuple, TypeVar, Union

import networkx as nx

from .utils import euclidean, haversine

VERTEX = TypeVar("VERTEX", bound=Hashable)


class WeightedEdge(NamedTuple):
    from_: Hashable
    to: Hashable
    weight: float


class AStarGraph(ABC, Generic[VERTEX]):
    '''
    What the A* engine needs from a graph: outgoing edges of a vertex and an
    estimate of the remaining distance to a goal.

    The engine trusts both. Edge weights must be non-negative and the
    estimate must never exceed the true remaining cost (and should be
    consistent); otherwise the returned path may not be the shortest.
    '''

    @abstractmethod
    def neighbors(self, v: VERTEX) -> Iterable[WeightedEdge]:
        ...

    @abstractmethod
    def estimated_distance_to_goal(self, v: VERTEX, goal: VERTEX) -> float:
        ...


def zero_heuristic(v, goal):
    return 0.0


def euclidean_heuristic(G, scale=1.0):
    """Straight-line distance between node ``x``/``y`` attributes, times ``scale``."""
    def heuristic(v, goal):
        a, b = G.nodes.get(v, {}), G.nodes.get(goal, {})
        if "x" not in a or "x" not in b:
            return 0.0
        return scale * euclidean(a["x"], a["y"], b["x"], b["y"])
    return heuristic


def haversine_heuristic(G, speed_mps=None):
    '''
    Great-circle distance between nodes (``y`` = lat, ``x`` = lon). With
    ``speed_mps`` the estimate becomes an optimistic travel time in seconds.
    '''
    def heuristic(v, goal):
        a, b = G.nodes.get(v, {}), G.nodes.get(goal, {})
        if "x" not in a or "x" not in b:
            return 0.0
        dist_m = haversine(a["y"], a["x"], b["y"], b["x"])
        return dist_m / speed_mps if speed_mps else dist_m
    return heuristic


class NetworkXGraph(AStarGraph):
    '''
    Exposes a networkx graph to the engine.

    ``weight`` is either an edge attribute name (missing attributes count as
    1.0, as in networkx) or a callable taking the edge data dict.
    '''

    def __init__(self, G: nx.Graph,
                 weight: Union[str, Callable[[dict], float]] = "weight",
                 heuristic: Callable = None):
        self.G = G
        self._weight = weight if callable(weight) else (lambda data: data.get(weight, 1.0))
        self._heuristic = heuristic or zero_heuristic

    def neighbors(self, v):
        if v not in self.G:
            return []
        edges = self.G.out_edges(v, data=True) if self.G.is_directed() else self.G.edges(v, data=True)
        return [WeightedEdge(u, nbr, float(self._weight(data))) for u, nbr, data in edges]

    def estimated_distance_to_goal(self, v, goal):
        return self._heuristic(v, goal)


def path_weight(graph: AStarGraph, path) -> float:
    """Total weight of walking ``path``, using the cheapest edge between each pair."""
    total = 0.0
    for u, v in zip(path[:-1], path[1:]):
        weights = [e.weight for e in graph.neighbors(u) if e.to == v]
        if not weights:
            raise ValueError(f"Edge {u!r}->{v!r} not present in graph.")
        total += min(weights)
    return total
