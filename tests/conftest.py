"""Shared fixtures for the A* engine tests."""

from __future__ import annotations

import sys
from pathlib import Path

import networkx as nx
import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from astar_engine.app.graph import AStarGraph, NetworkXGraph, WeightedEdge  # noqa: E402


class FakeClock:
    """Manually advanced clock, in seconds."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class LineGraph(AStarGraph):
    """Infinite integer line: n connects to n-1 and n+1 with weight 1.

    Every neighbors() call advances ``clock`` by ``tick`` when one is given,
    so a search spends a known amount of time per expansion.
    """

    def __init__(self, clock: FakeClock | None = None, tick: float = 0.0):
        self.clock = clock
        self.tick = tick
        self.expanded: list[int] = []

    def neighbors(self, v):
        self.expanded.append(v)
        if self.clock is not None:
            self.clock.advance(self.tick)
        return [WeightedEdge(v, v - 1, 1.0), WeightedEdge(v, v + 1, 1.0)]

    def estimated_distance_to_goal(self, v, goal):
        return float(abs(goal - v))


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def line_graph():
    """Factory for ``LineGraph`` instances, optionally tied to a fake clock."""
    def make(clock: FakeClock | None = None, tick: float = 0.0) -> LineGraph:
        return LineGraph(clock=clock, tick=tick)
    return make


@pytest.fixture
def diamond() -> nx.DiGraph:
    """A->B (1), A->C (4), B->C (1), B->D (1), C->D (1)."""
    G = nx.DiGraph()
    G.add_weighted_edges_from([
        ("A", "B", 1.0),
        ("A", "C", 4.0),
        ("B", "C", 1.0),
        ("B", "D", 1.0),
        ("C", "D", 1.0),
    ])
    return G


@pytest.fixture
def diamond_graph(diamond) -> NetworkXGraph:
    return NetworkXGraph(diamond)


@pytest.fixture
def grid() -> nx.DiGraph:
    """30x30 directed grid with unit weights and x/y coordinates."""
    G = nx.grid_2d_graph(30, 30).to_directed()
    for (x, y), data in G.nodes(data=True):
        data["x"], data["y"] = float(x), float(y)
    nx.set_edge_attributes(G, 1.0, "weight")
    return G
