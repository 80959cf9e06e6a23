"""networkx adapter and heuristic tests"""
import math

import networkx as nx
import pytest

from astar_engine.app.graph import (
    NetworkXGraph,
    WeightedEdge,
    euclidean_heuristic,
    haversine_heuristic,
    path_weight,
    zero_heuristic,
)
from astar_engine.app.utils import euclidean, haversine


class TestNetworkXGraph:

    def test_directed_neighbors(self, diamond_graph):
        assert diamond_graph.neighbors("A") == [
            WeightedEdge("A", "B", 1.0),
            WeightedEdge("A", "C", 4.0),
        ]
        assert diamond_graph.neighbors("D") == []

    def test_unknown_vertex_has_no_neighbors(self, diamond_graph):
        assert diamond_graph.neighbors("Z") == []

    def test_undirected_neighbors_go_both_ways(self):
        G = nx.Graph()
        G.add_edge(1, 2, weight=3.0)
        graph = NetworkXGraph(G)
        assert graph.neighbors(2) == [WeightedEdge(2, 1, 3.0)]

    def test_missing_weight_defaults_to_one(self):
        G = nx.DiGraph()
        G.add_edge("u", "v")
        assert NetworkXGraph(G).neighbors("u")[0].weight == 1.0

    def test_weight_callable_receives_edge_data(self):
        G = nx.DiGraph()
        G.add_edge("u", "v", travel_time=10.0, risk=0.5)
        graph = NetworkXGraph(G, weight=lambda d: d["travel_time"] * (1.0 + d["risk"]))
        assert graph.neighbors("u")[0].weight == pytest.approx(15.0)

    def test_default_heuristic_is_zero(self, diamond_graph):
        assert diamond_graph.estimated_distance_to_goal("A", "D") == 0.0
        assert zero_heuristic("x", "y") == 0.0


class TestHeuristics:

    def test_euclidean(self, grid):
        h = euclidean_heuristic(grid, scale=2.0)
        assert h((0, 0), (3, 4)) == pytest.approx(10.0)

    def test_missing_coordinates_estimate_zero(self, diamond):
        assert euclidean_heuristic(diamond)("A", "D") == 0.0
        assert haversine_heuristic(diamond)("A", "D") == 0.0

    def test_haversine_travel_time(self):
        G = nx.DiGraph()
        G.add_node(1, y=4.60, x=-74.08)
        G.add_node(2, y=4.70, x=-74.08)
        meters = haversine(4.60, -74.08, 4.70, -74.08)
        assert meters == pytest.approx(11119.5, rel=1e-3)
        assert haversine_heuristic(G)(1, 2) == pytest.approx(meters)
        assert haversine_heuristic(G, speed_mps=10.0)(1, 2) == pytest.approx(meters / 10.0)

    def test_euclidean_helper(self):
        assert euclidean(0, 0, 3, 4) == 5.0
        assert haversine(1.0, 2.0, 1.0, 2.0) == 0.0


class TestPathWeight:

    def test_sums_edges(self, diamond_graph):
        assert path_weight(diamond_graph, ["A", "B", "C", "D"]) == 3.0

    def test_single_vertex_is_zero(self, diamond_graph):
        assert path_weight(diamond_graph, ["A"]) == 0.0

    def test_missing_edge_raises(self, diamond_graph):
        with pytest.raises(ValueError):
            path_weight(diamond_graph, ["A", "D"])

    def test_infinite_weight(self):
        G = nx.DiGraph()
        G.add_edge(0, 1, weight=math.inf)
        assert path_weight(NetworkXGraph(G), [0, 1]) == math.inf
