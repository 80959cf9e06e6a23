from .a_star import AStarPathFinder, ShortestPathFinder, astar_with_deadline
from .graph import AStarGraph, NetworkXGraph, WeightedEdge
from .results import Outcome, ShortestPathResult, Solved, Timeout, Unsolvable

__all__ = [
    "AStarPathFinder",
    "ShortestPathFinder",
    "astar_with_deadline",
    "AStarGraph",
    "NetworkXGraph",
    "WeightedEdge",
    "Outcome",
    "ShortestPathResult",
    "Solved",
    "Timeout",
    "Unsolvable",
]
