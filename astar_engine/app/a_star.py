import logging
import math
import time
from abc import ABC, abstractmethod

from .config import Config
from .graph import NetworkXGraph
from .pq import HeapMinPQ
from .results import Solved, Timeout, Unsolvable
from .timer import Timer

logger = logging.getLogger(__name__)

START_DIST = 0.0


class ShortestPathFinder(ABC):
    """Finds a shortest path between two vertices of an ``AStarGraph``."""

    @property
    @abstractmethod
    def graph(self):
        ...

    @abstractmethod
    def find_shortest_path(self, start, end, timeout=None):
        '''
        Returns Solved, Timeout or Unsolvable. ``timeout`` is a timedelta or
        seconds; None falls back to Config.SEARCH_DEADLINE_MS.
        '''


class AStarPathFinder(ShortestPathFinder):
    '''
    A* with a wall-clock budget checked at the top of every iteration.

    There is no closed set: a vertex is only re-relaxed when a strictly
    shorter distance to it is found. The graph's heuristic is trusted to be
    admissible and consistent. Each call keeps its own frontier and maps,
    so a finder holds no state between searches.
    '''

    def __init__(self, graph, clock=time.perf_counter, frontier_factory=HeapMinPQ):
        self._graph = graph
        self._clock = clock
        self._frontier_factory = frontier_factory

    @property
    def graph(self):
        return self._graph

    def find_shortest_path(self, start, end, timeout=None):
        if timeout is None:
            timeout = Config.SEARCH_DEADLINE_MS / 1000.0
        timer = Timer(timeout, clock=self._clock)
        fringe = self._frontier_factory()
        dist_to = {start: START_DIST}
        edge_to = {}
        expanded = 0

        fringe.add(start, START_DIST + self._graph.estimated_distance_to_goal(start, end))

        if start == end:
            return Solved((start,), START_DIST, expanded, timer.elapsed_duration())

        while not fringe.is_empty() and not timer.is_time_up():
            current = fringe.remove_min()
            if current == end:
                result = Solved(reconstruct_path(edge_to, start, end), dist_to[end],
                                expanded, timer.elapsed_duration())
                logger.debug("solved %r -> %r: weight=%s expanded=%d",
                             start, end, result.total_weight, expanded)
                return result

            expanded += 1
            current_dist = dist_to[current]
            for edge in self._graph.neighbors(current):
                neighbor = edge.to
                candidate = current_dist + edge.weight
                if dist_to.get(neighbor, math.inf) <= candidate:
                    continue
                dist_to[neighbor] = candidate
                edge_to[neighbor] = current
                priority = candidate + self._graph.estimated_distance_to_goal(neighbor, end)
                if fringe.contains(neighbor):
                    fringe.change_priority(neighbor, priority)
                else:
                    fringe.add(neighbor, priority)

        if timer.is_time_up():
            logger.debug("timeout %r -> %r after %d expansions", start, end, expanded)
            return Timeout(expanded, timer.elapsed_duration())
        logger.debug("no path %r -> %r after %d expansions", start, end, expanded)
        return Unsolvable(expanded, timer.elapsed_duration())


def reconstruct_path(came_from, start, end):
    path = [end]
    current = end
    while current != start:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return tuple(path)


def astar_with_deadline(G, source, target, heuristic=None, weight="weight", deadline_sec=None):
    '''
    A* over a networkx graph. ``heuristic`` takes (node, goal); ``weight`` is
    an edge attribute name or a callable over the edge data dict.
    '''
    finder = AStarPathFinder(NetworkXGraph(G, weight=weight, heuristic=heuristic))
    return finder.find_shortest_path(source, target, deadline_sec)
