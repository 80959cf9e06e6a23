from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Any, Tuple


class Outcome(str, Enum):
    SOLVED = "solved"
    TIMEOUT = "timeout"
    UNSOLVABLE = "unsolvable"


class ShortestPathResult:
    '''
    Base of the three terminal values a search can produce. Timeout and
    Unsolvable are ordinary results, not errors; they carry no path.
    '''
    outcome: Outcome
    explored_count: int
    elapsed: timedelta

    @property
    def is_solved(self) -> bool:
        return self.outcome is Outcome.SOLVED

    @property
    def solution(self) -> Tuple[Any, ...]:
        return ()

    @property
    def solution_weight(self) -> float:
        return 0.0

    def to_dict(self) -> dict:
        return {
            "outcome": self.outcome.value,
            "nodes": list(self.solution),
            "total_weight": self.solution_weight,
            "expanded_nodes": self.explored_count,
            "elapsed_sec": self.elapsed.total_seconds(),
        }


@dataclass(frozen=True)
class Solved(ShortestPathResult):
    path: Tuple[Any, ...]
    total_weight: float
    explored_count: int
    elapsed: timedelta

    outcome = Outcome.SOLVED

    @property
    def solution(self):
        return self.path

    @property
    def solution_weight(self):
        return self.total_weight


@dataclass(frozen=True)
class Timeout(ShortestPathResult):
    explored_count: int
    elapsed: timedelta

    outcome = Outcome.TIMEOUT


@dataclass(frozen=True)
class Unsolvable(ShortestPathResult):
    explored_count: int
    elapsed: timedelta

    outcome = Outcome.UNSOLVABLE
