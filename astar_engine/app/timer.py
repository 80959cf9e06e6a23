import math
import time
from datetime import timedelta


def to_seconds(timeout):
    if isinstance(timeout, timedelta):
        return timeout.total_seconds()
    return float(timeout)


class Timer:
    '''
    Wall-clock budget started at construction. The budget is spent once
    elapsed >= timeout, so a zero budget is already up at the first check.
    '''

    def __init__(self, timeout, clock=time.perf_counter):
        budget = to_seconds(timeout)
        if math.isnan(budget) or budget < 0:
            raise ValueError(f"timeout must be a non-negative duration, got {timeout!r}")
        self._budget = budget
        self._clock = clock
        self._start = clock()

    def elapsed_seconds(self) -> float:
        return self._clock() - self._start

    def elapsed_duration(self) -> timedelta:
        return timedelta(seconds=self.elapsed_seconds())

    def remaining_seconds(self) -> float:
        return max(0.0, self._budget - self.elapsed_seconds())

    def is_time_up(self) -> bool:
        return self.elapsed_seconds() >= self._budget
