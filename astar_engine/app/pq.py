import heapq
import itertools
import math


class HeapMinPQ:
    '''
    Min-priority queue of distinct items whose priorities can be changed.

    Entries live in a heapq list; changing a priority invalidates the old
    entry in place and pushes a fresh one, and stale entries are dropped
    when they reach the top. Among equal priorities the item whose priority
    was set most recently comes out first.
    '''

    _REMOVED = object()

    def __init__(self):
        self._heap = []
        self._entries = {}  # item -> [priority, -seq, item]
        self._seq = itertools.count()

    def __len__(self):
        return len(self._entries)

    def __contains__(self, item):
        return item in self._entries

    def contains(self, item) -> bool:
        return item in self._entries

    def is_empty(self) -> bool:
        return not self._entries

    def add(self, item, priority: float):
        if item in self._entries:
            raise ValueError(f"{item!r} is already in the queue")
        self._push(item, priority)

    def change_priority(self, item, priority: float):
        if item not in self._entries:
            raise KeyError(item)
        priority = self._checked(item, priority)
        entry = self._entries.pop(item)
        entry[-1] = self._REMOVED
        self._push(item, priority)

    def priority(self, item) -> float:
        return self._entries[item][0]

    def peek_min(self):
        self._drop_stale()
        if not self._heap:
            raise IndexError("peek from an empty priority queue")
        return self._heap[0][-1]

    def remove_min(self):
        self._drop_stale()
        if not self._heap:
            raise IndexError("remove_min from an empty priority queue")
        _, _, item = heapq.heappop(self._heap)
        del self._entries[item]
        return item

    @staticmethod
    def _checked(item, priority):
        priority = float(priority)
        if math.isnan(priority):
            raise ValueError(f"priority for {item!r} is NaN")
        return priority

    def _push(self, item, priority):
        priority = self._checked(item, priority)
        entry = [priority, -next(self._seq), item]
        self._entries[item] = entry
        heapq.heappush(self._heap, entry)

    def _drop_stale(self):
        while self._heap and self._heap[0][-1] is self._REMOVED:
            heapq.heappop(self._heap)
