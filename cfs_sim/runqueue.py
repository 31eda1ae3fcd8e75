"""
Ready queue for runnable processes.

A min-heap keyed by an ordering policy (virtual runtime by default):
- insert:      heappush -> O(log n)
- extract_min: heappop  -> O(log n)
- peek_min / is_empty   -> O(1)

Ties between equal keys go to the entry inserted first. Every insert takes a
fresh sequence number, so a process that is put back after running queues
behind processes that were already waiting with the same key.
"""

from __future__ import annotations

import heapq
from typing import Any, Callable, List, Optional, Tuple

from .models import Process

OrderingPolicy = Callable[[Process], Any]


def by_vruntime(process: Process) -> int:
    return process.vruntime


def by_vruntime_then_priority(process: Process) -> Tuple[int, int]:
    # Equal vruntime: the smaller priority number (larger weight) goes first.
    return (process.vruntime, process.priority)


class ReadyQueue:

    def __init__(self, ordering: OrderingPolicy = by_vruntime):
        self._ordering = ordering
        self._heap: List[Tuple[Any, int, Process]] = []
        self._counter: int = 0

    def insert(self, process: Optional[Process]) -> None:
        if process is None:
            return
        heapq.heappush(self._heap, (self._ordering(process), self._counter, process))
        self._counter += 1

    def extract_min(self) -> Optional[Process]:
        if self._heap:
            _, _, process = heapq.heappop(self._heap)
            return process
        return None

    def peek_min(self) -> Optional[Process]:
        return self._heap[0][2] if self._heap else None

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
