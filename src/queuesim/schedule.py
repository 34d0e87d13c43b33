"""Future event list ordered by time, then by event id."""

from __future__ import annotations

import heapq
from typing import List, Tuple

from .events import Arrival, Event, Finish


class Schedule:
    """Min-heap of pending events.

    Entries are ``(time, event_id, event)`` so that events sharing a time come
    out in creation order. Event ids are handed out here and never reused.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, Event]] = []
        self._next_id = 0

    def _allocate_id(self) -> int:
        event_id = self._next_id
        self._next_id += 1
        return event_id

    def new_arrival(self, time: float) -> Arrival:
        return Arrival(id=self._allocate_id(), time=time)

    def new_finish(self, time: float, server: int) -> Finish:
        return Finish(id=self._allocate_id(), time=time, server=server)

    def schedule(self, event: Event) -> None:
        heapq.heappush(self._heap, (event.time, event.id, event))

    def pop_earliest(self) -> Event:
        """Remove and return the earliest event; raises IndexError when empty."""
        if not self._heap:
            raise IndexError("pop_earliest() called on an empty schedule")
        _, _, event = heapq.heappop(self._heap)
        return event

    def peek(self) -> Event:
        return self._heap[0][2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
