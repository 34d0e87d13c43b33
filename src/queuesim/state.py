"""Mutable simulation state and immutable snapshots of it."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional, Tuple

from .entities import Customer
from .events import Event, event_label


@dataclass(frozen=True)
class StateSnapshot:
    """One row of the state trace."""

    time: float
    event_id: int
    event_type: str
    timing: str
    length_event_list: int
    queue_lengths: Tuple[int, ...]
    in_service: Tuple[int, ...]

    def as_row(self) -> list:
        row = [self.time, self.event_id, self.event_type, self.timing, self.length_event_list]
        for length, busy in zip(self.queue_lengths, self.in_service):
            row.extend((length, busy))
        return row


@dataclass
class SystemState:
    """Clock, counters, waiting queues and service slots."""

    n_queues: int
    time: float = 0.0
    n_entities: int = 0
    n_events: int = 0
    queues: List[Deque[Customer]] = field(default_factory=list)
    in_service: List[Optional[Customer]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.queues:
            self.queues = [deque() for _ in range(self.n_queues)]
        if not self.in_service:
            self.in_service = [None] * self.n_queues

    def queue_lengths(self) -> Tuple[int, ...]:
        return tuple(len(q) for q in self.queues)

    def busy_flags(self) -> Tuple[int, ...]:
        return tuple(0 if slot is None else 1 for slot in self.in_service)

    def load_scores(self) -> List[int]:
        """Waiting customers plus the one in service, per server."""
        return [length + busy for length, busy in zip(self.queue_lengths(), self.busy_flags())]

    def snapshot(self, event: Event, timing: str, pending: int) -> StateSnapshot:
        return StateSnapshot(
            time=self.time,
            event_id=event.id,
            event_type=event_label(event),
            timing=timing,
            length_event_list=pending,
            queue_lengths=self.queue_lengths(),
            in_service=self.busy_flags(),
        )
