"""Scheduled occurrences: the closed set {Arrival, Finish}."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Arrival:
    """A new customer entering the system."""

    id: int
    time: float


@dataclass(frozen=True)
class Finish:
    """The customer at ``server`` completing service."""

    id: int
    time: float
    server: int


Event = Union[Arrival, Finish]


def event_label(event: Event) -> str:
    """Trace label of an event; servers are numbered from 1."""
    if isinstance(event, Finish):
        return f"Finish({event.server + 1})"
    if isinstance(event, Arrival):
        return "Arrival"
    raise TypeError(f"Unknown event type: {type(event).__name__}")
