"""State transitions for Arrival and Finish events."""

from __future__ import annotations

import logging
from typing import Optional

from .entities import Customer
from .events import Arrival, Event, Finish
from .schedule import Schedule
from .state import SystemState
from .streams import RandomStreams

logger = logging.getLogger(__name__)


class SimulationInvariantError(RuntimeError):
    """Raised when the state contradicts the engine's own scheduling."""


def choose_server(state: SystemState) -> int:
    """Index of the least loaded server; the lowest index wins ties."""
    scores = state.load_scores()
    return scores.index(min(scores))


def move_to_server(
    state: SystemState, schedule: Schedule, streams: RandomStreams, server: int
) -> None:
    """Start service for the oldest customer waiting at ``server``."""
    if state.in_service[server] is not None:
        raise SimulationInvariantError(f"Server {server + 1} is already busy.")
    customer = state.queues[server].popleft()
    customer.start_service_time = state.time
    completion_time = state.time + streams.next_service()
    state.in_service[server] = customer
    schedule.schedule(schedule.new_finish(completion_time, server))


def handle_arrival(
    state: SystemState, schedule: Schedule, streams: RandomStreams, event: Arrival
) -> None:
    state.n_entities += 1
    customer = Customer(id=state.n_entities, arrival_time=event.time)

    server = choose_server(state)
    customer.server = server
    state.queues[server].append(customer)

    next_arrival = schedule.new_arrival(state.time + streams.next_interarrival())
    schedule.schedule(next_arrival)

    if state.in_service[server] is None:
        move_to_server(state, schedule, streams, server)


def handle_finish(
    state: SystemState, schedule: Schedule, streams: RandomStreams, event: Finish
) -> Customer:
    server = event.server
    departing = state.in_service[server]
    if departing is None:
        raise SimulationInvariantError(
            f"Finish event {event.id} at t={event.time} found server {server + 1} empty."
        )
    state.in_service[server] = None

    if state.queues[server]:
        move_to_server(state, schedule, streams, server)

    departing.completion_time = state.time
    return departing


def apply_event(
    state: SystemState, schedule: Schedule, streams: RandomStreams, event: Event
) -> Optional[Customer]:
    """Apply one event to ``state``; return the departing customer, if any."""
    if isinstance(event, Arrival):
        handle_arrival(state, schedule, streams, event)
        departure = None
    elif isinstance(event, Finish):
        departure = handle_finish(state, schedule, streams, event)
    else:
        raise TypeError(f"Invalid event type: {type(event).__name__}")

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "t=%.3f event=%d queues=%s busy=%s",
            state.time,
            event.id,
            state.queue_lengths(),
            state.busy_flags(),
        )
    return departure
