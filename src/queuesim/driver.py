"""Main event loop of the queueing simulation."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from .engine import apply_event
from .entities import Customer
from .events import Event
from .params import Parameters
from .schedule import Schedule
from .state import StateSnapshot, SystemState
from .streams import RandomStreams

logger = logging.getLogger(__name__)


class Recorder(Protocol):
    """Receives the trace as the simulation produces it."""

    def record_state(self, snapshot: StateSnapshot, event: Event, phase: str) -> None: ...

    def record_entity(self, customer: Customer) -> None: ...


class Simulation:
    """Owns the state, schedule and random streams of a single run."""

    def __init__(self, params: Parameters, streams: Optional[RandomStreams] = None):
        self.params = params
        self.streams = streams if streams is not None else RandomStreams.from_params(params)
        self.state = SystemState(n_queues=params.n_queues)
        self.schedule = Schedule()
        self.initialise()

    def initialise(self) -> None:
        """Seed the schedule with the first arrival at time zero."""
        self.schedule.schedule(self.schedule.new_arrival(0.0))

    def step(self, recorder: Recorder) -> Optional[Customer]:
        """Process the earliest pending event."""
        event = self.schedule.pop_earliest()
        self.state.time = event.time
        self.state.n_events += 1

        recorder.record_state(
            self.state.snapshot(event, "before", len(self.schedule)), event, "before"
        )
        departure = apply_event(self.state, self.schedule, self.streams, event)
        recorder.record_state(
            self.state.snapshot(event, "after", len(self.schedule)), event, "after"
        )
        if departure is not None:
            recorder.record_entity(departure)
        return departure

    def run(self, recorder: Recorder) -> SystemState:
        """Run until the clock reaches the horizon.

        The clock is checked before each pop, so the first event at or beyond
        ``T`` is still processed and then the loop stops.
        """
        logger.info(
            "Starting run: seed=%d T=%s n_queues=%d",
            self.params.seed,
            self.params.T,
            self.params.n_queues,
        )
        while self.state.time < self.params.T:
            self.step(recorder)
        logger.info(
            "Run finished at t=%.3f after %d events (%d customers created)",
            self.state.time,
            self.state.n_events,
            self.state.n_entities,
        )
        return self.state


def run_simulation(
    params: Parameters, recorder: Recorder, streams: Optional[RandomStreams] = None
) -> SystemState:
    """Run one replication and stream its trace into ``recorder``."""
    return Simulation(params, streams=streams).run(recorder)
