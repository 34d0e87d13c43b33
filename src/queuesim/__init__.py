"""Discrete-event simulation of a multi-server queue producing raw traces."""

import logging

from .driver import Recorder, Simulation, run_simulation
from .engine import SimulationInvariantError, apply_event, choose_server, move_to_server
from .entities import Customer
from .events import Arrival, Event, Finish, event_label
from .params import Parameters
from .scenarios import Scenario, get_params, list_scenarios
from .schedule import Schedule
from .state import StateSnapshot, SystemState
from .streams import RandomStreams
from .trace import TraceRecorder, read_trace, trace_directory, write_trace

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Arrival",
    "Customer",
    "Event",
    "Finish",
    "Parameters",
    "RandomStreams",
    "Recorder",
    "Scenario",
    "Schedule",
    "Simulation",
    "SimulationInvariantError",
    "StateSnapshot",
    "SystemState",
    "TraceRecorder",
    "apply_event",
    "choose_server",
    "event_label",
    "get_params",
    "list_scenarios",
    "move_to_server",
    "read_trace",
    "run_simulation",
    "trace_directory",
    "write_trace",
]
