"""Transition tests for arrivals, service starts and completions."""

import logging
from collections import deque

import pytest

from queuesim.engine import (
    SimulationInvariantError,
    apply_event,
    choose_server,
    move_to_server,
)
from queuesim.entities import Customer
from queuesim.events import Arrival, Finish
from queuesim.schedule import Schedule
from queuesim.state import SystemState


def _arrive(state, schedule, streams, time):
    state.time = time
    return apply_event(state, schedule, streams, schedule.new_arrival(time))


def test_arrival_to_idle_server_starts_service_immediately(fixed_streams):
    state = SystemState(n_queues=1)
    schedule = Schedule()
    streams = fixed_streams(interarrivals=[50.0], services=[2.0])

    departure = _arrive(state, schedule, streams, 0.0)

    assert departure is None
    customer = state.in_service[0]
    assert customer.id == 1
    assert customer.server == 0
    assert customer.start_service_time == customer.arrival_time == 0.0
    assert state.queue_lengths() == (0,)
    # Next arrival is drawn before the service time.
    assert streams.calls == ["interarrival", "service"]
    first = schedule.pop_earliest()
    assert isinstance(first, Finish) and first.time == 2.0 and first.server == 0
    second = schedule.pop_earliest()
    assert isinstance(second, Arrival) and second.time == 50.0


def test_tied_servers_route_to_lowest_index(fixed_streams):
    state = SystemState(n_queues=2)
    schedule = Schedule()
    streams = fixed_streams(interarrivals=[1.0, 1.0], services=[10.0, 10.0])

    _arrive(state, schedule, streams, 0.0)
    _arrive(state, schedule, streams, 1.0)

    assert state.in_service[0].id == 1
    assert state.in_service[1].id == 2
    assert state.in_service[0].start_service_time == 0.0
    assert state.in_service[1].start_service_time == 1.0
    assert state.busy_flags() == (1, 1)


def test_choose_server_prefers_least_loaded():
    state = SystemState(n_queues=3)
    state.in_service = [Customer(1, 0.0, 0), Customer(2, 0.0, 1), None]
    state.queues[0].append(Customer(3, 0.0, 0))
    assert state.load_scores() == [2, 1, 0]
    assert choose_server(state) == 2
    state.in_service[2] = Customer(4, 0.0, 2)
    assert choose_server(state) == 1


def test_arrival_to_busy_server_waits(fixed_streams):
    state = SystemState(n_queues=1)
    schedule = Schedule()
    streams = fixed_streams(interarrivals=[1.0, 1.0], services=[10.0])

    _arrive(state, schedule, streams, 0.0)
    _arrive(state, schedule, streams, 1.0)

    assert state.in_service[0].id == 1
    assert [c.id for c in state.queues[0]] == [2]
    assert state.queues[0][0].start_service_time is None
    assert streams.calls == ["interarrival", "service", "interarrival"]


def test_finish_returns_customer_and_pulls_next_in_fifo_order(fixed_streams):
    state = SystemState(n_queues=1)
    schedule = Schedule()
    streams = fixed_streams(interarrivals=[1.0, 1.0, 1.0], services=[5.0, 3.0, 3.0])
    for t in (0.0, 1.0, 2.0):
        _arrive(state, schedule, streams, t)

    state.time = 5.0
    departed = apply_event(state, schedule, streams, Finish(id=99, time=5.0, server=0))

    assert departed.id == 1
    assert departed.completion_time == 5.0
    assert departed is not state.in_service[0]
    assert state.in_service[0].id == 2
    assert state.in_service[0].start_service_time == 5.0
    assert [c.id for c in state.queues[0]] == [3]


def test_finish_leaves_server_idle_when_queue_empty(fixed_streams):
    state = SystemState(n_queues=2)
    schedule = Schedule()
    streams = fixed_streams(interarrivals=[10.0], services=[4.0])
    _arrive(state, schedule, streams, 0.0)

    state.time = 4.0
    departed = apply_event(state, schedule, streams, Finish(id=50, time=4.0, server=0))

    assert departed.start_service_time == 0.0
    assert departed.completion_time == 4.0
    assert state.in_service == [None, None]


def test_finish_on_empty_slot_is_fatal(fixed_streams):
    state = SystemState(n_queues=1)
    with pytest.raises(SimulationInvariantError):
        apply_event(state, Schedule(), fixed_streams([], []), Finish(id=1, time=0.0, server=0))


def test_move_to_busy_server_is_fatal(fixed_streams):
    state = SystemState(n_queues=1)
    state.in_service[0] = Customer(1, 0.0, 0)
    state.queues[0] = deque([Customer(2, 0.0, 0)])
    with pytest.raises(SimulationInvariantError):
        move_to_server(state, Schedule(), fixed_streams([], [1.0]), 0)


def test_unknown_event_type_is_rejected(fixed_streams):
    class Timer:
        id = 0
        time = 0.0

    with pytest.raises(TypeError):
        apply_event(SystemState(n_queues=1), Schedule(), fixed_streams([], []), Timer())


def test_debug_line_only_when_enabled(fixed_streams, caplog):
    state = SystemState(n_queues=1)
    schedule = Schedule()
    streams = fixed_streams(interarrivals=[1.0, 1.0], services=[5.0])

    with caplog.at_level(logging.INFO, logger="queuesim.engine"):
        _arrive(state, schedule, streams, 0.0)
    assert not [r for r in caplog.records if r.name == "queuesim.engine"]

    with caplog.at_level(logging.DEBUG, logger="queuesim.engine"):
        _arrive(state, schedule, streams, 1.0)
    messages = [r.getMessage() for r in caplog.records if r.name == "queuesim.engine"]
    assert messages == ["t=1.000 event=3 queues=(1,) busy=(1,)"]
