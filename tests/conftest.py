"""Shared helpers for the simulation tests."""

import pytest


class FixedStreams:
    """Deterministic stand-in for RandomStreams that replays given durations."""

    def __init__(self, interarrivals, services):
        self.interarrivals = list(interarrivals)
        self.services = list(services)
        self.calls = []

    def next_interarrival(self):
        self.calls.append("interarrival")
        return self.interarrivals.pop(0) if self.interarrivals else 1e9

    def next_service(self):
        self.calls.append("service")
        return self.services.pop(0) if self.services else 1e9


class ListRecorder:
    """Keeps every snapshot and departure in order."""

    def __init__(self):
        self.states = []
        self.entities = []

    def record_state(self, snapshot, event, phase):
        self.states.append((snapshot, event, phase))

    def record_entity(self, customer):
        self.entities.append(customer)


@pytest.fixture
def recorder():
    return ListRecorder()


@pytest.fixture
def other_recorder():
    return ListRecorder()


@pytest.fixture
def fixed_streams():
    return FixedStreams
