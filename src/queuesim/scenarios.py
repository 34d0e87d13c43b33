"""Pre-defined parameter sets for the security queue model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable

from .params import Parameters


@dataclass(frozen=True)
class Scenario:
    name: str
    n_queues: int
    mean_interarrival: float
    mean_server_time: float
    time_units: str = "minutes"


SCENARIOS: Dict[str, Scenario] = {
    "two_queues": Scenario(name="two_queues", n_queues=2, mean_interarrival=5.2, mean_server_time=10.0),
    # Single queue runs with half the service time to keep capacity equal.
    "one_queue": Scenario(name="one_queue", n_queues=1, mean_interarrival=5.2, mean_server_time=5.0),
}


def list_scenarios() -> Iterable[str]:
    """Return available scenario identifiers."""
    return sorted(SCENARIOS.keys())


def get_params(name: str, seed: int = 1, T: float = 10_000.0) -> Parameters:
    """Return `Parameters` for a named scenario."""
    key = name.lower()
    if key not in SCENARIOS:
        raise KeyError(f"Scenario '{name}' is not defined. Available: {list(list_scenarios())}")
    scenario = SCENARIOS[key]
    return Parameters(
        seed=seed,
        T=T,
        n_queues=scenario.n_queues,
        mean_interarrival=scenario.mean_interarrival,
        mean_server_time=scenario.mean_server_time,
        time_units=scenario.time_units,
    )
