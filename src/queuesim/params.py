"""Run parameters for the queueing trace simulator."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Union


@dataclass(frozen=True)
class Parameters:
    """Immutable inputs of one simulation run."""

    seed: int
    T: float
    n_queues: int
    mean_interarrival: float
    mean_server_time: float
    time_units: str = "minutes"

    def __post_init__(self) -> None:
        if self.n_queues < 1:
            raise ValueError("Number of queues n_queues must be >= 1.")
        if self.mean_interarrival <= 0:
            raise ValueError("Mean inter-arrival time must be strictly positive.")
        if self.mean_server_time <= 0:
            raise ValueError("Mean service time must be strictly positive.")
        if self.T <= 0:
            raise ValueError("Simulation horizon T must be positive.")

    def as_dict(self) -> Dict[str, Union[int, float, str]]:
        return asdict(self)
