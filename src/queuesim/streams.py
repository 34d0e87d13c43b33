"""Seeded random-variate source for arrivals and service."""

from __future__ import annotations

import numpy as np

from .params import Parameters


class RandomStreams:
    """Exponential inter-arrival and service durations from one generator.

    Both draws share a single ``numpy`` generator, so the order in which the
    engine asks for them is part of what makes a run reproducible.
    """

    def __init__(self, seed: int, mean_interarrival: float, mean_server_time: float):
        self.rng = np.random.default_rng(seed=seed)
        self.mean_interarrival = mean_interarrival
        self.mean_server_time = mean_server_time

    @classmethod
    def from_params(cls, params: Parameters) -> "RandomStreams":
        return cls(params.seed, params.mean_interarrival, params.mean_server_time)

    def next_interarrival(self) -> float:
        return float(self.rng.exponential(self.mean_interarrival))

    def next_service(self) -> float:
        return float(self.rng.exponential(self.mean_server_time))
