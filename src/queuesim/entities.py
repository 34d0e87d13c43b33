"""Customer record carried through the queueing system."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional


@dataclass
class Customer:
    """One customer; timestamps stay ``None`` until the step that sets them."""

    id: int
    arrival_time: float
    server: Optional[int] = None
    start_service_time: Optional[float] = None
    completion_time: Optional[float] = None

    def as_dict(self) -> Dict[str, Optional[float]]:
        return asdict(self)
