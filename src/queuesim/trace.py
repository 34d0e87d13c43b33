"""Trace collection and CSV output for simulation runs."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import IO, List, Optional, Tuple

import pandas as pd

from .entities import Customer
from .events import Arrival, Event
from .params import Parameters
from .state import StateSnapshot

ENTITY_COLUMNS = ["id", "arrival_time", "server", "start_service_time", "completion_time"]


def state_columns(n_queues: int) -> List[str]:
    columns = ["time", "event_id", "event_type", "timing", "length_event_list"]
    for i in range(1, n_queues + 1):
        columns.extend((f"length_queue{i}", f"in_service{i}"))
    return columns


class TraceRecorder:
    """In-memory recorder that keeps rows according to ``output_level``.

    Level 2 keeps every snapshot and every departure, level 1 keeps only the
    "before" snapshots of arrivals and level 0 keeps nothing.
    """

    def __init__(self, n_queues: int, output_level: int = 2):
        if output_level not in (0, 1, 2):
            raise ValueError("output_level must be 0, 1 or 2.")
        self.n_queues = n_queues
        self.output_level = output_level
        self.state_rows: List[list] = []
        self.entity_rows: List[list] = []
        self.n_departures = 0

    def record_state(self, snapshot: StateSnapshot, event: Event, phase: str) -> None:
        if self.output_level >= 2:
            self.state_rows.append(snapshot.as_row())
        elif self.output_level == 1 and phase == "before" and isinstance(event, Arrival):
            self.state_rows.append(snapshot.as_row())

    def record_entity(self, customer: Customer) -> None:
        self.n_departures += 1
        if self.output_level >= 2:
            server = None if customer.server is None else customer.server + 1
            self.entity_rows.append(
                [
                    customer.id,
                    customer.arrival_time,
                    server,
                    customer.start_service_time,
                    customer.completion_time,
                ]
            )

    def state_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.state_rows, columns=state_columns(self.n_queues))

    def entity_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.entity_rows, columns=ENTITY_COLUMNS)


def trace_directory(root: Path, params: Parameters) -> Path:
    """Return (and create) ``root/seed<seed>/n_queues<N>``."""
    path = Path(root) / f"seed{params.seed}" / f"n_queues{params.n_queues}"
    path.mkdir(parents=True, exist_ok=True)
    return path


def write_metadata(fh: IO[str], program: str, created: Optional[datetime] = None) -> None:
    created = created or datetime.now()
    fh.write(f"# file created by code in {program}\n")
    fh.write(f"# file created on {created.strftime('%Y-%m-%d at %H:%M:%S')}\n")


def write_parameters(fh: IO[str], params: Parameters) -> None:
    for name, value in params.as_dict().items():
        fh.write(f"# parameter: {name} = {value}\n")


def _write_frame(path: Path, df: pd.DataFrame, params: Parameters, program: str) -> None:
    with path.open("w", newline="") as fh:
        write_metadata(fh, program)
        write_parameters(fh, params)
        df.to_csv(fh, index=False)


def write_trace(
    recorder: TraceRecorder,
    params: Parameters,
    directory: Path,
    program: str = "queuesim",
) -> Tuple[Path, Path]:
    """Write ``state.csv`` and ``entities.csv``; return their paths."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    state_path = directory / "state.csv"
    entity_path = directory / "entities.csv"
    _write_frame(state_path, recorder.state_frame(), params, program)
    _write_frame(entity_path, recorder.entity_frame(), params, program)
    return state_path, entity_path


def read_trace(path: Path) -> pd.DataFrame:
    """Load a trace CSV, skipping the metadata comment lines."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Trace file not found: {path}")
    return pd.read_csv(path, comment="#", float_precision="round_trip")
