"""Command line interface to run queueing trace simulations."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import Iterable, Tuple

from tqdm import trange

from queuesim import (
    Parameters,
    SystemState,
    TraceRecorder,
    get_params,
    list_scenarios,
    run_simulation,
    trace_directory,
    write_trace,
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Simulate a multi-server queue and write state/entity traces."
    )
    parser.add_argument(
        "--scenario",
        type=str,
        choices=list(list_scenarios()),
        default="two_queues",
        help="Named parameter set used as the starting point.",
    )
    parser.add_argument("--seed", type=int, default=1, help="Base random seed.")
    parser.add_argument("--horizon", type=float, default=10_000.0, help="Simulation horizon T.")
    parser.add_argument("--n-queues", type=int, help="Number of queues/servers.")
    parser.add_argument("--mean-interarrival", type=float, help="Mean inter-arrival time.")
    parser.add_argument("--mean-service", type=float, help="Mean service time.")
    parser.add_argument("--time-units", type=str, help="Label for the time unit.")
    parser.add_argument("--replications", type=int, default=1, help="Number of seeds to run.")
    parser.add_argument(
        "--output-level",
        type=int,
        choices=[0, 1, 2],
        default=2,
        help="2: full trace, 1: arrivals only, 0: no trace rows.",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=Path("data"),
        help="Root directory for seed<k>/n_queues<N>/ trace folders.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level.",
    )
    return parser.parse_args()


def resolve_params(args: argparse.Namespace) -> Parameters:
    """Start from the scenario and apply explicit overrides."""
    overrides = {
        "n_queues": args.n_queues,
        "mean_interarrival": args.mean_interarrival,
        "mean_server_time": args.mean_service,
        "time_units": args.time_units,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    try:
        params = get_params(args.scenario, seed=args.seed, T=args.horizon)
        return replace(params, **overrides)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc


def run_replications(
    params: Parameters, args: argparse.Namespace
) -> Iterable[Tuple[Parameters, SystemState, TraceRecorder, Path]]:
    """Run one simulation per seed and write its traces."""
    for rep in trange(args.replications, desc="Simulating", unit="rep"):
        rep_params = replace(params, seed=params.seed + rep)
        recorder = TraceRecorder(rep_params.n_queues, output_level=args.output_level)
        state = run_simulation(rep_params, recorder)
        directory = trace_directory(args.data_dir, rep_params)
        write_trace(recorder, rep_params, directory, program=Path(__file__).name)
        yield rep_params, state, recorder, directory


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if args.replications < 1:
        raise SystemExit("--replications must be >= 1.")
    params = resolve_params(args)

    print("\nParametros:")
    for key, value in params.as_dict().items():
        print(f"  {key:<18}: {value}")

    for rep_params, state, recorder, directory in run_replications(params, args):
        print(f"\nSeed {rep_params.seed}:")
        print(f"  eventos     : {state.n_events:>10d}")
        print(f"  clientes    : {state.n_entities:>10d}")
        print(f"  salidas     : {recorder.n_departures:>10d}")
        print(f"  reloj final : {state.time:>10.3f} {rep_params.time_units}")
        print(f"  trazas en   : {directory.resolve()}")


if __name__ == "__main__":
    main()
