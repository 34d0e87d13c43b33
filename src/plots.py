"""Plot queue lengths over time from a state trace."""

from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd

from queuesim import read_trace


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate queue-length plots from a state trace.")
    parser.add_argument(
        "--state",
        type=Path,
        default=Path("data/seed1/n_queues2/state.csv"),
        help="state.csv produced by src/run_sim.py.",
    )
    parser.add_argument(
        "--reports-dir",
        type=Path,
        default=Path("reports"),
        help="Directory where PNG files will be saved.",
    )
    return parser.parse_args()


def load_state(path: Path) -> pd.DataFrame:
    df = read_trace(path)
    if df.empty:
        raise ValueError("State trace is empty. Run the simulation with --output-level 2.")
    after = df[df["timing"] == "after"]
    # Level-1 traces only hold "before" rows.
    return after if not after.empty else df


def queue_columns(df: pd.DataFrame) -> list[str]:
    return [col for col in df.columns if col.startswith("length_queue")]


def plot_queue_lengths(df: pd.DataFrame, output: Path) -> None:
    fig, ax = plt.subplots(figsize=(10, 4))
    for col in queue_columns(df):
        label = f"Cola {col.removeprefix('length_queue')}"
        ax.step(df["time"], df[col], where="post", label=label)
    ax.set_xlabel("Tiempo")
    ax.set_ylabel("Clientes en espera")
    ax.set_title("Longitud de cola por servidor")
    ax.legend()
    fig.tight_layout()
    fig.savefig(output, dpi=150)
    plt.close(fig)


def main() -> None:
    args = parse_args()
    df = load_state(args.state)
    args.reports_dir.mkdir(parents=True, exist_ok=True)
    output = args.reports_dir / "queue_lengths.png"
    plot_queue_lengths(df, output)
    print(f"Figura guardada en {output.resolve()}")


if __name__ == "__main__":
    main()
