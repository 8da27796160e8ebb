"""Command-line entry point.

Usage::

    garagemon diagnostics.csv
    garagemon diagnostics.csv --simulate [--iterations N] [--threads N]

Per-record warnings and the load summary go to stderr; status lines go
to stdout.  Exits non-zero when the file cannot be read or holds no
valid rows.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from garagemon.config import MonitorConfig
from garagemon.exceptions import EmptySourceError, GarageMonitorError, GarageSourceError
from garagemon.ingestion import load_csv_file
from garagemon.state import GarageMonitor


def _build_parser(config: MonitorConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="garagemon",
        description="Load vehicle diagnostics and report per-vehicle health.",
    )
    parser.add_argument("path", help="CSV file of 'VehicleId, SensorKind, Value' records")
    parser.add_argument("--simulate", action="store_true", help="Run the real-time workload after loading")
    parser.add_argument(
        "--iterations",
        type=int,
        default=config.simulate_iterations,
        help=f"Workload iterations (default {config.simulate_iterations})",
    )
    parser.add_argument(
        "--threads",
        type=int,
        default=config.simulate_threads,
        help=f"Worker threads for the concurrent run (default {config.simulate_threads})",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def _format_run(label: str, elapsed_ms: int, average: float | None) -> str:
    line = f"{label} {elapsed_ms} ms"
    if average is not None:
        line += f" | avg score: {average:.2f}"
    return line


def run_simulation(monitor: GarageMonitor, config: MonitorConfig, iterations: int, threads: int, out: TextIO) -> None:
    """Run a sequential pass then a concurrent pass and report both."""
    out.write(f"\n--- Real-time Simulation ({iterations} iterations, {threads} thread(s) in MT mode) ---\n")

    sequential_ms = monitor.simulate_real_time_updates(
        iterations,
        threads,
        multithread=False,
        seed=config.seed,
        default_vehicle_ids=config.default_vehicle_ids,
    )
    out.write(_format_run("Single-thread elapsed:", sequential_ms, monitor.average_score()) + "\n")

    concurrent_ms = monitor.simulate_real_time_updates(
        iterations,
        threads,
        multithread=True,
        seed=config.seed,
        default_vehicle_ids=config.default_vehicle_ids,
    )
    out.write(_format_run("Multi-thread elapsed: ", concurrent_ms, monitor.average_score()) + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    try:
        config = MonitorConfig.from_env()
    except GarageMonitorError as exc:
        print(f"Config Error: {exc}", file=sys.stderr)
        return 1

    args = _build_parser(config).parse_args(argv)

    if args.verbose or config.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    monitor = GarageMonitor()
    try:
        result = load_csv_file(monitor, args.path)
    except EmptySourceError as exc:
        for error in exc.errors:
            print(f"CSV Warning: {error}", file=sys.stderr)
        print(f"CSV Error: {exc}", file=sys.stderr)
        return 1
    except GarageSourceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for message in result.error_messages:
        print(f"CSV Warning: {message}", file=sys.stderr)
    print(f"Loaded {result.loaded} row(s).", file=sys.stderr)

    monitor.print_status(sys.stdout)

    if args.simulate:
        if args.iterations < 0:
            print("Error: --iterations must be >= 0", file=sys.stderr)
            return 1
        run_simulation(monitor, config, args.iterations, args.threads, sys.stdout)

    return 0


if __name__ == "__main__":
    sys.exit(main())
