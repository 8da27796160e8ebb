"""Synthetic real-time workload for exercising the registry.

Every round re-reads the current fleet and, for each vehicle, writes one
RPM, one engine-load and one coolant-temperature reading followed by one
status query.  In concurrent mode every worker runs the full loop over the
same shared fleet, so workers race on the same identifiers.
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from garagemon._constants import (
    COOLANT_TEMP_RANGE,
    DEFAULT_SEED,
    DEFAULT_THREADS,
    DEFAULT_VEHICLE_IDS,
    ENGINE_LOAD_RANGE,
    RPM_RANGE,
)
from garagemon.models.diagnostic import SensorKind

if TYPE_CHECKING:
    from garagemon.state.registry import GarageMonitor

_logger = logging.getLogger(__name__)


class ReadingGenerator:
    """Seeded uniform draws for the three tracked sensors."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self._rng = random.Random(seed)

    def rpm(self) -> float:
        return self._rng.uniform(*RPM_RANGE)

    def engine_load(self) -> float:
        return self._rng.uniform(*ENGINE_LOAD_RANGE)

    def coolant_temp(self) -> float:
        return self._rng.uniform(*COOLANT_TEMP_RANGE)


def _update_one(monitor: GarageMonitor, vehicle_id: str, generator: ReadingGenerator) -> None:
    monitor.ingest(vehicle_id, SensorKind.RPM, generator.rpm())
    monitor.ingest(vehicle_id, SensorKind.ENGINE_LOAD, generator.engine_load())
    monitor.ingest(vehicle_id, SensorKind.COOLANT_TEMP, generator.coolant_temp())
    monitor.status_of(vehicle_id)


def _run_rounds(monitor: GarageMonitor, iterations: int, generator: ReadingGenerator) -> None:
    for _ in range(iterations):
        # Re-read each round so vehicles added concurrently are picked up.
        for vehicle_id in monitor.vehicle_ids():
            _update_one(monitor, vehicle_id, generator)


def simulate_real_time_updates(
    monitor: GarageMonitor,
    iterations: int,
    threads: int = DEFAULT_THREADS,
    multithread: bool = False,
    *,
    seed: int = DEFAULT_SEED,
    default_vehicle_ids: Sequence[str] = DEFAULT_VEHICLE_IDS,
) -> int:
    """Drive *monitor* with synthetic readings and return elapsed milliseconds.

    Parameters
    ----------
    monitor : GarageMonitor
        Registry to exercise.  Seeded with *default_vehicle_ids* if empty.
    iterations : int
        Rounds to run (per worker in concurrent mode).
    threads : int
        Worker count in concurrent mode; values below 1 are treated as 1.
        Ignored in sequential mode.
    multithread : bool
        Run workers concurrently instead of a single synchronous loop.
    seed : int
        Base seed.  The sequential run uses it directly; concurrent worker
        ``n`` uses ``seed + n``.

    Returns
    -------
    int
        Wall-clock duration of the whole run in milliseconds.
    """
    if iterations < 0:
        raise ValueError(f"iterations must be >= 0, got {iterations}")

    monitor.ensure_vehicles(default_vehicle_ids)

    workers = max(1, threads) if multithread else 1
    _logger.info("Simulating %d iteration(s) with %d worker(s)", iterations, workers)

    start = time.perf_counter()
    if multithread:
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="garagemon-sim") as executor:
            futures = [
                executor.submit(_run_rounds, monitor, iterations, ReadingGenerator(seed + index))
                for index in range(workers)
            ]
            for future in futures:
                future.result()
    else:
        _run_rounds(monitor, iterations, ReadingGenerator(seed))
    elapsed_ms = int((time.perf_counter() - start) * 1000)

    _logger.info("Simulation finished in %d ms", elapsed_ms)
    return elapsed_ms
