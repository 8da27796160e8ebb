"""Thread-safe in-memory registry of vehicle diagnostics.

This is the only component allowed to mutate :class:`Vehicle` instances.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Sequence
from typing import TextIO

from garagemon._constants import DEFAULT_SEED, DEFAULT_THREADS, DEFAULT_VEHICLE_IDS
from garagemon.models.diagnostic import Reading, SensorKind
from garagemon.models.status import CarStatus
from garagemon.models.vehicle import Vehicle, VehicleSnapshot
from garagemon.state.policy import derive_status, format_status_line

_logger = logging.getLogger(__name__)


class GarageMonitor:
    """Registry mapping vehicle identifiers to their latest readings.

    A single lock guards the whole map: at most one registry operation runs
    at a time.  Fleet-wide reads (:meth:`average_score`, :meth:`statuses`,
    :meth:`print_status`) observe the map in one lock acquisition, so they
    see one consistent instant.  Iteration is in sorted key order.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._vehicles: dict[str, Vehicle] = {}

    def _vehicle(self, vehicle_id: str) -> Vehicle:
        vehicle = self._vehicles.get(vehicle_id)
        if vehicle is None:
            vehicle = Vehicle(vehicle_id=vehicle_id)
            self._vehicles[vehicle_id] = vehicle
        return vehicle

    def _sorted_ids(self) -> list[str]:
        return sorted(self._vehicles)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def ingest(self, vehicle_id: str, kind: SensorKind, value: float) -> None:
        """Record *value* as the latest *kind* reading of *vehicle_id*.

        Creates the vehicle on first sight.  ``SensorKind.UNKNOWN`` is
        dropped without creating anything.
        """
        if kind is SensorKind.UNKNOWN:
            _logger.debug("Dropping %s reading for %s", kind, vehicle_id)
            return
        with self._lock:
            self._vehicle(vehicle_id).update(kind, value)
        _logger.debug("Add %s %s=%s", vehicle_id, kind, value)

    def apply(self, reading: Reading) -> None:
        self.ingest(reading.vehicle_id, reading.kind, reading.value)

    def ensure_vehicles(self, vehicle_ids: Iterable[str]) -> bool:
        """Seed *vehicle_ids* if the registry is empty.

        Returns ``True`` when seeding happened.  Check and insert happen in
        the same critical section.
        """
        with self._lock:
            if self._vehicles:
                return False
            for vehicle_id in vehicle_ids:
                self._vehicle(vehicle_id)
            seeded = self._sorted_ids()
        _logger.info("Seeded empty registry with %s", ", ".join(seeded))
        return True

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def has_car(self, vehicle_id: str) -> bool:
        with self._lock:
            return vehicle_id in self._vehicles

    def __contains__(self, vehicle_id: object) -> bool:
        return isinstance(vehicle_id, str) and self.has_car(vehicle_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._vehicles)

    def vehicle_ids(self) -> list[str]:
        """Sorted copy of the known identifiers."""
        with self._lock:
            return self._sorted_ids()

    def snapshot(self, vehicle_id: str) -> VehicleSnapshot | None:
        with self._lock:
            vehicle = self._vehicles.get(vehicle_id)
            return vehicle.snapshot() if vehicle is not None else None

    def status_of(self, vehicle_id: str) -> CarStatus:
        """Status of *vehicle_id*; an unknown id yields ``has_all=False``."""
        with self._lock:
            return derive_status(self._vehicles.get(vehicle_id))

    def statuses(self) -> dict[str, CarStatus]:
        """Status of every vehicle, in key order, from one consistent pass."""
        with self._lock:
            return {vehicle_id: derive_status(self._vehicles[vehicle_id]) for vehicle_id in self._sorted_ids()}

    def average_score(self) -> float | None:
        """Mean score over complete vehicles, or ``None`` if none is complete."""
        with self._lock:
            scores = [score for score in (vehicle.score() for vehicle in self._vehicles.values()) if score is not None]
        if not scores:
            return None
        return sum(scores) / len(scores)

    def print_status(self, out: TextIO) -> None:
        """Write one status line per vehicle to *out*."""
        for vehicle_id, status in self.statuses().items():
            out.write(format_status_line(vehicle_id, status) + "\n")

    # ------------------------------------------------------------------
    # Workload
    # ------------------------------------------------------------------

    def simulate_real_time_updates(
        self,
        iterations: int,
        threads: int = DEFAULT_THREADS,
        multithread: bool = False,
        *,
        seed: int = DEFAULT_SEED,
        default_vehicle_ids: Sequence[str] = DEFAULT_VEHICLE_IDS,
    ) -> int:
        """Run the synthetic workload against this registry.

        See :func:`garagemon.workload.simulate_real_time_updates`.
        """
        from garagemon.workload import simulate_real_time_updates

        return simulate_real_time_updates(
            self,
            iterations,
            threads,
            multithread,
            seed=seed,
            default_vehicle_ids=default_vehicle_ids,
        )
