"""Runtime configuration for garagemon."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from garagemon._constants import DEFAULT_ITERATIONS, DEFAULT_SEED, DEFAULT_THREADS, DEFAULT_VEHICLE_IDS
from garagemon.exceptions import GarageConfigError

_TRUE_WORDS = frozenset({"1", "true", "yes", "y", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "n", "off"})


def _env_flag(raw: str | None, fallback: bool) -> bool:
    """Read an on/off switch; unrecognized text keeps *fallback*."""
    word = (raw or "").strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    return fallback


def _env_int(name: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as err:
        raise GarageConfigError(f"{name} must be an integer, got {value!r}") from err


@dataclasses.dataclass(frozen=True)
class MonitorConfig:
    """Monitor and workload configuration.

    Parameters
    ----------
    simulate_iterations : int
        Rounds per workload run (per worker in concurrent mode).
    simulate_threads : int
        Worker count for the concurrent workload run.
    seed : int
        Base seed for the workload's pseudo-random readings.
    default_vehicle_ids : tuple of str
        Vehicles seeded into an empty registry before a workload run.
    verbose : bool
        Enable debug logging in the command-line entry point.
    """

    simulate_iterations: int = DEFAULT_ITERATIONS
    simulate_threads: int = DEFAULT_THREADS
    seed: int = DEFAULT_SEED
    default_vehicle_ids: tuple[str, ...] = DEFAULT_VEHICLE_IDS
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.simulate_iterations < 0:
            raise GarageConfigError(f"simulate_iterations must be >= 0, got {self.simulate_iterations}")
        if self.simulate_threads < 1:
            raise GarageConfigError(f"simulate_threads must be >= 1, got {self.simulate_threads}")
        if not self.default_vehicle_ids:
            raise GarageConfigError("default_vehicle_ids must not be empty")

    @classmethod
    def from_env(cls, **overrides: Any) -> MonitorConfig:
        """Create configuration from ``GARAGEMON_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        _ENV_INT_MAP = {
            "GARAGEMON_ITERATIONS": "simulate_iterations",
            "GARAGEMON_THREADS": "simulate_threads",
            "GARAGEMON_SEED": "seed",
        }
        for env_key, field_name in _ENV_INT_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                config_kwargs[field_name] = _env_int(env_key, val)

        vehicles_env = env.get("GARAGEMON_DEFAULT_VEHICLES")
        if vehicles_env is not None and "default_vehicle_ids" not in overrides:
            config_kwargs["default_vehicle_ids"] = tuple(
                vehicle_id.strip() for vehicle_id in vehicles_env.split(",") if vehicle_id.strip()
            )

        if "verbose" not in overrides:
            config_kwargs["verbose"] = _env_flag(env.get("GARAGEMON_VERBOSE"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
