"""garagemon - Thread-safe fleet diagnostics registry with health scoring."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("garagemon")
except PackageNotFoundError:
    __version__ = "0+local"
from garagemon.config import MonitorConfig
from garagemon.exceptions import (
    EmptySourceError,
    GarageConfigError,
    GarageMonitorError,
    GarageSourceError,
)
from garagemon.ingestion import load_csv, load_csv_file, parse_record
from garagemon.models import (
    Alert,
    CarStatus,
    LoadResult,
    Reading,
    RecordError,
    RecordErrorKind,
    SensorKind,
    Vehicle,
    VehicleSnapshot,
    performance_score,
)
from garagemon.state import GarageMonitor
from garagemon.workload import simulate_real_time_updates

__all__ = [
    "__version__",
    "Alert",
    "CarStatus",
    "EmptySourceError",
    "GarageConfigError",
    "GarageMonitor",
    "GarageMonitorError",
    "GarageSourceError",
    "LoadResult",
    "MonitorConfig",
    "Reading",
    "RecordError",
    "RecordErrorKind",
    "SensorKind",
    "Vehicle",
    "VehicleSnapshot",
    "load_csv",
    "load_csv_file",
    "parse_record",
    "performance_score",
    "simulate_real_time_updates",
]
