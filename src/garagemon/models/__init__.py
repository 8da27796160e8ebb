"""Data models for vehicle diagnostics."""

from garagemon.models._base import GarageBaseModel
from garagemon.models.diagnostic import Reading, SensorKind
from garagemon.models.records import LoadResult, RecordError, RecordErrorKind
from garagemon.models.status import Alert, CarStatus
from garagemon.models.vehicle import Vehicle, VehicleSnapshot, performance_score

__all__ = [
    "Alert",
    "CarStatus",
    "GarageBaseModel",
    "LoadResult",
    "Reading",
    "RecordError",
    "RecordErrorKind",
    "SensorKind",
    "Vehicle",
    "VehicleSnapshot",
    "performance_score",
]
