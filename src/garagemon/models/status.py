"""Per-query vehicle status."""

from __future__ import annotations

from enum import StrEnum

from garagemon.models._base import GarageBaseModel


class Alert(StrEnum):
    """Alert classification derived from completeness and score."""

    NONE = ""
    SENSOR_FAILURE = "Sensor Failure Detected"
    SEVERE_STRESS = "Severe Engine Stress"


class CarStatus(GarageBaseModel):
    """Status snapshot computed fresh for every query.

    ``has_all`` is ``False`` and ``alert`` is :attr:`Alert.NONE` for an
    identifier the registry has never seen.
    """

    has_all: bool = False
    score: float | None = None
    alert: Alert = Alert.NONE

    @property
    def is_stressed(self) -> bool:
        return self.alert is Alert.SEVERE_STRESS

    @property
    def has_alert(self) -> bool:
        return self.alert is not Alert.NONE
