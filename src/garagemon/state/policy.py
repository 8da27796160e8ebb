"""Status derivation policy.

Pure functions over snapshots.  Contains no locking; the registry calls
these while holding its lock (or on snapshots it already copied out).
"""

from __future__ import annotations

from garagemon._constants import SEVERE_STRESS_THRESHOLD
from garagemon.models.status import Alert, CarStatus
from garagemon.models.vehicle import Vehicle, VehicleSnapshot


def classify_score(score: float) -> Alert:
    """Strictly below the threshold is severe stress; the boundary is fine."""
    if score < SEVERE_STRESS_THRESHOLD:
        return Alert.SEVERE_STRESS
    return Alert.NONE


def derive_status(vehicle: Vehicle | VehicleSnapshot | None) -> CarStatus:
    """Build a :class:`CarStatus` for *vehicle*.

    - unknown vehicle (``None``) -> ``has_all=False``, no alert
    - incomplete -> sensor-failure alert, no score
    - complete -> score, plus severe-stress alert when ``score < 40``
    """
    if vehicle is None:
        return CarStatus()

    score = vehicle.score()
    if score is None:
        return CarStatus(has_all=False, score=None, alert=Alert.SENSOR_FAILURE)
    return CarStatus(has_all=True, score=score, alert=classify_score(score))


def format_status_line(vehicle_id: str, status: CarStatus) -> str:
    """Render one human-readable status line."""
    if not status.has_all or status.score is None:
        return f"Car: {vehicle_id} | Status: {Alert.SENSOR_FAILURE}"
    line = f"Car: {vehicle_id} | Score: {status.score:.2f}"
    if status.has_alert:
        line += f" | Alert: {status.alert}"
    return line
