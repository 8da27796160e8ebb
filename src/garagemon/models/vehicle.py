"""Per-vehicle latest readings and the derived performance score."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from garagemon._constants import (
    COOLANT_BASELINE_C,
    COOLANT_FACTOR,
    LOAD_FACTOR,
    RPM_DIVISOR,
    SCORE_BASELINE,
)
from garagemon.models.diagnostic import Reading, SensorKind

_KIND_TO_FIELD: dict[SensorKind, str] = {
    SensorKind.RPM: "rpm",
    SensorKind.ENGINE_LOAD: "engine_load",
    SensorKind.COOLANT_TEMP: "coolant_temp",
}


def performance_score(rpm: float, engine_load: float, coolant_temp: float) -> float:
    """Return the unclamped health score for one set of readings.

    ``100 - (rpm/100 + engine_load*0.5 + (coolant_temp - 90)*2)``.  The
    result may be negative or exceed 100.
    """
    return SCORE_BASELINE - (
        rpm / RPM_DIVISOR + engine_load * LOAD_FACTOR + (coolant_temp - COOLANT_BASELINE_C) * COOLANT_FACTOR
    )


class _SensorFields(BaseModel):
    vehicle_id: str
    rpm: float | None = None
    engine_load: float | None = None
    coolant_temp: float | None = None

    def reading(self, kind: SensorKind) -> float | None:
        field_name = _KIND_TO_FIELD.get(kind)
        if field_name is None:
            return None
        value: float | None = getattr(self, field_name)
        return value

    def present_kinds(self) -> tuple[SensorKind, ...]:
        return tuple(kind for kind in SensorKind.tracked() if self.reading(kind) is not None)

    def is_complete(self) -> bool:
        return self.rpm is not None and self.engine_load is not None and self.coolant_temp is not None

    def score(self) -> float | None:
        """Performance score, or ``None`` until all three readings are present."""
        if self.rpm is None or self.engine_load is None or self.coolant_temp is None:
            return None
        return performance_score(self.rpm, self.engine_load, self.coolant_temp)


class VehicleSnapshot(_SensorFields):
    """Immutable copy of a vehicle's readings at one instant."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class Vehicle(_SensorFields):
    """Latest reading per sensor kind for one vehicle.

    Owned exclusively by :class:`~garagemon.state.registry.GarageMonitor`;
    callers only ever see :class:`VehicleSnapshot` copies.
    """

    model_config = ConfigDict(extra="forbid")

    def update(self, kind: SensorKind, value: float) -> None:
        """Overwrite the stored reading for *kind* (last write wins)."""
        field_name = _KIND_TO_FIELD.get(kind)
        if field_name is None:
            raise ValueError(f"cannot store a reading of kind {kind!s}")
        setattr(self, field_name, float(value))

    def apply(self, reading: Reading) -> None:
        self.update(reading.kind, reading.value)

    def snapshot(self) -> VehicleSnapshot:
        return VehicleSnapshot(
            vehicle_id=self.vehicle_id,
            rpm=self.rpm,
            engine_load=self.engine_load,
            coolant_temp=self.coolant_temp,
        )
