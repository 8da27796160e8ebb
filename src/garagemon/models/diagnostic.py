"""Sensor kinds and single diagnostic readings."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field, field_validator

from garagemon.models._base import GarageBaseModel


class SensorKind(StrEnum):
    """Diagnostic channel a reading belongs to.

    Lookup is whitespace- and case-insensitive: ``SensorKind("  rpm ")``
    resolves to :attr:`RPM`.  Text without a mapped member resolves to
    :attr:`UNKNOWN` instead of raising ``ValueError``; ``UNKNOWN`` is never
    stored on a vehicle.
    """

    RPM = "RPM"
    ENGINE_LOAD = "EngineLoad"
    COOLANT_TEMP = "CoolantTemp"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value: object) -> SensorKind:
        if isinstance(value, str):
            wanted = value.strip().upper()
            for member in cls:
                if member is not cls.UNKNOWN and member.value.upper() == wanted:
                    return member
        return cls.UNKNOWN

    @classmethod
    def from_text(cls, text: str) -> SensorKind:
        return cls(text)

    @classmethod
    def tracked(cls) -> tuple[SensorKind, ...]:
        """The kinds a vehicle needs before it can be scored."""
        return (cls.RPM, cls.ENGINE_LOAD, cls.COOLANT_TEMP)


class Reading(GarageBaseModel):
    """One diagnostic value reported for a vehicle."""

    vehicle_id: str = Field(..., description="Opaque, case-sensitive vehicle identifier")
    kind: SensorKind
    value: float

    @field_validator("kind")
    @classmethod
    def _reject_unknown(cls, value: SensorKind) -> SensorKind:
        if value is SensorKind.UNKNOWN:
            raise ValueError("reading kind must be a tracked sensor kind")
        return value
