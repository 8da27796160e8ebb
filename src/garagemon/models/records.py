"""Bulk-load results and per-record errors."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from garagemon.models._base import GarageBaseModel


class RecordErrorKind(StrEnum):
    MISSING_FIELD = "missing_field"
    UNKNOWN_TYPE = "unknown_type"
    INVALID_VALUE = "invalid_value"


class RecordError(GarageBaseModel):
    """A single rejected input line.  Returned as data, never raised."""

    line_number: int = Field(..., ge=1)
    kind: RecordErrorKind
    message: str

    def __str__(self) -> str:
        return f"Line {self.line_number}: {self.message}"


class LoadResult(GarageBaseModel):
    """Outcome of a bulk load that ingested at least one row."""

    loaded: int = Field(..., ge=1)
    errors: tuple[RecordError, ...] = ()

    @property
    def error_messages(self) -> list[str]:
        return [str(error) for error in self.errors]
