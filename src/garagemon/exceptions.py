"""Custom exception hierarchy for garagemon."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from garagemon.models.records import RecordError


class GarageMonitorError(Exception):
    """Base exception for all garagemon errors."""


class GarageConfigError(GarageMonitorError):
    """Invalid configuration value."""


class GarageSourceError(GarageMonitorError):
    """A bulk-load source could not be read."""

    def __init__(self, message: str, *, source: str = "") -> None:
        self.source = source
        super().__init__(message)


class EmptySourceError(GarageSourceError):
    """A bulk load finished without ingesting a single row.

    This is the only fatal ingestion condition.  Per-line problems are
    returned as :class:`~garagemon.models.records.RecordError` values and
    are attached here as ``errors`` so callers can still report them.
    """

    def __init__(
        self,
        message: str = "Empty CSV: no valid data rows.",
        *,
        source: str = "",
        errors: list[RecordError] | None = None,
    ) -> None:
        self.errors: list[RecordError] = list(errors or [])
        super().__init__(message, source=source)
