"""Bulk loading of ``VehicleId, SensorKind, Value`` text records.

Per-line problems are collected and returned as :class:`RecordError`
values; only a source that yields no valid row at all is fatal.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from garagemon.exceptions import EmptySourceError, GarageSourceError
from garagemon.ingestion.normalize import clean_field, is_comment_or_blank, parse_value
from garagemon.models.diagnostic import Reading, SensorKind
from garagemon.models.records import LoadResult, RecordError, RecordErrorKind

if TYPE_CHECKING:
    from garagemon.state.registry import GarageMonitor

_logger = logging.getLogger(__name__)

_SEPARATOR = ","


def _error(line_number: int, kind: RecordErrorKind, message: str) -> RecordError:
    return RecordError(line_number=line_number, kind=kind, message=message)


def parse_record(line: str, line_number: int) -> Reading | RecordError | None:
    """Parse one input line.

    Returns ``None`` for blank and ``#`` comment lines, a :class:`Reading`
    for a valid record, and a :class:`RecordError` otherwise.  Fields past
    the third are ignored; a missing third field is an invalid (empty) value.
    """
    if is_comment_or_blank(line):
        return None

    fields = line.strip().split(_SEPARATOR)
    if len(fields) < 2:
        return _error(line_number, RecordErrorKind.MISSING_FIELD, "missing Type")

    vehicle_id = clean_field(fields[0])
    type_text = clean_field(fields[1])
    value_text = clean_field(fields[2]) if len(fields) > 2 else ""

    kind = SensorKind.from_text(type_text)
    if kind is SensorKind.UNKNOWN:
        return _error(line_number, RecordErrorKind.UNKNOWN_TYPE, f"unknown Type '{type_text}'")

    value = parse_value(value_text)
    if value is None:
        return _error(line_number, RecordErrorKind.INVALID_VALUE, f"invalid Value '{value_text}'")

    return Reading(vehicle_id=vehicle_id, kind=kind, value=value)


def load_csv(monitor: GarageMonitor, lines: Iterable[str], *, source: str = "") -> LoadResult:
    """Ingest every valid record in *lines* into *monitor*.

    Raises
    ------
    EmptySourceError
        When no line produced a valid reading.  The per-line errors are
        attached to the exception.
    """
    loaded = 0
    errors: list[RecordError] = []
    for line_number, line in enumerate(lines, start=1):
        parsed = parse_record(line, line_number)
        if parsed is None:
            continue
        if isinstance(parsed, RecordError):
            _logger.debug("Rejected record: %s", parsed)
            errors.append(parsed)
            continue
        monitor.apply(parsed)
        loaded += 1

    if loaded == 0:
        raise EmptySourceError(source=source, errors=errors)

    _logger.info("Loaded %d row(s) with %d rejected", loaded, len(errors))
    return LoadResult(loaded=loaded, errors=tuple(errors))


def load_csv_file(monitor: GarageMonitor, path: str | Path) -> LoadResult:
    """Open *path* as UTF-8 text and :func:`load_csv` it.

    Undecodable bytes become U+FFFD, so they only spoil the line they are on.
    """
    file_path = Path(path)
    try:
        with file_path.open(encoding="utf-8", errors="replace") as handle:
            return load_csv(monitor, handle, source=str(file_path))
    except OSError as err:
        raise GarageSourceError(f"cannot open file: {file_path}", source=str(file_path)) from err
