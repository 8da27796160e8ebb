"""Ingestion layer.

Adapters that turn line-oriented text sources into :class:`Reading` values
and feed them to the registry.
"""

from garagemon.ingestion.csv_loader import load_csv, load_csv_file, parse_record

__all__ = ["load_csv", "load_csv_file", "parse_record"]
