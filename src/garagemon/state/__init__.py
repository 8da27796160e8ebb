"""State/registry layer.

This package is the single owner of per-vehicle diagnostic state.  Every
read hands out a value snapshot, never a reference into the registry.
"""

from garagemon.state.policy import derive_status, format_status_line
from garagemon.state.registry import GarageMonitor

__all__ = ["GarageMonitor", "derive_status", "format_status_line"]
