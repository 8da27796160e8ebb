"""Base model for garagemon value objects.

Every immutable value handed across the registry boundary inherits from
:class:`GarageBaseModel`, which is frozen and rejects unknown fields so a
snapshot can never be mutated or silently widened by a caller.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class GarageBaseModel(BaseModel):
    """Frozen, strict base for snapshots and results."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )
