"""Resolution report: parameters plus where each value came from."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from velox_params.config.vehicle import VehicleParameters


class ParameterResolution(BaseModel):
    """Outcome of one resolution call.

    ``setup_vehicle_parameters`` returns only ``parameters``; this record is
    for callers that want to report untuned fields.
    """

    model_config = ConfigDict(frozen=True)

    vehicle_id: int
    vehicle_path: Path
    """Vehicle document that was read."""
    tire_path: Path
    """Shared tire document that was read."""
    parameters: VehicleParameters

    overridden: list[str]
    """Dotted names of fields set by a document, e.g. ``steering.max``."""
    defaulted: list[str]
    """Dotted names of fields left at their zero default."""

    def is_overridden(self, name: str) -> bool:
        return name in self.overridden
