"""Known vehicle types and their factory functions."""

from __future__ import annotations

import os
from enum import IntEnum

from velox_params.config.vehicle import VehicleParameters
from velox_params.engine.setup import setup_vehicle_parameters


class VehicleId(IntEnum):
    """Vehicle ids with a shipped parameter document."""

    FORD_ESCORT = 1
    BMW_320I = 2
    VW_VANAGON = 3
    SEMI_TRAILER_TRUCK = 4


def parameters_vehicle1(dir_params: str | os.PathLike[str] | None = None) -> VehicleParameters:
    """Parameters for vehicle 1 (Ford Escort)."""
    return setup_vehicle_parameters(VehicleId.FORD_ESCORT, dir_params)


def parameters_vehicle2(dir_params: str | os.PathLike[str] | None = None) -> VehicleParameters:
    """Parameters for vehicle 2 (BMW 320i)."""
    return setup_vehicle_parameters(VehicleId.BMW_320I, dir_params)


def parameters_vehicle3(dir_params: str | os.PathLike[str] | None = None) -> VehicleParameters:
    """Parameters for vehicle 3 (VW Vanagon)."""
    return setup_vehicle_parameters(VehicleId.VW_VANAGON, dir_params)


def parameters_vehicle4(dir_params: str | os.PathLike[str] | None = None) -> VehicleParameters:
    """Parameters for vehicle 4 (semi-trailer truck)."""
    return setup_vehicle_parameters(VehicleId.SEMI_TRAILER_TRUCK, dir_params)
