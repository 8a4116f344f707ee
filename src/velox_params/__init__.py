"""Vehicle parameter sets for vehicle-dynamics models, loaded from YAML."""

from velox_params.config import (
    LongitudinalParameters,
    ResolverConfig,
    SteeringParameters,
    TireParameters,
    TrailerParameters,
    VehicleParameters,
)
from velox_params.engine.setup import resolve_vehicle_parameters, setup_vehicle_parameters
from velox_params.errors import ParameterDocumentError, ParameterError, ParameterFileNotFoundError
from velox_params.models import ParameterResolution
from velox_params.vehicles import (
    VehicleId,
    parameters_vehicle1,
    parameters_vehicle2,
    parameters_vehicle3,
    parameters_vehicle4,
)

__all__ = [
    "LongitudinalParameters",
    "ResolverConfig",
    "SteeringParameters",
    "TireParameters",
    "TrailerParameters",
    "VehicleParameters",
    "resolve_vehicle_parameters",
    "setup_vehicle_parameters",
    "ParameterError",
    "ParameterDocumentError",
    "ParameterFileNotFoundError",
    "ParameterResolution",
    "VehicleId",
    "parameters_vehicle1",
    "parameters_vehicle2",
    "parameters_vehicle3",
    "parameters_vehicle4",
]
