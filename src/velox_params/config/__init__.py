"""Parameter models: vehicle, envelope, tire and trailer groups."""

from velox_params.config.base import ParameterGroup
from velox_params.config.steering import SteeringParameters
from velox_params.config.longitudinal import LongitudinalParameters
from velox_params.config.trailer import TrailerParameters
from velox_params.config.tire import TireParameters
from velox_params.config.vehicle import VehicleParameters
from velox_params.config.resolver import DEFAULT_PARAM_ROOT, ResolverConfig

__all__ = [
    "ParameterGroup",
    "SteeringParameters",
    "LongitudinalParameters",
    "TrailerParameters",
    "TireParameters",
    "VehicleParameters",
    "DEFAULT_PARAM_ROOT",
    "ResolverConfig",
]
