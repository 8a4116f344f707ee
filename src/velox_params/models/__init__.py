"""Result models: resolution output contracts."""

from velox_params.models.resolution import ParameterResolution

__all__ = [
    "ParameterResolution",
]
