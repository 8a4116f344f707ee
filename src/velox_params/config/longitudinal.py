"""Longitudinal envelope."""

from pydantic import Field

from velox_params.config.base import ParameterGroup


class LongitudinalParameters(ParameterGroup):
    """Velocity, acceleration and jerk limits."""

    v_min: float = Field(default=0.0, description="Minimum velocity (m/s)")
    v_max: float = Field(default=0.0, description="Maximum velocity (m/s)")
    v_switch: float = Field(
        default=0.0,
        description="Velocity above which acceleration is limited by engine power (m/s)",
    )
    a_max: float = Field(default=0.0, description="Maximum absolute acceleration (m/s^2)")
    j_max: float = Field(default=0.0, description="Maximum longitudinal jerk (m/s^3)")
    j_dot_max: float = Field(default=0.0, description="Maximum longitudinal jerk rate (m/s^4)")
