"""Steering envelope."""

from pydantic import Field

from velox_params.config.base import ParameterGroup


class SteeringParameters(ParameterGroup):
    """Bounds and rate limits on the steering angle."""

    min: float = Field(default=0.0, description="Minimum steering angle (rad)")
    max: float = Field(default=0.0, description="Maximum steering angle (rad)")
    v_min: float = Field(default=0.0, description="Minimum steering velocity (rad/s)")
    v_max: float = Field(default=0.0, description="Maximum steering velocity (rad/s)")
    kappa_dot_max: float = Field(default=0.0, description="Maximum curvature rate (1/(m s))")
    kappa_dot_dot_max: float = Field(default=0.0, description="Maximum curvature rate rate (1/(m s^2))")
