"""Trailer geometry: only meaningful for articulated models."""

from pydantic import Field

from velox_params.config.base import ParameterGroup


class TrailerParameters(ParameterGroup):
    """Trailer dimensions for the kinematic single-track trailer model."""

    l: float = Field(default=0.0, description="Trailer length (m)")  # noqa: E741
    w: float = Field(default=0.0, description="Trailer width (m)")
    l_hitch: float = Field(default=0.0, description="Hitch length (m)")
    l_total: float = Field(default=0.0, description="Total length of truck plus trailer (m)")
    l_wb: float = Field(default=0.0, description="Trailer wheelbase (m)")
