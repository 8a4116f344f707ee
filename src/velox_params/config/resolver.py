"""Resolver configuration: where parameter documents live."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PARAM_ROOT = Path("parameters")


class ResolverConfig(BaseModel):
    """Directory layout of a parameter tree.

    ``default_root`` is used whenever the caller passes no directory.
    """

    model_config = ConfigDict(frozen=True)

    default_root: Path = Field(default=DEFAULT_PARAM_ROOT, description="Parameter root used when none is given")
    vehicle_subdir: str = Field(default="vehicle", description="Sub-directory holding vehicle documents")
    tire_subdir: str = Field(default="tire", description="Sub-directory holding the tire document")
    vehicle_template: str = Field(
        default="parameters_vehicle{id}.yaml",
        description="File name of a vehicle document; ``{id}`` is the vehicle id",
    )
    tire_filename: str = Field(default="parameters_tire.yaml", description="File name of the shared tire document")
