"""Document resolution: vehicle id + root directory to document paths."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from velox_params.config.resolver import ResolverConfig


@dataclass(frozen=True)
class DocumentPaths:
    """The two documents that make up one vehicle's parameters."""

    root: Path
    vehicle: Path
    tire: Path


def resolve_document_paths(
    vehicle_id: int,
    dir_params: str | os.PathLike[str] | None = None,
    config: ResolverConfig | None = None,
) -> DocumentPaths:
    """Build the vehicle and tire document paths without touching the filesystem.

    An empty or missing ``dir_params`` falls back to ``config.default_root``.
    The id is formatted as a plain integer; it is not checked against the
    known vehicle types, so an unknown id only fails once the document is
    found to be missing.
    """
    config = config or ResolverConfig()
    root = Path(dir_params) if dir_params else config.default_root

    vehicle_name = config.vehicle_template.format(id=int(vehicle_id))
    return DocumentPaths(
        root=root,
        vehicle=root / config.vehicle_subdir / vehicle_name,
        tire=root / config.tire_subdir / config.tire_filename,
    )
