"""Engine: document resolution, loading and population."""

from velox_params.engine.paths import DocumentPaths, resolve_document_paths
from velox_params.engine.loader import ensure_exists, load_document
from velox_params.engine.populate import collect_overrides, populate_vehicle_parameters
from velox_params.engine.setup import resolve_vehicle_parameters, setup_vehicle_parameters

__all__ = [
    "DocumentPaths",
    "resolve_document_paths",
    "ensure_exists",
    "load_document",
    "collect_overrides",
    "populate_vehicle_parameters",
    "resolve_vehicle_parameters",
    "setup_vehicle_parameters",
]
