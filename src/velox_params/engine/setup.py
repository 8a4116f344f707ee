"""Public entry points: resolve, load and populate in one pass."""

from __future__ import annotations

import logging
import os

from velox_params.config.resolver import ResolverConfig
from velox_params.config.vehicle import VehicleParameters
from velox_params.engine.loader import ensure_exists, load_document
from velox_params.engine.paths import resolve_document_paths
from velox_params.engine.populate import all_field_names, flatten_names, populate_vehicle_parameters
from velox_params.models.resolution import ParameterResolution

logger = logging.getLogger(__name__)


def resolve_vehicle_parameters(
    vehicle_id: int,
    dir_params: str | os.PathLike[str] | None = None,
    *,
    config: ResolverConfig | None = None,
) -> ParameterResolution:
    """Resolve parameters for ``vehicle_id`` and report which fields were set.

    Both documents are checked for existence before either is parsed, the
    vehicle document first.

    Raises:
        ParameterFileNotFoundError: a document is missing.
        ParameterDocumentError: the vehicle document is not a mapping.
        yaml.YAMLError: a document is not valid YAML.
        pydantic.ValidationError: a field value is not a number.
    """
    paths = resolve_document_paths(vehicle_id, dir_params, config)
    logger.debug(f"Vehicle {vehicle_id}: vehicle={paths.vehicle} tire={paths.tire}")

    ensure_exists(paths.vehicle, "Vehicle")
    ensure_exists(paths.tire, "Tire")

    vehicle_doc = load_document(paths.vehicle)
    tire_doc = load_document(paths.tire)

    parameters, overrides = populate_vehicle_parameters(vehicle_doc, tire_doc, paths.vehicle)

    overridden = flatten_names(overrides)
    set_fields = set(overridden)
    defaulted = [name for name in all_field_names() if name not in set_fields]
    if defaulted:
        logger.debug(f"Vehicle {vehicle_id}: {len(defaulted)} fields left at default: {', '.join(defaulted)}")
    logger.info(f"Loaded parameters for vehicle {vehicle_id} from {paths.root} ({len(overridden)} fields set)")

    return ParameterResolution(
        vehicle_id=int(vehicle_id),
        vehicle_path=paths.vehicle,
        tire_path=paths.tire,
        parameters=parameters,
        overridden=overridden,
        defaulted=defaulted,
    )


def setup_vehicle_parameters(
    vehicle_id: int,
    dir_params: str | os.PathLike[str] | None = None,
    *,
    config: ResolverConfig | None = None,
) -> VehicleParameters:
    """Create the ``VehicleParameters`` for one vehicle type.

    Reads ``<root>/vehicle/parameters_vehicle<id>.yaml`` and
    ``<root>/tire/parameters_tire.yaml``; ``root`` is ``dir_params`` or, if
    that is empty, ``config.default_root``. Fields absent from the documents
    stay zero.
    """
    return resolve_vehicle_parameters(vehicle_id, dir_params, config=config).parameters
