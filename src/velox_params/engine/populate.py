"""Population: merge parsed documents onto the zero defaults.

Each group's field table is the pydantic model's declared fields, matched
by exact key. Only keys present in a document are collected; everything
else keeps its default when the collected values are validated into a
``VehicleParameters``. Conversion to float is left to pydantic, so a value
that cannot be converted raises ``ValidationError`` naming the field.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from velox_params.config.base import ParameterGroup
from velox_params.config.tire import TireParameters
from velox_params.config.vehicle import VehicleParameters
from velox_params.errors import ParameterDocumentError

logger = logging.getLogger(__name__)

TIRE_KEY = "tire"


# ═══════════════════════════════════════════════════════════════════════════
# Field tables
# ═══════════════════════════════════════════════════════════════════════════

def _is_group(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, ParameterGroup)


def scalar_fields(model: type[ParameterGroup]) -> tuple[str, ...]:
    """Names of the scalar (non-group) fields of ``model``, in declaration order."""
    return tuple(name for name, info in model.model_fields.items() if not _is_group(info.annotation))


def group_fields(model: type[ParameterGroup]) -> dict[str, type[ParameterGroup]]:
    """Embedded groups of ``model`` keyed by field name."""
    return {
        name: info.annotation
        for name, info in model.model_fields.items()
        if _is_group(info.annotation)
    }


# ═══════════════════════════════════════════════════════════════════════════
# Document walking
# ═══════════════════════════════════════════════════════════════════════════

def pick_fields(node: Mapping[str, Any], model: type[ParameterGroup]) -> dict[str, Any]:
    """Entries of ``node`` whose key is a scalar field of ``model``; unknown keys are dropped."""
    return {name: node[name] for name in scalar_fields(model) if name in node}


def group_node(root: Any, key: str) -> Mapping[str, Any] | None:
    """The mapping stored under ``key``, or ``None`` if absent or not a mapping."""
    if not isinstance(root, Mapping):
        return None
    node = root.get(key)
    return node if isinstance(node, Mapping) else None


def tire_source(tire_doc: Any) -> Mapping[str, Any] | None:
    """Select the mapping tire coefficients are read from.

    A nested ``tire`` mapping wins; otherwise the document itself is used
    when it is a flat mapping.
    """
    nested = group_node(tire_doc, TIRE_KEY)
    if nested is not None:
        return nested
    if isinstance(tire_doc, Mapping):
        return tire_doc
    return None


def collect_overrides(
    vehicle_doc: Any,
    tire_doc: Any,
    vehicle_path: Path | None = None,
) -> dict[str, Any]:
    """Nested dict of every recognised field present in the two documents.

    Raises:
        ParameterDocumentError: the vehicle document is not a mapping.
    """
    if not isinstance(vehicle_doc, Mapping):
        raise ParameterDocumentError("Vehicle", type(vehicle_doc).__name__, vehicle_path)

    overrides: dict[str, Any] = {}
    overrides.update(pick_fields(vehicle_doc, VehicleParameters))
    for name, model in group_fields(VehicleParameters).items():
        if name == TIRE_KEY:
            continue
        node = group_node(vehicle_doc, name)
        if node is not None:
            overrides[name] = pick_fields(node, model)

    tire: dict[str, Any] = {}
    source = tire_source(tire_doc)
    if source is not None:
        tire.update(pick_fields(source, TireParameters))
    # Per-vehicle tweaks on top of the shared coefficients
    vehicle_tire = group_node(vehicle_doc, TIRE_KEY)
    if vehicle_tire is not None:
        vehicle_tire_fields = pick_fields(vehicle_tire, TireParameters)
        logger.debug(f"Vehicle document overrides {len(vehicle_tire_fields)} tire fields")
        tire.update(vehicle_tire_fields)
    if tire:
        overrides[TIRE_KEY] = tire

    return overrides


def flatten_names(overrides: Mapping[str, Any], prefix: str = "") -> list[str]:
    """Dotted names of the leaf fields in ``overrides``."""
    names: list[str] = []
    for key, value in overrides.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, Mapping):
            names.extend(flatten_names(value, f"{dotted}."))
        else:
            names.append(dotted)
    return names


def all_field_names(model: type[ParameterGroup] = VehicleParameters, prefix: str = "") -> list[str]:
    """Dotted names of every scalar field reachable from ``model``."""
    names = [f"{prefix}{name}" for name in scalar_fields(model)]
    for name, group in group_fields(model).items():
        names.extend(all_field_names(group, f"{prefix}{name}."))
    return names


def populate_vehicle_parameters(
    vehicle_doc: Any,
    tire_doc: Any,
    vehicle_path: Path | None = None,
) -> tuple[VehicleParameters, dict[str, Any]]:
    """Build a fresh ``VehicleParameters`` from parsed vehicle and tire documents.

    Returns the parameters together with the overrides they were validated
    from, so callers can tell set fields from defaulted ones.
    """
    overrides = collect_overrides(vehicle_doc, tire_doc, vehicle_path)
    return VehicleParameters.model_validate(overrides), overrides
