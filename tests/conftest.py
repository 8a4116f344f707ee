"""Shared test fixtures: temporary parameter trees written with PyYAML."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest
import yaml



def write_yaml(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        if data is not None:
            yaml.safe_dump(data, f)
    return path


@pytest.fixture
def param_root(tmp_path: Path) -> Path:
    return tmp_path / "parameters"


@pytest.fixture
def write_documents(param_root: Path) -> Callable[..., Path]:
    """Write a vehicle and/or tire document below ``param_root``.

    Pass ``None`` to write an empty file; omit a document to leave it missing.
    """
    missing = object()

    def _write(vehicle: Any = missing, tire: Any = missing, vehicle_id: int = 1) -> Path:
        if vehicle is not missing:
            write_yaml(param_root / "vehicle" / f"parameters_vehicle{vehicle_id}.yaml", vehicle)
        if tire is not missing:
            write_yaml(param_root / "tire" / "parameters_tire.yaml", tire)
        return param_root

    return _write
