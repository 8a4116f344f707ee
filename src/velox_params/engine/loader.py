"""Document loading: existence checks and YAML parsing."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from velox_params.errors import ParameterFileNotFoundError

logger = logging.getLogger(__name__)


def ensure_exists(path: Path, kind: str) -> None:
    """Raise ``ParameterFileNotFoundError`` if ``path`` does not exist."""
    if not path.exists():
        raise ParameterFileNotFoundError(kind, path)


def load_document(path: Path) -> Any:
    """Parse one YAML document.

    Syntax errors propagate as ``yaml.YAMLError``. An empty document yields
    an empty mapping.
    """
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    logger.debug(f"Loaded parameter document {path}")
    return {} if data is None else data
