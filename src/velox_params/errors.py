"""Errors raised while resolving vehicle parameters.

Malformed YAML surfaces as ``yaml.YAMLError`` and field type mismatches as
``pydantic.ValidationError``; neither is wrapped.
"""

from __future__ import annotations

from pathlib import Path


class ParameterError(Exception):
    """Base class for parameter resolution failures."""


class ParameterFileNotFoundError(ParameterError, FileNotFoundError):
    """A vehicle or tire parameter document does not exist."""

    def __init__(self, kind: str, path: Path) -> None:
        self.kind = kind
        self.path = path
        super().__init__(f"{kind} parameter file not found: {path}")


class ParameterDocumentError(ParameterError):
    """A parameter document parsed, but its top level is not a mapping."""

    def __init__(self, kind: str, node_type: str, path: Path | None = None) -> None:
        self.kind = kind
        self.node_type = node_type
        self.path = path
        where = f": {path}" if path is not None else ""
        super().__init__(f"{kind} parameter document must be a mapping, got {node_type}{where}")
