"""Output Shaping Errors.

Every error raised here is a defect signal (a parser or projection that
produced an invalid shape, or an unmeasurable value), never a transient
condition. Nothing in this layer catches and recovers from them.
"""
from __future__ import annotations

from typing import Optional


class OutputShapingError(Exception):
    """Base class for all output shaping defects."""


class SchemaViolation(OutputShapingError):
    """A payload failed validation against its declared Full or Compact schema.

    Attributes:
        representation: ``"full"`` or ``"compact"``.
        field_path: Dotted path of the first failing field (e.g.
            ``diagnostics.3.line``); empty string for a root-level failure.
        tool_name: Name of the shape whose schema was violated.
        detail: The validator's message for the first failing field.
    """

    def __init__(
        self,
        representation: str,
        field_path: str,
        tool_name: Optional[str] = None,
        detail: str = "",
    ) -> None:
        self.representation = representation
        self.field_path = field_path
        self.tool_name = tool_name
        self.detail = detail
        location = field_path or "<root>"
        prefix = f"{tool_name}: " if tool_name else ""
        message = f"{prefix}{representation} payload violates its schema at '{location}'"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class EstimatorAnomaly(OutputShapingError):
    """The size estimator received a value it cannot measure.

    Results are plain acyclic data by construction, so this always points
    at an upstream bug.
    """


class UnknownShapeError(OutputShapingError, KeyError):
    """Lookup of an output shape name that was never registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No output shape registered under '{name}'")

    def __str__(self) -> str:
        return str(self.args[0])
