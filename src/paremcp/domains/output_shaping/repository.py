"""Output Shape Registry."""
from __future__ import annotations

from typing import Any, Dict, List, Protocol

from .errors import UnknownShapeError
from .shapes import OutputShape


class OutputShapeRepository(Protocol):
    """Protocol for shape lookup."""

    def get(self, name: str) -> OutputShape: ...
    def register(self, shape: OutputShape) -> OutputShape: ...


class ShapeRegistry:
    """In-memory shape store keyed by shape name.

    Populated at import time by ``paremcp.shapes`` and only read afterwards.
    """

    def __init__(self) -> None:
        self._shapes: Dict[str, OutputShape] = {}

    def register(self, shape: OutputShape) -> OutputShape:
        existing = self._shapes.get(shape.name)
        if existing is not None and existing is not shape:
            raise ValueError(f"Output shape '{shape.name}' is already registered")
        self._shapes[shape.name] = shape
        return shape

    def get(self, name: str) -> OutputShape:
        try:
            return self._shapes[name]
        except KeyError:
            raise UnknownShapeError(name) from None

    def names(self) -> List[str]:
        return sorted(self._shapes)

    def output_schema(self, name: str) -> Dict[str, Any]:
        return self.get(name).output_schema()

    def __contains__(self, name: object) -> bool:
        return name in self._shapes

    def __len__(self) -> int:
        return len(self._shapes)


shape_registry = ShapeRegistry()
