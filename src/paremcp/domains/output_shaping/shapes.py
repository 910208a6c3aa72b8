"""Output shape declarations.

An ``OutputShape`` bundles everything the engine needs to know about one
tool result type: its Full and Compact schemas, the projection from Full
to Compact, and the formatter for each representation. The engine and
the validation harness are written once against this interface.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Optional, Type, TypeVar

from pydantic import BaseModel

from .value_objects import Representation

FullT = TypeVar("FullT", bound=BaseModel)
CompactT = TypeVar("CompactT", bound=BaseModel)


@dataclass(frozen=True)
class OutputShape(Generic[FullT, CompactT]):
    """Full/Compact schema pair with its projection and formatters.

    Attributes:
        name: Registry key, usually the tool name (e.g. ``"lint"``).
        full_model: Declared schema of the Full result.
        compact_model: Declared schema of the Compact result.
        project: Pure mapping from a Full result to its Compact result.
        format_full: Human-readable text for a Full result.
        format_compact: Human-readable text for a Compact result.
        schema_map: Optional mapping from an internal record (which may
            carry formatter-only fields) onto ``full_model``. When unset,
            the record handed to the engine must already be a ``full_model``.
    """
    name: str
    full_model: Type[FullT]
    compact_model: Type[CompactT]
    project: Callable[[Any], CompactT]
    format_full: Callable[[Any], str]
    format_compact: Callable[[CompactT], str]
    schema_map: Optional[Callable[[Any], FullT]] = None

    def model_for(self, representation: Representation) -> Type[BaseModel]:
        if representation is Representation.FULL:
            return self.full_model
        return self.compact_model

    def to_full_schema(self, record: Any) -> FullT:
        """Return the Full-schema view of ``record``."""
        if self.schema_map is not None:
            return self.schema_map(record)
        return record

    def output_schema(self) -> Dict[str, Any]:
        """JSON schema of the union of the Full and Compact shapes."""
        return {
            "title": f"{self.name} output",
            "anyOf": [
                self.full_model.model_json_schema(by_alias=True),
                self.compact_model.model_json_schema(by_alias=True),
            ],
        }
