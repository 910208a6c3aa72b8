"""Shared Kernel - Base types shared across bounded contexts.

Every structured result that crosses the MCP boundary (Full results,
Compact results, CLI error records) derives from ``ShapeModel`` so they
all agree on the wire conventions:

- camelCase JSON keys (``files_checked`` -> ``filesChecked``)
- immutable after construction
- unknown keys rejected, so a payload never carries undeclared fields
- optional fields left at None are omitted; required fields are always
  sent, as null when their value is None
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)
from pydantic.alias_generators import to_camel


class ShapeModel(BaseModel):
    """Base model for every Full and Compact result type."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    @model_serializer(mode="wrap")
    def _omit_unset_optionals(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> Dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            if field.is_required() or getattr(self, name, None) is not None:
                continue
            key = field.alias if info.by_alias and field.alias else name
            data.pop(key, None)
        return data

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the JSON-compatible dict sent as structured content."""
        return self.model_dump(mode="json", by_alias=True)
