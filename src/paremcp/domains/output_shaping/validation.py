"""Schema Validation Harness."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ValidationError

from .errors import SchemaViolation
from .shapes import OutputShape
from .value_objects import Representation

logger = logging.getLogger(__name__)


def _first_error_path(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return ""
    return ".".join(str(part) for part in errors[0].get("loc", ()))


class SchemaValidator:
    """Checks a payload against the schema of its representation.

    There is no lenient mode: a payload that fails is a defect in the
    parser or projection that produced it, and the invocation fails.
    """

    def validate(
        self,
        payload: Dict[str, Any],
        representation: Representation,
        shape: OutputShape,
    ) -> Dict[str, Any]:
        """Return ``payload`` unchanged if it satisfies its schema.

        Raises:
            SchemaViolation: With the representation tag and the dotted
                path of the first failing field.
        """
        return self.validate_against(
            payload,
            shape.model_for(representation),
            representation,
            tool_name=shape.name,
        )

    def validate_against(
        self,
        payload: Dict[str, Any],
        model: Type[BaseModel],
        representation: Representation,
        tool_name: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Validate ``payload`` against an explicit model."""
        try:
            model.model_validate(payload)
        except ValidationError as exc:
            raise self.violation_from(exc, representation, tool_name) from exc
        return payload

    def violation_from(
        self,
        exc: ValidationError,
        representation: Representation,
        tool_name: Optional[str] = None,
    ) -> SchemaViolation:
        """Translate a pydantic ValidationError into a logged SchemaViolation.

        Also used when a projection fails while building its Compact model.
        """
        errors = exc.errors()
        violation = SchemaViolation(
            representation=representation.value,
            field_path=_first_error_path(exc),
            tool_name=tool_name,
            detail=str(errors[0].get("msg", "")) if errors else "",
        )
        logger.error(f"Schema violation: {violation}")
        return violation
