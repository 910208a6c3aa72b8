"""Output Shaping Domain Service."""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Union

from pydantic import ValidationError

from paremcp.domains.shared import ShapeModel

from .errors import EstimatorAnomaly
from .estimation import SizeEstimator, get_default_estimator
from .events import OutputShaped
from .repository import ShapeRegistry, shape_registry
from .shapes import OutputShape
from .validation import SchemaValidator
from .value_objects import (
    CompactionPreference,
    DecisionOutcome,
    Representation,
    SizeMetric,
)

logger = logging.getLogger(__name__)


class CompactionDecisionEngine:
    """Decides whether a tool responds with its Full or Compact result.

    Pipeline:
    1. FORCE_FULL / FORCE_COMPACT pick the representation outright
    2. AUTO measures the Full result against the raw CLI output and
       keeps the Full result unless it costs strictly more
    3. Build the payload (Full, or the projection of Full)
    4. Render text with the formatter matching the representation
    5. Validate the payload against its schema
    6. Return the DecisionOutcome

    The raw output is the baseline because the caller already accepted
    its cost by invoking the tool; there is no fixed token limit.
    """

    def __init__(
        self,
        estimator: Optional[SizeEstimator] = None,
        validator: Optional[SchemaValidator] = None,
        registry: Optional[ShapeRegistry] = None,
        event_publisher: Optional[Callable[[object], None]] = None,
    ) -> None:
        self._estimator = estimator or get_default_estimator()
        self._validator = validator or SchemaValidator()
        self._registry = registry or shape_registry
        self._event_publisher = event_publisher

    @property
    def estimator(self) -> SizeEstimator:
        return self._estimator

    def decide(
        self,
        full: Any,
        raw_text: str,
        preference: CompactionPreference = CompactionPreference.AUTO,
        *,
        shape: Union[OutputShape, str],
    ) -> DecisionOutcome:
        """Shape one invocation's response.

        Args:
            full: The parsed Full result (or the internal record when the
                shape declares a ``schema_map``).
            raw_text: The CLI output the Full result was parsed from.
            preference: Resolved compaction preference.
            shape: The OutputShape, or its registered name.

        Raises:
            SchemaViolation: The chosen payload fails its schema.
            EstimatorAnomaly: The AUTO branch could not measure an input.
        """
        resolved = self._resolve_shape(shape)
        full_cost: Optional[SizeMetric] = None
        baseline_cost: Optional[SizeMetric] = None

        if preference is CompactionPreference.FORCE_FULL:
            representation = Representation.FULL
        elif preference is CompactionPreference.FORCE_COMPACT:
            representation = Representation.COMPACT
        else:
            full_cost = self._measure(full, resolved.name)
            baseline_cost = self._measure(raw_text, resolved.name)
            # Ties keep the Full result.
            if full_cost <= baseline_cost:
                representation = Representation.FULL
            else:
                representation = Representation.COMPACT

        if representation is Representation.FULL:
            payload_model = resolved.to_full_schema(full)
            text = resolved.format_full(full)
        else:
            try:
                payload_model = resolved.project(full)
            except ValidationError as exc:
                raise self._validator.violation_from(
                    exc, Representation.COMPACT, resolved.name
                ) from exc
            text = resolved.format_compact(payload_model)

        payload = self._validator.validate(
            payload_model.to_payload(), representation, resolved
        )

        logger.debug(
            f"{resolved.name}: {preference.value} -> {representation.value}"
            + (
                f" (full={full_cost.value}, raw={baseline_cost.value} {full_cost.unit})"
                if full_cost is not None and baseline_cost is not None
                else ""
            )
        )

        outcome = DecisionOutcome(
            representation=representation,
            payload=payload,
            text=text,
            preference=preference,
            full_cost=full_cost,
            baseline_cost=baseline_cost,
            tool_name=resolved.name,
        )
        self._publish(OutputShaped(
            tool_name=resolved.name,
            representation=representation.value,
            preference=preference.value,
            full_cost=full_cost.value if full_cost is not None else None,
            baseline_cost=baseline_cost.value if baseline_cost is not None else None,
            unit=full_cost.unit if full_cost is not None else None,
        ))
        return outcome

    def dual_output(
        self,
        data: ShapeModel,
        human_format: Callable[[Any], str],
        tool_name: Optional[str] = None,
    ) -> DecisionOutcome:
        """Respond with ``data`` as-is for tools that have no compact form.

        The payload is still validated against ``data``'s own model, and an
        OutputShaped event is published as for ``decide``. Without a tool
        name the event is tagged with the model's class name.
        """
        label = tool_name or type(data).__name__
        payload = self._validator.validate_against(
            data.to_payload(), type(data), Representation.FULL, tool_name=tool_name
        )
        preference = CompactionPreference.FORCE_FULL
        logger.debug(f"{label}: {preference.value} -> {Representation.FULL.value} (no compact form)")

        outcome = DecisionOutcome(
            representation=Representation.FULL,
            payload=payload,
            text=human_format(data),
            preference=preference,
            tool_name=tool_name,
        )
        self._publish(OutputShaped(
            tool_name=label,
            representation=Representation.FULL.value,
            preference=preference.value,
        ))
        return outcome

    def _resolve_shape(self, shape: Union[OutputShape, str]) -> OutputShape:
        if isinstance(shape, OutputShape):
            return shape
        return self._registry.get(shape)

    def _measure(self, value: Any, tool_name: str) -> SizeMetric:
        try:
            return self._estimator.estimate(value)
        except EstimatorAnomaly as exc:
            logger.error(f"{tool_name}: size estimation failed: {exc}")
            raise

    def _publish(self, event: object) -> None:
        if self._event_publisher:
            try:
                self._event_publisher(event)
            except Exception as e:
                logger.error(f"Failed to publish event: {e}")


_default_engine: Optional[CompactionDecisionEngine] = None


def get_default_engine() -> CompactionDecisionEngine:
    """Get or lazily build the process-wide engine from environment settings."""
    global _default_engine
    if _default_engine is None:
        _default_engine = CompactionDecisionEngine()
    return _default_engine


def compact_dual_output(
    full: Any,
    raw_text: str,
    shape: Union[OutputShape, str],
    compact: Optional[bool] = None,
    engine: Optional[CompactionDecisionEngine] = None,
) -> DecisionOutcome:
    """Shape a response from the MCP ``compact`` flag.

    Convenience entry point for tool handlers: resolves the boolean flag
    to a CompactionPreference once, then delegates to the engine.
    """
    preference = CompactionPreference.from_compact_flag(compact)
    return (engine or get_default_engine()).decide(full, raw_text, preference, shape=shape)
