"""Output Shaping Bounded Context.

Decides, per tool invocation, whether the structured response is the
Full parsed result or its Compact projection, renders the matching
human-readable text, and validates the chosen payload against its
declared schema before it reaches the transport.
"""
from .errors import (
    OutputShapingError, SchemaViolation, EstimatorAnomaly, UnknownShapeError,
)
from .estimation import (
    SizeEstimator, CharCountEstimator, TokenEstimator,
    content_chars, get_default_estimator,
)
from .events import OutputShaped
from .repository import ShapeRegistry, shape_registry
from .services import (
    CompactionDecisionEngine, compact_dual_output, get_default_engine,
)
from .shapes import OutputShape
from .validation import SchemaValidator
from .value_objects import (
    CompactionPreference, Representation, SizeMetric, DecisionOutcome,
)

__all__ = [
    "OutputShapingError", "SchemaViolation", "EstimatorAnomaly", "UnknownShapeError",
    "SizeEstimator", "CharCountEstimator", "TokenEstimator",
    "content_chars", "get_default_estimator",
    "OutputShaped",
    "ShapeRegistry", "shape_registry",
    "CompactionDecisionEngine", "compact_dual_output", "get_default_engine",
    "OutputShape",
    "SchemaValidator",
    "CompactionPreference", "Representation", "SizeMetric", "DecisionOutcome",
]
