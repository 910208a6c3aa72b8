"""Size estimation for raw CLI text and structured results.

Raw text is measured as-is. Structured values are measured by their leaf
content: every string, number and boolean contributes the length of its
JSON literal, while keys and punctuation contribute nothing. Keys are
fixed by the tool's declared output schema, which the client already
holds, so only the data a result adds is priced against the raw output.
"""
from __future__ import annotations

import json
import logging
import math
from typing import Any, Dict, List, Optional, Protocol, Set, Tuple

from pydantic import BaseModel

from paremcp.config import OutputShapingSettings, load_settings

from .errors import EstimatorAnomaly
from .value_objects import SizeMetric

logger = logging.getLogger(__name__)


class SizeEstimator(Protocol):
    """Anything that turns text or a structured value into a SizeMetric."""

    unit: str

    def estimate(self, value: Any) -> SizeMetric: ...


def _scalar_chars(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, str):
        return len(value)
    if isinstance(value, bool):
        return 4 if value else 5
    if isinstance(value, (int, float)):
        return len(json.dumps(value))
    raise EstimatorAnomaly(f"Cannot measure value of type {type(value).__name__}")


def _dump_model(model: BaseModel) -> Any:
    try:
        return model.model_dump(mode="json", by_alias=True, exclude_none=True)
    except (TypeError, ValueError) as exc:
        raise EstimatorAnomaly(
            f"Cannot serialize {type(model).__name__} for measurement: {exc}"
        ) from exc


_CONTAINER_TYPES = (dict, list, tuple)


def content_chars(value: Any) -> int:
    """Count the characters of content carried by ``value``.

    Walks the structure iteratively so deep nesting never hits the
    recursion limit. Shared sub-objects are counted once per occurrence
    but walked only once (their size is memoized by id), so heavily
    shared structures stay linear in the number of distinct containers.
    A container that contains itself raises EstimatorAnomaly.
    """
    if isinstance(value, BaseModel):
        value = _dump_model(value)
    if not isinstance(value, _CONTAINER_TYPES):
        return _scalar_chars(value)

    sizes: Dict[int, int] = {}
    # Measured containers stay referenced so their ids are not reused.
    measured: List[Any] = []
    on_path: Set[int] = set()
    stack: List[Tuple[Any, Optional[List[Any]]]] = [(value, None)]
    while stack:
        node, children = stack.pop()
        if children is not None:
            on_path.discard(id(node))
            sizes[id(node)] = sum(
                sizes[id(child)] if isinstance(child, _CONTAINER_TYPES) else _scalar_chars(child)
                for child in children
            )
            continue
        if id(node) in sizes:
            continue
        if id(node) in on_path:
            raise EstimatorAnomaly("Cannot measure a cyclic structure")
        items = node.values() if isinstance(node, dict) else node
        children = [_dump_model(c) if isinstance(c, BaseModel) else c for c in items]
        on_path.add(id(node))
        measured.append(node)
        stack.append((node, children))
        stack.extend(
            (child, None) for child in reversed(children) if isinstance(child, _CONTAINER_TYPES)
        )
    return sizes[id(value)]


class CharCountEstimator:
    """Measures output in characters of content."""

    unit = "chars"

    def estimate(self, value: Any) -> SizeMetric:
        return SizeMetric(value=content_chars(value), unit=self.unit)


class TokenEstimator:
    """Approximates LLM tokens as ``ceil(chars / chars_per_token)``."""

    unit = "tokens"

    def __init__(self, chars_per_token: float = 4.0) -> None:
        if chars_per_token <= 0:
            raise ValueError("chars_per_token must be positive")
        self.chars_per_token = chars_per_token

    def estimate(self, value: Any) -> SizeMetric:
        chars = content_chars(value)
        return SizeMetric(value=math.ceil(chars / self.chars_per_token), unit=self.unit)


def get_default_estimator(
    settings: Optional[OutputShapingSettings] = None,
) -> SizeEstimator:
    """Build the estimator named by ``settings.size_metric``."""
    cfg = settings or load_settings()
    if cfg.size_metric == "chars":
        return CharCountEstimator()
    logger.debug(f"Using token estimator at {cfg.chars_per_token} chars/token")
    return TokenEstimator(chars_per_token=cfg.chars_per_token)
