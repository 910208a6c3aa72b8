"""Output Shaping Value Objects."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Any, Dict, Optional


class CompactionPreference(Enum):
    """Per-invocation compaction preference."""
    AUTO = "auto"                    # Compact only when structured output costs more than raw
    FORCE_FULL = "force-full"        # Always return the Full result
    FORCE_COMPACT = "force-compact"  # Always return the Compact result (internal callers only)

    @classmethod
    def from_compact_flag(cls, compact: Optional[bool]) -> CompactionPreference:
        """Resolve the MCP ``compact`` boolean parameter.

        ``False`` means the caller explicitly asked for the full schema.
        Absent or ``True`` leaves the decision to the engine. There is no
        flag value for FORCE_COMPACT.
        """
        if compact is False:
            return cls.FORCE_FULL
        return cls.AUTO


class Representation(Enum):
    """Which structured form a response carries."""
    FULL = "full"
    COMPACT = "compact"


@total_ordering
@dataclass(frozen=True)
class SizeMetric:
    """Dimensionless, non-negative cost of a piece of output.

    Only metrics produced by the same estimator (same ``unit``) are
    comparable; the absolute value carries no meaning.
    """
    value: int
    unit: str = "tokens"

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"SizeMetric must be non-negative, got {self.value}")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SizeMetric):
            return NotImplemented
        if other.unit != self.unit:
            raise TypeError(
                f"Cannot compare SizeMetric in '{self.unit}' with '{other.unit}'"
            )
        return self.value < other.value


@dataclass(frozen=True)
class DecisionOutcome:
    """The response built for a single tool invocation.

    ``payload`` is the validated structured content, ``text`` the output
    of the formatter matching ``representation``. ``full_cost`` and
    ``baseline_cost`` are only set when the AUTO branch measured them.
    """
    representation: Representation
    payload: Dict[str, Any]
    text: str
    preference: CompactionPreference = CompactionPreference.AUTO
    full_cost: Optional[SizeMetric] = None
    baseline_cost: Optional[SizeMetric] = None
    tool_name: Optional[str] = field(default=None, compare=False)

    @property
    def is_compact(self) -> bool:
        return self.representation is Representation.COMPACT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "representation": self.representation.value,
            "preference": self.preference.value,
            "tool_name": self.tool_name,
            "payload": self.payload,
            "text": self.text,
            "full_cost": self.full_cost.value if self.full_cost else None,
            "baseline_cost": self.baseline_cost.value if self.baseline_cost else None,
        }
