"""Output Shaping Domain Events."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class OutputShaped:
    """Emitted after every tool response has been shaped and validated."""
    tool_name: str
    representation: str
    preference: str
    full_cost: Optional[int] = None
    baseline_cost: Optional[int] = None
    unit: Optional[str] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def measured(self) -> bool:
        """True when the AUTO branch compared costs."""
        return self.full_cost is not None and self.baseline_cost is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_type": "OutputShaped",
            "tool_name": self.tool_name,
            "representation": self.representation,
            "preference": self.preference,
            "full_cost": self.full_cost,
            "baseline_cost": self.baseline_cost,
            "unit": self.unit,
            "timestamp": self.timestamp.isoformat(),
        }
