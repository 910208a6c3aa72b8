"""pare-mcp - Adaptive output compaction for CLI-backed MCP tools."""

from paremcp import shapes  # noqa: F401  (registers the built-in output shapes)
from paremcp.domains.output_shaping import (
    CompactionDecisionEngine,
    CompactionPreference,
    DecisionOutcome,
    Representation,
    compact_dual_output,
)

__all__ = [
    "CompactionDecisionEngine",
    "CompactionPreference",
    "DecisionOutcome",
    "Representation",
    "compact_dual_output",
]

__version__ = "0.1.0"
