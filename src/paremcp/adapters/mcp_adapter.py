"""MCP boundary adapter - Anti-Corruption Layer.

Translates output shaping outcomes and CLI errors into MCP
``CallToolResult`` objects, and turns output shaping defects into a
FastMCP ``ToolError`` so a client can tell "the server broke" apart from
"the CLI failed" (which is reported as a structured ``isError`` result).
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from fastmcp.exceptions import ToolError
from mcp.types import CallToolResult, TextContent

from paremcp.domains.cli_errors import CliError, format_cli_error, invalid_input
from paremcp.domains.output_shaping import (
    CompactionDecisionEngine,
    DecisionOutcome,
    OutputShape,
    OutputShapingError,
    compact_dual_output,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = (
    "Internal output shaping error in '{tool}'. This is a server defect, "
    "not a failure of the underlying command."
)


def to_call_tool_result(outcome: DecisionOutcome) -> CallToolResult:
    """Dual output: human-readable text plus structured content."""
    return CallToolResult(
        content=[TextContent(type="text", text=outcome.text)],
        structuredContent=outcome.payload,
    )


def error_result(error: CliError) -> CallToolResult:
    """Structured error result for a CLI that ran and failed."""
    return CallToolResult(
        content=[TextContent(type="text", text=format_cli_error(error))],
        structuredContent=error.to_payload(),
        isError=True,
    )


def invalid_input_result(message: str) -> CallToolResult:
    """Structured error result for input rejected before the CLI ran."""
    return error_result(invalid_input(message))


def shaped_tool_result(
    full: Any,
    raw_text: str,
    shape: Union[OutputShape, str],
    compact: Optional[bool] = None,
    engine: Optional[CompactionDecisionEngine] = None,
) -> CallToolResult:
    """Shape, validate and wrap a parsed result for a tool handler.

    Args:
        full: The parsed Full result.
        raw_text: CLI output the result was parsed from.
        shape: OutputShape or its registered name.
        compact: The tool's ``compact`` parameter as received from the client.
        engine: Engine override; the process-wide engine by default.

    Raises:
        ToolError: When output shaping hits a defect (schema violation,
            unmeasurable value, unknown shape).
    """
    tool = shape if isinstance(shape, str) else shape.name
    try:
        outcome = compact_dual_output(full, raw_text, shape, compact=compact, engine=engine)
    except OutputShapingError as exc:
        logger.error(f"Output shaping failed for '{tool}': {exc}")
        raise ToolError(INTERNAL_ERROR_MESSAGE.format(tool=tool)) from exc
    return to_call_tool_result(outcome)
