"""Adapters between pare-mcp domains and the MCP protocol."""

from .mcp_adapter import (
    INTERNAL_ERROR_MESSAGE,
    error_result,
    invalid_input_result,
    shaped_tool_result,
    to_call_tool_result,
)

__all__ = [
    "INTERNAL_ERROR_MESSAGE",
    "error_result",
    "invalid_input_result",
    "shaped_tool_result",
    "to_call_tool_result",
]
