"""CLI Errors Bounded Context.

Classifies legitimate CLI failures (the tool ran and failed) into
categories with recovery suggestions. Kept apart from output shaping
errors, which signal defects in this server rather than in the CLI run.
"""
from .value_objects import ErrorCategory, CliError
from .services import (
    classify_error, classify_text, suggest_recovery,
    invalid_input, format_cli_error,
    is_command_not_found, is_permission_denied, is_timeout,
    is_network_error, is_auth_error, is_conflict, is_not_found,
    is_already_exists, is_configuration_error,
)

__all__ = [
    "ErrorCategory", "CliError",
    "classify_error", "classify_text", "suggest_recovery",
    "invalid_input", "format_cli_error",
    "is_command_not_found", "is_permission_denied", "is_timeout",
    "is_network_error", "is_auth_error", "is_conflict", "is_not_found",
    "is_already_exists", "is_configuration_error",
]
