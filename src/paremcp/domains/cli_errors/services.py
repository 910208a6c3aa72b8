"""CLI failure classification.

Maps a failed CLI run onto an ErrorCategory by matching well-known
phrases in its error output, so an agent can pick a recovery strategy
without parsing free text.
"""
from __future__ import annotations

import logging
import re
from typing import Callable, Dict, List, Tuple

from paremcp.models import RunResult

from .value_objects import CliError, ErrorCategory

logger = logging.getLogger(__name__)

TIMEOUT_EXIT_CODE = 124  # timeout(1)

_COMMAND_NOT_FOUND_MARKERS = (
    "command not found",
    "not recognized",
    "enoent",
    "no such file or directory",
)
_PERMISSION_MARKERS = (
    "permission denied",
    "eacces",
    "eperm",
    "access denied",
    "operation not permitted",
)
_TIMEOUT_MARKERS = ("timed out", "timeout")
_NETWORK_MARKERS = (
    "connection refused",
    "econnrefused",
    "etimedout",
    "econnreset",
    "enetunreach",
    "could not resolve host",
    "network is unreachable",
    "dns resolution failed",
)
_AUTH_MARKERS = (
    "authentication",
    "authenticated",
    "credential",
    "unauthorized",
    "permission denied (publickey",
    "invalid credentials",
    "bad credentials",
    "login required",
)
_AUTH_STATUS = re.compile(r" 40[13][ :]")
_CONFLICT_MARKERS = ("merge conflict", "conflict", "lock file", "locked")
_NOT_FOUND_MARKERS = (
    "not found",
    "does not exist",
    "no such",
    "unknown revision",
    "pathspec",
)
_NOT_FOUND_STATUS = re.compile(r" 404[ :]")
_ALREADY_EXISTS_MARKERS = ("already exists", "already exist")
_CONFIGURATION_MARKERS = (
    "missing config",
    "configuration error",
    "config file not found",
    "invalid configuration",
    "no configuration",
    ".eslintrc",
    "tsconfig",
    "could not read config",
)


def _contains_any(text: str, markers: Tuple[str, ...]) -> bool:
    lower = text.lower()
    return any(marker in lower for marker in markers)


def is_command_not_found(text: str) -> bool:
    return _contains_any(text, _COMMAND_NOT_FOUND_MARKERS)


def is_permission_denied(text: str) -> bool:
    return _contains_any(text, _PERMISSION_MARKERS)


def is_timeout(text: str) -> bool:
    return _contains_any(text, _TIMEOUT_MARKERS)


def is_network_error(text: str) -> bool:
    return _contains_any(text, _NETWORK_MARKERS)


def is_auth_error(text: str) -> bool:
    return _contains_any(text, _AUTH_MARKERS) or bool(_AUTH_STATUS.search(text.lower()))


def is_conflict(text: str) -> bool:
    return _contains_any(text, _CONFLICT_MARKERS)


def is_not_found(text: str) -> bool:
    return _contains_any(text, _NOT_FOUND_MARKERS) or bool(
        _NOT_FOUND_STATUS.search(text.lower())
    )


def is_already_exists(text: str) -> bool:
    return _contains_any(text, _ALREADY_EXISTS_MARKERS)


def is_configuration_error(text: str) -> bool:
    return _contains_any(text, _CONFIGURATION_MARKERS)


# Order matters: "permission denied (publickey)" is an auth failure, and
# conflict messages often mention paths that are "not found".
_CLASSIFIERS: List[Tuple[Callable[[str], bool], ErrorCategory]] = [
    (is_command_not_found, ErrorCategory.COMMAND_NOT_FOUND),
    (is_auth_error, ErrorCategory.AUTHENTICATION_ERROR),
    (is_permission_denied, ErrorCategory.PERMISSION_DENIED),
    (is_network_error, ErrorCategory.NETWORK_ERROR),
    (is_already_exists, ErrorCategory.ALREADY_EXISTS),
    (is_configuration_error, ErrorCategory.CONFIGURATION_ERROR),
    (is_conflict, ErrorCategory.CONFLICT),
    (is_not_found, ErrorCategory.NOT_FOUND),
]

_SUGGESTIONS: Dict[ErrorCategory, str] = {
    ErrorCategory.COMMAND_NOT_FOUND: 'Ensure "{command}" is installed and available in your PATH.',
    ErrorCategory.PERMISSION_DENIED: "Check file/directory permissions or run with elevated privileges.",
    ErrorCategory.TIMEOUT: "The command took too long. Retry with a longer timeout or a smaller scope.",
    ErrorCategory.INVALID_INPUT: "Check the input parameters and try again.",
    ErrorCategory.NOT_FOUND: "Verify the resource (file, branch, ref, etc.) exists.",
    ErrorCategory.NETWORK_ERROR: "Check your network connection and try again.",
    ErrorCategory.AUTHENTICATION_ERROR: "Verify your credentials or tokens are valid and not expired.",
    ErrorCategory.CONFLICT: "Resolve the conflict or release the lock and retry.",
    ErrorCategory.CONFIGURATION_ERROR: "Check that all required config files exist and are valid.",
    ErrorCategory.ALREADY_EXISTS: "The resource already exists. Use a different name or remove it first.",
    ErrorCategory.COMMAND_FAILED: 'Inspect the error message from "{command}" for more details.',
}


def classify_text(text: str, exit_code: int) -> ErrorCategory:
    """Pick the most specific category for ``text`` and ``exit_code``."""
    if exit_code == TIMEOUT_EXIT_CODE or is_timeout(text):
        return ErrorCategory.TIMEOUT
    for matches, category in _CLASSIFIERS:
        if matches(text):
            return category
    return ErrorCategory.COMMAND_FAILED


def suggest_recovery(category: ErrorCategory, command: str = "") -> str:
    return _SUGGESTIONS[category].format(command=command)


def classify_error(result: RunResult, command: str) -> CliError:
    """Build a CliError from a failed run.

    Args:
        result: The failed RunResult. stderr is inspected, falling back
            to stdout when stderr is empty.
        command: Human-readable command label, e.g. ``"git tag"``.
    """
    text = result.stderr or result.stdout
    category = classify_text(text, result.exit_code)
    logger.debug(f"{command} failed with exit code {result.exit_code}: {category.value}")
    return CliError(
        category=category,
        message=text.strip() or f"{command} failed with exit code {result.exit_code}",
        command=command,
        exit_code=result.exit_code,
        suggestion=suggest_recovery(category, command),
    )


def invalid_input(message: str) -> CliError:
    """CliError for input rejected before the CLI was invoked."""
    return CliError(
        category=ErrorCategory.INVALID_INPUT,
        message=message,
        suggestion=suggest_recovery(ErrorCategory.INVALID_INPUT),
    )


def format_cli_error(error: CliError) -> str:
    lines = [f"Error [{error.category.value}]: {error.message}"]
    if error.command:
        lines.append(f"Command: {error.command}")
    if error.exit_code is not None:
        lines.append(f"Exit code: {error.exit_code}")
    if error.suggestion:
        lines.append(f"Suggestion: {error.suggestion}")
    return "\n".join(lines)
