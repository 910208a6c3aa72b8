"""CLI Error Value Objects."""
from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from paremcp.domains.shared import ShapeModel


class ErrorCategory(Enum):
    """Class of CLI failure an agent can match on without parsing text."""
    COMMAND_NOT_FOUND = "command-not-found"        # CLI not installed or not in PATH
    PERMISSION_DENIED = "permission-denied"
    TIMEOUT = "timeout"
    INVALID_INPUT = "invalid-input"                # Rejected before the CLI ran
    NOT_FOUND = "not-found"                        # File, branch, ref, ...
    NETWORK_ERROR = "network-error"
    AUTHENTICATION_ERROR = "authentication-error"
    CONFLICT = "conflict"                          # Merge conflict, lock contention
    CONFIGURATION_ERROR = "configuration-error"
    ALREADY_EXISTS = "already-exists"
    COMMAND_FAILED = "command-failed"              # Catch-all


class CliError(ShapeModel):
    """Structured error returned when the CLI itself failed."""
    is_error: Literal[True] = True
    category: ErrorCategory
    message: str
    command: Optional[str] = None
    exit_code: Optional[int] = None
    suggestion: Optional[str] = None
