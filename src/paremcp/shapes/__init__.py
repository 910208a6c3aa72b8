"""Registered Full/Compact result shapes.

Importing this package registers every shape on
``paremcp.domains.output_shaping.shape_registry``.
"""

from .format import (
    FORMAT_WRITE_SHAPE,
    FormatWriteResult,
    FormatWriteResultCompact,
)
from .git import (
    GIT_DIFF_SHAPE,
    GIT_LOG_SHAPE,
    GitDiff,
    GitDiffChunk,
    GitDiffCompact,
    GitDiffFile,
    GitDiffRecord,
    GitLog,
    GitLogCompact,
    GitLogCompactEntry,
    GitLogEntry,
)
from .lint import (
    LINT_SHAPE,
    LintDeprecation,
    LintDiagnostic,
    LintResult,
    LintResultCompact,
)

__all__ = [
    "FORMAT_WRITE_SHAPE", "FormatWriteResult", "FormatWriteResultCompact",
    "GIT_DIFF_SHAPE", "GIT_LOG_SHAPE",
    "GitDiff", "GitDiffChunk", "GitDiffCompact", "GitDiffFile", "GitDiffRecord",
    "GitLog", "GitLogCompact", "GitLogCompactEntry", "GitLogEntry",
    "LINT_SHAPE", "LintDeprecation", "LintDiagnostic", "LintResult", "LintResultCompact",
]
