"""Git result shapes: ``git diff`` and ``git log``."""
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import Field

from paremcp.domains.output_shaping import OutputShape, shape_registry
from paremcp.domains.shared import ShapeModel

FileStatus = Literal["added", "modified", "deleted", "renamed", "copied"]


# ── git diff ─────────────────────────────────────────────────────────


class GitDiffChunk(ShapeModel):
    header: str
    lines: str


class GitDiffFile(ShapeModel):
    file: str
    status: FileStatus
    additions: int = Field(ge=0)
    deletions: int = Field(ge=0)
    binary: Optional[bool] = None
    old_file: Optional[str] = None
    chunks: Optional[List[GitDiffChunk]] = None


class GitDiff(ShapeModel):
    """Full diff: per-file stats plus hunks when patch output was requested."""
    files: List[GitDiffFile] = Field(default_factory=list)
    total_files: int = Field(ge=0)
    total_additions: int = Field(default=0, ge=0)
    total_deletions: int = Field(default=0, ge=0)


class GitDiffRecord(GitDiff):
    """Parser output for ``git diff``.

    ``shortstat`` is git's own summary line, shown in the human-readable
    text but not part of the declared schema.
    """
    shortstat: Optional[str] = None


class GitDiffFileStat(ShapeModel):
    file: str
    additions: int = Field(ge=0)
    deletions: int = Field(ge=0)


class GitDiffCompact(ShapeModel):
    """Compact diff: file-level stats only, no hunks or aggregate totals."""
    files: List[GitDiffFileStat] = Field(default_factory=list)
    total_files: int = Field(ge=0)


def diff_schema_map(record: GitDiffRecord) -> GitDiff:
    return GitDiff(
        files=record.files,
        total_files=record.total_files,
        total_additions=record.total_additions,
        total_deletions=record.total_deletions,
    )


def compact_diff(diff: GitDiff) -> GitDiffCompact:
    return GitDiffCompact(
        files=[
            GitDiffFileStat(file=f.file, additions=f.additions, deletions=f.deletions)
            for f in diff.files
        ],
        total_files=diff.total_files,
    )


def format_diff(diff: GitDiff) -> str:
    if diff.total_files == 0:
        return "No changes."
    summary = getattr(diff, "shortstat", None) or (
        f"{diff.total_files} files changed, +{diff.total_additions} -{diff.total_deletions}"
    )
    lines = [summary]
    for f in diff.files:
        name = f"{f.old_file} -> {f.file}" if f.old_file else f.file
        stats = "binary" if f.binary else f"+{f.additions} -{f.deletions}"
        lines.append(f"  {name} ({f.status}) {stats}")
        for chunk in f.chunks or []:
            lines.append(f"    {chunk.header}")
            lines.extend(f"    {line}" for line in chunk.lines.splitlines())
    return "\n".join(lines)


def format_diff_compact(diff: GitDiffCompact) -> str:
    if diff.total_files == 0:
        return "No changes."
    files = [f"  {f.file} +{f.additions} -{f.deletions}" for f in diff.files]
    return "\n".join([f"{diff.total_files} files changed", *files])


GIT_DIFF_SHAPE = shape_registry.register(OutputShape(
    name="git-diff",
    full_model=GitDiff,
    compact_model=GitDiffCompact,
    project=compact_diff,
    format_full=format_diff,
    format_compact=format_diff_compact,
    schema_map=diff_schema_map,
))


# ── git log ──────────────────────────────────────────────────────────


class GitLogEntry(ShapeModel):
    hash: Optional[str] = None
    hash_short: str = Field(min_length=1)
    author: Optional[str] = None
    date: Optional[str] = None
    message: str
    full_message: Optional[str] = None
    refs: Optional[str] = None


class GitLog(ShapeModel):
    commits: List[GitLogEntry] = Field(default_factory=list)
    total: int = Field(ge=0)


class GitLogCompactEntry(ShapeModel):
    hash_short: str = Field(min_length=1)
    message: str
    refs: Optional[str] = None


class GitLogCompact(ShapeModel):
    """Compact log: short hash and subject line per commit."""
    commits: List[GitLogCompactEntry] = Field(default_factory=list)
    total: int = Field(ge=0)


def compact_log(log: GitLog) -> GitLogCompact:
    return GitLogCompact(
        commits=[
            GitLogCompactEntry(hash_short=c.hash_short, message=c.message, refs=c.refs)
            for c in log.commits
        ],
        total=log.total,
    )


def format_log(log: GitLog) -> str:
    if not log.commits:
        return "No commits found."
    lines = []
    for c in log.commits:
        refs = f" ({c.refs})" if c.refs else ""
        byline = " ".join(part for part in (c.author, c.date) if part)
        lines.append(f"{c.hash_short}{refs} {c.message}" + (f" [{byline}]" if byline else ""))
        if c.full_message and c.full_message.strip() != c.message:
            body = c.full_message.strip().splitlines()[1:]
            lines.extend(f"    {line}" for line in body if line.strip())
    return "\n".join(lines)


def format_log_compact(log: GitLogCompact) -> str:
    if not log.commits:
        return "No commits found."
    return "\n".join(
        f"{c.hash_short} {c.message}" + (f" ({c.refs})" if c.refs else "")
        for c in log.commits
    )


GIT_LOG_SHAPE = shape_registry.register(OutputShape(
    name="git-log",
    full_model=GitLog,
    compact_model=GitLogCompact,
    project=compact_log,
    format_full=format_log,
    format_compact=format_log_compact,
))
