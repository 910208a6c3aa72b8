"""Formatter write result shape (Prettier, Biome, Black, gofmt, ...)."""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from paremcp.domains.output_shaping import OutputShape, shape_registry
from paremcp.domains.shared import ShapeModel


class FormatWriteResult(ShapeModel):
    success: bool
    files_changed: int = Field(ge=0)
    files_unchanged: Optional[int] = Field(default=None, ge=0)
    files: List[str] = Field(default_factory=list)
    error_message: Optional[str] = None
    duration_ms: Optional[int] = Field(default=None, ge=0)


class FormatWriteResultCompact(ShapeModel):
    """Compact format write: counts only, no individual file paths."""
    success: bool
    files_changed: int = Field(ge=0)
    files_unchanged: Optional[int] = Field(default=None, ge=0)
    error_message: Optional[str] = None
    duration_ms: Optional[int] = Field(default=None, ge=0)


def compact_format_write(data: FormatWriteResult) -> FormatWriteResultCompact:
    return FormatWriteResultCompact(
        success=data.success,
        files_changed=data.files_changed,
        files_unchanged=data.files_unchanged,
        error_message=data.error_message or None,
        duration_ms=data.duration_ms,
    )


def _failure(error_message: Optional[str]) -> str:
    return f"Format failed: {error_message}" if error_message else "Format failed."


def format_format_write(data: FormatWriteResult) -> str:
    if not data.success:
        return _failure(data.error_message)
    if data.files_changed == 0:
        if data.files_unchanged:
            return f"All {data.files_unchanged} files already formatted."
        return "All files already formatted."

    if data.files_unchanged:
        header = f"Formatted {data.files_changed} files ({data.files_unchanged} already formatted):"
    else:
        header = f"Formatted {data.files_changed} files:"
    return "\n".join([header, *(f"  {f}" for f in data.files)])


def format_format_write_compact(data: FormatWriteResultCompact) -> str:
    if not data.success:
        return _failure(data.error_message)
    if data.files_changed == 0:
        return "All files already formatted."
    if data.files_unchanged:
        return f"Formatted {data.files_changed} files ({data.files_unchanged} already formatted)."
    return f"Formatted {data.files_changed} files."


FORMAT_WRITE_SHAPE = shape_registry.register(OutputShape(
    name="format-write",
    full_model=FormatWriteResult,
    compact_model=FormatWriteResultCompact,
    project=compact_format_write,
    format_full=format_format_write,
    format_compact=format_format_write_compact,
))
