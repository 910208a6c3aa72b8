"""Lint result shape (ESLint, Biome, Hadolint, Ruff, ...)."""
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import Field

from paremcp.domains.output_shaping import OutputShape, shape_registry
from paremcp.domains.shared import ShapeModel

Severity = Literal["error", "warning", "info"]


class LintDiagnostic(ShapeModel):
    file: str
    line: int = Field(ge=0)
    column: Optional[int] = Field(default=None, ge=0)
    rule: str
    severity: Severity
    message: str


class LintDeprecation(ShapeModel):
    text: str
    reference: Optional[str] = None


class LintResult(ShapeModel):
    """Full lint result: every diagnostic the linter reported."""
    success: bool
    total: int = Field(ge=0)
    errors: int = Field(default=0, ge=0)
    warnings: int = Field(default=0, ge=0)
    files_checked: int = Field(default=0, ge=0)
    diagnostics: List[LintDiagnostic] = Field(default_factory=list)
    fixable_error_count: Optional[int] = Field(default=None, ge=0)
    fixable_warning_count: Optional[int] = Field(default=None, ge=0)
    deprecations: List[LintDeprecation] = Field(default_factory=list)


class LintResultCompact(ShapeModel):
    """Compact lint result: counts only, no individual diagnostics."""
    success: bool
    total: int = Field(ge=0)
    errors: int = Field(ge=0)
    warnings: int = Field(ge=0)
    files_checked: int = Field(ge=0)
    deprecation_count: Optional[int] = Field(default=None, ge=0)


def compact_lint(data: LintResult) -> LintResultCompact:
    return LintResultCompact(
        success=data.success,
        total=data.total,
        errors=data.errors,
        warnings=data.warnings,
        files_checked=data.files_checked,
        deprecation_count=len(data.deprecations) or None,
    )


def _files_checked_suffix(files_checked: int) -> str:
    return f" ({files_checked} files checked)" if files_checked else ""


def format_lint(data: LintResult) -> str:
    """Human-readable diagnostic summary with file locations."""
    if data.total == 0:
        return f"Lint: no issues found{_files_checked_suffix(data.files_checked)}."

    header = f"Lint: {data.total} problems ({data.errors} errors, {data.warnings} warnings)"
    if data.fixable_error_count or data.fixable_warning_count:
        header += (
            f" ({data.fixable_error_count or 0} fixable errors,"
            f" {data.fixable_warning_count or 0} fixable warnings)"
        )
    lines = [header]
    for d in data.diagnostics:
        loc = f"{d.file}:{d.line}"
        if d.column is not None:
            loc += f":{d.column}"
        lines.append(f"  {loc} {d.severity} {d.rule}: {d.message}")
    if data.deprecations:
        lines.append("Deprecations:")
        for dep in data.deprecations:
            lines.append(f"  {dep.text} ({dep.reference})" if dep.reference else f"  {dep.text}")
    return "\n".join(lines)


def format_lint_compact(data: LintResultCompact) -> str:
    if data.total == 0:
        return f"Lint: no issues found{_files_checked_suffix(data.files_checked)}."
    files = f" across {data.files_checked} files" if data.files_checked else ""
    suffix = f" ({data.deprecation_count} deprecations)" if data.deprecation_count else ""
    return (
        f"Lint: {data.total} problems ({data.errors} errors, {data.warnings} warnings)"
        f"{files}{suffix}."
    )


LINT_SHAPE = shape_registry.register(OutputShape(
    name="lint",
    full_model=LintResult,
    compact_model=LintResultCompact,
    project=compact_lint,
    format_full=format_lint,
    format_compact=format_lint_compact,
))
