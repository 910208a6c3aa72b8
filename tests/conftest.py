"""Pytest fixtures shared by the pare-mcp test suite."""

from __future__ import annotations

from typing import Callable, List

import pytest

import paremcp  # noqa: F401  (registers the built-in shapes)
from paremcp.domains.output_shaping import (
    CharCountEstimator,
    CompactionDecisionEngine,
    TokenEstimator,
)
from paremcp.shapes import LintDiagnostic, LintResult


def make_diagnostic(index: int, severity: str = "warning") -> LintDiagnostic:
    """A diagnostic whose rendered message is roughly 120 characters."""
    return LintDiagnostic(
        file=f"src/components/module_{index:03d}.ts",
        line=index + 1,
        column=7,
        rule="@typescript-eslint/no-unused-vars",
        severity=severity,
        message=(
            f"'unusedVariable{index:03d}' is assigned a value but never used. "
            "Remove it or prefix it with an underscore to silence this."
        ),
    )


def make_lint_result(errors: int = 0, warnings: int = 0, files_checked: int = 0) -> LintResult:
    diagnostics: List[LintDiagnostic] = [
        make_diagnostic(i, "error") for i in range(errors)
    ] + [make_diagnostic(errors + i, "warning") for i in range(warnings)]
    return LintResult(
        success=errors == 0,
        total=errors + warnings,
        errors=errors,
        warnings=warnings,
        files_checked=files_checked,
        diagnostics=diagnostics,
    )


@pytest.fixture
def lint_result_factory() -> Callable[..., LintResult]:
    return make_lint_result


@pytest.fixture
def clean_lint_result() -> LintResult:
    """Fully successful lint run with nothing to report."""
    return LintResult(success=True, total=0, diagnostics=[])


@pytest.fixture
def published_events() -> list:
    return []


@pytest.fixture
def char_engine(published_events) -> CompactionDecisionEngine:
    """Engine measuring in characters, recording published events."""
    return CompactionDecisionEngine(
        estimator=CharCountEstimator(),
        event_publisher=published_events.append,
    )


@pytest.fixture
def token_engine() -> CompactionDecisionEngine:
    return CompactionDecisionEngine(estimator=TokenEstimator(chars_per_token=4.0))
