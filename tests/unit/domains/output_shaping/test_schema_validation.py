"""Unit tests for the Schema Validation Harness."""

__test__ = True

import logging
from typing import Optional

import pytest

from paremcp.domains.output_shaping import (
    CompactionPreference,
    OutputShape,
    OutputShapingError,
    Representation,
    SchemaValidator,
    SchemaViolation,
)
from paremcp.domains.shared import ShapeModel
from paremcp.shapes import LINT_SHAPE, LintDiagnostic, LintResult


@pytest.fixture
def validator() -> SchemaValidator:
    return SchemaValidator()


class TestSchemaValidator:

    def test_valid_full_payload_returned_unchanged(self, validator, clean_lint_result):
        payload = clean_lint_result.to_payload()
        assert validator.validate(payload, Representation.FULL, LINT_SHAPE) is payload

    def test_valid_compact_payload(self, validator):
        payload = {"success": True, "total": 0, "errors": 0, "warnings": 0, "filesChecked": 3}
        assert validator.validate(payload, Representation.COMPACT, LINT_SHAPE) == payload

    def test_full_payload_fails_compact_schema(self, validator, lint_result_factory):
        payload = lint_result_factory(warnings=1).to_payload()
        with pytest.raises(SchemaViolation) as exc_info:
            validator.validate(payload, Representation.COMPACT, LINT_SHAPE)
        assert exc_info.value.representation == "compact"
        assert exc_info.value.field_path == "diagnostics"

    def test_reports_first_failing_nested_path(self, validator, lint_result_factory):
        payload = lint_result_factory(warnings=3).to_payload()
        payload["diagnostics"][1]["line"] = "not-a-line"
        with pytest.raises(SchemaViolation) as exc_info:
            validator.validate(payload, Representation.FULL, LINT_SHAPE)
        violation = exc_info.value
        assert violation.representation == "full"
        assert violation.field_path == "diagnostics.1.line"
        assert violation.tool_name == "lint"
        assert "diagnostics.1.line" in str(violation)

    def test_missing_required_field(self, validator):
        with pytest.raises(SchemaViolation) as exc_info:
            validator.validate({"total": 0}, Representation.FULL, LINT_SHAPE)
        assert exc_info.value.field_path == "success"

    def test_negative_count_rejected(self, validator):
        payload = {"success": True, "total": -1}
        with pytest.raises(SchemaViolation, match="total"):
            validator.validate(payload, Representation.FULL, LINT_SHAPE)

    def test_violation_is_output_shaping_error(self, validator):
        with pytest.raises(OutputShapingError):
            validator.validate({}, Representation.FULL, LINT_SHAPE)

    def test_violation_logged_at_error(self, validator, caplog):
        with caplog.at_level(logging.ERROR):
            with pytest.raises(SchemaViolation):
                validator.validate({}, Representation.COMPACT, LINT_SHAPE)
        assert any("Schema violation" in r.message for r in caplog.records)

    def test_validate_against_explicit_model(self, validator, clean_lint_result):
        payload = clean_lint_result.to_payload()
        assert validator.validate_against(payload, LintResult, Representation.FULL) == payload


class TestSchemaViolation:

    def test_root_level_message(self):
        violation = SchemaViolation("full", "", tool_name="lint")
        assert "<root>" in str(violation)

    def test_attributes(self):
        violation = SchemaViolation("compact", "errors", detail="Field required")
        assert violation.representation == "compact"
        assert violation.field_path == "errors"
        assert violation.tool_name is None
        assert str(violation).endswith("Field required")


# =============================================================================
# Required fields that may be null
# =============================================================================


class BranchStatus(ShapeModel):
    success: bool
    branch: Optional[str]
    upstream: Optional[str] = None


class BranchStatusCompact(ShapeModel):
    branch: Optional[str]


BRANCH_STATUS_SHAPE = OutputShape(
    name="branch-status",
    full_model=BranchStatus,
    compact_model=BranchStatusCompact,
    project=lambda full: BranchStatusCompact(branch=full.branch),
    format_full=lambda full: f"On branch {full.branch or '(detached)'}",
    format_compact=lambda compact: compact.branch or "(detached)",
)


class TestRequiredNullableFields:

    def test_required_null_kept_in_payload(self):
        payload = BranchStatus(success=True, branch=None).to_payload()
        assert payload == {"success": True, "branch": None}

    def test_optional_null_still_omitted(self):
        payload = BranchStatus(success=True, branch="main").to_payload()
        assert "upstream" not in payload

    @pytest.mark.parametrize("preference", [
        CompactionPreference.FORCE_FULL, CompactionPreference.FORCE_COMPACT,
    ])
    def test_detached_head_validates(self, char_engine, preference):
        outcome = char_engine.decide(
            BranchStatus(success=True, branch=None), "", preference, shape=BRANCH_STATUS_SHAPE
        )
        assert outcome.payload["branch"] is None

    def test_nested_required_null_kept(self, validator):
        diagnostic = LintDiagnostic(file="a.ts", line=1, rule="r", severity="info", message="m")
        payload = LintResult(success=True, total=1, diagnostics=[diagnostic]).to_payload()
        assert "column" not in payload["diagnostics"][0]
        validator.validate(payload, Representation.FULL, LINT_SHAPE)
