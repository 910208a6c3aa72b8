"""Unit tests for the size estimators."""

__test__ = True

import pytest

from paremcp.config import OutputShapingSettings
from paremcp.domains.output_shaping import (
    CharCountEstimator,
    EstimatorAnomaly,
    SizeMetric,
    TokenEstimator,
    content_chars,
    get_default_estimator,
)
from paremcp.shapes import LintResult


class TestContentChars:
    """Test leaf-content measurement."""

    def test_string_measured_as_is(self):
        assert content_chars("no issues found\n") == 16

    def test_empty_inputs(self):
        assert content_chars("") == 0
        assert content_chars({}) == 0
        assert content_chars([]) == 0

    def test_keys_are_free(self):
        assert content_chars({"a_very_long_key_name": "x"}) == 1

    def test_scalars(self):
        assert content_chars(True) == 4
        assert content_chars(False) == 5
        assert content_chars(0) == 1
        assert content_chars(1234) == 4
        assert content_chars(None) == 0

    def test_nested(self):
        value = {"a": ["xy", {"b": "zzz"}], "c": 10}
        assert content_chars(value) == 2 + 3 + 2

    def test_pydantic_model_uses_wire_form(self):
        result = LintResult(success=True, total=0, diagnostics=[])
        # success, total, errors, warnings, filesChecked -> "true" + "0" * 4
        assert content_chars(result) == 4 + 4

    def test_deep_nesting_does_not_raise(self):
        value: list = []
        node = value
        for _ in range(5000):
            child: list = []
            node.append(child)
            node = child
        node.append("leaf")
        assert content_chars(value) == 4

    def test_shared_subobject_counted_per_occurrence(self):
        shared = ["abc"]
        assert content_chars([shared, shared]) == 6

    def test_heavily_shared_structure_stays_linear(self):
        level: list = ["ab"]
        for _ in range(64):
            level = [level, level]
        assert content_chars(level) == 2 * 2 ** 64

    def test_indirect_cycle_raises_anomaly(self):
        outer: list = []
        inner = [outer]
        outer.append({"items": inner})
        with pytest.raises(EstimatorAnomaly, match="cyclic"):
            content_chars(outer)

    def test_cycle_raises_anomaly(self):
        value: dict = {"name": "x"}
        value["self"] = value
        with pytest.raises(EstimatorAnomaly, match="cyclic"):
            content_chars(value)

    def test_unsupported_type_raises_anomaly(self):
        with pytest.raises(EstimatorAnomaly, match="object"):
            content_chars({"x": object()})

    def test_deterministic_regardless_of_key_order(self):
        assert content_chars({"a": "1", "b": "22"}) == content_chars({"b": "22", "a": "1"})

    def test_appending_never_decreases(self):
        base = {"items": ["one"]}
        grown = {"items": ["one", "two"]}
        assert content_chars(grown) >= content_chars(base)
        assert content_chars("abc" + "def") >= content_chars("abc")


class TestCharCountEstimator:

    def test_unit(self):
        assert CharCountEstimator().estimate("abc") == SizeMetric(3, "chars")


class TestTokenEstimator:

    def test_rounds_up(self):
        estimator = TokenEstimator(chars_per_token=4.0)
        assert estimator.estimate("abcde").value == 2
        assert estimator.estimate("abcd").value == 1

    def test_empty_is_zero(self):
        assert TokenEstimator().estimate("").value == 0

    def test_unit(self):
        assert TokenEstimator().estimate("x").unit == "tokens"

    def test_custom_ratio(self):
        assert TokenEstimator(chars_per_token=2.0).estimate("abcd").value == 2

    def test_invalid_ratio(self):
        with pytest.raises(ValueError, match="positive"):
            TokenEstimator(chars_per_token=0)


class TestGetDefaultEstimator:

    def test_tokens_by_default(self):
        estimator = get_default_estimator(OutputShapingSettings())
        assert isinstance(estimator, TokenEstimator)
        assert estimator.chars_per_token == 4.0

    def test_chars(self):
        estimator = get_default_estimator(OutputShapingSettings(size_metric="chars"))
        assert isinstance(estimator, CharCountEstimator)

    def test_ratio_from_settings(self):
        estimator = get_default_estimator(OutputShapingSettings(chars_per_token=3.5))
        assert estimator.chars_per_token == 3.5
