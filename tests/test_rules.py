"""Tests for rule definitions and value formatting."""

import math

import pytest

from dataknobs_validator import ConfigurationError, MISSING, Rule, ValidationError, format_value
from dataknobs_validator.rules import (
    custom_rule,
    is_missing,
    max_chars_rule,
    min_items_rule,
    min_value_rule,
    one_of_rule,
    pattern_rule,
    phone_rule,
    required_rule,
)


class TestFormatValue:
    """Test rendering of values in messages."""

    def test_booleans_are_lowercase(self):
        """Test booleans render as true/false."""
        assert format_value(True) == "true"
        assert format_value(False) == "false"

    def test_none_and_missing_render_empty(self):
        """Test None and MISSING render as empty text."""
        assert format_value(None) == ""
        assert format_value(MISSING) == ""

    def test_integral_floats_drop_fraction(self):
        """Test integral floats render without a fraction."""
        assert format_value(3.0) == "3"
        assert format_value(2.5) == "2.5"
        assert format_value(1234567890.0) == "1234567890"

    def test_special_floats(self):
        """Test infinities and NaN render by name."""
        assert format_value(math.inf) == "Infinity"
        assert format_value(-math.inf) == "-Infinity"
        assert format_value(math.nan) == "NaN"


class TestMissing:
    """Test the unset-value marker."""

    def test_missing_is_singleton_and_falsy(self):
        """Test MISSING is a falsy singleton."""
        assert type(MISSING)() is MISSING
        assert not MISSING
        assert repr(MISSING) == "MISSING"

    def test_is_missing(self):
        """Test which values count as missing."""
        assert is_missing(MISSING)
        assert is_missing(None)
        assert is_missing("")
        assert not is_missing(0)
        assert not is_missing(False)
        assert not is_missing([])


class TestRule:
    """Test Rule evaluation."""

    def test_predicate_failure_raises_with_field(self):
        """Test a failing predicate raises with the field name."""
        rule = Rule("positive", lambda v: v > 0, "Must be positive")
        rule.check(1, "n")
        with pytest.raises(ValidationError) as exc_info:
            rule.check(-1, "n")
        assert exc_info.value.field == "n"
        assert exc_info.value.message == "Must be positive"

    def test_type_guard_runs_before_predicate(self):
        """Test the type guard fails before the predicate runs."""
        calls = []
        rule = Rule(
            "short",
            lambda v: calls.append(v) or len(v) < 3,
            "Too long",
            accepts=lambda v: isinstance(v, str),
            type_message="Not text",
        )
        with pytest.raises(ValidationError, match="Not text"):
            rule(42, "f")
        assert calls == []

    def test_rules_are_immutable(self):
        """Test rules cannot be modified once built."""
        rule = required_rule()
        with pytest.raises(AttributeError):
            rule.message = "changed"


class TestRuleConstructors:
    """Test the rule constructor functions."""

    def test_required_messages(self):
        """Test the required rule rejects every missing value."""
        rule = required_rule()
        for value in (MISSING, None, ""):
            with pytest.raises(ValidationError, match="Value is required"):
                rule.check(value, "f")
        rule.check(0, "f")

    def test_one_of_message_and_membership(self):
        """Test one_of message rendering and membership."""
        rule = one_of_rule(["red", True, 1.0])
        assert rule.message == "Value must be one of: red, true, 1"
        rule.check("red", "f")
        rule.check(1, "f")

    def test_one_of_keeps_booleans_apart_from_numbers(self):
        """Test booleans never match numbers."""
        rule = one_of_rule([1, 0])
        with pytest.raises(ValidationError):
            rule.check(True, "f")
        with pytest.raises(ValidationError):
            one_of_rule([True]).check(1, "f")

    def test_one_of_matches_nan(self):
        """Test NaN is a member of a collection that contains NaN."""
        rule = one_of_rule([math.nan])
        rule.check(math.nan, "f")
        with pytest.raises(ValidationError):
            rule.check(1.0, "f")
        with pytest.raises(ValidationError):
            one_of_rule([1.0]).check(math.nan, "f")

    def test_one_of_accepts_generators(self):
        """Test one_of materializes a generator once."""
        rule = one_of_rule(v for v in ("a", "b"))
        rule.check("b", "f")
        rule.check("a", "f")

    def test_length_bounds_must_be_non_negative(self):
        """Test length bounds must be non-negative integers."""
        with pytest.raises(ConfigurationError):
            max_chars_rule(-1)
        with pytest.raises(ConfigurationError):
            min_items_rule(1.5)

    def test_number_bounds_must_be_numbers(self):
        """Test number bounds must be real numbers."""
        with pytest.raises(ConfigurationError):
            min_value_rule("10")
        with pytest.raises(ConfigurationError):
            min_value_rule(True)

    def test_invalid_pattern_raises_configuration_error(self):
        """Test a malformed pattern is rejected when built."""
        with pytest.raises(ConfigurationError) as exc_info:
            pattern_rule("(unclosed")
        assert exc_info.value.context["constraint"] == "reg"

    def test_pattern_searches_anywhere(self):
        """Test the pattern may match anywhere in the value."""
        rule = pattern_rule("abc")
        rule.check("xxabcxx", "f")
        with pytest.raises(ValidationError):
            rule.check("ab", "f")

    def test_phone_checks_string_form(self):
        """Test phone checks the canonical string form."""
        rule = phone_rule()
        rule.check("+12345678901", "f")
        rule.check(1234567890, "f")
        rule.check(1234567890.0, "f")
        with pytest.raises(ValidationError, match="Invalid phone number format"):
            rule.check(123, "f")

    def test_custom_rule_requires_callable(self):
        """Test custom rules need a callable predicate."""
        with pytest.raises(ConfigurationError):
            custom_rule("not callable")
        rule = custom_rule(lambda v: v == 2, "Must be two")
        assert rule.name == "custom"
        with pytest.raises(ValidationError, match="Must be two"):
            rule.check(3, "f")
