"""Actionable error hierarchy tests.

Tests that the error factory methods produce correct, structured,
recoverable errors per the actionable-error philosophy.
"""

from __future__ import annotations

import pytest

from opten_text.errors import ActionableError, ErrorType


class TestErrorFactoryMethods:
    """REQUIREMENT: Factory methods produce structured errors with embedded guidance.

    WHO: Text helpers and the CLI raising errors for callers to route
    WHAT: Each factory produces the correct error_type; suggestion is always populated;
          to_dict() excludes None values
    WHY: Opaque errors halt autonomous recovery — every error must carry
         its own recovery path
    """

    def test_argument_null_names_the_parameter(self) -> None:
        """argument_null() names the None parameter so the caller knows what to set."""
        err = ActionableError.argument_null("record", operation="trim_all_string_properties")
        assert err.error_type == ErrorType.ARGUMENT_NULL
        assert "record" in err.error
        assert err.service == "trim_all_string_properties"
        assert err.context == {"parameter": "record"}

    def test_format_error_names_value_and_target_type(self) -> None:
        """format() includes the bad token and the expected type so the input can be fixed."""
        err = ActionableError.format("x", "integer", "not digits")
        assert err.error_type == ErrorType.FORMAT
        assert "'x'" in err.error
        assert "integer" in err.error
        assert err.troubleshooting is not None

    def test_config_error_names_the_field(self) -> None:
        """config() embeds the offending field name so the operator knows which setting to fix."""
        err = ActionableError.config("text.replacement", "must be a string")
        assert err.error_type == ErrorType.CONFIG
        assert "text.replacement" in err.error

    def test_validation_error_has_correct_type(self) -> None:
        """validation() produces an error typed VALIDATION."""
        err = ActionableError.validation("text.truncate_length", "must be >= 0")
        assert err.error_type == ErrorType.VALIDATION

    def test_to_dict_excludes_none_values(self) -> None:
        """to_dict() omits None-valued keys so serialized output is clean for logging."""
        err = ActionableError.validation("weight", "too high")
        d = err.to_dict()
        assert None not in d.values()
        assert "context" not in d
        assert d["error_type"] == "validation"

    def test_to_dict_serializes_guidance(self) -> None:
        """Nested guidance dataclasses serialize to plain dicts."""
        d = ActionableError.format("x", "integer", "bad").to_dict()
        assert isinstance(d["ai_guidance"], dict)
        assert d["troubleshooting"]["steps"], "Expected troubleshooting steps"

    def test_all_factories_set_success_false(self) -> None:
        """Every factory method marks success=False so callers never treat an error as a success."""
        errors = [
            ActionableError.argument_null("x"),
            ActionableError.format("x", "integer", "bad"),
            ActionableError.config("x", "bad"),
            ActionableError.validation("x", "bad"),
            ActionableError.unexpected("svc", "op", "boom"),
        ]
        assert all(err.success is False for err in errors)
        assert all(err.suggestion for err in errors), "Every factory must populate suggestion"

    def test_error_is_a_raisable_exception(self) -> None:
        """ActionableError works with raise/except and str() shows the message."""
        with pytest.raises(ActionableError) as exc_info:
            raise ActionableError.unexpected("svc", "op", "boom")
        assert "boom" in str(exc_info.value)


class TestSuggestionPreservation:
    """
    REQUIREMENT: Custom suggestions are always preserved.

    WHO: Callers providing operation-specific context
    WHAT: Custom suggestions flow through every factory method
    WHY: Callers have context that generic defaults cannot infer
    """

    def test_format_preserves_custom_suggestion(self) -> None:
        """A caller-provided suggestion overrides the generic default."""
        err = ActionableError.format("x", "integer", "bad", suggestion="Use numeric ids")
        assert err.suggestion == "Use numeric ids"

    def test_argument_null_preserves_custom_suggestion(self) -> None:
        """A caller-provided suggestion overrides the generic default."""
        err = ActionableError.argument_null("record", suggestion="Load the record first")
        assert err.suggestion == "Load the record first"
