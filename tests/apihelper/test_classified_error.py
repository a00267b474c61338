"""Tests for classified error construction and default option precedence."""

from __future__ import annotations

import pytest

from packages.apihelper.errors import (
    ClassifiedError,
    ErrorFactory,
    StatusClass,
    new,
    set_default_options,
    with_args,
    with_cause,
    with_code,
    with_details,
    with_message,
    with_status,
)


def test_new_with_cause_appends_cause_text() -> None:
    """Attaching a cause should render ``<text>: <cause>``."""
    cause = ValueError("disk full")

    error = new("write failed", with_cause(cause))

    assert str(error) == "write failed: disk full"
    assert error.cause is cause
    assert error.__cause__ is cause


def test_new_with_none_cause_keeps_text_unchanged() -> None:
    """A ``None`` cause should be ignored rather than rendered."""
    error = new("write failed", with_cause(None))

    assert str(error) == "write failed"
    assert error.cause is None


def test_new_applies_builtin_internal_default() -> None:
    """Without options the error should be INTERNAL with a matching code."""
    error = new("boom")

    assert error.status_class == StatusClass.INTERNAL
    assert error.code == "INTERNAL"
    assert error.message == ""
    assert error.http_status == 500


def test_code_defaults_to_status_class_text() -> None:
    """An unset code should take the final status class text."""
    error = new("missing", with_status(StatusClass.NOT_FOUND))

    assert error.code == "NOT_FOUND"
    assert error.http_status == 404
    assert error.grpc_status == "NOT_FOUND"


def test_instance_options_override_process_defaults() -> None:
    """Instance options should win over defaults for the same field."""
    set_default_options(
        with_status(StatusClass.UNAVAILABLE),
        with_code("DEFAULT_CODE"),
        with_message("default message"),
    )

    error = new(
        "lookup failed",
        with_message("user missing"),
        with_status(StatusClass.NOT_FOUND),
    )

    assert error.status_class == StatusClass.NOT_FOUND
    assert error.message == "user missing"
    assert error.code == "DEFAULT_CODE"


def test_later_instance_option_wins_for_same_field() -> None:
    """Instance options should be last-write-wins in call order."""
    error = new("x", with_code("FIRST"), with_code("SECOND"))

    assert error.code == "SECOND"


def test_process_defaults_apply_to_every_new_error() -> None:
    """Replaced defaults should be visible to subsequently built errors."""
    set_default_options(with_status(StatusClass.SOFT_ERROR))

    first = new("a")
    second = new("b")

    assert first.status_class == second.status_class == StatusClass.SOFT_ERROR
    assert first.http_status == 200


def test_with_args_formats_before_cause_is_appended() -> None:
    """Positional args should fill the template, then the cause is appended."""
    error = new(
        "user %s not found in %s",
        with_args("42", "accounts"),
        with_cause(KeyError("42")),
    )

    assert str(error) == "user 42 not found in accounts: '42'"


def test_with_args_arity_mismatch_raises_type_error() -> None:
    """Template misuse should surface as the ``%`` operator's TypeError."""
    with pytest.raises(TypeError):
        new("no placeholders", with_args("extra"))


def test_with_details_sets_structured_details() -> None:
    """Structured details should be kept as given."""
    error = new("invalid", with_details({"field": "email"}))

    assert error.details == {"field": "email"}


def test_unknown_status_text_is_kept_and_falls_back_in_mapping() -> None:
    """An unknown status class string should survive and map to 500."""
    error = new("odd", with_status("TEAPOT"))

    assert error.status_class == "TEAPOT"
    assert error.code == "TEAPOT"
    assert error.http_status == 500
    assert error.grpc_status == "UNKNOWN"


def test_status_given_as_text_is_normalized_to_enum() -> None:
    """Known status text should be stored as the enum member."""
    error = new("gone", with_status("NOT_FOUND"))

    assert error.status_class is StatusClass.NOT_FOUND


def test_factory_with_explicit_defaults_is_isolated_from_process_defaults() -> None:
    """An ErrorFactory should only use the defaults it was built with."""
    set_default_options(with_status(StatusClass.UNAVAILABLE))
    factory = ErrorFactory([with_status(StatusClass.PERMISSION_DENIED)])

    error = factory.new("nope")

    assert error.status_class == StatusClass.PERMISSION_DENIED


def test_factory_without_defaults_yields_unknown_mapping() -> None:
    """A factory with no defaults and no status should fall back to 500."""
    error = ErrorFactory().new("bare")

    assert error.status_class == ""
    assert error.code == ""
    assert error.http_status == 500


def test_classified_error_is_immutable() -> None:
    """Constructed errors should reject attribute assignment."""
    error = new("frozen")

    with pytest.raises(AttributeError):
        error.code = "CHANGED"  # type: ignore[misc]


def test_classified_error_can_be_raised_and_caught() -> None:
    """Classified errors should behave as ordinary exceptions."""
    with pytest.raises(ClassifiedError) as exc_info:
        raise new("raised", with_code("RAISED"))

    assert exc_info.value.code == "RAISED"
    assert exc_info.value.detail == "raised"
