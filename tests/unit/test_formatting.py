"""Tests for diagnostic message formatting."""

import pytest

from gauntlet.formatting import (
    describe_error,
    describe_value,
    format_failure,
    format_message,
    type_name,
)
from gauntlet.models.result import Failed, FailureReason
from gauntlet.testing import MockError, WrongError


@pytest.mark.parametrize(
    ("failed", "expected"),
    [
        (
            Failed(reason=FailureReason.THREW_ERROR, operands=("E",)),
            'Check - threw error "E" - custom',
        ),
        (
            Failed(reason=FailureReason.NOT_EQUAL, operands=("1", "2")),
            'Check - ("1") is not equal to ("2") - custom',
        ),
        (Failed(reason=FailureReason.NOT_IDENTICAL), "Check - custom"),
        (Failed(reason=FailureReason.IDENTICAL), "Check - custom"),
        (
            Failed(reason=FailureReason.NOT_ZERO, operands=("3",)),
            'Check - ("3") is not 0 - custom',
        ),
        (
            Failed(reason=FailureReason.DID_NOT_THROW),
            "Check - expression did not throw an error - custom",
        ),
        (
            Failed(reason=FailureReason.WRONG_TYPE, operands=("A", "B")),
            "Check - error of type A is not expected type B - custom",
        ),
        (
            Failed(reason=FailureReason.UNEQUAL_ERROR, operands=("x", "y")),
            'Check - ("x") is not equal to ("y") - custom',
        ),
        (
            Failed(reason=FailureReason.CONTINUATION_THREW, operands=("E",)),
            'Check - then closure threw error "E" - custom',
        ),
    ],
)
def test_format_failure_templates(failed: Failed, expected: str) -> None:
    """Renders each failure reason with its template."""
    assert format_failure("Check", failed, "custom") == expected


def test_format_failure_without_custom_message() -> None:
    """Omits the trailing separator when the custom message is empty."""
    failed = Failed(reason=FailureReason.NOT_ZERO, operands=("3",))

    assert format_failure("Check", failed) == 'Check - ("3") is not 0'


def test_format_failure_keeps_braces_in_operands() -> None:
    """Does not interpret operand text as a template."""
    failed = Failed(reason=FailureReason.NOT_EQUAL, operands=("{0}", "{'a': 1}"))

    assert format_failure("Check", failed) == (
        "Check - (\"{0}\") is not equal to (\"{'a': 1}\")"
    )


@pytest.mark.parametrize(
    ("parts", "expected"),
    [
        (("Check", "", ""), "Check"),
        (("Check", "detail", ""), "Check - detail"),
        (("Check", "", "custom"), "Check - custom"),
        (("Check", "detail", "custom"), "Check - detail - custom"),
    ],
)
def test_format_message_skips_empty_parts(
    parts: tuple[str, str, str], expected: str
) -> None:
    """Joins only the non-empty parts."""
    assert format_message(*parts) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, "nil"), (0, "0"), ("text", "text"), ([1, None], "[1, None]")],
)
def test_describe_value(value: object, expected: str) -> None:
    """Renders None as nil and everything else with str."""
    assert describe_value(value) == expected


def test_describe_error_uses_message() -> None:
    """Uses the error's text."""
    assert describe_error(MockError()) == "Mock Error"


def test_describe_error_falls_back_to_repr() -> None:
    """Uses the repr for errors without text."""
    assert describe_error(WrongError()) == "WrongError()"


def test_type_name() -> None:
    """Uses the bare class name."""
    assert type_name(WrongError) == "WrongError"
