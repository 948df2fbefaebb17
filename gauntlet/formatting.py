"""Diagnostic messages for failed assertions."""

from collections.abc import Mapping
from typing import Any

from gauntlet.models.result import Failed, FailureReason

SEPARATOR = " - "

NIL = "nil"

DETAIL_TEMPLATES: Mapping[FailureReason, str] = {
    FailureReason.THREW_ERROR: 'threw error "{0}"',
    FailureReason.NOT_EQUAL: '("{0}") is not equal to ("{1}")',
    FailureReason.NOT_IDENTICAL: "",
    FailureReason.IDENTICAL: "",
    FailureReason.NOT_ZERO: '("{0}") is not 0',
    FailureReason.DID_NOT_THROW: "expression did not throw an error",
    FailureReason.WRONG_TYPE: "error of type {0} is not expected type {1}",
    FailureReason.UNEQUAL_ERROR: '("{0}") is not equal to ("{1}")',
    FailureReason.CONTINUATION_THREW: 'then closure threw error "{0}"',
}


def describe_value(value: Any) -> str:
    """Render an operand, with ``None`` shown as ``nil``."""
    if value is None:
        return NIL
    return str(value)


def describe_error(error: BaseException) -> str:
    """Render a raised error, falling back to its repr when it has no text."""
    return str(error) or repr(error)


def type_name(cls: type) -> str:
    """Render a class the way wrong-type messages name it."""
    return cls.__name__


def format_message(name: str, detail: str = "", custom: str = "") -> str:
    """Join the non-empty message parts with the separator."""
    return SEPARATOR.join(part for part in (name, detail, custom) if part)


def format_failure(name: str, failed: Failed, custom: str = "") -> str:
    """Render the diagnostic for a failed assertion.

    Args:
        name: Name of the assertion function that was called
        failed: Judgment carrying the reason and rendered operands
        custom: Caller-supplied message, omitted when empty

    Returns:
        Single-line diagnostic message

    """
    detail = DETAIL_TEMPLATES[failed.reason].format(*failed.operands)
    return format_message(name, detail, custom)
