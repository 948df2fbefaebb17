"""Models for assertion judgments."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum


class FailureReason(StrEnum):
    """Why an assertion, or the continuation that followed it, failed."""

    THREW_ERROR = "threw_error"
    NOT_EQUAL = "not_equal"
    NOT_IDENTICAL = "not_identical"
    IDENTICAL = "identical"
    NOT_ZERO = "not_zero"
    DID_NOT_THROW = "did_not_throw"
    WRONG_TYPE = "wrong_type"
    UNEQUAL_ERROR = "unequal_error"
    CONTINUATION_THREW = "continuation_threw"


@dataclass(frozen=True, kw_only=True)
class Passed[T]:
    """The assertion holds.

    ``value`` is what the continuation receives: the produced value, the
    narrowed error, or ``None`` for assertions whose continuation takes no
    argument.
    """

    value: T


@dataclass(frozen=True, kw_only=True)
class Failed:
    """The assertion does not hold.

    Operands are already rendered as strings, in the order the message
    template consumes them.
    """

    reason: FailureReason
    operands: Sequence[str] = ()


type AssertionResult[T] = Passed[T] | Failed
