"""Pass/fail decisions over already-resolved outcomes.

Both the blocking and the suspending assertions obtain an ``Outcome`` in
their own way and then hand it to one of these functions, so the judgment
rules exist exactly once. Comparing or rendering caller values may itself
raise; such errors become a ``THREW_ERROR`` failure like any other.
"""

from typing import Any

from gauntlet.formatting import describe_error, describe_value, type_name
from gauntlet.models.outcome import Failure, Outcome
from gauntlet.models.result import AssertionResult, Failed, FailureReason, Passed


def _threw(error: BaseException) -> Failed:
    return Failed(reason=FailureReason.THREW_ERROR, operands=(describe_error(error),))


def judge_equal(outcome: Outcome[tuple[Any, Any]]) -> AssertionResult[None]:
    """Pass when both operands were produced and compare equal."""
    if isinstance(outcome, Failure):
        return _threw(outcome.error)

    lhs, rhs = outcome.value
    try:
        if lhs == rhs:
            return Passed(value=None)
        return Failed(
            reason=FailureReason.NOT_EQUAL,
            operands=(describe_value(lhs), describe_value(rhs)),
        )
    except Exception as error:
        return _threw(error)


def judge_identical(outcome: Outcome[tuple[Any, Any]]) -> AssertionResult[None]:
    """Pass when both operands are the same instance."""
    if isinstance(outcome, Failure):
        return _threw(outcome.error)

    lhs, rhs = outcome.value
    if lhs is rhs:
        return Passed(value=None)
    return Failed(reason=FailureReason.NOT_IDENTICAL)


def judge_not_identical(outcome: Outcome[tuple[Any, Any]]) -> AssertionResult[None]:
    """Pass when the operands are distinct instances."""
    if isinstance(outcome, Failure):
        return _threw(outcome.error)

    lhs, rhs = outcome.value
    if lhs is rhs:
        return Failed(reason=FailureReason.IDENTICAL)
    return Passed(value=None)


def judge_zero(outcome: Outcome[Any]) -> AssertionResult[None]:
    """Pass when the produced number equals zero."""
    if isinstance(outcome, Failure):
        return _threw(outcome.error)

    try:
        if outcome.value == 0:
            return Passed(value=None)
        return Failed(
            reason=FailureReason.NOT_ZERO, operands=(describe_value(outcome.value),)
        )
    except Exception as error:
        return _threw(error)


def judge_throws_type[E: BaseException](
    outcome: Outcome[Any], expected_type: type[E]
) -> AssertionResult[E]:
    """Pass with the narrowed error when the expression raised ``expected_type``.

    Args:
        outcome: Outcome of the expression expected to raise
        expected_type: Class the raised error must be an instance of

    Returns:
        ``Passed`` carrying the narrowed error, or ``Failed`` when nothing was
        raised or the error has another type

    """
    if not isinstance(outcome, Failure):
        return Failed(reason=FailureReason.DID_NOT_THROW)

    error = outcome.error
    if isinstance(error, expected_type):
        return Passed(value=error)
    return Failed(
        reason=FailureReason.WRONG_TYPE,
        operands=(type_name(type(error)), type_name(expected_type)),
    )


def judge_throws_equal[E: BaseException](
    outcome: Outcome[Any], expected: E
) -> AssertionResult[E]:
    """Pass when the raised error has the expected type and compares equal."""
    result = judge_throws_type(outcome, type(expected))
    if isinstance(result, Failed):
        return result
    try:
        if result.value == expected:
            return result
        return Failed(
            reason=FailureReason.UNEQUAL_ERROR,
            operands=(describe_error(result.value), describe_error(expected)),
        )
    except Exception as error:
        return _threw(error)


def judge_no_throw[T](outcome: Outcome[T]) -> AssertionResult[T]:
    """Pass with the produced value when the expression did not raise."""
    if isinstance(outcome, Failure):
        return _threw(outcome.error)
    return Passed(value=outcome.value)


def judge_continuation(outcome: Outcome[Any]) -> AssertionResult[None]:
    """Fail with a distinct reason when a continuation raised."""
    if isinstance(outcome, Failure):
        return Failed(
            reason=FailureReason.CONTINUATION_THREW,
            operands=(describe_error(outcome.error),),
        )
    return Passed(value=None)
