"""Assertions about whether an expression raises."""

import warnings
from collections.abc import Awaitable, Callable
from typing import Any

from gauntlet.engine import AssertionContext
from gauntlet.evaluator import AsyncExpression, Expression, evaluate, evaluate_async
from gauntlet.judgment import judge_no_throw, judge_throws_equal, judge_throws_type
from gauntlet.location import call_site
from gauntlet.models.outcome import Outcome
from gauntlet.models.result import AssertionResult
from gauntlet.reporters.base import Reporter


def _throws_judge[E: BaseException](
    of_type: type[E] | None, equal_to: E | None
) -> Callable[[Outcome[Any]], AssertionResult[E]]:
    """Pick the judgment for the expected error, by type or by value."""
    if (of_type is None) == (equal_to is None):
        raise TypeError("Pass exactly one of 'of_type' or 'equal_to'")
    if of_type is not None:
        return lambda outcome: judge_throws_type(outcome, of_type)
    return lambda outcome: judge_throws_equal(outcome, equal_to)


def assert_throws_error[E: BaseException](
    expression: Expression[Any],
    message: str = "",
    *,
    of_type: type[E] | None = None,
    equal_to: E | None = None,
    reporter: Reporter | None = None,
    file: str | None = None,
    line: int | None = None,
    then: Callable[[E], Any] | None = None,
) -> None:
    """Assert that an expression raises the expected error.

    With ``of_type`` the raised error must be an instance of that class. With
    ``equal_to`` it must have the same type and compare equal to the given
    error. Exceptions compare by identity unless their class defines
    ``__eq__``, so ``equal_to`` needs such a class, e.g.
    ``gauntlet.testing.EquatableError``.

    The continuation receives the raised error in both forms, so it takes
    one argument even with ``equal_to``.

    Args:
        expression: Expression expected to raise
        message: Custom message appended to the diagnostic
        of_type: Class the raised error must be an instance of
        equal_to: Error the raised error must equal
        reporter: Where failures go; the configured default when omitted
        file: File to attribute failures to; the call site when omitted
        line: Line to attribute failures to; the call site when omitted
        then: Receives the raised error when the assertion passes

    Raises:
        TypeError: If not exactly one of ``of_type`` and ``equal_to`` is given,
            or if the expression returned an awaitable

    """
    judge = _throws_judge(of_type, equal_to)
    context = AssertionContext.create(
        "assert_throws_error", message, reporter, call_site(file, line)
    )
    if (passed := context.conclude(judge(evaluate(expression)))) is not None:
        context.dispatch(then, passed.value)


async def await_assert_throws_error[E: BaseException](
    expression: AsyncExpression[Any],
    message: str = "",
    *,
    of_type: type[E] | None = None,
    equal_to: E | None = None,
    reporter: Reporter | None = None,
    file: str | None = None,
    line: int | None = None,
    then: Callable[[E], Awaitable[Any] | Any] | None = None,
) -> None:
    """Assert that a possibly-async expression raises the expected error.

    Takes the same arguments as ``assert_throws_error``; the expression and
    the continuation may both be coroutine functions.
    """
    judge = _throws_judge(of_type, equal_to)
    context = AssertionContext.create(
        "await_assert_throws_error", message, reporter, call_site(file, line)
    )
    outcome = await evaluate_async(expression)
    if (passed := context.conclude(judge(outcome))) is not None:
        await context.dispatch_async(then, passed.value)


async def async_assert_throws_error[E: BaseException](
    expression: AsyncExpression[Any],
    message: str = "",
    *,
    of_type: type[E] | None = None,
    equal_to: E | None = None,
    reporter: Reporter | None = None,
    file: str | None = None,
    line: int | None = None,
    then: Callable[[E], Awaitable[Any] | Any] | None = None,
) -> None:
    """Deprecated alias of ``await_assert_throws_error``.

    Failures are reported under ``await_assert_throws_error``, the assertion
    that actually runs, at this call's location.
    """
    warnings.warn(
        "async_assert_throws_error is deprecated, use await_assert_throws_error",
        DeprecationWarning,
        stacklevel=2,
    )
    location = call_site(file, line)
    await await_assert_throws_error(
        expression,
        message,
        of_type=of_type,
        equal_to=equal_to,
        reporter=reporter,
        file=location.file,
        line=location.line,
        then=then,
    )


def assert_no_throw[T](
    expression: Expression[T],
    message: str = "",
    *,
    reporter: Reporter | None = None,
    file: str | None = None,
    line: int | None = None,
    then: Callable[[T], Any] | None = None,
) -> None:
    """Assert that an expression does not raise.

    Args:
        expression: Expression expected to produce a value
        message: Custom message appended to the diagnostic
        reporter: Where failures go; the configured default when omitted
        file: File to attribute failures to; the call site when omitted
        line: Line to attribute failures to; the call site when omitted
        then: Receives the produced value when the assertion passes

    """
    context = AssertionContext.create(
        "assert_no_throw", message, reporter, call_site(file, line)
    )
    if (passed := context.conclude(judge_no_throw(evaluate(expression)))) is not None:
        context.dispatch(then, passed.value)


async def await_assert_no_throw[T](
    expression: AsyncExpression[T],
    message: str = "",
    *,
    reporter: Reporter | None = None,
    file: str | None = None,
    line: int | None = None,
    then: Callable[[T], Awaitable[Any] | Any] | None = None,
) -> None:
    """Assert that a possibly-async expression does not raise."""
    context = AssertionContext.create(
        "await_assert_no_throw", message, reporter, call_site(file, line)
    )
    outcome = await evaluate_async(expression)
    if (passed := context.conclude(judge_no_throw(outcome))) is not None:
        await context.dispatch_async(then, passed.value)
