"""Equality, identity and zero assertions.

Operands are passed as zero-argument callables so that an operand which
raises is reported instead of escaping the test, e.g.
``assert_equal(lambda: parse("1"), lambda: 1)``. The left operand is always
evaluated first, and the right one is skipped once the left one raised.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from gauntlet.engine import AssertionContext
from gauntlet.evaluator import (
    AsyncExpression,
    Expression,
    evaluate,
    evaluate_async,
    evaluate_each,
    evaluate_each_async,
)
from gauntlet.judgment import (
    judge_equal,
    judge_identical,
    judge_not_identical,
    judge_zero,
)
from gauntlet.location import call_site
from gauntlet.reporters.base import Reporter


def assert_equal(
    lhs: Expression[Any],
    rhs: Expression[Any],
    message: str = "",
    *,
    reporter: Reporter | None = None,
    file: str | None = None,
    line: int | None = None,
    then: Callable[[], Any] | None = None,
) -> None:
    """Assert that two expressions produce equal values.

    Args:
        lhs: Expression producing the first value
        rhs: Expression producing the second value
        message: Custom message appended to the diagnostic
        reporter: Where failures go; the configured default when omitted
        file: File to attribute failures to; the call site when omitted
        line: Line to attribute failures to; the call site when omitted
        then: Runs only when the assertion passes

    """
    context = AssertionContext.create(
        "assert_equal", message, reporter, call_site(file, line)
    )
    if context.conclude(judge_equal(evaluate_each(lhs, rhs))):
        context.dispatch(then)


async def await_assert_equal(
    lhs: AsyncExpression[Any],
    rhs: AsyncExpression[Any],
    message: str = "",
    *,
    reporter: Reporter | None = None,
    file: str | None = None,
    line: int | None = None,
    then: Callable[[], Awaitable[Any] | Any] | None = None,
) -> None:
    """Assert that two possibly-async expressions produce equal values."""
    context = AssertionContext.create(
        "await_assert_equal", message, reporter, call_site(file, line)
    )
    if context.conclude(judge_equal(await evaluate_each_async(lhs, rhs))):
        await context.dispatch_async(then)


def assert_identical(
    lhs: Expression[Any],
    rhs: Expression[Any],
    message: str = "",
    *,
    reporter: Reporter | None = None,
    file: str | None = None,
    line: int | None = None,
    then: Callable[[], Any] | None = None,
) -> None:
    """Assert that two expressions produce the same instance."""
    context = AssertionContext.create(
        "assert_identical", message, reporter, call_site(file, line)
    )
    if context.conclude(judge_identical(evaluate_each(lhs, rhs))):
        context.dispatch(then)


async def await_assert_identical(
    lhs: AsyncExpression[Any],
    rhs: AsyncExpression[Any],
    message: str = "",
    *,
    reporter: Reporter | None = None,
    file: str | None = None,
    line: int | None = None,
    then: Callable[[], Awaitable[Any] | Any] | None = None,
) -> None:
    """Assert that two possibly-async expressions produce the same instance."""
    context = AssertionContext.create(
        "await_assert_identical", message, reporter, call_site(file, line)
    )
    if context.conclude(judge_identical(await evaluate_each_async(lhs, rhs))):
        await context.dispatch_async(then)


def assert_not_identical(
    lhs: Expression[Any],
    rhs: Expression[Any],
    message: str = "",
    *,
    reporter: Reporter | None = None,
    file: str | None = None,
    line: int | None = None,
    then: Callable[[], Any] | None = None,
) -> None:
    """Assert that two expressions produce distinct instances."""
    context = AssertionContext.create(
        "assert_not_identical", message, reporter, call_site(file, line)
    )
    if context.conclude(judge_not_identical(evaluate_each(lhs, rhs))):
        context.dispatch(then)


async def await_assert_not_identical(
    lhs: AsyncExpression[Any],
    rhs: AsyncExpression[Any],
    message: str = "",
    *,
    reporter: Reporter | None = None,
    file: str | None = None,
    line: int | None = None,
    then: Callable[[], Awaitable[Any] | Any] | None = None,
) -> None:
    """Assert that two possibly-async expressions produce distinct instances."""
    context = AssertionContext.create(
        "await_assert_not_identical", message, reporter, call_site(file, line)
    )
    if context.conclude(judge_not_identical(await evaluate_each_async(lhs, rhs))):
        await context.dispatch_async(then)


def assert_zero(
    value: Expression[Any],
    message: str = "",
    *,
    reporter: Reporter | None = None,
    file: str | None = None,
    line: int | None = None,
    then: Callable[[], Any] | None = None,
) -> None:
    """Assert that an expression produces a number equal to zero."""
    context = AssertionContext.create(
        "assert_zero", message, reporter, call_site(file, line)
    )
    if context.conclude(judge_zero(evaluate(value))):
        context.dispatch(then)


async def await_assert_zero(
    value: AsyncExpression[Any],
    message: str = "",
    *,
    reporter: Reporter | None = None,
    file: str | None = None,
    line: int | None = None,
    then: Callable[[], Awaitable[Any] | Any] | None = None,
) -> None:
    """Assert that a possibly-async expression produces zero."""
    context = AssertionContext.create(
        "await_assert_zero", message, reporter, call_site(file, line)
    )
    if context.conclude(judge_zero(await evaluate_async(value))):
        await context.dispatch_async(then)
