"""Run deferred expressions exactly once and capture what they produce."""

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from gauntlet.models.outcome import Failure, Outcome, Value

log = logging.getLogger(__name__)

type Expression[T] = Callable[[], T]
type AsyncExpression[T] = Callable[[], Awaitable[T] | T]


def evaluate[T](expression: Expression[T]) -> Outcome[T]:
    """Invoke ``expression`` once and capture its value or error.

    An expression that hands back an awaitable cannot be resolved without
    suspending. That is a misuse of the blocking variants, so the awaitable
    is closed and a ``TypeError`` pointing at the ``await_`` variants is
    raised to the caller instead of being captured.

    Args:
        expression: Zero-argument callable to evaluate

    Returns:
        ``Value`` with the produced value, or ``Failure`` with the error

    Raises:
        TypeError: If the expression returned an awaitable

    """
    try:
        value = expression()
    except Exception as error:
        log.debug("Expression raised %s", type(error).__name__)
        return Failure(error=error)
    if inspect.isawaitable(value):
        if inspect.iscoroutine(value):
            value.close()
        raise TypeError(
            f"Expression {expression!r} returned an awaitable; "
            "use the await_ assertion variants for async expressions"
        )
    return Value(value=value)


async def evaluate_async[T](expression: AsyncExpression[T]) -> Outcome[T]:
    """Invoke ``expression`` once, awaiting its result when it is awaitable.

    Cancellation of an awaited operation is captured like any other error.

    Args:
        expression: Zero-argument callable, sync or async

    Returns:
        ``Value`` with the produced value, or ``Failure`` with the error

    """
    try:
        value = expression()
        if inspect.isawaitable(value):
            value = await value
    except (Exception, asyncio.CancelledError) as error:
        log.debug("Expression raised %s", type(error).__name__)
        return Failure(error=error)
    return Value(value=value)


def evaluate_each(*expressions: Expression[Any]) -> Outcome[tuple[Any, ...]]:
    """Evaluate expressions left to right, stopping at the first failure."""
    values: list[Any] = []
    for expression in expressions:
        outcome = evaluate(expression)
        if isinstance(outcome, Failure):
            return outcome
        values.append(outcome.value)
    return Value(value=tuple(values))


async def evaluate_each_async(
    *expressions: AsyncExpression[Any],
) -> Outcome[tuple[Any, ...]]:
    """Await expressions left to right, stopping at the first failure."""
    values: list[Any] = []
    for expression in expressions:
        outcome = await evaluate_async(expression)
        if isinstance(outcome, Failure):
            return outcome
        values.append(outcome.value)
    return Value(value=tuple(values))
