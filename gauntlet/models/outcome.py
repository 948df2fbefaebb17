"""Captured outcome of evaluating a deferred expression."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class Value[T]:
    """The expression produced a value."""

    value: T


@dataclass(frozen=True, kw_only=True)
class Failure:
    """The expression raised instead of producing a value."""

    error: BaseException


type Outcome[T] = Value[T] | Failure
