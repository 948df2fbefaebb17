"""Assertion operations exposed to test authors."""

from gauntlet.asserts.equality import (
    assert_equal,
    assert_identical,
    assert_not_identical,
    assert_zero,
    await_assert_equal,
    await_assert_identical,
    await_assert_not_identical,
    await_assert_zero,
)
from gauntlet.asserts.throws import (
    assert_no_throw,
    assert_throws_error,
    async_assert_throws_error,
    await_assert_no_throw,
    await_assert_throws_error,
)

__all__ = [
    "assert_equal",
    "assert_identical",
    "assert_no_throw",
    "assert_not_identical",
    "assert_throws_error",
    "assert_zero",
    "async_assert_throws_error",
    "await_assert_equal",
    "await_assert_identical",
    "await_assert_no_throw",
    "await_assert_not_identical",
    "await_assert_throws_error",
    "await_assert_zero",
]
