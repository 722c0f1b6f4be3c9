"""Small functional helpers used by the generators and the property catalogue."""

from collections.abc import Callable
from typing import TypeVar

A = TypeVar("A")
T = TypeVar("T")


def tabulate(times: int, transform: Callable[[int], A]) -> list[A]:
    """Build a list by applying ``transform`` to ``0 .. times - 1``."""
    return [transform(index) for index in range(times)]


def with_default(value: T | None, default: Callable[[], T]) -> T:
    """
    Return ``value`` unless it is ``None``, otherwise ``default()``.

    ``default`` is a zero-argument function and is only called when the
    value is absent, so an expensive fallback is never computed needlessly.

    Example:
        >>> with_default(None, lambda: 3)
        3
        >>> with_default(0, lambda: 1 / 0)
        0
    """
    if value is not None:
        return value
    return default()
