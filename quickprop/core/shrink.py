"""Shrinkers and the iterative shrink loop.

A shrinker takes a value and returns one strictly smaller candidate, or
``None`` when the value is already minimal. ``iterate_while`` walks that chain
for as long as a condition keeps holding, with a hard step budget so that an
ill-behaved shrinker cannot run forever.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from quickprop.core.types import Size

logger = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S", bound=Sequence)

Shrinker = Callable[[T], T | None]


def shrink_int(value: int) -> int | None:
    """Halve toward zero; zero is terminal.

    Python's floor division rounds negative numbers away from zero, so the
    magnitude is halved instead (``-7 -> -3``, not ``-4``).
    """
    if value == 0:
        return None
    half = abs(value) // 2
    return half if value > 0 else -half


def shrink_sequence(value: S) -> S | None:
    """Drop the first element; the empty sequence is terminal."""
    if len(value) == 0:
        return None
    return value[1:]


def shrink_bool(value: bool) -> bool | None:
    """``True`` shrinks to ``False``; ``False`` is terminal."""
    return False if value else None


def shrink_size(value: Size) -> Size | None:
    """Jump straight to the zero size; the zero size itself is terminal."""
    zero = Size.zero()
    if value == zero:
        return None
    return zero


def no_shrink(value: Any) -> None:
    """Shrinker for types with no meaningful smaller form."""
    return None


@dataclass(frozen=True)
class ShrinkResult(Generic[T]):
    """
    Final value of a shrink loop.

    Attributes:
        value: Last candidate for which the condition still held
        steps: Number of candidates accepted
        exhausted: True if the loop stopped because of its step budget
        trace: Accepted candidates in order, only when requested
    """

    value: T
    steps: int = 0
    exhausted: bool = False
    trace: tuple[Any, ...] = field(default_factory=tuple)


def iterate_while(
    condition: Callable[[T], bool],
    initial: T,
    next_: Callable[[T], T | None],
    max_steps: int | None = None,
    keep_trace: bool = False,
) -> ShrinkResult[T]:
    """
    Follow ``next_`` from ``initial`` for as long as ``condition`` holds.

    Stops when ``next_`` offers no candidate, when a candidate no longer
    satisfies ``condition`` (the previous value is kept), or when ``max_steps``
    candidates have been accepted and ``next_`` still offers an acceptable one.
    A chain that ends on exactly the last allowed step is not exhausted.

    Args:
        condition: Predicate every accepted candidate must satisfy
        initial: Starting value; assumed to satisfy ``condition``
        next_: Function offering the next candidate or ``None``
        max_steps: Maximum number of accepted candidates, ``None`` for no cap
        keep_trace: Record the accepted candidates on the result

    Returns:
        ShrinkResult with the final value and step count
    """
    current = initial
    steps = 0
    trace: list[T] = []

    while True:
        candidate = next_(current)
        if candidate is None or not condition(candidate):
            return ShrinkResult(current, steps, False, tuple(trace))

        if max_steps is not None and steps >= max_steps:
            logger.warning(
                "Shrink budget of %d steps exhausted, stopping at %r", max_steps, current
            )
            return ShrinkResult(current, steps, True, tuple(trace))

        current = candidate
        steps += 1
        if keep_trace:
            trace.append(candidate)


def shrink_counterexample(
    prop: Callable[[T], bool],
    value: T,
    shrinker: Shrinker,
    max_steps: int | None = None,
) -> ShrinkResult[T]:
    """Shrink a failing ``value`` while ``prop`` keeps failing."""
    return iterate_while(lambda candidate: not prop(candidate), value, shrinker, max_steps)


def shrink_chain(value: T, shrinker: Shrinker, max_steps: int | None = None) -> list[T]:
    """Return ``value`` followed by every candidate the shrinker offers."""
    result = iterate_while(lambda _: True, value, shrinker, max_steps, keep_trace=True)
    return [value, *result.trace]
