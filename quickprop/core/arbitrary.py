"""Arbitrary instances: a generator and a shrinker bound together.

Built-in instances are module constants. Container instances are composed
from their element instances by ``list_of`` and ``tuple_of``.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from quickprop.constants import (
    CHAR_HIGH,
    CHAR_LOW,
    FLOAT_HIGH,
    FLOAT_LOW,
    LIST_MAX_LENGTH,
    STRING_MAX_LENGTH,
)
from quickprop.core.random_source import RandomSource
from quickprop.core.shrink import (
    no_shrink,
    shrink_bool,
    shrink_int,
    shrink_sequence,
    shrink_size,
)
from quickprop.core.types import Char, Size
from quickprop.functional import tabulate

T = TypeVar("T")


@dataclass(frozen=True)
class ArbitraryInstance(Generic[T]):
    """
    Generator and shrinker for one type.

    Instances are stateless: all randomness comes from the ``RandomSource``
    handed to ``generate``, so a single instance may be shared freely.

    Attributes:
        name: Display name of the type, e.g. ``"list[int]"``
        generate: Produces one random value from a random source
        shrink: Offers a strictly smaller value, or ``None`` when minimal
    """

    name: str
    generate: Callable[[RandomSource], T]
    shrink: Callable[[T], T | None] = no_shrink

    def sample(self, source: RandomSource, count: int) -> list[T]:
        """Generate ``count`` independent values."""
        return tabulate(count, lambda _: self.generate(source))


def _generate_int(source: RandomSource) -> int:
    return source.integer()


def _generate_bool(source: RandomSource) -> bool:
    return source.random_range(0, 2) == 1


def _generate_char(source: RandomSource) -> Char:
    return Char(chr(source.random_range(CHAR_LOW, CHAR_HIGH)))


def float_instance(low: int = FLOAT_LOW, high: int = FLOAT_HIGH) -> ArbitraryInstance[float]:
    """Floats drawn from the bounded integer generator over ``[low, high)``."""

    def generate(source: RandomSource) -> float:
        return float(source.random_range(low, high))

    return ArbitraryInstance("float", generate, no_shrink)


def string_instance(max_length: int = STRING_MAX_LENGTH) -> ArbitraryInstance[str]:
    """Strings of ``CHAR`` characters with length in ``[0, max_length)``."""

    def generate(source: RandomSource) -> str:
        length = source.random_range(0, max_length)
        return "".join(tabulate(length, lambda _: _generate_char(source)))

    return ArbitraryInstance("str", generate, shrink_sequence)


def list_of(
    element: ArbitraryInstance[T], max_length: int = LIST_MAX_LENGTH
) -> ArbitraryInstance[list[T]]:
    """Lists of ``element`` values with length in ``[0, max_length)``."""

    def generate(source: RandomSource) -> list[T]:
        length = source.random_range(0, max_length)
        return tabulate(length, lambda _: element.generate(source))

    return ArbitraryInstance(f"list[{element.name}]", generate, shrink_sequence)


def tuple_of(*elements: ArbitraryInstance[Any]) -> ArbitraryInstance[tuple[Any, ...]]:
    """
    Tuples with one independently generated value per component.

    Shrinking offers every component that can still shrink at once; the tuple
    is terminal only when no component can. Each accepted step decreases the
    sum of the component measures, so the chain is finite.
    """
    if not elements:
        raise ValueError("tuple_of requires at least one component instance")

    def generate(source: RandomSource) -> tuple[Any, ...]:
        return tuple(element.generate(source) for element in elements)

    def shrink(value: tuple[Any, ...]) -> tuple[Any, ...] | None:
        changed = False
        candidate = []
        for element, component in zip(elements, value):
            smaller = element.shrink(component)
            if smaller is None:
                candidate.append(component)
            else:
                candidate.append(smaller)
                changed = True
        return tuple(candidate) if changed else None

    name = ", ".join(element.name for element in elements)
    return ArbitraryInstance(f"tuple[{name}]", generate, shrink)


INT: ArbitraryInstance[int] = ArbitraryInstance("int", _generate_int, shrink_int)
BOOL: ArbitraryInstance[bool] = ArbitraryInstance("bool", _generate_bool, shrink_bool)
CHAR: ArbitraryInstance[Char] = ArbitraryInstance("char", _generate_char, no_shrink)
FLOAT: ArbitraryInstance[float] = float_instance()
STRING: ArbitraryInstance[str] = string_instance()


def _generate_size(source: RandomSource) -> Size:
    return Size(FLOAT.generate(source), FLOAT.generate(source))


SIZE: ArbitraryInstance[Size] = ArbitraryInstance("size", _generate_size, shrink_size)
