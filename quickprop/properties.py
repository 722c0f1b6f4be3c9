"""Catalogue of demonstration properties.

Each entry pairs a message with a property function. The command line runs
them by name, and they double as worked examples of the library API.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from quickprop.common.exceptions import UnknownPropertyError
from quickprop.core.outcome import CheckOutcome
from quickprop.core.runner import PropertyRunner
from quickprop.core.types import Size


def plus_is_commutative(x: int, y: int) -> bool:
    return x + y == y + x


def minus_is_commutative(x: int, y: int) -> bool:
    return x - y == y - x


def additive_identity(x: int) -> bool:
    return x + 0 == x


def area_is_non_negative(size: Size) -> bool:
    return size.area >= 0


def starts_with_hello(s: str) -> bool:
    return s.startswith("Hello")


def qsort(values: list[int]) -> list[int]:
    """Functional quicksort: first element as pivot, recurse on both sides."""
    if not values:
        return []
    pivot, rest = values[0], values[1:]
    lesser = [x for x in rest if x < pivot]
    greater = [x for x in rest if x >= pivot]
    return qsort(lesser) + [pivot] + qsort(greater)


def qsort_behaves_like_sort(values: list[int]) -> bool:
    return qsort(values) == sorted(values)


@dataclass(frozen=True)
class CatalogEntry:
    """A named property with its report message."""

    name: str
    message: str
    prop: Callable[..., bool]
    description: str = ""
    expect_pass: bool = True

    def run(self, runner: PropertyRunner, trials: int | None = None, shrink: bool = True) -> CheckOutcome:
        """Run the property with the given runner, never raising configuration errors."""
        return runner.run_safely(self.message, self.prop, trials, shrink=shrink)


CATALOG: dict[str, CatalogEntry] = {
    entry.name: entry
    for entry in (
        CatalogEntry(
            "plus-commutative",
            "Plus should be commutative",
            plus_is_commutative,
            "x + y == y + x for all integers",
        ),
        CatalogEntry(
            "minus-commutative",
            "Minus should be commutative",
            minus_is_commutative,
            "x - y == y - x, false whenever x != y",
            expect_pass=False,
        ),
        CatalogEntry(
            "additive-identity",
            "Additive identity",
            additive_identity,
            "x + 0 == x for all integers",
        ),
        CatalogEntry(
            "area-non-negative",
            "Area should be at least 0",
            area_is_non_negative,
            "width * height >= 0, false when exactly one side is negative",
            expect_pass=False,
        ),
        CatalogEntry(
            "starts-with-hello",
            "Every string starts with Hello",
            starts_with_hello,
            "random uppercase strings never start with 'Hello'",
            expect_pass=False,
        ),
        CatalogEntry(
            "qsort-like-sort",
            "qsort should behave like sort",
            qsort_behaves_like_sort,
            "functional quicksort agrees with sorted()",
        ),
    )
}


def get_entry(name: str) -> CatalogEntry:
    """
    Look up a catalogued property by name.

    Raises:
        UnknownPropertyError: If no property has that name
    """
    if name not in CATALOG:
        available = sorted(CATALOG)
        raise UnknownPropertyError(
            f"Unknown property '{name}'. Available: {', '.join(available)}",
            property_name=name,
            available=available,
        )
    return CATALOG[name]


def describe_catalog() -> list[dict[str, Any]]:
    """Summaries of all catalogued properties."""
    return [
        {
            "name": entry.name,
            "message": entry.message,
            "description": entry.description,
            "expect_pass": entry.expect_pass,
        }
        for entry in CATALOG.values()
    ]
