"""Core property-based testing engine."""

from quickprop.core.arbitrary import (
    BOOL,
    CHAR,
    FLOAT,
    INT,
    SIZE,
    STRING,
    ArbitraryInstance,
    float_instance,
    list_of,
    string_instance,
    tuple_of,
)
from quickprop.core.outcome import CheckOutcome, OutcomeStatus, format_value
from quickprop.core.random_source import RandomSource
from quickprop.core.registry import ArbitraryRegistry, default_registry
from quickprop.core.runner import (
    PropertyRunner,
    check,
    check_list,
    check_unshrunk,
    print_reporter,
)
from quickprop.core.shrink import (
    ShrinkResult,
    iterate_while,
    no_shrink,
    shrink_bool,
    shrink_chain,
    shrink_counterexample,
    shrink_int,
    shrink_sequence,
    shrink_size,
)
from quickprop.core.types import Char, Size

__all__ = [
    "ArbitraryInstance",
    "ArbitraryRegistry",
    "default_registry",
    "RandomSource",
    "PropertyRunner",
    "CheckOutcome",
    "OutcomeStatus",
    "ShrinkResult",
    "Char",
    "Size",
    "INT",
    "FLOAT",
    "CHAR",
    "STRING",
    "BOOL",
    "SIZE",
    "float_instance",
    "string_instance",
    "list_of",
    "tuple_of",
    "check",
    "check_list",
    "check_unshrunk",
    "print_reporter",
    "format_value",
    "iterate_while",
    "shrink_counterexample",
    "shrink_chain",
    "shrink_int",
    "shrink_sequence",
    "shrink_bool",
    "shrink_size",
    "no_shrink",
]
