"""
QuickProp: property-based testing in the QuickCheck style.

QuickProp checks a property, a function returning a boolean, against many
randomly generated inputs instead of a few hand-picked examples. When an input
falsifies the property it is shrunk toward a minimal counterexample before it
is reported.

Core Components:
    - RandomSource: Seedable random source injected into generators
    - ArbitraryInstance: Generator and shrinker for one type
    - ArbitraryRegistry: Maps types to instances, composes list/tuple instances
    - PropertyRunner: Runs trials, shrinks failures, reports outcomes
    - CheckOutcome: Passed, failed or configuration-error result

Example Usage:
    ```python
    from quickprop import check

    def plus_is_commutative(x: int, y: int) -> bool:
        return x + y == y + x

    check("Plus should be commutative", plus_is_commutative)
    # "Plus should be commutative" passed 10 tests.
    ```
"""

__version__ = "0.1.0"

from .common.exceptions import (
    ConfigurationError,
    ConfigValidationError,
    InvalidRangeError,
    PropertySignatureError,
    QuickPropError,
    RegistryError,
    UnknownPropertyError,
)
from .config import CheckConfig
from .core import (
    BOOL,
    CHAR,
    FLOAT,
    INT,
    SIZE,
    STRING,
    ArbitraryInstance,
    ArbitraryRegistry,
    Char,
    CheckOutcome,
    OutcomeStatus,
    PropertyRunner,
    RandomSource,
    ShrinkResult,
    Size,
    check,
    check_list,
    check_unshrunk,
    default_registry,
    float_instance,
    iterate_while,
    list_of,
    string_instance,
    tuple_of,
)
from .functional import tabulate, with_default

__all__ = [
    # Checking
    "check",
    "check_list",
    "check_unshrunk",
    "PropertyRunner",
    "CheckOutcome",
    "OutcomeStatus",
    "CheckConfig",
    "__version__",
    # Generation and shrinking
    "ArbitraryInstance",
    "ArbitraryRegistry",
    "default_registry",
    "RandomSource",
    "ShrinkResult",
    "iterate_while",
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
    # Value types
    "Char",
    "Size",
    # Utilities
    "tabulate",
    "with_default",
    # Errors
    "QuickPropError",
    "ConfigurationError",
    "RegistryError",
    "InvalidRangeError",
    "PropertySignatureError",
    "ConfigValidationError",
    "UnknownPropertyError",
]
