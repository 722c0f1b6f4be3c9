"""Common utilities shared across QuickProp modules."""

from quickprop.common.exceptions import (
    ConfigurationError,
    ConfigValidationError,
    InvalidRangeError,
    PropertySignatureError,
    QuickPropError,
    RegistryError,
    UnknownPropertyError,
)

__all__ = [
    "QuickPropError",
    "ConfigurationError",
    "RegistryError",
    "InvalidRangeError",
    "PropertySignatureError",
    "ConfigValidationError",
    "UnknownPropertyError",
]
