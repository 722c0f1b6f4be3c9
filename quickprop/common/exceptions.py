"""Common exceptions for QuickProp.

This module defines all exception types used throughout QuickProp. A property
that returns False is never an exception: it is a normal, reportable outcome.
Everything here describes a run that could not be set up correctly.
"""

from typing import Any


class QuickPropError(Exception):
    """Base exception for all QuickProp-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        """Initialize exception with message and optional context."""
        super().__init__(message)
        self.context = context or {}


class ConfigurationError(QuickPropError):
    """Raised when a check cannot be configured before any trial runs."""


class RegistryError(ConfigurationError):
    """Raised when a type has no resolvable arbitrary instance."""

    def __init__(
        self,
        message: str,
        type_name: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize registry error with the offending type name."""
        super().__init__(message, context)
        self.type_name = type_name


class InvalidRangeError(ConfigurationError):
    """Raised when a bounded generator receives an empty range."""

    def __init__(
        self,
        message: str,
        low: int | None = None,
        high: int | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize range error with the bounds that were requested."""
        super().__init__(message, context)
        self.low = low
        self.high = high


class PropertySignatureError(ConfigurationError):
    """Raised when the input type of a property cannot be inferred."""

    def __init__(
        self,
        message: str,
        property_name: str | None = None,
        parameter_name: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize signature error with property details."""
        super().__init__(message, context)
        self.property_name = property_name
        self.parameter_name = parameter_name


class ConfigValidationError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        source: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize configuration error with details."""
        super().__init__(message, context)
        self.config_key = config_key
        self.source = source


class UnknownPropertyError(QuickPropError):
    """Raised when a catalogued property name does not exist."""

    def __init__(
        self,
        message: str,
        property_name: str | None = None,
        available: list[str] | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize lookup error with the available names."""
        super().__init__(message, context)
        self.property_name = property_name
        self.available = available or []


__all__ = [
    'QuickPropError',
    'ConfigurationError',
    'RegistryError',
    'InvalidRangeError',
    'PropertySignatureError',
    'ConfigValidationError',
    'UnknownPropertyError'
]
