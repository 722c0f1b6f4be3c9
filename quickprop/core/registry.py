"""Registry binding types to their arbitrary instances.

Scalar built-ins are stored as constant entries. ``list[T]`` and
``tuple[A, B, ...]`` are never stored: they are synthesized from their
element instances every time they are looked up.
"""

import inspect
import logging
import typing
from collections.abc import Callable
from typing import Any

from quickprop.common.exceptions import PropertySignatureError, RegistryError
from quickprop.constants import LIST_MAX_LENGTH
from quickprop.core.arbitrary import (
    BOOL,
    CHAR,
    FLOAT,
    INT,
    SIZE,
    STRING,
    ArbitraryInstance,
    list_of,
    tuple_of,
)
from quickprop.core.types import Char, Size

logger = logging.getLogger(__name__)

# Names accepted by ``parse_type_name`` for the command line
TYPE_NAMES: dict[str, Any] = {
    "int": int,
    "float": float,
    "str": str,
    "bool": bool,
    "char": Char,
    "size": Size,
}


def type_name(type_: Any) -> str:
    """Readable name for a type descriptor, e.g. ``list[Char]``."""
    origin = typing.get_origin(type_)
    args = typing.get_args(type_)
    if origin is not None and args:
        inner = ", ".join("..." if arg is Ellipsis else type_name(arg) for arg in args)
        return f"{getattr(origin, '__name__', repr(origin))}[{inner}]"
    return getattr(type_, "__name__", repr(type_))


class ArbitraryRegistry:
    """
    Maps type descriptors to arbitrary instances.

    Lookups for ``list[T]`` build a list instance from ``T``'s instance using
    the registry's length policy; lookups for ``tuple[A, B]`` compose the
    component instances. Any other unknown type is a configuration error.
    """

    def __init__(self, list_max_length: int = LIST_MAX_LENGTH):
        """Initialize an empty registry."""
        self._instances: dict[Any, ArbitraryInstance[Any]] = {}
        self.list_max_length = list_max_length

    @classmethod
    def default(cls, list_max_length: int = LIST_MAX_LENGTH) -> "ArbitraryRegistry":
        """Create a registry holding the built-in instances."""
        registry = cls(list_max_length=list_max_length)
        registry.register(int, INT)
        registry.register(float, FLOAT)
        registry.register(str, STRING)
        registry.register(bool, BOOL)
        registry.register(Char, CHAR)
        registry.register(Size, SIZE)
        return registry

    def register(
        self, type_: Any, instance: ArbitraryInstance[Any], replace: bool = False
    ) -> None:
        """
        Bind ``type_`` to ``instance``.

        Args:
            type_: Type descriptor to bind
            instance: Generator and shrinker for the type
            replace: Allow overriding an existing binding

        Raises:
            RegistryError: If the type is already registered and ``replace`` is False
        """
        if type_ in self._instances and not replace:
            raise RegistryError(
                f"Type '{type_name(type_)}' is already registered",
                type_name=type_name(type_),
            )
        self._instances[type_] = instance
        logger.debug("Registered arbitrary instance %s for %s", instance.name, type_name(type_))

    def unregister(self, type_: Any) -> None:
        """
        Remove the binding for ``type_``.

        Raises:
            RegistryError: If the type is not registered
        """
        if type_ not in self._instances:
            raise RegistryError(
                f"Type '{type_name(type_)}' is not registered",
                type_name=type_name(type_),
            )
        del self._instances[type_]

    def is_registered(self, type_: Any) -> bool:
        """Check whether ``type_`` has an explicit binding."""
        return type_ in self._instances

    def list_types(self) -> list[str]:
        """Names of all explicitly registered types."""
        return sorted(type_name(type_) for type_ in self._instances)

    def lookup(self, type_: Any) -> ArbitraryInstance[Any]:
        """
        Resolve the arbitrary instance for ``type_``.

        Raises:
            RegistryError: If neither a binding nor a synthesis rule applies
        """
        if type_ in self._instances:
            return self._instances[type_]

        origin = typing.get_origin(type_)
        args = typing.get_args(type_)

        if origin is list and len(args) == 1:
            return list_of(self.lookup(args[0]), self.list_max_length)

        if origin is tuple and args and Ellipsis not in args:
            return tuple_of(*(self.lookup(arg) for arg in args))

        raise RegistryError(
            f"No arbitrary instance for type '{type_name(type_)}'",
            type_name=type_name(type_),
            context={"registered": self.list_types()},
        )

    def infer_type(self, prop: Callable[..., bool]) -> Any:
        """
        Infer the input type of ``prop`` from its parameter annotations.

        Only positional parameters without a default are generated. A single
        one gives its own type; several give a tuple of their types, and the
        property is then called unpacked.

        Raises:
            PropertySignatureError: If there are no parameters or an annotation is missing
        """
        name = getattr(prop, "__name__", repr(prop))
        try:
            signature = inspect.signature(prop)
            parameters = property_parameters(prop)
            hints = typing.get_type_hints(prop)
        except (TypeError, ValueError, NameError) as e:
            raise PropertySignatureError(
                f"Cannot read the signature of property '{name}': {e}",
                property_name=name,
            ) from e

        for parameter in signature.parameters.values():
            if parameter.kind is parameter.KEYWORD_ONLY and parameter.default is parameter.empty:
                raise PropertySignatureError(
                    f"Keyword-only parameter '{parameter.name}' of property '{name}' needs a default",
                    property_name=name,
                    parameter_name=parameter.name,
                )

        if not parameters:
            raise PropertySignatureError(
                f"Property '{name}' takes no parameters", property_name=name
            )

        types = []
        for parameter in parameters:
            if parameter.name not in hints:
                raise PropertySignatureError(
                    f"Parameter '{parameter.name}' of property '{name}' has no type annotation",
                    property_name=name,
                    parameter_name=parameter.name,
                )
            types.append(hints[parameter.name])

        if len(types) == 1:
            return types[0]
        return tuple[tuple(types)]

    def parse_type_name(self, text: str) -> Any:
        """
        Parse a type name such as ``int``, ``list[str]`` or ``tuple[int, int]``.

        Raises:
            RegistryError: If the name is not understood
        """
        text = text.strip()
        if text in TYPE_NAMES:
            return TYPE_NAMES[text]

        if text.endswith("]") and "[" in text:
            head, _, inner = text[:-1].partition("[")
            head = head.strip()
            if head == "list":
                return list[self.parse_type_name(inner)]
            if head == "tuple":
                parts = _split_top_level(inner)
                if parts:
                    return tuple[tuple(self.parse_type_name(part) for part in parts)]

        raise RegistryError(
            f"Unknown type name '{text}'",
            type_name=text,
            context={"known": sorted(TYPE_NAMES)},
        )


def property_parameters(prop: Callable[..., bool]) -> list[inspect.Parameter]:
    """Parameters filled from generated values: positional ones without a default."""
    return [
        parameter
        for parameter in inspect.signature(prop).parameters.values()
        if parameter.kind in (parameter.POSITIONAL_ONLY, parameter.POSITIONAL_OR_KEYWORD)
        and parameter.default is parameter.empty
    ]


def _split_top_level(text: str) -> list[str]:
    """Split on commas that are not nested inside brackets."""
    parts = []
    depth = 0
    current = ""
    for char in text:
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        if char == "," and depth == 0:
            parts.append(current)
            current = ""
        else:
            current += char
    if current.strip():
        parts.append(current)
    return [part.strip() for part in parts if part.strip()]


_default_registry: ArbitraryRegistry | None = None


def default_registry() -> ArbitraryRegistry:
    """Shared registry with the built-in instances."""
    global _default_registry
    if _default_registry is None:
        _default_registry = ArbitraryRegistry.default()
    return _default_registry
