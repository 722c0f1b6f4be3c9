"""Commands for inspecting generators and shrinkers directly."""

import json
from typing import Annotated, Any

import typer

from quickprop.common.exceptions import ConfigurationError
from quickprop.core.random_source import RandomSource
from quickprop.core.registry import ArbitraryRegistry, type_name
from quickprop.core.shrink import shrink_chain
from quickprop.core.types import Char, Size


def parse_value(type_: Any, text: str) -> Any:
    """
    Parse a command-line value for ``type_``.

    Scalars are parsed directly; sizes accept ``WIDTH,HEIGHT``; lists and
    tuples accept JSON arrays.

    Raises:
        ValueError: If the text does not describe a value of the type
    """
    if type_ is int:
        return int(text)
    if type_ is float:
        return float(text)
    if type_ is bool:
        lowered = text.strip().lower()
        if lowered not in ("true", "false"):
            raise ValueError(f"expected true or false, got '{text}'")
        return lowered == "true"
    if type_ is str:
        return text
    if type_ is Char:
        if len(text) != 1:
            raise ValueError(f"expected a single character, got '{text}'")
        return Char(text)
    if type_ is Size:
        width, _, height = text.partition(",")
        return Size(float(width), float(height))

    return _coerce(type_, json.loads(text))


def _coerce(type_: Any, data: Any) -> Any:
    """Convert decoded JSON into a value of ``type_``."""
    origin = getattr(type_, "__origin__", None)
    args = getattr(type_, "__args__", ())
    if origin in (list, tuple):
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array, got {data!r}")
        if origin is list:
            return [_coerce(args[0], item) for item in data]
        if len(data) != len(args):
            raise ValueError(f"expected {len(args)} components, got {len(data)}")
        return tuple(_coerce(arg, item) for arg, item in zip(args, data))
    return parse_value(type_, data if isinstance(data, str) else json.dumps(data))


def sample_command(
    ctx: typer.Context,
    type_text: Annotated[
        str, typer.Argument(metavar="TYPE", help="Type name, e.g. int, str, size, list[int]")
    ],
    count: Annotated[
        int, typer.Option("--count", "-n", min=1, help="Number of values to generate")
    ] = 5,
    seed: Annotated[
        int | None, typer.Option("--seed", "-s", help="Seed for the random source")
    ] = None,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """Generate and print random values of a type."""
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)

    config = cli_ctx.load_config_or_exit(seed=seed)
    registry = ArbitraryRegistry.default(list_max_length=config.list_max_length)
    try:
        type_ = registry.parse_type_name(type_text)
        instance = registry.lookup(type_)
    except ConfigurationError as e:
        cli_ctx.exit_with_error(str(e))

    source = RandomSource(config.seed)
    cli_ctx.printer.print_values(type_name(type_), instance.sample(source, count), seed=source.seed)


def shrink_command(
    ctx: typer.Context,
    type_text: Annotated[
        str, typer.Argument(metavar="TYPE", help="Type name, e.g. int, str, list[int]")
    ],
    value: Annotated[str, typer.Argument(help="Value to shrink")],
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """Print every candidate the shrinker offers, starting from VALUE."""
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)

    config = cli_ctx.load_config_or_exit()
    registry = ArbitraryRegistry.default(list_max_length=config.list_max_length)
    try:
        type_ = registry.parse_type_name(type_text)
        instance = registry.lookup(type_)
    except ConfigurationError as e:
        cli_ctx.exit_with_error(str(e))

    try:
        parsed = parse_value(type_, value)
    except (ValueError, json.JSONDecodeError) as e:
        cli_ctx.exit_with_error(f"Cannot parse '{value}' as {type_name(type_)}: {e}")

    chain = shrink_chain(parsed, instance.shrink, config.max_shrink_steps)
    cli_ctx.printer.print_values(type_name(type_), chain)
