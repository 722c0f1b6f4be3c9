"""Commands for listing and running catalogued properties."""

from pathlib import Path
from typing import Annotated

import typer

from quickprop.common.exceptions import UnknownPropertyError
from quickprop.core.outcome import OutcomeStatus
from quickprop.properties import CATALOG, describe_catalog, get_entry


def list_command(
    ctx: typer.Context,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """List all catalogued properties."""
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)

    cli_ctx.printer.print_catalog(describe_catalog())


def run_command(
    ctx: typer.Context,
    names: Annotated[
        list[str] | None,
        typer.Argument(help="Names of catalogued properties to run"),
    ] = None,
    run_all: Annotated[
        bool, typer.Option("--all", "-a", help="Run every catalogued property")
    ] = False,
    trials: Annotated[
        int | None,
        typer.Option("--trials", "-n", min=1, help="Number of trials per property"),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", "-s", help="Seed for the random source"),
    ] = None,
    no_shrink: Annotated[
        bool,
        typer.Option("--no-shrink", help="Report the first failing value without shrinking"),
    ] = False,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="YAML or JSON configuration file"),
    ] = None,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """
    Run catalogued properties and report their outcomes.

    Exits with code 1 if any property fails or cannot run. Failing runs can be
    reproduced by passing the reported seed back with --seed.
    """
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)

    if run_all:
        names = list(CATALOG)
    if not names:
        cli_ctx.exit_with_error("No property given. Pass one or more names, or use --all")

    try:
        entries = [get_entry(name) for name in names]
    except UnknownPropertyError as e:
        cli_ctx.exit_with_error(str(e))

    config = cli_ctx.load_config_or_exit(config_file, seed=seed)
    runner = cli_ctx.build_runner(config)

    outcomes = []
    for entry in entries:
        cli_ctx.printer.show_progress(f"Checking {entry.name}")
        outcomes.append(entry.run(runner, trials=trials, shrink=not no_shrink))

    cli_ctx.printer.print_outcomes(outcomes)

    if any(outcome.status != OutcomeStatus.PASSED for outcome in outcomes):
        raise typer.Exit(1)
