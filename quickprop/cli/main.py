"""QuickProp CLI - Typer-based command line interface."""

from typing import Annotated

import typer
from rich.console import Console

from quickprop.cli.commands import (
    list_command,
    run_command,
    sample_command,
    shrink_command,
)
from quickprop.cli.utils import CLIContext

# Create main app and console
app = typer.Typer(
    name="quickprop",
    help="QuickProp: property-based testing with shrinking counterexamples",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable verbose output")
    ] = False,
):
    """
    QuickProp CLI callback - sets up context for all commands.

    This callback initializes the CLIContext object that is shared across all commands.
    Commands can access the context via ctx.obj, which provides:
    - Configuration loading
    - Runner construction
    - Console output management
    - Verbose mode control
    """
    ctx.obj = CLIContext(console=console, verbose=verbose)


app.command(name="list")(list_command)
app.command(name="run")(run_command)
app.command(name="sample")(sample_command)
app.command(name="shrink")(shrink_command)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
