"""CLI commands module for QuickProp."""

from quickprop.cli.commands.explore import sample_command, shrink_command
from quickprop.cli.commands.run import list_command, run_command

__all__ = [
    "list_command",
    "run_command",
    "sample_command",
    "shrink_command",
]
