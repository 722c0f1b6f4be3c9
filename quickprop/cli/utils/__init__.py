"""CLI utilities for QuickProp."""

from quickprop.cli.utils.context import CLIContext
from quickprop.cli.utils.printer import CliPrinter

__all__ = ["CLIContext", "CliPrinter"]
