"""
CLI Context for QuickProp.

Provides configuration loading and output management for all CLI commands.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.logging import RichHandler

from quickprop.cli.utils.printer import CliPrinter
from quickprop.common.exceptions import ConfigValidationError
from quickprop.config import CheckConfig
from quickprop.core.random_source import RandomSource
from quickprop.core.registry import ArbitraryRegistry
from quickprop.core.runner import PropertyRunner


@dataclass
class CLIContext:
    """
    Context object for CLI commands.

    This context is created once and passed to all commands via Typer's
    context injection. It centralizes:
    - Configuration loading from file or environment
    - Runner construction with an explicit seed
    - Error handling and reporting
    - Console output management
    - Verbose and JSON mode control

    Attributes:
        console: Rich console for output
        verbose: Enable verbose output (ignored when json_mode is True)
        printer: CLI printer for formatted output (always initialized)
        json_mode: When True, suppress all non-JSON output (set by commands)
    """

    console: Console
    verbose: bool = False
    printer: CliPrinter = field(init=False)  # Will be initialized in __post_init__
    json_mode: bool = False

    def __post_init__(self):
        """Initialize printer and logging."""
        self.printer = CliPrinter(console=self.console, verbose=self.verbose)
        self.configure_logging()

    def configure_logging(self) -> None:
        """Route library logging through rich; DEBUG when verbose, WARNING otherwise."""
        root = logging.getLogger("quickprop")
        root.handlers.clear()
        handler = RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
        root.addHandler(handler)
        root.setLevel(logging.DEBUG if self.verbose else logging.WARNING)
        root.propagate = False

    def set_json_mode(self, json_mode: bool) -> None:
        """Enable or disable JSON output for the current command."""
        self.json_mode = json_mode
        self.printer.json_mode = json_mode
        if json_mode:
            logging.getLogger("quickprop").setLevel(logging.ERROR)

    def load_config_or_exit(self, config_file: Path | None = None, **overrides: Any) -> CheckConfig:
        """
        Load configuration from a file (if given) or the environment.

        Command-line overrides that are not None replace loaded values.

        Raises:
            typer.Exit: If the configuration is invalid
        """
        try:
            if config_file is not None:
                self.print_verbose(f"[dim]Loading configuration from: {config_file}[/dim]")
                config = CheckConfig.from_file(config_file)
            else:
                config = CheckConfig.from_env()
            return config.with_overrides(**overrides)
        except ConfigValidationError as e:
            self.exit_with_error(f"Cannot load configuration: {e}")

    def build_runner(self, config: CheckConfig) -> PropertyRunner:
        """Create a runner with a fresh registry and a seeded random source."""
        registry = ArbitraryRegistry.default(list_max_length=config.list_max_length)
        source = RandomSource(config.seed)
        self.print_verbose(f"[dim]Random seed: {source.seed}[/dim]")
        return PropertyRunner(registry=registry, source=source, config=config)

    def _should_print_verbose(self) -> bool:
        """Check if verbose output should be printed (not in JSON mode)."""
        return self.verbose and not self.json_mode

    def print_verbose(self, message: str, **kwargs) -> None:
        """
        Print a message only if verbose mode is enabled and not in JSON mode.

        Args:
            message: Message to print
            **kwargs: Additional arguments passed to console.print()
        """
        if self._should_print_verbose():
            self.console.print(message, **kwargs)

    def print_error(self, message: str) -> None:
        """
        Print an error message (always prints unless in JSON mode).

        Args:
            message: Error message to print
        """
        if not self.json_mode:
            self.printer.print_error(message)

    def print_json(self, data: Any) -> None:
        """
        Print data as JSON (always prints, even in JSON mode).

        Args:
            data: Data to serialize and print as JSON
        """
        self.printer.print_json(data=data)

    def exit_with_error(self, message: str, code: int = 1):
        """Report an error in the current output mode and exit."""
        if self.json_mode:
            self.print_json({"error": message})
        else:
            self.print_error(message)
        raise typer.Exit(code)
