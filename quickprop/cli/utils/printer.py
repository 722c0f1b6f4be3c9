"""CLI Printer for consistent output formatting."""

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from quickprop.core.outcome import CheckOutcome, OutcomeStatus, format_value, to_json_value


class CliPrinter:
    """Centralized printer for CLI output.

    This class handles all printing operations for the CLI, ensuring consistent
    formatting across commands and proper handling of verbose/JSON modes.
    """

    STATUS_STYLES = {
        OutcomeStatus.PASSED: "green",
        OutcomeStatus.FAILED: "red",
        OutcomeStatus.CONFIGURATION_ERROR: "yellow",
    }

    def __init__(
        self, console: Console, verbose: bool = False, json_mode: bool = False
    ):
        """Initialize printer with console and mode settings.

        Args:
            console: Rich console for output
            verbose: Whether to show detailed output
            json_mode: Whether to output in JSON format (can be set later)
        """
        self.console = console
        self.verbose = verbose
        self.json_mode = json_mode

    def print_outcome(self, outcome: CheckOutcome) -> None:
        """Print one check outcome as a styled report line.

        In verbose mode, failed outcomes also show the value before shrinking,
        the number of shrink steps and the seed needed to reproduce the run.
        """
        style = self.STATUS_STYLES[outcome.status]
        self.console.print(Text(outcome.render(), style=style))

        if not self.verbose:
            return
        if outcome.status == OutcomeStatus.FAILED:
            self.console.print(
                f"  [dim]original: {format_value(outcome.original_counterexample)}, "
                f"shrink steps: {outcome.shrink_steps}, trials run: {outcome.trials_run}[/dim]"
            )
            if outcome.shrink_exhausted:
                self.console.print("  [yellow]shrink budget exhausted, value may not be minimal[/yellow]")
        if outcome.seed is not None:
            self.console.print(f"  [dim]seed: {outcome.seed}[/dim]")

    def print_outcomes(self, outcomes: list[CheckOutcome], json_mode: bool | None = None) -> None:
        """Print a batch of outcomes followed by a summary line.

        Args:
            outcomes: Outcomes in the order they were produced
            json_mode: If True, output as JSON. If None, uses self.json_mode
        """
        json_mode = json_mode if json_mode is not None else self.json_mode

        if json_mode:
            self.print_json(
                {
                    "results": [outcome.to_dict() for outcome in outcomes],
                    "summary": self._summary(outcomes),
                }
            )
            return

        for outcome in outcomes:
            self.print_outcome(outcome)

        summary = self._summary(outcomes)
        if len(outcomes) > 1:
            self.console.print(
                f"\n[bold]Summary:[/bold] {summary['passed']} passed, "
                f"{summary['failed']} failed, {summary['errors']} could not run"
            )

    def print_catalog(self, entries: list[dict[str, Any]], json_mode: bool | None = None) -> None:
        """Print the property catalogue as a table."""
        json_mode = json_mode if json_mode is not None else self.json_mode

        if json_mode:
            self.print_json({"properties": entries})
            return

        table = Table(title="Catalogued properties")
        table.add_column("Name", style="cyan")
        table.add_column("Message")
        table.add_column("Expected", justify="center")
        if self.verbose:
            table.add_column("Description", style="dim")

        for entry in entries:
            row = [
                entry["name"],
                entry["message"],
                "holds" if entry["expect_pass"] else "fails",
            ]
            if self.verbose:
                row.append(entry["description"])
            table.add_row(*row)

        self.console.print(table)

    def print_values(self, type_label: str, values: list[Any], seed: int | None = None) -> None:
        """Print generated or shrunk values, one per line."""
        if self.json_mode:
            self.print_json({"type": type_label, "seed": seed, "values": [to_json_value(v) for v in values]})
            return

        self.console.print(f"[bold]{type_label}[/bold]")
        for value in values:
            self.console.print(f"  {format_value(value)!s}", markup=False, highlight=False)
        if seed is not None and self.verbose:
            self.console.print(f"[dim]seed: {seed}[/dim]")

    def show_progress(self, message: str) -> None:
        """Show progress message if verbose mode is enabled.

        Args:
            message: Progress message to show
        """
        if self.verbose and not self.json_mode:
            self.console.print(f"🔄 {message}")

    def print_json(self, data: dict) -> None:
        """Print data as JSON.

        Args:
            data: Dictionary to print as JSON
        """
        self.console.print_json(data=data)

    def print_error(self, message: str) -> None:
        """Print error message with red formatting.

        Args:
            message: Error message to print
        """
        self.console.print(f"[red]❌ Error:[/red] {escape(message)}")

    @staticmethod
    def _summary(outcomes: list[CheckOutcome]) -> dict[str, int]:
        return {
            "total": len(outcomes),
            "passed": sum(1 for o in outcomes if o.status == OutcomeStatus.PASSED),
            "failed": sum(1 for o in outcomes if o.status == OutcomeStatus.FAILED),
            "errors": sum(1 for o in outcomes if o.status == OutcomeStatus.CONFIGURATION_ERROR),
        }

