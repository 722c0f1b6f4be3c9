"""Outcome of a property check and its text rendering."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class OutcomeStatus(StrEnum):
    """
    Final status of one check.

    - PASSED: every trial satisfied the property
    - FAILED: a counterexample was found
    - CONFIGURATION_ERROR: the check could not be set up, no trial ran
    """

    PASSED = "passed"
    FAILED = "failed"
    CONFIGURATION_ERROR = "configuration_error"


def format_value(value: Any) -> str:
    """Render a counterexample the way it is printed in reports.

    Strings are shown bare and tuples as ``(3, 2)``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, tuple):
        return "(" + ", ".join(format_value(item) for item in value) + ")"
    return str(value)


def to_json_value(value: Any) -> Any:
    """Convert a generated value into something JSON can encode."""
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (list, tuple)):
        return [to_json_value(item) for item in value]
    return format_value(value)


@dataclass(frozen=True)
class CheckOutcome:
    """
    Immutable result of checking one property.

    Attributes:
        status: Final status
        message: Human-readable description of the property
        trials_run: Number of trials evaluated, including the failing one
        counterexample: Minimal failing value found, after shrinking
        original_counterexample: Failing value before shrinking
        shrink_steps: Number of accepted shrink candidates
        shrink_exhausted: True if shrinking stopped at its step budget
        seed: Seed of the random source used for the run
        error: Description of the configuration error, if any
    """

    status: OutcomeStatus
    message: str
    trials_run: int = 0
    counterexample: Any = None
    original_counterexample: Any = None
    shrink_steps: int = 0
    shrink_exhausted: bool = False
    seed: int | None = None
    error: str | None = None

    @classmethod
    def passed(cls, message: str, trials: int, seed: int | None = None) -> "CheckOutcome":
        """Create a PASSED outcome."""
        return cls(status=OutcomeStatus.PASSED, message=message, trials_run=trials, seed=seed)

    @classmethod
    def failed(
        cls,
        message: str,
        counterexample: Any,
        trials_run: int,
        original_counterexample: Any = None,
        shrink_steps: int = 0,
        shrink_exhausted: bool = False,
        seed: int | None = None,
    ) -> "CheckOutcome":
        """Create a FAILED outcome."""
        return cls(
            status=OutcomeStatus.FAILED,
            message=message,
            trials_run=trials_run,
            counterexample=counterexample,
            original_counterexample=(
                counterexample if original_counterexample is None else original_counterexample
            ),
            shrink_steps=shrink_steps,
            shrink_exhausted=shrink_exhausted,
            seed=seed,
        )

    @classmethod
    def configuration_error(cls, message: str, error: str) -> "CheckOutcome":
        """Create a CONFIGURATION_ERROR outcome."""
        return cls(status=OutcomeStatus.CONFIGURATION_ERROR, message=message, error=error)

    @property
    def is_success(self) -> bool:
        return self.status == OutcomeStatus.PASSED

    def render(self) -> str:
        """Render the outcome as a single report line."""
        if self.status == OutcomeStatus.PASSED:
            return f'"{self.message}" passed {self.trials_run} tests.'
        if self.status == OutcomeStatus.FAILED:
            return f'"{self.message}" does not hold: {format_value(self.counterexample)}'
        return f'"{self.message}" could not run: {self.error}'

    def to_dict(self) -> dict[str, Any]:
        """Convert the outcome to a JSON-compatible dictionary."""
        data: dict[str, Any] = {
            "status": self.status.value,
            "message": self.message,
            "trials_run": self.trials_run,
            "seed": self.seed,
        }
        if self.status == OutcomeStatus.FAILED:
            data["counterexample"] = to_json_value(self.counterexample)
            data["original_counterexample"] = to_json_value(self.original_counterexample)
            data["shrink_steps"] = self.shrink_steps
            data["shrink_exhausted"] = self.shrink_exhausted
        if self.error is not None:
            data["error"] = self.error
        return data

    def __str__(self) -> str:
        return self.render()
