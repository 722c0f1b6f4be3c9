"""Property runner: trial loop, shrinking and reporting.

A check generates values from an arbitrary instance, evaluates the property on
each one and stops at the first failure. With shrinking enabled the failing
value is reduced to a locally minimal counterexample before it is reported.
"""

import logging
from collections.abc import Callable
from typing import Any

from quickprop.common.exceptions import ConfigurationError
from quickprop.config import CheckConfig
from quickprop.core.arbitrary import ArbitraryInstance
from quickprop.core.outcome import CheckOutcome
from quickprop.core.random_source import RandomSource
from quickprop.core.registry import ArbitraryRegistry, default_registry, property_parameters
from quickprop.core.shrink import shrink_counterexample

logger = logging.getLogger(__name__)

Reporter = Callable[[CheckOutcome], None]


def print_reporter(outcome: CheckOutcome) -> None:
    """Reporter printing the rendered outcome to standard output."""
    print(outcome.render())


def _positional_arity(prop: Callable[..., bool]) -> int | None:
    try:
        return len(property_parameters(prop))
    except (TypeError, ValueError):
        return None


def _adapt_property(prop: Callable[..., bool]) -> Callable[[Any], bool]:
    """Call multi-parameter properties with tuple values unpacked."""
    if (_positional_arity(prop) or 0) > 1:
        return lambda value: bool(prop(*value))
    return lambda value: bool(prop(value))


class PropertyRunner:
    """
    Runs properties against generated values and reports the outcome.

    The runner owns its random source, so two runners never share random
    state. Configuration problems raise ``ConfigurationError`` before any
    trial runs; a property returning False is reported, not raised.
    """

    def __init__(
        self,
        registry: ArbitraryRegistry | None = None,
        source: RandomSource | None = None,
        config: CheckConfig | None = None,
        reporter: Reporter | None = None,
    ):
        self.config = config or CheckConfig()
        self.registry = registry or default_registry()
        self.source = source or RandomSource(self.config.seed)
        self.reporter = reporter

    def check(
        self,
        message: str,
        prop: Callable[..., bool],
        trials: int | None = None,
        type_: Any = None,
    ) -> CheckOutcome:
        """
        Check ``prop`` with shrinking.

        Args:
            message: Human-readable description of the property
            prop: Predicate over one value, or over several unpacked tuple components
            trials: Number of trials, defaults to ``config.trials``
            type_: Input type; inferred from the annotations of ``prop`` when omitted

        Returns:
            CheckOutcome for the run

        Raises:
            ConfigurationError: If no instance can be resolved for the input type
        """
        instance = self._resolve(prop, type_)
        return self.check_instance(instance, prop, message, trials, shrink=True)

    def check_list(
        self,
        message: str,
        prop: Callable[[list[Any]], bool],
        element_type: Any,
        trials: int | None = None,
    ) -> CheckOutcome:
        """Check a property over lists of ``element_type``."""
        instance = self.registry.lookup(list[element_type])
        return self.check_instance(instance, prop, message, trials, shrink=True)

    def check_unshrunk(
        self,
        message: str,
        prop: Callable[..., bool],
        trials: int | None = None,
        type_: Any = None,
    ) -> CheckOutcome:
        """Check ``prop`` and report the first failing value as generated."""
        instance = self._resolve(prop, type_)
        if trials is None:
            trials = self.config.quick_trials
        return self.check_instance(instance, prop, message, trials, shrink=False)

    def check_instance(
        self,
        instance: ArbitraryInstance[Any],
        prop: Callable[..., bool],
        message: str,
        trials: int | None = None,
        shrink: bool = True,
    ) -> CheckOutcome:
        """
        Run the trial loop with an explicit arbitrary instance.

        Every other ``check_*`` method resolves an instance and delegates here.
        """
        if trials is None:
            trials = self.config.trials
        if trials < 1:
            raise ConfigurationError(
                f"Number of trials must be at least 1, got {trials}",
                context={"message": message},
            )

        predicate = _adapt_property(prop)
        logger.debug("Checking %r with %d trials of %s (seed=%s)", message, trials, instance.name, self.source.seed)

        for trial in range(trials):
            value = instance.generate(self.source)
            if predicate(value):
                continue

            logger.info("%r failed on trial %d with %r", message, trial + 1, value)
            if not shrink:
                return self._report(
                    CheckOutcome.failed(message, value, trial + 1, seed=self.source.seed)
                )

            result = shrink_counterexample(
                predicate, value, instance.shrink, self.config.max_shrink_steps
            )
            logger.info("Shrunk counterexample for %r to %r in %d steps", message, result.value, result.steps)
            return self._report(
                CheckOutcome.failed(
                    message,
                    result.value,
                    trial + 1,
                    original_counterexample=value,
                    shrink_steps=result.steps,
                    shrink_exhausted=result.exhausted,
                    seed=self.source.seed,
                )
            )

        return self._report(CheckOutcome.passed(message, trials, seed=self.source.seed))

    def run_safely(
        self,
        message: str,
        prop: Callable[..., bool],
        trials: int | None = None,
        type_: Any = None,
        shrink: bool = True,
    ) -> CheckOutcome:
        """Like ``check``, but returns configuration errors as an outcome."""
        try:
            if shrink:
                return self.check(message, prop, trials, type_)
            return self.check_unshrunk(message, prop, trials, type_)
        except ConfigurationError as e:
            logger.warning("Cannot check %r: %s", message, e)
            return self._report(CheckOutcome.configuration_error(message, str(e)))

    def _resolve(self, prop: Callable[..., bool], type_: Any) -> ArbitraryInstance[Any]:
        if type_ is None:
            type_ = self.registry.infer_type(prop)
        return self.registry.lookup(type_)

    def _report(self, outcome: CheckOutcome) -> CheckOutcome:
        if self.reporter is not None:
            self.reporter(outcome)
        return outcome


def _env_runner() -> PropertyRunner:
    return PropertyRunner(config=CheckConfig.from_env(), reporter=print_reporter)


def check(message: str, prop: Callable[..., bool], trials: int | None = None, type_: Any = None) -> CheckOutcome:
    """Check ``prop`` with shrinking and print the outcome.

    Settings come from the ``QUICKPROP_*`` environment variables.
    """
    return _env_runner().check(message, prop, trials, type_)


def check_list(
    message: str, prop: Callable[[list[Any]], bool], element_type: Any, trials: int | None = None
) -> CheckOutcome:
    """Check a list property with shrinking and print the outcome."""
    return _env_runner().check_list(message, prop, element_type, trials)


def check_unshrunk(
    message: str, prop: Callable[..., bool], trials: int | None = None, type_: Any = None
) -> CheckOutcome:
    """Check ``prop`` without shrinking and print the outcome."""
    return _env_runner().check_unshrunk(message, prop, trials, type_)
