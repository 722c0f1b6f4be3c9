"""Unit tests for PropertyRunner and the module-level check helpers."""

import pytest

from quickprop.common.exceptions import ConfigurationError, PropertySignatureError, RegistryError
from quickprop.config import CheckConfig
from quickprop.core.arbitrary import INT, ArbitraryInstance, tuple_of
from quickprop.core.outcome import OutcomeStatus
from quickprop.core.random_source import RandomSource
from quickprop.core.runner import PropertyRunner, check, check_list, check_unshrunk
from quickprop.core.types import Size
from quickprop.properties import (
    additive_identity,
    minus_is_commutative,
    plus_is_commutative,
    qsort,
    starts_with_hello,
)


class TestPassingProperties:
    """Test properties that hold for every input."""

    def test_plus_is_commutative(self, runner):
        outcome = runner.check("Plus should be commutative", plus_is_commutative)

        assert outcome.status == OutcomeStatus.PASSED
        assert outcome.trials_run == 10

    def test_explicit_trial_count(self, runner):
        outcome = runner.check("Plus should be commutative", plus_is_commutative, trials=250)

        assert outcome.trials_run == 250

    def test_default_trials_from_config(self, registry, source):
        runner = PropertyRunner(registry, source, CheckConfig(trials=3))

        assert runner.check("Additive identity", additive_identity).trials_run == 3

    def test_explicit_type_for_lambda(self, runner):
        outcome = runner.check("Additive identity", lambda x: x + 0 == x, type_=int)

        assert outcome.status == OutcomeStatus.PASSED

    def test_defaulted_parameter_keeps_its_default(self, runner):
        seen = []

        def offset_identity(x: int, offset: int = 0) -> bool:
            seen.append((type(x), offset))
            return x + offset == x

        outcome = runner.check("offset identity", offset_identity)

        assert outcome.status == OutcomeStatus.PASSED
        assert seen == [(int, 0)] * 10

    def test_qsort_behaves_like_sort(self, runner):
        outcome = runner.check_list("qsort should behave like sort", lambda xs: qsort(xs) == sorted(xs), int)

        assert outcome.status == OutcomeStatus.PASSED
        assert outcome.trials_run == 10


class TestFailingProperties:
    """Test properties with counterexamples."""

    def test_minus_is_not_commutative(self, runner):
        outcome = runner.check("Minus should be commutative", minus_is_commutative, trials=100)

        assert outcome.status == OutcomeStatus.FAILED
        x, y = outcome.counterexample
        assert x - y != y - x

    def test_minus_counterexample_is_locally_minimal(self, runner):
        """The next shrink candidate either does not exist or passes the property."""
        outcome = runner.check("Minus should be commutative", minus_is_commutative, trials=100)

        candidate = tuple_of(INT, INT).shrink(outcome.counterexample)
        assert candidate is None or minus_is_commutative(*candidate)

    def test_hello_prefix_shrinks_to_empty_string(self, runner):
        """Uppercase strings never start with 'Hello', and neither does the empty string."""
        outcome = runner.check("Every string starts with Hello", starts_with_hello)

        assert outcome.status == OutcomeStatus.FAILED
        assert outcome.counterexample == ""
        assert outcome.trials_run == 1
        assert outcome.shrink_steps == len(outcome.original_counterexample)

    def test_remaining_trials_are_not_run(self, registry, source):
        calls = []

        def never(x: int) -> bool:
            calls.append(x)
            return False

        runner = PropertyRunner(registry, source, CheckConfig(trials=50))
        runner.check("never", never)

        # one generated value, then one evaluation per shrink candidate down to zero
        generated = calls[0]
        assert len(calls) == 1 + abs(generated).bit_length()

    def test_area_counterexample_has_negative_area(self, runner):
        outcome = runner.check("Area should be at least 0", lambda s: s.area >= 0, trials=200, type_=Size)

        assert outcome.status == OutcomeStatus.FAILED
        assert outcome.counterexample.area < 0

    def test_shrinking_integer_counterexample(self, registry, source):
        runner = PropertyRunner(registry, source)

        outcome = runner.check("small", lambda x: abs(x) < 1000, trials=100, type_=int)

        # halving stops on the last value whose magnitude is still >= 1000
        assert 1000 <= abs(outcome.counterexample) < 2000
        assert abs(outcome.counterexample) <= abs(outcome.original_counterexample)


class TestUnshrunkRunner:
    """Test the baseline runner without shrinking."""

    def test_reports_generated_value_verbatim(self, runner):
        outcome = runner.check_unshrunk("Every string starts with Hello", starts_with_hello)

        assert outcome.status == OutcomeStatus.FAILED
        assert outcome.counterexample == outcome.original_counterexample
        assert outcome.shrink_steps == 0

    def test_defaults_to_quick_trials(self, runner):
        outcome = runner.check_unshrunk("Plus should be commutative", plus_is_commutative)

        assert outcome.trials_run == 100


class TestShrinkBudget:
    """Test the guard against shrinkers that never terminate."""

    def test_runaway_shrinker_is_cut_off(self, registry, source):
        growing = ArbitraryInstance("growing", lambda s: 0, lambda x: x + 1)
        runner = PropertyRunner(registry, source, CheckConfig(max_shrink_steps=5))

        outcome = runner.check_instance(growing, lambda x: False, "always fails")

        assert outcome.status == OutcomeStatus.FAILED
        assert outcome.shrink_exhausted is True
        assert outcome.shrink_steps == 5
        assert outcome.counterexample == 5


class TestConfigurationErrors:
    """Test that setup problems are raised before any trial runs."""

    def test_missing_instance_raises_before_trials(self, runner):
        calls = []

        def prop(x: complex) -> bool:
            calls.append(x)
            return True

        with pytest.raises(RegistryError):
            runner.check("complex", prop)
        assert calls == []

    def test_unannotated_property_raises(self, runner):
        with pytest.raises(PropertySignatureError):
            runner.check("lambda", lambda x: True)

    def test_zero_trials_rejected(self, runner):
        with pytest.raises(ConfigurationError):
            runner.check("p", plus_is_commutative, trials=0)

    def test_run_safely_returns_configuration_outcome(self, runner, reported):
        outcome = runner.run_safely("complex", lambda x: True, type_=complex)

        assert outcome.status == OutcomeStatus.CONFIGURATION_ERROR
        assert "complex" in outcome.error
        assert reported == [outcome]

    def test_property_exceptions_propagate(self, runner):
        def explode(x: int) -> bool:
            raise ZeroDivisionError("boom")

        with pytest.raises(ZeroDivisionError):
            runner.check("explodes", explode)


class TestReporting:
    """Test reporter hand-off and reproducibility."""

    def test_reporter_receives_outcome(self, runner, reported):
        outcome = runner.check("Additive identity", additive_identity)

        assert reported == [outcome]

    def test_outcome_carries_seed(self, runner, source):
        outcome = runner.check("Additive identity", additive_identity)

        assert outcome.seed == source.seed

    def test_same_seed_same_outcome(self, registry):
        first = PropertyRunner(registry, RandomSource(99)).check(
            "Minus should be commutative", minus_is_commutative
        )
        second = PropertyRunner(registry, RandomSource(99)).check(
            "Minus should be commutative", minus_is_commutative
        )

        assert first == second

    def test_seed_from_config(self, registry):
        runner = PropertyRunner(registry, config=CheckConfig(seed=1234))

        assert runner.source.seed == 1234


class TestModuleLevelHelpers:
    """Test the print-as-you-go helpers."""

    def test_check_prints_passed(self, capsys):
        outcome = check("Additive identity", additive_identity)

        assert capsys.readouterr().out == '"Additive identity" passed 10 tests.\n'
        assert outcome.status == OutcomeStatus.PASSED

    def test_check_prints_counterexample(self, capsys):
        check("Every string starts with Hello", starts_with_hello)

        assert capsys.readouterr().out == '"Every string starts with Hello" does not hold: \n'

    def test_check_list_prints(self, capsys):
        check_list("qsort should behave like sort", lambda xs: qsort(xs) == sorted(xs), int)

        assert "passed 10 tests." in capsys.readouterr().out

    def test_check_unshrunk_prints(self, capsys):
        check_unshrunk("Plus should be commutative", plus_is_commutative)

        assert capsys.readouterr().out == '"Plus should be commutative" passed 100 tests.\n'

    def test_helpers_read_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("QUICKPROP_TRIALS", "3")
        monkeypatch.setenv("QUICKPROP_QUICK_TRIALS", "4")

        check("Additive identity", additive_identity)
        check_unshrunk("Additive identity", additive_identity)

        assert capsys.readouterr().out == (
            '"Additive identity" passed 3 tests.\n'
            '"Additive identity" passed 4 tests.\n'
        )
