"""Unit tests for shrinkers and the iterative shrink loop."""

import pytest

from quickprop.core.shrink import (
    ShrinkResult,
    iterate_while,
    no_shrink,
    shrink_bool,
    shrink_chain,
    shrink_counterexample,
    shrink_int,
    shrink_sequence,
    shrink_size,
)
from quickprop.core.types import Size


class TestShrinkInt:
    """Test integer halving toward zero."""

    @pytest.mark.parametrize(
        "value,expected",
        [(100, 50), (1, 0), (7, 3), (-7, -3), (-1, 0), (-100, -50)],
    )
    def test_halves_toward_zero(self, value, expected):
        assert shrink_int(value) == expected

    def test_zero_is_terminal(self):
        assert shrink_int(0) is None

    @pytest.mark.parametrize("n,steps", [(1, 1), (2, 2), (3, 2), (4, 3), (100, 7), (1023, 10), (1024, 11)])
    def test_steps_to_zero(self, n, steps):
        """From n, zero is reached in ceil(log2(n + 1)) steps."""
        chain = shrink_chain(n, shrink_int)

        assert chain[-1] == 0
        assert len(chain) - 1 == steps

    def test_chain_from_hundred(self):
        assert shrink_chain(100, shrink_int) == [100, 50, 25, 12, 6, 3, 1, 0]


class TestShrinkSequence:
    """Test drop-first shrinking of strings and lists."""

    def test_drops_first_character(self):
        assert shrink_sequence("HELLO") == "ELLO"

    def test_drops_first_element(self):
        assert shrink_sequence([3, 1, 2]) == [1, 2]

    @pytest.mark.parametrize("empty", ["", []])
    def test_empty_is_terminal(self, empty):
        assert shrink_sequence(empty) is None

    def test_string_reaches_empty_in_length_steps(self):
        value = "ABCDEFGHIJ"
        chain = shrink_chain(value, shrink_sequence)

        assert chain[-1] == ""
        assert len(chain) - 1 == len(value)


class TestOtherShrinkers:
    """Test shrinkers for bool, size and types without a smaller form."""

    def test_bool_true_shrinks_to_false(self):
        assert shrink_bool(True) is False

    def test_bool_false_is_terminal(self):
        assert shrink_bool(False) is None

    def test_size_jumps_to_zero(self):
        assert shrink_size(Size(36.0, -33.0)) == Size.zero()

    def test_zero_size_is_terminal(self):
        """The zero size is not offered again, so the chain cannot loop."""
        assert shrink_size(Size.zero()) is None

    @pytest.mark.parametrize("value", [1.5, "A", None])
    def test_no_shrink(self, value):
        assert no_shrink(value) is None


class TestIterateWhile:
    """Test the iterative shrink loop."""

    def test_stops_before_condition_fails(self):
        """The last value satisfying the condition is returned, not the first that fails."""
        result = iterate_while(lambda x: x > 10, 100, shrink_int)

        # 100 -> 50 -> 25 -> 12, then 6 fails the condition
        assert result.value == 12
        assert result.steps == 3
        assert result.exhausted is False

    def test_stops_when_no_candidate(self):
        result = iterate_while(lambda x: True, 5, shrink_int)

        assert result.value == 0
        assert result.steps == 3

    def test_initial_returned_when_first_candidate_fails(self):
        result = iterate_while(lambda x: x == 100, 100, shrink_int)

        assert result == ShrinkResult(100, 0, False)

    def test_step_budget_stops_runaway_shrinker(self):
        """A shrinker that grows its input is cut off by the step budget."""
        result = iterate_while(lambda x: True, 0, lambda x: x + 1, max_steps=25)

        assert result.value == 25
        assert result.steps == 25
        assert result.exhausted is True

    def test_chain_ending_on_last_allowed_step_is_not_exhausted(self):
        result = iterate_while(lambda x: True, 1, shrink_int, max_steps=1)

        assert result == ShrinkResult(0, 1, False)

    def test_budget_reached_with_candidate_left_is_exhausted(self):
        result = iterate_while(lambda x: True, 2, shrink_int, max_steps=1)

        assert result == ShrinkResult(1, 1, True)

    def test_zero_budget_on_terminal_value(self):
        result = iterate_while(lambda x: True, 0, shrink_int, max_steps=0)

        assert result.exhausted is False

    def test_trace_only_kept_on_request(self):
        assert iterate_while(lambda x: True, 4, shrink_int).trace == ()
        assert iterate_while(lambda x: True, 4, shrink_int, keep_trace=True).trace == (2, 1, 0)

    def test_loop_is_deterministic(self):
        first = iterate_while(lambda x: x % 3 != 0, 1000, shrink_int)
        second = iterate_while(lambda x: x % 3 != 0, 1000, shrink_int)

        assert first == second


class TestShrinkCounterexample:
    """Test shrinking a value that falsifies a property."""

    def test_hello_prefix_shrinks_to_empty_string(self):
        """The empty string still fails, so every character is dropped."""
        result = shrink_counterexample(
            lambda s: s.startswith("Hello"), "QWERTYUIOPASDFGHJKLZ", shrink_sequence
        )

        assert result.value == ""
        assert result.steps == 20

    def test_stops_at_last_failing_integer(self):
        """Property x < 10 fails for 100; 12 is the smallest failing value on the chain."""
        result = shrink_counterexample(lambda x: x < 10, 100, shrink_int)

        assert result.value == 12

    def test_budget_is_forwarded(self):
        result = shrink_counterexample(lambda x: False, 0, lambda x: x + 1, max_steps=3)

        assert result.value == 3
        assert result.exhausted is True
