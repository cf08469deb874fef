# tests/scenario_tests/test_guessing_game.py
# This file is part of Tribunal - A cause-effect conformance harness
#
# Test suite for the guessing-game arbiter

"""Test suite for the guessing game.

This arbiter is strict about liveness, the opposite policy to the stack
arbiter: a turn without a guess is a fault.
"""

import pytest
from core import Done, Halt, judge, judge_strict, SubjectFault
from scenarios.guessing import Guess, GuessingArbiter, Start, TooHigh, TooLow
from scenarios.subjects import Bisector


class TestGuessingGame:
    """Test cases for GuessingArbiter against several players."""

    def test_01_bisector_finds_target(self):
        outcome = judge(GuessingArbiter(42), Bisector())
        assert outcome.verdict == Done()
        assert outcome.calls == 9

    def test_02_bisector_passes_strictly(self):
        assert judge_strict(GuessingArbiter(42), Bisector()) == 9

    def test_03_first_stimulus_is_start(self):
        arbiter = GuessingArbiter(42)
        assert arbiter.next([]).next_input == Start()

    def test_04_hints_follow_guesses(self):
        arbiter = GuessingArbiter(42)
        arbiter.next([])
        assert arbiter.next([Guess(0)]).next_input == TooLow()
        assert arbiter.next([Guess(100)]).next_input == TooHigh()
        assert arbiter.next([Guess(42)]) == Done()

    def test_05_silent_player_is_rejected(self):
        outcome = judge(GuessingArbiter(42), lambda hint: [])
        assert outcome.verdict == Halt("You can't just pass a turn.")
        assert outcome.calls == 1

    def test_06_stubborn_player_runs_out_of_guesses(self):
        outcome = judge(GuessingArbiter(42), lambda hint: [Guess(0)])
        assert outcome.verdict == Halt("It was 42.")
        assert outcome.calls == 11

    def test_07_only_latest_reaction_counts(self):
        outcome = judge(GuessingArbiter(7), lambda hint: [Guess(1), Guess(7)])
        assert outcome.verdict == Done()
        assert outcome.calls == 1

    def test_08_hint_as_reaction_is_invalid(self):
        outcome = judge(GuessingArbiter(7), lambda hint: [TooLow()])
        assert outcome.verdict == Halt("Invalid reaction type for agent: TooLow")

    def test_09_guess_limit_is_configurable(self):
        with pytest.raises(SubjectFault, match="It was 42."):
            judge_strict(GuessingArbiter(42, max_guesses=3), Bisector())

    def test_10_bisector_rejects_guesses_as_input(self):
        with pytest.raises(ValueError):
            Bisector()(Guess(3))

    @pytest.mark.parametrize(
        "lower, upper, first_guess",
        [(-7, 0, -3), (-1000, -1, -500), (0, 7, 3)],
    )
    def test_11_bisector_truncates_midpoint_toward_zero(self, lower, upper, first_guess):
        assert Bisector(lower, upper)(Start()) == [Guess(first_guess)]

    def test_12_bisector_finds_negative_target(self):
        outcome = judge(GuessingArbiter(-42), Bisector())
        assert outcome.verdict == Done()
        assert outcome.calls == 9
