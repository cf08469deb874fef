# tests/core_tests/test_verdict_model.py
# This file is part of Tribunal - A cause-effect conformance harness
#
# Test suite for verdict variants and the outcome record

"""Test suite for the Verdict union and Outcome record.

Covers variant equality, terminality, string forms, and the outcome
accessors used by the strict wrapper and the command-line runner.
"""

import pytest
from core import Continue, Done, Halt, Outcome, Verdict, VerdictKind


class TestVerdictVariants:
    """Test cases for the three verdict variants."""

    @pytest.mark.parametrize(
        "verdict, kind, terminal",
        [
            (Continue(1), VerdictKind.CONTINUE, False),
            (Halt("why"), VerdictKind.HALT, True),
            (Done(), VerdictKind.DONE, True),
        ],
    )
    def test_kind_and_terminality(self, verdict, kind, terminal):
        assert verdict.kind is kind
        assert verdict.is_terminal() is terminal
        assert isinstance(verdict, Verdict)

    def test_done_instances_are_equal(self):
        assert Done() == Done()
        assert hash(Done()) == hash(Done())

    def test_equality_compares_variant_and_payload(self):
        assert Halt("x") == Halt("x")
        assert Halt("x") != Halt("y")
        assert Halt("x") != Continue("x")
        assert Continue(3) != Done()

    def test_verdicts_are_immutable(self):
        verdict = Continue(1)
        with pytest.raises(AttributeError):
            verdict.next_input = 2

    @pytest.mark.parametrize(
        "verdict, text",
        [
            (Continue("Push(1)"), "Continue(Push(1))"),
            (Halt("expected 3, got 0"), "Halt(expected 3, got 0)"),
            (Done(), "Done"),
        ],
    )
    def test_string_forms(self, verdict, text):
        assert str(verdict) == text

    def test_kind_prints_its_name(self):
        assert str(VerdictKind.HALT) == "HALT"


class TestOutcome:
    """Test cases for the Outcome record."""

    def test_decompose_returns_verdict_and_calls(self):
        outcome = Outcome(Halt("late"), 4)
        verdict, calls = outcome.decompose()
        assert verdict == Halt("late")
        assert calls == 4

    def test_done_outcome_flags(self):
        outcome = Outcome(Done(), 7)
        assert outcome.is_done
        assert not outcome.is_halt
        assert not outcome.is_defective
        assert outcome.fault is None

    def test_halt_outcome_exposes_fault(self):
        outcome = Outcome(Halt("too many reactions"), 1)
        assert outcome.is_halt
        assert outcome.fault == "too many reactions"

    def test_terminal_continue_is_defective(self):
        outcome = Outcome(Continue("x"), 2)
        assert outcome.is_defective
        assert not outcome.is_done
        assert outcome.fault is None

    def test_outcomes_compare_by_value(self):
        assert Outcome(Done(), 3) == Outcome(Done(), 3)
        assert Outcome(Done(), 3) != Outcome(Done(), 4)

    def test_string_form(self):
        assert str(Outcome(Done(), 7)) == "Done after 7 call(s)"
