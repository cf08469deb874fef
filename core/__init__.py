# core/__init__.py
# This file is part of Tribunal - A cause-effect conformance harness
#
# Core module public API for the turn-taking protocol

"""Turn-taking protocol for testing cause-effect components.

A cause-effect component (the subject) receives discrete inputs and emits
zero or more outputs; whether it is correct depends on the whole sequence
of interactions, not on any single input/output pair. This package provides
the adversarial arbiter contract and the loop that drives a subject against
it, turn by turn, until the arbiter reaches a verdict.

Primary Components:
    Arbiter: Abstract decision authority, generic over Change and Fault
    Subject: Structural type of the object under test
    Verdict: Continue / Halt / Done tagged union
    Outcome: Terminal verdict plus the number of subject calls
    judge: Driving loop returning an inspectable Outcome
    judge_strict: Driving loop raising a JudgmentFailure on anything but Done

Example:
    >>> from core import judge, Done
    >>> from scenarios.stack import StackArbiter, SCENARIO_1
    >>> from scenarios.subjects import mirror_stack
    >>> outcome = judge(StackArbiter(SCENARIO_1), mirror_stack())
    >>> outcome.verdict == Done(), outcome.calls
    (True, 7)
"""

from .arbiter import Arbiter, Subject
from .driver import judge, judge_strict
from .exceptions import (
    ArbiterDefect,
    ArbiterError,
    ArbiterFailure,
    JudgmentFailure,
    SubjectFault,
)
from .outcome import Outcome
from .verdict import Continue, Done, Halt, Verdict, VerdictKind

__all__ = [
    "Arbiter",
    "Subject",
    "judge",
    "judge_strict",
    "Outcome",
    "Verdict",
    "VerdictKind",
    "Continue",
    "Halt",
    "Done",
    "ArbiterError",
    "JudgmentFailure",
    "SubjectFault",
    "ArbiterDefect",
    "ArbiterFailure",
]

__version__ = "1.0.0"
__description__ = "Turn-taking protocol for cause-effect conformance tests"
