# core/exceptions.py
# This file is part of Tribunal - A cause-effect conformance harness
#
# Internal-error type for arbiters and strict-mode judgment failures

"""Exceptions raised by arbiters and by the strict driving loop.

Two families live here. ``ArbiterError`` is what an arbiter raises when its
own bookkeeping breaks down; the plain driver lets it propagate untouched.
``JudgmentFailure`` and its three subclasses are raised only by
``judge_strict`` and keep the failure categories apart:

- ``SubjectFault``: the subject was rejected with a ``Halt``
- ``ArbiterDefect``: the run ended on a ``Continue``
- ``ArbiterFailure``: the arbiter raised its internal error
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .outcome import Outcome


class ArbiterError(Exception):
    """Default internal-error type of an arbiter.

    Raised when an arbiter's reference model reaches a state it cannot
    express as a verdict, e.g. a scripted transition that is impossible on
    the model. Distinct from a subject fault, which is reported as ``Halt``.
    """

    pass


class JudgmentFailure(AssertionError):
    """Base class for strict-mode failures.

    Subclasses ``AssertionError`` so that test runners report a rejected
    subject as a failing test rather than an erroring one.

    Attributes:
        calls: Number of subject invocations before the failure, or None
            when the arbiter failed internally
    """

    prefix = "judgment failure"

    def __init__(self, detail: str, calls: Optional[int] = None):
        self.detail = detail
        self.calls = calls
        if calls is None:
            message = f"{self.prefix}: {detail}"
        else:
            message = f"{self.prefix} (calls: {calls}): {detail}"
        super().__init__(message)


class SubjectFault(JudgmentFailure):
    """The arbiter halted the run because the subject misbehaved."""

    prefix = "subject fault"

    def __init__(self, outcome: "Outcome"):
        self.outcome = outcome
        self.fault: Any = outcome.fault
        super().__init__(str(self.fault), outcome.calls)


class ArbiterDefect(JudgmentFailure):
    """The run ended on a ``Continue`` verdict."""

    prefix = "arbiter defect"

    def __init__(self, outcome: "Outcome"):
        self.outcome = outcome
        super().__init__("arbiter stopped at continue", outcome.calls)


class ArbiterFailure(JudgmentFailure):
    """The arbiter raised its internal error type."""

    prefix = "arbiter failure (internal error)"

    def __init__(self, error: BaseException):
        self.error = error
        super().__init__(str(error))
