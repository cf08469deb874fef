# core/driver.py
# This file is part of Tribunal - A cause-effect conformance harness
#
# Driving loop alternating control between an arbiter and its subject

"""Driving loop of a cause-effect test.

The loop is the only control-flow authority of a run and knows nothing about
the meaning of the changes it passes around. It alternates between the
arbiter and the subject:

    outputs, calls = [], 0
    loop:
        verdict = arbiter.next(outputs)
        Continue(x)   -> outputs = subject(x); calls += 1
        Halt / Done   -> return Outcome(verdict, calls)
        arbiter error -> propagate

Subjects are allowed to delay and batch their reactions: a turn may return
nothing and a later turn several reactions at once. Whether that is
acceptable is entirely the arbiter's decision; the loop never flushes,
retries, or inspects reactions.
"""

from typing import List, Optional, TypeVar

from utils.logger import get_logger
from .arbiter import Arbiter, Subject
from .exceptions import ArbiterDefect, ArbiterFailure, SubjectFault
from .outcome import Outcome
from .verdict import Verdict, VerdictKind

M = TypeVar("M")
S = TypeVar("S")


def _subject_name(subject: Subject) -> str:
    return getattr(subject, "__name__", None) or type(subject).__name__


def judge(
    arbiter: Arbiter[M, S],
    subject: Subject[M],
    *,
    max_calls: Optional[int] = None,
) -> Outcome[M, S]:
    """Run a subject against an arbiter until a terminal verdict.

    The first call to ``arbiter.next`` always receives an empty list. Each
    later call receives a fresh list holding exactly what the subject
    returned for the previous input.

    The loop has no bound of its own: an arbiter that never stops makes the
    run diverge. ``max_calls`` is an opt-in guard for callers that cannot
    trust their arbiter. Once the subject has been called ``max_calls``
    times, a further ``Continue`` ends the run with that ``Continue`` as the
    outcome's verdict, without delivering its input.

    Args:
        arbiter: Decision authority; consumed by this run
        subject: Callable under test
        max_calls: Optional limit on subject invocations

    Returns:
        Outcome holding the terminal verdict and the number of subject calls

    Raises:
        arbiter.Error: The arbiter failed internally; no outcome is produced
        TypeError: The arbiter returned something other than a Verdict
    """
    logger = get_logger()
    logger.run_start(arbiter.name, _subject_name(subject))

    outputs: List[M] = []
    calls = 0

    while True:
        try:
            verdict = arbiter.next(outputs)
        except arbiter.Error as exc:
            logger.arbiter_failure(arbiter.name, exc)
            raise

        # the bare base class carries no kind
        if not isinstance(verdict, Verdict) or type(verdict) is Verdict:
            raise TypeError(
                f"{arbiter.name}.next returned {verdict!r}, expected a Verdict"
            )

        if verdict.kind is not VerdictKind.CONTINUE:
            logger.verdict_reached(verdict, calls)
            return Outcome(verdict, calls)

        if max_calls is not None and calls >= max_calls:
            logger.call_limit_reached(max_calls, verdict)
            return Outcome(verdict, calls)

        stimulus = verdict.next_input
        outputs = list(subject(stimulus))
        calls += 1
        logger.turn(calls, stimulus, outputs)


def judge_strict(
    arbiter: Arbiter[M, S],
    subject: Subject[M],
    *,
    max_calls: Optional[int] = None,
) -> int:
    """Run ``judge`` and turn anything but ``Done`` into an exception.

    Meant for test code that wants a hard failure instead of an outcome to
    inspect.

    Args:
        arbiter: Decision authority; consumed by this run
        subject: Callable under test
        max_calls: Optional limit on subject invocations, as for ``judge``

    Returns:
        Number of subject calls of the successful run

    Raises:
        SubjectFault: The run ended with ``Halt``
        ArbiterDefect: The run ended with ``Continue``
        ArbiterFailure: The arbiter raised its internal error
    """
    try:
        outcome = judge(arbiter, subject, max_calls=max_calls)
    except arbiter.Error as exc:
        raise ArbiterFailure(exc) from exc

    if outcome.is_done:
        return outcome.calls
    if outcome.is_halt:
        raise SubjectFault(outcome)
    raise ArbiterDefect(outcome)
