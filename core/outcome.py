# core/outcome.py
# This file is part of Tribunal - A cause-effect conformance harness
#
# Immutable record of a completed run

from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Optional, Tuple, TypeVar

from .verdict import Verdict, VerdictKind

M = TypeVar("M")
S = TypeVar("S")


@dataclass(frozen=True, slots=True)
class Outcome(Generic[M, S]):
    """Final result of one run of the driving loop.

    ``calls`` is diagnostic: a suspiciously low count means the arbiter
    stopped early rather than the subject passing every check.

    Attributes:
        verdict: Terminal verdict, ``Done`` or ``Halt``. A ``Continue`` here
            means the run was cut short and indicates an arbiter defect.
        calls: Number of inputs delivered to the subject
    """

    verdict: Verdict[M, S]
    calls: int

    def decompose(self) -> Tuple[Verdict[M, S], int]:
        return self.verdict, self.calls

    @property
    def is_done(self) -> bool:
        return self.verdict.kind is VerdictKind.DONE

    @property
    def is_halt(self) -> bool:
        return self.verdict.kind is VerdictKind.HALT

    @property
    def is_defective(self) -> bool:
        return self.verdict.kind is VerdictKind.CONTINUE

    @property
    def fault(self) -> Optional[S]:
        """Payload of a ``Halt`` verdict, None for any other verdict."""
        return getattr(self.verdict, "fault", None)

    def __str__(self) -> str:
        return f"{self.verdict} after {self.calls} call(s)"
