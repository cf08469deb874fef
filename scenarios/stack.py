# scenarios/stack.py

"""
Stack scenario
==============

Arbiter that checks a subject against a reference LIFO stack. The arbiter
pushes and pops according to a script; the subject must report each popped
value with a ``Value`` reaction, in pop order, but may report late: reactions
can be withheld for several turns and then delivered together.

``Value(None)`` is a placeholder a subject may return while it is still
holding on to a value. Comparison stops there and the expectation stays
queued.
"""

from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, List, Optional

from core import Arbiter, ArbiterError, Continue, Done, Halt, Verdict


@dataclass(frozen=True, slots=True)
class StackChange:
    """Shared vocabulary of the stack scenario."""


@dataclass(frozen=True, slots=True)
class Push(StackChange):
    value: int

    def __str__(self) -> str:
        return f"Push({self.value})"


@dataclass(frozen=True, slots=True)
class Pop(StackChange):
    def __str__(self) -> str:
        return "Pop"


@dataclass(frozen=True, slots=True)
class Value(StackChange):
    value: Optional[int] = None

    def __str__(self) -> str:
        return f"Value({self.value})"


SCENARIO_1: List[StackChange] = [
    Push(1), Push(2), Push(3),
    Pop(), Pop(),
    Push(4),
    Pop(),
]


class StackArbiter(Arbiter[StackChange, str]):
    """Judges a subject against a scripted sequence of pushes and pops."""

    def __init__(self, scenario: Iterable[StackChange] = ()):
        self.scenario: Deque[StackChange] = deque(scenario)
        self.ref_impl: List[int] = []
        # values popped from the reference stack that the subject still owes
        self.expect: Deque[int] = deque()

    @classmethod
    def from_script(cls, text: str) -> "StackArbiter":
        from parser import parse_scenario

        return cls(parse_scenario(text))

    def next(self, outputs: List[StackChange]) -> Verdict[StackChange, str]:
        fault = self._check(outputs)
        if fault is not None:
            return Halt(fault)

        if not self.scenario:
            # Outstanding expectations are fine: the subject may still be
            # buffering and there is no flush to force them out.
            return Done()

        act = self.scenario.popleft()
        if isinstance(act, Push):
            self.ref_impl.append(act.value)
        elif isinstance(act, Pop):
            if not self.ref_impl:
                raise ArbiterError("bad sim: more pops than pushes")
            self.expect.append(self.ref_impl.pop())
        else:
            raise ArbiterError(f"bad sim: {type(act).__name__} in scenario")
        return Continue(act)

    def _check(self, outputs: List[StackChange]) -> Optional[str]:
        """Match reactions against the expectation queue.

        Returns a fault message, or None after dropping the matched
        expectations.
        """
        if len(outputs) > len(self.expect):
            return "too many reactions"

        matched = 0
        for reaction, expected in zip(outputs, self.expect):
            if not isinstance(reaction, Value):
                return "undefined response from stack"
            if reaction.value is None:
                break
            if reaction.value != expected:
                return f"expected {expected}, got {reaction.value}"
            matched += 1

        for _ in range(matched):
            self.expect.popleft()
        return None
