# core/verdict.py
# This file is part of Tribunal - A cause-effect conformance harness
#
# Three-way verdict returned by an arbiter on every turn

"""Verdicts exchanged between an arbiter and the driving loop.

A verdict is a tagged union with exactly three variants. ``Continue``
carries the next input for the subject, ``Halt`` carries the fault that
rejected the subject, and ``Done`` signals that the arbiter is satisfied.
Only ``Halt`` and ``Done`` are terminal; a ``Continue`` is consumed by the
driving loop as soon as it is returned.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, TypeVar

M = TypeVar("M")  # change: inputs and outputs of the subject
S = TypeVar("S")  # fault: why the subject was rejected


class VerdictKind(Enum):
    """Tag of a verdict variant."""

    CONTINUE = auto()
    HALT = auto()
    DONE = auto()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Verdict(Generic[M, S]):
    """Base of the verdict union. Never instantiated directly.

    Variants are frozen dataclasses, so two verdicts are equal exactly when
    they are the same variant carrying equal payloads.
    """

    @property
    def kind(self) -> VerdictKind:
        raise NotImplementedError

    def is_terminal(self) -> bool:
        """Determine whether this verdict ends a run.

        Returns:
            True for ``Halt`` and ``Done``, False for ``Continue``
        """
        return self.kind is not VerdictKind.CONTINUE


@dataclass(frozen=True, slots=True)
class Continue(Verdict[M, S]):
    """Interaction proceeds; ``next_input`` is delivered to the subject."""

    next_input: M

    @property
    def kind(self) -> VerdictKind:
        return VerdictKind.CONTINUE

    def __str__(self) -> str:
        return f"Continue({self.next_input})"


@dataclass(frozen=True, slots=True)
class Halt(Verdict[M, S]):
    """The subject produced an unacceptable reaction."""

    fault: S

    @property
    def kind(self) -> VerdictKind:
        return VerdictKind.HALT

    def __str__(self) -> str:
        return f"Halt({self.fault})"


@dataclass(frozen=True, slots=True)
class Done(Verdict[M, S]):
    """The subject satisfied the arbiter."""

    @property
    def kind(self) -> VerdictKind:
        return VerdictKind.DONE

    def __str__(self) -> str:
        return "Done"
