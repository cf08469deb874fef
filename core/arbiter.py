# core/arbiter.py
# This file is part of Tribunal - A cause-effect conformance harness
#
# Arbiter contract and the structural type of a subject under test

"""The two collaborators of the driving loop.

An arbiter is the decision authority of a test. It hides a reference model
of how the subject should behave, chooses the next stimulus, and checks the
subject's reactions. It is parameterized over three types:

- Change ``M``: the shared vocabulary of stimuli and reactions
- Fault ``S``: diagnostic data describing a rejected reaction
- Error: the exception class the arbiter raises when its own bookkeeping
  is broken (``Arbiter.Error``, ``ArbiterError`` unless overridden)

A subject is any callable that maps one change to an ordered, possibly empty
sequence of changes. It may keep private state between calls.

Example:
    >>> class Countdown(Arbiter[int, str]):
    ...     def __init__(self, start):
    ...         self.left = start
    ...     def next(self, outputs):
    ...         if any(o != self.left + 1 for o in outputs):
    ...             return Halt(f"expected {self.left + 1}, got {outputs}")
    ...         if self.left == 0:
    ...             return Done()
    ...         self.left -= 1
    ...         return Continue(self.left)
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import ClassVar, Generic, List, Protocol, Sequence, Type, TypeVar

from .exceptions import ArbiterError
from .verdict import Verdict

M = TypeVar("M")
S = TypeVar("S")
M_contra = TypeVar("M_contra", contravariant=True)


class Subject(Protocol[M_contra]):
    """Structural type of the object under test.

    Closures, bound methods and instances defining ``__call__`` all qualify.
    Index 0 of the returned sequence is the earliest reaction.
    """

    def __call__(self, change: M_contra, /) -> Sequence:
        ...


class Arbiter(ABC, Generic[M, S]):
    """Decision authority driving a cause-effect test.

    Subclasses implement ``next`` and may override ``Error`` with their own
    exception class. An arbiter instance is consumed by a single run.
    """

    Error: ClassVar[Type[Exception]] = ArbiterError

    @abstractmethod
    def next(self, outputs: List[M]) -> Verdict[M, S]:
        """Judge the subject's latest reactions and pick the next step.

        The driving loop passes an empty list on the very first call. After
        that, ``outputs`` holds everything the subject returned for the most
        recent input, earliest first.

        Implementations must:

        1. return ``Halt(fault)`` if the outputs violate the expectations,
        2. otherwise update their state and return ``Continue(next_input)``
           while stimulus remains,
        3. otherwise return ``Done()``,
        4. raise ``self.Error`` if their own invariants are violated.

        Args:
            outputs: Reactions produced since the previous call

        Returns:
            The verdict for this turn

        Raises:
            Error: The arbiter's internal bookkeeping is inconsistent
        """
        raise NotImplementedError

    @property
    def name(self) -> str:
        return type(self).__name__
