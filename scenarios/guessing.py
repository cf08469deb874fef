# scenarios/guessing.py

"""
Guessing game
=============

The subject plays a number-guessing game: it must find a hidden target
within a bounded number of guesses, steered by "too low" / "too high"
hints. Unlike the stack arbiter this one is strict about liveness: a turn
without a guess is a fault.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List

from core import Arbiter, Continue, Done, Halt, Verdict


@dataclass(frozen=True, slots=True)
class GuessChange:
    """Shared vocabulary of the guessing game."""


@dataclass(frozen=True, slots=True)
class Start(GuessChange):
    def __str__(self) -> str:
        return "Start"


@dataclass(frozen=True, slots=True)
class TooLow(GuessChange):
    def __str__(self) -> str:
        return "TooLow"


@dataclass(frozen=True, slots=True)
class TooHigh(GuessChange):
    def __str__(self) -> str:
        return "TooHigh"


@dataclass(frozen=True, slots=True)
class Guess(GuessChange):
    value: int

    def __str__(self) -> str:
        return f"Guess({self.value})"


class GuessingArbiter(Arbiter[GuessChange, str]):
    """Hides ``target`` and answers each guess with a hint."""

    def __init__(self, target: int, max_guesses: int = 10):
        self.target = target
        self.max_guesses = max_guesses
        self.count = 0
        self.begun = False

    def next(self, outputs: List[GuessChange]) -> Verdict[GuessChange, str]:
        # The first call always comes with no reactions; open the game.
        if not self.begun:
            self.begun = True
            return Continue(Start())

        if not outputs:
            return Halt("You can't just pass a turn.")

        # Only the latest reaction counts.
        reaction = outputs[-1]
        self.count += 1
        if self.count > self.max_guesses:
            return Halt(f"It was {self.target}.")

        if not isinstance(reaction, Guess):
            return Halt(f"Invalid reaction type for agent: {reaction}")
        if reaction.value == self.target:
            return Done()
        if reaction.value < self.target:
            return Continue(TooLow())
        return Continue(TooHigh())
