# scenarios/__init__.py

"""
Concrete arbiters and subjects exercising the core protocol:
a reference-stack comparison that tolerates delayed reactions, and a
number-guessing game that does not. These are collaborators of the core,
not part of it.
"""

from .stack import StackArbiter, StackChange, Push, Pop, Value, SCENARIO_1
from .guessing import GuessingArbiter, GuessChange, Start, TooLow, TooHigh, Guess
from .subjects import STACK_SUBJECTS, Bisector

__all__ = [
    "StackArbiter",
    "StackChange",
    "Push",
    "Pop",
    "Value",
    "SCENARIO_1",
    "GuessingArbiter",
    "GuessChange",
    "Start",
    "TooLow",
    "TooHigh",
    "Guess",
    "STACK_SUBJECTS",
    "Bisector",
]
