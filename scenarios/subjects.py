# scenarios/subjects.py

"""
Reference subjects for the bundled scenarios. Each stack factory returns a
fresh stateful callable; ``Bisector`` is the function-object flavour of a
subject. Most of them are deliberately wrong in a specific way.
"""

from __future__ import annotations
from typing import Callable, Dict, List

from .guessing import Guess, GuessChange, Start, TooHigh, TooLow
from .stack import Pop, Push, StackChange, Value

StackSubject = Callable[[StackChange], List[StackChange]]


def _reject(change: StackChange) -> List[StackChange]:
    raise ValueError(f"{change} is a reaction, not a stimulus")


def mirror_stack() -> StackSubject:
    """Correct stack reporting every popped value immediately."""
    stack: List[int] = []

    def mirror_stack(change: StackChange) -> List[StackChange]:
        if isinstance(change, Push):
            stack.append(change.value)
            return []
        if isinstance(change, Pop):
            return [Value(stack.pop() if stack else None)]
        return _reject(change)

    return mirror_stack


def discard() -> StackSubject:
    """Never reacts at all."""

    def discard(change: StackChange) -> List[StackChange]:
        return []

    return discard


def dumb() -> StackSubject:
    """Answers every push with a placeholder and every pop with 0."""

    def dumb(change: StackChange) -> List[StackChange]:
        if isinstance(change, Push):
            return [Value(None)]
        if isinstance(change, Pop):
            return [Value(0)]
        return _reject(change)

    return dumb


def zero_smart() -> StackSubject:
    """Tracks the stack depth but reports 0 for every pop."""
    depth = 0

    def zero_smart(change: StackChange) -> List[StackChange]:
        nonlocal depth
        if isinstance(change, Push):
            depth += 1
            return []
        if isinstance(change, Pop):
            if depth == 0:
                return [Value(None)]
            depth -= 1
            return [Value(0)]
        return _reject(change)

    return zero_smart


def placeholder() -> StackSubject:
    """Answers every pop with a placeholder and never delivers."""

    def placeholder(change: StackChange) -> List[StackChange]:
        if isinstance(change, Push):
            return []
        if isinstance(change, Pop):
            return [Value(None)]
        return _reject(change)

    return placeholder


def irrelevant() -> StackSubject:
    """Answers pops with a stimulus of its own."""

    def irrelevant(change: StackChange) -> List[StackChange]:
        if isinstance(change, Push):
            return []
        if isinstance(change, Pop):
            return [Push(42)]
        return _reject(change)

    return irrelevant


def lazy() -> StackSubject:
    """Stalls with placeholders and only flushes once its pops run out."""
    stack: List[StackChange] = []
    count = 0

    def lazy(change: StackChange) -> List[StackChange]:
        nonlocal stack, count
        if isinstance(change, Push):
            stack.append(Value(change.value))
            count += 1
            return []
        if isinstance(change, Pop):
            if count > 0:
                count -= 1
                return [Value(None)]
            flushed, stack = stack[::-1], []
            return flushed
        return _reject(change)

    return lazy


STACK_SUBJECTS: Dict[str, Callable[[], StackSubject]] = {
    "mirror_stack": mirror_stack,
    "discard": discard,
    "dumb": dumb,
    "zero_smart": zero_smart,
    "placeholder": placeholder,
    "irrelevant": irrelevant,
    "lazy": lazy,
}


class Bisector:
    """Guessing-game player halving the candidate range after every hint."""

    def __init__(self, lower: int = -1000, upper: int = 1000):
        self.lower = lower
        self.upper = upper
        self.guess = 0

    def __call__(self, change: GuessChange) -> List[GuessChange]:
        if isinstance(change, TooLow):
            self.lower = self.guess
        elif isinstance(change, TooHigh):
            self.upper = self.guess
        elif not isinstance(change, Start):
            raise ValueError(f"{change} is a reaction, not a hint")
        # midpoint truncated toward zero, also for negative ranges
        self.guess = int((self.lower + self.upper) / 2)
        return [Guess(self.guess)]
