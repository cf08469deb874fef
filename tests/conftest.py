# tests/conftest.py
# This file is part of Tribunal - A cause-effect conformance harness
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Tribunal tests.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common arbiters and subjects for driver tests
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from core import Arbiter, ArbiterError, Continue, Done, Halt  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify module availability before any test runs.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import core
        import parser
        import scenarios
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


class ScriptedArbiter(Arbiter):
    """Arbiter replaying a fixed list of verdicts, recording what it was shown.

    An ``Exception`` instance in the script is raised instead of returned.
    """

    def __init__(self, script):
        self.script = list(script)
        self.seen = []

    def next(self, outputs):
        self.seen.append(outputs)
        step = self.script.pop(0)
        if isinstance(step, Exception):
            raise step
        return step


class CountingSubject:
    """Subject echoing its input a configurable number of times."""

    def __init__(self, copies: int = 1):
        self.copies = copies
        self.inputs = []

    def __call__(self, change):
        self.inputs.append(change)
        return [change] * self.copies


@pytest.fixture
def scripted_arbiter():
    """Factory for ScriptedArbiter instances."""
    return ScriptedArbiter


@pytest.fixture
def echo_subject():
    """Subject that echoes every input once."""
    return CountingSubject()


@pytest.fixture
def three_turn_script():
    """Verdict script with three inputs followed by Done."""
    return [Continue("a"), Continue("b"), Continue("c"), Done()]


@pytest.fixture
def failing_script():
    """Verdict script whose second call raises an internal error."""
    return [Continue("a"), ArbiterError("bookkeeping broken")]


@pytest.fixture
def halting_script():
    """Verdict script that halts after one input."""
    return [Continue("a"), Halt("bad echo")]
