# parser/__init__.py
# This file is part of Tribunal - A cause-effect conformance harness
#
# Scenario script parsing for the stack arbiter

"""Scenario scripts for the stack arbiter.

A scenario script lists the stimuli a ``StackArbiter`` delivers, one
``push N`` or ``pop`` step at a time:

    # three pushes, two pops
    push 1, push 2, push 3
    pop; pop
    Push(4) Pop

Core Functions:
    parse_scenario: Converts a script into a list of stack stimuli
    load_scenario: Reads and parses a script file

Example:
    >>> from parser import parse_scenario
    >>> parse_scenario("push 1, pop")
    [Push(value=1), Pop()]
"""

from pathlib import Path
from typing import List, Union

from .exceptions import ParseError
from .grammar import _ScenarioParser
from utils.logger import get_logger


def parse_scenario(source: str) -> List:
    """Parse a scenario script into stack stimuli.

    Uses a fresh parser instance for each invocation.

    Args:
        source: Scenario script text

    Returns:
        List of ``Push`` and ``Pop`` changes in script order

    Raises:
        ParseError: Script is empty or malformed
    """
    logger = get_logger()
    logger.debug(f"Parsing scenario: {' '.join(source.split())}")

    return _ScenarioParser().parse(source)


def load_scenario(path: Union[str, Path]) -> List:
    """Read a scenario script file and parse it.

    Args:
        path: Path to the script file

    Returns:
        List of ``Push`` and ``Pop`` changes in script order

    Raises:
        FileNotFoundError: Script file does not exist
        ParseError: Script is empty or malformed
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    get_logger().debug(f"Loaded scenario file: {path}")
    return parse_scenario(text)


__all__ = ["parse_scenario", "load_scenario", "ParseError"]
