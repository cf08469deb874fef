# parser/exceptions.py
# This file is part of Tribunal - A cause-effect conformance harness
#
# Custom exceptions for scenario script parsing

"""Domain-specific exceptions for scenario script processing."""


class ParseError(RuntimeError):
    """Exception raised when a scenario script cannot be parsed.

    Indicates that the input does not conform to the scenario grammar, that
    it contains characters outside the script alphabet, or that it lists no
    steps at all.
    """

    pass
