# parser/grammar.py
# This file is part of Tribunal - A cause-effect conformance harness
#
# LALR(1) grammar and parser for stack scenario scripts using SLY

"""Scenario script grammar implemented with the SLY parser generator.

Grammar:

    script : items
           | <empty>
    items  : item
           | items item
    item   : step
           | SEP
    step   : PUSH NUMBER
           | PUSH LPAREN NUMBER RPAREN
           | POP
           | POP LPAREN RPAREN

Separators are optional, so ``push 1 pop`` and ``push(1); pop;`` describe
the same scenario.
"""

from typing import List

from sly import Parser
from scenarios.stack import Pop, Push, StackChange
from .lexer import ScenarioLexer
from .exceptions import ParseError
from utils.logger import get_logger


class _ScenarioParser(Parser):
    """SLY-based LALR(1) parser producing a list of stack stimuli."""

    tokens = ScenarioLexer.tokens

    @_("items")
    def script(self, p) -> List[StackChange]:
        return [step for step in p.items if step is not None]

    @_("")
    def script(self, p) -> List[StackChange]:
        return []

    @_("item")
    def items(self, p) -> list:
        return [p.item]

    @_("items item")
    def items(self, p) -> list:
        p.items.append(p.item)
        return p.items

    @_("step")
    def item(self, p) -> StackChange:
        return p.step

    @_("SEP")
    def item(self, p) -> None:
        return None

    @_("PUSH NUMBER")
    def step(self, p) -> StackChange:
        return Push(p.NUMBER)

    @_("PUSH LPAREN NUMBER RPAREN")
    def step(self, p) -> StackChange:
        return Push(p.NUMBER)

    @_("POP")
    def step(self, p) -> StackChange:
        return Pop()

    @_("POP LPAREN RPAREN")
    def step(self, p) -> StackChange:
        return Pop()

    def parse(self, text: str) -> List[StackChange]:
        """Parse a scenario script into the stimuli it lists.

        Args:
            text: Scenario script

        Returns:
            Stimuli in script order

        Raises:
            ParseError: If the script is empty or malformed
        """
        logger = get_logger()
        logger.debug(f"Parsing scenario script ({len(text)} chars)")

        try:
            steps = super().parse(ScenarioLexer().tokenize(text))
        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

        if not steps:
            raise ParseError("Scenario script is empty.")

        logger.debug(f"Parsed {len(steps)} step(s)")
        return steps

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for end-of-input errors

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at line {token.lineno}, position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of script"

        raise ParseError(error_msg)
