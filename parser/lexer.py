# parser/lexer.py
# This file is part of Tribunal - A cause-effect conformance harness
#
# Lexical analyzer for stack scenario scripts using SLY

"""Lexical analyzer for stack scenario scripts.

Breaks a script such as ``push 1, push(2); Pop`` into tokens for the
parser. Keywords accept a leading capital so that scripts can be written
in the same spelling as the change types they produce.

Supported Tokens:
- Keywords: push, pop (or Push, Pop)
- Integers: optionally negative
- Punctuation: ( ) and the separators , ;
- Comments: '#' to end of line, ignored
- Whitespace and newlines: ignored (newlines counted for error messages)
"""

from sly import Lexer
from utils.logger import get_logger


class ScenarioLexer(Lexer):
    """SLY-based lexer for scenario scripts.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "PUSH",
        "POP",
        "NUMBER",
        "LPAREN",
        "RPAREN",
        "SEP",
    }

    ignore = " \t\r"
    ignore_comment = r"\#[^\n]*"

    PUSH = r"[Pp]ush"
    POP = r"[Pp]op"
    LPAREN = r"\("
    RPAREN = r"\)"
    SEP = r"[,;]"

    @_(r"-?\d+")
    def NUMBER(self, t):
        t.value = int(t.value)
        return t

    @_(r"\n+")
    def ignore_newline(self, t):
        self.lineno += len(t.value)

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ValueError: Always raised with character, line and position
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        # Skip the illegal character
        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' at line {self.lineno}, "
            f"position {error_pos}"
        )
