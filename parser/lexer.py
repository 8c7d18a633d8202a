# parser/lexer.py
# This file is part of Clausify - A Propositional CNF and DIMACS Toolkit
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module implements tokenization of infix and prefix propositional formulas,
breaking input strings into tokens for parser consumption. The same token set
serves both notations: the infix front end uses the parentheses, the prefix
front end relies on whitespace to separate operators from identifiers.

Supported Tokens:
- Operators: ~ (NOT), * (AND), + (OR), > (IMPLIES)
- Grouping: ( )
- Identifiers: propositional variables
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from .exceptions import ParseError
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formula tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "VAR",
        "NOT",
        "AND",
        "OR",
        "IMPLIES",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    NOT = r"~"
    AND = r"\*"
    OR = r"\+"
    IMPLIES = r">"
    LPAREN = r"\("
    RPAREN = r"\)"

    # Identifier pattern: starts with letter/underscore, followed by alphanumerics/underscores
    VAR = r"[a-zA-Z_][a-zA-Z0-9_]*"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ParseError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        # Skip the illegal character
        self.index += 1

        raise ParseError(f"Illegal character '{illegal_char}'", error_pos)
