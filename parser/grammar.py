# parser/grammar.py
# This file is part of Clausify - A Propositional CNF and DIMACS Toolkit
#
# Infix and prefix grammars for propositional formulas

"""Grammar implementations for the two textual formula notations.

Infix notation is read by a hand-written recursive-descent parser over the
token stream produced by :class:`FormulaLexer`:

    expr    := operand (binop operand)?
    operand := VAR | '(' expr ')' | '~' expr
    binop   := '+' | '*' | '>'

The grammar is deliberately restricted. There is no operator precedence or
associativity: a group holds at most one binary operator, so formulas with
several operators must be fully parenthesized. NOT takes the whole following
expression, so ``~p+q`` reads as ``~(p+q)``. A closing parenthesis that is
missing at the end of the input is treated as implicitly present, so
``((p+q)*r`` is accepted; a ``)`` missing anywhere else is an error.

Prefix notation is read by an SLY LALR(1) parser. Operators are followed by
their operands (one for NOT, two for the binary connectives), and tokens must
be separated by whitespace where an identifier would otherwise run on:

    expr := '~' expr | '*' expr expr | '+' expr expr | '>' expr expr | VAR
"""

from typing import List, Optional

from sly import Parser
from sly.lex import Token
from .lexer import FormulaLexer
from .ast_nodes import Expr, Var, Not, And, Or, Implies
from .exceptions import ParseError
from utils.logger import get_logger

_BINARY_NODES = {
    "AND": And,
    "OR": Or,
    "IMPLIES": Implies,
}


class _InfixParser:
    """Recursive-descent parser for fully parenthesized infix formulas.

    A fresh instance should be used per input; the token buffer and cursor
    are reset on every call to :meth:`parse`.
    """

    def __init__(self):
        self._text = ""
        self._tokens: List[Token] = []
        self._pos = 0

    def parse(self, text: str) -> Expr:
        """Parse infix formula text into AST.

        Args:
            text: Infix formula string, e.g. ``((p>q)*(~r))``

        Returns:
            Root AST node representing the parsed formula

        Raises:
            ParseError: If formula is empty, has a missing operand, an
                unbalanced ``)``, or trailing input after a complete formula
        """
        logger = get_logger()
        logger.debug(f"Parsing infix formula: {text}")

        if text.strip() == "":
            raise ParseError("Input formula is empty.")

        self._text = text
        self._tokens = list(FormulaLexer().tokenize(text))
        self._pos = 0

        tree = self._expr()

        leftover = self._peek()
        if leftover is not None:
            raise ParseError(f"Unexpected token '{leftover.value}'", leftover.index)

        logger.debug(f"Successfully parsed infix formula into {type(tree).__name__}")
        return tree

    def _peek(self) -> Optional[Token]:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _advance(self) -> Token:
        tok = self._tokens[self._pos]
        self._pos += 1
        return tok

    def _expr(self) -> Expr:
        left = self._operand()

        tok = self._peek()
        if tok is not None and tok.type in _BINARY_NODES:
            self._advance()
            right = self._operand()
            return _BINARY_NODES[tok.type](left, right)

        return left

    def _operand(self) -> Expr:
        tok = self._peek()

        if tok is None:
            raise ParseError("Missing operand: unexpected end of formula", len(self._text))

        if tok.type == "VAR":
            self._advance()
            return Var(tok.value)

        if tok.type == "NOT":
            self._advance()
            return Not(self._expr())

        if tok.type == "LPAREN":
            self._advance()
            inner = self._expr()
            self._close_group(tok)
            return inner

        raise ParseError(f"Missing operand before '{tok.value}'", tok.index)

    def _close_group(self, opener: Token) -> None:
        tok = self._peek()

        if tok is None:
            # End of input closes any group still open
            get_logger().debug(
                f"Implicitly closing '(' opened at position {opener.index}"
            )
            return

        if tok.type != "RPAREN":
            raise ParseError(f"Expected ')' but found '{tok.value}'", tok.index)

        self._advance()


class _PrefixParser(Parser):
    """SLY-based LALR(1) parser for prefix (Polish) notation formulas.

    Attributes:
        tokens: Token types accepted in prefix notation; parentheses are not
            among them and are reported as unexpected tokens
    """

    tokens = {"VAR", "NOT", "AND", "OR", "IMPLIES"}

    def __init__(self):
        super().__init__()
        self._text = ""

    @_("expr")
    def start(self, p) -> Expr:
        """Start rule: complete formula is a single expression."""
        return p.expr

    @_("NOT expr")
    def expr(self, p) -> Expr:
        """Negation takes one operand."""
        return Not(p.expr)

    @_("AND expr expr")
    def expr(self, p) -> Expr:
        """Conjunction takes two operands."""
        return And(p.expr0, p.expr1)

    @_("OR expr expr")
    def expr(self, p) -> Expr:
        """Disjunction takes two operands."""
        return Or(p.expr0, p.expr1)

    @_("IMPLIES expr expr")
    def expr(self, p) -> Expr:
        """Implication takes two operands."""
        return Implies(p.expr0, p.expr1)

    @_("VAR")
    def expr(self, p) -> Expr:
        """Identifier as propositional variable."""
        return Var(p.VAR)

    def parse(self, text: str) -> Expr:
        """Parse prefix formula text into AST.

        Args:
            text: Whitespace-separated prefix formula, e.g. ``> p q``

        Returns:
            Root AST node representing the parsed formula

        Raises:
            ParseError: If formula is empty, an operator lacks operands, or
                tokens remain after a complete formula
        """
        logger = get_logger()
        logger.debug(f"Parsing prefix formula: {text}")

        if text.strip() == "":
            raise ParseError("Input formula is empty.")

        self._text = text
        tree = super().parse(FormulaLexer().tokenize(text))

        if tree is None:
            raise ParseError("Failed to parse prefix formula (syntax error).")

        logger.debug(f"Successfully parsed prefix formula into {type(tree).__name__}")
        return tree

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for EOF errors

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token:
            raise ParseError(
                f"Unexpected token '{token.value}' (type: {token.type})", token.index
            )

        raise ParseError(
            "Too few operands: unexpected end of formula", len(self._text)
        )
