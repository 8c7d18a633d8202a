# parser/__init__.py
# This file is part of Clausify - A Propositional CNF and DIMACS Toolkit
#
# Formula parsing and transformation components for propositional logic

"""Propositional formula parsing and CNF normalization.

This module provides parsing and rendering of propositional formulas over the
connectives NOT (``~``), AND (``*``), OR (``+``) and IMPLIES (``>``) in both
infix and prefix notation, and the rewrite pipeline that brings a parsed tree
into Conjunctive Normal Form.

Core Functions:
    parse_infix: Converts fully parenthesized infix text into an AST
    parse_prefix: Converts whitespace-separated prefix text into an AST
    to_prefix: Renders an AST in prefix notation
    to_infix: Renders an AST as fully parenthesized infix text
    parse_and_cnf: Parses infix text and converts the tree to CNF

Grammar Features:
    - At most one binary operator per parenthesized group (no precedence)
    - NOT applies to the whole following expression
    - Missing closing parentheses at the end of input are tolerated

Example:
    >>> from parser import parse_infix, to_prefix
    >>> to_prefix(parse_infix("(p+q)"))
    '+ p q'
"""

from .exceptions import ParseError
from .grammar import _InfixParser, _PrefixParser
from .tree_ops import to_prefix, to_infix
from .cnf_transformer import convert_to_cnf
from utils.logger import get_logger


def parse_infix(source: str):
    """Parse infix formula string into Abstract Syntax Tree representation.

    Uses a fresh parser instance for each invocation so no state is carried
    between calls.

    Args:
        source: Infix formula string, e.g. ``((p>q)*(~r))``

    Returns:
        Root AST node representing the parsed formula structure

    Raises:
        ParseError: Formula syntax is malformed
    """
    logger = get_logger()
    logger.debug(f"Parsing infix formula: {source}")

    parser = _InfixParser()

    try:
        return parser.parse(source)

    except ParseError:
        logger.debug("ParseError encountered during infix parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def parse_prefix(source: str):
    """Parse prefix formula string into Abstract Syntax Tree representation.

    Each token is an operator symbol or a variable; operators consume one
    (``~``) or two (``*``, ``+``, ``>``) following subtrees.

    Args:
        source: Whitespace-separated prefix formula, e.g. ``> p q``

    Returns:
        Root AST node representing the parsed formula structure

    Raises:
        ParseError: Too few operands, leftover tokens or illegal characters
    """
    logger = get_logger()
    logger.debug(f"Parsing prefix formula: {source}")

    parser = _PrefixParser()

    try:
        return parser.parse(source)

    except ParseError:
        logger.debug("ParseError encountered during prefix parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def parse_and_cnf(source: str):
    """Parse an infix formula and convert it to Conjunctive Normal Form.

    Args:
        source: Infix formula string

    Returns:
        Root AST node of the CNF-shaped tree

    Raises:
        ParseError: Formula parsing fails
    """
    logger = get_logger()
    logger.debug(f"Parsing and transforming formula to CNF: {source}")

    ast = parse_infix(source)
    return convert_to_cnf(ast)


__all__ = [
    "parse_infix",
    "parse_prefix",
    "to_prefix",
    "to_infix",
    "parse_and_cnf",
    "ParseError",
]

__version__ = "1.0.0"
__description__ = "Propositional formula parsing and CNF transformation components"
