# core/exceptions.py
# This file is part of Clausify - A Propositional CNF and DIMACS Toolkit
#
# Exceptions raised by clause extraction, evaluation and the DIMACS codec

"""Domain-specific exceptions for the clause engine and DIMACS codec.

Every error here is recoverable: callers catch it, report it, and carry on.
Parsing failures live in :mod:`parser.exceptions`.
"""

from typing import Optional


class ClausifyError(Exception):
    """Base class for errors raised by the core components."""

    pass


class UnboundVariableError(ClausifyError):
    """Evaluation reached a variable the assignment does not cover.

    Attributes:
        symbol: The unassigned variable symbol or integer identifier
    """

    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"Variable '{symbol}' has no truth value in the assignment")


class MalformedClauseError(ClausifyError):
    """A clause contains something other than OR-connected literals.

    Raised when clause or literal extraction is handed a tree that is not in
    Conjunctive Normal Form.

    Attributes:
        node: The offending subtree
    """

    def __init__(self, node, reason: str = "not a literal"):
        self.node = node
        super().__init__(f"Malformed clause: '{node}' is {reason}")


class DIMACSFormatError(ClausifyError):
    """DIMACS text or file is missing, unreadable or malformed.

    Attributes:
        line_number: 1-based line of the offending input, if known
    """

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)


class UnknownIdentifierError(ClausifyError, LookupError):
    """An integer identifier was never interned in the symbol table.

    Attributes:
        identifier: The identifier that could not be resolved
    """

    def __init__(self, identifier: int):
        self.identifier = identifier
        super().__init__(f"Unknown variable identifier: {identifier}")
