# parser/exceptions.py
# This file is part of Clausify - A Propositional CNF and DIMACS Toolkit
#
# Custom exceptions for formula parsing

"""Domain-specific exceptions for propositional formula parsing.

Both the infix and the prefix front ends report malformed input through
:class:`ParseError`, optionally pointing at the character offset where the
problem was detected.
"""

from typing import Optional


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails due to syntax errors.

    Indicates that the input does not conform to the infix or prefix grammar:
    a missing operand, an unexpected or unrecognized token, or too few
    operands for an operator.

    Attributes:
        position: 0-based character offset of the offending input, if known
    """

    def __init__(self, message: str, position: Optional[int] = None):
        self.position = position
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)
