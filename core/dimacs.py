# core/dimacs.py
# This file is part of Clausify - A Propositional CNF and DIMACS Toolkit
#
# DIMACS CNF text encoder and decoder

"""Encoding and decoding of the DIMACS CNF interchange format.

Format:
    c <comment text>               zero or more comment lines
    p cnf <numVars> <numClauses>   exactly one header line
    <lit> <lit> ... 0              one line per clause

When reading, lines starting with ``c`` or ``%`` and blank lines are skipped,
a line holding only ``0`` (an empty clause) is skipped, and reading stops as
soon as ``numClauses`` clauses have been collected. Anything after the
terminating ``0`` of a clause line is ignored.
"""

from typing import List, Optional, Sequence, Tuple

from .cnf_formula import CNFFormula
from .exceptions import DIMACSFormatError
from utils.logger import get_logger

DEFAULT_COMMENTS = ("DIMACS CNF Format", "Generated from parse tree")

COMMENT_MARKERS = ("c", "%")


def encode(
    clauses: Sequence[Sequence[int]],
    num_vars: int,
    comments: Optional[Sequence[str]] = None,
) -> str:
    """Render clauses as DIMACS CNF text.

    Args:
        clauses: Clauses of nonzero literals over ``1..num_vars``
        num_vars: Variable count written to the header
        comments: Comment lines (without the ``c`` marker); defaults to
            :data:`DEFAULT_COMMENTS`

    Returns:
        DIMACS text ending with a newline

    Raises:
        DIMACSFormatError: A clause is empty, or a literal is 0 or refers
            to a variable above ``num_vars``

    Example:
        >>> print(encode([[1, 2]], 2, comments=()), end="")
        p cnf 2 1
        1 2 0
    """
    if comments is None:
        comments = DEFAULT_COMMENTS

    lines = [f"c {comment}" for comment in comments]
    lines.append(f"p cnf {num_vars} {len(clauses)}")

    for index, clause in enumerate(clauses):
        # A bare "0" line is skipped on reading
        if not clause:
            raise DIMACSFormatError(f"Clause {index} is empty")
        for literal in clause:
            if literal == 0 or abs(literal) > num_vars:
                raise DIMACSFormatError(
                    f"Clause {index} has literal {literal} outside 1..{num_vars}"
                )
        lines.append(" ".join([str(literal) for literal in clause] + ["0"]))

    get_logger().debug(f"Encoded {len(clauses)} clauses over {num_vars} variables")
    return "\n".join(lines) + "\n"


def encode_formula(formula: CNFFormula, comments: Optional[Sequence[str]] = None) -> str:
    """Render a :class:`CNFFormula` as DIMACS CNF text."""
    return encode(formula.clauses, formula.num_vars, comments)


def _parse_header(line: str, line_number: int) -> Tuple[int, int]:
    tokens = line.split()
    if len(tokens) != 4 or tokens[0] != "p" or tokens[1] != "cnf":
        raise DIMACSFormatError(
            f"Malformed header '{line}', expected 'p cnf <vars> <clauses>'", line_number
        )

    try:
        num_vars, num_clauses = int(tokens[2]), int(tokens[3])
    except ValueError:
        raise DIMACSFormatError(f"Non-numeric counts in header '{line}'", line_number)

    if num_vars < 0 or num_clauses < 0:
        raise DIMACSFormatError(f"Negative counts in header '{line}'", line_number)

    return num_vars, num_clauses


def _parse_clause(line: str, num_vars: int, line_number: int) -> List[int]:
    literals: List[int] = []

    for token in line.split():
        try:
            literal = int(token)
        except ValueError:
            raise DIMACSFormatError(f"Non-integer token '{token}'", line_number)

        if literal == 0:
            return literals

        if abs(literal) > num_vars:
            raise DIMACSFormatError(
                f"Literal {literal} exceeds declared variable count {num_vars}",
                line_number,
            )
        literals.append(literal)

    raise DIMACSFormatError("Clause is not terminated by 0", line_number)


def decode(text: str) -> CNFFormula:
    """Parse DIMACS CNF text.

    Args:
        text: DIMACS document

    Returns:
        The clauses and the header's variable count

    Raises:
        DIMACSFormatError: Missing, duplicate or malformed header, clause
            before the header, non-integer token, unterminated clause, literal
            above the variable count, or fewer clauses than declared
    """
    logger = get_logger()

    header: Optional[Tuple[int, int]] = None
    clauses: List[List[int]] = []

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith(COMMENT_MARKERS):
            continue

        if header is None:
            if not line.startswith("p"):
                raise DIMACSFormatError(
                    "Clause line found before 'p cnf' header", line_number
                )
            header = _parse_header(line, line_number)
            logger.debug(f"DIMACS header: {header[0]} variables, {header[1]} clauses")
            if header[1] == 0:
                break
            continue

        if line.startswith("p"):
            raise DIMACSFormatError("Duplicate 'p cnf' header", line_number)

        clause = _parse_clause(line, header[0], line_number)
        if not clause:
            continue

        clauses.append(clause)
        if len(clauses) == header[1]:
            break

    if header is None:
        raise DIMACSFormatError("Missing 'p cnf' header")

    num_vars, num_clauses = header
    if len(clauses) < num_clauses:
        raise DIMACSFormatError(
            f"Header declares {num_clauses} clauses but only {len(clauses)} found"
        )

    return CNFFormula(clauses=clauses, num_vars=num_vars)
