# utils/dimacs_file.py
# This file is part of Clausify - A Propositional CNF and DIMACS Toolkit
#
# DIMACS CNF file reader and writer

from pathlib import Path
from typing import List, Optional

from core.cnf_formula import CNFFormula
from core.dimacs import DEFAULT_COMMENTS, decode, encode_formula
from core.exceptions import DIMACSFormatError
from core.symbol_table import SymbolTable
from utils.logger import get_logger


def mapping_comments(symbol_table: SymbolTable) -> List[str]:
    """Comment lines recording which symbol each variable number stands for.

    Example:
        >>> table = SymbolTable(); table.intern("p")
        1
        >>> mapping_comments(table)
        ['p -> 1']
    """
    return [f"{symbol} -> {identifier}" for symbol, identifier in symbol_table.items()]


def write_dimacs(
    filepath: str, formula: CNFFormula, symbol_table: Optional[SymbolTable] = None
) -> None:
    """Write a clause list to a DIMACS CNF file.

    The file starts with the default comment lines, followed by the variable
    mapping when a symbol table is given.

    Args:
        filepath: Destination path; an existing file is overwritten
        formula: Clauses to write
        symbol_table: Numbering the clauses were extracted with

    Raises:
        DIMACSFormatError: If the file cannot be written or the formula holds
            out-of-range literals
    """
    logger = get_logger()

    comments = list(DEFAULT_COMMENTS)
    if symbol_table is not None:
        comments.extend(mapping_comments(symbol_table))

    text = encode_formula(formula, comments)

    try:
        with open(Path(filepath), "w", encoding="utf-8") as file:
            file.write(text)
    except OSError as e:
        raise DIMACSFormatError(f"Cannot open file {filepath}: {e}")

    logger.dimacs_saved(filepath)


def read_dimacs(filepath: str) -> CNFFormula:
    """Read a DIMACS CNF file.

    Args:
        filepath: Path to the DIMACS file

    Returns:
        Decoded clause list

    Raises:
        DIMACSFormatError: If the file is missing, unreadable or malformed
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise DIMACSFormatError(f"DIMACS file not found: {filepath}")

    logger.debug(f"Reading DIMACS file: {filepath}")

    try:
        with open(path, "r", encoding="utf-8") as file:
            text = file.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DIMACSFormatError(f"Cannot open file {filepath}: {e}")

    formula = decode(text)
    logger.dimacs_loaded(filepath, formula.num_vars, formula.num_clauses)
    return formula


def validate_dimacs_file(filepath: str) -> None:
    """Check that a file holds well-formed DIMACS CNF.

    Args:
        filepath: Path to the DIMACS file to validate

    Raises:
        DIMACSFormatError: If validation fails
    """
    logger = get_logger()
    logger.debug(f"Validating DIMACS file: {filepath}")

    try:
        formula = read_dimacs(filepath)
        logger.debug(f"DIMACS validation successful: {formula.num_clauses} clauses")
    except DIMACSFormatError as e:
        logger.debug(f"DIMACS validation failed: {e}")
        raise
