# core/__init__.py
# This file is part of Clausify - A Propositional CNF and DIMACS Toolkit
#
# Core module public API for clause extraction and DIMACS encoding

"""Core components for working with formulas in Conjunctive Normal Form.

This module turns CNF-shaped formula trees into clause lists over integer
variables, checks and evaluates them, and converts clause lists to and from
the DIMACS CNF text format used by SAT solvers.

Primary Components:
    SymbolTable: Caller-owned symbol <-> integer numbering for one operation
    CNFFormula: Clause list plus variable count
    extract_clauses / extract_literals: Clause and literal views of a CNF tree
    tree_to_dimacs: CNF tree -> CNFFormula
    is_valid_cnf / check_validity: Complementary-literal tautology check
    evaluate / evaluate_clause_set: Truth value under an assignment
    encode / decode: DIMACS text codec
    Verdict: Three-valued check result

Example:
    >>> from parser import parse_and_cnf
    >>> from core import SymbolTable, tree_to_dimacs, encode_formula
    >>> table = SymbolTable()
    >>> formula = tree_to_dimacs(parse_and_cnf("(p+q)"), table)
    >>> print(encode_formula(formula, comments=()), end="")
    p cnf 2 1
    1 2 0
"""

from .symbol_table import SymbolTable
from .cnf_formula import CNFFormula
from .clause_engine import (
    extract_clauses,
    extract_literals,
    tree_to_dimacs,
    is_valid_cnf,
    check_validity,
    evaluate,
    evaluate_clause_set,
    assignment_by_id,
)
from .dimacs import encode, encode_formula, decode
from .verdict import Verdict
from .exceptions import (
    ClausifyError,
    UnboundVariableError,
    MalformedClauseError,
    DIMACSFormatError,
    UnknownIdentifierError,
)

__all__ = [
    "SymbolTable",
    "CNFFormula",
    "extract_clauses",
    "extract_literals",
    "tree_to_dimacs",
    "is_valid_cnf",
    "check_validity",
    "evaluate",
    "evaluate_clause_set",
    "assignment_by_id",
    "encode",
    "encode_formula",
    "decode",
    "Verdict",
    "ClausifyError",
    "UnboundVariableError",
    "MalformedClauseError",
    "DIMACSFormatError",
    "UnknownIdentifierError",
]

__version__ = "1.0.0"
__description__ = "Core components for CNF clause handling and DIMACS encoding"
