# core/clause_engine.py
# This file is part of Clausify - A Propositional CNF and DIMACS Toolkit
#
# Clause and literal extraction, validity checking and evaluation

"""Clause-level view of CNF-shaped formula trees.

A CNF tree is read as a list of clauses by stripping the ``And`` nodes at its
top, and each clause is read as a list of signed integer literals by stripping
its ``Or`` nodes. Variable numbering comes from a caller-supplied
:class:`SymbolTable`, so the same formula always numbers its variables in
first-seen order and unrelated formulas never share a numbering.

The validity check is the complementary-literal test: a clause is a tautology
when it contains some literal together with its negation, and the formula is
reported valid when every clause is. The test is purely syntactic and sound.
It is not a general validity procedure: a negative answer only means the
pairs were not found, which is why :func:`check_validity` reports it as
UNKNOWN rather than as a proof of invalidity.
"""

from __future__ import annotations
from typing import Dict, List, Mapping, Optional

from parser import ast_nodes as ast
from .cnf_formula import CNFFormula
from .exceptions import MalformedClauseError, UnboundVariableError
from .symbol_table import SymbolTable
from .verdict import Verdict
from utils.logger import get_logger


def extract_clauses(cnf_root: ast.Expr) -> List[ast.Expr]:
    """Split a CNF tree at its top-level conjunctions.

    Every maximal subtree that is not an ``And`` becomes one clause, in
    left-to-right order.

    Args:
        cnf_root: Root of a tree in Conjunctive Normal Form

    Returns:
        Clause subtrees
    """
    clauses: List[ast.Expr] = []

    def walk(node: ast.Expr) -> None:
        if isinstance(node, ast.And):
            walk(node.left)
            walk(node.right)
        else:
            clauses.append(node)

    walk(cnf_root)
    return clauses


def extract_literals(clause: ast.Expr, symbol_table: SymbolTable) -> List[int]:
    """Read a clause subtree as signed integer literals.

    ``Or`` nodes are stripped; a variable yields its identifier and a negated
    variable yields the negated identifier. Identifiers are interned in
    ``symbol_table`` as they are met.

    Args:
        clause: Disjunction of literals
        symbol_table: Table that numbers the variables

    Returns:
        Literals in left-to-right order, duplicates kept

    Raises:
        MalformedClauseError: The clause contains anything but OR-connected
            literals, i.e. the tree was not in CNF
    """
    literals: List[int] = []

    def walk(node: ast.Expr) -> None:
        if isinstance(node, ast.Or):
            walk(node.left)
            walk(node.right)
        elif isinstance(node, ast.Var):
            literals.append(symbol_table.intern(node.symbol))
        elif isinstance(node, ast.Not):
            if not isinstance(node.operand, ast.Var):
                raise MalformedClauseError(node, "a negated compound formula")
            literals.append(-symbol_table.intern(node.operand.symbol))
        else:
            raise MalformedClauseError(node, f"an {type(node).__name__} inside a clause")

    walk(clause)
    return literals


def tree_to_dimacs(
    cnf_root: ast.Expr, symbol_table: Optional[SymbolTable] = None
) -> CNFFormula:
    """Convert a CNF tree into a clause list over integer variables.

    The symbol table is reset first (or created if not given); afterwards it
    holds the symbol-to-integer mapping of the result.

    Args:
        cnf_root: Root of a tree in Conjunctive Normal Form
        symbol_table: Table to fill with the variable numbering

    Returns:
        Clause list with ``num_vars`` equal to the number of distinct variables

    Raises:
        MalformedClauseError: The tree is not in CNF
    """
    logger = get_logger()

    if symbol_table is None:
        symbol_table = SymbolTable()
    symbol_table.reset()

    clauses = [
        extract_literals(clause, symbol_table) for clause in extract_clauses(cnf_root)
    ]
    formula = CNFFormula(clauses=clauses, num_vars=len(symbol_table))

    logger.clauses_extracted(formula.num_clauses, formula.num_vars)
    return formula


def _has_complementary_pair(literals: List[int]) -> bool:
    seen = set(literals)
    return any(-literal in seen for literal in literals)


def is_valid_cnf(cnf_root: ast.Expr) -> bool:
    """Complementary-literal validity check of a CNF tree.

    Each clause is read with a fresh symbol table. The formula is reported
    valid iff every clause contains some literal and its negation.

    Args:
        cnf_root: Root of a tree in Conjunctive Normal Form

    Returns:
        True if every clause holds a complementary pair. False does not mean
        the formula is invalid, only that this check cannot show it valid.

    Raises:
        MalformedClauseError: The tree is not in CNF
    """
    logger = get_logger()

    for index, clause in enumerate(extract_clauses(cnf_root)):
        literals = extract_literals(clause, SymbolTable())
        if not _has_complementary_pair(literals):
            logger.debug(f"Clause {index} ({clause}) has no complementary pair")
            logger.validity_result(False)
            return False

    logger.validity_result(True)
    return True


def check_validity(cnf_root: ast.Expr) -> Verdict:
    """Three-valued form of :func:`is_valid_cnf`.

    Returns:
        Verdict.TRUE if every clause holds a complementary pair, otherwise
        Verdict.UNKNOWN
    """
    return Verdict.TRUE if is_valid_cnf(cnf_root) else Verdict.UNKNOWN


class _Evaluator(ast.Visitor):
    """Computes the truth value of a tree under a symbol assignment."""

    def __init__(self, assignment: Mapping[str, bool]):
        self._assignment = assignment

    def visit_var(self, n: ast.Var) -> bool:
        if n.symbol not in self._assignment:
            raise UnboundVariableError(n.symbol)
        return bool(self._assignment[n.symbol])

    def visit_not(self, n: ast.Not) -> bool:
        return not n.operand.accept(self)

    # Both operands are always evaluated so an unassigned variable is reported
    # wherever it occurs.
    def visit_and(self, n: ast.And) -> bool:
        left, right = n.left.accept(self), n.right.accept(self)
        return left and right

    def visit_or(self, n: ast.Or) -> bool:
        left, right = n.left.accept(self), n.right.accept(self)
        return left or right

    def visit_implies(self, n: ast.Implies) -> bool:
        left, right = n.left.accept(self), n.right.accept(self)
        return (not left) or right


def evaluate(root: ast.Expr, assignment: Mapping[str, bool]) -> bool:
    """Truth value of a formula tree under an assignment.

    Args:
        root: Any formula tree
        assignment: Truth value per variable symbol

    Returns:
        The formula's truth value

    Raises:
        UnboundVariableError: A variable of the tree is missing from the
            assignment
    """
    return root.accept(_Evaluator(assignment))


def evaluate_clause_set(formula: CNFFormula, assignment: Mapping[int, bool]) -> bool:
    """Truth value of a clause list under an assignment by variable number.

    A clause is satisfied by its first literal whose polarity matches the
    assigned value; the formula is satisfied iff every clause is.

    Args:
        formula: Clause list to evaluate
        assignment: Truth value per variable identifier

    Returns:
        True iff every clause is satisfied

    Raises:
        UnboundVariableError: A literal that has to be inspected refers to an
            unassigned variable
    """
    logger = get_logger()

    for index, clause in enumerate(formula.clauses):
        satisfied = False
        for literal in clause:
            variable = abs(literal)
            if variable not in assignment:
                raise UnboundVariableError(variable)
            if bool(assignment[variable]) == (literal > 0):
                satisfied = True
                break

        if not satisfied:
            logger.debug(f"Clause {index} {clause} is falsified")
            return False

    return True


def assignment_by_id(
    assignment: Mapping[str, bool], symbol_table: SymbolTable
) -> Dict[int, bool]:
    """Translate a symbol-keyed assignment into one keyed by identifier.

    Symbols unknown to the table are ignored.
    """
    translated: Dict[int, bool] = {}
    for symbol, value in assignment.items():
        identifier = symbol_table.lookup(symbol)
        if identifier is not None:
            translated[identifier] = bool(value)
    return translated
