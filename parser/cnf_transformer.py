# parser/cnf_transformer.py
# This file is part of Clausify - A Propositional CNF and DIMACS Toolkit
#
# AST transformer for Conjunctive Normal Form conversion

"""Transforms Abstract Syntax Trees into Conjunctive Normal Form (CNF).

The conversion is a fixed sequence of three rewrite passes, each a visitor
that consumes a tree and returns a newly built one:

1. Implication elimination: ``a > b`` becomes ``~a + b``, bottom-up
2. Negation normal form: double negations collapse and De Morgan's laws push
   every ``~`` down until it sits directly on a variable
3. Distribution: ``(p * q) + r`` becomes ``(p + r) * (q + r)`` (and the
   mirrored rule for an AND on the right), re-applied to the new disjunctions
   until no OR has an AND beneath it

The result is a conjunction of clauses, each clause a disjunction of literals.

Distribution duplicates the operand that is spread over the conjunction. The
copy is a fresh clone, never the same node object. Because each step can
double one branch, the output is worst-case exponential in the size of the
input; this is inherent to conversion by distribution (no auxiliary
variables are introduced).
"""

from __future__ import annotations

from . import ast_nodes as ast
from .tree_ops import clone_tree, count_nodes
from utils.logger import get_logger


class ImplicationEliminator(ast.Visitor):
    """Rewrites every ``Implies(a, b)`` into ``Or(Not(a), b)``.

    Children are rewritten before their parent so nested implications are
    removed bottom-up.
    """

    def transform(self, root: ast.Expr) -> ast.Expr:
        return root.accept(self)

    def visit_var(self, n: ast.Var) -> ast.Expr:
        return n

    def visit_not(self, n: ast.Not) -> ast.Expr:
        return ast.Not(n.operand.accept(self))

    def visit_and(self, n: ast.And) -> ast.Expr:
        return ast.And(n.left.accept(self), n.right.accept(self))

    def visit_or(self, n: ast.Or) -> ast.Expr:
        return ast.Or(n.left.accept(self), n.right.accept(self))

    def visit_implies(self, n: ast.Implies) -> ast.Expr:
        return ast.Or(ast.Not(n.left.accept(self)), n.right.accept(self))


class NegationNormalizer(ast.Visitor):
    """Pushes negations inward until every ``Not`` wraps a variable.

    Handled shapes under a ``Not``:
        ~~A      -> A (then normalized again, so chains of NOTs collapse)
        ~(A * B) -> ~A + ~B
        ~(A + B) -> ~A * ~B
        ~(A > B) -> A * ~B
        ~v       -> unchanged
    """

    def transform(self, root: ast.Expr) -> ast.Expr:
        return root.accept(self)

    def visit_var(self, n: ast.Var) -> ast.Expr:
        return n

    def visit_not(self, n: ast.Not) -> ast.Expr:
        inner = n.operand

        # Double negation: ~~A -> A
        if isinstance(inner, ast.Not):
            return inner.operand.accept(self)

        # De Morgan: ~(A * B) -> ~A + ~B
        if isinstance(inner, ast.And):
            return ast.Or(
                ast.Not(inner.left).accept(self), ast.Not(inner.right).accept(self)
            )

        # De Morgan: ~(A + B) -> ~A * ~B
        if isinstance(inner, ast.Or):
            return ast.And(
                ast.Not(inner.left).accept(self), ast.Not(inner.right).accept(self)
            )

        if isinstance(inner, ast.Implies):
            return ast.And(inner.left.accept(self), ast.Not(inner.right).accept(self))

        return n

    def visit_and(self, n: ast.And) -> ast.Expr:
        return ast.And(n.left.accept(self), n.right.accept(self))

    def visit_or(self, n: ast.Or) -> ast.Expr:
        return ast.Or(n.left.accept(self), n.right.accept(self))

    def visit_implies(self, n: ast.Implies) -> ast.Expr:
        return ast.Implies(n.left.accept(self), n.right.accept(self))


class OrDistributor(ast.Visitor):
    """Distributes disjunction over conjunction, postorder.

    Both operands of an ``Or`` are distributed first; the ``Or`` is then
    rebuilt by :meth:`_distribute`, which splits it over any ``And`` operand
    and recurses into the two disjunctions it creates.
    """

    def transform(self, root: ast.Expr) -> ast.Expr:
        return root.accept(self)

    def visit_var(self, n: ast.Var) -> ast.Expr:
        return n

    def visit_not(self, n: ast.Not) -> ast.Expr:
        return ast.Not(n.operand.accept(self))

    def visit_and(self, n: ast.And) -> ast.Expr:
        return ast.And(n.left.accept(self), n.right.accept(self))

    def visit_or(self, n: ast.Or) -> ast.Expr:
        return self._distribute(n.left.accept(self), n.right.accept(self))

    def visit_implies(self, n: ast.Implies) -> ast.Expr:
        return ast.Implies(n.left.accept(self), n.right.accept(self))

    def _distribute(self, left: ast.Expr, right: ast.Expr) -> ast.Expr:
        # (p * q) + r -> (p + r) * (q + r')
        if isinstance(left, ast.And):
            return ast.And(
                self._distribute(left.left, right),
                self._distribute(left.right, clone_tree(right)),
            )

        # p + (q * r) -> (p' + q) * (p + r)
        if isinstance(right, ast.And):
            return ast.And(
                self._distribute(clone_tree(left), right.left),
                self._distribute(left, right.right),
            )

        return ast.Or(left, right)


def eliminate_implications(root: ast.Expr) -> ast.Expr:
    """Return an equivalent tree with no ``Implies`` node."""
    return ImplicationEliminator().transform(root)


def push_negations_inward(root: ast.Expr) -> ast.Expr:
    """Return an equivalent tree in negation normal form."""
    return NegationNormalizer().transform(root)


def distribute_or_over_and(root: ast.Expr) -> ast.Expr:
    """Return an equivalent tree in which no ``Or`` has an ``And`` beneath it.

    The input is expected to be in negation normal form without implications;
    other nodes are carried through unchanged.
    """
    return OrDistributor().transform(root)


def convert_to_cnf(root: ast.Expr) -> ast.Expr:
    """Convert a formula tree to Conjunctive Normal Form.

    Applies implication elimination, negation normal form and distribution in
    that order. The input tree is left untouched.

    Args:
        root: Root node of the tree to convert

    Returns:
        Equivalent tree shaped as a conjunction of disjunctions of literals
    """
    logger = get_logger()
    logger.debug(f"Starting CNF conversion of {type(root).__name__}")

    result = root
    for name, rewrite in (
        ("eliminate implications", eliminate_implications),
        ("push negations inward", push_negations_inward),
        ("distribute OR over AND", distribute_or_over_and),
    ):
        before = count_nodes(result)
        result = rewrite(result)
        logger.pass_applied(name, before, count_nodes(result))

    logger.debug(f"CNF conversion complete: {result}")
    return result


def contains_implication(root: ast.Expr) -> bool:
    """True if any node of the tree is an ``Implies``."""
    if isinstance(root, ast.Implies):
        return True
    return any(contains_implication(child) for child in root.children)


def is_nnf(root: ast.Expr) -> bool:
    """True if every ``Not`` in the tree wraps a variable."""
    if isinstance(root, ast.Not):
        return isinstance(root.operand, ast.Var)
    return all(is_nnf(child) for child in root.children)


def _is_literal(node: ast.Expr) -> bool:
    return isinstance(node, ast.Var) or (
        isinstance(node, ast.Not) and isinstance(node.operand, ast.Var)
    )


def _is_clause(node: ast.Expr) -> bool:
    if isinstance(node, ast.Or):
        return _is_clause(node.left) and _is_clause(node.right)
    return _is_literal(node)


def is_cnf(root: ast.Expr) -> bool:
    """True if the tree is a conjunction of disjunctions of literals."""
    if isinstance(root, ast.And):
        return is_cnf(root.left) and is_cnf(root.right)
    return _is_clause(root)
