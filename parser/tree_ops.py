# parser/tree_ops.py
# This file is part of Clausify - A Propositional CNF and DIMACS Toolkit
#
# Structural operations over formula trees

"""Structural traversals over formula trees.

Cloning, textual rendering (prefix and infix), height, node counting and
variable collection. All functions are read-only with respect to their input.
"""

from __future__ import annotations
from typing import List

from . import ast_nodes as ast


class _TreeCloner(ast.Visitor):
    """Builds a node-for-node copy that shares no node objects with its input."""

    def visit_var(self, n: ast.Var) -> ast.Var:
        return ast.Var(n.symbol)

    def visit_not(self, n: ast.Not) -> ast.Not:
        return ast.Not(n.operand.accept(self))

    def visit_and(self, n: ast.And) -> ast.And:
        return ast.And(n.left.accept(self), n.right.accept(self))

    def visit_or(self, n: ast.Or) -> ast.Or:
        return ast.Or(n.left.accept(self), n.right.accept(self))

    def visit_implies(self, n: ast.Implies) -> ast.Implies:
        return ast.Implies(n.left.accept(self), n.right.accept(self))


def clone_tree(root: ast.Expr) -> ast.Expr:
    """Deep-copy a formula tree.

    The copy is structurally equal to ``root`` but no node object is shared
    between the two.

    Args:
        root: Tree to duplicate

    Returns:
        Independent copy of the tree
    """
    return root.accept(_TreeCloner())


def _preorder(node: ast.Expr, out: List[str]) -> None:
    out.append(node.value)
    for child in node.children:
        _preorder(child, out)


def to_prefix(root: ast.Expr) -> str:
    """Render a tree in prefix notation.

    Every node, operators and leaves alike, contributes its symbol in
    preorder, separated by single spaces.

    Example:
        >>> to_prefix(Or(Var("p"), Var("q")))
        '+ p q'
    """
    symbols: List[str] = []
    _preorder(root, symbols)
    return " ".join(symbols)


def to_infix(root: ast.Expr) -> str:
    """Render a tree as fully parenthesized infix text.

    Every operator node is wrapped in parentheses and NOT is written directly
    before its operand, so the output is accepted by the infix parser and
    parses back to the same tree.

    Example:
        >>> to_infix(Implies(Var("p"), Not(Var("q"))))
        '(p>(~q))'
    """
    return str(root)


def tree_height(root: ast.Expr) -> int:
    """Number of edges on the longest root-to-leaf path; a lone leaf has height 0."""
    if not root.children:
        return 0
    return 1 + max(tree_height(child) for child in root.children)


def count_nodes(root: ast.Expr) -> int:
    """Total number of nodes in the tree."""
    return 1 + sum(count_nodes(child) for child in root.children)


def collect_variables(root: ast.Expr) -> List[str]:
    """Distinct variable symbols in first-seen preorder order."""
    seen: List[str] = []

    def walk(node: ast.Expr) -> None:
        if isinstance(node, ast.Var):
            if node.symbol not in seen:
                seen.append(node.symbol)
            return
        for child in node.children:
            walk(child)

    walk(root)
    return seen
