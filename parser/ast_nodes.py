# parser/ast_nodes.py
# This file is part of Clausify - A Propositional CNF and DIMACS Toolkit
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional logic formulas over the connectives NOT, AND,
OR and IMPLIES. Every node carries a one-character operator symbol matching the
textual syntax accepted by the parsers:

    ~   NOT (unary)
    *   AND
    +   OR
    >   IMPLIES

Node Types:
    Var: Propositional variable (leaf)
    Not: Negation, exactly one child
    And, Or, Implies: Binary connectives, exactly two children

Because nodes are frozen, rewrite passes never mutate a tree; they build a new
one from the pieces of the old. Structural equality is dataclass equality.

All nodes support the visitor design pattern for traversal and transformation.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol, Tuple

NOT_SYMBOL = "~"
AND_SYMBOL = "*"
OR_SYMBOL = "+"
IMPLIES_SYMBOL = ">"

OPERATOR_SYMBOLS = frozenset({NOT_SYMBOL, AND_SYMBOL, OR_SYMBOL, IMPLIES_SYMBOL})


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    to enable type-safe traversal and transformation operations.
    """

    def visit_var(self, n: Var): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_implies(self, n: Implies): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all AST nodes in propositional formulas.

    Provides the foundation for immutable expression trees with visitor pattern
    support. All concrete node types inherit from this class and must implement
    the accept method for visitor dispatch and __str__ for string representation.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    @property
    def value(self) -> str:
        """Symbol printed for this node in prefix and infix text."""
        raise NotImplementedError

    @property
    def children(self) -> Tuple[Expr, ...]:
        """Child nodes in left-to-right order."""
        return ()

    def __str__(self) -> str:
        """Return the fully parenthesized infix rendering of the node.

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Var(Expr):
    """Propositional variable in a formula.

    Attributes:
        symbol: Identifier of the variable, e.g. "p" or "ready"
    """

    symbol: str

    def accept(self, v: Visitor):
        return v.visit_var(self)

    @property
    def value(self) -> str:
        return self.symbol

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation of a single operand.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)

    @property
    def value(self) -> str:
        return NOT_SYMBOL

    @property
    def children(self) -> Tuple[Expr, ...]:
        return (self.operand,)

    def __str__(self) -> str:
        """Return negation wrapped in parentheses, e.g. ``(~p)``."""
        return f"({NOT_SYMBOL}{self.operand})"


@dataclass(frozen=True, slots=True)
class _Binary(Expr):
    """Shared shape of the binary connectives.

    Attributes:
        left: Left operand
        right: Right operand
    """

    left: Expr
    right: Expr

    @property
    def children(self) -> Tuple[Expr, ...]:
        return (self.left, self.right)

    def __str__(self) -> str:
        return f"({self.left}{self.value}{self.right})"


@dataclass(frozen=True, slots=True)
class And(_Binary):
    """Logical conjunction, true when both operands are true."""

    def accept(self, v: Visitor):
        return v.visit_and(self)

    @property
    def value(self) -> str:
        return AND_SYMBOL


@dataclass(frozen=True, slots=True)
class Or(_Binary):
    """Logical disjunction, true when at least one operand is true."""

    def accept(self, v: Visitor):
        return v.visit_or(self)

    @property
    def value(self) -> str:
        return OR_SYMBOL


@dataclass(frozen=True, slots=True)
class Implies(_Binary):
    """Material implication, false only when left is true and right is false."""

    def accept(self, v: Visitor):
        return v.visit_implies(self)

    @property
    def value(self) -> str:
        return IMPLIES_SYMBOL
