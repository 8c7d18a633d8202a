# core/cnf_formula.py
# This file is part of Clausify - A Propositional CNF and DIMACS Toolkit
#
# Clause-list representation of a formula in Conjunctive Normal Form

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Set

Clause = List[int]


@dataclass
class CNFFormula:
    """Conjunction of clauses over integer variables ``1..num_vars``.

    Each clause is a disjunction of literals; a literal is a nonzero integer
    whose sign gives its polarity (positive = variable, negative = negation).

    Attributes:
        clauses: Clauses in order; literal order within a clause is kept
        num_vars: Number of variables the literals may refer to
    """

    clauses: List[Clause] = field(default_factory=list)
    num_vars: int = 0

    @property
    def num_clauses(self) -> int:
        return len(self.clauses)

    def variables(self) -> Set[int]:
        """Variable identifiers that actually occur in some clause."""
        return {abs(literal) for clause in self.clauses for literal in clause}

    def __str__(self) -> str:
        body = " * ".join(
            "(" + " + ".join(str(literal) for literal in clause) + ")"
            for clause in self.clauses
        )
        return f"CNF[{self.num_vars} vars, {self.num_clauses} clauses]: {body}"
