# core/verdict.py
# This file is part of Clausify - A Propositional CNF and DIMACS Toolkit
#
# Verdict enumeration for validity checks

from enum import Enum, auto
from utils.logger import get_logger


class Verdict(Enum):
    """Three-valued result of a validity check.

    The complementary-literal check can prove that a CNF formula is a
    tautology but can never prove that it is not one, so a failed check
    yields UNKNOWN rather than FALSE. FALSE is reserved for checks that do
    establish invalidity, e.g. a falsifying assignment found by evaluation.

    Values:
        TRUE: Formula is definitely valid
        FALSE: Formula is definitely not valid
        UNKNOWN: Validity could not be determined
    """

    TRUE = auto()
    FALSE = auto()
    UNKNOWN = auto()

    def __str__(self) -> str:
        """Human-readable verdict name (TRUE, FALSE, or UNKNOWN)."""
        return self.name

    def is_conclusive(self) -> bool:
        """True for TRUE and FALSE, False for UNKNOWN."""
        logger = get_logger()
        is_conclusive = self in (Verdict.TRUE, Verdict.FALSE)

        logger.debug(
            f"Verdict {self.name} is {'conclusive' if is_conclusive else 'inconclusive'}"
        )

        return is_conclusive

    def describe_validity(self) -> str:
        """Phrase used when reporting a validity check."""
        if self == Verdict.TRUE:
            return "VALID"
        if self == Verdict.FALSE:
            return "NOT VALID"
        return "NOT VALID (or cannot determine)"

    def combine_conjunctive(self, other: "Verdict") -> "Verdict":
        """Combine this verdict with another using conjunctive (AND) semantics.

        Combination rules:
        - FALSE AND anything = FALSE
        - TRUE AND TRUE = TRUE
        - TRUE AND UNKNOWN = UNKNOWN
        - UNKNOWN AND UNKNOWN = UNKNOWN

        Args:
            other: Verdict to combine with this verdict

        Returns:
            Combined verdict following conjunctive semantics
        """
        if self == Verdict.FALSE or other == Verdict.FALSE:
            return Verdict.FALSE
        if self == Verdict.TRUE and other == Verdict.TRUE:
            return Verdict.TRUE
        return Verdict.UNKNOWN
