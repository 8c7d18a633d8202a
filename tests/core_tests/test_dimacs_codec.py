# tests/core_tests/test_dimacs_codec.py
# This file is part of Clausify - A Propositional CNF and DIMACS Toolkit
#
# Tests for DIMACS CNF text encoding and decoding

import pytest
from core.dimacs import encode, encode_formula, decode
from core.cnf_formula import CNFFormula
from core.exceptions import DIMACSFormatError


class TestDimacsEncoding:
    """Test suite for rendering clause lists as DIMACS text."""

    def test_default_comments_and_header(self):
        assert encode([[1, 2]], 2) == (
            "c DIMACS CNF Format\n"
            "c Generated from parse tree\n"
            "p cnf 2 1\n"
            "1 2 0\n"
        )

    def test_custom_comments(self):
        text = encode([[1, -2], [3]], 3, comments=["p -> 1"])
        assert text == "c p -> 1\np cnf 3 2\n1 -2 0\n3 0\n"

    def test_no_comments(self):
        assert encode([[-1]], 1, comments=()) == "p cnf 1 1\n-1 0\n"

    def test_encode_formula(self):
        formula = CNFFormula(clauses=[[1], [-1, 2]], num_vars=2)
        assert encode_formula(formula, comments=()) == "p cnf 2 2\n1 0\n-1 2 0\n"

    @pytest.mark.parametrize("clauses, num_vars", [([[0]], 1), ([[1, 3]], 2), ([[-4]], 3)])
    def test_out_of_range_literal(self, clauses, num_vars):
        with pytest.raises(DIMACSFormatError):
            encode(clauses, num_vars)

    def test_empty_clause_rejected(self):
        """An empty clause would be written as a bare 0 line, which decode skips."""
        with pytest.raises(DIMACSFormatError, match="Clause 1 is empty"):
            encode([[1], []], 1, comments=())


class TestDimacsDecoding:
    """Test suite for reading DIMACS text."""

    def test_single_clause(self):
        formula = decode("p cnf 2 1\n1 -2 0\n")

        assert formula.clauses == [[1, -2]]
        assert formula.num_vars == 2
        assert formula.num_clauses == 1

    def test_comments_and_blank_lines_skipped(self):
        text = (
            "c DIMACS CNF Format\n"
            "c p -> 1\n"
            "\n"
            "p cnf 3 2\n"
            "% ignored\n"
            "1 -3 0\n"
            "  2 3 0  \n"
        )
        formula = decode(text)

        assert formula.clauses == [[1, -3], [2, 3]]
        assert formula.num_vars == 3

    def test_reading_stops_after_declared_clauses(self):
        formula = decode("p cnf 2 1\n1 0\n2 0\nnot even parsed\n")
        assert formula.clauses == [[1]]

    def test_empty_clause_lines_skipped(self):
        formula = decode("p cnf 2 2\n0\n1 0\n-2 0\n")
        assert formula.clauses == [[1], [-2]]

    def test_tokens_after_terminator_ignored(self):
        assert decode("p cnf 2 1\n1 0 2\n").clauses == [[1]]

    def test_zero_clauses(self):
        formula = decode("c nothing here\np cnf 3 0\n")

        assert formula.clauses == []
        assert formula.num_vars == 3

    MALFORMED_CASES = [
        ("", "Missing header"),
        ("c only comments\n", "Missing header"),
        ("1 2 0\np cnf 2 1\n", "Clause before header"),
        ("p cnf 2\n1 0\n", "Header missing clause count"),
        ("p dnf 2 1\n1 0\n", "Wrong format name"),
        ("p cnf x 1\n1 0\n", "Non-numeric variable count"),
        ("p cnf 2 -1\n", "Negative clause count"),
        ("p cnf 2 1\n1 a 0\n", "Non-integer literal"),
        ("p cnf 2 1\n1 2\n", "Clause without terminating 0"),
        ("p cnf 2 1\n3 0\n", "Literal above variable count"),
        ("p cnf 2 2\n1 0\n", "Fewer clauses than declared"),
        ("p cnf 2 2\n1 0\np cnf 2 2\n2 0\n", "Duplicate header"),
        ("p cnf 1 2\n1 0\n%\n0\n", "Empty clause line does not count"),
    ]

    @pytest.mark.parametrize("text, description", MALFORMED_CASES)
    def test_malformed_input(self, text, description):
        """Malformed DIMACS text raises DIMACSFormatError.

        Args:
            text: DIMACS document
            description: What is wrong with it
        """
        with pytest.raises(DIMACSFormatError):
            decode(text)

    def test_error_reports_line_number(self):
        with pytest.raises(DIMACSFormatError) as exc_info:
            decode("c header follows\np cnf 2 1\n1 a 0\n")

        assert exc_info.value.line_number == 3
        assert "Line 3" in str(exc_info.value)

    @pytest.mark.parametrize(
        "clauses, num_vars",
        [
            ([[1, 2]], 2),
            ([[1, -2], [-1, 2], [2]], 2),
            ([[5, -3, 1, 1], [-5], [2, 4]], 5),
            ([[1]], 7),
        ],
    )
    def test_decode_inverts_encode(self, clauses, num_vars):
        formula = decode(encode(clauses, num_vars))

        assert formula.clauses == clauses
        assert formula.num_vars == num_vars
