# tests/parser_tests/test_lexer_tokens.py
# This file is part of Clausify - A Propositional CNF and DIMACS Toolkit
#
# Test suite for formula lexer tokenization and error handling

"""Test suite for formula lexer functionality.

This module tests the lexical analysis phase of formula parsing, verifying
correct tokenization of valid syntax and proper error handling for invalid
characters.
"""

import pytest
from parser.lexer import FormulaLexer
from parser.exceptions import ParseError
from utils.logger import get_logger


class TestFormulaLexer:
    """Test cases for formula lexer tokenization and error handling."""

    def setup_method(self):
        """Initialize lexer for each test method."""
        self.lexer = FormulaLexer()
        self.logger = get_logger()

    def _tokenize_to_types(self, text: str) -> list[str]:
        """Extract token types from input text.

        Args:
            text: Input string to tokenize

        Returns:
            List of token type strings
        """
        self.logger.debug(f"Tokenizing: '{text}'")
        token_types = [token.type for token in self.lexer.tokenize(text)]
        self.logger.debug(f"Token types: {token_types}")
        return token_types

    VALID_TOKENIZATION_CASES = [
        # Operators and punctuation
        ("~ * + > ( )", ["NOT", "AND", "OR", "IMPLIES", "LPAREN", "RPAREN"]),
        ("(p+q)", ["LPAREN", "VAR", "OR", "VAR", "RPAREN"]),
        ("~p", ["NOT", "VAR"]),
        ("p*q>r", ["VAR", "AND", "VAR", "IMPLIES", "VAR"]),
        # Identifiers
        ("p", ["VAR"]),
        ("pq", ["VAR"]),
        ("p1", ["VAR"]),
        ("_under_score", ["VAR"]),
        ("alpha+beta_2", ["VAR", "OR", "VAR"]),
        # Prefix notation uses the same tokens
        ("> p ~ q", ["IMPLIES", "VAR", "NOT", "VAR"]),
        ("~~p", ["NOT", "NOT", "VAR"]),
        # Whitespace handling
        (" \t p \n ", ["VAR"]),
        ("( p + q )", ["LPAREN", "VAR", "OR", "VAR", "RPAREN"]),
        ("", []),
    ]

    @pytest.mark.parametrize("input_text, expected_types", VALID_TOKENIZATION_CASES)
    def test_valid_tokenization(self, input_text, expected_types):
        """Test lexer correctly tokenizes valid formula syntax.

        Args:
            input_text: Valid formula string
            expected_types: Expected sequence of token types
        """
        actual_types = self._tokenize_to_types(input_text)

        assert actual_types == expected_types, (
            f"Tokenization mismatch for '{input_text}':\n"
            f"Expected: {expected_types}\n"
            f"Actual: {actual_types}"
        )

    def test_token_values_and_positions(self):
        """Test that identifiers keep their text and tokens their offsets."""
        tokens = list(self.lexer.tokenize("(abc+d)"))

        assert [t.value for t in tokens] == ["(", "abc", "+", "d", ")"]
        assert [t.index for t in tokens] == [0, 1, 4, 5, 6]

    INVALID_CHARACTER_CASES = [
        ("p & q", "&", 2),
        ("p|q", "|", 1),
        ("!p", "!", 0),
        ("p @ q", "@", 2),
        ("1p", "1", 0),
        ("p; q", ";", 1),
    ]

    @pytest.mark.parametrize("input_text, bad_char, position", INVALID_CHARACTER_CASES)
    def test_illegal_character_raises(self, input_text, bad_char, position):
        """Test that characters outside the token set raise ParseError.

        Args:
            input_text: String containing an illegal character
            bad_char: The illegal character
            position: Its offset in the input
        """
        with pytest.raises(ParseError) as exc_info:
            list(self.lexer.tokenize(input_text))

        assert bad_char in str(exc_info.value)
        assert exc_info.value.position == position
