# tests/core_tests/test_symbol_table.py
# This file is part of Clausify - A Propositional CNF and DIMACS Toolkit
#
# Tests for the symbol <-> integer numbering

import pytest
from core.symbol_table import SymbolTable
from core.exceptions import UnknownIdentifierError


class TestSymbolTableInterning:
    """Test suite for intern/resolve behaviour."""

    def test_first_seen_order(self, symbol_table):
        """Identifiers are assigned 1..N in the order symbols first appear."""
        assert [symbol_table.intern(s) for s in ["q", "p", "q", "r", "p"]] == [1, 2, 1, 3, 2]
        assert len(symbol_table) == 3

    def test_resolve_inverse_of_intern(self, symbol_table):
        for symbol in ["alpha", "beta", "gamma"]:
            assert symbol_table.resolve(symbol_table.intern(symbol)) == symbol

    @pytest.mark.parametrize("identifier", [0, -1, 4])
    def test_resolve_unknown_identifier(self, symbol_table, identifier):
        """Unassigned identifiers raise instead of returning a placeholder."""
        for symbol in "pqr":
            symbol_table.intern(symbol)

        with pytest.raises(UnknownIdentifierError) as exc_info:
            symbol_table.resolve(identifier)

        assert exc_info.value.identifier == identifier
        assert isinstance(exc_info.value, LookupError)

    def test_lookup_does_not_intern(self, symbol_table):
        assert symbol_table.lookup("p") is None
        assert "p" not in symbol_table
        assert len(symbol_table) == 0

        symbol_table.intern("p")
        assert symbol_table.lookup("p") == 1
        assert "p" in symbol_table


class TestSymbolTableLifecycle:
    """Test suite for reset and inspection."""

    def test_reset_restarts_numbering(self, symbol_table):
        symbol_table.intern("x")
        symbol_table.intern("y")
        symbol_table.reset()

        assert len(symbol_table) == 0
        assert symbol_table.intern("y") == 1
        with pytest.raises(UnknownIdentifierError):
            symbol_table.resolve(2)

    def test_items_in_identifier_order(self, symbol_table):
        for symbol in "rpq":
            symbol_table.intern(symbol)

        assert symbol_table.items() == [("r", 1), ("p", 2), ("q", 3)]
        assert list(symbol_table) == ["r", "p", "q"]

    def test_independent_tables(self):
        """Two tables never share numbering."""
        first, second = SymbolTable(), SymbolTable()
        first.intern("p")

        assert second.intern("q") == 1
        assert "q" not in first

    def test_repr(self, symbol_table):
        symbol_table.intern("p")
        symbol_table.intern("q")
        assert repr(symbol_table) == "SymbolTable({p:1, q:2})"
