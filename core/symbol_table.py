# core/symbol_table.py
# This file is part of Clausify - A Propositional CNF and DIMACS Toolkit
#
# Bidirectional mapping between variable symbols and DIMACS variable numbers

from typing import Dict, Iterator, List, Optional, Tuple

from .exceptions import UnknownIdentifierError
from utils.logger import get_logger


class SymbolTable:
    """Interns variable symbols as dense positive integers.

    Symbols receive identifiers ``1..N`` in the order they are first seen.
    A table belongs to one logical operation (one clause extraction, one
    DIMACS encoding); callers pass it explicitly and call :meth:`reset` or
    build a new table before processing an unrelated formula. ``intern``
    mutates the table, so a table must not be shared between threads without
    external locking.

    Example:
        >>> table = SymbolTable()
        >>> table.intern("p"), table.intern("q"), table.intern("p")
        (1, 2, 1)
        >>> table.resolve(2)
        'q'
    """

    def __init__(self) -> None:
        self._ids: Dict[str, int] = {}
        self._symbols: List[str] = []

    def intern(self, symbol: str) -> int:
        """Return the identifier of ``symbol``, assigning the next one if new."""
        identifier = self._ids.get(symbol)
        if identifier is None:
            self._symbols.append(symbol)
            identifier = len(self._symbols)
            self._ids[symbol] = identifier
            get_logger().debug(f"Interned variable '{symbol}' as {identifier}")
        return identifier

    def resolve(self, identifier: int) -> str:
        """Return the symbol interned as ``identifier``.

        Raises:
            UnknownIdentifierError: If the identifier was never assigned
        """
        if not 1 <= identifier <= len(self._symbols):
            raise UnknownIdentifierError(identifier)
        return self._symbols[identifier - 1]

    def lookup(self, symbol: str) -> Optional[int]:
        """Return the identifier of ``symbol`` without interning it."""
        return self._ids.get(symbol)

    def reset(self) -> None:
        """Forget every mapping."""
        self._ids.clear()
        self._symbols.clear()

    def items(self) -> List[Tuple[str, int]]:
        """(symbol, identifier) pairs in identifier order."""
        return [(symbol, index) for index, symbol in enumerate(self._symbols, start=1)]

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._symbols))

    def __repr__(self) -> str:
        mapping = ", ".join(f"{s}:{i}" for s, i in self.items())
        return f"SymbolTable({{{mapping}}})"
