# tests/conftest.py
# This file is part of Clausify - A Propositional CNF and DIMACS Toolkit
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Clausify tests.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common fixtures for formulas and symbol tables
- Exhaustive assignment enumeration for semantic checks
"""

import itertools
import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify module availability before any test runs.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import core
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def symbol_table():
    """Provide an empty symbol table.

    Returns:
        SymbolTable: Fresh table for one test
    """
    from core.symbol_table import SymbolTable

    return SymbolTable()


@pytest.fixture
def sample_formulas():
    """Provide infix formulas covering every connective.

    Returns:
        List[str]: Formulas accepted by the infix parser
    """
    return [
        "p",
        "(~p)",
        "(p+q)",
        "(p*q)",
        "(p>q)",
        "((p>q)*(~r))",
        "((p+q)*((~p)+r))",
        "(~((p*q)>(r+(~s))))",
    ]


def all_assignments(symbols):
    """Yield every total assignment over ``symbols`` as a dict."""
    for values in itertools.product([False, True], repeat=len(symbols)):
        yield dict(zip(symbols, values))


@pytest.fixture
def enumerate_assignments():
    """Provide the exhaustive assignment generator.

    Returns:
        Callable: ``all_assignments(symbols)``
    """
    return all_assignments
