# tests/integration_tests/test_cli_driver.py
# This file is part of Clausify - A Propositional CNF and DIMACS Toolkit
#
# Tests for the command-line driver and its exit codes

import logging

import pytest
from run_clausify import (
    configure_logging_for_cli,
    main,
    parse_assignments,
    parse_truth_value,
)
from utils.logger import LogLevel, get_logger
from utils.dimacs_file import read_dimacs


class TestArgumentHelpers:
    """Test suite for command-line value parsing."""

    @pytest.mark.parametrize("text", ["1", "true", "T", "yes", " Y "])
    def test_true_words(self, text):
        assert parse_truth_value(text) is True

    @pytest.mark.parametrize("text", ["0", "False", "f", "no", "N"])
    def test_false_words(self, text):
        assert parse_truth_value(text) is False

    def test_unreadable_value(self):
        with pytest.raises(ValueError):
            parse_truth_value("maybe")

    def test_assignments(self):
        assert parse_assignments(["p=1", "q = false"]) == {"p": True, "q": False}

    @pytest.mark.parametrize("pair", ["p", "=1", "p=2"])
    def test_bad_assignment(self, pair):
        with pytest.raises(ValueError):
            parse_assignments([pair])


class TestLoggingFlags:
    """Test suite for the verbosity flags."""

    @pytest.mark.parametrize(
        "verbose, debug, expected",
        [
            (False, False, LogLevel.RESULT.value),
            (True, False, logging.INFO),
            (False, True, logging.DEBUG),
            (True, True, logging.DEBUG),
        ],
    )
    def test_levels(self, verbose, debug, expected):
        configure_logging_for_cli(verbose=verbose, debug=debug)

        assert get_logger().logger.level == expected


class TestCommandExitCodes:
    """Test suite for subcommands run through ``main``."""

    @pytest.mark.parametrize(
        "argv",
        [
            ["prefix", "((p>q)*(~r))"],
            ["infix", "--prefix", "> p ~ q"],
            ["tree", "(p+(~q))"],
            ["tree", "--style", "rooted", "(p+(~q))"],
            ["height", "((p>q)*(~r))"],
            ["eval", "(p>q)", "--assign", "p=1", "q=0"],
            ["cnf", "(~(p*q))"],
            ["valid", "(p+(~p))"],
            ["dimacs", "(p+q)"],
            ["-v", "dimacs", "(p+q)"],
            ["--debug", "valid", "(p+(~p))"],
        ],
    )
    def test_successful_commands(self, argv):
        assert main(argv) == 0

    def test_parse_error(self):
        assert main(["prefix", "(p+q))"]) == 2

    def test_prefix_parse_error(self):
        assert main(["infix", "--prefix", "* p"]) == 2

    def test_unbound_variable(self):
        assert main(["eval", "(p>q)", "--assign", "p=1"]) == 3

    def test_unreadable_assignment(self):
        assert main(["eval", "p", "--assign", "p=maybe"]) == 3

    def test_missing_dimacs_file(self, tmp_path):
        assert main(["load", str(tmp_path / "absent.cnf")]) == 1

    def test_dimacs_output_file(self, tmp_path):
        path = tmp_path / "out.cnf"

        assert main(["dimacs", "((p+q)*((~p)+r))", "-o", str(path)]) == 0

        formula = read_dimacs(str(path))
        assert formula.clauses == [[1, 2], [-1, 3]]
        assert formula.num_vars == 3

    def test_load_and_evaluate(self, tmp_path):
        path = tmp_path / "in.cnf"
        path.write_text("p cnf 3 2\n1 2 0\n-1 3 0\n", encoding="utf-8")

        assert main(["load", str(path), "--assign", "1=1", "2=0", "3=1"]) == 0
        assert main(["load", str(path), "--assign", "1=1"]) == 3

    def test_demo_writes_sample(self, tmp_path):
        assert main(["demo", "--output-dir", str(tmp_path)]) == 0

        sample = read_dimacs(str(tmp_path / "sample.cnf"))
        assert sample.num_vars == 3
