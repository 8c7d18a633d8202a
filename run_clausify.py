#!/usr/bin/env python3
# run_clausify.py
# This file is part of Clausify - A Propositional CNF and DIMACS Toolkit
#
# Command-line interface for formula parsing, CNF conversion and DIMACS I/O

import sys
import argparse
from pathlib import Path
from typing import Dict, List, Optional

from parser import parse_infix, parse_prefix, to_prefix, to_infix
from parser.cnf_transformer import convert_to_cnf
from parser.exceptions import ParseError
from parser.tree_ops import collect_variables, tree_height
from core import (
    SymbolTable,
    check_validity,
    evaluate,
    evaluate_clause_set,
    tree_to_dimacs,
    encode_formula,
)
from core.dimacs import DEFAULT_COMMENTS
from core.exceptions import (
    DIMACSFormatError,
    MalformedClauseError,
    UnboundVariableError,
    UnknownIdentifierError,
)
from utils.dimacs_file import mapping_comments, read_dimacs, write_dimacs
from utils.logger import LogLevel, get_logger
from utils.tree_renderer import render_ascii, render_rooted

_TRUE_WORDS = {"1", "true", "t", "yes", "y"}
_FALSE_WORDS = {"0", "false", "f", "no", "n"}


def configure_logging_for_cli(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging levels for the command-line driver.

    Command output is logged at RESULT level, which stays enabled by default;
    progress messages such as file loads need ``--verbose``.

    Args:
        verbose: Enable INFO level logging
        debug: Enable DEBUG level logging (overrides verbose)
    """
    logger = get_logger()

    if debug:
        logger.set_level(LogLevel.DEBUG)
    elif verbose:
        logger.set_level(LogLevel.INFO)
    else:
        logger.set_level(LogLevel.RESULT)


def parse_truth_value(text: str) -> bool:
    """Read 0/1, true/false, yes/no (any case) as a boolean.

    Raises:
        ValueError: If the text is none of those
    """
    word = text.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"Not a truth value: '{text}'")


def parse_assignments(pairs: List[str]) -> Dict[str, bool]:
    """Turn ``name=value`` arguments into an assignment.

    Raises:
        ValueError: If an argument lacks ``=`` or has an unreadable value
    """
    assignment: Dict[str, bool] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name.strip():
            raise ValueError(f"Assignment must look like name=value, got '{pair}'")
        assignment[name.strip()] = parse_truth_value(value)
    return assignment


def load_formula(text: str, prefix: bool):
    """Parse a formula argument in the notation selected on the command line."""
    return parse_prefix(text) if prefix else parse_infix(text)


def cmd_prefix(args) -> int:
    logger = get_logger()
    logger.result(f"Prefix: {to_prefix(load_formula(args.formula, args.prefix))}")
    return 0


def cmd_infix(args) -> int:
    logger = get_logger()
    logger.result(f"Infix expression: {to_infix(load_formula(args.formula, args.prefix))}")
    return 0


def cmd_tree(args) -> int:
    logger = get_logger()
    tree = load_formula(args.formula, args.prefix)
    render = render_ascii if args.style == "ascii" else render_rooted
    logger.result(render(tree))
    return 0


def cmd_height(args) -> int:
    logger = get_logger()
    logger.result(f"Tree height: {tree_height(load_formula(args.formula, args.prefix))}")
    return 0


def cmd_eval(args) -> int:
    logger = get_logger()
    tree = load_formula(args.formula, args.prefix)
    assignment = parse_assignments(args.assign)

    variables = collect_variables(tree)
    logger.result(f"Detected {len(variables)} variable(s): {' '.join(variables)}")

    result = evaluate(tree, assignment)
    logger.result(f"Formula evaluates to: {'TRUE' if result else 'FALSE'}")
    return 0


def cmd_cnf(args) -> int:
    logger = get_logger()
    cnf_tree = convert_to_cnf(load_formula(args.formula, args.prefix))
    logger.result(f"CNF form: {to_infix(cnf_tree)}")
    return 0


def cmd_valid(args) -> int:
    logger = get_logger()
    cnf_tree = convert_to_cnf(load_formula(args.formula, args.prefix))
    verdict = check_validity(cnf_tree)
    logger.result(f"Formula is {verdict.describe_validity()}")
    return 0


def cmd_dimacs(args) -> int:
    logger = get_logger()
    cnf_tree = convert_to_cnf(load_formula(args.formula, args.prefix))

    table = SymbolTable()
    formula = tree_to_dimacs(cnf_tree, table)

    logger.result("DIMACS Format:")
    logger.result(
        encode_formula(formula, list(DEFAULT_COMMENTS) + mapping_comments(table)).rstrip()
    )
    logger.variable_mapping(table.items())

    if args.output:
        write_dimacs(str(args.output), formula, table)
    return 0


def cmd_load(args) -> int:
    logger = get_logger()
    formula = read_dimacs(str(args.file))

    logger.result("DIMACS Formula:")
    logger.result(encode_formula(formula).rstrip())

    if args.assign:
        assignment = {int(k): v for k, v in parse_assignments(args.assign).items()}
        result = evaluate_clause_set(formula, assignment)
        logger.result(
            f"Formula evaluates to: {'TRUE (SAT)' if result else 'FALSE (UNSAT)'}"
        )
    return 0


def run_demo(output_dir: Path) -> int:
    """Walk through infix parsing, CNF conversion and a DIMACS save/load cycle."""
    logger = get_logger()
    logger.result("=== DEMO: DIMACS Format ===")

    logger.result("\nExample 1: (p+q)")
    demo1 = parse_infix("(p+q)")
    logger.result(f"  Original: {to_infix(demo1)}")
    table = SymbolTable()
    dimacs1 = tree_to_dimacs(demo1, table)
    logger.result("  DIMACS:")
    logger.result(encode_formula(dimacs1).rstrip())
    logger.variable_mapping(table.items())

    logger.result("\nExample 2: ((p>q)*(~r))")
    demo2 = parse_infix("((p>q)*(~r))")
    logger.result(f"  Original: {to_infix(demo2)}")
    cnf2 = convert_to_cnf(demo2)
    logger.result(f"  CNF: {to_infix(cnf2)}")
    dimacs2 = tree_to_dimacs(cnf2, table)
    logger.result("  DIMACS:")
    logger.result(encode_formula(dimacs2).rstrip())
    logger.variable_mapping(table.items())

    logger.result("\nExample 3: SAT 2002 Compatible")
    logger.result("Creating a sample DIMACS file...")
    cnf3 = convert_to_cnf(parse_infix("((p+q)*(~p+r))"))
    dimacs3 = tree_to_dimacs(cnf3, table)
    sample_path = output_dir / "sample.cnf"
    write_dimacs(str(sample_path), dimacs3, table)

    logger.result("\nNow reading it back:")
    loaded = read_dimacs(str(sample_path))
    logger.result(encode_formula(loaded).rstrip())
    return 0


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Clausify - propositional formulas to CNF and DIMACS",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Operators: ~ (NOT), + (OR), * (AND), > (IMPLICATION)

Examples:
  python run_clausify.py prefix "((p>q)*(~r))"
  python run_clausify.py infix --prefix "> p ~ q"
  python run_clausify.py eval "(p>q)" --assign p=1 q=0
  python run_clausify.py dimacs "((p+q)*(~p+r))" -o sample.cnf
  python run_clausify.py load sample.cnf --assign 1=1 2=0 3=1
        """,
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    def formula_command(name: str, help_text: str):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("formula", help="Formula text (infix unless --prefix)")
        sub.add_argument(
            "--prefix", action="store_true", help="Read the formula in prefix notation"
        )
        return sub

    formula_command("prefix", "Convert a formula to prefix notation").set_defaults(
        handler=cmd_prefix
    )
    formula_command("infix", "Display a formula as fully parenthesized infix").set_defaults(
        handler=cmd_infix
    )

    tree = formula_command("tree", "Display the parse tree")
    tree.add_argument("--style", choices=("ascii", "rooted"), default="ascii")
    tree.set_defaults(handler=cmd_tree)

    formula_command("height", "Calculate the parse tree height").set_defaults(
        handler=cmd_height
    )

    evaluation = formula_command("eval", "Evaluate a formula under an assignment")
    evaluation.add_argument(
        "--assign", nargs="+", default=[], metavar="VAR=VALUE", help="Truth values"
    )
    evaluation.set_defaults(handler=cmd_eval)

    formula_command("cnf", "Convert a formula to CNF").set_defaults(handler=cmd_cnf)
    formula_command("valid", "Check validity of the CNF form").set_defaults(
        handler=cmd_valid
    )

    dimacs = formula_command("dimacs", "Convert the CNF form to DIMACS")
    dimacs.add_argument("-o", "--output", type=Path, help="Save DIMACS to this file")
    dimacs.set_defaults(handler=cmd_dimacs)

    load = commands.add_parser("load", help="Load and display a DIMACS file")
    load.add_argument("file", type=Path, help="Path to DIMACS CNF file")
    load.add_argument(
        "--assign", nargs="+", default=[], metavar="ID=VALUE", help="Truth values"
    )
    load.set_defaults(handler=cmd_load)

    demo = commands.add_parser("demo", help="Run the DIMACS demo")
    demo.add_argument(
        "--output-dir", type=Path, default=Path("."), help="Where sample.cnf is written"
    )
    demo.set_defaults(handler=lambda args: run_demo(args.output_dir))

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the Clausify command-line driver.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging_for_cli(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        return args.handler(args)

    except DIMACSFormatError as e:
        logger.error(f"DIMACS error: {e}")
        return 1

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except (
        UnboundVariableError,
        MalformedClauseError,
        UnknownIdentifierError,
        ValueError,
    ) as e:
        logger.error(f"Evaluation error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4


if __name__ == "__main__":
    sys.exit(main())
