"""
Command-line interface for cnfpy.

This module provides a simple CLI to convert a formula into DIMACS,
and to display version information.

Usage:
    cnfpy <COMMAND>

Commands:
    convert   Convert a formula (argument, or one line from stdin) into DIMACS.
    version   Show the cnfpy library version.
"""

import argparse
import logging
import sys

from cnfpy import __version__
import cnfpy as cn
from cnfpy.exceptions import LexicalError, SyntaxError

logger = logging.getLogger(__name__)


def command_convert(args):
    formula = args.formula
    if formula is None:
        if sys.stdin.isatty():
            print("Enter a formula:", file=sys.stderr)
        formula = sys.stdin.readline().rstrip("\n")

    try:
        cnf = cn.formula_to_cnf(formula, strict=not args.lenient)
    except (LexicalError, SyntaxError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logger.info("converted formula into %d variables (%d named) and %d clauses",
                cnf.nr_vars, len(cnf.varmap), len(cnf))
    try:
        out = cnf.to_dimacs(fname=args.output)
    except OSError as e:
        print(f"error: cannot write output: {e}", file=sys.stderr)
        return 1
    if args.output is None:
        sys.stdout.write(out)
    return 0


def command_version(args):
    print(f"cnfpy version: {__version__}")
    return 0


def main(argv=None):
    # options shared by all commands
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="count", default=0, help="Increase logging verbosity (-v, -vv)")

    parser = argparse.ArgumentParser(description="cnfpy command line interface")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # cnfpy convert
    convert_parser = subparsers.add_parser("convert", parents=[common], help="Convert a formula into DIMACS using the Tseitin transformation")
    convert_parser.add_argument("formula", nargs="?", default=None, help="The formula, e.g. '(A AND NOT B)'. Read from stdin if omitted")
    convert_parser.add_argument("-o", "--output", default=None, help="Write the DIMACS output to this file instead of stdout")
    convert_parser.add_argument("--lenient", action="store_true", help="Read unknown binary operators as OR and ignore trailing input")
    convert_parser.set_defaults(func=command_convert)

    # cnfpy version
    version_parser = subparsers.add_parser("version", parents=[common], help="Show version information on cnfpy")
    version_parser.set_defaults(func=command_version)

    args = parser.parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format='%(levelname)s: %(message)s')
    logging.getLogger("cnfpy").setLevel(level)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
