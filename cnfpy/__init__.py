"""
    cnfpy is a small library for turning propositional formulas into Conjunctive Normal Form in Python.

    Formulas are written in a parenthesised infix notation, e.g. ``NOT (A AND (B OR C))``,
    and converted with the Tseitin transformation into an equisatisfiable CNF that can be
    handed to any SAT solver in DIMACS format.

    The package consists of 4 modules:
    - `expressions`: the lexer, the parser and the expression tree objects built by it
    - `transformations`: the Tseitin encoding of an expression tree into clauses
    - `cnf`: the `CNF` container holding the clauses and the variable mapping of one conversion
    - `tools`: reading and writing of the DIMACS exchange format
"""

__version__ = "0.3.1"


from .expressions import *
from .cnf import CNF
from .transformations.tseitin import tseitin, to_cnf, TseitinContext
from .tools.dimacs import write_dimacs, read_dimacs


def formula_to_cnf(text, strict=True):
    """
        Convert a formula given as text into a `CNF` object.

        Every call starts from a fresh variable numbering, so repeated conversions of the
        same text give identical results.

        :param text: the formula, e.g. ``"(A AND NOT B)"``
        :param strict: reject malformed operators and trailing input (default), when False
                       the legacy behaviour of reading unknown operators as OR is used
    """
    return to_cnf(parse(text, strict=strict))


def formula_to_dimacs(text, strict=True):
    """
        Convert a formula given as text into DIMACS text.

        Either the complete DIMACS output is returned, or an exception is raised
        and nothing is produced.
    """
    return write_dimacs(formula_to_cnf(text, strict=strict))
