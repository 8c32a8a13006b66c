#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## dimacs.py
##
"""
    This file implements helper functions for exporting CNFs to and from DIMACS format.
    DIMACS is a textual format to represent CNF problems.
    The header of the file is formatted as ``p cnf <n_vars> <n_clauses>``.

    Each remaining line of the file is formatted as a list of integers, terminated by ``0``.
    An integer represents a Boolean variable and a negative Boolean variable is represented using a `'-'` sign.

    =================
    List of functions
    =================
    .. autosummary::
        :nosignatures:

        format_dimacs
        write_dimacs
        read_dimacs
"""
from ..cnf import CNF
from ..exceptions import DimacsFormatError


def format_dimacs(nr_vars, clauses):
    """
        DIMACS text for the given clauses

        :param nr_vars: number of variables to declare in the header
        :param clauses: list of clauses, each a list of nonzero ints
    """
    out = f"p cnf {nr_vars} {len(clauses)}\n"
    for clause in clauses:
        out += " ".join([str(lit) for lit in clause] + ["0"]) + "\n"
    return out


def write_dimacs(cnf, fname=None):
    """
        Writes a CNF to DIMACS format

        The header declares `cnf.nr_vars` variables: all variables allocated during
        the conversion, including auxiliary ones that may not appear in any clause.

        :param cnf: a :class:`~cnfpy.cnf.CNF`
        :param fname: optional, file name to write the DIMACS output to
    """
    out = format_dimacs(cnf.nr_vars, cnf.clauses)

    if fname is not None:
        with open(fname, "w") as f:
            f.write(out)

    return out


def read_dimacs(fname):
    """
        Read a CNF from a DIMACS formatted file strictly following the specification:
        https://web.archive.org/web/20190325181937/https://www.satcompetition.org/2009/format-benchmarks2009.html

        .. note::
            The p-line has to denote the correct number of variables and clauses

        :param fname: the name of the DIMACS file
        :raises DimacsFormatError: if the file does not follow the format
    """
    clauses = []

    with open(fname, "r") as f:
        clause = []
        nr_vars = None
        for line in f.readlines():
            line = line.strip()
            if line == "" or line.startswith("c"):
                continue  # skip empty and comment lines
            elif line.startswith("p"):
                params = line.split()
                if len(params) != 4:
                    raise DimacsFormatError(f"Expected p-header to be formed `p cnf nr_vars nr_cls` but got {line}")
                _, typ, nr_vars, nr_cls = params
                if typ != "cnf":
                    raise DimacsFormatError(f"Expected `cnf` (i.e. DIMACS) as file format, but got {typ} which is not supported.")
                try:
                    nr_vars, nr_cls = int(nr_vars), int(nr_cls)
                except ValueError:
                    raise DimacsFormatError(f"Expected integers in p-header but got {line}") from None
            else:
                if nr_vars is None:
                    raise DimacsFormatError("Expected p-line before first clause")
                for token in line.split():
                    try:
                        i = int(token)
                    except ValueError:
                        raise DimacsFormatError(f"Expected integer literal but got {token!r} in clause {line}") from None
                    if i == 0:
                        clauses.append(clause)
                        clause = []
                    else:
                        if abs(i) > nr_vars:
                            raise DimacsFormatError(f"Expected at most {nr_vars} variables (from p-line) but found literal {i} in clause {line}")
                        clause.append(i)

    if nr_vars is None:
        raise DimacsFormatError("Expected file to contain p-line, but did not")
    if len(clause) != 0:
        raise DimacsFormatError("Expected last clause to be terminated by 0, but it was not")
    if len(clauses) != nr_cls:
        raise DimacsFormatError(f"Number of clauses was declared in p-line as {nr_cls}, but was {len(clauses)}")

    return CNF(clauses, nr_vars)
