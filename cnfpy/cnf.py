#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## cnf.py
##
"""
    The `CNF` class is a container for the clauses of one conversion.

    Next to the clauses, it keeps the number of variables that were allocated
    (which can be more than the highest variable that appears in a clause),
    the identifiers of the named variables of the original formula and the
    variable that represents the whole formula.

    A CNF can be evaluated on (many) assignments at once with numpy, which is
    convenient for checking an encoding against the original formula::

        cnf = to_cnf(expr)
        sols = cnf.all_assignments()           # 2**nr_vars x nr_vars
        sat = cnf.value(sols)                  # which rows satisfy all clauses
        vals = expr.value(cnf.named_assignment(sols[sat]))

    ===============
    List of classes
    ===============
    .. autosummary::
        :nosignatures:

        CNF
"""
import numpy as np


class CNF(object):
    """
    Clauses in Conjunctive Normal Form, clauses are lists of nonzero integers (literals)
    """

    def __init__(self, clauses=None, nr_vars=None, varmap=None, root=None):
        """
            Arguments of constructor:

            - `clauses`: list of clauses, each a list of nonzero ints
            - `nr_vars`: number of variables, if None the highest variable in `clauses` is used
            - `varmap`: dict from variable name to identifier, for the named variables
            - `root`: the variable representing the original formula, if any
        """
        self.clauses = [list(clause) for clause in clauses] if clauses is not None else []
        for clause in self.clauses:
            assert all(isinstance(lit, (int, np.integer)) and lit != 0 for lit in clause), \
                f"Clause literals must be nonzero integers, got {clause}"

        max_var = max((abs(lit) for clause in self.clauses for lit in clause), default=0)
        if nr_vars is None:
            nr_vars = max_var
        assert nr_vars >= max_var, f"nr_vars is {nr_vars} but clauses use variable {max_var}"
        self.nr_vars = int(nr_vars)

        self.varmap = dict(varmap) if varmap is not None else dict()
        self.root = root

    def __len__(self):
        return len(self.clauses)

    def __iter__(self):
        return iter(self.clauses)

    def __repr__(self):
        return f"CNF(nr_vars={self.nr_vars}, clauses={self.clauses})"

    def __eq__(self, other):
        if not isinstance(other, CNF):
            return NotImplemented
        return self.nr_vars == other.nr_vars and self.clauses == other.clauses

    def to_dimacs(self, fname=None):
        """ DIMACS text of this CNF, see :func:`~cnfpy.tools.dimacs.write_dimacs` """
        from .tools.dimacs import write_dimacs  # avoid circular import
        return write_dimacs(self, fname=fname)

    def all_assignments(self):
        """
            All 2**nr_vars assignments of the variables, as a Boolean numpy array.

            Row `j` is the binary representation of `j`, column `i` holds the value of variable `i+1`.
            Only sensible for small numbers of variables.
        """
        rows = np.arange(2 ** self.nr_vars, dtype=np.int64)
        return ((rows[:, None] >> np.arange(self.nr_vars)) & 1).astype(bool)

    def value(self, assignment):
        """
            Whether `assignment` satisfies all clauses.

            :param assignment: Boolean numpy array of shape (nr_vars,) or (n, nr_vars),
                               column `i` holds the value of variable `i+1`
            :return: a Boolean, or a Boolean array of shape (n,)
        """
        assignment = np.asarray(assignment, dtype=bool)
        assert assignment.shape[-1] == self.nr_vars, \
            f"Expected assignment(s) over {self.nr_vars} variables, got shape {assignment.shape}"

        sat = np.ones(assignment.shape[:-1], dtype=bool)
        for clause in self.clauses:
            lits = np.asarray(clause, dtype=np.int64)
            # a clause is satisfied if any of its literals has the value of its polarity
            sat &= np.any(assignment[..., np.abs(lits) - 1] == (lits > 0), axis=-1)
        return sat[()]

    def named_assignment(self, assignment):
        """
            Restrict `assignment` (as for `value()`) to the named variables,
            as a dict from name to Boolean (array) that can be passed to `Expression.value()`
        """
        assignment = np.asarray(assignment, dtype=bool)
        return {name: assignment[..., var - 1] for name, var in self.varmap.items()}
