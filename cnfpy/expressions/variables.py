#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## variables.py
##
"""
    Named Boolean variables, the leafs of every expression tree.

    Variables are identified by their name only: two variables with the same name
    are the same variable, wherever they appear in a formula.

    ===============
    List of classes
    ===============
    .. autosummary::
        :nosignatures:

        BoolVar

    =================
    List of functions
    =================
    .. autosummary::
        :nosignatures:

        boolvar
"""
import re

from .core import Expression

IDENTIFIER = re.compile(r"[A-Za-z][A-Za-z0-9_]*")
RESERVED = frozenset(["NOT", "AND", "OR"])


def boolvar(name):
    """
    Boolean variable with the given name, e.g. `a = boolvar("a")`

    The name must be usable in a formula: it starts with a letter, only contains
    letters, digits and underscores, and is not one of the keywords `NOT`, `AND`, `OR`.
    Names are case-sensitive, so `and` is a valid name.
    """
    return BoolVar(name)


class BoolVar(Expression):
    """
    **Boolean** variable with a name.

    Its value is looked up in the assignment given to `value()`.
    """

    def __init__(self, name):
        if not isinstance(name, str) or IDENTIFIER.fullmatch(name) is None or name in RESERVED:
            raise ValueError(f"Invalid variable name {name!r}")
        super().__init__(name, [])

    def value(self, assignment):
        """ the value of this variable in `assignment` (a dict from name to bool or numpy array),
            or `None` if it is not assigned
        """
        return assignment.get(self.name)

    def __repr__(self):
        return self.name

    # when redefining __eq__, must redefine custom__hash__
    # https://stackoverflow.com/questions/53518981/inheritance-hash-sets-to-none-in-a-subclass
    def __eq__(self, other):
        if not isinstance(other, Expression):
            return NotImplemented
        return isinstance(other, BoolVar) and self.name == other.name

    def __hash__(self):
        return hash(self.name)
