#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## core.py
##
"""
    The :class:`~cnfpy.expressions.core.Expression` superclass and the :class:`~cnfpy.expressions.core.Operator` subclass.

    Expressions are normally created by the parser, but they can also be built directly
    through operator overloading on variables and expressions:

    Logical Operators
    -----------------
    ===================  =============================
    Python Operator      cnfpy Object
    ===================  =============================
    `x & y`              `Operator("and", [x, y])`
    `x | y`              `Operator("or", [x, y])`
    `~x`                 `Operator("not", [x])`
    ===================  =============================

    All operators are binary (or unary for `not`), exactly like in the formula grammar,
    so `x & y & z` creates `Operator("and", [Operator("and", [x, y]), z])`.

    Apart from operator overloading, expressions implement:

    - :func:`~cnfpy.expressions.core.Expression.value`
        computes the truth value of this expression under an assignment of its variables.
        The assignment can hold numpy arrays of Booleans, in which case the
        value is computed element-wise (e.g. for a full truth table at once).

    - :func:`~cnfpy.expressions.core.Expression.__str__`
        prints the expression back in the formula grammar, such that parsing the
        printed text gives an equal expression.

    ===============
    List of classes
    ===============
    .. autosummary::
        :nosignatures:

        Expression
        Operator
"""
import numpy as np


class Expression(object):
    """
    An Expression represents a Boolean function with a `self.name` and `self.args` (arguments)

    Expressions are immutable: the arguments can not be replaced once the expression is created.
    """

    def __init__(self, name, arg_list):
        self.name = name

        if isinstance(arg_list, tuple):
            arg_list = list(arg_list)
        assert isinstance(arg_list, list), "_list_ of arguments required, even if of length one e.g. [arg]"
        self._args = arg_list

    @property
    def args(self):
        return self._args

    @args.setter
    def args(self, args):
        raise AttributeError("Cannot modify read-only attribute 'args', expressions are immutable")

    def __repr__(self):
        return "{}({})".format(self.name, ",".join(map(str, self.args)))

    def __hash__(self):
        return hash(self.__repr__())

    def __eq__(self, other):
        # structural equality
        if not isinstance(other, Expression):
            return NotImplemented
        return type(self) is type(other) and self.name == other.name and self.args == other.args

    def __ne__(self, other):
        res = self.__eq__(other)
        if res is NotImplemented:
            return res
        return not res

    def value(self, assignment):
        return None # default

    def size(self):
        """ Number of nodes in the expression tree (including variables)
        """
        count = 0
        stack = [self]
        while stack:
            el = stack.pop()
            count += 1
            stack.extend(el.args if isinstance(el, Operator) else ())
        return count

    # Boolean Operators
    # Implements bitwise operations & | and ~ (and, or, not)
    def __and__(self, other):
        if not isinstance(other, Expression):
            return NotImplemented
        return Operator("and", [self, other])

    def __rand__(self, other):
        if not isinstance(other, Expression):
            return NotImplemented
        return Operator("and", [other, self])

    def __or__(self, other):
        if not isinstance(other, Expression):
            return NotImplemented
        return Operator("or", [self, other])

    def __ror__(self, other):
        if not isinstance(other, Expression):
            return NotImplemented
        return Operator("or", [other, self])

    def __invert__(self):
        return Operator("not", [self])

    def __bool__(self):
        raise ValueError(f"__bool__ should not be called on an Expression ({self}), "
                         f"use `&`, `|` and `~` instead of `and`, `or` and `not`")


class Operator(Expression):
    """
    The logical operators of the formula grammar: `not`, `and` and `or`
    """
    allowed = {
        #name: arity
        'and': 2,
        'or':  2,
        'not': 1,
    }
    printmap = {'and': 'AND', 'or': 'OR', 'not': 'NOT'}

    def __init__(self, name, arg_list):
        # sanity checks
        assert (name in Operator.allowed), "Operator {} not allowed".format(name)
        arity = Operator.allowed[name]
        assert (len(arg_list) == arity), "Operator: {}, number of arguments must be {}".format(name, arity)
        for arg in arg_list:
            if not isinstance(arg, Expression):
                raise TypeError("{}-operator only accepts expressions, not {}".format(name, arg))

        super().__init__(name, arg_list)

    def __repr__(self):
        printname = Operator.printmap[self.name]
        if self.name == 'not':
            return "{} {}".format(printname, self.args[0])
        # binary operators are always bracketed, as in the grammar
        return "({} {} {})".format(self.args[0], printname, self.args[1])

    def value(self, assignment):
        arg_vals = [arg.value(assignment) for arg in self.args]
        if any(a is None for a in arg_vals): return None

        if self.name == "and": return np.logical_and(arg_vals[0], arg_vals[1])
        elif self.name == "or": return np.logical_or(arg_vals[0], arg_vals[1])
        elif self.name == "not": return np.logical_not(arg_vals[0])

        return None # default
