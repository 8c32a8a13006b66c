"""
Returns an list of all variables in the expression

Variables are ordered by appearance, e.g. first encountered first
"""
from ..expressions.core import Expression
from ..expressions.variables import BoolVar


def get_variables(expr, collect=None):
    """
        Get variables of an expression

        - expr: Expression or list of expressions
        - collect: optional set, variables will be added to this set of given
   """
    if isinstance(expr, Expression):
        expr = [expr]

    # depth-first, left to right
    vars_ = []
    stack = list(reversed(expr))
    while stack:
        e = stack.pop()
        if isinstance(e, BoolVar):
            vars_.append(e)
        else:
            stack.extend(reversed(e.args))

    if collect is not None:
        # add to given set
        collect.update(vars_)
        return collect

    # mimics an ordered set, manually...
    seen = set()
    seen_add = seen.add
    return [x for x in vars_ if not (x in seen or seen_add(x))]
