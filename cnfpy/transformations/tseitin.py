"""
Transform an expression into **Conjunctive Normal Form** (i.e. an `and` of `or`s of literals) using the
Tseitin transformation.

Every variable of the formula gets a positive integer identifier, in order of first appearance.
Every operator node gets a fresh auxiliary variable `v`, constrained to be equivalent to the operator
applied to the variables of its arguments:

===================  ==========================================
Expression           Clauses
===================  ==========================================
`v <-> not s`        `(-v | -s)`, `(v | s)`
`v <-> (l and r)`    `(-v | l)`, `(-v | r)`, `(v | -l | -r)`
`v <-> (l or r)`     `(-l | v)`, `(-r | v)`, `(-v | l | r)`
===================  ==========================================

The tree is traversed in post-order: the left argument is fully encoded before the right one,
and the auxiliary variable of an operator is allocated after those of its arguments.
This makes the variable numbering and the clause order deterministic.

The traversal uses an explicit stack, so deeply nested expressions (e.g. built in a loop
with `&`) do not run into Python's recursion limit.

The numbering state lives in a :class:`TseitinContext`, create a new one for every
independent conversion (the default) or share one to encode several formulas over the same variables.

    =================
    List of functions
    =================
    .. autosummary::
        :nosignatures:

        tseitin
        to_cnf
"""
import logging

from ..cnf import CNF
from ..expressions.core import Operator
from ..expressions.variables import BoolVar
from ..exceptions import TransformationNotImplementedError

logger = logging.getLogger(__name__)


class TseitinContext(object):
    """
        Variable registry and fresh-variable counter of one conversion.

        - `varmap`: dict from variable name to its integer identifier
        - `counter`: the identifier that will be allocated next (starts at 1)
    """

    def __init__(self):
        self.varmap = dict()
        self.counter = 1

    def new_var(self):
        """ allocate a fresh variable identifier """
        var = self.counter
        self.counter += 1
        return var

    def get_var(self, name):
        """ identifier of the variable with this name, allocated on first sight """
        if name not in self.varmap:
            self.varmap[name] = self.new_var()
        return self.varmap[name]

    @property
    def nr_vars(self):
        """ highest identifier allocated so far """
        return self.counter - 1


def tseitin(expr, context=None):
    """
        Tseitin encoding of `expr`.

        Arguments:
            expr:       Expression, e.g. as returned by :func:`~cnfpy.expressions.parser.parse`
            context:    optional :class:`TseitinContext`, a fresh one is used if None

        Returns:
            (var, clauses): the variable that is equivalent to `expr`, and the list of clauses
            (lists of nonzero ints) that define it. The unit clause `[var]` is *not* included.
    """
    if context is None:
        context = TseitinContext()

    clauses = []
    results = [] # variables of the encoded subexpressions
    stack = [(expr, False)]
    while stack:
        node, expanded = stack.pop()

        if isinstance(node, BoolVar):
            results.append(context.get_var(node.name))
            continue

        if not isinstance(node, Operator):
            raise TransformationNotImplementedError(f"No Tseitin encoding for expression {node} of type {type(node)}")

        if not expanded:
            # revisit after the arguments, leftmost argument is popped first
            stack.append((node, True))
            stack.extend((arg, False) for arg in reversed(node.args))
            continue

        if node.name == "not":
            s = results.pop()
            v = context.new_var()
            clauses.append([-v, -s])
            clauses.append([v, s])
        elif node.name == "and":
            r = results.pop()
            l = results.pop()
            v = context.new_var()
            clauses.append([-v, l])
            clauses.append([-v, r])
            clauses.append([v, -l, -r])
        elif node.name == "or":
            r = results.pop()
            l = results.pop()
            v = context.new_var()
            clauses.append([-l, v])
            clauses.append([-r, v])
            clauses.append([-v, l, r])
        else:
            raise TransformationNotImplementedError(f"No Tseitin encoding for operator '{node.name}'")
        results.append(v)

    assert len(results) == 1, f"Expected one result variable, got {results}"
    return results[0], clauses


def to_cnf(expr, context=None):
    """
        Converts `expr` into an equisatisfiable **Conjunctive Normal Form**

        The Tseitin clauses are extended with the unit clause that forces the variable of `expr` to true.

        Arguments:
            expr:       Expression
            context:    optional :class:`TseitinContext`, a fresh one is used if None
        Returns:
            :class:`~cnfpy.cnf.CNF`
    """
    if context is None:
        context = TseitinContext()

    root, clauses = tseitin(expr, context)
    clauses.append([root])

    logger.debug("encoded %d named and %d auxiliary variables into %d clauses",
                 len(context.varmap), context.nr_vars - len(context.varmap), len(clauses))
    return CNF(clauses, context.nr_vars, varmap=dict(context.varmap), root=root)
