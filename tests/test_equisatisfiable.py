import unittest
import pytest
import numpy as np

import cnfpy as cn
from cnfpy.transformations.get_variables import get_variables

from utils import truth_table, count_models, count_cnf_models, ortools_count

FORMULAS = [
    "A",
    "NOT A",
    "(A AND B)",
    "(A OR B)",
    "(A AND A)",
    "(A AND NOT A)",          # unsatisfiable
    "(A OR NOT A)",           # valid
    "NOT NOT A",
    "NOT (A AND (B OR NOT C))",
    "((A OR B) AND (NOT A OR C))",
    "((A AND NOT B) OR (NOT A AND B))",
    "NOT ((x1 OR x2) AND (NOT x3 OR (x1 AND x4)))",
]


class TestEquisatisfiable(unittest.TestCase):

    def test_satisfying_assignments_satisfy_formula(self):
        for text in FORMULAS:
            expr = cn.parse(text)
            cnf = cn.to_cnf(expr)
            sols = cnf.all_assignments()
            sat = cnf.value(sols)
            # every solution of the CNF, restricted to the named variables, is a model of the formula
            vals = expr.value(cnf.named_assignment(sols[sat]))
            self.assertTrue(np.all(vals), msg=text)
            # and the formula is satisfiable iff the CNF is
            self.assertEqual(bool(np.any(sat)), count_models(expr) > 0, msg=text)

    def test_model_counts_agree(self):
        # auxiliary variables are functionally defined, so each model extends in exactly one way
        for text in FORMULAS:
            expr = cn.parse(text)
            self.assertEqual(count_cnf_models(cn.to_cnf(expr)), count_models(expr), msg=text)

    def test_every_model_extends(self):
        for text in FORMULAS:
            expr = cn.parse(text)
            cnf = cn.to_cnf(expr)
            sols = cnf.all_assignments()
            sat = cnf.value(sols)
            names = [v.name for v in get_variables(expr)]
            table = truth_table(names)
            models = {tuple(row) for row, ok in zip(zip(*[table[n] for n in names]), expr.value(table)) if ok}
            named = cnf.named_assignment(sols[sat])
            extended = {tuple(row) for row in zip(*[named[n] for n in names])}
            self.assertSetEqual(models, extended, msg=text)

    def test_consistent_variable_identity(self):
        cnf = cn.formula_to_cnf("((A AND B) OR (NOT A AND NOT B))")
        self.assertEqual(cnf.varmap, {"A": 1, "B": 2})
        # a single variable for both occurrences, so the formula is not satisfied by A != B
        assignment = cnf.all_assignments()
        sat = cnf.value(assignment)
        self.assertTrue(np.all(assignment[sat, 0] == assignment[sat, 1]))

    @pytest.mark.requires_dependency("ortools")
    def test_ortools_count(self):
        for text in FORMULAS:
            cnf = cn.formula_to_cnf(text)
            self.assertEqual(ortools_count(cnf), count_cnf_models(cnf), msg=text)


if __name__ == '__main__':
    unittest.main()
