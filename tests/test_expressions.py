import unittest
import numpy as np

import cnfpy as cn
from cnfpy.expressions.core import Operator, Expression
from cnfpy.expressions.variables import BoolVar
from cnfpy.transformations.get_variables import get_variables


class TestBoolVar(unittest.TestCase):

    def test_names(self):
        for name in ["a", "X1", "long_name_2", "and", "Not"]:
            self.assertEqual(cn.boolvar(name).name, name)

    def test_invalid_names(self):
        for name in ["", "1a", "_a", "a b", "AND", "NOT", "OR", "a-b", None]:
            self.assertRaises(ValueError, cn.boolvar, name)

    def test_equality(self):
        self.assertEqual(cn.boolvar("a"), cn.boolvar("a"))
        self.assertNotEqual(cn.boolvar("a"), cn.boolvar("A"))
        self.assertEqual(len({cn.boolvar("a"), cn.boolvar("a"), cn.boolvar("b")}), 2)


class TestOperators(unittest.TestCase):

    def setUp(self):
        self.a, self.b, self.c = [cn.boolvar(n) for n in "abc"]

    def test_overloading(self):
        self.assertEqual(self.a & self.b, Operator("and", [self.a, self.b]))
        self.assertEqual(self.a | self.b, Operator("or", [self.a, self.b]))
        self.assertEqual(~self.a, Operator("not", [self.a]))

    def test_binary_chain(self):
        expr = self.a & self.b & self.c
        self.assertEqual(expr.args[0], self.a & self.b)
        self.assertEqual(expr.args[1], self.c)

    def test_immutable(self):
        expr = self.a | self.b
        with self.assertRaises(AttributeError):
            expr.args = [self.b, self.a]

    def test_arity(self):
        self.assertRaises(AssertionError, Operator, "and", [self.a])
        self.assertRaises(AssertionError, Operator, "xor", [self.a, self.b])
        self.assertRaises(TypeError, Operator, "not", [True])
        self.assertRaises(TypeError, lambda: self.a & True)

    def test_no_python_bool(self):
        with self.assertRaises(ValueError):
            if self.a | self.b:
                pass

    def test_str_roundtrip(self):
        exprs = [self.a,
                 ~self.a,
                 ~~self.a,
                 self.a & self.b,
                 ~(self.a | ~self.b) & self.c,
                 (self.a | self.b) | (self.c & ~self.a)]
        for expr in exprs:
            self.assertEqual(cn.parse(str(expr)), expr)
        self.assertEqual(str(~(self.a | ~self.b) & self.c), "(NOT (a OR NOT b) AND c)")

    def test_size(self):
        self.assertEqual(self.a.size(), 1)
        self.assertEqual((~(self.a | self.b)).size(), 4)


class TestValue(unittest.TestCase):

    def setUp(self):
        self.a, self.b = cn.boolvar("a"), cn.boolvar("b")

    def test_scalar(self):
        expr = self.a & ~self.b
        self.assertTrue(expr.value({"a": True, "b": False}))
        self.assertFalse(expr.value({"a": True, "b": True}))
        self.assertTrue((self.a | self.b).value({"a": False, "b": True}))

    def test_unassigned(self):
        self.assertIsNone(self.a.value({}))
        self.assertIsNone((self.a | self.b).value({"a": True}))

    def test_vectorized(self):
        assignment = {"a": np.array([False, False, True, True]),
                      "b": np.array([False, True, False, True])}
        self.assertListEqual(list((self.a & self.b).value(assignment)), [False, False, False, True])
        self.assertListEqual(list((self.a | ~self.b).value(assignment)), [True, False, True, True])


class TestGetVariables(unittest.TestCase):

    def test_order_of_appearance(self):
        expr = cn.parse("((B AND NOT A) OR (C AND B))")
        self.assertEqual([v.name for v in get_variables(expr)], ["B", "A", "C"])

    def test_list_and_collect(self):
        a, b = cn.boolvar("a"), cn.boolvar("b")
        self.assertEqual(get_variables([a & b, ~a]), [a, b])
        self.assertEqual(get_variables(a | b, collect=set()), {a, b})


if __name__ == '__main__':
    unittest.main()
