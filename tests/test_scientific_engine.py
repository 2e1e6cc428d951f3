import math
import unittest

from symcalc import ScientificEngine as S
from symcalc import Tokenizer as T
from symcalc import error as E


class TestDivide(unittest.TestCase):

    def test_regular_division(self):
        self.assertEqual(S.divide(3.0, 2.0), 1.5)

    def test_division_by_zero(self):
        self.assertEqual(S.divide(1.0, 0.0), math.inf)
        self.assertEqual(S.divide(-1.0, 0.0), -math.inf)
        self.assertEqual(S.divide(1.0, -0.0), -math.inf)
        self.assertTrue(math.isnan(S.divide(0.0, 0.0)))


class TestPower(unittest.TestCase):

    def test_regular_powers(self):
        self.assertEqual(S.power(2.0, 10.0), 1024.0)
        self.assertEqual(S.power(-2.0, 3.0), -8.0)
        self.assertEqual(S.power(4.0, 0.5), 2.0)

    def test_zero_base_negative_exponent(self):
        self.assertEqual(S.power(0.0, -1.0), math.inf)
        self.assertEqual(S.power(-0.0, -1.0), -math.inf)
        self.assertEqual(S.power(0.0, -2.0), math.inf)

    def test_negative_base_fractional_exponent(self):
        self.assertTrue(math.isnan(S.power(-8.0, 1 / 3)))

    def test_overflow(self):
        self.assertEqual(S.power(10.0, 400.0), math.inf)
        self.assertEqual(S.power(-10.0, 401.0), -math.inf)


class TestFunctions(unittest.TestCase):

    def test_natural_log(self):
        self.assertEqual(S.natural_log(math.e), 1.0)
        self.assertEqual(S.natural_log(0.0), -math.inf)
        self.assertTrue(math.isnan(S.natural_log(-1.0)))

    def test_trigonometric_of_infinity(self):
        for kernel in (S.sine, S.cosine, S.tangent):
            with self.subTest(kernel=kernel.__name__):
                self.assertTrue(math.isnan(kernel(math.inf)))

    def test_cotangent(self):
        self.assertAlmostEqual(S.cotangent(math.pi / 4), 1.0)
        self.assertEqual(S.cotangent(0.0), math.inf)

    def test_apply_function(self):
        self.assertEqual(S.apply_function(T.NEG, 2.5), -2.5)
        self.assertEqual(S.apply_function(T.SIN, 0.0), 0.0)

    def test_apply_operator(self):
        self.assertEqual(S.apply_operator(T.SUM, 1.0, 2.0), 3.0)
        self.assertEqual(S.apply_operator(T.DIFF, 1.0, 2.0), -1.0)
        self.assertEqual(S.apply_operator(T.MULT, 3.0, 2.0), 6.0)
        self.assertEqual(S.apply_operator(T.DIV, 1.0, 0.0), math.inf)
        self.assertEqual(S.apply_operator(T.POW, 2.0, 3.0), 8.0)

    def test_unknown_operator(self):
        modulo = T.BinaryOperator("Mod", "%", 2)
        with self.assertRaises(E.MathError):
            S.apply_operator(modulo, 1.0, 2.0)


if __name__ == '__main__':
    unittest.main()
