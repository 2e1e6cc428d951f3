import unittest

from symcalc import error as E
from symcalc import Tokenizer as T
from symcalc.Tokenizer import tokenize


class TestTokenizer(unittest.TestCase):

    def test_numbers_variable_and_operators(self):
        tokens = tokenize("2.5 * x + 3")
        self.assertEqual(tokens, [
            T.number(2.5), T.operator("*"), T.variable(), T.operator("+"), T.number(3),
        ])

    def test_all_binary_operators(self):
        tokens = tokenize("x+x-x*x/x^x")
        symbols = [token.value.symbol for token in tokens if token.kind == T.OPERATOR]
        self.assertEqual(symbols, ["+", "-", "*", "/", "^"])
        self.assertFalse(T.POW.left_assoc)
        self.assertTrue(all(op.left_assoc for op in (T.SUM, T.DIFF, T.MULT, T.DIV)))
        self.assertEqual([T.SUM.priority, T.MULT.priority, T.POW.priority], [1, 2, 3])

    def test_whitespace_is_optional(self):
        self.assertEqual(tokenize("  sin ( x )  "), tokenize("sin(x)"))

    def test_number_forms(self):
        self.assertEqual(tokenize("12"), [T.number(12)])
        self.assertEqual(tokenize("0.25"), [T.number(0.25)])
        self.assertEqual(tokenize("1e+06"), [T.number(1e6)])
        self.assertEqual(tokenize("2.5E-3"), [T.number(0.0025)])
        self.assertEqual(tokenize("3."), [T.number(3)])

    def test_number_directly_followed_by_variable(self):
        self.assertEqual(tokenize("2x"), [T.number(2), T.variable()])

    def test_function_names(self):
        for name in ["sin", "cos", "tan", "cot", "ln"]:
            with self.subTest(name=name):
                tokens = tokenize(f"{name}(x)")
                self.assertEqual(tokens[0], T.function(name))
                self.assertEqual(tokens[1].kind, T.OPEN_BRACE)
                self.assertEqual(tokens[3].kind, T.CLOSE_BRACE)

    def test_unary_minus_at_start(self):
        tokens = tokenize("- x")
        self.assertEqual(tokens, [T.function(T.NEG), T.variable()])

    def test_unary_minus_after_open_brace(self):
        tokens = tokenize("2 * (-x)")
        self.assertEqual(tokens[3], T.function(T.NEG))

    def test_binary_minus_stays_binary(self):
        tokens = tokenize("x - 1")
        self.assertTrue(tokens[1].is_operator(T.DIFF))
        tokens = tokenize("(x) - 1")
        self.assertTrue(tokens[3].is_operator(T.DIFF))

    def test_invalid_character(self):
        with self.assertRaises(E.LexicalError) as context:
            tokenize("x + $")
        self.assertEqual(context.exception.fragment, "$")
        self.assertEqual(str(context.exception), "Invalid token: $")

    def test_invalid_letter_run(self):
        with self.assertRaises(E.LexicalError) as context:
            tokenize("sinh(x)")
        self.assertEqual(context.exception.fragment, "sinh")

    def test_x_followed_by_letters_is_not_the_variable(self):
        with self.assertRaises(E.LexicalError) as context:
            tokenize("xy")
        self.assertEqual(context.exception.fragment, "xy")

    def test_leading_dot_is_not_a_number(self):
        with self.assertRaises(E.LexicalError) as context:
            tokenize(".5")
        self.assertEqual(context.exception.fragment, ".")

    def test_pull_interface(self):
        tokenizer = T.Tokenizer("x ^ 2")
        self.assertEqual(tokenizer.next_token(), T.variable())
        self.assertEqual(tokenizer.next_token(), T.operator("^"))
        self.assertEqual(tokenizer.next_token(), T.number(2))
        self.assertIsNone(tokenizer.next_token())

    def test_empty_input(self):
        self.assertEqual(tokenize("   "), [])


if __name__ == '__main__':
    unittest.main()
