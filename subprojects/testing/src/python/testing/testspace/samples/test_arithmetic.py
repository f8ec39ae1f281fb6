from unittest import TestCase

from earleychart.chart.chart import Chart
from earleychart.errors import LexicalError
from earleychart.samples.arithmetic import (
    buildArithmeticGrammar,
    buildArithmeticLexer,
    recognizeArithmetic,
)


class Test_Arithmetic(TestCase):

    def test_accepted(self):
        self.assertTrue(recognizeArithmetic("1+(2*3-4)"))
        self.assertTrue(recognizeArithmetic("5"))
        self.assertTrue(recognizeArithmetic(" 10 / (2 - 3) * 4 "))

    def test_rejected(self):
        self.assertFalse(recognizeArithmetic("1+"))
        self.assertFalse(recognizeArithmetic("()"))
        self.assertFalse(recognizeArithmetic(""))
        self.assertFalse(recognizeArithmetic("1++2"))

    def test_lexical_error_is_not_a_rejection(self):
        with self.assertRaises(LexicalError) as context:
            recognizeArithmetic("1+?")

        self.assertEqual(context.exception.character, "?")

    def test_chart_from_tokens(self):
        grammar, start = buildArithmeticGrammar()
        tokens = buildArithmeticLexer().tokenize("(1)")

        chart = Chart(grammar, start)
        self.assertTrue(chart.consumeAll(token.key for token in tokens))
        self.assertTrue(chart.accepts())

        lines = chart.render().split("\n")
        self.assertEqual(lines[0], "=== 0 ===")
        self.assertEqual(lines[1], "Sum -> • Sum [+-] Product (0)")
        self.assertIn("Sum -> Product • (0)", lines)
        self.assertIn("Factor -> '(' Sum ')' • (0)", lines)
