from unittest import TestCase

from earleychart.core.charflow import CharFlow
from earleychart.core.token import Token
from earleychart.errors import EarleyChartError


class Test_CharFlow(TestCase):

    def test_basic(self):
        flow: CharFlow = CharFlow.fromString("abc")

        self.assertEqual(flow.peek(), "a")
        self.assertEqual(flow.peek(), "a")
        self.assertTrue(flow.hasMore())

        self.assertEqual(flow.next(), "a")
        self.assertEqual(flow.next(), "b")
        self.assertEqual(flow.next(), "c")
        self.assertFalse(flow.hasMore())
        self.assertEqual(flow.peek(), "")

    def test_positions(self):
        flow: CharFlow = CharFlow.fromString("ab\ncd")

        flow.next()
        flow.next()
        self.assertEqual((flow.line, flow.column), (0, 2))

        flow.next()
        self.assertEqual((flow.line, flow.column), (1, 0))

        flow.next()
        self.assertEqual((flow.line, flow.column), (1, 1))

    def test_end_of_stream(self):
        flow: CharFlow = CharFlow.fromString("")

        self.assertFalse(flow.hasMore())
        with self.assertRaises(EarleyChartError):
            flow.next()


class Test_Token(TestCase):

    def test_equality(self):
        self.assertEqual(Token("+", "+", 0, 3), Token("+", "+", 0, 3))
        self.assertNotEqual(Token("+", "+", 0, 3), Token("+", "+", 0, 4))
        self.assertEqual(repr(Token("+", "+", 0, 3)), "Token(key='+', data='+', line=0, column=3)")
