from unittest import TestCase

from earleychart.core.token import Token
from earleychart.errors import EarleyChartError, LexicalError
from earleychart.lexer.lexer import LexerBuilder


class Test_Lexer(TestCase):

    def setUp(self):
        self.lexer = (
            LexerBuilder[str]()
            .addClass("0123456789", "digit")
            .addClass("+", "plus")
            .addClass("()", "paren")
            .skipWhitespace()
            .build()
        )

    def test_tokenize(self):
        tokens = self.lexer.tokenize("12 +\n(3)")

        self.assertEqual(
            tokens,
            [
                Token("digit", "1", 0, 0),
                Token("digit", "2", 0, 1),
                Token("plus", "+", 0, 3),
                Token("paren", "(", 1, 0),
                Token("digit", "3", 1, 1),
                Token("paren", ")", 1, 2),
            ],
        )

    def test_keys(self):
        self.assertEqual(self.lexer.keys(" 1+2 "), ["digit", "plus", "digit"])
        self.assertEqual(self.lexer.keys(""), [])
        self.assertEqual(self.lexer.keys(" \t\n"), [])

    def test_unexpected_character(self):
        with self.assertRaises(LexicalError) as context:
            self.lexer.tokenize("1+\n 2?")

        error = context.exception
        self.assertEqual(error.character, "?")
        self.assertEqual((error.line, error.column), (1, 2))
        self.assertEqual(str(error), "Unexpected character '?' at line 1, column 2")

    def test_skipped_characters(self):
        lexer = LexerBuilder[str]().addClass("ab", "letter").addSkipped("_").build()

        self.assertEqual(lexer.keys("a_b__a"), ["letter"] * 3)
        with self.assertRaises(LexicalError):
            lexer.tokenize("a b")

    def test_conflicting_classes(self):
        builder = LexerBuilder[str]().addClass("ab", "letter")
        builder.addClass("a", "letter")

        with self.assertRaises(EarleyChartError):
            builder.addClass("b", "other")
