"""Arithmetic expressions over digits, + - * / and parentheses"""

from earleychart.chart.chart import recognize
from earleychart.grammar.grammar import Grammar, GrammarBuilder
from earleychart.grammar.symbols import NonTerminal
from earleychart.lexer.lexer import Lexer, LexerBuilder

DIGITS = "0123456789"
OPERATORS = "+-*/()"


def buildArithmeticGrammar() -> tuple[Grammar, NonTerminal]:
    builder = GrammarBuilder()

    summation = builder.getNonTerminal("Sum")
    product = builder.getNonTerminal("Product")
    factor = builder.getNonTerminal("Factor")
    number = builder.getNonTerminal("Number")

    plusMinus = builder.getTerminal("+-")
    timesDivide = builder.getTerminal("*/")
    leftParen = builder.getTerminal("(")
    rightParen = builder.getTerminal(")")
    digit = builder.getTerminal(DIGITS)

    builder.addProduction(summation, [summation, plusMinus, product])
    builder.addProduction(summation, [product])
    builder.addProduction(product, [product, timesDivide, factor])
    builder.addProduction(product, [factor])
    builder.addProduction(factor, [leftParen, summation, rightParen])
    builder.addProduction(factor, [number])
    builder.addProduction(number, [digit, number])
    builder.addProduction(number, [digit])

    return builder.build(), summation


def buildArithmeticLexer() -> Lexer[str]:
    builder = LexerBuilder[str]()

    for character in DIGITS + OPERATORS:
        builder.addClass(character, character)

    return builder.skipWhitespace().build()


def recognizeArithmetic(text: str) -> bool:
    """Raises a LexicalError when the text holds a character outside the alphabet"""
    elements = buildArithmeticLexer().keys(text)
    grammar, start = buildArithmeticGrammar()
    return recognize(grammar, start, elements)
