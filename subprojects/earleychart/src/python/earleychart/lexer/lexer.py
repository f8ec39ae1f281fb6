import logging
from typing import Generic, Iterable, TypeVar

from earleychart.core.charflow import CharFlow
from earleychart.core.token import Token
from earleychart.errors import EarleyChartError, LexicalError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Lexer(Generic[T]):
    """
    Splits raw text into one token per character, each character being
    mapped to the key of its class. Skipped characters produce no token
    """

    def __init__(
        self,
        classes: dict[str, T],
        skipped: frozenset[str] = frozenset(),
        skipWhitespace: bool = False,
    ):
        self.classes: dict[str, T] = classes
        self.skipped: frozenset[str] = skipped
        self.skipWhitespace: bool = skipWhitespace

    def isSkipped(self, character: str) -> bool:
        return character in self.skipped or (
            self.skipWhitespace and character.isspace()
        )

    def readToken(self, flow: CharFlow) -> Token[T]:
        """Returns the next token of the flow, None once the flow is exhausted"""
        while flow.hasMore() and self.isSkipped(flow.peek()):
            flow.next()

        if not flow.hasMore():
            return None

        character = flow.peek()
        if character not in self.classes:
            raise LexicalError(character, flow.line, flow.column)

        line = flow.line
        column = flow.column
        return Token(self.classes[character], flow.next(), line, column)

    def tokenize(self, text: str) -> list[Token[T]]:
        flow = CharFlow.fromString(text)
        tokens: list[Token[T]] = []

        token = self.readToken(flow)
        while token is not None:
            tokens.append(token)
            token = self.readToken(flow)

        logger.debug("Read %d tokens from %d characters", len(tokens), len(text))
        return tokens

    def keys(self, text: str) -> list[T]:
        return [token.key for token in self.tokenize(text)]


class LexerBuilder(Generic[T]):

    def __init__(self):
        self.classes: dict[str, T] = {}
        self.skipped: set[str] = set()
        self.whitespace: bool = False

    def addClass(self, characters: Iterable[str], key: T):
        for character in characters:
            if character in self.classes and self.classes[character] != key:
                raise EarleyChartError(
                    "Character '{}' already belongs to class {}".format(
                        character, repr(self.classes[character])
                    )
                )
            self.classes[character] = key

        return self

    def addSkipped(self, characters: Iterable[str]):
        self.skipped.update(characters)
        return self

    def skipWhitespace(self):
        self.whitespace = True
        return self

    def build(self) -> Lexer[T]:
        return Lexer(dict(self.classes), frozenset(self.skipped), self.whitespace)
