from io import StringIO, TextIOBase

from earleychart.errors import EarleyChartError


class CharFlow:
    """
    Character reader over a text stream, keeping track of the line and column
    (both starting at 0) of the next character to be read
    """

    def __init__(self, reader: TextIOBase):
        self.reader: TextIOBase = reader

        self.current: str = None
        self.line: int = 0
        self.column: int = 0

    def peek(self) -> str:
        """Returns the next character without consuming it, '' at end of stream"""
        if self.current is None:
            self.current = self.reader.read(1)

        return self.current

    def next(self) -> str:
        if not self.hasMore():
            raise EarleyChartError(
                "At line {}, column {}, tried to step but got end of stream".format(
                    self.line, self.column
                )
            )
        result = self.peek()
        self._step()
        return result

    def _step(self):
        if self.peek() == "\n":
            self.line += 1
            self.column = 0
        else:
            self.column += 1

        self.current = None

    def hasMore(self) -> bool:
        return self.peek() != ""

    def fromString(target: str):
        return CharFlow(StringIO(target))
