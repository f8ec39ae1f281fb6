class EarleyChartError(Exception):
    pass


class LexicalError(EarleyChartError):

    def __init__(self, character: str, line: int, column: int):
        EarleyChartError.__init__(
            self,
            "Unexpected character '{}' at line {}, column {}".format(
                character, line, column
            ),
        )
        self.character: str = character
        self.line: int = line
        self.column: int = column


class GrammarError(EarleyChartError):

    def __init__(self, undefined: tuple):
        EarleyChartError.__init__(
            self,
            "Nonterminals used but never produced: {}".format(
                ", ".join(map(str, undefined))
            ),
        )
        self.undefined: tuple = undefined
