from typing import Any, Iterable, Union

from earleychart.errors import EarleyChartError, GrammarError
from earleychart.grammar.symbols import NonTerminal, Symbol, Terminal


class Production:

    def __init__(self, lhs: NonTerminal, rhs: Iterable[Symbol]):
        self.id: int = None
        self.lhs: NonTerminal = lhs
        self.rhs: tuple[Symbol, ...] = tuple(rhs)

        self._hash: int = hash((self.lhs, self.rhs))

    def __len__(self) -> int:
        return len(self.rhs)

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, value: object) -> bool:
        return self is value or (
            isinstance(value, Production)
            and self._hash == value._hash
            and self.lhs == value.lhs
            and self.rhs == value.rhs
        )

    def __str__(self) -> str:
        return " ".join(["{} ->".format(self.lhs)] + list(map(str, self.rhs)))

    def __repr__(self) -> str:
        return "Production(id={}, {})".format(self.id, self)


class Grammar:
    """
    Ordered collection of productions. Productions are indexed by their left
    hand side, and the nullable nonterminals are computed once at creation
    """

    def __init__(self, productions: Iterable[Production]):
        self.productions: tuple[Production, ...] = tuple(productions)
        self.generators: dict[NonTerminal, list[Production]] = {}
        self.nullables: frozenset[NonTerminal] = frozenset()

        for production in self.productions:
            if production.lhs not in self.generators:
                self.generators[production.lhs] = []

            self.generators[production.lhs].append(production)

        self._computeNullables()

    def _computeNullables(self):
        nullables: set[NonTerminal] = set()

        changed = True
        while changed:
            changed = False

            for production in self.productions:
                if production.lhs in nullables:
                    continue

                if all(symbol in nullables for symbol in production.rhs):
                    nullables.add(production.lhs)
                    changed = True

        self.nullables = frozenset(nullables)

    def productionsOf(self, nonTerminal: NonTerminal) -> list[Production]:
        return self.generators.get(nonTerminal, [])

    def isNullable(self, nonTerminal: NonTerminal) -> bool:
        return nonTerminal in self.nullables

    def nonTerminals(self) -> list[NonTerminal]:
        """Every nonterminal of the grammar, in order of first appearance"""
        result: dict[NonTerminal, None] = {}
        for production in self.productions:
            result.setdefault(production.lhs)
            for symbol in production.rhs:
                if isinstance(symbol, NonTerminal):
                    result.setdefault(symbol)

        return list(result)

    def __len__(self) -> int:
        return len(self.productions)

    def __iter__(self):
        return iter(self.productions)

    def __str__(self) -> str:
        return "\n".join(map(str, self.productions))


def checkGrammar(grammar: Grammar) -> Grammar:
    """
    Optional pre-check, never run during recognition.
    Raises a GrammarError naming every nonterminal used on a right hand side
    without any production
    """
    undefined = tuple(
        nonTerminal
        for nonTerminal in grammar.nonTerminals()
        if not grammar.productionsOf(nonTerminal)
    )

    if undefined:
        raise GrammarError(undefined)

    return grammar


class GrammarBuilder:

    def __init__(self):
        self.terminals: dict[frozenset[Any], Terminal] = {}
        self.nonTerminals: dict[str, NonTerminal] = {}
        self.productions: dict[Production, Production] = {}

        self.symbolCount: int = 0

    def getTerminal(self, elements: Iterable[Any]) -> Terminal:
        terminal = Terminal(elements)

        if terminal.members not in self.terminals:
            terminal.id = self.symbolCount
            self.symbolCount += 1
            self.terminals[terminal.members] = terminal

        return self.terminals[terminal.members]

    def getNonTerminal(self, name: str) -> NonTerminal:
        if name not in self.nonTerminals:
            nonTerminal = NonTerminal(name)
            nonTerminal.id = self.symbolCount
            self.symbolCount += 1
            self.nonTerminals[name] = nonTerminal

        return self.nonTerminals[name]

    def _intern(self, symbol: Symbol) -> Symbol:
        if isinstance(symbol, Terminal):
            return self.getTerminal(symbol.elements)

        if isinstance(symbol, NonTerminal):
            return self.getNonTerminal(symbol.name)

        raise EarleyChartError("Unknown symbol type {}".format(symbol))

    def addProduction(
        self, lhs: Union[NonTerminal, str], rhs: Iterable[Symbol]
    ) -> Production:
        """
        Adds a production and returns its interned instance.
        Adding a production equal to a known one returns the known one
        """
        if isinstance(lhs, str):
            lhs = self.getNonTerminal(lhs)

        production = Production(
            self.getNonTerminal(lhs.name), [self._intern(symbol) for symbol in rhs]
        )

        if production not in self.productions:
            production.id = len(self.productions)
            self.productions[production] = production

        return self.productions[production]

    def addRawProduction(self, lhs: str, rhs: Iterable[Any]) -> Production:
        """
        Adds a production given in raw form: strings are nonterminal names,
        lists, tuples and sets are the elements of a terminal
        """
        symbols: list[Symbol] = []

        for entry in rhs:
            if isinstance(entry, Symbol):
                symbols.append(entry)
            elif isinstance(entry, str):
                symbols.append(self.getNonTerminal(entry))
            elif isinstance(entry, (list, tuple, set, frozenset)):
                if isinstance(entry, (set, frozenset)):
                    entry = sorted(entry)
                symbols.append(self.getTerminal(entry))
            else:
                raise EarleyChartError(
                    "Unexpected raw symbol {}".format(repr(entry))
                )

        return self.addProduction(lhs, symbols)

    def build(self) -> Grammar:
        return Grammar(self.productions.values())
