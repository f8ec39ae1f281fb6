import logging
from io import StringIO
from typing import Generic, Iterable, TypeVar

from earleychart.chart.items import Item, ItemSet
from earleychart.grammar.grammar import Grammar
from earleychart.grammar.symbols import NonTerminal, Terminal

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Chart(Generic[T]):
    """
    Earley recognizer for a grammar and a start symbol.

    The chart holds one item set per consumed input element, plus the initial
    one. Each set is brought to its predict/complete fixpoint before being
    scanned against the next input element, which produces the following set.
    The chart halts as soon as a scan produces an empty set.
    """

    def __init__(
        self,
        grammar: Grammar,
        startSymbol: NonTerminal,
        seedAllProductions: bool = True,
    ):
        self.grammar: Grammar = grammar
        self.startSymbol: NonTerminal = startSymbol
        self.seedAllProductions: bool = seedAllProductions

        self.input: list[T] = []
        self.sets: list[ItemSet] = []
        self.halted: bool = False

        seeds = (
            grammar.productions
            if seedAllProductions
            else grammar.productionsOf(startSymbol)
        )
        self.sets.append(ItemSet(Item(production, 0, 0) for production in seeds))

        self._lastStable: bool = False

    @property
    def position(self) -> int:
        return len(self.input)

    def closure(self, index: int) -> int:
        """
        Runs predict and complete on the set at the given index until no new
        item appears, and returns the number of inserted items.
        Terminals are left to the scan of the next input element
        """
        itemSet = self.sets[index]
        inserted = 0

        cursor = 0
        while cursor < len(itemSet):
            item = itemSet[cursor]
            symbol = item.nextSymbol

            if isinstance(symbol, NonTerminal):
                inserted += self._predict(item, symbol, index)
            elif item.isComplete:
                inserted += self._complete(item, index)

            cursor += 1

        logger.debug(
            "Position %d holds %d items (%d inserted)", index, len(itemSet), inserted
        )
        return inserted

    def _predict(self, item: Item, symbol: NonTerminal, index: int) -> int:
        itemSet = self.sets[index]
        inserted = 0

        for production in self.grammar.productionsOf(symbol):
            inserted += itemSet.add(Item(production, 0, index))

        # A nullable symbol may already be complete at this position
        if self.grammar.isNullable(symbol):
            inserted += itemSet.add(item.advance())

        return inserted

    def _complete(self, item: Item, index: int) -> int:
        itemSet = self.sets[index]
        lhs = item.production.lhs
        inserted = 0

        for parent in self.sets[item.origin]:
            if parent.nextSymbol == lhs:
                inserted += itemSet.add(parent.advance())

        return inserted

    def _scan(self, index: int, element: T) -> ItemSet:
        nextSet = ItemSet()

        for item in self.sets[index]:
            symbol = item.nextSymbol
            if isinstance(symbol, Terminal) and symbol.matches(element):
                nextSet.add(item.advance())

        return nextSet

    def _stabilize(self):
        if not self._lastStable:
            self.closure(len(self.sets) - 1)
            self._lastStable = True

    def consume(self, element: T) -> bool:
        """
        Scans the last set against the element and appends the resulting set.
        Returns whether that set is not empty, that is whether recognition
        can go on
        """
        if self.halted:
            logger.debug("Chart halted, ignoring element %r", element)
            return False

        index = len(self.sets) - 1
        self._stabilize()

        nextSet = self._scan(index, element)
        self.input.append(element)
        self.sets.append(nextSet)
        self._lastStable = False

        if nextSet.isEmpty():
            self.halted = True
            logger.info(
                "No item accepts %r at position %d, recognition halted",
                element,
                index,
            )
            return False

        return True

    def consumeAll(self, elements: Iterable[T]) -> bool:
        for element in elements:
            if not self.consume(element):
                return False

        return True

    def accepts(self) -> bool:
        """Whether the input consumed so far derives from the start symbol"""
        self._stabilize()

        return any(
            item.isComplete
            and item.origin == 0
            and item.production.lhs == self.startSymbol
            for item in self.sets[-1]
        )

    def render(self) -> str:
        buffer = StringIO()
        for index, itemSet in enumerate(self.sets):
            buffer.write("=== {} ===\n".format(index))
            for item in itemSet:
                buffer.write("{}\n".format(item))
            buffer.write("\n")

        return buffer.getvalue()

    def __len__(self) -> int:
        return len(self.sets)

    def __getitem__(self, index: int) -> ItemSet:
        return self.sets[index]

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return "Chart(start={}, position={}, seedAllProductions={}, halted={})".format(
            self.startSymbol, self.position, self.seedAllProductions, self.halted
        )


def recognize(
    grammar: Grammar,
    startSymbol: NonTerminal,
    elements: Iterable[T],
    seedAllProductions: bool = True,
) -> bool:
    chart = Chart(grammar, startSymbol, seedAllProductions)
    return chart.consumeAll(elements) and chart.accepts()
