from __future__ import annotations

from typing import Iterable, Iterator

from earleychart.grammar.grammar import Production
from earleychart.grammar.symbols import Symbol


class Item:
    """
    A production with a dot and an origin: the symbols before the dot have
    been matched from input position origin onwards
    """

    def __init__(self, production: Production, dot: int = 0, origin: int = 0):
        if not 0 <= dot <= len(production.rhs):
            raise ValueError(
                "Dot {} out of range for production '{}'".format(dot, production)
            )

        self.production: Production = production
        self.dot: int = dot
        self.origin: int = origin

        self._hash: int = hash((production, dot, origin))

    @property
    def isComplete(self) -> bool:
        return self.dot == len(self.production.rhs)

    @property
    def nextSymbol(self) -> Symbol:
        if self.isComplete:
            return None
        return self.production.rhs[self.dot]

    def advance(self) -> Item:
        return Item(self.production, self.dot + 1, self.origin)

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, value: object) -> bool:
        return (
            isinstance(value, Item)
            and self.dot == value.dot
            and self.origin == value.origin
            and self.production == value.production
        )

    def __str__(self) -> str:
        parts = ["{} ->".format(self.production.lhs)]
        for index, symbol in enumerate(self.production.rhs):
            if index == self.dot:
                parts.append("•")
            parts.append(str(symbol))

        if self.isComplete:
            parts.append("•")

        parts.append("({})".format(self.origin))
        return " ".join(parts)

    def __repr__(self) -> str:
        return "Item({})".format(self)


class ItemSet:
    """
    Deduplicating, insertion ordered collection of items.
    Traversing it by index, or iterating over it, also yields the items
    inserted during the traversal
    """

    def __init__(self, items: Iterable[Item] = ()):
        self.items: list[Item] = []
        self.known: set[Item] = set()

        for item in items:
            self.add(item)

    def add(self, item: Item) -> bool:
        if item in self.known:
            return False

        self.known.add(item)
        self.items.append(item)
        return True

    def isEmpty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Item:
        return self.items[index]

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __contains__(self, item: object) -> bool:
        return item in self.known

    def __eq__(self, value: object) -> bool:
        return isinstance(value, ItemSet) and self.items == value.items

    def __str__(self) -> str:
        return "\n".join(map(str, self.items))

    def __repr__(self) -> str:
        return "ItemSet({} items)".format(len(self.items))
