from typing import Any, Iterable


class Symbol:

    def __init__(self):
        self.id: int = None


class Terminal(Symbol):
    """
    Matches a single input element against a set of acceptable elements.
    The elements keep the order they were given in for display purposes,
    equality only looks at the set of members
    """

    def __init__(self, elements: Iterable[Any]):
        Symbol.__init__(self)
        ordered: list[Any] = []
        for element in elements:
            if element not in ordered:
                ordered.append(element)

        self.elements: tuple[Any, ...] = tuple(ordered)
        self.members: frozenset[Any] = frozenset(ordered)

    def matches(self, element: Any) -> bool:
        return element in self.members

    def __hash__(self) -> int:
        return hash(self.members)

    def __eq__(self, value: object) -> bool:
        return isinstance(value, Terminal) and self.members == value.members

    def __str__(self) -> str:
        if len(self.elements) == 1:
            return "'{}'".format(self.elements[0])
        return "[{}]".format("".join(map(str, self.elements)))

    def __repr__(self) -> str:
        return "Terminal(elements={})".format(self.elements)


class NonTerminal(Symbol):

    def __init__(self, name: str):
        Symbol.__init__(self)
        self.name: str = name

    def __hash__(self) -> int:
        return hash(self.name)

    def __eq__(self, value: object) -> bool:
        return isinstance(value, NonTerminal) and self.name == value.name

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return "NonTerminal(name='{}')".format(self.name)
