from typing import Generic, TypeVar

T = TypeVar("T")


class Token(Generic[T]):

    def __init__(self, key: T, data: str, line: int, column: int):
        self.key: T = key
        self.data: str = data
        self.line: int = line
        self.column: int = column

    def __eq__(self, value: object) -> bool:
        return (
            isinstance(value, Token)
            and self.key == value.key
            and self.data == value.data
            and self.line == value.line
            and self.column == value.column
        )

    def __hash__(self) -> int:
        return hash((self.key, self.data, self.line, self.column))

    def __repr__(self) -> str:
        return "Token(key={}, data={}, line={}, column={})".format(
            repr(self.key), repr(self.data), self.line, self.column
        )
