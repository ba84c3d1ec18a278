from enum import Enum
from typing import Callable, Generic, TypeVar, Union

from typing_extensions import final

from .stream import Stream

A = TypeVar("A")
A_co = TypeVar("A_co", covariant=True)
B = TypeVar("B")


class ErrorKind(Enum):
    END_OF_INPUT = "end of input"
    PREDICATE_FAILED = "predicate failed"


@final
class Ok(Generic[A_co]):
    __slots__ = "value", "stream"

    def __init__(self, value: A_co, stream: Stream):
        self.value = value
        self.stream = stream

    def __repr__(self) -> str:
        return "Ok(value={!r}, stream={!r})".format(self.value, self.stream)

    def fmap(self, fn: Callable[[A_co], B]) -> "Ok[B]":
        return Ok(fn(self.value), self.stream)


@final
class Error:
    __slots__ = "kind", "pos"

    def __init__(self, kind: ErrorKind, pos: int):
        self.kind = kind
        self.pos = pos

    def __repr__(self) -> str:
        return "Error(kind={!r}, pos={!r})".format(self.kind, self.pos)

    def __eq__(self, other: object) -> bool:
        if type(other) is not Error:
            return NotImplemented
        return self.kind is other.kind and self.pos == other.pos

    def __hash__(self) -> int:
        return hash((self.kind, self.pos))

    def fmap(self, fn: object) -> "Error":
        return self


def end_of_input(pos: int) -> Error:
    return Error(ErrorKind.END_OF_INPUT, pos)


def predicate_failed(pos: int) -> Error:
    return Error(ErrorKind.PREDICATE_FAILED, pos)


Result = Union[Ok[A], Error]
