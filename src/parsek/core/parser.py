from abc import abstractmethod
from typing import Callable, Generic, TypeVar

from .result import Result
from .stream import Stream

A_co = TypeVar("A_co", covariant=True)


ParseFn = Callable[[Stream], Result[A_co]]


class ParseObj(Generic[A_co]):
    @abstractmethod
    def parse_fn(self, stream: Stream) -> Result[A_co]:
        ...

    def to_fn(self) -> ParseFn[A_co]:
        return self.parse_fn
