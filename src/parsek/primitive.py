"""
Primitive input-agnostic parsers.
"""

from typing import Callable, TypeVar

from .core import combinators
from .core.result import Ok, Result, predicate_failed
from .core.stream import Stream
from .parser import FnParser, Parser

__all__ = ("Pure", "PureFn", "pure", "fail")

A = TypeVar("A")
A_co = TypeVar("A_co", covariant=True)


class Pure(Parser[A_co]):
    """
    Parser that always succeeds, consumes no input, and returns constant value.

    >>> from parsek.primitive import Pure

    >>> Pure(0).parse("abc").unwrap()
    (0, 'abc')

    :param x: Value to return
    """

    def __init__(self, x: A_co):
        self._x = x

    def parse_fn(self, stream: Stream) -> Result[A_co]:
        return Ok(self._x, stream)


class PureFn(Parser[A_co]):
    """
    Parser that always succeeds, consumes no input, and returns the result of
    function.

    >>> from parsek.primitive import PureFn

    >>> PureFn(lambda: list()).parse("").unwrap()
    ([], '')

    :param fn: Function that produces a value to return
    """

    def __init__(self, fn: Callable[[], A_co]):
        self._fn = fn

    def parse_fn(self, stream: Stream) -> Result[A_co]:
        return Ok(self._fn(), stream)


def pure(x: A) -> Parser[A]:
    """
    Function form of :class:`Pure`.

    :param x: Value to return
    """

    return FnParser(combinators.pure(x))


def _fail(stream: Stream) -> Result[None]:
    return predicate_failed(stream.offset)


def fail() -> Parser[None]:
    """
    Parser that always fails and consumes no input.

    >>> from parsek.primitive import fail

    >>> fail().parse("a").unwrap()
    Traceback (most recent call last):
      ...
    parsek.types.PredicateFailed: at 0: unexpected input
    """

    return FnParser(_fail)
