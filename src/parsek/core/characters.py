from typing import Callable

from .parser import ParseFn
from .result import Ok, Result, end_of_input, predicate_failed
from .stream import Stream


def any_char() -> ParseFn[str]:
    def any_char(stream: Stream) -> Result[str]:
        text, pos = stream
        if pos < len(text):
            return Ok(text[pos], stream.advance(1))
        return end_of_input(pos)

    return any_char


def satisfy(test: Callable[[str], bool]) -> ParseFn[str]:
    char_fn = any_char()

    def satisfy(stream: Stream) -> Result[str]:
        r = char_fn(stream)
        if type(r) is Ok and not test(r.value):
            return predicate_failed(stream.offset)
        return r

    return satisfy


def char_range(first: str, last: str) -> ParseFn[str]:
    return satisfy(lambda c: first <= c <= last)
