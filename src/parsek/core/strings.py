from typing import Callable

from .combinators import bind, seql, seqr
from .parser import ParseFn
from .result import Ok, Result, end_of_input, predicate_failed
from .stream import Stream


def remaining() -> ParseFn[str]:
    def remaining(stream: Stream) -> Result[str]:
        return Ok(stream.rest, stream.skip_to_end())

    return remaining


def satisfy_string(test: Callable[[str], bool]) -> ParseFn[str]:
    rest_fn = remaining()

    def satisfy_string(stream: Stream) -> Result[str]:
        r = rest_fn(stream)
        if type(r) is Ok and not test(r.value):
            return predicate_failed(stream.offset)
        return r

    return satisfy_string


def string_upto(delimiter: str) -> ParseFn[str]:
    def string_upto(stream: Stream) -> Result[str]:
        text, pos = stream
        end = text.find(delimiter, pos)
        if end < 0:
            return end_of_input(len(text))
        return Ok(text[pos:end], stream.advance(end - pos))

    return string_upto


def literal(s: str) -> ParseFn[str]:
    ls = len(s)

    def literal(stream: Stream) -> Result[str]:
        text, pos = stream
        if text.startswith(s, pos):
            return Ok(s, stream.advance(ls))
        if len(text) - pos < ls and s.startswith(text[pos:]):
            return end_of_input(len(text))
        return predicate_failed(pos)

    return literal


def eof() -> ParseFn[None]:
    def eof(stream: Stream) -> Result[None]:
        if stream.at_end:
            return Ok(None, stream)
        return predicate_failed(stream.offset)

    return eof


def find(parse_fn: ParseFn[str]) -> ParseFn[str]:
    def find(stream: Stream) -> Result[str]:
        cur = stream
        while True:
            r = parse_fn(cur)
            if type(r) is Ok:
                return Ok(r.value, stream)
            if cur.at_end:
                return end_of_input(cur.offset)
            cur = cur.advance(1)

    return find


def bracket(open_fn: ParseFn[str], close_fn: ParseFn[str]) -> ParseFn[str]:
    middle = bind(find(close_fn), string_upto)
    return seqr(open_fn, seql(middle, close_fn))
