from typing import Callable, List, Optional, Tuple, TypeVar, Union

from .parser import ParseFn
from .result import Error, Ok, Result
from .stream import Stream

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def pure(x: A) -> ParseFn[A]:
    def pure(stream: Stream) -> Result[A]:
        return Ok(x, stream)

    return pure


def fmap(parse_fn: ParseFn[A], fn: Callable[[A], B]) -> ParseFn[B]:
    def fmap(stream: Stream) -> Result[B]:
        return parse_fn(stream).fmap(fn)

    return fmap


def _seq(
        parse_fn: ParseFn[A], second_fn: ParseFn[B],
        merge: Callable[[A, B], C]) -> ParseFn[C]:
    def seq(stream: Stream) -> Result[C]:
        ra = parse_fn(stream)
        if type(ra) is Error:
            return ra
        rb = second_fn(ra.stream)
        if type(rb) is Error:
            return rb
        return Ok(merge(ra.value, rb.value), rb.stream)

    return seq


def ap(
        fn_parse_fn: ParseFn[Callable[[A], B]],
        parse_fn: ParseFn[A]) -> ParseFn[B]:
    return _seq(fn_parse_fn, parse_fn, lambda f, v: f(v))


def seq(parse_fn: ParseFn[A], second_fn: ParseFn[B]) -> ParseFn[Tuple[A, B]]:
    return _seq(parse_fn, second_fn, lambda l, r: (l, r))


def seql(parse_fn: ParseFn[A], second_fn: ParseFn[B]) -> ParseFn[A]:
    return _seq(parse_fn, second_fn, lambda l, _: l)


def seqr(parse_fn: ParseFn[A], second_fn: ParseFn[B]) -> ParseFn[B]:
    return _seq(parse_fn, second_fn, lambda _, r: r)


def bind(
        parse_fn: ParseFn[A],
        fn: Callable[[A], ParseFn[B]]) -> ParseFn[B]:
    def bind(stream: Stream) -> Result[B]:
        ra = parse_fn(stream)
        if type(ra) is Error:
            return ra
        return fn(ra.value)(ra.stream)

    return bind


def alt(
        parse_fn: ParseFn[A],
        second_fn: ParseFn[B]) -> ParseFn[Union[A, B]]:
    def alt(stream: Stream) -> Result[Union[A, B]]:
        ra = parse_fn(stream)
        if type(ra) is Ok:
            return ra
        return second_fn(stream)

    return alt


def maybe(parse_fn: ParseFn[A]) -> ParseFn[Optional[A]]:
    def maybe(stream: Stream) -> Result[Optional[A]]:
        r = parse_fn(stream)
        if type(r) is Ok:
            return r
        return Ok(None, stream)

    return maybe


def many(parse_fn: ParseFn[A]) -> ParseFn[List[A]]:
    def many(stream: Stream) -> Result[List[A]]:
        value: List[A] = []
        r = parse_fn(stream)
        while type(r) is Ok:
            if r.stream.offset == stream.offset:
                raise RuntimeError("parser shouldn't accept empty string")
            value.append(r.value)
            stream = r.stream
            r = parse_fn(stream)
        return Ok(value, stream)

    return many


def some(parse_fn: ParseFn[A]) -> ParseFn[List[A]]:
    return ap(fmap(parse_fn, lambda v: lambda vs: [v, *vs]), many(parse_fn))


def between(
        open_fn: ParseFn[B], close_fn: ParseFn[C],
        parse_fn: ParseFn[A]) -> ParseFn[A]:
    return seqr(open_fn, seql(parse_fn, close_fn))


def sep_by(parse_fn: ParseFn[A], sep_fn: ParseFn[B]) -> ParseFn[List[A]]:
    return fmap(
        maybe(seq(parse_fn, many(seqr(sep_fn, parse_fn)))),
        lambda v: [] if v is None else [v[0], *v[1]]
    )
