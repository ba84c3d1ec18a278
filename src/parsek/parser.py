"""
Parser combinators.
"""

from typing import Callable, List, Optional, Tuple, TypeVar, Union

from .core import combinators
from .core.parser import ParseFn, ParseObj
from .core.result import Result
from .core.stream import Stream
from .types import ParseResult

A = TypeVar("A")
A_co = TypeVar("A_co", covariant=True)
B = TypeVar("B")
C = TypeVar("C")


class Parser(ParseObj[A_co]):
    def parse(self, stream: str) -> ParseResult[A_co]:
        """
        Parses input, starting from its' first character.

        >>> from parsek.characters import digit

        >>> digit.many().parse("12ab").unwrap()
        (['1', '2'], 'ab')

        :param stream: Input to parse
        """

        return ParseResult(self.parse_fn(Stream(stream)))

    def parse_stream(self, stream: Stream) -> Result[A_co]:
        """
        Applies the parser to ``stream`` and returns the raw result. The
        ``stream`` itself is never modified.

        >>> from parsek import Stream
        >>> from parsek.characters import letter

        >>> letter.parse_stream(Stream("ab", 1))
        Ok(value='b', stream=Stream(offset=2, rest=''))

        :param stream: Position in the input to start from
        """

        return self.parse_fn(stream)

    def fmap(self, fn: Callable[[A_co], B]) -> "Parser[B]":
        """
        Transforms the result of the parser by applying ``fn`` to it.

        >>> from parsek.characters import digit

        >>> digit.fmap(lambda x: int(x) + 1).parse("0").unwrap()
        (1, '')

        :param fn: Function to produce new value from the result of the parser
        """

        return fmap(self, fn)

    def ap(
            self: "Parser[Callable[[B], C]]",
            other: ParseObj[B]) -> "Parser[C]":
        """
        Applies the parser, which returns a function, then applies ``other``
        and returns the result of calling that function with the value parsed
        by ``other``.

        >>> from parsek.characters import digit
        >>> from parsek.primitive import Pure

        >>> Pure(int).ap(digit).parse("7").unwrap()
        (7, '')

        :param other: Parser of the function argument
        """

        return ap(self, other)

    def bind(self, fn: Callable[[A_co], ParseObj[B]]) -> "Parser[B]":
        """
        Calls ``fn`` with the result of the parser and then applies the
        returned parser.

        >>> from parsek.characters import any_char, satisfy

        >>> parser = any_char.bind(lambda x: satisfy(lambda c: c == x))

        >>> parser.parse("aa").unwrap()
        ('a', '')
        >>> parser.parse("ab").unwrap()
        Traceback (most recent call last):
          ...
        parsek.types.PredicateFailed: at 1: unexpected input

        :param fn: Function that returns a new parser using the result of this
            parser
        """

        return bind(self, fn)

    def seql(self, other: ParseObj[B]) -> "Parser[A_co]":
        """
        Alias for :meth:`Parser.__lshift__`

        :param other: Second parser
        """

        return seql(self, other)

    def seqr(self, other: ParseObj[B]) -> "Parser[B]":
        """
        Alias for :meth:`Parser.__rshift__`

        :param other: Second parser
        """

        return seqr(self, other)

    def __lshift__(self, other: ParseObj[B]) -> "Parser[A_co]":
        """
        Applies two parsers sequentially and returns the result of the first
        parser.

        >>> from parsek.strings import literal

        >>> (literal("a") << literal(";")).parse("a;").unwrap()
        ('a', '')

        :param other: Second parser
        """

        return seql(self, other)

    def __rshift__(self, other: ParseObj[B]) -> "Parser[B]":
        """
        Applies two parsers sequentially and returns the result of the second
        parser.

        >>> from parsek.strings import literal

        >>> (literal("-") >> literal("b")).parse("-b").unwrap()
        ('b', '')

        :param other: Second parser
        """

        return seqr(self, other)

    def __add__(self, other: ParseObj[B]) -> "Parser[Tuple[A_co, B]]":
        """
        Applies two parsers sequentially and returns a tuple of their results.

        >>> from parsek.characters import digit, letter

        >>> parser = letter + digit

        >>> parser.parse("a1").unwrap()
        (('a', '1'), '')
        >>> parser.parse("ab").unwrap()
        Traceback (most recent call last):
          ...
        parsek.types.PredicateFailed: at 1: unexpected input

        :param other: Second parser
        """

        return seq(self, other)

    def __or__(self, other: ParseObj[B]) -> "Parser[Union[A_co, B]]":
        """
        Applies the first parser and returns its' result unless it fails. In
        this case the second parser is applied to the same input and its'
        result is returned as is.

        >>> from parsek.strings import literal

        >>> parser = (literal("a") + literal("b")) | literal("ac")

        >>> parser.parse("ab").unwrap()
        (('a', 'b'), '')
        >>> parser.parse("ac").unwrap()
        ('ac', '')

        :param other: Second parser
        """

        return alt(self, other)

    def maybe(self) -> "Parser[Optional[A_co]]":
        """
        Applies the parser and returns ``None`` without consuming input if it
        failed. Otherwise returns the result of the parser.

        >>> from parsek.characters import digit

        >>> digit.maybe().parse("1a").unwrap()
        ('1', 'a')
        >>> digit.maybe().parse("a").unwrap()
        (None, 'a')
        """

        return maybe(self)

    def many(self) -> "Parser[List[A_co]]":
        """
        Applies the parser multiple times, until it fails. Returns a list of
        the parsed values. The input consumed by the failed attempt is not
        consumed.

        The parser must consume input on success, otherwise
        :exc:`RuntimeError` is raised.

        >>> from parsek.characters import digit

        >>> digit.many().parse("12a").unwrap()
        (['1', '2'], 'a')
        >>> digit.many().parse("a").unwrap()
        ([], 'a')
        """

        return many(self)

    def some(self) -> "Parser[List[A_co]]":
        """
        Like :meth:`Parser.many`, but fails if the parser does not succeed at
        least once.

        >>> from parsek.characters import letter

        >>> letter.some().parse("abc123").unwrap()
        (['a', 'b', 'c'], '123')
        >>> letter.some().parse("123").unwrap()
        Traceback (most recent call last):
          ...
        parsek.types.PredicateFailed: at 0: unexpected input
        """

        return some(self)

    def sep_by(self, sep: ParseObj[B]) -> "Parser[List[A_co]]":
        """
        Applies the parser multiple times, with ``sep`` in between. Returns a
        list of the values parsed by the parser.

        >>> from parsek.characters import digit
        >>> from parsek.strings import literal

        >>> digit.sep_by(literal(",")).parse("1,2,3").unwrap()
        (['1', '2', '3'], '')

        :param sep: Separators parser
        """

        return sep_by(self, sep)

    def between(
            self, open: ParseObj[B], close: ParseObj[C]) -> "Parser[A_co]":
        """
        Applies ``open``, then the parser, then ``close``, and returns the
        value parsed by the parser.

        >>> from parsek.characters import letter
        >>> from parsek.strings import literal

        >>> letter.between(literal("("), literal(")")).parse("(a)").unwrap()
        ('a', '')

        :param open: 'Opening bracket' parser
        :param close: 'Closing bracket' parser
        """

        return between(open, close, self)


class FnParser(Parser[A_co]):
    def __init__(self, fn: ParseFn[A_co]):
        self._fn = fn

    def to_fn(self) -> ParseFn[A_co]:
        return self._fn

    def parse_fn(self, stream: Stream) -> Result[A_co]:
        return self._fn(stream)


class Delay(Parser[A_co]):
    """
    A subclass of :class:`Parser` to use as a forward declaration.

    >>> from parsek import Delay
    >>> from parsek.strings import literal

    >>> parser = Delay()
    >>> parser.define(literal("(") >> parser.maybe() << literal(")"))
    >>> parser.parse("(())").unwrap()
    (None, '')
    """

    def __init__(self) -> None:
        def _fn(stream: Stream) -> Result[A_co]:
            raise RuntimeError("Delayed parser was not defined")

        self._defined = False
        self._fn: ParseFn[A_co] = _fn

    def define(self, parser: ParseObj[A_co]) -> None:
        """
        Define the parser.

        >>> from parsek import Delay
        >>> from parsek.strings import literal

        >>> parser = Delay()
        >>> parser.parse("a")
        Traceback (most recent call last):
          ...
        RuntimeError: Delayed parser was not defined
        >>> parser.define(literal("a"))
        >>> parser.parse("a").unwrap()
        ('a', '')

        :param parser: Parser definition
        """

        if self._defined:
            raise RuntimeError("Delayed parser was already defined")
        self._defined = True
        self._fn = parser.to_fn()

    def parse_fn(self, stream: Stream) -> Result[A_co]:
        return self._fn(stream)

    def to_fn(self) -> ParseFn[A_co]:
        if self._defined:
            return self._fn
        return super().to_fn()


def fmap(parser: ParseObj[A], fn: Callable[[A], B]) -> Parser[B]:
    """
    :meth:`Parser.fmap` as a function.

    :param parser: Parser
    :param fn: Function to produce value from the result of ``parser``
    """

    return FnParser(combinators.fmap(parser.to_fn(), fn))


def ap(
        parser: ParseObj[Callable[[A], B]],
        second: ParseObj[A]) -> Parser[B]:
    """
    :meth:`Parser.ap` as a function.

    :param parser: Parser of a function
    :param second: Parser of the function argument
    """

    return FnParser(combinators.ap(parser.to_fn(), second.to_fn()))


def bind(
        parser: ParseObj[A], fn: Callable[[A], ParseObj[B]]) -> Parser[B]:
    """
    :meth:`Parser.bind` as a function.

    :param parser: Parser
    :param fn: Function that returns a new parser using the result of the
        parser
    """

    return FnParser(
        combinators.bind(parser.to_fn(), lambda v: fn(v).to_fn())
    )


def seq(parser: ParseObj[A], second: ParseObj[B]) -> Parser[Tuple[A, B]]:
    """
    :meth:`Parser.__add__` as a function.

    :param parser: First parser
    :param second: Second parser
    """

    return FnParser(combinators.seq(parser.to_fn(), second.to_fn()))


def seql(parser: ParseObj[A], second: ParseObj[B]) -> Parser[A]:
    """
    :meth:`Parser.seql` as a function.

    :param parser: First parser
    :param second: Second parser
    """

    return FnParser(combinators.seql(parser.to_fn(), second.to_fn()))


def seqr(parser: ParseObj[A], second: ParseObj[B]) -> Parser[B]:
    """
    :meth:`Parser.seqr` as a function.

    :param parser: First parser
    :param second: Second parser
    """

    return FnParser(combinators.seqr(parser.to_fn(), second.to_fn()))


def alt(parser: ParseObj[A], second: ParseObj[B]) -> Parser[Union[A, B]]:
    """
    :meth:`Parser.__or__` as a function.

    :param parser: First parser
    :param second: Second parser
    """

    return FnParser(combinators.alt(parser.to_fn(), second.to_fn()))


def maybe(parser: ParseObj[A]) -> Parser[Optional[A]]:
    """
    :meth:`Parser.maybe` as a function.

    :param parser: Parser
    """

    return FnParser(combinators.maybe(parser.to_fn()))


def many(parser: ParseObj[A]) -> Parser[List[A]]:
    """
    :meth:`Parser.many` as a function.

    :param parser: Parser
    """

    return FnParser(combinators.many(parser.to_fn()))


def some(parser: ParseObj[A]) -> Parser[List[A]]:
    """
    :meth:`Parser.some` as a function.

    :param parser: Parser
    """

    return FnParser(combinators.some(parser.to_fn()))


def sep_by(parser: ParseObj[A], sep: ParseObj[B]) -> Parser[List[A]]:
    """
    :meth:`Parser.sep_by` as a function.

    :param parser: Parser
    :param sep: Separators parser
    """

    return FnParser(combinators.sep_by(parser.to_fn(), sep.to_fn()))


def between(
        open: ParseObj[B], close: ParseObj[C],
        parser: ParseObj[A]) -> Parser[A]:
    """
    :meth:`Parser.between` as a function.

    :param open: 'Opening bracket' parser
    :param close: 'Closing bracket' parser
    :param parser: Parser
    """

    return FnParser(
        combinators.between(open.to_fn(), close.to_fn(), parser.to_fn())
    )


def run(parser: ParseObj[A], stream: Stream) -> Result[A]:
    """
    Applies ``parser`` to ``stream`` and returns the raw result.

    :param parser: Parser to run
    :param stream: Position in the input to start from
    """

    return parser.parse_fn(stream)


def parse_string(stream: str, parser: ParseObj[A]) -> ParseResult[A]:
    """
    Parses ``stream`` with ``parser``, starting from the first character.

    >>> from parsek.characters import letter
    >>> from parsek.parser import parse_string

    >>> parse_string("ab1", letter.many()).unwrap()
    (['a', 'b'], '1')

    :param stream: Input to parse
    :param parser: Parser to run
    """

    return ParseResult(parser.parse_fn(Stream(stream)))


def parse_value(stream: str, parser: ParseObj[A]) -> A:
    """
    Parses ``stream`` with ``parser`` and returns the parsed value, dropping
    the unconsumed rest of the input.

    >>> from parsek.characters import digit
    >>> from parsek.parser import parse_value

    >>> parse_value("12a", digit.many())
    ['1', '2']

    :param stream: Input to parse
    :param parser: Parser to run
    :raise: :exc:`parsek.types.ParseError`
    """

    value, _ = parse_string(stream, parser).unwrap()
    return value
