"""
Parse errors and results.
"""

from typing import Callable, Generic, Optional, Tuple, TypeVar

from .core.result import Error, ErrorKind, Ok, Result

A_co = TypeVar("A_co", covariant=True)
B = TypeVar("B")


class ParseError(Exception):
    """
    Exception that is raised if a parser was unable to parse the input.

    :param pos: Offset of the failure in the input
    """

    kind: ErrorKind

    def __init__(self, pos: int):
        super().__init__(pos)
        self.pos = pos

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return type(self) is type(other) and self.pos == other.pos

    def __hash__(self) -> int:
        return hash((type(self), self.pos))

    @property
    def msg(self) -> str:
        """
        Human-readable description of the error.
        """

        return "at {}: unexpected input".format(self.pos)

    def __str__(self) -> str:
        return self.msg


class EndOfInput(ParseError):
    """
    More input was required, but the end of the input was reached.
    """

    kind = ErrorKind.END_OF_INPUT

    @property
    def msg(self) -> str:
        return "at {}: unexpected end of input".format(self.pos)


class PredicateFailed(ParseError):
    """
    A content check rejected the input at ``pos``.
    """

    kind = ErrorKind.PREDICATE_FAILED


def to_exception(error: Error) -> ParseError:
    if error.kind is ErrorKind.END_OF_INPUT:
        return EndOfInput(error.pos)
    return PredicateFailed(error.pos)


class ParseResult(Generic[A_co]):
    """
    Result of the parsing.

    Holds either the parsed value together with the unconsumed rest of the
    input, or the error.
    """

    def __init__(self, result: Result[A_co]):
        self._result = result

    def __repr__(self) -> str:
        return "ParseResult({!r})".format(self._result)

    @property
    def ok(self) -> bool:
        """
        ``True`` if the parser succeeded.
        """

        return type(self._result) is Ok

    @property
    def error(self) -> Optional[ParseError]:
        """
        The error if the parser failed, ``None`` otherwise.
        """

        if type(self._result) is Error:
            return to_exception(self._result)
        return None

    def fmap(self, fn: Callable[[A_co], B]) -> "ParseResult[B]":
        """
        Transforms :class:`ParseResult`\\[``A_co``] into
        :class:`ParseResult`\\[``B``] by applying `fn` to value.

        :param fn: Function to apply to value
        """

        return ParseResult(self._result.fmap(fn))

    def unwrap(self) -> Tuple[A_co, str]:
        """
        Returns parsed value and the unconsumed rest of the input if there is
        one. Otherwise throws :exc:`ParseError`.

        :raise: :exc:`ParseError`
        """

        if type(self._result) is Error:
            raise to_exception(self._result)
        return self._result.value, self._result.stream.rest
