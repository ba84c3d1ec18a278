"""
Parsers for strings.
"""

from typing import Callable, Union

from .core import strings
from .core.parser import ParseObj
from .parser import FnParser, Parser

__all__ = (
    "remaining", "satisfy_string", "string_upto", "literal", "bracket", "eof"
)


def satisfy_string(test: Callable[[str], bool]) -> Parser[str]:
    """
    Consumes the whole rest of the input and succeeds if ``test`` returns
    ``True`` for it.

    >>> from parsek.strings import satisfy_string

    >>> parser = satisfy_string(str.isupper)

    >>> parser.parse("ABC").unwrap()
    ('ABC', '')
    >>> parser.parse("AbC").unwrap()
    Traceback (most recent call last):
      ...
    parsek.types.PredicateFailed: at 0: unexpected input

    :param test: Predicate for the rest of the input
    """

    return FnParser(strings.satisfy_string(test))


def string_upto(delimiter: str) -> Parser[str]:
    """
    Returns the input up to the first occurrence of ``delimiter``. The
    delimiter itself is not consumed.

    >>> from parsek.strings import string_upto

    >>> string_upto("END").parse("foo END bar").unwrap()
    ('foo ', 'END bar')
    >>> string_upto("END").parse("foo").unwrap()
    Traceback (most recent call last):
      ...
    parsek.types.EndOfInput: at 3: unexpected end of input

    :param delimiter: String to stop at
    """

    if len(delimiter) == 0:
        raise ValueError("Expected non-empty value")
    return FnParser(strings.string_upto(delimiter))


def literal(s: str) -> Parser[str]:
    """
    Parses the string ``s`` and returns it.

    >>> from parsek.strings import literal

    >>> parser = literal("ab")

    >>> parser.parse("abc").unwrap()
    ('ab', 'c')
    >>> parser.parse("ac").unwrap()
    Traceback (most recent call last):
      ...
    parsek.types.PredicateFailed: at 0: unexpected input
    >>> parser.parse("a").unwrap()
    Traceback (most recent call last):
      ...
    parsek.types.EndOfInput: at 1: unexpected end of input

    :param s: String to parse
    """

    if len(s) == 0:
        raise ValueError("Expected non-empty value")
    return FnParser(strings.literal(s))


def bracket(
        open: Union[str, ParseObj[str]],
        close: Union[str, ParseObj[str]]) -> Parser[str]:
    """
    Applies ``open``, then returns everything up to the first place where
    ``close`` matches, then applies ``close``. Strings are parsed with
    :func:`literal`.

    Brackets do not nest: the first match of ``close`` wins. The value parsed
    by ``close`` is searched for as a literal string, so ``close`` has to
    return the text it consumed.

    >>> from parsek.strings import bracket, literal

    >>> bracket("[", "]").parse("[hello]world").unwrap()
    ('hello', 'world')
    >>> bracket("[", "]").parse("[[a]]").unwrap()
    ('[a', ']')
    >>> bracket(literal("<<"), literal("|") | literal(">>")).parse(
    ...     "<<a|b>>"
    ... ).unwrap()
    ('a', 'b>>')

    :param open: 'Opening bracket' parser or string
    :param close: 'Closing bracket' parser or string
    """

    if isinstance(open, str):
        open = literal(open)
    if isinstance(close, str):
        close = literal(close)
    return FnParser(strings.bracket(open.to_fn(), close.to_fn()))


def eof() -> Parser[None]:
    """
    Succeeds at the end of the input.

    >>> from parsek.strings import eof

    >>> eof().parse("").unwrap()
    (None, '')
    >>> eof().parse("a").unwrap()
    Traceback (most recent call last):
      ...
    parsek.types.PredicateFailed: at 0: unexpected input
    """

    return FnParser(strings.eof())


remaining: Parser[str] = FnParser(strings.remaining())
