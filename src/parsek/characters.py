"""
Parsers for single characters.
"""

from typing import Callable

from .core import characters
from .parser import FnParser, Parser

__all__ = (
    "any_char", "satisfy", "char_range",
    "lowercase", "uppercase", "letter", "digit", "alphanumeric"
)


def satisfy(test: Callable[[str], bool]) -> Parser[str]:
    """
    Succeeds for a character for which ``test`` returns ``True`` and returns
    that character. The error points to the rejected character.

    >>> from parsek.characters import satisfy

    >>> parser = satisfy(str.isspace)

    >>> parser.parse(" a").unwrap()
    (' ', 'a')
    >>> parser.parse("a").unwrap()
    Traceback (most recent call last):
      ...
    parsek.types.PredicateFailed: at 0: unexpected input
    >>> parser.parse("").unwrap()
    Traceback (most recent call last):
      ...
    parsek.types.EndOfInput: at 0: unexpected end of input

    :param test: Predicate for characters
    """

    return FnParser(characters.satisfy(test))


def char_range(first: str, last: str) -> Parser[str]:
    """
    Succeeds for a character between ``first`` and ``last`` inclusive.

    >>> from parsek.characters import char_range

    >>> char_range("0", "7").parse("7").unwrap()
    ('7', '')

    :param first: Lowest accepted character
    :param last: Highest accepted character
    """

    return FnParser(characters.char_range(first, last))


any_char: Parser[str] = FnParser(characters.any_char())
lowercase: Parser[str] = char_range("a", "z")
uppercase: Parser[str] = char_range("A", "Z")
letter: Parser[str] = lowercase | uppercase
digit: Parser[str] = char_range("0", "9")
alphanumeric: Parser[str] = letter | digit
