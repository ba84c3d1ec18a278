from typing import List, Tuple, Type

import pytest

from parsek import EndOfInput, ParseError, Parser, PredicateFailed
from parsek.characters import (
    alphanumeric, any_char, char_range, digit, letter, lowercase, satisfy,
    uppercase
)
from parsek.strings import (
    bracket, eof, literal, remaining, satisfy_string, string_upto
)

from .parsers.heredoc import heredoc

DATA_POSITIVE: List[Tuple[Parser[object], str, object, str]] = [
    (any_char, "a", "a", ""),
    (satisfy(str.isspace), " x", " ", "x"),
    (char_range("a", "c"), "c", "c", ""),
    (lowercase, "z", "z", ""),
    (uppercase, "Z1", "Z", "1"),
    (letter, "q", "q", ""),
    (letter, "Q", "Q", ""),
    (digit, "9", "9", ""),
    (alphanumeric, "x", "x", ""),
    (alphanumeric, "X", "X", ""),
    (alphanumeric, "5", "5", ""),
    (remaining, "abc", "abc", ""),
    (remaining, "", "", ""),
    (digit >> remaining, "1abc", "abc", ""),
    (satisfy_string(lambda s: s == "abc"), "abc", "abc", ""),
    (string_upto("END"), "foo END bar", "foo ", "END bar"),
    (string_upto("END"), "END", "", "END"),
    (literal("ab"), "abc", "ab", "c"),
    (eof(), "", None, ""),
    (bracket("[", "]"), "[hello]world", "hello", "world"),
    (bracket("[", "]"), "[]", "", ""),
    (bracket("[", "]"), "[[a]]", "[a", "]"),
    (bracket("/*", "*/"), "/* a * b */c", " a * b ", "c"),
    (bracket(literal("<"), literal(">")), "<a>", "a", ""),
    (
        bracket(literal("<<"), literal("|") | literal(">>")),
        "<<a>>b|c",
        "a",
        "b|c"
    ),
    (heredoc, "<<EOT\nline 1\nline 2\nEOT rest", "line 1\nline 2", " rest"),
    (heredoc, "<<A\nEOT\nA", "EOT", ""),
]


@pytest.mark.parametrize("parser, data, value, rest", DATA_POSITIVE)
def test_positive(
        parser: Parser[object], data: str, value: object, rest: str) -> None:
    assert parser.parse(data).unwrap() == (value, rest)


DATA_NEGATIVE: List[Tuple[Parser[object], str, Type[ParseError], int]] = [
    (any_char, "", EndOfInput, 0),
    (satisfy(str.isspace), "x", PredicateFailed, 0),
    (lowercase, "A", PredicateFailed, 0),
    (uppercase, "a", PredicateFailed, 0),
    (letter, "1", PredicateFailed, 0),
    (digit, "a", PredicateFailed, 0),
    (digit, "", EndOfInput, 0),
    (alphanumeric, "_", PredicateFailed, 0),
    (digit >> satisfy_string(str.isdigit), "1abc", PredicateFailed, 1),
    (string_upto("END"), "foo", EndOfInput, 3),
    (literal("ab"), "ac", PredicateFailed, 0),
    (literal("ab"), "a", EndOfInput, 1),
    (literal("ab"), "", EndOfInput, 0),
    (eof(), "a", PredicateFailed, 0),
    (bracket("[", "]"), "hello]", PredicateFailed, 0),
    (bracket("[", "]"), "[hello", EndOfInput, 6),
    (heredoc, "<<EOT\nline\nEO", EndOfInput, 13),
]


@pytest.mark.parametrize("parser, data, error, pos", DATA_NEGATIVE)
def test_negative(
        parser: Parser[object], data: str, error: Type[ParseError],
        pos: int) -> None:
    with pytest.raises(error) as err:
        parser.parse(data).unwrap()
    assert err.value.pos == pos
