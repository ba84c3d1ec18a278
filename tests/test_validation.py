import pytest

from parsek import Delay, Parser
from parsek.characters import digit
from parsek.primitive import Pure
from parsek.strings import bracket, eof, literal, remaining, string_upto


def test_many_unconsumed() -> None:
    with pytest.raises(RuntimeError):
        eof().many().parse("")
    with pytest.raises(RuntimeError):
        digit.maybe().many().parse("a")
    with pytest.raises(RuntimeError):
        Pure(1).some().parse("")
    with pytest.raises(RuntimeError):
        remaining.many().parse("ab")


def test_literal_empty() -> None:
    with pytest.raises(ValueError):
        literal("")


def test_string_upto_empty() -> None:
    with pytest.raises(ValueError):
        string_upto("")


def test_bracket_empty() -> None:
    with pytest.raises(ValueError):
        bracket("", "]")


def test_delay_undefined() -> None:
    parser: Delay[str] = Delay()
    with pytest.raises(RuntimeError):
        parser.parse("a")


def test_delay_redefined() -> None:
    parser: Delay[str] = Delay()
    parser.define(literal("a"))
    with pytest.raises(RuntimeError):
        parser.define(literal("b"))


def test_parsers_are_reusable() -> None:
    parser: Parser[str] = bracket("(", ")")
    assert parser.parse("(a)").unwrap() == ("a", "")
    assert parser.parse("(b)c").unwrap() == ("b", "c")
    assert parser.parse("(a)").unwrap() == ("a", "")
