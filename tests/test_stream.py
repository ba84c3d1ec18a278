import pytest

from parsek import Stream, parse_string, parse_value
from parsek.characters import letter
from parsek.types import PredicateFailed


def test_initial_stream() -> None:
    stream = Stream("abc")
    assert stream.offset == 0
    assert stream.rest == "abc"
    assert not stream.at_end


def test_advance_shares_text() -> None:
    stream = Stream("abc")
    advanced = stream.advance(2)
    assert advanced.text is stream.text
    assert advanced.offset == 2
    assert advanced.rest == "c"
    assert stream.offset == 0
    assert stream.advance(0) is stream


def test_skip_to_end() -> None:
    stream = Stream("abc", 1).skip_to_end()
    assert stream.offset == 3
    assert stream.rest == ""
    assert stream.at_end


def test_immutable() -> None:
    stream = Stream("abc")
    with pytest.raises(AttributeError):
        stream.offset = 1  # type: ignore


def test_repr() -> None:
    assert repr(Stream("abc", 1)) == "Stream(offset=1, rest='bc')"


def test_parse_string() -> None:
    assert parse_string("ab1", letter.many()).unwrap() == (["a", "b"], "1")


def test_parse_value() -> None:
    assert parse_value("ab1", letter.many()) == ["a", "b"]
    with pytest.raises(PredicateFailed):
        parse_value("1", letter)
