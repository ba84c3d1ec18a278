from typing import List, Tuple, Type

import pytest

from parsek import EndOfInput, ParseError, PredicateFailed

from .parsers import expr

DATA_POSITIVE: List[Tuple[str, int]] = [
    ("1", 1),
    ("12", 12),
    (" 1 + 2", 3),
    ("2 - 1", 1),
    ("10 - 2 - 3", 5),
    ("2 * 3", 6),
    ("1 + 2 * 3", 7),
    ("(1 + 2) * 3", 9),
    ("((1) + (2))", 3),
]


@pytest.mark.parametrize("data, expected", DATA_POSITIVE)
def test_positive(data: str, expected: int) -> None:
    assert expr.eval(data) == expected


DATA_NEGATIVE: List[Tuple[str, Type[ParseError], int, str]] = [
    ("", EndOfInput, 0, "at 0: unexpected end of input"),
    ("1 1", PredicateFailed, 2, "at 2: unexpected input"),
    ("1 +", PredicateFailed, 2, "at 2: unexpected input"),
    ("1 )", PredicateFailed, 2, "at 2: unexpected input"),
    ("(1", EndOfInput, 2, "at 2: unexpected end of input"),
]


@pytest.mark.parametrize("data, error, pos, msg", DATA_NEGATIVE)
def test_negative(
        data: str, error: Type[ParseError], pos: int, msg: str) -> None:
    with pytest.raises(error) as err:
        expr.eval(data)
    assert err.value.pos == pos
    assert str(err.value) == msg
