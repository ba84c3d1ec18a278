import logging

import pytest

from parsek.characters import digit
from parsek.debug import trace


def test_trace_logs(caplog: pytest.LogCaptureFixture) -> None:
    parser = trace(digit, "digit").many()
    with caplog.at_level(logging.DEBUG, logger="parsek.debug"):
        assert parser.parse("1a").unwrap() == (["1"], "a")
    assert [r.getMessage() for r in caplog.records] == [
        "digit: trying at 0",
        "digit: matched '1' at 0..1",
        "digit: trying at 1",
        "digit: failed at 1 (predicate failed)",
    ]


def test_trace_keeps_result() -> None:
    parser = trace(digit, "digit")
    r = parser.parse("")
    assert not r.ok
    assert r.error is not None
    assert r.error.pos == 0
