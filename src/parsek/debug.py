"""
Helpers for debugging grammars.
"""

import logging
from typing import TypeVar

from .core.parser import ParseObj
from .core.result import Ok, Result
from .core.stream import Stream
from .parser import FnParser, Parser

__all__ = ("trace",)

logger = logging.getLogger(__name__)

A = TypeVar("A")


def trace(parser: ParseObj[A], name: str) -> Parser[A]:
    """
    Wraps ``parser`` so that every application of it is logged at ``DEBUG``
    level to the ``parsek.debug`` logger. The result of the parser is not
    changed.

    :param parser: Parser to trace
    :param name: Name to use in log records
    """

    parse_fn = parser.to_fn()

    def trace(stream: Stream) -> Result[A]:
        logger.debug("%s: trying at %d", name, stream.offset)
        r = parse_fn(stream)
        if type(r) is Ok:
            logger.debug(
                "%s: matched %r at %d..%d", name, r.value, stream.offset,
                r.stream.offset
            )
        else:
            logger.debug(
                "%s: failed at %d (%s)", name, r.pos, r.kind.value
            )
        return r

    return FnParser(trace)
