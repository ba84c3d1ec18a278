"""
Public API.
"""

from . import characters, debug, primitive, strings
from .core.result import ErrorKind
from .core.stream import Stream
from .parser import (
    Delay, FnParser, Parser, alt, ap, between, bind, fmap, many, maybe,
    parse_string, parse_value, run, sep_by, seq, seql, seqr, some
)
from .types import EndOfInput, ParseError, ParseResult, PredicateFailed

__all__ = (
    "characters", "debug", "primitive", "strings",
    "ErrorKind", "Stream",
    "EndOfInput", "ParseError", "ParseResult", "PredicateFailed",

    "Delay", "FnParser", "Parser", "alt", "ap", "between", "bind", "fmap",
    "many", "maybe", "parse_string", "parse_value", "run", "sep_by", "seq",
    "seql", "seqr", "some"
)

__version__ = "0.1.0"
