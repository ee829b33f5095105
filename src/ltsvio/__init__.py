import ltsvio.version
from _ltsvio.config import ParserBuilder, ParserConfig
from _ltsvio.parser import LtsvParser
from _ltsvio.reading import lazy_read, read
from _ltsvio.tokenizer.errors import (
    EmptyKeyError,
    KeyWithoutValueError,
    ParseLtsvError,
    StreamReadError,
    UnexpectedQuoteInValueError,
    UnexpectedTokenError,
)

__author__ = """lolo"""

__version__ = ltsvio.version.version


def builder():
    """
    :returns: A ParserBuilder with the default configuration.
    """
    return ParserBuilder()


__all__ = [
    "EmptyKeyError",
    "KeyWithoutValueError",
    "LtsvParser",
    "ParseLtsvError",
    "ParserBuilder",
    "ParserConfig",
    "StreamReadError",
    "UnexpectedQuoteInValueError",
    "UnexpectedTokenError",
    "builder",
    "lazy_read",
    "read",
]
