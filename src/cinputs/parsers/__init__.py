from cinputs.parsers.adapter import TypeAdapterParser
from cinputs.parsers.base import BaseValueParser
from cinputs.parsers.factory import ParserFactory, resolve_parser

__all__ = [
    "BaseValueParser",
    "ParserFactory",
    "TypeAdapterParser",
    "resolve_parser",
]
