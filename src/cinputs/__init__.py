"""cinputs: read typed values from a line stream and validate them.

This package provides a small parse-then-validate pipeline with:
- Named scalar targets (fixed-width integers, float, decimal, str, char, bool)
- String and number constraints with descriptive errors
- A single tagged error type for I/O, parse and validation failures

Quick Start:
    >>> from cinputs import NumberConstraint, constrained_input
    >>> age = constrained_input("u8", NumberConstraint(min_value=0, max_value=120))

    # Branch on the failure kind
    >>> from cinputs import ConstrainedInputError, ErrorKind
    >>> try:
    ...     name = constrained_input(str, StringConstraint(include="J"))
    ... except ConstrainedInputError as err:
    ...     if err.kind is ErrorKind.VALIDATION:
    ...         print(err.message())

    # Parse text you already have
    >>> from cinputs import string_input
    >>> string_input("456", "u32")
    456
"""

from __future__ import annotations  # noqa: I001

from cinputs.models import (
    PACKAGE_NAME,
    TARGET_TYPES,
    Char,
    ConstrainedInputError,
    ErrorKind,
    InputResult,
    Int8,
    Int16,
    Int32,
    Int64,
    ISize,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    USize,
    summarize_results,
)
from cinputs.constraints import (
    BaseConstraint,
    Constraint,
    NumberConstraint,
    StringConstraint,
    load_constraint,
)
from cinputs.core import get_stdin, reset_stdin
from cinputs.parsers import BaseValueParser, ParserFactory, TypeAdapterParser, resolve_parser
from cinputs.protocols import ConstraintProtocol, LineReaderProtocol, ValueParserProtocol
from cinputs.service import (
    InputService,
    constrained_input,
    constrained_read_stream,
    constrained_string_input,
    get_default_service,
    read_input,
    read_stream,
    string_input,
)

__version__ = "0.3.0"
__package_name__ = "cinputs"

__all__ = [
    # Version
    "__version__",
    # Pipeline
    "InputService",
    "get_default_service",
    "read_input",
    "constrained_input",
    "string_input",
    "constrained_string_input",
    "read_stream",
    "constrained_read_stream",
    # Constraints
    "BaseConstraint",
    "Constraint",
    "NumberConstraint",
    "StringConstraint",
    "load_constraint",
    # Errors and results
    "PACKAGE_NAME",
    "ConstrainedInputError",
    "ErrorKind",
    "InputResult",
    "summarize_results",
    # Targets
    "TARGET_TYPES",
    "Char",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "ISize",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "USize",
    # Parsers
    "BaseValueParser",
    "ParserFactory",
    "TypeAdapterParser",
    "resolve_parser",
    # Protocols
    "ConstraintProtocol",
    "LineReaderProtocol",
    "ValueParserProtocol",
    # Infrastructure
    "get_stdin",
    "reset_stdin",
]
