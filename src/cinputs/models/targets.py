"""Named scalar target types.

Each target is a Python type narrowed with pydantic metadata. Fixed-width
integers carry their range as ``Field`` bounds, so range checks happen while
the text is parsed rather than during constraint validation. Integer, float
and bool targets only accept their plain literal spelling.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BeforeValidator, Field, StringConstraints

_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")
_FLOAT_LITERAL = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[+-]?(?:inf|infinity|nan)",
    re.IGNORECASE,
)


def _integer_literal(value: Any) -> Any:
    if isinstance(value, str):
        if not _INTEGER_LITERAL.fullmatch(value):
            raise ValueError("invalid digit found in string")
        return int(value)
    return value


def _float_literal(value: Any) -> Any:
    if isinstance(value, str):
        if not _FLOAT_LITERAL.fullmatch(value):
            raise ValueError("invalid float literal")
        return float(value)
    return value


def _bool_literal(value: Any) -> Any:
    if isinstance(value, str):
        if value not in ("true", "false"):
            raise ValueError("provided string was not `true` or `false`")
        return value == "true"
    return value


# Text targets accept plain literals only: no surrounding whitespace, digit
# separators, fractional integers, or yes/no booleans
_INTEGER_TEXT = BeforeValidator(_integer_literal)

Integer = Annotated[int, _INTEGER_TEXT]
Float = Annotated[float, BeforeValidator(_float_literal)]
Boolean = Annotated[bool, BeforeValidator(_bool_literal)]

Int8 = Annotated[int, Field(ge=-(2**7), le=2**7 - 1), _INTEGER_TEXT]
Int16 = Annotated[int, Field(ge=-(2**15), le=2**15 - 1), _INTEGER_TEXT]
Int32 = Annotated[int, Field(ge=-(2**31), le=2**31 - 1), _INTEGER_TEXT]
Int64 = Annotated[int, Field(ge=-(2**63), le=2**63 - 1), _INTEGER_TEXT]

UInt8 = Annotated[int, Field(ge=0, le=2**8 - 1), _INTEGER_TEXT]
UInt16 = Annotated[int, Field(ge=0, le=2**16 - 1), _INTEGER_TEXT]
UInt32 = Annotated[int, Field(ge=0, le=2**32 - 1), _INTEGER_TEXT]
UInt64 = Annotated[int, Field(ge=0, le=2**64 - 1), _INTEGER_TEXT]

# Pointer-sized integers are treated as 64-bit
ISize = Int64
USize = UInt64

Char = Annotated[str, StringConstraints(min_length=1, max_length=1)]

# Name -> target type, in the order they are listed by the CLI
TARGET_TYPES: dict[str, object] = {
    "i8": Int8,
    "i16": Int16,
    "i32": Int32,
    "i64": Int64,
    "isize": ISize,
    "u8": UInt8,
    "u16": UInt16,
    "u32": UInt32,
    "u64": UInt64,
    "usize": USize,
    "int": Integer,
    "float": Float,
    "f64": Float,
    "decimal": Decimal,
    "str": str,
    "string": str,
    "char": Char,
    "bool": Boolean,
}

NUMERIC_TARGETS: frozenset[str] = frozenset(
    {
        "i8",
        "i16",
        "i32",
        "i64",
        "isize",
        "u8",
        "u16",
        "u32",
        "u64",
        "usize",
        "int",
        "float",
        "f64",
        "decimal",
    }
)

STRING_TARGETS: frozenset[str] = frozenset({"str", "string", "char"})
