from cinputs.models.errors import PACKAGE_NAME, ConstrainedInputError, ErrorKind
from cinputs.models.results import InputResult, summarize_results
from cinputs.models.targets import (
    NUMERIC_TARGETS,
    STRING_TARGETS,
    TARGET_TYPES,
    Char,
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
)

__all__ = [
    "PACKAGE_NAME",
    "ConstrainedInputError",
    "ErrorKind",
    "InputResult",
    "summarize_results",
    "TARGET_TYPES",
    "NUMERIC_TARGETS",
    "STRING_TARGETS",
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
]
