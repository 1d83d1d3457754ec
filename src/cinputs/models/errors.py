"""Error type raised by every stage of the input pipeline.

A single tagged error covers I/O failures, parse failures and constraint
violations. The kind is stored in the error context so the error stays a
plain ``PydanticCustomError`` and can be raised from inside pydantic
validators as well.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "cinputs"


class ErrorKind(str, Enum):
    """Categories of input errors."""

    OTHER = "Other"
    VALIDATION = "ValidationError"
    IO = "IOError"
    PARSE = "ParseError"


class ConstrainedInputError(PydanticCustomError):
    """Error raised when reading, parsing or validating an input fails.

    ``type`` holds a short reason code (``too_short``, ``parse_error``, ...),
    ``message()`` the formatted human-readable message and ``context`` the
    values the message was built from (bounds, offending characters).

    Rendering with ``str()`` gives ``"{kind}: {message}"``.
    """

    @classmethod
    def create(
        cls,
        kind: ErrorKind,
        error_type: str,
        message_template: str,
        **context: Any,
    ) -> ConstrainedInputError:
        """Build an error of the given kind.

        Args:
            kind: Error category.
            error_type: Reason code for the failure.
            message_template: Message, may include ``{placeholders}`` from context.
            **context: Values to fill the template and to expose to callers.

        Returns:
            ConstrainedInputError instance.
        """
        ctx = {"package": PACKAGE_NAME, "kind": kind.value, **context}
        return cls(error_type, message_template, ctx)

    @classmethod
    def from_validation_error(
        cls, error: Exception, context: dict[str, Any] | None = None
    ) -> ConstrainedInputError:
        """Convert a pydantic.ValidationError raised while parsing into a parse error.

        Args:
            error: The ValidationError (or any other exception) to convert.
            context: Additional context to include in the error.

        Returns:
            ConstrainedInputError of kind PARSE.
        """
        from pydantic import ValidationError

        if isinstance(error, ValidationError):
            reason = "; ".join(e.get("msg", str(e)) for e in error.errors())
        else:
            reason = str(error)

        return cls.create(
            ErrorKind.PARSE,
            "parse_error",
            "Could not parse input as {target}: {reason}",
            **{"target": "value", **(context or {}), "reason": reason},
        )

    @classmethod
    def from_os_error(
        cls, error: Exception, context: dict[str, Any] | None = None
    ) -> ConstrainedInputError:
        """Convert a failed stream read into an I/O error."""
        return cls.create(
            ErrorKind.IO,
            "io_error",
            "Failed to read input: {reason}",
            **{**(context or {}), "reason": str(error) or type(error).__name__},
        )

    @property
    def kind(self) -> ErrorKind:
        """Category of this error. Errors built without a kind are OTHER."""
        kind = (self.context or {}).get("kind")
        try:
            return ErrorKind(kind)
        except ValueError:
            return ErrorKind.OTHER

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message()}"

    def __repr__(self) -> str:
        return (
            f"ConstrainedInputError(kind={self.kind.name}, type={self.type!r}, "
            f"message={self.message()!r})"
        )
