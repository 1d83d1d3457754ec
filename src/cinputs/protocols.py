from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ConstraintProtocol(Protocol):
    """Protocol for constraint implementations.

    Implementations accept or reject a single parsed value and
    raise a validation error describing the rejection.
    """

    def validate(self, value: Any) -> None:
        """Validate a value.

        Args:
            value: Parsed value to check.

        Raises:
            ConstrainedInputError: If the value is rejected.
        """
        ...

    @property
    def name(self) -> str:
        """Name of this constraint for error reporting."""
        ...


@runtime_checkable
class ValueParserProtocol(Protocol):
    """Protocol for value parser implementations.

    Implementations turn one line of text into a typed value,
    raising a parse error when the text is not a valid literal.
    """

    def parse(self, text: str) -> Any:
        """Parse text into a typed value.

        Args:
            text: Line of input, without its line terminator.

        Returns:
            The parsed value.

        Raises:
            ConstrainedInputError: If the text cannot be parsed.
        """
        ...

    @property
    def name(self) -> str:
        """Name of the target this parser produces."""
        ...


@runtime_checkable
class LineReaderProtocol(Protocol):
    """Protocol for line-buffered input sources (text or binary)."""

    def readline(self) -> str | bytes:
        """Read one line, including its terminator; empty at end of stream."""
        ...
