from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from cinputs.core.stream import get_stdin, read_line, strip_line_terminator
from cinputs.models.errors import ConstrainedInputError
from cinputs.models.results import InputResult
from cinputs.parsers.factory import resolve_parser
from cinputs.protocols import ConstraintProtocol, LineReaderProtocol

logger = logging.getLogger(__name__)


class InputService:
    """Read, parse and validate single values.

    Each call is one attempt: the first failure is raised to the caller
    and nothing is retried.

    Example:
        >>> service = InputService()
        >>> service.parse("456", "u32")
        456
        >>> service.parse("uj2gl", str, StringConstraint(include="uj2", min_len=5))
        'uj2gl'
    """

    def __init__(
        self, stream: LineReaderProtocol | None = None, encoding: str = "utf-8"
    ) -> None:
        """Initialize the service.

        Args:
            stream: Line source to read from. Defaults to the shared stdin handle,
                looked up on every read.
            encoding: Encoding used when the stream yields bytes.
        """
        self._stream = stream
        self._encoding = encoding

    @property
    def stream(self) -> LineReaderProtocol:
        """The stream reads come from."""
        return self._stream if self._stream is not None else get_stdin()

    def parse(
        self,
        text: str,
        target: Any,
        constraint: ConstraintProtocol | None = None,
    ) -> Any:
        """Parse already-acquired text, then apply an optional constraint.

        Args:
            text: Text to parse. Used as is, line terminators included.
            target: Target name, type, or parser.
            constraint: Constraint the parsed value must satisfy.

        Returns:
            The parsed value.

        Raises:
            ConstrainedInputError: PARSE if the text is not a valid literal,
                VALIDATION if the value breaks the constraint.
            ValueError: If ``target`` names an unknown target.
        """
        value = resolve_parser(target).parse(text)
        if constraint is not None:
            constraint.validate(value)
        return value

    def read(self, target: Any, constraint: ConstraintProtocol | None = None) -> Any:
        """Read one line from the service stream and parse it.

        Raises:
            ConstrainedInputError: IO if the read fails, otherwise as for ``parse``.
        """
        return self.read_from(self.stream, target, constraint)

    def read_from(
        self,
        reader: LineReaderProtocol,
        target: Any,
        constraint: ConstraintProtocol | None = None,
    ) -> Any:
        """Read one line from ``reader`` and parse it.

        The trailing line terminator is removed before parsing.

        Raises:
            ConstrainedInputError: IO if the read fails, otherwise as for ``parse``.
        """
        text = read_line(reader, self._encoding)
        return self.parse(text, target, constraint)

    def try_parse(
        self,
        text: str,
        target: Any,
        constraint: ConstraintProtocol | None = None,
    ) -> InputResult:
        """Parse text without raising.

        Returns:
            InputResult holding either the value or the error.
        """
        try:
            value = self.parse(text, target, constraint)
        except ConstrainedInputError as e:
            return InputResult(raw_input=text, error=e)
        return InputResult(raw_input=text, value=value)

    def parse_batch(
        self,
        lines: Iterable[str],
        target: Any,
        constraint: ConstraintProtocol | None = None,
    ) -> list[InputResult]:
        """Parse several already-buffered lines independently.

        Line terminators are stripped from each line.

        Returns:
            List of InputResult objects, one for each line.
        """
        parser = resolve_parser(target)
        results = [
            self.try_parse(strip_line_terminator(line), parser, constraint) for line in lines
        ]
        logger.debug(
            "Parsed batch of %d lines, %d failed",
            len(results),
            sum(1 for r in results if not r.is_valid),
        )
        return results


# Default service instance (lazily initialized)
_default_service: InputService | None = None


def get_default_service() -> InputService:
    """Get the default InputService singleton.

    Returns:
        Default InputService instance reading from the shared stdin handle.
    """
    global _default_service
    if _default_service is None:
        _default_service = InputService()
    return _default_service


def read_input(target: Any) -> Any:
    """Read one line from stdin and parse it into ``target``.

    Args:
        target: Target name, type, or parser.

    Returns:
        The parsed value.

    Raises:
        ConstrainedInputError: IO or PARSE failure.
    """
    return get_default_service().read(target)


def constrained_input(target: Any, constraint: ConstraintProtocol) -> Any:
    """Read one line from stdin, parse it into ``target`` and validate it.

    Raises:
        ConstrainedInputError: IO, PARSE or VALIDATION failure.
    """
    return get_default_service().read(target, constraint)


def string_input(text: str, target: Any) -> Any:
    """Parse already-acquired text into ``target``.

    Example:
        >>> string_input("-20", "i8")
        -20
    """
    return get_default_service().parse(text, target)


def constrained_string_input(text: str, target: Any, constraint: ConstraintProtocol) -> Any:
    """Parse already-acquired text into ``target`` and validate it."""
    return get_default_service().parse(text, target, constraint)


def read_stream(reader: LineReaderProtocol, target: Any) -> Any:
    """Read one line from ``reader`` and parse it into ``target``."""
    return get_default_service().read_from(reader, target)


def constrained_read_stream(
    reader: LineReaderProtocol, target: Any, constraint: ConstraintProtocol
) -> Any:
    """Read one line from ``reader``, parse it into ``target`` and validate it."""
    return get_default_service().read_from(reader, target, constraint)
