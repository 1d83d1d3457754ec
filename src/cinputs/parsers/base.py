from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import ValidationError

from cinputs.models.errors import ConstrainedInputError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseValueParser(ABC, Generic[T]):
    """Abstract base class for value parsers.

    Provides common error conversion and logging.
    Subclasses must implement the _parse_impl method.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the target this parser produces."""
        ...

    @abstractmethod
    def _parse_impl(self, text: str) -> T:
        """Internal implementation of parsing.

        Args:
            text: Line of input, without its line terminator.

        Returns:
            Parsed value.

        Raises:
            pydantic.ValidationError: If the text is not a valid literal.
        """
        ...

    def parse(self, text: str) -> T:
        """Parse text into a typed value.

        Args:
            text: Line of input, without its line terminator.

        Returns:
            The parsed value.

        Raises:
            ConstrainedInputError: Kind PARSE, if the text is not a valid literal.
        """
        try:
            value = self._parse_impl(text)
        except ValidationError as e:
            logger.debug("Failed to parse %r as %s: %s", text[:50], self.name, e)
            raise ConstrainedInputError.from_validation_error(
                e, {"target": self.name, "input": text}
            ) from e

        logger.debug("Parsed %r as %s", text[:50], self.name)
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
