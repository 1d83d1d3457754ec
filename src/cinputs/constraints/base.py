"""Abstract base constraint class.

Provides a generic base class for rules that accept or reject a single
parsed value.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from cinputs.models.errors import ConstrainedInputError, ErrorKind

T = TypeVar("T")


class BaseConstraint(ABC, Generic[T]):
    """Abstract base class for constraints.

    Generic over T, the type of value being validated.

    Example:
        class EvenConstraint(BaseConstraint[int]):
            @property
            def name(self) -> str:
                return "even"

            def validate(self, value: int) -> None:
                if value % 2:
                    raise self.violation("odd", "Number must be even.")
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this constraint for error reporting."""
        ...

    @abstractmethod
    def validate(self, value: T) -> None:
        """Validate a value.

        Args:
            value: Parsed value to check.

        Raises:
            ConstrainedInputError: Kind VALIDATION, if the value is rejected.
        """
        ...

    def is_valid(self, value: T) -> bool:
        """Check a value without raising."""
        try:
            self.validate(value)
        except ConstrainedInputError:
            return False
        return True

    def violation(self, error_type: str, message: str, **context: object) -> ConstrainedInputError:
        """Build the validation error for a rejected value."""
        return ConstrainedInputError.create(
            ErrorKind.VALIDATION,
            error_type,
            message,
            constraint=self.name,
            **context,
        )
