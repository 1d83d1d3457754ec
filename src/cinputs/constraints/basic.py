"""String and number constraint implementations.

Both constraints are frozen pydantic dataclasses: their configuration is
checked once when they are built, and ``validate`` is a pure function of the
configuration and the value.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from decimal import Decimal
from numbers import Real
from typing import Annotated, Any, Literal, Union

from pydantic import Field, TypeAdapter, field_validator, model_validator
from pydantic.dataclasses import dataclass

from cinputs.constraints.base import BaseConstraint

logger = logging.getLogger(__name__)

Number = Union[int, float, Decimal, Real]


def _is_finite(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, float):
        return math.isfinite(value)
    # int, Fraction and other exact rationals
    return True


@dataclass(frozen=True, kw_only=True)
class StringConstraint(BaseConstraint[str]):
    """Length and character-set rules for strings.

    Length is measured in characters (``len(s)``), not encoded bytes.

    Checks run in a fixed order and stop at the first failure: minimum
    length, maximum length, each excluded character, each included
    character.

    Example:
        >>> constraint = StringConstraint(exclude="yie", include="uj2", min_len=5, max_len=10)
        >>> constraint.is_valid("uj2gl")
        True
        >>> constraint.is_valid("uj2gil")
        False
    """

    exclude: tuple[str, ...] = ()
    include: tuple[str, ...] = ()
    max_len: int | None = None
    min_len: int = Field(default=0, ge=0)
    kind: Literal["string"] = "string"

    @field_validator("exclude", "include", mode="before")
    @classmethod
    def _split_characters(cls, value: Any) -> Any:
        if isinstance(value, str):
            return tuple(value)
        if isinstance(value, (set, frozenset)):
            return tuple(sorted(value))
        return value

    @field_validator("exclude", "include")
    @classmethod
    def _single_characters(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for chr_ in value:
            if len(chr_) != 1:
                raise ValueError(f"expected single characters, got {chr_!r}")
        # Drop duplicates, keep first-seen order for deterministic reporting
        return tuple(dict.fromkeys(value))

    @model_validator(mode="after")
    def _check_length_bounds(self) -> StringConstraint:
        if self.max_len is not None and self.max_len < self.min_len:
            raise ValueError(
                f"max_len ({self.max_len}) must not be less than min_len ({self.min_len})"
            )
        return self

    @property
    def name(self) -> str:
        """Name of this constraint."""
        return "string"

    def validate(self, value: str) -> None:
        """Validate a string against the length and character rules.

        Args:
            value: String to check.

        Raises:
            ConstrainedInputError: If any rule is violated.
        """
        if not isinstance(value, str):
            raise self.violation(
                "invalid_constraint_target",
                "Cannot apply a string constraint to a {value_type} value.",
                value_type=type(value).__name__,
            )

        length = len(value)

        if length < self.min_len:
            logger.debug("String of length %d below min_len %d", length, self.min_len)
            raise self.violation(
                "too_short",
                "String must be at least {min_len} characters long.",
                min_len=self.min_len,
                length=length,
            )

        if self.max_len is not None and length > self.max_len:
            logger.debug("String of length %d above max_len %d", length, self.max_len)
            raise self.violation(
                "too_long",
                "String must be no more than {max_len} characters long.",
                max_len=self.max_len,
                length=length,
            )

        for chr_ in self.exclude:
            if chr_ in value:
                raise self.violation(
                    "forbidden_character",
                    "String must not contain the character '{character}'.",
                    character=chr_,
                )

        for chr_ in self.include:
            if chr_ not in value:
                raise self.violation(
                    "missing_character",
                    "String must contain the character '{character}'.",
                    character=chr_,
                )


@dataclass(frozen=True, kw_only=True)
class NumberConstraint(BaseConstraint[Number]):
    """Inclusive range rule for numbers.

    Values are compared against the float bounds exactly, without rounding
    through ``float``. Values that have no float counterpart (non-numbers,
    NaN, finite numbers too large for a float) are rejected as invalid
    constraint targets rather than as out-of-range values.
    """

    min_value: float = float("-inf")
    max_value: float = float("inf")
    kind: Literal["number"] = "number"

    @model_validator(mode="after")
    def _check_bounds(self) -> NumberConstraint:
        if math.isnan(self.min_value) or math.isnan(self.max_value):
            raise ValueError("bounds must not be NaN")
        if self.max_value < self.min_value:
            raise ValueError(
                f"max_value ({self.max_value}) must not be less than min_value ({self.min_value})"
            )
        return self

    @property
    def name(self) -> str:
        """Name of this constraint."""
        return "number"

    def _check_comparable(self, value: Any) -> None:
        if isinstance(value, (Real, Decimal)):
            try:
                as_float = float(value)
            except (OverflowError, ValueError):
                # ValueError: signaling NaN
                pass
            else:
                overflowed = math.isinf(as_float) and _is_finite(value)
                if not math.isnan(as_float) and not overflowed:
                    return

        raise self.violation(
            "invalid_constraint_target",
            "Cannot compare {value_type} value against number bounds.",
            value_type=type(value).__name__,
            value=str(value),
        )

    def validate(self, value: Number) -> None:
        """Validate a number against the inclusive bounds.

        Args:
            value: Number to check.

        Raises:
            ConstrainedInputError: If the value is out of range or not comparable.
        """
        self._check_comparable(value)

        if value < self.min_value:
            logger.debug("Number %s below min_value %s", value, self.min_value)
            raise self.violation(
                "too_small",
                "Number must be at least {min_value}.",
                min_value=self.min_value,
                value=str(value),
            )

        if value > self.max_value:
            logger.debug("Number %s above max_value %s", value, self.max_value)
            raise self.violation(
                "too_large",
                "Number must be no more than {max_value}.",
                max_value=self.max_value,
                value=str(value),
            )


Constraint = Annotated[Union[StringConstraint, NumberConstraint], Field(discriminator="kind")]

_constraint_adapter: TypeAdapter[Any] = TypeAdapter(Constraint)


def load_constraint(data: Mapping[str, Any]) -> StringConstraint | NumberConstraint:
    """Build a constraint from plain data.

    The ``kind`` key selects the variant (``"string"`` or ``"number"``);
    the remaining keys are the constraint's fields.

    Args:
        data: Mapping such as ``{"kind": "number", "min_value": 0, "max_value": 120}``.

    Returns:
        The matching constraint instance.

    Raises:
        pydantic.ValidationError: If the kind is unknown or a field is invalid.
    """
    return _constraint_adapter.validate_python(dict(data))  # type: ignore[no-any-return]
