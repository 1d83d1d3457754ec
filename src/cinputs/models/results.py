"""Result classes for non-raising pipeline runs."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any

from cinputs.models.errors import ConstrainedInputError, ErrorKind


@dataclass
class InputResult:
    """Outcome of parsing (and optionally validating) one line of input.

    Exactly one of ``value`` / ``error`` is meaningful: when ``error`` is set
    the value is ``None`` and must not be used.
    """

    raw_input: str
    value: Any = None
    error: ConstrainedInputError | None = None

    @property
    def is_valid(self) -> bool:
        """Check if the input parsed and passed its constraint."""
        return self.error is None

    @property
    def error_kind(self) -> ErrorKind | None:
        """Kind of the failure, or None for a valid result."""
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> Any:
        """Return the value, raising the stored error if there is one."""
        if self.error is not None:
            raise self.error
        return self.value

    def to_dict(self) -> dict[str, Any]:
        """Convert to a flat dictionary for reporting."""
        return {
            "raw_input": self.raw_input,
            "value": self.value,
            "is_valid": self.is_valid,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "error_type": self.error.type if self.error is not None else None,
            "message": self.error.message() if self.error is not None else None,
        }


def summarize_results(results: list[InputResult]) -> dict[str, int]:
    """Count results by outcome.

    Returns:
        Dict mapping ``"valid"`` and each failing ErrorKind value to counts.
    """
    counts = Counter(
        "valid" if r.is_valid else r.error_kind.value  # type: ignore[union-attr]
        for r in results
    )
    return dict(counts)
