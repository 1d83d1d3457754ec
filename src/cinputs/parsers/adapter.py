from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter

from cinputs.parsers.base import BaseValueParser


class TypeAdapterParser(BaseValueParser[Any]):
    """Parser implementation backed by a pydantic TypeAdapter.

    Text is validated in lax mode, so ``"456"`` becomes ``456`` for an
    integer target. Named targets narrow this to plain literals through
    their own validators. Range metadata on annotated targets (``UInt8``...)
    is enforced during parsing.
    """

    def __init__(self, target: Any, name: str | None = None) -> None:
        """Initialize the parser.

        Args:
            target: Type (or annotated type) to parse into.
            name: Display name of the target. Defaults to the type's name.
        """
        self._target = target
        self._name = name or getattr(target, "__name__", None) or repr(target)
        self._adapter: TypeAdapter[Any] = TypeAdapter(target)

    @property
    def name(self) -> str:
        """Name of the target this parser produces."""
        return self._name

    @property
    def target(self) -> Any:
        """The type this parser produces."""
        return self._target

    def _parse_impl(self, text: str) -> Any:
        return self._adapter.validate_python(text)
