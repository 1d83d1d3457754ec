"""Registry of named parse targets.

Maps target names (``"u8"``, ``"str"``, ...) onto parsers. Default targets
are registered lazily on first access.
"""

from __future__ import annotations

from typing import Any, ClassVar

from cinputs.parsers.adapter import TypeAdapterParser
from cinputs.parsers.base import BaseValueParser
from cinputs.protocols import ValueParserProtocol


class ParserFactory:
    """Factory for creating value parsers by target name.

    Entries are target types or ready-made parsers. Types are wrapped in a
    TypeAdapterParser; parsers are cached per name and per type since they
    hold no per-call state.

    Example:
        >>> parser = ParserFactory.create("u8")
        >>> parser.parse("200")
        200

        # Register a custom target
        >>> ParserFactory.register("port", Annotated[int, Field(ge=1, le=65535)])
        >>> parser = ParserFactory.create("port")
    """

    _registry: ClassVar[dict[str, Any]] = {}
    _cache: ClassVar[dict[str, ValueParserProtocol]] = {}
    _type_cache: ClassVar[dict[Any, ValueParserProtocol]] = {}

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        """Ensure default targets are registered."""
        if "str" not in cls._registry:
            from cinputs.models.targets import TARGET_TYPES

            for name, target in TARGET_TYPES.items():
                cls._registry.setdefault(name, target)

    @classmethod
    def register(cls, name: str, entry: Any) -> None:
        """Register a target type (or a ready-made parser) under a name.

        Args:
            name: Target name used by ``create`` and the CLI.
            entry: Type, annotated type, or BaseValueParser instance.
        """
        cls._ensure_defaults_registered()
        cls._cache.pop(name, None)
        cls._registry[name] = entry

    @classmethod
    def unregister(cls, name: str) -> None:
        """Unregister a target name. Unknown names are ignored."""
        cls._cache.pop(name, None)
        cls._registry.pop(name, None)

    @classmethod
    def create(cls, target_name: str = "str") -> ValueParserProtocol:
        """Create a parser for a named target.

        Args:
            target_name: Registered target name. Defaults to "str".

        Returns:
            Parser instance.

        Raises:
            ValueError: If the target name is not registered.
        """
        cls._ensure_defaults_registered()

        if target_name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys()))
            raise ValueError(
                f"Unknown target type: {target_name}. Available types: {available}"
            )

        entry = cls._registry[target_name]
        if isinstance(entry, BaseValueParser):
            return entry
        if target_name not in cls._cache:
            cls._cache[target_name] = TypeAdapterParser(entry, name=target_name)
        return cls._cache[target_name]

    @classmethod
    def for_type(cls, target: Any) -> ValueParserProtocol:
        """Get a parser for a type or annotated type.

        Parsers for hashable targets are cached; unhashable ones (annotated
        types carrying unhashable metadata) are built on every call.
        """
        try:
            return cls._type_cache[target]
        except KeyError:
            parser = cls._type_cache[target] = TypeAdapterParser(target)
            return parser
        except TypeError:
            return TypeAdapterParser(target)

    @classmethod
    def available_types(cls) -> list[str]:
        """Get the registered target names, sorted."""
        cls._ensure_defaults_registered()
        return sorted(cls._registry.keys())

    @classmethod
    def clear_registry(cls) -> None:
        """Clear the registry and the parser caches (mainly for testing)."""
        cls._cache.clear()
        cls._type_cache.clear()
        cls._registry.clear()


def resolve_parser(target: Any) -> ValueParserProtocol:
    """Get a parser for a target name, type or parser.

    Args:
        target: Registered target name (``"u8"``), a type or annotated
            type (``int``, ``UInt8``), or a parser instance.

    Returns:
        Parser producing values of the target.

    Raises:
        ValueError: If a target name is not registered.
    """
    if isinstance(target, str):
        return ParserFactory.create(target)
    if isinstance(target, ValueParserProtocol) and not isinstance(target, type):
        return target
    return ParserFactory.for_type(target)
