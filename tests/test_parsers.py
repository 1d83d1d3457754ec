from decimal import Decimal
from typing import Annotated

import pytest
from pydantic import Field

from cinputs import (
    BaseValueParser,
    ConstrainedInputError,
    ErrorKind,
    ParserFactory,
    TypeAdapterParser,
    UInt8,
    ValueParserProtocol,
    resolve_parser,
    string_input,
)

# =============================================================================
# string_input
# =============================================================================


def test_string_input_fixed_width_integers() -> None:
    assert string_input("456", "u32") == 456
    assert string_input("-20", "i8") == -20

    for text in ("257", "-45"):
        with pytest.raises(ConstrainedInputError) as exc_info:
            string_input(text, "u8")
        assert exc_info.value.kind is ErrorKind.PARSE


@pytest.mark.parametrize(
    ("name", "low", "high"),
    [
        ("i8", -128, 127),
        ("i16", -32768, 32767),
        ("i32", -(2**31), 2**31 - 1),
        ("i64", -(2**63), 2**63 - 1),
        ("u16", 0, 65535),
    ],
)
def test_fixed_width_limits(name: str, low: int, high: int) -> None:
    assert string_input(str(low), name) == low
    assert string_input(str(high), name) == high

    with pytest.raises(ConstrainedInputError):
        string_input(str(low - 1), name)
    with pytest.raises(ConstrainedInputError):
        string_input(str(high + 1), name)


def test_string_input_other_targets() -> None:
    assert string_input("-20.4", "float") == -20.4
    assert string_input("-20.4", float) == -20.4
    assert string_input("1.10", "decimal") == Decimal("1.10")
    assert string_input("10" * 20, int) == int("10" * 20)
    assert string_input("true", "bool") is True
    assert string_input("J", "char") == "J"
    assert string_input("  spaced  ", "str") == "  spaced  "
    assert string_input("", str) == ""


@pytest.mark.parametrize(
    ("text", "target"),
    [
        ("abc", "int"),
        ("1.5", "i32"),
        ("", "i32"),
        ("twelve", "float"),
        ("JJ", "char"),
        ("maybe", "bool"),
    ],
)
def test_string_input_parse_errors(text: str, target: str) -> None:
    with pytest.raises(ConstrainedInputError) as exc_info:
        string_input(text, target)

    err = exc_info.value
    assert err.kind is ErrorKind.PARSE
    assert err.type == "parse_error"
    assert err.context["target"] == target


@pytest.mark.parametrize(
    ("text", "target"),
    [
        ("1.0", "i32"),
        ("4.000", "int"),
        ("1_000", "u16"),
        (" 42 ", "i32"),
        ("42\t", "u8"),
        ("٤٢", "u8"),
        ("0x10", "i64"),
        ("1_0.5", "float"),
        (" 1.5", "f64"),
        ("yes", "bool"),
        ("off", "bool"),
        ("True", "bool"),
        ("1", "bool"),
    ],
)
def test_named_targets_reject_non_literal_spellings(text: str, target: str) -> None:
    with pytest.raises(ConstrainedInputError) as exc_info:
        string_input(text, target)
    assert exc_info.value.kind is ErrorKind.PARSE


@pytest.mark.parametrize(
    ("text", "target", "expected"),
    [
        ("+7", "i8", 7),
        ("-0", "i32", 0),
        ("007", "u8", 7),
        ("5.", "float", 5.0),
        (".5", "f64", 0.5),
        ("1e3", "float", 1000.0),
        ("-inf", "f64", float("-inf")),
        ("false", "bool", False),
    ],
)
def test_named_targets_accept_literal_spellings(text: str, target: str, expected: object) -> None:
    assert string_input(text, target) == expected


def test_string_input_accepts_annotated_type() -> None:
    assert string_input("200", UInt8) == 200
    with pytest.raises(ConstrainedInputError):
        string_input("300", UInt8)


def test_string_input_unknown_target_name() -> None:
    with pytest.raises(ValueError, match="Unknown target type: u128"):
        string_input("1", "u128")


# =============================================================================
# Parsers and factory
# =============================================================================


def test_parser_factory_default_and_error() -> None:
    """ParserFactory should provide the default str parser and raise on unknown."""
    parser = ParserFactory.create()
    assert parser.name == "str"
    with pytest.raises(ValueError):
        ParserFactory.create("unknown-type")


def test_parser_factory_caches_parsers() -> None:
    assert ParserFactory.create("u8") is ParserFactory.create("u8")


def test_parser_factory_lists_default_targets() -> None:
    names = ParserFactory.available_types()
    for expected in ("i8", "u8", "usize", "isize", "float", "f64", "str", "string", "char", "bool"):
        assert expected in names


def test_parser_factory_register_custom_target(clean_parser_registry: None) -> None:
    ParserFactory.register("port", Annotated[int, Field(ge=1, le=65535)])

    assert string_input("8080", "port") == 8080
    with pytest.raises(ConstrainedInputError):
        string_input("0", "port")

    ParserFactory.unregister("port")
    with pytest.raises(ValueError):
        ParserFactory.create("port")


def test_parser_factory_register_parser_instance(clean_parser_registry: None) -> None:
    class UpperParser(BaseValueParser[str]):
        @property
        def name(self) -> str:
            return "upper"

        def _parse_impl(self, text: str) -> str:
            return text.upper()

    parser = UpperParser()
    ParserFactory.register("upper", parser)

    assert ParserFactory.create("upper") is parser
    assert string_input("abc", "upper") == "ABC"


def test_parser_factory_reregisters_defaults_after_clear(clean_parser_registry: None) -> None:
    ParserFactory.clear_registry()
    assert string_input("7", "u8") == 7


def test_resolve_parser_variants() -> None:
    by_name = resolve_parser("i16")
    by_type = resolve_parser(int)
    existing = TypeAdapterParser(float, name="real")

    assert by_name.name == "i16"
    assert by_type.name == "int"
    assert resolve_parser(existing) is existing
    assert isinstance(by_type, ValueParserProtocol)


def test_parser_factory_unregister_unknown_is_noop(clean_parser_registry: None) -> None:
    ParserFactory.unregister("never-registered")
    assert "u8" in ParserFactory.available_types()


def test_resolve_parser_caches_type_targets(clean_parser_registry: None) -> None:
    first = resolve_parser(int)
    assert resolve_parser(int) is first
    assert string_input("12", int) == 12

    ParserFactory.clear_registry()
    assert resolve_parser(int) is not first


def test_type_adapter_parser_repr() -> None:
    assert repr(TypeAdapterParser(int)) == "TypeAdapterParser('int')"
