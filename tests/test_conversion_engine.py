from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

import pytest

from checked_text import (
    CHAR,
    ConversionError,
    InvalidArgumentError,
    Text,
    UnsupportedTypeError,
    from_value,
    int8,
    int32,
    is_value,
    to_value,
    uint8,
    uint32,
)
from checked_text.conversion import (
    Capability,
    ConversionRegistry,
    load_default_conversions,
)


@dataclass(frozen=True)
class Point:
    x: int
    y: int


def _parse_point(source: str) -> Point:
    x, y = source.strip("()").split(",")
    return Point(int(x), int(y))


def _format_point(value: object) -> str:
    assert isinstance(value, Point)
    return f"({value.x}, {value.y})"


def make_registry() -> ConversionRegistry:
    registry = load_default_conversions(ConversionRegistry())
    registry.register(Capability(Point, parse=_parse_point, format=_format_point))
    return registry


def test_int_round_trip() -> None:
    assert to_value(int, from_value(137)) == 137
    assert Text.to_value(int, Text.from_value(-42)) == -42


def test_from_value_renders_common_types() -> None:
    assert from_value(True) == "true"
    assert from_value(False) == "false"
    assert from_value(2.5) == "2.5"
    assert from_value("abc") == "abc"
    assert from_value(Decimal("1.50")) == "1.50"
    assert isinstance(from_value("abc"), Text)


def test_from_value_copies_text() -> None:
    original = Text("x")

    rendered = from_value(original)
    rendered.append("y")

    assert original == "x"


def test_from_value_refuses_objects_without_rendering() -> None:
    with pytest.raises(UnsupportedTypeError):
        from_value(object())


def test_bool_accepts_only_exact_words() -> None:
    assert to_value(bool, "true") is True
    assert to_value(bool, "false") is False
    for bad in ("maybe", "True", " true", "1", ""):
        with pytest.raises(ConversionError):
            to_value(bool, bad)
    assert is_value(bool, "maybe") is False
    assert is_value(bool, "false") is True


def test_char_requires_exactly_one_unit() -> None:
    assert to_value(CHAR, "x") == "x"
    assert to_value(CHAR, Text("\xe9")) == "\xe9"
    with pytest.raises(ConversionError):
        to_value(CHAR, "xy")
    with pytest.raises(ConversionError):
        to_value(CHAR, "")


@pytest.mark.parametrize(
    ("source", "expected"),
    [(" 42 ", 42), ("-7", -7), ("+7", 7), ("0", 0), ("\t12\n", 12)],
)
def test_decimal_integers(source: str, expected: int) -> None:
    assert to_value(int, source) == expected


@pytest.mark.parametrize("source", ["42abc", "", "4 2", "0x10", "1.5", "--1"])
def test_decimal_integers_reject_leftovers(source: str) -> None:
    with pytest.raises(ConversionError):
        to_value(int, source)
    assert is_value(int, source) is False


def test_sized_integers_check_range() -> None:
    assert to_value(int32, "2147483647") == 2147483647
    assert to_value(int32, "-2147483648") == -2147483648
    assert to_value(uint8, "255") == 255
    with pytest.raises(ConversionError):
        to_value(int32, "2147483648")
    with pytest.raises(ConversionError):
        to_value(uint8, "256")
    with pytest.raises(ConversionError, match="negative"):
        to_value(uint8, "-1")


def test_radix_parsing() -> None:
    assert to_value(int32, "FF", 16) == 255
    assert to_value(int, "ff", 16) == 255
    assert to_value(uint32, "0xDEADBEEF", 16) == 0xDEADBEEF
    assert to_value(int, "0744", 8) == 484
    assert to_value(int, "  101  ", 2) == 5
    assert to_value(int, "zz", 36) == 1295
    assert to_value(int8, "-80", 16) == -128


@pytest.mark.parametrize(
    ("tag", "source", "radix"),
    [
        (uint32, "-1", 10),
        (int, "12", 2),
        (int, "", 10),
        (int, "0x", 16),
        (int, "12 3", 10),
        (int8, "80", 16),
        (int32, "0xDEADBEEF", 16),
    ],
)
def test_radix_parse_failures(tag: object, source: str, radix: int) -> None:
    with pytest.raises(ConversionError) as excinfo:
        to_value(tag, source, radix)
    assert excinfo.value.radix == radix
    assert is_value(tag, source, radix) is False


@pytest.mark.parametrize("radix", [0, 1, 37, -16])
def test_bad_radix_is_a_caller_error(radix: int) -> None:
    with pytest.raises(InvalidArgumentError):
        to_value(int, "1", radix)
    with pytest.raises(InvalidArgumentError):
        is_value(int, "1", radix)


def test_radix_needs_integral_target() -> None:
    with pytest.raises(UnsupportedTypeError):
        to_value(float, "1", 10)


def test_floats() -> None:
    assert to_value(float, "2.5") == 2.5
    assert to_value(float, " 1e3 ") == 1000.0
    assert to_value(float, "-.5") == -0.5
    assert to_value(float, from_value(0.1)) == 0.1
    assert is_value(float, "nan") is True
    assert is_value(float, "1.5x") is False


def test_text_targets() -> None:
    assert to_value(str, Text("abc")) == "abc"
    assert to_value(bytes, "abc") == b"abc"
    parsed = to_value(Text, "abc")
    assert isinstance(parsed, Text) and parsed == "abc"


def test_unregistered_types_are_caller_errors() -> None:
    with pytest.raises(UnsupportedTypeError):
        to_value(complex, "1")
    with pytest.raises(UnsupportedTypeError):
        is_value(complex, "1")


def test_custom_capability() -> None:
    registry = make_registry()

    assert from_value(Point(1, 2), registry) == "(1, 2)"
    assert to_value(Point, "(3, 4)", registry=registry) == Point(3, 4)
    assert is_value(Point, "nope", registry=registry) is False
    with pytest.raises(ConversionError):
        to_value(Point, "nope", registry=registry)
