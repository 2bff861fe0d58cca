"""Built-in capabilities installed into every default registry."""

from __future__ import annotations

from functools import partial
from typing import Iterable

from checked_text.errors import ConversionError, report
from checked_text.text import Text

from .models import CHAR, PY_INT, SIZED_INTEGRALS, Capability, IntegralType
from .radix import parse_decimal, parse_float
from .registry import ConversionRegistry


def _parse_bool(source: str) -> bool:
    if source == "true":
        return True
    if source == "false":
        return False
    report(
        ConversionError(
            "to_value: Boolean values must be either 'true' or 'false'", target=bool
        )
    )


def _format_bool(value: object) -> str:
    return "true" if value else "false"


def _parse_char(source: str) -> str:
    if len(source) != 1:
        report(
            ConversionError(
                "to_value: String must have length one to be converted to a char.",
                target=CHAR,
            )
        )
    return source


def _parse_integral(integral: IntegralType, source: str) -> int:
    return parse_decimal(source, integral)


def _integral(key: object, integral: IntegralType) -> Capability:
    return Capability(
        key=key,
        parse=partial(_parse_integral, integral),
        format=str,
        integral=integral,
        description=f"{integral.name} integer",
    )


def default_capabilities() -> Iterable[Capability]:
    yield Capability(bool, _parse_bool, _format_bool, description="'true' / 'false'")
    yield Capability(CHAR, _parse_char, str, description="single code unit")
    yield _integral(int, PY_INT)
    for integral in SIZED_INTEGRALS:
        yield _integral(integral, integral)
    yield Capability(float, parse_float, repr, description="shortest round-trip float")
    yield Capability(str, str, str, description="latin-1 str")
    yield Capability(
        bytes, lambda source: source.encode("latin-1"), bytes, description="raw bytes"
    )
    yield Capability(Text, Text, Text.copy, description="owned text")


def load_default_conversions(
    registry: ConversionRegistry, *, replace: bool = False
) -> ConversionRegistry:
    for capability in default_capabilities():
        registry.register(capability, replace=replace)
    return registry


__all__ = ["default_capabilities", "load_default_conversions"]
