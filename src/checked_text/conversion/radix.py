"""Integer and floating-point scanners used by the built-in capabilities."""

from __future__ import annotations

import re
import string
from typing import NoReturn

from checked_text.errors import ConversionError, InvalidArgumentError, report

from .models import IntegralType

MIN_RADIX = 2
MAX_RADIX = 36

_WS = " \t\n\v\f\r"
_DIGIT_VALUES = {
    **{ch: value for value, ch in enumerate(string.digits + string.ascii_lowercase)},
    **{ch: value + 10 for value, ch in enumerate(string.ascii_uppercase)},
}
_DECIMAL = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)[ \t\n\v\f\r]*")
_FLOAT = re.compile(
    r"[ \t\n\v\f\r]*"
    r"([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan))"
    r"[ \t\n\v\f\r]*",
    re.IGNORECASE,
)


def check_radix(radix: object, operation: str) -> int:
    if not isinstance(radix, int) or isinstance(radix, bool):
        report(InvalidArgumentError(f"{operation}: Radix must be an integer."))
    if radix < MIN_RADIX or radix > MAX_RADIX:
        report(
            InvalidArgumentError(
                f"{operation}: Radix must be between {MIN_RADIX} and {MAX_RADIX}, inclusive."
            )
        )
    return radix


def _fail(message: str, integral: IntegralType, radix: int | None = None) -> NoReturn:
    report(ConversionError(message, target=integral, radix=radix))


def _fit(value: int, integral: IntegralType, radix: int | None) -> int:
    if not integral.contains(value):
        _fail(
            f"to_value: {value} is out of range for {integral.name}", integral, radix
        )
    return value


def parse_radix(source: str, radix: int, integral: IntegralType) -> int:
    """Parse an already trimmed ``source`` in ``radix``; nothing may be left over."""

    body = source
    negative = False
    if body and body[0] in "+-":
        if body[0] == "-":
            if not integral.signed:
                _fail("Unsigned values can't be negative.", integral, radix)
            negative = True
        body = body[1:]
    if radix == 16 and len(body) > 2 and body[:2] in ("0x", "0X"):
        body = body[2:]
    if not body:
        _fail("to_value: Could not convert string to that type.", integral, radix)

    value = 0
    for ch in body:
        digit = _DIGIT_VALUES.get(ch)
        if digit is None or digit >= radix:
            _fail(
                f"to_value: {ch!r} is not a valid base-{radix} digit.", integral, radix
            )
        value = value * radix + digit
    return _fit(-value if negative else value, integral, radix)


def parse_decimal(source: str, integral: IntegralType) -> int:
    """Formatted-read path: whitespace, optional sign, decimal digits, whitespace."""

    match = _DECIMAL.fullmatch(source)
    if match is None:
        _fail("to_value: Could not convert string to that type.", integral)
    token = match.group(1)
    if token.startswith("-") and not integral.signed:
        _fail("Unsigned values can't be negative.", integral)
    return _fit(int(token), integral, None)


def parse_float(source: str) -> float:
    match = _FLOAT.fullmatch(source)
    if match is None:
        report(
            ConversionError(
                "to_value: Could not convert string to that type.", target=float
            )
        )
    return float(match.group(1))


def trim(source: str) -> str:
    return source.strip(_WS)


__all__ = [
    "MIN_RADIX",
    "MAX_RADIX",
    "check_radix",
    "parse_radix",
    "parse_decimal",
    "parse_float",
    "trim",
]
