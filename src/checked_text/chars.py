"""ASCII character classification over single 8-bit code units.

These mirror the C-locale ``<cctype>`` predicates. Each helper takes either a
one-character ``str`` (code point below 256) or an ``int`` in ``[0, 255]``.
"""

from __future__ import annotations

import string
from typing import Union

from .errors import InvalidArgumentError, report

CodeUnit = Union[str, int]

WHITESPACE = b" \t\n\v\f\r"
UNRESERVED = frozenset(
    (string.ascii_letters + string.digits + "-_.~*").encode("ascii")
)
HEX_DIGITS = frozenset(string.hexdigits.encode("ascii"))

UPPER_TABLE = bytes.maketrans(
    string.ascii_lowercase.encode("ascii"), string.ascii_uppercase.encode("ascii")
)
LOWER_TABLE = bytes.maketrans(
    string.ascii_uppercase.encode("ascii"), string.ascii_lowercase.encode("ascii")
)

_ALPHA = frozenset(string.ascii_letters.encode("ascii"))
_DIGIT = frozenset(string.digits.encode("ascii"))
_PUNCT = frozenset(string.punctuation.encode("ascii"))


def code_of(ch: CodeUnit) -> int:
    """Return the 8-bit code unit for ``ch``."""

    if isinstance(ch, str):
        if len(ch) != 1:
            report(InvalidArgumentError(f"Expected a single character, got {ch!r}"))
        code = ord(ch)
    elif isinstance(ch, int) and not isinstance(ch, bool):
        code = ch
    else:
        report(InvalidArgumentError(f"Expected a character, got {type(ch).__name__}"))
    if not 0 <= code <= 0xFF:
        report(InvalidArgumentError(f"Character {ch!r} is outside the 8-bit range"))
    return code


def to_upper(ch: CodeUnit) -> str:
    return chr(UPPER_TABLE[code_of(ch)])


def to_lower(ch: CodeUnit) -> str:
    return chr(LOWER_TABLE[code_of(ch)])


def is_alpha(ch: CodeUnit) -> bool:
    return code_of(ch) in _ALPHA


def is_digit(ch: CodeUnit) -> bool:
    return code_of(ch) in _DIGIT


def is_xdigit(ch: CodeUnit) -> bool:
    return code_of(ch) in HEX_DIGITS


def is_alnum(ch: CodeUnit) -> bool:
    code = code_of(ch)
    return code in _ALPHA or code in _DIGIT


def is_space(ch: CodeUnit) -> bool:
    return code_of(ch) in WHITESPACE


def is_print(ch: CodeUnit) -> bool:
    return 0x20 <= code_of(ch) < 0x7F


def is_punct(ch: CodeUnit) -> bool:
    return code_of(ch) in _PUNCT


__all__ = [
    "WHITESPACE",
    "UNRESERVED",
    "HEX_DIGITS",
    "UPPER_TABLE",
    "LOWER_TABLE",
    "code_of",
    "to_upper",
    "to_lower",
    "is_alpha",
    "is_digit",
    "is_xdigit",
    "is_alnum",
    "is_space",
    "is_print",
    "is_punct",
]
