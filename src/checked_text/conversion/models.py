"""Type tags and capability records used by the conversion registry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Hashable, Optional


@dataclass(frozen=True, slots=True)
class IntegralType:
    """Integer target with a signedness and an optional bit width.

    ``bits=None`` means the range is unbounded (Python ``int``).
    """

    name: str
    signed: bool
    bits: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("IntegralType name cannot be empty")
        if self.bits is not None and self.bits <= 0:
            raise ValueError("bits must be positive")

    @property
    def min_value(self) -> Optional[int]:
        if not self.signed:
            return 0
        if self.bits is None:
            return None
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> Optional[int]:
        if self.bits is None:
            return None
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        low, high = self.min_value, self.max_value
        if low is not None and value < low:
            return False
        if high is not None and value > high:
            return False
        return True

    def __repr__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class CharType:
    """Tag for a single 8-bit code unit, surfaced as a one-character ``str``."""

    name: str = "char"

    def __repr__(self) -> str:
        return self.name


CHAR = CharType()

int8 = IntegralType("int8", signed=True, bits=8)
int16 = IntegralType("int16", signed=True, bits=16)
int32 = IntegralType("int32", signed=True, bits=32)
int64 = IntegralType("int64", signed=True, bits=64)
uint8 = IntegralType("uint8", signed=False, bits=8)
uint16 = IntegralType("uint16", signed=False, bits=16)
uint32 = IntegralType("uint32", signed=False, bits=32)
uint64 = IntegralType("uint64", signed=False, bits=64)
PY_INT = IntegralType("int", signed=True)

SIZED_INTEGRALS = (int8, int16, int32, int64, uint8, uint16, uint32, uint64)

Parser = Callable[[str], object]
Formatter = Callable[[object], object]


def _label(key: Hashable) -> str:
    return getattr(key, "__name__", None) or repr(key)


@dataclass(frozen=True, slots=True)
class Capability:
    """Parse/format pair registered for one type tag.

    ``parse`` receives the text content as a latin-1 ``str`` and either returns
    the value or raises ``ConversionError``. ``format`` returns something
    text-like. ``integral`` marks tags that accept an explicit radix.
    """

    key: Hashable
    parse: Optional[Parser] = None
    format: Optional[Formatter] = None
    integral: Optional[IntegralType] = None
    description: str = ""

    def __post_init__(self) -> None:
        if self.key is None:
            raise ValueError("Capability key cannot be None")
        if self.parse is None and self.format is None:
            raise ValueError(f"Capability '{self.label}' needs a parse or format function")
        for fn in (self.parse, self.format):
            if fn is not None and not callable(fn):
                raise TypeError("parse and format must be callable")

    @property
    def label(self) -> str:
        return _label(self.key)


__all__ = [
    "Capability",
    "CharType",
    "CHAR",
    "IntegralType",
    "SIZED_INTEGRALS",
    "PY_INT",
    "int8",
    "int16",
    "int32",
    "int64",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
]
