"""Capability-keyed conversions between values and ``Text``."""

from .defaults import default_capabilities, load_default_conversions
from .engine import default_registry, from_value, is_value, register, to_value
from .models import (
    CHAR,
    PY_INT,
    SIZED_INTEGRALS,
    Capability,
    CharType,
    IntegralType,
    int8,
    int16,
    int32,
    int64,
    uint8,
    uint16,
    uint32,
    uint64,
)
from .radix import MAX_RADIX, MIN_RADIX
from .registry import CapabilityConflictError, ConversionRegistry, RegistryStats

__all__ = [
    "Capability",
    "CapabilityConflictError",
    "CharType",
    "CHAR",
    "ConversionRegistry",
    "IntegralType",
    "MAX_RADIX",
    "MIN_RADIX",
    "PY_INT",
    "RegistryStats",
    "SIZED_INTEGRALS",
    "default_capabilities",
    "default_registry",
    "from_value",
    "is_value",
    "load_default_conversions",
    "register",
    "to_value",
    "int8",
    "int16",
    "int32",
    "int64",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
]
