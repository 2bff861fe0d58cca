"""Type-directed conversion between values and ``Text``.

``from_value`` renders a value, ``to_value`` parses one back and ``is_value``
asks whether parsing would succeed. Dispatch goes through a
``ConversionRegistry``; the process-wide default one is built on first use.
"""

from __future__ import annotations

from typing import Hashable, Optional

from checked_text.errors import ConversionError, TextError, UnsupportedTypeError, report
from checked_text.text import Text
from checked_text.view import OwnedBuffer, TextLike, TextView

from .defaults import load_default_conversions
from .models import Capability
from .radix import check_radix, parse_radix, trim
from .registry import ConversionRegistry

_TEXT_TYPES = (str, bytes, bytearray, TextView, OwnedBuffer)
_DEFAULT_REGISTRY: Optional[ConversionRegistry] = None


def default_registry() -> ConversionRegistry:
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = load_default_conversions(ConversionRegistry())
    return _DEFAULT_REGISTRY


def register(capability: Capability, *, replace: bool = False) -> Capability:
    """Teach the default registry a new type."""

    return default_registry().register(capability, replace=replace)


def _has_own_rendering(value_type: type) -> bool:
    return value_type.__str__ is not object.__str__ or value_type.__repr__ is not object.__repr__


def from_value(value: object, registry: Optional[ConversionRegistry] = None) -> Text:
    """Render ``value`` as text.

    Booleans become ``"true"``/``"false"``, text-like values are copied as is,
    registered types use their formatter and anything else with its own
    ``__str__``/``__repr__`` goes through ``format()``.
    """

    if isinstance(value, bool):
        return Text("true" if value else "false")
    if isinstance(value, _TEXT_TYPES):
        return Text(value)

    capability = (registry or default_registry()).formatter_for(type(value))
    if capability is not None and capability.format is not None:
        return Text(capability.format(value))  # type: ignore[arg-type]
    if _has_own_rendering(type(value)):
        return Text(format(value))
    report(
        UnsupportedTypeError(
            f"from_value: {type(value).__name__} has no textual rendering"
        )
    )


def to_value(
    type_tag: Hashable,
    text: TextLike,
    radix: Optional[int] = None,
    registry: Optional[ConversionRegistry] = None,
) -> object:
    """Parse ``text`` as ``type_tag``; the whole content must be consumed.

    With ``radix`` the tag must be integral and the radix within ``[2, 36]``.
    Raises ``ConversionError`` when the content does not fit the type.
    """

    capability = (registry or default_registry()).get(type_tag)
    source = str(TextView.of(text))

    if radix is not None:
        if capability.integral is None:
            report(
                UnsupportedTypeError(
                    f"to_value: a radix only applies to integer types, not {capability.label}"
                )
            )
        check_radix(radix, "to_value")
        return parse_radix(trim(source), radix, capability.integral)

    if capability.parse is None:
        report(UnsupportedTypeError(f"to_value: {capability.label} cannot be parsed"))
    try:
        return capability.parse(source)
    except TextError:
        raise
    except ValueError as exc:
        report(ConversionError(f"to_value: {exc}", target=type_tag))


def is_value(
    type_tag: Hashable,
    text: TextLike,
    radix: Optional[int] = None,
    registry: Optional[ConversionRegistry] = None,
) -> bool:
    """Whether ``to_value`` would succeed.

    Only conversion failures become ``False``; a bad radix or an unknown type
    still raises.
    """

    if radix is not None:
        check_radix(radix, "is_value")
    try:
        to_value(type_tag, text, radix, registry)
    except ConversionError:
        return False
    return True


__all__ = ["default_registry", "register", "from_value", "to_value", "is_value"]
