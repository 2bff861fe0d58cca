"""Failure taxonomy for the text core and the single funnel that raises it."""

from __future__ import annotations

from enum import Enum
from typing import NoReturn, Optional

from checked_text.runtime import telemetry


class ErrorKind(str, Enum):
    OUT_OF_RANGE = "out_of_range"
    INVALID_ARGUMENT = "invalid_argument"
    ENCODING = "encoding"
    CONVERSION = "conversion"
    INVALIDATED_CURSOR = "invalidated_cursor"


class TextError(RuntimeError):
    """Base class for every failure reported by checked_text."""

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TextIndexError(TextError, IndexError):
    """Raised when an index or position falls outside ``[low .. high]``."""

    kind = ErrorKind.OUT_OF_RANGE

    def __init__(
        self,
        operation: str,
        index: int,
        low: int,
        high: int,
        *,
        message: Optional[str] = None,
    ) -> None:
        super().__init__(
            message
            or f"Text.{operation}: Index {index} is out of range [{low} .. {high}]"
        )
        self.operation = operation
        self.index = index
        self.low = low
        self.high = high


class InvalidArgumentError(TextError, ValueError):
    """Caller mistake: empty delimiter, negative length, bad radix, None..."""

    kind = ErrorKind.INVALID_ARGUMENT


class UnsupportedTypeError(TextError, TypeError):
    """A value or type tag that has no textual form or parsing path."""

    kind = ErrorKind.INVALID_ARGUMENT


class EncodingError(TextError, ValueError):
    """Malformed percent-encoding or a byte that cannot be URL-decoded."""

    kind = ErrorKind.ENCODING


class ConversionError(TextError, ValueError):
    """Text that does not fully represent a value of the requested type."""

    kind = ErrorKind.CONVERSION

    def __init__(
        self, message: str, *, target: object = None, radix: Optional[int] = None
    ) -> None:
        super().__init__(message)
        self.target = target
        self.radix = radix


class InvalidatedCursorError(TextError):
    """A cursor was used after its text was structurally modified."""

    kind = ErrorKind.INVALIDATED_CURSOR

    def __init__(self, captured: int, current: int) -> None:
        super().__init__(
            "Cursor used after its text was modified "
            f"(captured version {captured}, current version {current})"
        )
        self.captured = captured
        self.current = current


def report(error: TextError) -> NoReturn:
    """Record ``error`` as a telemetry event and raise it.

    Every failure in the package goes through here; the caller's frame never
    continues past the call.
    """

    telemetry.record_event(
        "text::error",
        level="debug",
        data={"kind": error.kind.value, "message": error.message},
    )
    raise error


__all__ = [
    "ErrorKind",
    "TextError",
    "TextIndexError",
    "InvalidArgumentError",
    "UnsupportedTypeError",
    "EncodingError",
    "ConversionError",
    "InvalidatedCursorError",
    "report",
]
