"""Non-owning views over text-like values.

``TextView.of`` is the one place that decides what counts as text. It accepts
single characters, null-terminated raw buffers and owned buffers, and refuses
numbers and ``None``. A view references its source; it must not outlive it.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Protocol, Union, runtime_checkable

from .errors import InvalidArgumentError, TextIndexError, UnsupportedTypeError, report

Buffer = Union[bytes, bytearray]


@runtime_checkable
class OwnedBuffer(Protocol):
    """Objects that expose their storage for zero-copy viewing (``Text``)."""

    def __text_buffer__(self) -> bytearray: ...


TextLike = Union[str, bytes, bytearray, OwnedBuffer, "TextView"]


class ViewKind(Enum):
    CHARACTER = "character"
    RAW_BUFFER = "raw_buffer"
    OWNED_BUFFER = "owned_buffer"


@dataclass(frozen=True, slots=True, eq=False)
class TextView:
    """Read-only window ``source[begin:end]``."""

    kind: ViewKind
    source: Buffer
    begin: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.begin <= self.end <= len(self.source):
            raise ValueError("TextView range must satisfy 0 <= begin <= end <= len")

    @classmethod
    def of(cls, value: object) -> "TextView":
        if isinstance(value, TextView):
            return value
        if value is None:
            report(InvalidArgumentError("Cannot treat None as text."))
        if isinstance(value, numbers.Number):
            report(
                UnsupportedTypeError(
                    f"A {type(value).__name__} is not text; "
                    "use from_value() to render numbers."
                )
            )
        if isinstance(value, str):
            if len(value) == 1:
                return cls.character(value)
            return cls(ViewKind.OWNED_BUFFER, _encode(value), 0, len(value))
        if isinstance(value, (bytes, bytearray)):
            terminator = value.find(0)
            end = len(value) if terminator == -1 else terminator
            return cls(ViewKind.RAW_BUFFER, value, 0, end)
        if isinstance(value, OwnedBuffer):
            buffer = value.__text_buffer__()
            return cls(ViewKind.OWNED_BUFFER, buffer, 0, len(buffer))
        report(UnsupportedTypeError(f"Cannot treat {type(value).__name__} as text."))

    @classmethod
    def character(cls, ch: str) -> "TextView":
        # Two-byte inline storage: the code unit and its terminator.
        code = _encode(ch)[0]
        return cls(ViewKind.CHARACTER, bytes((code, 0)), 0, 1)

    def size(self) -> int:
        return self.end - self.begin

    def __len__(self) -> int:
        return self.end - self.begin

    def __getitem__(self, index: int) -> str:
        size = self.size()
        if index < 0 or index > size:
            report(
                TextIndexError(
                    "view", index, 0, size, message="String index out of range."
                )
            )
        if index == size:
            return "\0"
        return chr(self.source[self.begin + index])

    def __iter__(self) -> Iterator[str]:
        for code in self.source[self.begin : self.end]:
            yield chr(code)

    def tobytes(self) -> bytes:
        return bytes(self.source[self.begin : self.end])

    def __bytes__(self) -> bytes:
        return self.tobytes()

    def __str__(self) -> str:
        return self.tobytes().decode("latin-1")


def _encode(value: str) -> bytes:
    try:
        return value.encode("latin-1")
    except UnicodeEncodeError:
        report(
            InvalidArgumentError(
                f"Text holds 8-bit code units only; {value!r} does not fit."
            )
        )


def view_of(value: object) -> TextView:
    """Shorthand for ``TextView.of``."""

    return TextView.of(value)


__all__ = ["OwnedBuffer", "TextLike", "TextView", "ViewKind", "view_of"]
