"""The owning, mutable, bounds-checked text type."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from checked_text.runtime.telemetry import span

from .chars import HEX_DIGITS, LOWER_TABLE, UNRESERVED, UPPER_TABLE, WHITESPACE
from .errors import (
    EncodingError,
    InvalidArgumentError,
    TextIndexError,
    UnsupportedTypeError,
    report,
)
from .hashing import hash_code
from .versioning import CheckedCursor, VersionTracker
from .view import OwnedBuffer, TextLike, TextView

_TEXT_TYPES = (str, bytes, bytearray, TextView, OwnedBuffer)
_PLUS = ord("+")
_PERCENT = ord("%")
_SPACE = ord(" ")


def _maybe_view(value: object) -> Optional[TextView]:
    """View ``value`` if it is text-like, else ``None`` (for operator fallbacks)."""

    if isinstance(value, _TEXT_TYPES):
        return TextView.of(value)
    return None


class Text:
    """Mutable string of 8-bit code units.

    Every index is bounds-checked, every structural mutation bumps a version
    counter, and cursors from ``begin()``/``end()`` refuse to work once that
    counter has moved. Any text-like value (``str``, ``bytes``, ``bytearray``,
    another ``Text`` or a ``TextView``) is accepted wherever text is expected.
    """

    __slots__ = ("_data", "_version")

    def __init__(self, text: TextLike = "") -> None:
        self._data = bytearray(TextView.of(text).tobytes())
        self._version = VersionTracker()

    @classmethod
    def from_bytes(cls, data: bytes | bytearray) -> "Text":
        """Adopt ``data`` in full, embedded zero bytes included."""

        text = cls.__new__(cls)
        text._data = bytearray(data)
        text._version = VersionTracker()
        return text

    @classmethod
    def filled(cls, count: int, ch: TextLike) -> "Text":
        """Return ``count`` copies of the single character ``ch``."""

        if count < 0:
            report(InvalidArgumentError("Text.filled: count < 0"))
        unit = TextView.of(ch)
        if unit.size() != 1:
            report(InvalidArgumentError("Text.filled: expected a single character"))
        return cls.from_bytes(unit.tobytes() * count)

    def __text_buffer__(self) -> bytearray:
        return self._data

    # Size and element access

    def __len__(self) -> int:
        return len(self._data)

    def length(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    @property
    def version(self) -> int:
        return self._version.version()

    def __getitem__(self, index: int) -> str:
        self._check_index(index, "operator[]", 0, len(self._data) - 1)
        return chr(self._data[index])

    def __setitem__(self, index: int, ch: TextLike) -> None:
        self._check_index(index, "operator[]", 0, len(self._data) - 1)
        unit = TextView.of(ch)
        if unit.size() != 1:
            report(InvalidArgumentError("Text.operator[]: expected a single character"))
        self._touch()
        self._data[index] = unit.tobytes()[0]

    # Search

    def contains(self, text: TextLike) -> bool:
        return TextView.of(text).tobytes() in self._data

    def __contains__(self, text: object) -> bool:
        return self.contains(text)  # type: ignore[arg-type]

    def find(self, text: TextLike, start: int = 0) -> int:
        """Index of the first match at or after ``start``, or -1."""

        if start < 0:
            report(
                TextIndexError(
                    "find",
                    start,
                    0,
                    len(self._data),
                    message="Text.find: Start index must be greater than or equal to zero.",
                )
            )
        return self._data.find(TextView.of(text).tobytes(), start)

    def find_from_back(self, text: TextLike, last_index: Optional[int] = None) -> int:
        """Index of the last match starting at or before ``last_index``, or -1."""

        if last_index is None:
            last_index = len(self._data)
        if last_index < 0:
            report(
                TextIndexError(
                    "find_from_back",
                    last_index,
                    0,
                    len(self._data),
                    message="Text.find_from_back: Last index must be greater than or equal to zero.",
                )
            )
        needle = TextView.of(text).tobytes()
        stop = min(last_index + len(needle), len(self._data))
        return self._data.rfind(needle, 0, stop)

    def starts_with(self, text: TextLike) -> bool:
        return self._data.startswith(TextView.of(text).tobytes())

    def ends_with(self, text: TextLike) -> bool:
        return self._data.endswith(TextView.of(text).tobytes())

    # Splicing

    def substr(self, start: int, length: Optional[int] = None) -> "Text":
        """Independent copy of up to ``length`` units from ``start``."""

        self._check_index(start, "substr", 0, len(self._data))
        if length is None:
            return Text.from_bytes(self._data[start:])
        if length < 0:
            report(InvalidArgumentError("Text.substr: Negative length."))
        return Text.from_bytes(self._data[start : start + length])

    def remove(self, index: int, length: int = 1) -> None:
        self._check_index(index, "remove", 0, len(self._data))
        if length < 0:
            report(InvalidArgumentError("Text.remove: Negative length."))
        self._touch()
        del self._data[index : index + length]

    def insert(self, index: int, text: TextLike) -> None:
        self._check_index(index, "insert", 0, len(self._data))
        payload = TextView.of(text).tobytes()
        self._touch()
        self._data[index:index] = payload

    def append(self, text: TextLike) -> "Text":
        payload = TextView.of(text).tobytes()
        self._touch()
        self._data.extend(payload)
        return self

    def assign(self, text: TextLike) -> "Text":
        """Replace the whole content."""

        payload = TextView.of(text).tobytes()
        self._touch()
        self._data[:] = payload
        return self

    def __iadd__(self, text: TextLike) -> "Text":
        return self.append(text)

    def __add__(self, other: object) -> "Text":
        view = _maybe_view(other)
        if view is None:
            return NotImplemented
        return Text.from_bytes(self._data + view.tobytes())

    def __radd__(self, other: object) -> "Text":
        view = _maybe_view(other)
        if view is None:
            return NotImplemented
        return Text.from_bytes(view.tobytes() + self._data)

    def copy(self) -> "Text":
        return Text.from_bytes(self._data)

    __copy__ = copy

    # Case conversion and trimming

    def to_upper_case(self) -> None:
        self._touch()
        self._data[:] = self._data.translate(UPPER_TABLE)

    def to_lower_case(self) -> None:
        self._touch()
        self._data[:] = self._data.translate(LOWER_TABLE)

    def as_upper_case(self) -> "Text":
        result = self.copy()
        result.to_upper_case()
        return result

    def as_lower_case(self) -> "Text":
        result = self.copy()
        result.to_lower_case()
        return result

    def trim(self) -> None:
        self._touch()
        self._data[:] = self._data.strip(WHITESPACE)

    def trim_front(self) -> None:
        self._touch()
        del self._data[: len(self._data) - len(self._data.lstrip(WHITESPACE))]

    def trim_back(self) -> None:
        self._touch()
        del self._data[len(self._data.rstrip(WHITESPACE)) :]

    def trimmed(self) -> "Text":
        result = self.copy()
        result.trim()
        return result

    def front_trimmed(self) -> "Text":
        result = self.copy()
        result.trim_front()
        return result

    def back_trimmed(self) -> "Text":
        result = self.copy()
        result.trim_back()
        return result

    # Replace, split, join

    def replace_all(self, text: TextLike, with_: TextLike) -> None:
        """Replace every occurrence of ``text``, skipping over inserted copies."""

        target = TextView.of(text).tobytes()
        if not target:
            report(InvalidArgumentError("Text.replace_all: Cannot replace the empty string."))
        replacement = TextView.of(with_).tobytes()

        with span(
            "text::replace_all",
            component="text",
            metadata={"length": len(self._data)},
        ) as handle:
            count = 0
            index = self._data.find(target)
            while index != -1:
                self._touch()
                self._data[index : index + len(target)] = replacement
                count += 1
                index = self._data.find(target, index + len(replacement))
            handle.add_metadata("replacements", count)

    def split(self, delimiter: TextLike) -> List["Text"]:
        """Chop at every ``delimiter``, dropping empty pieces.

        Leading, trailing and adjacent delimiters collapse, so
        ``",a,,b,"`` splits on ``","`` into ``["a", "b"]``.
        """

        needle = TextView.of(delimiter).tobytes()
        if not needle:
            report(InvalidArgumentError("Text.split: Delimiter cannot be the empty string."))

        with span(
            "text::split",
            component="text",
            metadata={"length": len(self._data)},
        ) as handle:
            data = bytes(self._data)
            pieces: List[Text] = []
            cursor = 0
            while True:
                index = data.find(needle, cursor)
                if index == -1:
                    break
                if index != cursor:
                    pieces.append(Text.from_bytes(data[cursor:index]))
                cursor = index + len(needle)
            if cursor < len(data):
                pieces.append(Text.from_bytes(data[cursor:]))
            handle.add_metadata("pieces", len(pieces))
            return pieces

    @staticmethod
    def join(items: Iterable[TextLike], delimiter: TextLike = "\n") -> "Text":
        """Concatenate ``items`` with ``delimiter`` strictly between them."""

        separator = TextView.of(delimiter).tobytes()
        with span("text::join", component="text"):
            return Text.from_bytes(
                separator.join(TextView.of(item).tobytes() for item in items)
            )

    # URL coding

    def url_decoded(self) -> "Text":
        with span("text::url_decoded", component="text"):
            data = self._data
            decoded = bytearray()
            index = 0
            while index < len(data):
                code = data[index]
                if code in UNRESERVED:
                    decoded.append(code)
                elif code == _PLUS:
                    decoded.append(_SPACE)
                elif code == _PERCENT:
                    digits = data[index + 1 : index + 3]
                    if len(digits) != 2 or not all(d in HEX_DIGITS for d in digits):
                        report(EncodingError("url_decoded: Invalid percent-encoding"))
                    decoded.append(int(digits, 16))
                    index += 2
                else:
                    report(
                        EncodingError(
                            f"url_decoded: Unexpected character in string: "
                            f"{code} ({chr(code)!r})"
                        )
                    )
                index += 1
            return Text.from_bytes(decoded)

    def url_encoded(self) -> "Text":
        with span("text::url_encoded", component="text"):
            encoded = bytearray()
            for code in self._data:
                if code in UNRESERVED:
                    encoded.append(code)
                elif code == _SPACE:
                    encoded.append(_PLUS)
                else:
                    encoded.extend(b"%%%02X" % code)
            return Text.from_bytes(encoded)

    # Cursors

    def begin(self) -> CheckedCursor:
        return CheckedCursor(self._version, self._data, 0)

    def end(self) -> CheckedCursor:
        return CheckedCursor(self._version, self._data, len(self._data))

    def __iter__(self) -> Iterator[str]:
        cursor, stop = self.begin(), self.end()
        while cursor != stop:
            yield cursor.get()
            cursor.increment()

    # Comparison and hashing

    def __eq__(self, other: object) -> bool:
        view = _maybe_view(other)
        if view is None:
            return NotImplemented
        return len(self._data) == view.size() and self._data == view.tobytes()

    def __lt__(self, other: object) -> bool:
        view = _maybe_view(other)
        if view is None:
            return NotImplemented
        return bytes(self._data) < view.tobytes()

    def __le__(self, other: object) -> bool:
        view = _maybe_view(other)
        if view is None:
            return NotImplemented
        return bytes(self._data) <= view.tobytes()

    def __gt__(self, other: object) -> bool:
        view = _maybe_view(other)
        if view is None:
            return NotImplemented
        return bytes(self._data) > view.tobytes()

    def __ge__(self, other: object) -> bool:
        view = _maybe_view(other)
        if view is None:
            return NotImplemented
        return bytes(self._data) >= view.tobytes()

    def __hash__(self) -> int:
        # Hashes track content; mutating a Text used as a key is the caller's problem.
        return hash_code(self)

    # Conversions

    @staticmethod
    def from_value(value: object) -> "Text":
        from checked_text.conversion import engine

        return engine.from_value(value)

    @staticmethod
    def to_value(type_tag: object, text: TextLike, radix: Optional[int] = None) -> object:
        from checked_text.conversion import engine

        return engine.to_value(type_tag, text, radix)

    @staticmethod
    def is_value(type_tag: object, text: TextLike, radix: Optional[int] = None) -> bool:
        from checked_text.conversion import engine

        return engine.is_value(type_tag, text, radix)

    # Export

    def as_bytes(self) -> bytes:
        return bytes(self._data)

    def as_str(self) -> str:
        return self._data.decode("latin-1")

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __str__(self) -> str:
        return self._data.decode("latin-1")

    def __repr__(self) -> str:
        return f"Text({self.as_str()!r})"

    # Internals

    def _touch(self) -> None:
        self._version.update()

    def _check_index(self, index: int, why: str, low: int, high: int) -> None:
        if not isinstance(index, int) or isinstance(index, bool):
            report(
                UnsupportedTypeError(
                    f"Text.{why}: indices must be integers, not {type(index).__name__}"
                )
            )
        if index < low or index > high:
            report(TextIndexError(why, index, low, high))


__all__ = ["Text"]
