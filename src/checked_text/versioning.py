"""Mutation versioning and the checked cursors built on it.

A ``VersionTracker`` counts structural mutations of one buffer. A
``CheckedCursor`` remembers the version it was issued under and refuses to do
anything once the tracker has moved on.
"""

from __future__ import annotations

from typing import Union

from .errors import InvalidArgumentError, InvalidatedCursorError, TextIndexError, report


class VersionTracker:
    __slots__ = ("_version",)

    def __init__(self, initial: int = 0) -> None:
        self._version = initial

    def version(self) -> int:
        return self._version

    def update(self) -> int:
        self._version += 1
        return self._version

    def __repr__(self) -> str:
        return f"VersionTracker(version={self._version})"


class CheckedCursor:
    """Position in a buffer, valid only while the buffer's version is unchanged."""

    __slots__ = ("_tracker", "_buffer", "_position", "_captured")

    def __init__(self, tracker: VersionTracker, buffer: bytearray, position: int) -> None:
        self._tracker = tracker
        self._buffer = buffer
        self._position = position
        self._captured = tracker.version()

    @property
    def position(self) -> int:
        self._check()
        return self._position

    @property
    def captured_version(self) -> int:
        return self._captured

    def is_valid(self) -> bool:
        return self._tracker.version() == self._captured

    def get(self) -> str:
        self._check()
        if not 0 <= self._position < len(self._buffer):
            report(
                TextIndexError(
                    "cursor", self._position, 0, len(self._buffer) - 1
                )
            )
        return chr(self._buffer[self._position])

    def increment(self, steps: int = 1) -> "CheckedCursor":
        self._check()
        self._position += steps
        return self

    def decrement(self, steps: int = 1) -> "CheckedCursor":
        self._check()
        self._position -= steps
        return self

    def __add__(self, steps: int) -> "CheckedCursor":
        self._check()
        return self._moved(self._position + steps)

    def __sub__(self, other: Union[int, "CheckedCursor"]) -> Union[int, "CheckedCursor"]:
        self._check()
        if isinstance(other, CheckedCursor):
            self._check_peer(other)
            return self._position - other._position
        return self._moved(self._position - other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CheckedCursor):
            return NotImplemented
        self._check_peer(other)
        return self._position == other._position

    def __lt__(self, other: "CheckedCursor") -> bool:
        self._check_peer(other)
        return self._position < other._position

    def __le__(self, other: "CheckedCursor") -> bool:
        self._check_peer(other)
        return self._position <= other._position

    def __gt__(self, other: "CheckedCursor") -> bool:
        self._check_peer(other)
        return self._position > other._position

    def __ge__(self, other: "CheckedCursor") -> bool:
        self._check_peer(other)
        return self._position >= other._position

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        state = "valid" if self.is_valid() else "stale"
        return f"CheckedCursor(position={self._position}, {state})"

    def _moved(self, position: int) -> "CheckedCursor":
        cursor = CheckedCursor(self._tracker, self._buffer, position)
        cursor._captured = self._captured
        return cursor

    def _check(self) -> None:
        current = self._tracker.version()
        if current != self._captured:
            report(InvalidatedCursorError(self._captured, current))

    def _check_peer(self, other: "CheckedCursor") -> None:
        if not isinstance(other, CheckedCursor):
            report(InvalidArgumentError("Cursors can only be compared with cursors."))
        if other._buffer is not self._buffer:
            report(InvalidArgumentError("Cursors belong to different texts."))
        self._check()
        other._check()


__all__ = ["VersionTracker", "CheckedCursor"]
