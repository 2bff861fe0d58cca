"""Minimal formatted read/write between ``Text`` and file-like streams.

Text streams exchange ``str`` (latin-1 mapped), binary streams exchange
``bytes``; the helpers detect which one they were handed from what ``read``
returns.
"""

from __future__ import annotations

from typing import IO, Any

from .chars import WHITESPACE
from .text import Text


def _as_bytes(chunk: Any) -> bytes:
    if isinstance(chunk, str):
        return chunk.encode("latin-1")
    return bytes(chunk)


def write_text(stream: IO[Any], text: Text) -> None:
    if _is_binary(stream):
        stream.write(text.as_bytes())
    else:
        stream.write(text.as_str())


def read_token(stream: IO[Any], text: Text) -> bool:
    """Read one whitespace-delimited token into ``text``.

    Leading whitespace is skipped and the delimiter that ends the token is
    consumed. Returns ``False`` (leaving ``text`` alone) when the stream runs
    out before a token starts.
    """

    token = bytearray()
    while True:
        chunk = _as_bytes(stream.read(1))
        if not chunk:
            break
        if chunk[0] in WHITESPACE:
            if token:
                break
            continue
        token.extend(chunk)

    if not token:
        return False
    text.assign(Text.from_bytes(token))
    return True


def read_line(stream: IO[Any], text: Text) -> bool:
    """Read one line, without its line terminator, into ``text``."""

    line = _as_bytes(stream.readline())
    if not line:
        return False
    if line.endswith(b"\n"):
        line = line[:-1]
    text.assign(Text.from_bytes(line))
    return True


def _is_binary(stream: IO[Any]) -> bool:
    mode = getattr(stream, "mode", None)
    if isinstance(mode, str):
        return "b" in mode
    return not hasattr(stream, "encoding")


__all__ = ["write_text", "read_token", "read_line"]
