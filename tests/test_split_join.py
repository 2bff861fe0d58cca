from __future__ import annotations

import pytest

from checked_text import InvalidArgumentError, Text


def as_strings(pieces: list[Text]) -> list[str]:
    return [str(piece) for piece in pieces]


def test_split_then_join_round_trips_simple_input() -> None:
    text = Text("a,b,c")

    pieces = text.split(",")

    assert as_strings(pieces) == ["a", "b", "c"]
    assert Text.join(pieces, ",") == "a,b,c"


def test_split_coalesces_empty_segments() -> None:
    assert as_strings(Text(",a,,b,").split(",")) == ["a", "b"]
    assert as_strings(Text(",,,").split(",")) == []


def test_split_with_multi_character_delimiter() -> None:
    pieces = Text("a::b::::c").split("::")

    assert as_strings(pieces) == ["a", "b", "c"]


def test_split_without_delimiter_occurrence() -> None:
    assert as_strings(Text("abc").split(",")) == ["abc"]
    assert Text().split(",") == []


def test_split_pieces_are_independent() -> None:
    text = Text("x y")
    pieces = text.split(" ")

    pieces[0].append("!")

    assert all(isinstance(piece, Text) for piece in pieces)
    assert text == "x y"
    assert pieces[0] == "x!"


def test_split_rejects_empty_delimiter() -> None:
    with pytest.raises(InvalidArgumentError):
        Text("abc").split("")


def test_split_handles_long_input() -> None:
    text = Text(",".join(["word"] * 20000))

    pieces = text.split(",")

    assert len(pieces) == 20000
    assert pieces[-1] == "word"


def test_join_places_delimiter_between_items_only() -> None:
    assert Text.join(["a", Text("b"), b"c"], ", ") == "a, b, c"
    assert Text.join(["solo"], ", ") == "solo"
    assert Text.join([], ", ") == ""


def test_join_defaults_to_newline() -> None:
    assert Text.join(["first", "second"]) == "first\nsecond"
