from __future__ import annotations

import pytest

from checked_text import (
    InvalidArgumentError,
    Text,
    TextIndexError,
    UnsupportedTypeError,
    hash_code,
)


def test_construction_forms() -> None:
    assert Text() == ""
    assert Text().is_empty()
    assert Text("abc").length() == 3
    assert Text("x") == "x"
    assert Text(Text("copy")) == "copy"
    assert Text(b"a\x00b") == "a"
    assert len(Text.from_bytes(b"a\x00b")) == 3
    assert Text.filled(3, "x") == "xxx"
    assert Text.filled(0, "x") == ""


def test_filled_rejects_bad_arguments() -> None:
    with pytest.raises(InvalidArgumentError):
        Text.filled(-1, "x")
    with pytest.raises(InvalidArgumentError):
        Text.filled(2, "xy")


def test_write_then_read_back_advances_version() -> None:
    text = Text("hello")
    before = text.version

    text[1] = "a"

    assert text[1] == "a"
    assert text == "hallo"
    assert text.version > before


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_element_access_is_bounds_checked(index: int) -> None:
    text = Text("abc")

    with pytest.raises(TextIndexError) as excinfo:
        text[index]

    error = excinfo.value
    assert error.operation == "operator[]"
    assert (error.low, error.high) == (0, 2)
    assert str(error) == f"Text.operator[]: Index {index} is out of range [0 .. 2]"


def test_element_access_on_empty_text() -> None:
    with pytest.raises(IndexError):
        Text()[0]


def test_element_access_requires_integer_index() -> None:
    with pytest.raises(UnsupportedTypeError):
        Text("abc")["0"]  # type: ignore[index]


def test_element_write_requires_single_character() -> None:
    text = Text("abc")

    with pytest.raises(InvalidArgumentError):
        text[0] = "xy"


def test_search_operations() -> None:
    text = Text("hello world")

    assert text.contains("lo w")
    assert "world" in text
    assert not text.contains("World")
    assert text.find("o") == 4
    assert text.find("o", 5) == 7
    assert text.find("z") == -1
    assert text.find("o", 50) == -1
    assert text.find_from_back("o") == 7
    assert text.find_from_back("o", 6) == 4
    assert text.find_from_back("o", 3) == -1
    assert text.find_from_back("hello", 0) == 0
    assert text.starts_with("hell")
    assert text.ends_with(Text("world"))
    assert not text.ends_with("hello world!")


def test_negative_search_positions_raise() -> None:
    text = Text("abc")

    with pytest.raises(TextIndexError):
        text.find("a", -1)
    with pytest.raises(TextIndexError):
        text.find_from_back("a", -1)


def test_substr_clamps_and_validates() -> None:
    text = Text("hello")

    assert text.substr(1, 3) == "ell"
    assert text.substr(2) == "llo"
    assert text.substr(3, 100) == "lo"
    assert text.substr(5) == ""
    with pytest.raises(TextIndexError):
        text.substr(6)
    with pytest.raises(InvalidArgumentError):
        text.substr(0, -1)


def test_substr_returns_independent_text() -> None:
    text = Text("hello")
    piece = text.substr(0, 2)

    piece.append("!!")

    assert text == "hello"
    assert piece == "he!!"


def test_substr_spans_tile_the_original() -> None:
    text = Text("the quick brown fox")
    cuts = [0, 3, 4, 9, 19]

    pieces = [text.substr(a, b - a) for a, b in zip(cuts, cuts[1:])]

    assert Text.join(pieces, "") == text


def test_remove() -> None:
    text = Text("hello")
    text.remove(1)
    assert text == "hllo"

    text = Text("hello")
    text.remove(1, 2)
    assert text == "hlo"

    text = Text("hello")
    text.remove(3, 99)
    assert text == "hel"

    with pytest.raises(TextIndexError):
        Text("abc").remove(4)
    with pytest.raises(InvalidArgumentError):
        Text("abc").remove(0, -1)


def test_insert() -> None:
    text = Text("hd")
    text.insert(1, "ello worl")
    assert text == "hello world"

    text.insert(len(text), "!")
    assert text == "hello world!"

    with pytest.raises(TextIndexError) as excinfo:
        text.insert(-1, "x")
    assert excinfo.value.operation == "insert"


def test_insert_text_into_itself() -> None:
    text = Text("ab")

    text.insert(1, text)

    assert text == "aabb"


def test_concatenation() -> None:
    text = Text("foo")
    text += "bar"

    assert text == "foobar"
    assert text + "!" == "foobar!"
    combined = "<" + Text("tag")
    assert isinstance(combined, Text)
    assert combined == "<tag"
    with pytest.raises(TypeError):
        _ = Text("a") + 1  # type: ignore[operator]


def test_case_conversion_is_ascii_only() -> None:
    text = Text("Hello, World! \xe9")
    before = text.version

    assert text.as_upper_case() == "HELLO, WORLD! \xe9"
    assert text.as_lower_case() == "hello, world! \xe9"
    assert text == "Hello, World! \xe9"
    assert text.version == before

    text.to_upper_case()
    assert text == "HELLO, WORLD! \xe9"
    text.to_lower_case()
    assert text == "hello, world! \xe9"


def test_trim_variants() -> None:
    text = Text("  \t hi there \n\v ")

    assert text.trimmed() == "hi there"
    assert text.front_trimmed() == "hi there \n\v "
    assert text.back_trimmed() == "  \t hi there"

    text.trim_back()
    assert text == "  \t hi there"
    text.trim_front()
    assert text == "hi there"


def test_trim_everything() -> None:
    text = Text(" \r\n\f ")

    text.trim()

    assert text.is_empty()


def test_replace_all_does_not_rescan_replacements() -> None:
    text = Text("banana")

    text.replace_all("a", "aa")

    assert text == "baanaanaa"


@pytest.mark.parametrize(
    ("source", "target", "replacement", "expected"),
    [
        ("aaa", "a", "", ""),
        ("abab", "ab", "b", "bb"),
        ("one two one", "one", "1", "1 two 1"),
        ("nothing here", "zzz", "y", "nothing here"),
    ],
)
def test_replace_all_cases(
    source: str, target: str, replacement: str, expected: str
) -> None:
    text = Text(source)

    text.replace_all(target, replacement)

    assert text == expected


def test_replace_all_rejects_empty_target() -> None:
    with pytest.raises(InvalidArgumentError):
        Text("abc").replace_all("", "x")


def test_relational_operators_work_on_both_sides() -> None:
    assert Text("abc") == "abc"
    assert "abc" == Text("abc")
    assert Text("abc") != "abd"
    assert Text("abc") < "abd"
    assert "abc" < Text("abd")
    assert Text("ab") < Text("abc")
    assert Text("b") > "abc"
    assert Text("abc") <= "abc"
    assert Text("abc") >= b"abc"
    assert Text("\xff") > "a"
    assert Text("1") != 1


def test_hash_follows_content() -> None:
    table = {Text("key"): 1}

    assert table[Text("key")] == 1
    assert hash(Text("abc")) == hash_code("abc")


def test_data_export() -> None:
    text = Text("caf\xe9")

    assert text.as_bytes() == b"caf\xe9"
    assert bytes(text) == b"caf\xe9"
    assert text.as_str() == "caf\xe9"
    assert str(text) == "caf\xe9"
    assert repr(Text("hi")) == "Text('hi')"
