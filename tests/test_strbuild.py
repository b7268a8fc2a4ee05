import pytest

from solong.strbuild import (
    split,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strtrim,
    substr,
)


def test_split_skips_repeated_separators():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_empty_and_only_separators():
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_split_without_separator_gives_whole_string():
    assert split("abc", ",") == ["abc"]


@pytest.mark.parametrize("text", ["a,b,,c", ",x,", "no-commas", ",,lead", "trail,,"])
def test_split_pieces_rejoin_to_text_without_separators(text):
    pieces = split(text, ",")
    assert "".join(pieces) == text.replace(",", "")
    assert all(piece and "," not in piece for piece in pieces)


def test_split_rejects_multi_char_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strdup_equal_copy():
    text = "so long"
    assert strdup(text) == text
    assert strdup("") == ""


def test_striteri_replaces_in_place():
    chars = list("abc")
    striteri(chars, lambda i, ch: ch.upper() if i % 2 == 0 else None)
    assert chars == ["A", "b", "C"]


def test_striteri_sees_indices_in_order():
    seen = []
    chars = list("xyz")
    striteri(chars, lambda i, ch: seen.append((i, ch)))
    assert seen == [(0, "x"), (1, "y"), (2, "z")]
    assert chars == ["x", "y", "z"]


def test_strjoin_concatenates():
    assert strjoin("so_", "long") == "so_long"
    assert strjoin("", "") == ""


def test_strlcat_fits():
    result, length = strlcat("ab", "cd", 10)
    assert result == "abcd"
    assert length == len("ab") + len("cd")


def test_strlcat_truncates_to_size_minus_one():
    result, length = strlcat("ab", "cdef", 4)
    assert result == "abc"
    assert length == len("ab") + len("cdef")


def test_strlcat_size_not_above_dst_length():
    result, length = strlcat("abcd", "xy", 2)
    assert result == "abcd"
    assert length == len("xy") + 2


@pytest.mark.parametrize("size", range(0, 12))
def test_strlcat_invariants(size):
    dst, src = "hello", "world"
    result, _ = strlcat(dst, src, size)
    assert result.startswith(dst)
    if size > len(dst):
        assert len(result) <= size - 1
        assert (dst + src).startswith(result)


def test_strlcat_negative_size():
    with pytest.raises(ValueError):
        strlcat("a", "b", -1)


def test_strlcpy_full_and_truncated():
    assert strlcpy("hello", 10) == ("hello", 5)
    copied, length = strlcpy("hello", 3)
    assert copied == "he"
    assert length == len("hello")


def test_strlcpy_size_zero_copies_nothing():
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("x", -2)


def test_strmapi_builds_from_index_and_char():
    assert strmapi("abcd", lambda i, ch: ch.upper() if i < 2 else ch) == "ABcd"
    assert strmapi("", lambda i, ch: ch) == ""


def test_strmapi_preserves_length():
    text = "zeytin"
    assert len(strmapi(text, lambda i, ch: "*")) == len(text)


def test_strtrim_removes_set_from_both_ends():
    assert strtrim("xxhixyx", "xy") == "hi"
    assert strtrim("map\n", "\n") == "map"


def test_strtrim_all_trimmed_and_empty_set():
    assert strtrim("aaaa", "a") == ""
    assert strtrim(" keep ", "") == " keep "


def test_substr_within_and_past_end():
    assert substr("so_long", 3, 4) == "long"
    assert substr("so_long", 3, 100) == "long"
    assert substr("so_long", 7, 2) == ""
    assert substr("so_long", 50, 2) == ""


def test_substr_negative_arguments():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(ValueError):
        substr("abc", 0, -1)