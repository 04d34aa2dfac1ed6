"""Tests for the SourceText handle."""

import pytest

from tejat.text import SourceText, as_text


class TestBorrowed:
    def test_denotes_span(self) -> None:
        text = SourceText.borrowed("# Hello", 2, 7)
        assert str(text) == "Hello"
        assert text.is_borrowed
        assert text.span == (2, 7)
        assert len(text) == 5

    def test_empty_span(self) -> None:
        text = SourceText.borrowed("abc", 1, 1)
        assert text == ""
        assert not text

    @pytest.mark.parametrize("start,end", [(-1, 2), (2, 1), (0, 4)])
    def test_out_of_range(self, start: int, end: int) -> None:
        with pytest.raises(ValueError, match="out of range"):
            SourceText.borrowed("abc", start, end)

    def test_to_owned_detaches(self) -> None:
        text = SourceText.borrowed("# Hello", 2, 7).to_owned()
        assert not text.is_borrowed
        assert text.span == (0, 5)
        assert text == "Hello"


class TestOwned:
    def test_owned(self) -> None:
        text = SourceText.owned("value")
        assert not text.is_borrowed
        assert text.to_owned() is text


class TestStringBehaviour:
    """Handles behave like the string they denote."""

    def test_equality_with_str(self) -> None:
        assert SourceText.borrowed("xabcx", 1, 4) == "abc"
        assert "abc" == SourceText.owned("abc")
        assert SourceText.owned("abc") != "abd"

    def test_borrowed_equals_owned(self) -> None:
        assert SourceText.borrowed("xabcx", 1, 4) == SourceText.owned("abc")

    def test_not_equal_to_other_types(self) -> None:
        assert SourceText.owned("1") != 1

    def test_hash_matches_str(self) -> None:
        text = SourceText.borrowed("xabcx", 1, 4)
        assert hash(text) == hash("abc")
        assert {text: 1}["abc"] == 1

    def test_repr_is_string_repr(self) -> None:
        assert repr(SourceText.owned("a'b")) == repr("a'b")

    def test_startswith_and_endswith_stay_in_span(self) -> None:
        text = SourceText.borrowed("# Hi\r\n", 2, 5)
        assert text.startswith("Hi")
        assert not text.startswith("#")
        assert text.endswith("\r")
        assert not text.endswith("\n")

    def test_contains_stays_in_span(self) -> None:
        text = SourceText.borrowed("needle|hay", 7, 10)
        assert "hay" in text
        assert "needle" not in text

    def test_format(self) -> None:
        assert f"[{SourceText.borrowed('# Hi', 2, 4)}]" == "[Hi]"


class TestAsText:
    def test_str_becomes_owned(self) -> None:
        assert not as_text("x").is_borrowed

    def test_handle_passes_through(self) -> None:
        text = SourceText.borrowed("x", 0, 1)
        assert as_text(text) is text

    def test_rejects_other_types(self) -> None:
        with pytest.raises(TypeError, match="str or SourceText"):
            as_text(b"bytes")  # type: ignore[arg-type]
