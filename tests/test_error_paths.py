"""Error-path and malformed input tests.

Exercises ParseError construction, layering and formatting, plus the
failures the public API can raise. The unterminated preformatted block is
the only way a whole document can fail to parse; see
lexer/test_unterminated_blocks.py for its locations.
"""

import pickle

import pytest

from tejat import Heading, Link, parse
from tejat.errors import ErrorKind, FatalParseError, ParseError, TejatError, UrlError
from tejat.lexer.cursor import Cursor

# =========================================================================
# ParseError construction and formatting
# =========================================================================


class TestParseErrorFormatting:
    """Verify ParseError produces well-formatted messages."""

    def test_single_error(self) -> None:
        err = ParseError(ErrorKind.EXPECTED_LITERAL, "=>", lineno=3, col_offset=1, snippet="# x")
        assert str(err) == "3:1 ('# x'): expected '=>'"

    def test_with_source_file(self) -> None:
        err = ParseError(
            ErrorKind.EXPECTED_END_OF_INPUT,
            lineno=1,
            col_offset=4,
            snippet=" def",
            source_file="page.gmi",
        )
        assert str(err) == "page.gmi:1:4 (' def'): expected end of input"

    @pytest.mark.parametrize(
        "kind,detail,message",
        [
            (ErrorKind.CONTEXT, "a link line", "expected a link line"),
            (ErrorKind.EXPECTED_END_OF_INPUT, None, "expected end of input"),
            (ErrorKind.EXPECTED_LINE_END, None, "expected the end of the line"),
            (
                ErrorKind.EXPECTED_WHITESPACE,
                None,
                "expected one or more whitespace characters",
            ),
            (ErrorKind.EXPECTED_LITERAL, "```", "expected '```'"),
            (ErrorKind.INTERNAL, "empty token", "internal parser error: empty token"),
            (ErrorKind.INVALID_URL, "empty host", "invalid URL: empty host"),
        ],
    )
    def test_kind_messages(self, kind: ErrorKind, detail, message: str) -> None:
        err = ParseError(kind, detail, lineno=1, col_offset=1)
        assert err.message == message

    def test_chain_is_printed_innermost_last(self) -> None:
        inner = ParseError(ErrorKind.EXPECTED_LINE_END, lineno=1, col_offset=5, snippet="\rb")
        outer = ParseError(
            ErrorKind.CONTEXT, "a link line", lineno=1, col_offset=1, snippet="=> a\rb", previous=inner
        )
        assert str(outer).splitlines() == [
            "1:1 ('=> a\\rb'): expected a link line",
            "  caused by 1:5 ('\\rb'): expected the end of the line",
        ]

    def test_is_tejat_error(self) -> None:
        err = ParseError(ErrorKind.INTERNAL, "x", lineno=1, col_offset=1)
        assert isinstance(err, TejatError)


# =========================================================================
# Layering
# =========================================================================


class TestParseErrorLayering:
    def _error(self) -> ParseError:
        cursor = Cursor("=> a\rb")
        inner = ParseError.at(cursor.advance(4), ErrorKind.EXPECTED_LINE_END)
        return inner.with_context(cursor, "a link line")

    def test_at_reads_cursor(self) -> None:
        err = ParseError.at(Cursor("ab\ncd", source_file="x.gmi").advance(4), ErrorKind.INTERNAL, "x")
        assert (err.lineno, err.col_offset) == (2, 2)
        assert err.snippet == "d"
        assert err.source_file == "x.gmi"

    def test_chain_outermost_first(self) -> None:
        kinds = [e.kind for e in self._error().chain()]
        assert kinds == [ErrorKind.CONTEXT, ErrorKind.EXPECTED_LINE_END]

    def test_root_cause(self) -> None:
        err = self._error()
        assert err.root_cause.kind is ErrorKind.EXPECTED_LINE_END
        assert err.root_cause.root_cause is err.root_cause

    def test_previous_is_exception_cause(self) -> None:
        err = self._error()
        assert err.__cause__ is err.previous

    def test_with_context_keeps_fatal_class(self) -> None:
        fatal = ParseError.at(Cursor("x"), ErrorKind.EXPECTED_LITERAL, "```").commit()
        wrapped = fatal.with_context(Cursor("x"), "a preformatted block")
        assert isinstance(wrapped, FatalParseError)

    def test_commit(self) -> None:
        err = self._error()
        fatal = err.commit()
        assert isinstance(fatal, FatalParseError)
        assert fatal == err
        assert fatal.commit() is fatal

    def test_equality_and_hash(self) -> None:
        assert self._error() == self._error()
        assert hash(self._error()) == hash(self._error())
        assert self._error() != self._error().root_cause

    def test_pickle_round_trip(self) -> None:
        err = self._error().commit()
        restored = pickle.loads(pickle.dumps(err))
        assert type(restored) is FatalParseError
        assert restored == err
        assert str(restored) == str(err)


# =========================================================================
# Public API failures
# =========================================================================


class TestApiErrors:
    def test_no_partial_result(self) -> None:
        with pytest.raises(FatalParseError):
            parse("# fine\n* fine\n```\nunterminated")

    def test_source_file_in_message(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("```", source_file="doc.gmi")
        assert str(exc_info.value).startswith("doc.gmi:1:1 ")

    def test_from_string_wrong_type(self) -> None:
        with pytest.raises(ParseError):
            Link.from_string("# heading")

    def test_from_string_empty(self) -> None:
        with pytest.raises(ParseError):
            Heading.from_string("")

    def test_heading_level_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="heading level"):
            Heading(4, "too deep")

    def test_record_text_type_checked(self) -> None:
        with pytest.raises(TypeError):
            Heading(1, 42)  # type: ignore[arg-type]


class TestUrlError:
    def test_message(self) -> None:
        err = UrlError("empty host", "https://")
        assert str(err) == "empty host: 'https://'"
        assert err.reason == "empty host"
        assert err.url == "https://"

    def test_without_url(self) -> None:
        assert str(UrlError("bad")) == "bad"

    def test_is_value_error(self) -> None:
        assert isinstance(UrlError("x"), ValueError)
        assert isinstance(UrlError("x"), TejatError)
