"""Tests for preformatted blocks that are never closed.

An unterminated block fails the whole parse, and the error points at the
opening fence rather than at the end of input.
"""

import pytest

from tejat import ParseConfig, parse, parse_config_context
from tejat.errors import ErrorKind, FatalParseError, ParseError


class TestUnterminatedPreformatted:
    def test_error_located_at_opening_fence(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("# ok\n```banner\nart\n")
        err = exc_info.value
        assert isinstance(err, FatalParseError)
        assert (err.lineno, err.col_offset) == (2, 1)
        assert err.kind is ErrorKind.CONTEXT
        assert err.detail == "a preformatted block"
        assert err.snippet == "```banner\nart\n"

    def test_root_cause_is_missing_fence_at_eof(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("# ok\n```banner\nart\n")
        root = exc_info.value.root_cause
        assert root.kind is ErrorKind.EXPECTED_LITERAL
        assert root.detail == "```"
        assert (root.lineno, root.col_offset) == (4, 1)
        assert root.snippet == ""

    @pytest.mark.parametrize(
        "source",
        ["```", "```\n", "```alt", "```\nline", "```\nline\n``", "```\n ```\n"],
    )
    def test_unterminated_variants(self, source: str) -> None:
        with pytest.raises(FatalParseError):
            parse(source)

    def test_no_partial_result(self) -> None:
        lines: list = []
        with pytest.raises(ParseError):
            lines = parse("one\ntwo\n```\nthree")
        assert lines == []

    def test_truncated_prefix_parses(self) -> None:
        source = "one\ntwo\n```\nthree"
        with pytest.raises(ParseError) as exc_info:
            parse(source)
        prefix_end = len("one\ntwo\n")
        assert exc_info.value.lineno == 3
        assert len(parse(source[:prefix_end])) == 2

    def test_snippet_length_follows_config(self) -> None:
        with parse_config_context(ParseConfig(snippet_length=3)):
            with pytest.raises(ParseError) as exc_info:
                parse("```banner\nart")
        assert exc_info.value.snippet == "```"

    def test_message_lists_chain_innermost_last(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("```\nart", source_file="art.gmi")
        lines = str(exc_info.value).splitlines()
        assert lines[0] == "art.gmi:1:1 ('```\\nart'): expected a preformatted block"
        assert lines[1] == "  caused by art.gmi:2:4 (''): expected '```'"
