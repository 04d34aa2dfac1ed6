"""Property-based tests for lexer invariants using Hypothesis.

These properties hold for any input: a successful parse accounts for every
character, records never straddle lines (except preformatted blocks), and
the only way to fail is an unterminated preformatted block.
"""

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from tejat import parse
from tejat.errors import ErrorKind, FatalParseError, ParseError
from tejat.nodes import Heading, Preformatted
from tejat.renderers.gemtext import render_line

# Characters that drive classification, plus some ordinary text
GEMTEXT_ALPHABET = "#=>*` \t\r\nab/:."


def _parse_or_none(source: str):
    try:
        return parse(source)
    except FatalParseError:
        return None


class TestTotalCoverage:
    """Consumed spans tile the source exactly."""

    @given(st.text(alphabet=GEMTEXT_ALPHABET, max_size=300))
    @settings(max_examples=300)
    def test_spans_concatenate_to_source(self, source: str) -> None:
        lines = _parse_or_none(source)
        assume(lines is not None)

        assert "".join(line.location.slice(source) for line in lines) == source

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_spans_are_contiguous(self, source: str) -> None:
        lines = _parse_or_none(source)
        assume(lines is not None)

        offset = 0
        for line in lines:
            assert line.location.offset == offset
            assert line.location.end_offset > offset
            offset = line.location.end_offset
        assert offset == len(source)


class TestLineShape:
    @given(st.text(alphabet=GEMTEXT_ALPHABET, max_size=300))
    @settings(max_examples=200)
    def test_only_preformatted_text_spans_lines(self, source: str) -> None:
        lines = _parse_or_none(source)
        assume(lines is not None)

        for line in lines:
            if isinstance(line, Preformatted):
                continue
            for value in (getattr(line, "text", None), getattr(line, "alt_text", None)):
                if value is not None:
                    assert "\n" not in str(value)

    @given(st.text(alphabet=GEMTEXT_ALPHABET.replace("`", ""), max_size=300))
    @settings(max_examples=200)
    def test_without_fences_parse_never_fails(self, source: str) -> None:
        lines = parse(source)
        expected = source.count("\n") + 1
        if source == "" or source.endswith("\n"):
            expected -= 1
        assert len(lines) == expected

    @given(st.text(alphabet=GEMTEXT_ALPHABET, max_size=200))
    @settings(max_examples=200)
    def test_failures_are_unterminated_blocks(self, source: str) -> None:
        try:
            parse(source)
        except ParseError as e:
            assert isinstance(e, FatalParseError)
            assert e.detail == "a preformatted block"
            assert e.root_cause.kind is ErrorKind.EXPECTED_LITERAL


class TestDeterminism:
    @given(st.text(max_size=200))
    @settings(max_examples=50)
    def test_repeated_parse_identical(self, source: str) -> None:
        assert _parse_or_none(source) == _parse_or_none(source)


class TestRoundTrip:
    @given(
        st.sampled_from([1, 2, 3]),
        st.text(alphabet=GEMTEXT_ALPHABET, max_size=40),
    )
    @settings(max_examples=100)
    def test_heading_rendering_reparses(self, level: int, text: str) -> None:
        try:
            heading = Heading(level, text)
        except ValueError:
            assert "\n" in text or text.startswith((" ", "\t"))
            return
        assert parse(render_line(heading)) == [heading]
