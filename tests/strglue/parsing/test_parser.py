"""Tests for the block parser."""

import pytest

from strglue.errors import ParseError
from strglue.parsing.models import ExpressionSegment, LiteralSegment, Template
from strglue.parsing.parser import parse_template, unparse


class TestParseTemplate:
    """Tests for parse_template."""

    def test_literal_only(self):
        """Test that text without blocks is a single literal."""
        segments = parse_template("just text")
        assert segments == [LiteralSegment(text="just text", raw="just text")]

    def test_empty_template(self):
        """Test that an empty template has no segments."""
        assert parse_template("") == []

    def test_expression_segments(self):
        """Test literal and expression segments in order."""
        segments = parse_template("My name is {name}.")
        assert segments == [
            LiteralSegment(text="My name is ", raw="My name is "),
            ExpressionSegment(text="name", start=11, end=17),
            LiteralSegment(text=".", raw="."),
        ]

    def test_adjacent_expressions(self):
        """Test two blocks with no literal between them."""
        segments = parse_template("{a}{b}")
        assert [s.text for s in segments] == ["a", "b"]
        assert all(isinstance(s, ExpressionSegment) for s in segments)

    def test_escapes_coalesce_into_literal(self):
        """Test that escaped delimiters merge with surrounding text."""
        segments = parse_template("not {{name}} here")
        assert segments == [
            LiteralSegment(text="not {name} here", raw="not {{name}} here")
        ]

    def test_nested_block_preserved(self):
        """Test that nested blocks are kept verbatim in the expression text."""
        segments = parse_template("{blue 1 + 1 = {1 + 1}}")
        assert segments == [
            ExpressionSegment(text="blue 1 + 1 = {1 + 1}", start=0, end=22)
        ]

    def test_trailing_text_after_last_block(self):
        """Test that content after the final block is literal."""
        segments = parse_template("{x} and more")
        assert segments[-1] == LiteralSegment(text=" and more", raw=" and more")

    def test_custom_delimiters(self):
        """Test parsing with alternative delimiters."""
        segments = parse_template(
            "$e^{2\\pi i}$ is $<<one>>$", open_delimiter="<<", close_delimiter=">>"
        )
        assert [type(s).__name__ for s in segments] == [
            "LiteralSegment",
            "ExpressionSegment",
            "LiteralSegment",
        ]
        assert segments[1].text == "one"

    def test_empty_expression_raises(self):
        """Test that '{}' is a parse error."""
        with pytest.raises(ParseError) as exc_info:
            parse_template("a {} b")
        assert exc_info.value.offset == 2
        assert "empty" in str(exc_info.value).lower()

    def test_whitespace_expression_raises(self):
        """Test that a whitespace-only block is a parse error."""
        with pytest.raises(ParseError):
            parse_template("{   }")

    def test_unclosed_raises(self):
        """Test that an unterminated block references the open offset."""
        with pytest.raises(ParseError) as exc_info:
            parse_template("{unclosed")
        assert exc_info.value.offset == 0


class TestUnparse:
    """Tests for reconstructing templates from segments."""

    @pytest.mark.parametrize(
        "text",
        [
            "plain",
            "My name is {name}, not {{name}}.",
            "{ {'}': 1}['}'] } }} {{",
            "multi\n  {x # comment }\n}\nline",
        ],
    )
    def test_round_trip(self, text):
        """Test that unparse reproduces the original text byte for byte."""
        assert unparse(parse_template(text)) == text

    def test_round_trip_custom_delimiters(self):
        """Test round trip with alternative delimiters."""
        text = "a <<x>> <<<<b"
        segments = parse_template(text, open_delimiter="<<", close_delimiter=">>")
        assert unparse(segments, "<<", ">>") == text


class TestTemplateModel:
    """Tests for the Template model."""

    def test_parse_uses_settings(self):
        """Test that Template.parse honours its delimiters."""
        template = Template(text="[[x]] {y}", open_delimiter="[[", close_delimiter="]]")
        segments = template.parse()
        assert segments[0] == ExpressionSegment(text="x", start=0, end=5)
        assert segments[1].text == " {y}"

    def test_template_is_frozen(self):
        """Test that templates are immutable."""
        template = Template(text="x")
        with pytest.raises(Exception):
            template.text = "y"
