"""Template parsing: scanning, block parsing and whitespace trimming."""

from strglue.parsing.models import (
    ExpressionSegment,
    LiteralSegment,
    Segment,
    Span,
    SpanKind,
    Template,
)
from strglue.parsing.parser import parse_template, unparse
from strglue.parsing.scanner import Scanner, rfind_top_level
from strglue.parsing.trim import trim

__all__ = [
    # Models
    "Template",
    "Segment",
    "LiteralSegment",
    "ExpressionSegment",
    "Span",
    "SpanKind",
    # Scanning and parsing
    "Scanner",
    "rfind_top_level",
    "parse_template",
    "unparse",
    "trim",
]
