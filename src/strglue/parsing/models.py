"""Pydantic models for parsed templates."""

from enum import Enum
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field


class SpanKind(str, Enum):
    """Classification of a scanned region of template text."""

    PLAIN = "plain"
    OPEN = "open"
    CLOSE = "close"
    ESCAPED_OPEN = "escaped_open"
    ESCAPED_CLOSE = "escaped_close"


class Span(BaseModel):
    """A classified region of template text, ``text[start:end]``."""

    model_config = ConfigDict(frozen=True)

    kind: SpanKind = Field(..., description="Classification of the region")
    start: int = Field(..., description="Offset of the first character")
    end: int = Field(..., description="Offset just past the last character")


class LiteralSegment(BaseModel):
    """Literal text copied to every output row."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Output text with escaped delimiters resolved")
    raw: str = Field(..., description="Exact source text, escapes still doubled")


class ExpressionSegment(BaseModel):
    """An expression block to be passed through the transformer."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Source text between the delimiters")
    start: int = Field(..., description="Offset of the open delimiter")
    end: int = Field(..., description="Offset just past the close delimiter")


Segment = Union[LiteralSegment, ExpressionSegment]


class Template(BaseModel):
    """Immutable template text plus the settings needed to parse it."""

    model_config = ConfigDict(frozen=True)

    text: str
    open_delimiter: str = "{"
    close_delimiter: str = "}"
    literal: bool = False
    comment: str = "#"

    def parse(self) -> List[Segment]:
        """Parse the template into its ordered segments."""
        from strglue.parsing.parser import parse_template

        return parse_template(
            self.text,
            open_delimiter=self.open_delimiter,
            close_delimiter=self.close_delimiter,
            literal=self.literal,
            comment=self.comment,
        )
