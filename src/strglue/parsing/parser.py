"""Block parser turning scanned spans into template segments."""

from typing import List

from strglue.errors import ParseError
from strglue.parsing.models import ExpressionSegment, LiteralSegment, Segment, SpanKind
from strglue.parsing.scanner import Scanner


def parse_template(
    text: str,
    open_delimiter: str = "{",
    close_delimiter: str = "}",
    literal: bool = False,
    comment: str = "#",
) -> List[Segment]:
    """Parse template text into an ordered list of segments.

    Adjacent plain text and escaped delimiters are coalesced into a single
    LiteralSegment. Each delimited block becomes an ExpressionSegment whose
    text is everything between the outermost delimiters, nested blocks
    included verbatim.

    Args:
        text: The template text.
        open_delimiter: String that opens an expression block.
        close_delimiter: String that closes an expression block.
        literal: Treat quotes and comments inside expressions as plain characters.
        comment: Comment character of the expression language.

    Returns:
        The segments in output order.

    Raises:
        ParseError: If a block is unterminated or empty.

    Example:
        >>> segments = parse_template("Hello {name}!")
        >>> [type(s).__name__ for s in segments]
        ['LiteralSegment', 'ExpressionSegment', 'LiteralSegment']
    """
    scanner = Scanner(open_delimiter, close_delimiter, literal=literal, comment=comment)
    spans = scanner.scan(text)

    segments: List[Segment] = []
    literal_text: List[str] = []
    literal_raw: List[str] = []
    open_at = -1
    body = ""

    def flush_literal() -> None:
        if literal_raw:
            segments.append(
                LiteralSegment(text="".join(literal_text), raw="".join(literal_raw))
            )
            literal_text.clear()
            literal_raw.clear()

    for span in spans:
        source = text[span.start : span.end]

        if span.kind == SpanKind.OPEN:
            flush_literal()
            open_at = span.start
            body = ""
        elif span.kind == SpanKind.CLOSE:
            if not body.strip():
                raise ParseError(
                    f"Empty expression at offset {open_at}", offset=open_at
                )
            segments.append(ExpressionSegment(text=body, start=open_at, end=span.end))
            open_at = -1
        elif span.kind == SpanKind.PLAIN and open_at >= 0:
            body = source
        elif span.kind == SpanKind.ESCAPED_OPEN:
            literal_text.append(open_delimiter)
            literal_raw.append(source)
        elif span.kind == SpanKind.ESCAPED_CLOSE:
            literal_text.append(close_delimiter)
            literal_raw.append(source)
        else:
            literal_text.append(source)
            literal_raw.append(source)

    flush_literal()
    return segments


def unparse(
    segments: List[Segment], open_delimiter: str = "{", close_delimiter: str = "}"
) -> str:
    """Reconstruct the source text of a parsed template.

    ``unparse(parse_template(text))`` returns ``text`` unchanged.
    """
    parts: List[str] = []
    for segment in segments:
        if isinstance(segment, LiteralSegment):
            parts.append(segment.raw)
        else:
            parts.append(f"{open_delimiter}{segment.text}{close_delimiter}")
    return "".join(parts)
