"""Delimiter scanner for template text.

The scanner classifies template text into spans: plain text, open and
close delimiters, and doubled (escaped) delimiters. Inside an expression
block it tracks delimiter depth and skips over Python string literals,
backtick-quoted spans and comments, so that a close delimiter appearing
inside ``'}'`` or after ``#`` does not end the block early.
"""

from typing import List

from strglue.errors import ParseError
from strglue.parsing.models import Span, SpanKind

QUOTE_CHARS = "'\"`"
BRACKET_PAIRS = {"(": ")", "[": "]", "{": "}"}


def _skip_quoted(text: str, start: int) -> int:
    """Return the offset just past the quoted span beginning at ``start``.

    Handles single, double and triple quotes and backslash escapes.
    Returns -1 if the quote is never closed.
    """
    quote = text[start]
    if quote != "`" and text.startswith(quote * 3, start):
        terminator = quote * 3
    else:
        terminator = quote

    i = start + len(terminator)
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text.startswith(terminator, i):
            return i + len(terminator)
        i += 1
    return -1


def rfind_top_level(
    text: str, target: str, literal: bool = False, comment: str = "#"
) -> int:
    """Find the last occurrence of ``target`` outside strings, comments and brackets.

    Args:
        text: Expression text to search.
        target: Single character to look for.
        literal: Treat quotes and comment characters as ordinary characters.
        comment: Comment character, or an empty string for none.

    Returns:
        Offset of the last top-level occurrence, or -1 if there is none.
    """
    found = -1
    depth = 0
    i = 0
    while i < len(text):
        ch = text[i]
        if not literal:
            if ch in QUOTE_CHARS:
                end = _skip_quoted(text, i)
                if end == -1:
                    return found
                i = end
                continue
            if comment and ch == comment:
                newline = text.find("\n", i)
                if newline == -1:
                    return found
                i = newline
                continue
        if ch in BRACKET_PAIRS:
            depth += 1
        elif ch in BRACKET_PAIRS.values():
            depth = max(depth - 1, 0)
        elif ch == target and depth == 0:
            found = i
        i += 1
    return found


class Scanner:
    """Splits template text into classified spans.

    Example:
        >>> scanner = Scanner()
        >>> [span.kind.value for span in scanner.scan("a {b} {{c")]
        ['plain', 'open', 'plain', 'close', 'plain', 'escaped_open', 'plain']
    """

    def __init__(
        self,
        open_delimiter: str = "{",
        close_delimiter: str = "}",
        literal: bool = False,
        comment: str = "#",
    ):
        """Initialize the scanner.

        Args:
            open_delimiter: String that opens an expression block.
            close_delimiter: String that closes an expression block.
            literal: Treat quotes, backticks and comment characters inside
                    expressions as ordinary characters.
            comment: Comment character of the expression language.

        Raises:
            ValueError: If either delimiter is empty.
        """
        if not open_delimiter or not close_delimiter:
            raise ValueError("Delimiters must be non-empty strings")

        self.open_delimiter = open_delimiter
        self.close_delimiter = close_delimiter
        self.literal = literal
        self.comment = comment

    def scan(self, text: str) -> List[Span]:
        """Scan template text into spans covering every character in order.

        Args:
            text: The template text.

        Returns:
            List of spans; concatenating ``text[span.start:span.end]`` over
            all spans reproduces ``text``.

        Raises:
            ParseError: If an expression block is never closed.
        """
        spans: List[Span] = []
        open_len = len(self.open_delimiter)
        close_len = len(self.close_delimiter)
        plain_start = 0
        i = 0

        while i < len(text):
            if text.startswith(self.open_delimiter, i):
                self._flush_plain(spans, plain_start, i)
                if text.startswith(self.open_delimiter, i + open_len):
                    spans.append(
                        Span(kind=SpanKind.ESCAPED_OPEN, start=i, end=i + 2 * open_len)
                    )
                    i += 2 * open_len
                else:
                    close_at = self._find_close(text, i)
                    body_start = i + open_len
                    spans.append(Span(kind=SpanKind.OPEN, start=i, end=body_start))
                    self._flush_plain(spans, body_start, close_at)
                    spans.append(
                        Span(
                            kind=SpanKind.CLOSE, start=close_at, end=close_at + close_len
                        )
                    )
                    i = close_at + close_len
                plain_start = i
                continue

            if text.startswith(self.close_delimiter, i) and text.startswith(
                self.close_delimiter, i + close_len
            ):
                self._flush_plain(spans, plain_start, i)
                spans.append(
                    Span(kind=SpanKind.ESCAPED_CLOSE, start=i, end=i + 2 * close_len)
                )
                i += 2 * close_len
                plain_start = i
                continue

            i += 1

        self._flush_plain(spans, plain_start, len(text))
        return spans

    def _find_close(self, text: str, open_at: int) -> int:
        """Return the offset of the close delimiter matching the block at ``open_at``."""
        nestable = self.open_delimiter != self.close_delimiter
        depth = 1
        i = open_at + len(self.open_delimiter)

        while i < len(text):
            ch = text[i]
            if not self.literal:
                if ch in QUOTE_CHARS:
                    end = _skip_quoted(text, i)
                    if end == -1:
                        raise ParseError(
                            f"Unterminated quote at offset {i} inside expression "
                            f"opened at offset {open_at}",
                            offset=open_at,
                        )
                    i = end
                    continue
                if self.comment and ch == self.comment:
                    newline = text.find("\n", i)
                    i = len(text) if newline == -1 else newline
                    continue

            if nestable and text.startswith(self.open_delimiter, i):
                depth += 1
                i += len(self.open_delimiter)
                continue
            if text.startswith(self.close_delimiter, i):
                depth -= 1
                if depth == 0:
                    return i
                i += len(self.close_delimiter)
                continue
            i += 1

        raise ParseError(
            f"Unterminated expression: '{self.open_delimiter}' at offset {open_at} "
            f"has no matching '{self.close_delimiter}'",
            offset=open_at,
        )

    @staticmethod
    def _flush_plain(spans: List[Span], start: int, end: int) -> None:
        if end > start:
            spans.append(Span(kind=SpanKind.PLAIN, start=start, end=end))
