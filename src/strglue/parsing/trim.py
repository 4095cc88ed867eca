"""Whitespace trimming for multi-line templates.

Lets templates be indented naturally inside source code:

- a whitespace-only first line is dropped,
- a whitespace-only last line is dropped together with the newline before it,
- the common indentation of the remaining lines is removed,
- a backslash at the end of a line joins it with the next one.
"""

import re
from typing import List

_CONTINUATION = re.compile(r"(?<!\\)((?:\\\\)*)\\\n")


def _is_blank(line: str) -> bool:
    return not line.strip()


def _indent_width(line: str) -> int:
    return len(line) - len(line.lstrip(" \t"))


def trim(text: str) -> str:
    """Trim boundary blank lines and common indentation from template text.

    Single-line text is returned unchanged. Only one blank line is removed
    at each end, so an extra blank line can be used to keep a leading or
    trailing newline.

    Args:
        text: The raw template text.

    Returns:
        The trimmed text.

    Example:
        >>> trim("\\n    A line\\n      indented\\n    ")
        'A line\\n  indented'
    """
    if "\n" not in text:
        return text

    lines: List[str] = text.split("\n")
    keep_first = True

    if _is_blank(lines[0]):
        lines = lines[1:]
        keep_first = False

    if lines and _is_blank(lines[-1]) and (len(lines) > 1 or not keep_first):
        lines = lines[:-1]

    body_start = 1 if keep_first else 0
    indents = [
        _indent_width(line) for line in lines[body_start:] if not _is_blank(line)
    ]
    if indents:
        min_indent = min(indents)
        for idx in range(body_start, len(lines)):
            line = lines[idx]
            lines[idx] = line[min(min_indent, _indent_width(line)) :]
    else:
        for idx in range(body_start, len(lines)):
            lines[idx] = lines[idx].lstrip(" \t")

    return _CONTINUATION.sub(r"\1", "\n".join(lines))
