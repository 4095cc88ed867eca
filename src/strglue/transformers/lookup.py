"""Symbol substitution from a fixed lookup table."""

import re
from typing import Any, Dict, Mapping, Optional

from strglue.errors import EvalError
from strglue.evaluation.context import BindingContext
from strglue.transformers.base import Transformer
from strglue.transformers.collapse import COLLAPSE_MARKER, collapse

EMOJI: Dict[str, str] = {
    "heart": "❤️",
    "green_heart": "\U0001f49a",
    "blue_heart": "\U0001f499",
    "broken_heart": "\U0001f494",
    "smile": "\U0001f604",
    "wink": "\U0001f609",
    "thumbsup": "\U0001f44d",
    "thumbsdown": "\U0001f44e",
    "star": "⭐",
    "sparkles": "✨",
    "fire": "\U0001f525",
    "rocket": "\U0001f680",
    "warning": "⚠️",
    "check": "✔️",
    "x": "❌",
    "snake": "\U0001f40d",
}


class LookupTransformer(Transformer):
    """Replaces each block with its entry in a symbol table.

    Block text is a key, never evaluated as code. A block ending in the
    collapse marker is a search term instead: every symbol whose key
    contains the term is joined with ``sep``.

    Example:
        >>> transformer = LookupTransformer({"a": "1", "ab": "2"})
        >>> transformer("a*", BindingContext())
        '12'
    """

    def __init__(
        self,
        table: Optional[Mapping[str, Any]] = None,
        marker: str = COLLAPSE_MARKER,
        sep: str = "",
    ):
        self.table = dict(EMOJI if table is None else table)
        self.marker = re.compile(marker)
        self.sep = sep

    @property
    def name(self) -> str:
        """Return the transformer name."""
        return "lookup"

    def transform(self, text: str, context: BindingContext) -> Any:
        """Look the block up in the table."""
        key = text.strip()

        if self.marker.search(key):
            term = self.marker.sub("", key, count=1).strip()
            matches = [value for name, value in self.table.items() if term in name]
            return collapse(matches, sep=self.sep)

        try:
            return self.table[key]
        except KeyError as e:
            raise EvalError(text, LookupError(f"Unknown symbol '{key}'")) from e
