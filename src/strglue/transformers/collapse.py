"""Collapsing multi-valued results into a single string."""

import math
import re
from typing import Any, Iterable, Optional

from strglue.evaluation.context import BindingContext
from strglue.transformers.base import (
    IdentityTransformer,
    Transformer,
    TransformerFunc,
    as_vector,
    to_text,
)

# A trailing "*", optionally followed by whitespace before the close delimiter
COLLAPSE_MARKER = r"\*\s*$"


def collapse(
    values: Iterable[Any],
    sep: str = "",
    width: float = math.inf,
    last: str = "",
    na: str = "NA",
) -> str:
    """Join values into one string.

    Args:
        values: Values to join; converted with ``str``.
        sep: Separator between elements.
        width: Maximum result width. Longer results are cut to
              ``width - 3`` characters followed by ``...``.
        last: Separator before the final element when there are at least
             two elements. Empty means use ``sep``.
        na: Text used for None and NaN elements.

    Returns:
        The joined string; ``""`` for no values.

    Example:
        >>> collapse(["a", "b", "c"], sep=", ", last=" and ")
        'a, b and c'
    """
    items = [to_text(value, na) for value in as_vector(values)]
    if not items:
        return ""

    if last and len(items) > 1:
        result = sep.join(items[:-1]) + last + items[-1]
    else:
        result = sep.join(items)

    if math.isfinite(width) and len(result) > width:
        result = result[: max(int(width) - 3, 0)] + "..."

    return result


class CollapseTransformer(Transformer):
    """Collapses any block whose text matches ``regex`` (a trailing ``*`` by default).

    Blocks that do not match are passed to ``delegate`` unchanged. Missing
    elements inside a collapsed block are written as ``na``; when ``na`` is
    None the marker of the render call is used.

    Example:
        >>> from strglue import render, RenderOptions
        >>> render("{range(1, 4)*}", options=RenderOptions(transformer=CollapseTransformer(sep=", ")))
        ['1, 2, 3']
    """

    def __init__(
        self,
        regex: str = COLLAPSE_MARKER,
        sep: str = "",
        width: float = math.inf,
        last: str = "",
        delegate: Optional[TransformerFunc] = None,
        na: Optional[str] = None,
    ):
        self.pattern = re.compile(regex)
        self.sep = sep
        self.width = width
        self.last = last
        self.delegate = delegate or IdentityTransformer()
        self.na = na

    @property
    def name(self) -> str:
        """Return the transformer name."""
        return "collapse"

    def with_options(self, options: Any) -> "CollapseTransformer":
        """Use the call's ``na`` marker unless one was given explicitly."""
        if self.na is not None:
            return self
        return CollapseTransformer(
            regex=self.pattern.pattern,
            sep=self.sep,
            width=self.width,
            last=self.last,
            delegate=self.delegate,
            na=options.na,
        )

    def transform(self, text: str, context: BindingContext) -> Any:
        """Evaluate the block, collapsing it if it carries the marker."""
        if not self.pattern.search(text):
            return self.delegate(text, context)

        stripped = self.pattern.sub("", text, count=1)
        result = self.delegate(stripped, context)
        return collapse(
            result,
            sep=self.sep,
            width=self.width,
            last=self.last,
            na="NA" if self.na is None else self.na,
        )
