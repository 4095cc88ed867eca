"""The ``{expr=}`` shorthand that shows an expression next to its value."""

import re
from typing import Any, Optional

from strglue.evaluation.context import BindingContext
from strglue.transformers.base import (
    IdentityTransformer,
    Transformer,
    TransformerFunc,
    as_vector,
)
from strglue.transformers.collapse import collapse

_MARKER = re.compile(r"=\s*$")


class VariableValueTransformer(Transformer):
    """Expands ``{expr=}`` into ``expr = value``.

    Multi-element values are shown as ``[v1, v2, ...]``. Missing values use
    ``na``, or the render call's marker when ``na`` is None. Blocks without
    the trailing ``=`` are evaluated normally.

    Example:
        >>> transformer = VariableValueTransformer()
        >>> transformer("a * 2=", BindingContext({"a": 3}))
        'a * 2 = 6'
    """

    def __init__(
        self,
        delegate: Optional[TransformerFunc] = None,
        na: Optional[str] = None,
    ):
        self.delegate = delegate or IdentityTransformer()
        self.na = na

    @property
    def name(self) -> str:
        """Return the transformer name."""
        return "vv"

    def with_options(self, options: Any) -> "VariableValueTransformer":
        """Use the call's ``na`` marker unless one was given explicitly."""
        if self.na is not None:
            return self
        return VariableValueTransformer(self.delegate, na=options.na)

    def transform(self, text: str, context: BindingContext) -> Any:
        """Render the block as ``expression = value`` when it ends in ``=``."""
        if not _MARKER.search(text):
            return self.delegate(text, context)

        expression = _MARKER.sub("", text, count=1)
        values = as_vector(self.delegate(expression, context))
        rendered = collapse(values, sep=", ", na="NA" if self.na is None else self.na)
        if len(values) > 1:
            rendered = f"[{rendered}]"
        return f"{expression.strip()} = {rendered}"
