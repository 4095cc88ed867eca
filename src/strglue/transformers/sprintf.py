"""Printf-style format specs attached to expression blocks."""

from typing import Any, List, Optional, Tuple

from strglue.errors import EvalError
from strglue.evaluation.context import BindingContext
from strglue.parsing.scanner import rfind_top_level
from strglue.transformers.base import (
    IdentityTransformer,
    Transformer,
    TransformerFunc,
    as_vector,
)


def split_format_spec(text: str) -> Tuple[str, Optional[str]]:
    """Split ``expr:fmt`` at the last colon outside strings and brackets.

    Returns:
        Tuple of (expression, format spec); the spec is None when the text
        has no top-level colon.

    Example:
        >>> split_format_spec("values[1:3]:05.1f")
        ('values[1:3]', '05.1f')
    """
    colon = rfind_top_level(text, ":")
    if colon == -1:
        return text, None
    return text[:colon], text[colon + 1 :].strip()


class SprintfTransformer(Transformer):
    """Formats blocks written as ``{expr:fmt}`` with ``%fmt``.

    ``{pi:.3f}`` renders ``math.pi`` as ``3.142``. Blocks without a format
    spec are evaluated normally.
    """

    def __init__(self, delegate: Optional[TransformerFunc] = None):
        self.delegate = delegate or IdentityTransformer()

    @property
    def name(self) -> str:
        """Return the transformer name."""
        return "sprintf"

    def transform(self, text: str, context: BindingContext) -> Any:
        """Evaluate the expression part and apply the format spec to each element."""
        expression, spec = split_format_spec(text)
        if spec is None:
            return self.delegate(text, context)

        fmt = spec if spec.startswith("%") else f"%{spec}"
        values = as_vector(self.delegate(expression, context))

        formatted: List[str] = []
        for value in values:
            try:
                formatted.append(fmt % (value,))
            except (TypeError, ValueError) as e:
                raise EvalError(text, e) from e
        return formatted
