"""Base classes for expression transformers.

A transformer receives the raw text of each expression block together
with the binding context and returns the value to substitute. Exactly one
transformer governs a render call; behaviors are combined by writing a
transformer that delegates to another one, never by automatic chaining.
"""

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping, Sized
from typing import Any, Callable, List

from strglue.evaluation.context import BindingContext
from strglue.evaluation.evaluator import evaluate

TransformerFunc = Callable[[str, BindingContext], Any]


def as_vector(value: Any) -> List[Any]:
    """Coerce an expression result to a list of elements.

    Strings, bytes and mappings are single values. Sized iterables (lists,
    tuples, ranges, array-likes) become lists and iterators are consumed.
    Anything else is a single value.
    """
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        return [value]
    if isinstance(value, Iterator):
        return list(value)
    if isinstance(value, Iterable) and isinstance(value, Sized):
        try:
            return list(value)
        except TypeError:
            return [value]
    return [value]


def to_text(value: Any, na: str = "NA") -> str:
    """Convert one element to output text, rendering None and NaN as ``na``."""
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return na
    return str(value)


class Transformer(ABC):
    """Abstract base class for transformers.

    Subclasses are callable, so an instance can be used anywhere a plain
    ``(text, context) -> value`` function is accepted.

    Example:
        >>> class UpperTransformer(Transformer):
        ...     @property
        ...     def name(self) -> str:
        ...         return "upper"
        ...
        ...     def transform(self, text, context):
        ...         return str(evaluate(text, context)).upper()
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the transformer name used by the registry."""
        pass

    @abstractmethod
    def transform(self, text: str, context: BindingContext) -> Any:
        """Produce the value for one expression block.

        Args:
            text: Raw text between the delimiters.
            context: Snapshot of the names visible to the expression.

        Returns:
            A scalar or a sequence; sequences take part in broadcasting.

        Raises:
            EvalError: If the expression cannot be evaluated.
        """
        pass

    def with_options(self, options: Any) -> "Transformer":
        """Return the transformer to use for a render call with ``options``.

        The default returns ``self``. Transformers that re-render block
        bodies or format missing values return a copy that follows the
        call's delimiters and ``na`` marker.
        """
        return self

    def __call__(self, text: str, context: BindingContext) -> Any:
        return self.transform(text, context)


class IdentityTransformer(Transformer):
    """Evaluates each block as a Python expression. This is the default."""

    @property
    def name(self) -> str:
        """Return the transformer name."""
        return "identity"

    def transform(self, text: str, context: BindingContext) -> Any:
        """Evaluate the block unchanged."""
        return evaluate(text, context)
