"""Replacing evaluation errors with a fallback value."""

from typing import Any, Optional

from strglue.errors import EvalError
from strglue.evaluation.context import BindingContext
from strglue.evaluation.evaluator import evaluate
from strglue.transformers.base import IdentityTransformer, Transformer, TransformerFunc


class Deferred:
    """A fallback expression evaluated only when a block fails.

    The failing ``EvalError`` is bound as ``error`` while the expression runs.

    Example:
        >>> Deferred("f'Error: {error.cause}'")
        Deferred("f'Error: {error.cause}'")
    """

    def __init__(self, expression: str):
        self.expression = expression

    def __repr__(self) -> str:
        return f'Deferred("{self.expression}")'

    def resolve(self, context: BindingContext, error: EvalError) -> Any:
        """Evaluate the fallback expression with ``error`` in scope."""
        return evaluate(self.expression, context.bind(error=error))


class SafelyTransformer(Transformer):
    """Evaluates blocks, substituting ``otherwise`` for any that fail.

    The default fallback is None, which renders as the NA marker.
    Parse errors in the template itself are not caught: only evaluation
    failures of individual blocks are.
    """

    def __init__(
        self,
        otherwise: Any = None,
        delegate: Optional[TransformerFunc] = None,
    ):
        self.otherwise = otherwise
        self.delegate = delegate or IdentityTransformer()

    @property
    def name(self) -> str:
        """Return the transformer name."""
        return "safely"

    def transform(self, text: str, context: BindingContext) -> Any:
        """Evaluate the block, falling back on error."""
        try:
            return self.delegate(text, context)
        except EvalError as e:
            if isinstance(self.otherwise, Deferred):
                return self.otherwise.resolve(context, e)
            return self.otherwise
