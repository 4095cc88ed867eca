"""Expression evaluation against explicit binding contexts."""

from strglue.evaluation.context import BindingContext
from strglue.evaluation.evaluator import compile_expression, evaluate, is_expression

__all__ = [
    "BindingContext",
    "compile_expression",
    "evaluate",
    "is_expression",
]
