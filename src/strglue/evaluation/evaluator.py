"""Evaluator adapter between expression text and the Python runtime.

Expression blocks are ordinary Python expressions evaluated with the
binding context as their namespace. Evaluation is not sandboxed: an
expression may perform I/O or mutate objects it can reach, exactly as the
same code would if written outside a template. Callers needing timeouts
or isolation must wrap ``evaluate`` themselves.
"""

from types import CodeType
from typing import Any, Mapping, Optional

from strglue.errors import EvalError, ExpressionSyntaxError
from strglue.evaluation.context import BindingContext


def compile_expression(text: str) -> CodeType:
    """Compile expression text as a single Python expression.

    The text is wrapped in parentheses, so an expression may span several
    lines and carry trailing ``#`` comments.

    Raises:
        ExpressionSyntaxError: If the text is not a valid expression.
    """
    try:
        return compile(f"({text}\n)", "<strglue>", "eval")
    except SyntaxError as e:
        raise ExpressionSyntaxError(text, e) from e


def is_expression(text: str) -> bool:
    """Return True if ``text`` compiles as a Python expression."""
    try:
        compile_expression(text)
    except ExpressionSyntaxError:
        return False
    return True


def evaluate(text: str, context: Optional[Mapping[str, Any]] = None) -> Any:
    """Evaluate expression text against a binding context.

    Args:
        text: Python expression source.
        context: Names visible to the expression. Each call works on a fresh
                namespace built from the context, so assignments made by the
                expression (e.g. ``:=``) do not leak into the context.

    Returns:
        The value of the expression; may be a scalar or a sequence.

    Raises:
        ExpressionSyntaxError: If the text does not parse.
        EvalError: If evaluation raises.

    Example:
        >>> evaluate("a + 1", {"a": 41})
        42
    """
    code = compile_expression(text)
    namespace = BindingContext.coerce(context).namespace()
    try:
        return eval(code, namespace)
    except Exception as e:
        raise EvalError(text, e) from e
