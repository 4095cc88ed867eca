"""Exception and warning types raised by strglue."""

from typing import Optional


class StrglueError(Exception):
    """Base class for all strglue errors."""

    pass


class ParseError(StrglueError):
    """Exception raised when a template cannot be parsed.

    Attributes:
        offset: Character offset of the offending open delimiter, when known.
    """

    def __init__(self, message: str, offset: Optional[int] = None):
        super().__init__(message)
        self.offset = offset


class QuotingError(ParseError):
    """Exception raised when a value cannot be quoted for a query."""

    pass


class EvalError(StrglueError):
    """Exception raised when an expression block fails to evaluate.

    Attributes:
        text: The expression source text that failed.
        cause: The underlying exception raised by evaluation.
    """

    def __init__(self, text: str, cause: BaseException):
        super().__init__(f"Failed to evaluate {text.strip()!r}: {cause}")
        self.text = text
        self.cause = cause


class ExpressionSyntaxError(EvalError):
    """Exception raised when expression text is not a valid Python expression."""

    pass


class BroadcastError(StrglueError):
    """Exception raised when vector lengths cannot be broadcast under strict policy."""

    pass


class TransformerError(StrglueError):
    """Exception raised for unknown or misconfigured transformers."""

    pass


class BroadcastWarning(UserWarning):
    """Warning emitted when vector lengths are recycled unevenly."""

    pass
