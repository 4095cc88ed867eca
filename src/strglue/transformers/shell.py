"""Quoting evaluated values for use in shell commands."""

import re
import shlex
from typing import Any, List, Optional, Union

from strglue.errors import TransformerError
from strglue.evaluation.context import BindingContext
from strglue.global_models import ShellType
from strglue.transformers.base import (
    IdentityTransformer,
    Transformer,
    TransformerFunc,
    as_vector,
)

# Characters cmd.exe treats specially outside of double quotes
_CMD_METACHARACTERS = re.compile(r'([()%!^"<>&|])')


def shell_quote(value: Any, shell_type: ShellType = ShellType.SH) -> str:
    """Quote a single value for the given shell.

    Args:
        value: Value to quote; converted with ``str``.
        shell_type: Target shell convention.

    Returns:
        The quoted argument.

    Example:
        >>> shell_quote("my file.txt")
        "'my file.txt'"
    """
    text = str(value)

    if shell_type == ShellType.SH:
        return shlex.quote(text)
    if shell_type == ShellType.CSH:
        return shlex.quote(text).replace("!", "\\!")
    if shell_type == ShellType.CMD:
        return '"' + text.replace('"', '\\"') + '"'
    if shell_type == ShellType.CMD2:
        return '"' + _CMD_METACHARACTERS.sub(r"^\1", text) + '"'

    raise TransformerError(f"Unsupported shell type: {shell_type}")


class ShellTransformer(Transformer):
    """Evaluates each block and quotes every element for safe use as a shell argument."""

    def __init__(
        self,
        shell_type: Union[ShellType, str] = ShellType.SH,
        delegate: Optional[TransformerFunc] = None,
    ):
        try:
            self.shell_type = ShellType(shell_type)
        except ValueError as e:
            valid = ", ".join(t.value for t in ShellType)
            raise TransformerError(
                f"Unknown shell type '{shell_type}'. Valid types: {valid}"
            ) from e
        self.delegate = delegate or IdentityTransformer()

    @property
    def name(self) -> str:
        """Return the transformer name."""
        return "shell"

    def transform(self, text: str, context: BindingContext) -> List[str]:
        """Evaluate the block and quote each resulting element."""
        values = as_vector(self.delegate(text, context))
        return [shell_quote(value, self.shell_type) for value in values]
