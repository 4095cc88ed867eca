"""Transformers intercepting expression blocks before and after evaluation.

Built-in transformers:
- `identity`: Evaluates each block as a Python expression (the default)
- `collapse`: Joins multi-valued results of blocks ending in `*`
- `shell`: Quotes results for use as shell arguments
- `lookup`: Substitutes symbols from a fixed table
- `sprintf`: Applies printf-style specs written as `{expr:fmt}`
- `safely`: Replaces evaluation errors with a fallback value
- `vv`: Expands `{expr=}` into `expr = value`
- `color`: Applies terminal styles written as `{style text}`

Example:
    >>> from strglue import render
    >>> from strglue.transformers import get_transformer
    >>> render("{range(3)*}", options={"transformer": get_transformer("collapse")})
    ['012']
"""

from strglue.transformers.base import (
    IdentityTransformer,
    Transformer,
    TransformerFunc,
    as_vector,
    to_text,
)
from strglue.transformers.collapse import (
    COLLAPSE_MARKER,
    CollapseTransformer,
    collapse,
)
from strglue.transformers.color import ColorTransformer, strip_ansi, style_text
from strglue.transformers.lookup import EMOJI, LookupTransformer
from strglue.transformers.registry import (
    clear_registry,
    get_transformer,
    list_transformers,
    register_transformer,
)
from strglue.transformers.safely import Deferred, SafelyTransformer
from strglue.transformers.shell import ShellTransformer, shell_quote
from strglue.transformers.sprintf import SprintfTransformer, split_format_spec
from strglue.transformers.vv import VariableValueTransformer

__all__ = [
    # Base classes
    "Transformer",
    "TransformerFunc",
    "IdentityTransformer",
    "as_vector",
    "to_text",
    # Built-in transformers
    "CollapseTransformer",
    "COLLAPSE_MARKER",
    "ColorTransformer",
    "LookupTransformer",
    "SafelyTransformer",
    "ShellTransformer",
    "SprintfTransformer",
    "VariableValueTransformer",
    # Helpers
    "collapse",
    "Deferred",
    "EMOJI",
    "shell_quote",
    "split_format_spec",
    "strip_ansi",
    "style_text",
    # Registry functions
    "get_transformer",
    "list_transformers",
    "register_transformer",
    "clear_registry",
]
