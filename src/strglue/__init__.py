"""strglue: interpreted string literals for Python.

Templates embed Python expressions in delimited blocks. Each block is
evaluated against an explicit binding context, the results are converted
to text and broadcast across vector-valued results, producing one string
per row.

Example:
    >>> from strglue import render
    >>> render("My name is {name}, not {{name}}.", name="Fred")
    ['My name is Fred, not {name}.']
    >>> render("{x} squared is {[v * v for v in x]}", x=[1, 2, 3])
    ['1 squared is 1', '2 squared is 4', '3 squared is 9']
"""

from strglue.errors import (
    BroadcastError,
    BroadcastWarning,
    EvalError,
    ExpressionSyntaxError,
    ParseError,
    QuotingError,
    StrglueError,
    TransformerError,
)
from strglue.evaluation import BindingContext, evaluate
from strglue.global_models import BroadcastPolicy, ShellType
from strglue.parsing import Template, parse_template, trim, unparse
from strglue.rendering import (
    RenderOptions,
    render,
    render_col,
    render_data,
    render_fmt,
    render_safely,
    render_sh,
    render_symbols,
    render_vv,
)
from strglue.sql import QueryConnection, QueryFragment, render_query
from strglue.transformers import (
    CollapseTransformer,
    ColorTransformer,
    Deferred,
    IdentityTransformer,
    LookupTransformer,
    SafelyTransformer,
    ShellTransformer,
    SprintfTransformer,
    Transformer,
    VariableValueTransformer,
    collapse,
)

__all__ = [
    # Rendering
    "render",
    "render_data",
    "render_col",
    "render_fmt",
    "render_safely",
    "render_sh",
    "render_symbols",
    "render_vv",
    "render_query",
    "RenderOptions",
    "collapse",
    # Parsing and evaluation
    "Template",
    "parse_template",
    "unparse",
    "trim",
    "BindingContext",
    "evaluate",
    # Transformers
    "Transformer",
    "IdentityTransformer",
    "CollapseTransformer",
    "ColorTransformer",
    "LookupTransformer",
    "SafelyTransformer",
    "ShellTransformer",
    "SprintfTransformer",
    "VariableValueTransformer",
    "Deferred",
    # SQL
    "QueryConnection",
    "QueryFragment",
    # Enums
    "BroadcastPolicy",
    "ShellType",
    # Errors
    "StrglueError",
    "ParseError",
    "QuotingError",
    "EvalError",
    "ExpressionSyntaxError",
    "BroadcastError",
    "BroadcastWarning",
    "TransformerError",
]
