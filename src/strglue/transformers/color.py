"""Terminal colors and styles inside templates.

A block that is not a valid Python expression and starts with a word
followed by whitespace is a style block: ``{blue some text}`` renders
"some text" in blue. The remainder of a style block is itself a template,
so blocks nest: ``{bold total: {green {n + 1}}}``. Blocks that are valid
expressions are evaluated normally.

Styles are looked up in the binding context first (a ``rich.style.Style``,
a style string such as ``"white on black"``, or any ``str -> str``
callable) and otherwise parsed as rich style definitions. Camel-case names
in the style of R's crayon (``bgRed``, ``brightBlue``) are accepted.
"""

import io
import re
from typing import Any, Callable, List, Optional

from rich.console import Console
from rich.errors import StyleSyntaxError
from rich.style import Style
from rich.text import Text

from strglue.errors import EvalError
from strglue.evaluation.context import BindingContext
from strglue.evaluation.evaluator import is_expression
from strglue.transformers.base import IdentityTransformer, Transformer

_STYLE_BLOCK = re.compile(r"^\s*([A-Za-z_][A-Za-z0-9_]*)\s+(.+)$", re.DOTALL)
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

_STYLE_ALIASES = {
    "inverse": "reverse",
    "blurred": "dim",
    "hidden": "conceal",
    "strikethrough": "strike",
    "silver": "bright_black",
    "grey": "bright_black",
}


def rich_style_name(name: str) -> str:
    """Translate a crayon-style name into a rich style definition.

    Example:
        >>> rich_style_name("bgBrightRed")
        'on bright_red'
    """
    if name in _STYLE_ALIASES:
        return _STYLE_ALIASES[name]

    background = name.startswith("bg") and len(name) > 2 and name[2].isupper()
    if background:
        name = name[2:]

    color = _CAMEL_BOUNDARY.sub("_", name).lower()
    return f"on {color}" if background else color


def style_text(text: str, style: Style, color_system: str = "truecolor") -> str:
    """Render ``text`` with ``style`` applied, as a string of ANSI escapes.

    ANSI sequences already present in ``text`` (from nested style blocks)
    are kept and layered over ``style``.
    """
    if "\x1b" in text:
        styled = Text.from_ansi(text, style=style)
    else:
        styled = Text(text, style=style)

    buffer = io.StringIO()
    console = Console(
        file=buffer,
        force_terminal=True,
        color_system=color_system,
        soft_wrap=True,
        highlight=False,
        markup=False,
        emoji=False,
    )
    console.print(styled, end="")
    return buffer.getvalue()


class ColorTransformer(Transformer):
    """Applies named styles to style blocks and evaluates everything else."""

    def __init__(self, options: Optional[Any] = None, color_system: str = "truecolor"):
        """Initialize the transformer.

        Args:
            options: RenderOptions used to render the body of style blocks.
                    When omitted, each render call's own options are used.
            color_system: rich color system used for the escape sequences.
        """
        from strglue.rendering.options import RenderOptions

        self.follows_call = options is None
        self.options = RenderOptions.coerce(options).merged(transformer=self)
        self.color_system = color_system
        self.delegate = IdentityTransformer()

    @property
    def name(self) -> str:
        """Return the transformer name."""
        return "color"

    def with_options(self, options: Any) -> "ColorTransformer":
        """Bind the call's options unless options were given explicitly."""
        if not self.follows_call:
            return self
        return ColorTransformer(options, color_system=self.color_system)

    def transform(self, text: str, context: BindingContext) -> Any:
        """Evaluate expressions; style and recursively render style blocks."""
        if is_expression(text):
            return self.delegate(text, context)

        match = _STYLE_BLOCK.match(text)
        if match is None:
            # Raises the syntax error for the caller.
            return self.delegate(text, context)

        style_name, body = match.groups()
        apply_style = self.resolve_style(style_name, context)

        from strglue.rendering.renderer import prepare_segments, render_segments

        segments = prepare_segments(body, self.options)
        rows = render_segments(segments, context, self.options)
        return [apply_style(row) for row in rows]

    def resolve_style(self, name: str, context: BindingContext) -> Callable[[str], str]:
        """Find the styling function for ``name``.

        Raises:
            EvalError: If ``name`` is neither bound in the context nor a valid style.
        """
        if name in context:
            bound = context[name]
            if isinstance(bound, Style):
                return lambda text: style_text(text, bound, self.color_system)
            if isinstance(bound, str):
                return self._parsed_style(name, bound)
            if callable(bound):
                return bound

        return self._parsed_style(name, rich_style_name(name))

    def _parsed_style(self, name: str, definition: str) -> Callable[[str], str]:
        try:
            style = Style.parse(definition)
        except StyleSyntaxError as e:
            raise EvalError(name, e) from e
        return lambda text: style_text(text, style, self.color_system)


def strip_ansi(rows: List[str]) -> List[str]:
    """Remove ANSI styling from rendered rows."""
    return [Text.from_ansi(row).plain for row in rows]
