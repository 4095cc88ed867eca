"""Shortcut render functions bound to a specific transformer."""

from typing import Any, List, Mapping, Optional, Union

from strglue.global_models import ShellType
from strglue.rendering.options import RenderOptions
from strglue.rendering.renderer import OptionsArg, TemplateParts, render
from strglue.transformers.color import ColorTransformer
from strglue.transformers.lookup import LookupTransformer
from strglue.transformers.safely import SafelyTransformer
from strglue.transformers.shell import ShellTransformer
from strglue.transformers.sprintf import SprintfTransformer
from strglue.transformers.vv import VariableValueTransformer


def render_sh(
    template: TemplateParts,
    context: Optional[Mapping[str, Any]] = None,
    shell_type: Union[ShellType, str] = ShellType.SH,
    options: OptionsArg = None,
    **variables: Any,
) -> List[str]:
    """Render a shell command line with every substituted value quoted.

    Example:
        >>> render_sh("cat {filename}", filename="my file.txt")
        ["cat 'my file.txt'"]
    """
    options = RenderOptions.coerce(options).merged(
        transformer=ShellTransformer(shell_type)
    )
    return render(template, context, options, **variables)


def render_fmt(
    template: TemplateParts,
    context: Optional[Mapping[str, Any]] = None,
    options: OptionsArg = None,
    **variables: Any,
) -> List[str]:
    """Render a template whose blocks may carry printf-style specs.

    Example:
        >>> render_fmt("pi = {pi:.3f}", pi=3.14159)
        ['pi = 3.142']
    """
    options = RenderOptions.coerce(options).merged(transformer=SprintfTransformer())
    return render(template, context, options, **variables)


def render_safely(
    template: TemplateParts,
    context: Optional[Mapping[str, Any]] = None,
    otherwise: Any = None,
    options: OptionsArg = None,
    **variables: Any,
) -> List[str]:
    """Render a template, substituting ``otherwise`` for blocks that fail.

    Example:
        >>> render_safely("foo: {xyz}")
        ['foo: NA']
    """
    options = RenderOptions.coerce(options).merged(
        transformer=SafelyTransformer(otherwise)
    )
    return render(template, context, options, **variables)


def render_vv(
    template: TemplateParts,
    context: Optional[Mapping[str, Any]] = None,
    options: OptionsArg = None,
    **variables: Any,
) -> List[str]:
    """Render a template supporting the ``{expr=}`` shorthand.

    Example:
        >>> render_vv("{a=}, {a + 1=}", a=3)
        ['a = 3, a + 1 = 4']
    """
    options = RenderOptions.coerce(options).merged(
        transformer=VariableValueTransformer()
    )
    return render(template, context, options, **variables)


def render_symbols(
    template: TemplateParts,
    table: Optional[Mapping[str, Any]] = None,
    options: OptionsArg = None,
) -> List[str]:
    """Render ``:name:`` symbols from ``table`` (a small emoji table by default).

    Example:
        >>> render_symbols("go :rocket:", table={"rocket": "->"})
        ['go ->']
    """
    options = RenderOptions.coerce(options).merged(
        open_delimiter=":",
        close_delimiter=":",
        transformer=LookupTransformer(table),
    )
    return render(template, None, options)


def render_col(
    template: TemplateParts,
    context: Optional[Mapping[str, Any]] = None,
    options: OptionsArg = None,
    color_system: str = "truecolor",
    **variables: Any,
) -> List[str]:
    """Render a template with ``{style text}`` blocks styled for the terminal.

    Set ``literal`` in ``options`` when styled text contains unpaired quotes
    or comment characters, e.g. ``{yellow It's}``.
    """
    options = RenderOptions.coerce(options)
    transformer = ColorTransformer(options, color_system=color_system)
    return render(template, context, options.merged(transformer=transformer), **variables)
