"""Template rendering: parse, transform, broadcast and join.

Example:
    >>> render("My name is {name}.", name="Fred")
    ['My name is Fred.']
    >>> render("{x} of {total}", x=[1, 2], total=2)
    ['1 of 2', '2 of 2']
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from strglue.errors import TransformerError
from strglue.evaluation.context import BindingContext
from strglue.parsing.models import LiteralSegment, Segment
from strglue.parsing.parser import parse_template
from strglue.parsing.trim import trim
from strglue.rendering.options import RenderOptions
from strglue.rendering.vectorize import broadcast_length, recycle
from strglue.transformers.base import (
    IdentityTransformer,
    Transformer,
    TransformerFunc,
    as_vector,
    to_text,
)

TemplateParts = Union[str, Sequence[str]]
OptionsArg = Optional[Union[RenderOptions, Dict[str, Any]]]


def join_template(template: TemplateParts, sep: str = "\n") -> str:
    """Join multi-part templates with ``sep``; a single string is returned as is."""
    if isinstance(template, str):
        return template
    return sep.join(template)


def resolve_transformer(
    transformer: Any, options: Optional[RenderOptions] = None
) -> TransformerFunc:
    """Turn the ``transformer`` option into a callable.

    Transformer instances, including those looked up by name, are adapted
    to ``options`` through ``Transformer.with_options``.

    Raises:
        TransformerError: If a name is not registered or the value is not callable.
    """
    if transformer is None:
        return IdentityTransformer()
    if isinstance(transformer, str):
        from strglue.transformers.registry import get_transformer

        transformer = get_transformer(transformer)
    if isinstance(transformer, Transformer) and options is not None:
        return transformer.with_options(options)
    if callable(transformer):
        return transformer
    raise TransformerError(f"Transformer {transformer!r} is not callable")


def prepare_segments(template: TemplateParts, options: RenderOptions) -> List[Segment]:
    """Join, trim and parse a template according to ``options``."""
    text = join_template(template, options.sep)
    if options.trim:
        text = trim(text)
    return parse_template(
        text,
        open_delimiter=options.open_delimiter,
        close_delimiter=options.close_delimiter,
        literal=options.literal,
        comment=options.comment,
    )


def render_segments(
    segments: Sequence[Segment], context: BindingContext, options: RenderOptions
) -> List[str]:
    """Render parsed segments against an already frozen context.

    Each expression segment is transformed once; its result is coerced to
    a vector and stringified. Rows are then assembled by broadcasting.
    """
    transformer = resolve_transformer(options.transformer, options)
    pieces: List[List[str]] = []
    lengths: List[int] = []

    for segment in segments:
        if isinstance(segment, LiteralSegment):
            pieces.append([segment.text])
            continue

        values = as_vector(transformer(segment.text, context))
        pieces.append([to_text(value, options.na) for value in values])
        lengths.append(len(values))

    rows = broadcast_length(lengths, options.broadcast)
    return recycle(pieces, rows)


def render(
    template: TemplateParts,
    context: Optional[Mapping[str, Any]] = None,
    options: OptionsArg = None,
    **variables: Any,
) -> List[str]:
    """Render a template into one string per broadcast row.

    Args:
        template: Template text, or several parts joined with ``options.sep``.
        context: Names visible to expressions: a BindingContext or a plain
                mapping such as ``globals()``.
        options: RenderOptions or a dict of option values.
        **variables: Named variables; these override ``context``.

    Returns:
        The rendered rows. Templates without vector-valued blocks render to
        a single row; a zero-length block renders to no rows at all.

    Raises:
        ParseError: If the template is malformed.
        EvalError: If a block fails and the transformer does not recover.
        BroadcastError: If lengths mismatch under the strict policy.
    """
    options = RenderOptions.coerce(options)
    segments = prepare_segments(template, options)
    snapshot = BindingContext.coerce(context).bind(**variables).freeze()
    return render_segments(segments, snapshot, options)


def render_data(
    data: Any,
    template: TemplateParts,
    context: Optional[Mapping[str, Any]] = None,
    options: OptionsArg = None,
    **variables: Any,
) -> List[str]:
    """Render a template with the columns of ``data`` in scope.

    ``data`` is a mapping of column names to sequences (or a data-frame
    like object with ``keys()``). Columns override ``context`` but not
    named ``variables``.

    Example:
        >>> render_data({"name": ["ann", "bob"]}, "hi {name}")
        ['hi ann', 'hi bob']
    """
    base = BindingContext.coerce(context).with_data(data)
    return render(template, base, options, **variables)
