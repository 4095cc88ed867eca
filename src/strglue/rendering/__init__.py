"""Rendering templates into broadcast rows of text."""

from strglue.rendering.options import RenderOptions
from strglue.rendering.renderer import (
    join_template,
    prepare_segments,
    render,
    render_data,
    render_segments,
    resolve_transformer,
)
from strglue.rendering.vectorize import broadcast_length, recycle
from strglue.rendering.wrappers import (
    render_col,
    render_fmt,
    render_safely,
    render_sh,
    render_symbols,
    render_vv,
)

__all__ = [
    "RenderOptions",
    # Rendering
    "render",
    "render_data",
    "render_segments",
    "prepare_segments",
    "join_template",
    "resolve_transformer",
    # Broadcasting
    "broadcast_length",
    "recycle",
    # Shortcuts
    "render_col",
    "render_fmt",
    "render_safely",
    "render_sh",
    "render_symbols",
    "render_vv",
]
