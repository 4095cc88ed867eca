"""Binding context: the names visible to expression blocks.

A context is an explicit, ordered chain of lookup layers. The first layer
holding a name wins:

1. Named arguments passed to the render call
2. The data layer (columns of a mapping or data frame)
3. Caller-supplied scopes, typically ``locals()`` then ``globals()``

Nothing is discovered by inspecting the call stack; callers pass the
scopes they want visible.
"""

import builtins
from collections import ChainMap
from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional


def _as_columns(data: Any) -> Dict[str, Any]:
    """Convert a data layer (mapping or data-frame-like object) to a dict of columns."""
    if data is None:
        return {}
    if isinstance(data, Mapping):
        return dict(data)
    if hasattr(data, "keys") and hasattr(data, "__getitem__"):
        return {str(key): data[key] for key in data.keys()}
    raise TypeError(
        f"Data layer must be a mapping of columns, got {type(data).__name__}"
    )


class BindingContext(Mapping):
    """Read-only view over the layers of names available to expressions.

    Example:
        >>> context = BindingContext({"name": "global"}, names={"name": "Fred"})
        >>> context["name"]
        'Fred'
    """

    def __init__(
        self,
        *scopes: Mapping[str, Any],
        data: Optional[Any] = None,
        names: Optional[Mapping[str, Any]] = None,
    ):
        """Initialize the context.

        Args:
            *scopes: Enclosing scopes from innermost to outermost.
            data: Optional column mapping (dict of sequences, data frame).
            names: Named arguments; these take priority over everything else.
        """
        self.names: Dict[str, Any] = dict(names or {})
        self.data: Dict[str, Any] = _as_columns(data)
        self.scopes = list(scopes)
        self._chain = ChainMap(self.names, self.data, *self.scopes)

    @classmethod
    def coerce(cls, context: Optional[Mapping[str, Any]]) -> "BindingContext":
        """Return ``context`` as a BindingContext, wrapping plain mappings."""
        if context is None:
            return cls()
        if isinstance(context, BindingContext):
            return context
        if isinstance(context, Mapping):
            return cls(context)
        raise TypeError(
            f"Context must be a mapping or BindingContext, got {type(context).__name__}"
        )

    def __getitem__(self, key: str) -> Any:
        return self._chain[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._chain)

    def __len__(self) -> int:
        return len(self._chain)

    def bind(self, **names: Any) -> "BindingContext":
        """Return a new context with ``names`` layered over the existing named arguments."""
        merged = dict(self.names)
        merged.update(names)
        return BindingContext(*self.scopes, data=self.data, names=merged)

    def with_data(self, data: Any) -> "BindingContext":
        """Return a new context using ``data`` as its data layer."""
        return BindingContext(*self.scopes, data=data, names=self.names)

    def freeze(self) -> "BindingContext":
        """Capture a snapshot of every layer merged into a single scope.

        Later changes to the caller's dictionaries are not visible through
        the snapshot. Mutable values themselves are shared, not copied.
        """
        return BindingContext(dict(self._chain))

    def namespace(self) -> Dict[str, Any]:
        """Build a fresh globals dict for a single ``eval`` call."""
        namespace = dict(self._chain)
        namespace.setdefault("__builtins__", builtins)
        return namespace
