"""Transformer registry with plugin discovery via entry points.

Built-in transformers are always available. Third-party packages can add
their own by registering classes in the ``strglue.transformers`` entry
point group.
"""

from importlib.metadata import entry_points
from typing import Dict, List, Type

from strglue.errors import TransformerError
from strglue.transformers.base import IdentityTransformer, Transformer
from strglue.transformers.collapse import CollapseTransformer
from strglue.transformers.color import ColorTransformer
from strglue.transformers.lookup import LookupTransformer
from strglue.transformers.safely import SafelyTransformer
from strglue.transformers.shell import ShellTransformer
from strglue.transformers.sprintf import SprintfTransformer
from strglue.transformers.vv import VariableValueTransformer

BUILTIN_TRANSFORMERS: Dict[str, Type[Transformer]] = {
    "identity": IdentityTransformer,
    "collapse": CollapseTransformer,
    "color": ColorTransformer,
    "lookup": LookupTransformer,
    "safely": SafelyTransformer,
    "shell": ShellTransformer,
    "sprintf": SprintfTransformer,
    "vv": VariableValueTransformer,
}

# Cache for discovered transformers
_transformer_cache: Dict[str, Type[Transformer]] = {}
_discovery_done: bool = False


def _discover_transformers() -> None:
    """Register built-ins and discover transformers from entry points.

    Entry points that fail to load are skipped, so a plugin with a missing
    optional dependency does not break the registry.
    """
    global _discovery_done

    if _discovery_done:
        return

    for name, transformer_class in BUILTIN_TRANSFORMERS.items():
        _transformer_cache.setdefault(name, transformer_class)

    for ep in entry_points(group="strglue.transformers"):
        try:
            transformer_class = ep.load()
        except Exception:
            continue
        if isinstance(transformer_class, type) and issubclass(
            transformer_class, Transformer
        ):
            _transformer_cache.setdefault(ep.name, transformer_class)

    _discovery_done = True


def get_transformer(name: str) -> Transformer:
    """Get a transformer instance by name, constructed with default arguments.

    Raises:
        TransformerError: If the transformer is not found.

    Example:
        >>> get_transformer("collapse").name
        'collapse'
    """
    _discover_transformers()

    if name not in _transformer_cache:
        available = ", ".join(sorted(_transformer_cache.keys()))
        raise TransformerError(
            f"Unknown transformer '{name}'. Available transformers: {available or 'none'}"
        )

    return _transformer_cache[name]()


def list_transformers() -> List[str]:
    """List all available transformer names, sorted."""
    _discover_transformers()
    return sorted(_transformer_cache.keys())


def register_transformer(name: str, transformer_class: Type[Transformer]) -> None:
    """Register a transformer programmatically.

    Args:
        name: The name to register the transformer under.
        transformer_class: The transformer class to register.

    Raises:
        ValueError: If transformer_class is not a subclass of Transformer.
    """
    if not isinstance(transformer_class, type) or not issubclass(
        transformer_class, Transformer
    ):
        raise ValueError(f"{transformer_class} must be a subclass of Transformer")

    _discover_transformers()
    _transformer_cache[name] = transformer_class


def clear_registry() -> None:
    """Clear the transformer registry.

    This is primarily useful for testing; built-ins come back on the next lookup.
    """
    global _discovery_done
    _transformer_cache.clear()
    _discovery_done = False
