"""Pick the target child for a validated coordinate."""

from typing import Any

from cascading_delegate.index_path import IndexPath, PropagationMode, selector_component
from cascading_delegate.registry.children import ChildRegistry


def select(mode: PropagationMode, index_path: IndexPath, registry: ChildRegistry) -> Any:
    """Return the child at the selector component of ``index_path``.

    Must only be called after ``is_valid`` accepted the coordinate. The child
    itself may be any object, including None; the capability gate decides
    what happens to it.

    Raises:
        IndexError: If the coordinate was not validated first.
    """
    position = selector_component(mode, index_path)
    if not 0 <= position < len(registry):
        raise IndexError(
            f"No child at position {position} ({mode.value} mode, {len(registry)} children); "
            "coordinate must be validated before selection"
        )
    return registry[position]
