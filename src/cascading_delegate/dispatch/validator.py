"""Bounds check on the selector component of a coordinate."""

from cascading_delegate.index_path import IndexPath, PropagationMode, selector_component


def is_valid(mode: PropagationMode, index_path: IndexPath, registry_size: int) -> bool:
    """Check whether ``index_path`` selects an existing child under ``mode``.

    Args:
        mode: Active propagation mode.
        index_path: Coordinate of the notification.
        registry_size: Number of registered children.

    Returns:
        True iff the selector component lies in ``0..registry_size-1``.
    """
    return 0 <= selector_component(mode, index_path) < registry_size
