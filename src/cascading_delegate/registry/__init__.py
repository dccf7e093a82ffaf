"""Registry module — child positions and delegate-tree files."""

from cascading_delegate.registry.children import ChildRegistry

__all__ = ["ChildRegistry"]
