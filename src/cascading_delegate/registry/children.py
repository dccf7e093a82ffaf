"""Ordered, position-indexed collection of child delegates."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class ChildRegistry:
    """Children keyed by dense integer positions ``0..n-1``.

    The registry is fixed once built. Replacing the children of a parent
    means building a new registry.
    """

    def __init__(self, entries: Iterable[tuple[int, Any]] = ()):
        by_position: dict[int, Any] = {}
        for position, child in entries:
            if position in by_position:
                raise ValueError(f"Duplicate child position: {position}")
            by_position[position] = child

        missing = sorted(set(range(len(by_position))) - set(by_position))
        if missing:
            extra = sorted(p for p in by_position if p not in range(len(by_position)))
            raise ValueError(
                f"Child positions must be dense from 0: missing {missing}, unexpected {extra}"
            )

        self._children: tuple[Any, ...] = tuple(by_position[p] for p in range(len(by_position)))

    @classmethod
    def from_sequence(cls, children: Iterable[Any]) -> ChildRegistry:
        """Build a registry where each child's position is its sequence index."""
        return cls(enumerate(children))

    def child_at(self, position: int) -> Any | None:
        """Return the child at ``position``, or None when there is none."""
        if 0 <= position < len(self._children):
            return self._children[position]
        return None

    def __getitem__(self, position: int) -> Any:
        """Return the child at ``position``.

        Raises:
            IndexError: If no child occupies ``position``.
        """
        if not 0 <= position < len(self._children):
            raise IndexError(f"No child at position {position} ({len(self._children)} children)")
        return self._children[position]

    def items(self) -> Iterator[tuple[int, Any]]:
        """Yield (position, child) in position order."""
        return iter(enumerate(self._children))

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._children)

    def __repr__(self) -> str:
        return f"ChildRegistry(size={len(self._children)})"
