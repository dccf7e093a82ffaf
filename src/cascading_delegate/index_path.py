"""Coordinates and propagation modes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class IndexPath:
    """A (row, section) coordinate. Compared by value."""

    row: int
    section: int

    @classmethod
    def for_section(cls, section: int) -> IndexPath:
        """Coordinate for a section-only event; the row is a placeholder."""
        return cls(row=0, section=section)

    def __str__(self) -> str:
        return f"(row={self.row}, section={self.section})"


class PropagationMode(str, Enum):
    """Which coordinate component picks the child."""

    ROW = "row"
    SECTION = "section"


def parse_mode(value: str | PropagationMode) -> PropagationMode:
    """Parse a mode name ("row", "Section", ...) into a PropagationMode.

    Raises:
        ValueError: If the value is neither row nor section.
    """
    if isinstance(value, PropagationMode):
        return value
    try:
        return PropagationMode(str(value).strip().lower())
    except ValueError:
        raise ValueError(
            f"Invalid propagation mode: {value!r} (expected 'row' or 'section')"
        ) from None


def selector_component(mode: PropagationMode, index_path: IndexPath) -> int:
    """The coordinate component the given mode selects children by."""
    if mode is PropagationMode.ROW:
        return index_path.row
    return index_path.section
