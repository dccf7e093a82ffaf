"""Route notifications from a parent delegate to one of its children.

For each notification the parent:

1. reads its current propagation mode;
2. drops section-only kinds while in row mode;
3. drops coordinates whose selector component is out of range;
4. selects the child at that position;
5. drops the notification if the child does not handle the kind;
6. otherwise calls the child's handler with the original arguments.

Drops are silent: nothing is raised and nothing is returned.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from cascading_delegate.delegates import CascadingDelegate
from cascading_delegate.dispatch.capability import supports
from cascading_delegate.dispatch.selector import select
from cascading_delegate.dispatch.validator import is_valid
from cascading_delegate.index_path import IndexPath, PropagationMode, parse_mode
from cascading_delegate.kinds import NotificationKind, handler_method, has_row_semantics
from cascading_delegate.registry.children import ChildRegistry

logger = logging.getLogger(__name__)


class PropagatingDelegate(CascadingDelegate):
    """Parent delegate that forwards each notification to one child.

    Implements every kind in the catalog, so it can itself be registered as
    a child and notifications cascade down the tree.
    """

    def __init__(
        self,
        index: int = 0,
        child_delegates: Iterable[Any] = (),
        propagation_mode: PropagationMode | str = PropagationMode.ROW,
        name: str | None = None,
    ):
        super().__init__(index=index, name=name)
        self.propagation_mode = propagation_mode
        self.child_delegates = child_delegates

    @property
    def propagation_mode(self) -> PropagationMode:
        return self._propagation_mode

    @propagation_mode.setter
    def propagation_mode(self, mode: PropagationMode | str) -> None:
        self._propagation_mode = parse_mode(mode)

    @property
    def child_delegates(self) -> list[Any]:
        return list(self._registry)

    @child_delegates.setter
    def child_delegates(self, children: Iterable[Any]) -> None:
        registry = ChildRegistry.from_sequence(children)
        for position, child in registry.items():
            if isinstance(child, CascadingDelegate):
                child.index = position
                child.parent_delegate = self
        self._registry = registry

    @property
    def registry(self) -> ChildRegistry:
        return self._registry

    def dispatch(self, kind: NotificationKind, index_path: IndexPath, args: tuple) -> None:
        """Forward ``args`` to the child selected by ``index_path``, or drop.

        Args:
            kind: Notification kind being delivered.
            index_path: Coordinate used for selection. Section-only kinds pass
                ``IndexPath.for_section(section)``.
            args: Positional arguments for the child's handler, passed as-is.
        """
        mode = self._propagation_mode

        if mode is PropagationMode.ROW and not has_row_semantics(kind):
            logger.debug("%s: drop %s, section-only kind in row mode", self.name, kind.value)
            return

        if not is_valid(mode, index_path, len(self._registry)):
            logger.debug(
                "%s: drop %s at %s, out of range for %d children (%s mode)",
                self.name, kind.value, index_path, len(self._registry), mode.value,
            )
            return

        child = select(mode, index_path, self._registry)
        if not supports(child, kind):
            logger.debug("%s: drop %s, %r does not handle it", self.name, kind.value, child)
            return

        logger.debug("%s: forward %s at %s to %r", self.name, kind.value, index_path, child)
        getattr(child, handler_method(kind))(*args)

    def prepare(self, table_view: Any) -> None:
        """Hand ``table_view`` to every child that accepts it, in position order."""
        for child in self._registry:
            prepare = getattr(child, "prepare", None)
            if callable(prepare):
                prepare(table_view)

    # Cell notifications

    def will_display_cell(self, table_view: Any, cell: Any, index_path: IndexPath) -> None:
        self.dispatch(NotificationKind.WILL_DISPLAY_CELL, index_path, (table_view, cell, index_path))

    def did_end_displaying_cell(self, table_view: Any, cell: Any, index_path: IndexPath) -> None:
        self.dispatch(NotificationKind.DID_END_DISPLAYING_CELL, index_path, (table_view, cell, index_path))

    # Header and footer notifications

    def will_display_header_view(self, table_view: Any, view: Any, section: int) -> None:
        self.dispatch(
            NotificationKind.WILL_DISPLAY_HEADER,
            IndexPath.for_section(section),
            (table_view, view, section),
        )

    def will_display_footer_view(self, table_view: Any, view: Any, section: int) -> None:
        self.dispatch(
            NotificationKind.WILL_DISPLAY_FOOTER,
            IndexPath.for_section(section),
            (table_view, view, section),
        )

    def did_end_displaying_header_view(self, table_view: Any, view: Any, section: int) -> None:
        self.dispatch(
            NotificationKind.DID_END_DISPLAYING_HEADER,
            IndexPath.for_section(section),
            (table_view, view, section),
        )

    def did_end_displaying_footer_view(self, table_view: Any, view: Any, section: int) -> None:
        self.dispatch(
            NotificationKind.DID_END_DISPLAYING_FOOTER,
            IndexPath.for_section(section),
            (table_view, view, section),
        )

    # Row interaction notifications

    def accessory_button_tapped(self, table_view: Any, index_path: IndexPath) -> None:
        self.dispatch(NotificationKind.ACCESSORY_BUTTON_TAPPED, index_path, (table_view, index_path))

    def did_highlight_row(self, table_view: Any, index_path: IndexPath) -> None:
        self.dispatch(NotificationKind.DID_HIGHLIGHT_ROW, index_path, (table_view, index_path))

    def did_unhighlight_row(self, table_view: Any, index_path: IndexPath) -> None:
        self.dispatch(NotificationKind.DID_UNHIGHLIGHT_ROW, index_path, (table_view, index_path))

    def did_select_row(self, table_view: Any, index_path: IndexPath) -> None:
        self.dispatch(NotificationKind.DID_SELECT_ROW, index_path, (table_view, index_path))

    def did_deselect_row(self, table_view: Any, index_path: IndexPath) -> None:
        self.dispatch(NotificationKind.DID_DESELECT_ROW, index_path, (table_view, index_path))

    def will_begin_editing_row(self, table_view: Any, index_path: IndexPath) -> None:
        self.dispatch(NotificationKind.WILL_BEGIN_EDITING_ROW, index_path, (table_view, index_path))
