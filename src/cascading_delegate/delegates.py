"""Delegate base class and the recording leaf used by trees and tests."""

from __future__ import annotations

import weakref
from typing import Any, Iterable

from cascading_delegate.kinds import NotificationKind, handler_method


class CascadingDelegate:
    """Anything that can sit in a delegate tree.

    Subclasses opt in to a notification kind by defining its handler method
    (see ``kinds.KINDS``). The base class defines none of them.
    """

    def __init__(self, index: int = 0, name: str | None = None):
        self.index = index
        self.name = name or type(self).__name__
        self._parent_ref: weakref.ref | None = None

    @property
    def parent_delegate(self) -> CascadingDelegate | None:
        """The delegate this one is registered under, if it is still alive."""
        return self._parent_ref() if self._parent_ref is not None else None

    @parent_delegate.setter
    def parent_delegate(self, parent: CascadingDelegate | None) -> None:
        self._parent_ref = weakref.ref(parent) if parent is not None else None

    def path(self) -> str:
        """Slash-separated names from the root down to this delegate."""
        names = [self.name]
        parent = self.parent_delegate
        while parent is not None:
            names.append(parent.name)
            parent = parent.parent_delegate
        return "/".join(reversed(names))

    def prepare(self, table_view: Any) -> None:
        """Hook called once the table view is known. No-op by default."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, index={self.index})"


class RecordingDelegate(CascadingDelegate):
    """Leaf delegate that remembers what it was called with.

    A bare ``RecordingDelegate`` supports no kinds. Use
    ``recording_delegate_class`` to get a variant handling specific kinds.
    """

    def __init__(
        self,
        index: int = 0,
        name: str | None = None,
        log: list | None = None,
    ):
        super().__init__(index=index, name=name)
        self.latest_called_method: dict[str, tuple] = {}
        self.calls: list[tuple[str, tuple]] = []
        self.prepared_with: Any = None
        self._log = log

    def record(self, method: str, args: tuple) -> None:
        self.latest_called_method = {method: args}
        self.calls.append((method, args))
        if self._log is not None:
            self._log.append((self, method, args))

    def prepare(self, table_view: Any) -> None:
        self.prepared_with = table_view


def _recorder(method: str):
    def handler(self, *args):
        self.record(method, args)

    handler.__name__ = method
    return handler


def recording_delegate_class(
    kinds: Iterable[NotificationKind],
    class_name: str = "RecordingDelegate",
) -> type[RecordingDelegate]:
    """Build a ``RecordingDelegate`` subclass that handles exactly ``kinds``."""
    namespace = {handler_method(kind): _recorder(handler_method(kind)) for kind in kinds}
    return type(class_name, (RecordingDelegate,), namespace)
