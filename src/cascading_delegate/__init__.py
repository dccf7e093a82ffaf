"""Cascading delegate: route table-view notifications to child delegates."""

from cascading_delegate.delegates import CascadingDelegate, RecordingDelegate
from cascading_delegate.dispatch.router import PropagatingDelegate
from cascading_delegate.index_path import IndexPath, PropagationMode
from cascading_delegate.kinds import NotificationKind

__all__ = [
    "CascadingDelegate",
    "IndexPath",
    "NotificationKind",
    "PropagatingDelegate",
    "PropagationMode",
    "RecordingDelegate",
]
