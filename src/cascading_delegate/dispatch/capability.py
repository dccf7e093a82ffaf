"""Capability gate.

A child supports a notification kind when it defines the kind's handler
method. The delegate base class defines none of them, so a missing attribute
is the normal "unsupported" answer.
"""

from typing import Any

from cascading_delegate.kinds import KINDS, NotificationKind, handler_method


def supports(handler: Any, kind: NotificationKind) -> bool:
    """True iff ``handler`` has a callable handler method for ``kind``."""
    return callable(getattr(handler, handler_method(kind), None))


def supported_kinds(handler: Any) -> list[NotificationKind]:
    """All catalog kinds ``handler`` supports, in catalog order."""
    return [kind for kind in KINDS if supports(handler, kind)]
