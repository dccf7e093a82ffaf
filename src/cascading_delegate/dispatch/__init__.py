"""Dispatch module — validate, select, gate, and forward notifications."""

from cascading_delegate.dispatch.capability import supported_kinds, supports
from cascading_delegate.dispatch.router import PropagatingDelegate
from cascading_delegate.dispatch.selector import select
from cascading_delegate.dispatch.validator import is_valid

__all__ = ["PropagatingDelegate", "is_valid", "select", "supported_kinds", "supports"]
