"""Shared test fixtures for cascading-delegate."""

from pathlib import Path

import pytest

from cascading_delegate.delegates import RecordingDelegate, recording_delegate_class
from cascading_delegate.dispatch.router import PropagatingDelegate
from cascading_delegate.kinds import KINDS

FIXTURES = Path(__file__).parent / "fixtures"

BARE_INDEX = 0
COMPLETE_INDEX = 1

CompleteStub = recording_delegate_class(KINDS, class_name="CompleteStub")


class TableView:
    """Opaque stand-in for the widget sending notifications."""


class View:
    """Opaque stand-in for a cell, header, or footer view."""


@pytest.fixture
def children():
    return [
        RecordingDelegate(index=BARE_INDEX, name="bare"),
        CompleteStub(index=COMPLETE_INDEX, name="complete"),
    ]


@pytest.fixture
def parent(children):
    return PropagatingDelegate(index=0, child_delegates=children)


@pytest.fixture
def table_view():
    return TableView()


@pytest.fixture
def view():
    return View()
