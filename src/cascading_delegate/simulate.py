"""Replay a scripted sequence of notifications through a delegate tree.

A script file holds an ``events`` list. Each event is either a notification::

    - kind: will-display-cell
      row: 1
      section: 0

or a mode change applied to the root before later events::

    - mode: section
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from cascading_delegate.dispatch.router import PropagatingDelegate
from cascading_delegate.index_path import IndexPath, parse_mode
from cascading_delegate.kinds import (
    NotificationKind,
    handler_method,
    has_row_semantics,
    payload_fields,
    resolve_kind,
)


class Placeholder:
    """Stand-in for a view object the script cannot supply."""

    def __init__(self, role: str):
        self.role = role

    def __repr__(self) -> str:
        return f"<{self.role}>"


@dataclass
class DispatchOutcome:
    """What happened to one scripted notification."""

    kind: NotificationKind
    location: str
    mode: str
    receivers: list[str] = field(default_factory=list)

    @property
    def delivered(self) -> bool:
        return bool(self.receivers)


@dataclass
class SimulationResult:
    """Outcomes of a replayed script."""

    outcomes: list[DispatchOutcome] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def delivered(self) -> int:
        return sum(1 for o in self.outcomes if o.delivered)

    @property
    def dropped(self) -> int:
        return len(self.outcomes) - self.delivered

    def summary(self) -> str:
        lines = [
            f"Simulation: {len(self.outcomes)} notifications, "
            f"{self.delivered} delivered, {self.dropped} dropped",
        ]
        for o in self.outcomes:
            target = ", ".join(o.receivers) if o.receivers else "dropped"
            lines.append(f"  [{o.mode}] {o.kind.value} {o.location} -> {target}")
        if self.errors:
            lines.append(f"\nErrors: {len(self.errors)}")
            for e in self.errors:
                lines.append(f"  {e}")
        return "\n".join(lines)


def read_script(path: Path | str) -> list[dict]:
    """Read the ``events`` list from a script YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the YAML is malformed.
        ValueError: If the document has no ``events`` list.
    """
    script_path = Path(path)
    with open(script_path) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or not isinstance(data.get("events"), list):
        raise ValueError(f"Script at {script_path} must be a mapping with an 'events' list")

    return data["events"]


def _coordinate(kind: NotificationKind, event: dict, key: str) -> int:
    if key not in event:
        raise ValueError(f"{kind.value}: missing '{key}'")
    value = event[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{kind.value}: '{key}' must be an integer, got {value!r}")
    return value


def build_arguments(kind: NotificationKind, event: dict) -> tuple[tuple, str]:
    """Build the handler arguments for a scripted event.

    Returns:
        (args, location) where location is a printable coordinate.

    Raises:
        ValueError: If the event lacks a coordinate the kind needs, or a
            coordinate is not an integer.
    """
    section = _coordinate(kind, event, "section")
    if has_row_semantics(kind):
        coordinate: Any = IndexPath(row=_coordinate(kind, event, "row"), section=section)
        location = str(coordinate)
    else:
        coordinate = section
        location = f"(section={section})"

    args = []
    for name in payload_fields(kind):
        if name in ("index_path", "section"):
            args.append(coordinate)
        else:
            args.append(Placeholder(name))
    return tuple(args), location


def run_script(root: PropagatingDelegate, events: list[dict]) -> SimulationResult:
    """Deliver each scripted event to ``root`` and record who received it.

    Args:
        root: Root returned by ``registry.loader.build_tree``; receivers are
            read from the ``leaf_log`` it carries.
        events: Parsed script events.

    Returns:
        SimulationResult with one outcome per notification and any event errors.

    Raises:
        ValueError: If ``root`` was not built by ``build_tree``.
    """
    log = getattr(root, "leaf_log", None)
    if log is None:
        raise ValueError(f"{root!r} has no leaf_log; build it with build_tree()")
    result = SimulationResult()

    for number, event in enumerate(events, start=1):
        if not isinstance(event, dict):
            result.errors.append(f"event {number}: expected a mapping")
            continue
        try:
            if "kind" not in event:
                if "mode" not in event:
                    raise ValueError("needs 'kind' or 'mode'")
                root.propagation_mode = parse_mode(event["mode"])
                continue

            kind = resolve_kind(event["kind"])
            args, location = build_arguments(kind, event)
        except (TypeError, ValueError) as e:
            result.errors.append(f"event {number}: {e}")
            continue

        outcome = DispatchOutcome(kind=kind, location=location, mode=root.propagation_mode.value)
        before = len(log)
        getattr(root, handler_method(kind))(*args)
        outcome.receivers = [leaf.path() for leaf, _method, _args in log[before:]]
        result.outcomes.append(outcome)

    return result
