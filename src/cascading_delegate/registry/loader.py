"""Read, validate, and build delegate trees from YAML files.

A tree file is a mapping::

    name: root
    mode: section            # optional, defaults to CASCADE_PROPAGATION_MODE
    children:
      - name: bare
        kinds: []
      - name: complete
        kinds: all
      - name: nested         # a child with children is itself a tree
        mode: row
        children:
          - name: cells
            kinds: [will-display-cell]

Leaves become recording delegates that handle exactly their listed kinds.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from cascading_delegate.config import default_propagation_mode
from cascading_delegate.delegates import CascadingDelegate, recording_delegate_class
from cascading_delegate.dispatch.capability import supported_kinds
from cascading_delegate.dispatch.router import PropagatingDelegate
from cascading_delegate.index_path import PropagationMode, parse_mode
from cascading_delegate.kinds import KINDS, NotificationKind, resolve_kind


def read_tree(path: Path | str) -> dict:
    """Read and parse a delegate-tree YAML file.

    Args:
        path: Path to the tree file.

    Returns:
        Parsed tree dict.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the YAML is malformed.
        ValueError: If the document is not a mapping.
    """
    tree_path = Path(path)
    with open(tree_path) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Delegate tree at {tree_path} is not a YAML mapping")

    return data


def leaf_kinds(node: dict) -> list[NotificationKind]:
    """Kinds a leaf node declares. ``kinds: all`` expands to the whole catalog."""
    kinds = node.get("kinds", []) or []
    if kinds == "all":
        return list(KINDS)
    return [resolve_kind(k) for k in kinds]


def validate_tree(data: dict) -> tuple[bool, list[str]]:
    """Validate the structure of a parsed delegate tree.

    Args:
        data: Parsed tree dict.

    Returns:
        (valid, errors) tuple.
    """
    errors: list[str] = []
    root = data.get("name")
    if root in (None, ""):
        root = "root"
    if "children" not in data:
        errors.append(f"{root}: missing 'children' (the root must be a propagating delegate)")
    _validate_node(data, str(root), errors)
    return len(errors) == 0, errors


def _validate_node(node: object, where: str, errors: list[str]) -> None:
    if not isinstance(node, dict):
        errors.append(f"{where}: expected a mapping, got {type(node).__name__}")
        return

    if "name" not in node or node["name"] in (None, ""):
        errors.append(f"{where}: missing 'name'")

    if "children" in node:
        if "kinds" in node:
            errors.append(f"{where}: a node cannot have both 'children' and 'kinds'")
        mode = node.get("mode")
        if mode is not None:
            try:
                parse_mode(mode)
            except ValueError as e:
                errors.append(f"{where}: {e}")
        children = node["children"]
        if not isinstance(children, list):
            errors.append(f"{where}: 'children' must be a list")
            return
        for position, child in enumerate(children):
            child_name = child.get("name") if isinstance(child, dict) else None
            if child_name in (None, ""):
                child_name = f"[{position}]"
            _validate_node(child, f"{where}/{child_name}", errors)
        return

    if "mode" in node:
        errors.append(f"{where}: 'mode' only applies to nodes with children")
    kinds = node.get("kinds", []) or []
    if kinds == "all":
        return
    if not isinstance(kinds, list):
        errors.append(f"{where}: 'kinds' must be a list or 'all'")
        return
    for kind in kinds:
        try:
            resolve_kind(kind)
        except ValueError as e:
            errors.append(f"{where}: {e}")


def build_tree(
    data: dict,
    log: list | None = None,
    default_mode: PropagationMode | None = None,
) -> PropagatingDelegate:
    """Build live delegates from a parsed tree.

    Args:
        data: Parsed tree dict (see module docstring).
        log: Shared list every leaf appends ``(leaf, method, args)`` to. A new
            list is used when omitted. Either way it is kept on the root as
            ``leaf_log``.
        default_mode: Mode for nodes that declare none. Defaults to the
            configured CASCADE_PROPAGATION_MODE.

    Returns:
        The root propagating delegate.

    Raises:
        ValueError: If the tree fails validation.
    """
    ok, errors = validate_tree(data)
    if not ok:
        raise ValueError("Invalid delegate tree:\n" + "\n".join(f"  {e}" for e in errors))

    mode = default_mode or default_propagation_mode()
    if log is None:
        log = []
    root = _build_node(data, mode, log)
    root.leaf_log = log
    return root


def _build_node(node: dict, default_mode: PropagationMode, log: list | None) -> CascadingDelegate:
    if "children" in node:
        children = [_build_node(child, default_mode, log) for child in node["children"]]
        return PropagatingDelegate(
            child_delegates=children,
            propagation_mode=node.get("mode") or default_mode,
            name=str(node["name"]),
        )

    cls = recording_delegate_class(leaf_kinds(node))
    return cls(name=str(node["name"]), log=log)


def describe_tree(delegate: CascadingDelegate, depth: int = 0) -> list[str]:
    """Render a built tree as indented text lines."""
    pad = "  " * depth
    if isinstance(delegate, PropagatingDelegate):
        lines = [
            f"{pad}[{delegate.index}] {delegate.name} "
            f"({delegate.propagation_mode.value} mode, {len(delegate.registry)} children)"
        ]
        for child in delegate.child_delegates:
            lines.extend(describe_tree(child, depth + 1))
        return lines

    kinds = [k.value for k in supported_kinds(delegate)]
    index = getattr(delegate, "index", "?")
    name = getattr(delegate, "name", type(delegate).__name__)
    return [f"{pad}[{index}] {name}: {', '.join(kinds) if kinds else 'no kinds'}"]
