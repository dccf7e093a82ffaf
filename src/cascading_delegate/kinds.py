"""Notification kind catalog — single source of truth.

Every kind a propagating delegate understands is declared here, together
with the child method it is forwarded to, whether the kind carries a row,
and the shape of its payload. No other module should hard-code method names.
"""

from __future__ import annotations

from enum import Enum


class NotificationKind(str, Enum):
    WILL_DISPLAY_CELL = "will_display_cell"
    WILL_DISPLAY_HEADER = "will_display_header"
    WILL_DISPLAY_FOOTER = "will_display_footer"
    DID_END_DISPLAYING_CELL = "did_end_displaying_cell"
    DID_END_DISPLAYING_HEADER = "did_end_displaying_header"
    DID_END_DISPLAYING_FOOTER = "did_end_displaying_footer"
    ACCESSORY_BUTTON_TAPPED = "accessory_button_tapped"
    DID_HIGHLIGHT_ROW = "did_highlight_row"
    DID_UNHIGHLIGHT_ROW = "did_unhighlight_row"
    DID_SELECT_ROW = "did_select_row"
    DID_DESELECT_ROW = "did_deselect_row"
    WILL_BEGIN_EDITING_ROW = "will_begin_editing_row"


_CELL = ("table_view", "cell", "index_path")
_SUPPLEMENTARY = ("table_view", "view", "section")
_ROW = ("table_view", "index_path")

# Each kind: handler method on the child, row semantics, payload field names
KINDS: dict[NotificationKind, dict] = {
    NotificationKind.WILL_DISPLAY_CELL:         {"method": "will_display_cell",              "rows": True,  "payload": _CELL},
    NotificationKind.WILL_DISPLAY_HEADER:       {"method": "will_display_header_view",       "rows": False, "payload": _SUPPLEMENTARY},
    NotificationKind.WILL_DISPLAY_FOOTER:       {"method": "will_display_footer_view",       "rows": False, "payload": _SUPPLEMENTARY},
    NotificationKind.DID_END_DISPLAYING_CELL:   {"method": "did_end_displaying_cell",        "rows": True,  "payload": _CELL},
    NotificationKind.DID_END_DISPLAYING_HEADER: {"method": "did_end_displaying_header_view", "rows": False, "payload": _SUPPLEMENTARY},
    NotificationKind.DID_END_DISPLAYING_FOOTER: {"method": "did_end_displaying_footer_view", "rows": False, "payload": _SUPPLEMENTARY},
    NotificationKind.ACCESSORY_BUTTON_TAPPED:   {"method": "accessory_button_tapped",        "rows": True,  "payload": _ROW},
    NotificationKind.DID_HIGHLIGHT_ROW:         {"method": "did_highlight_row",              "rows": True,  "payload": _ROW},
    NotificationKind.DID_UNHIGHLIGHT_ROW:       {"method": "did_unhighlight_row",            "rows": True,  "payload": _ROW},
    NotificationKind.DID_SELECT_ROW:            {"method": "did_select_row",                 "rows": True,  "payload": _ROW},
    NotificationKind.DID_DESELECT_ROW:          {"method": "did_deselect_row",               "rows": True,  "payload": _ROW},
    NotificationKind.WILL_BEGIN_EDITING_ROW:    {"method": "will_begin_editing_row",         "rows": True,  "payload": _ROW},
}


def resolve_kind(name: str | NotificationKind) -> NotificationKind:
    """Resolve a kind name to its catalog entry.

    Accepts the enum itself, its value ("will_display_cell"), or the dashed
    spelling used in YAML files ("will-display-cell").

    Raises:
        ValueError: If the name is not in the catalog.
    """
    if isinstance(name, NotificationKind):
        return name
    normalized = str(name).strip().lower().replace("-", "_")
    try:
        return NotificationKind(normalized)
    except ValueError:
        raise ValueError(f"Unknown notification kind: {name!r}") from None


def handler_method(kind: NotificationKind) -> str:
    """Name of the child method a kind is forwarded to."""
    return KINDS[kind]["method"]


def has_row_semantics(kind: NotificationKind) -> bool:
    """True for kinds addressed by (row, section); False for section-only kinds."""
    return KINDS[kind]["rows"]


def payload_fields(kind: NotificationKind) -> tuple[str, ...]:
    """Positional argument names the child method receives for a kind."""
    return KINDS[kind]["payload"]


def section_only_kinds() -> list[NotificationKind]:
    """Kinds that carry a section but no row (headers and footers)."""
    return [k for k, v in KINDS.items() if not v["rows"]]
