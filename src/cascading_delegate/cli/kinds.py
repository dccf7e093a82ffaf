"""Notification kind catalog CLI command."""

import argparse


def cmd_kinds(args: argparse.Namespace) -> int:
    from cascading_delegate.kinds import KINDS, handler_method, has_row_semantics, payload_fields

    print(f"{len(KINDS)} notification kinds:\n")
    for kind in KINDS:
        scope = "row+section" if has_row_semantics(kind) else "section only"
        fields = ", ".join(payload_fields(kind))
        print(f"  {kind.value:<28} {scope:<12} {handler_method(kind)}({fields})")
    return 0
