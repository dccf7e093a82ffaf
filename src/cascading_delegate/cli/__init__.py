"""Command-line interface for cascading delegate trees.

Usage:
    cascade kinds
    cascade tree validate <file>
    cascade tree show <file>
    cascade dispatch simulate <tree> <script> [--mode row|section]
"""

import argparse
import logging
import sys

from cascading_delegate.cli.dispatch import cmd_dispatch_simulate
from cascading_delegate.cli.kinds import cmd_kinds
from cascading_delegate.cli.tree import cmd_tree_show, cmd_tree_validate
from cascading_delegate.config import log_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cascade",
        description="Inspect and exercise cascading delegate trees",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log every forward and drop (DEBUG)",
    )
    sub = parser.add_subparsers(dest="command")

    # kinds
    sub.add_parser("kinds", help="List supported notification kinds")

    # tree
    tree = sub.add_parser("tree", help="Delegate tree files")
    tree_sub = tree.add_subparsers(dest="subcommand")
    val = tree_sub.add_parser("validate", help="Validate a delegate tree file")
    val.add_argument("file", help="Path to delegate tree YAML")
    show = tree_sub.add_parser("show", help="Print a delegate tree")
    show.add_argument("file", help="Path to delegate tree YAML")

    # dispatch
    dis = sub.add_parser("dispatch", help="Dispatch operations")
    dis_sub = dis.add_subparsers(dest="subcommand")
    sim = dis_sub.add_parser(
        "simulate", help="Replay a notification script through a tree",
    )
    sim.add_argument("tree", help="Path to delegate tree YAML")
    sim.add_argument("script", help="Path to notification script YAML")
    sim.add_argument(
        "--mode", default=None, choices=["row", "section"],
        help="Override the root propagation mode",
    )

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    try:
        level = logging.DEBUG if args.verbose else log_level()
    except ValueError as e:
        print(f"ERROR: {e}")
        return 1
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        ("tree", "validate"): cmd_tree_validate,
        ("tree", "show"): cmd_tree_show,
        ("dispatch", "simulate"): cmd_dispatch_simulate,
    }

    # Handle top-level commands (no subcommand)
    if args.command == "kinds":
        return cmd_kinds(args)

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if handler:
        return handler(args)

    parser.parse_args([args.command, "--help"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
