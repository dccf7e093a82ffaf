"""Delegate tree CLI commands."""

import argparse

import yaml


def cmd_tree_validate(args: argparse.Namespace) -> int:
    from cascading_delegate.registry.loader import read_tree, validate_tree

    try:
        data = read_tree(args.file)
    except (OSError, yaml.YAMLError, ValueError) as e:
        print(f"FAIL: {args.file}")
        print(f"  {e}")
        return 1

    ok, errors = validate_tree(data)
    if ok:
        print(f"PASS: {args.file}")
    else:
        print(f"FAIL: {args.file}")
        for e in errors:
            print(f"  {e}")
    return 0 if ok else 1


def cmd_tree_show(args: argparse.Namespace) -> int:
    from cascading_delegate.registry.loader import build_tree, describe_tree, read_tree

    try:
        root = build_tree(read_tree(args.file))
    except (OSError, yaml.YAMLError, ValueError) as e:
        print(f"ERROR: {e}")
        return 1

    for line in describe_tree(root):
        print(line)
    return 0
