"""Dispatch CLI commands."""

import argparse

import yaml


def cmd_dispatch_simulate(args: argparse.Namespace) -> int:
    from cascading_delegate.registry.loader import build_tree, read_tree
    from cascading_delegate.simulate import read_script, run_script

    try:
        root = build_tree(read_tree(args.tree))
        events = read_script(args.script)
    except (OSError, yaml.YAMLError, ValueError) as e:
        print(f"ERROR: {e}")
        return 1

    if args.mode:
        root.propagation_mode = args.mode

    result = run_script(root, events)
    print(result.summary())
    return 1 if result.errors else 0
