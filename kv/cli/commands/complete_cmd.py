from __future__ import annotations

import argparse

from infra.cli_logging import cli_print
from kv.ops import complete_keys


def register(sub: argparse._SubParsersAction) -> None:
    # No help=: argparse leaves these out of --help and out of complete-commands.
    p = sub.add_parser("complete-commands")
    p.set_defaults(_fn=_run_commands)

    p = sub.add_parser("complete-keys")
    p.set_defaults(_fn=_run_keys)


def _run_commands(args: argparse.Namespace) -> int:
    # Lazy import: kv.cli.main imports this module.
    from kv.cli.completion import complete_commands
    from kv.cli.main import build_parser

    cli_print(complete_commands(build_parser()))
    return 0


def _run_keys(args: argparse.Namespace) -> int:
    cli_print(complete_keys(args.store_path))
    return 0
