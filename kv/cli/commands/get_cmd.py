from __future__ import annotations

import argparse

from infra.cli_logging import cli_print
from kv.cli.commands._args import key_arg
from kv.ops import get_value

DESCRIPTION = "Gets the value for a given key."


def register(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("get", help=DESCRIPTION, description=DESCRIPTION)
    p.add_argument("key", type=key_arg, help="The key of the value to retrieve.")
    p.set_defaults(_fn=_run)


def _run(args: argparse.Namespace) -> int:
    cli_print(get_value(args.store_path, args.key))
    return 0
