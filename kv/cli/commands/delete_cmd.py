from __future__ import annotations

import argparse

from infra.cli_logging import cli_print
from kv.cli.commands._args import key_arg
from kv.ops import delete_value

DESCRIPTION = "Deletes key:value pairs."


def register(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("delete", help=DESCRIPTION, description=DESCRIPTION)
    p.add_argument("key", type=key_arg, help="The key of the key:value pair to delete.")
    p.set_defaults(_fn=_run)


def _run(args: argparse.Namespace) -> int:
    cli_print(delete_value(args.store_path, args.key, atomic=args.settings.atomic_write))
    return 0
