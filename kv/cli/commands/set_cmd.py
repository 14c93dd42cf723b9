from __future__ import annotations

import argparse

from infra.cli_logging import cli_print
from kv.cli.commands._args import key_arg
from kv.ops import set_value

DESCRIPTION = "Sets a value for a key."


def register(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("set", help=DESCRIPTION, description=DESCRIPTION)
    p.add_argument("key", type=key_arg, help="The key to set.")
    p.add_argument("value", help="The value of the key.")
    p.add_argument("-f", "--force", action="store_true", help="Overwrite value if key already exists.")
    p.set_defaults(_fn=_run)


def _run(args: argparse.Namespace) -> int:
    msg = set_value(
        args.store_path,
        args.key,
        args.value,
        bool(args.force),
        atomic=args.settings.atomic_write,
    )
    cli_print(msg)
    return 0
