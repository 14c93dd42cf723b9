from __future__ import annotations

import argparse

from infra.cli_logging import cli_print
from kv.ops import list_entries

DESCRIPTION = "Lists all key:value pairs."


def register(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("list", help=DESCRIPTION, description=DESCRIPTION)
    p.set_defaults(_fn=_run)


def _run(args: argparse.Namespace) -> int:
    cli_print(list_entries(args.store_path))
    return 0
