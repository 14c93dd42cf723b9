from __future__ import annotations

import argparse
import sys
from typing import Sequence

from infra.cli_logging import cli_error, cli_print
from infra.logging_std import configure_logging, get_logger, log_kv
from infra.settings import load_settings
from kv import __version__
from kv.cli.commands import complete_cmd, delete_cmd, get_cmd, list_cmd, set_cmd
from kv.errors import KvError
from kv.paths import resolve_store_path


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="kv",
        description="Key:value store backed by a single JSON file.",
    )
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    sub = p.add_subparsers(dest="command", metavar="<command>")

    delete_cmd.register(sub)
    get_cmd.register(sub)
    list_cmd.register(sub)
    set_cmd.register(sub)
    complete_cmd.register(sub)

    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    fn = getattr(args, "_fn", None)
    if fn is None:
        cli_print("")
        return 0

    settings = load_settings()
    configure_logging(level=settings.log_level, log_format=settings.log_format)
    args.settings = settings
    args.store_path = resolve_store_path(settings)
    log_kv(get_logger("kv.cli"), "kv: dispatch", command=args.command, store=str(args.store_path))

    try:
        rc = fn(args)
        return 0 if rc is None else int(rc)

    except KvError as e:
        cli_error(str(e))
        return 1

    except KeyboardInterrupt:
        cli_error("kv: CANCELLED (KeyboardInterrupt)")
        return 130


def run() -> None:
    sys.exit(main())
