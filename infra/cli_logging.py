from __future__ import annotations

import sys
from typing import Any, TextIO


def _encodable(msg: str, stream: TextIO) -> str:
    # Consoles may not be UTF-8 (cp1252 on Windows): replace what they cannot show.
    enc = getattr(stream, "encoding", None) or "utf-8"
    return msg.encode(enc, errors="replace").decode(enc, errors="replace")


def cli_print(*args: Any, sep: str = " ", err: bool = False) -> None:
    """Command output: stdout, or stderr with err=True. Logging never goes here."""
    stream: TextIO = sys.stderr if err else sys.stdout
    msg = sep.join("" if a is None else str(a) for a in args)
    stream.write(_encodable(msg, stream) + "\n")
    if err:
        stream.flush()


def cli_error(*args: Any, sep: str = " ") -> None:
    cli_print(*args, sep=sep, err=True)
