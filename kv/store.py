"""
File-backed store: one JSON object, `"key": "value"` members.

Every call reads or rewrites the whole file. Nothing is cached between calls.

Read rules:
  - missing/unreadable file -> StoreIOError
  - not JSON                -> ParseError
  - JSON but not an object  -> InvalidDataError
Values are NOT type-checked on load; see kv.ops.

Write rules:
  - default: single overwrite of the file (not crash-safe).
  - atomic=True: tmp file + fsync + os.replace.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from infra.logging_std import log_kv
from infra.result import Err, Ok, Result
from kv.errors import InvalidDataError, KvError, ParseError, StoreIOError

logger = logging.getLogger(__name__)

StoreData = Dict[str, Any]


def read_store(path: Path) -> Result[StoreData, KvError]:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return Err(_io_error("read", p, exc))

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        return Err(ParseError(f"Could not parse {p}: {exc}"))

    if not isinstance(raw, dict):
        return Err(InvalidDataError("Data in file was not an object."))

    log_kv(logger, "store: loaded", level=logging.DEBUG, path=str(p), keys=len(raw))
    return Ok(raw)


def load(path: Path) -> StoreData:
    """Load or raise the KvError describing why the file could not be used."""
    return read_store(path).unwrap()


def load_or_empty(path: Path) -> StoreData:
    """Load, treating any failure (missing, unreadable, corrupt) as an empty store."""
    result = read_store(path)
    if isinstance(result, Err):
        log_kv(logger, "store: load failed, starting empty", path=str(path), error=str(result.error))
    return result.unwrap_or({})


def dumps(data: StoreData) -> str:
    return json.dumps(data, ensure_ascii=False, sort_keys=True, separators=(",", ":"))


def save(path: Path, data: StoreData, *, atomic: bool = False) -> None:
    p = Path(path)
    try:
        # Encode before opening: a value UTF-8 rejects must not truncate the file.
        payload = dumps(data).encode("utf-8")
        if atomic:
            _atomic_write(p, payload)
        else:
            p.write_bytes(payload)
    except (OSError, UnicodeEncodeError) as exc:
        raise _io_error("write", p, exc) from exc

    log_kv(logger, "store: saved", level=logging.DEBUG, path=str(p), keys=len(data), atomic=atomic)


def _atomic_write(p: Path, payload: bytes) -> None:
    tmp_path = p.with_suffix(p.suffix + ".tmp")
    try:
        with open(tmp_path, "wb") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        os.replace(str(tmp_path), str(p))
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise


def _io_error(action: str, p: Path, exc: Exception) -> StoreIOError:
    reason = getattr(exc, "strerror", None) or str(exc)
    return StoreIOError(f"Could not {action} {p}: {reason}")
