from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List

import deal

from infra.logging_std import log_kv
from kv import store
from kv.errors import AlreadyExistsError, InvalidDataError, NotFoundError, ParseError, StoreIOError

logger = logging.getLogger(__name__)

NO_KEYS_MESSAGE = "No keys found."


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _as_str(key: str, value: Any) -> str:
    # Values are only type-checked when read out, never on load.
    if not isinstance(value, str):
        raise InvalidDataError(f'Value for key "{key}" is not a string (found {_json_type(value)}).')
    return value


def _valid_key(key: Any) -> bool:
    return isinstance(key, str) and key != ""


@deal.pre(lambda path, key: _valid_key(key), message="key must be a non-empty string")
@deal.post(lambda result: isinstance(result, str), message="get_value must return str")
@deal.raises(StoreIOError, ParseError, InvalidDataError, NotFoundError)
def get_value(path: Path, key: str) -> str:
    data = store.load(path)
    if key not in data:
        raise NotFoundError(key)
    return _as_str(key, data[key])


@deal.pre(
    lambda path, key, value, force=False, **kw: _valid_key(key) and isinstance(value, str),
    message="key must be a non-empty string and value a string",
)
@deal.post(lambda result: isinstance(result, str), message="set_value must return str")
@deal.raises(AlreadyExistsError, StoreIOError)
def set_value(path: Path, key: str, value: str, force: bool = False, *, atomic: bool = False) -> str:
    """
    Store `value` under `key`.

    A missing or corrupt store file counts as empty here, so a corrupt file is
    replaced by a fresh single-entry store. get/delete report the corruption
    instead.
    """
    data = store.load_or_empty(path)
    if key in data and not force:
        raise AlreadyExistsError(key)

    data[key] = value
    store.save(path, data, atomic=atomic)
    log_kv(logger, "kv: set", key=key, forced=bool(force))
    return f'Key "{key}" set to value "{value}".'


@deal.pre(lambda path, key, **kw: _valid_key(key), message="key must be a non-empty string")
@deal.post(lambda result: isinstance(result, str), message="delete_value must return str")
@deal.raises(StoreIOError, ParseError, InvalidDataError, NotFoundError)
def delete_value(path: Path, key: str, *, atomic: bool = False) -> str:
    data = store.load(path)
    if key not in data:
        raise NotFoundError(key)

    del data[key]
    store.save(path, data, atomic=atomic)
    log_kv(logger, "kv: deleted", key=key)
    return f'Deleted key "{key}".'


def _lines(data: store.StoreData, sep: str) -> List[str]:
    return [f"{k}{sep}{_as_str(k, v)}" for k, v in data.items()]


@deal.post(lambda result: isinstance(result, str), message="list_entries must return str")
@deal.raises(InvalidDataError)
def list_entries(path: Path) -> str:
    """Human listing, `key -> value` per line. Load failures read as an empty store."""
    data = store.load_or_empty(path)
    if not data:
        return NO_KEYS_MESSAGE
    return "\n".join(_lines(data, " -> "))


@deal.post(lambda result: isinstance(result, str), message="complete_keys must return str")
@deal.raises(StoreIOError, ParseError, InvalidDataError)
def complete_keys(path: Path) -> str:
    """`key:value` per line for shell completion. Load failures propagate."""
    return "\n".join(_lines(store.load(path), ":"))
