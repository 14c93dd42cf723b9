from __future__ import annotations


class KvError(Exception):
    """Base error; str(err) is the message shown to the user."""


class StoreIOError(KvError):
    """Store file missing, unreadable or unwritable."""


class ParseError(KvError):
    """Store file is not valid JSON."""


class InvalidDataError(KvError):
    """Valid JSON, wrong shape: top level not an object, or a value that is not a string."""


class NotFoundError(KvError):
    def __init__(self, key: str) -> None:
        super().__init__(f'Key "{key}" not found.')
        self.key = key


class AlreadyExistsError(KvError):
    def __init__(self, key: str) -> None:
        super().__init__(f'Key "{key}" already present. (Use --force to overwrite.)')
        self.key = key
