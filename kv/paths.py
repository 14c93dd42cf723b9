from __future__ import annotations

from pathlib import Path
from typing import Optional

from infra.settings import KvSettings

STORE_FILENAME = "kv.json"
HOME_FILENAME = ".kv.json"


def _is_dir(p: Path) -> bool:
    try:
        return p.is_dir()
    except OSError:
        return False


def store_path(data_home: Optional[Path], home: Path) -> Path:
    """<data_home>/kv.json when data_home is an existing directory, else <home>/.kv.json."""
    if data_home is not None and _is_dir(Path(data_home)):
        return Path(data_home) / STORE_FILENAME
    return Path(home) / HOME_FILENAME


def resolve_store_path(settings: KvSettings) -> Path:
    return store_path(settings.data_home, settings.home)
