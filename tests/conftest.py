from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

# Hypothesis puede volverse "flaky" por velocidad (CPU load, disco lento).
# Lo suprimimos para que la suite sea estable.
settings.register_profile(
    "kv_stable",
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,  # cada ejemplo toca disco
)

settings.load_profile("kv_stable")

_KV_ENV = ("KV_CONFIG", "KV_LOG_LEVEL", "KV_LOG_FORMAT", "KV_ATOMIC_WRITE")


@pytest.fixture
def store_file(tmp_path: Path) -> Path:
    """Path of a store file that does not exist yet."""
    return tmp_path / "kv.json"


@pytest.fixture
def kv_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the CLI at tmp_path/data/kv.json; returns that path."""
    data_home = tmp_path / "data"
    data_home.mkdir()
    home = tmp_path / "home"
    home.mkdir()

    monkeypatch.setenv("XDG_DATA_HOME", str(data_home))
    monkeypatch.setenv("HOME", str(home))
    for name in _KV_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return data_home / "kv.json"
