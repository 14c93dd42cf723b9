from __future__ import annotations

import logging
from pathlib import Path

import pytest

from infra.settings import KvSettings, load_settings


def test_defaults_with_empty_env(tmp_path: Path) -> None:
    s = load_settings(env={"HOME": str(tmp_path)})
    assert s.data_home is None
    assert s.home == tmp_path
    assert s.log_level == "WARNING"
    assert s.log_format == "text"
    assert s.atomic_write is False


def test_env_overrides(tmp_path: Path) -> None:
    s = load_settings(
        env={
            "XDG_DATA_HOME": str(tmp_path / "data"),
            "HOME": str(tmp_path),
            "KV_LOG_LEVEL": "debug",
            "KV_LOG_FORMAT": "json",
            "KV_ATOMIC_WRITE": "yes",
        }
    )
    assert s.data_home == tmp_path / "data"
    assert s.log_level == "debug"
    assert s.log_format == "json"
    assert s.atomic_write is True


def test_blank_env_values_are_ignored(tmp_path: Path) -> None:
    s = load_settings(env={"HOME": str(tmp_path), "XDG_DATA_HOME": "  "})
    assert s.data_home is None


def test_yaml_file_then_env(tmp_path: Path) -> None:
    cfg = tmp_path / "kv.yml"
    cfg.write_text("log_level: INFO\natomic_write: true\nlog_format: json\n", encoding="utf-8")

    s = load_settings(env={"KV_CONFIG": str(cfg), "HOME": str(tmp_path), "KV_LOG_FORMAT": "text"})
    assert s.log_level == "INFO"
    assert s.atomic_write is True
    assert s.log_format == "text"


def test_explicit_path_beats_kv_config(tmp_path: Path) -> None:
    a = tmp_path / "a.yml"
    a.write_text("log_level: ERROR\n", encoding="utf-8")
    b = tmp_path / "b.yml"
    b.write_text("log_level: INFO\n", encoding="utf-8")

    s = load_settings(path=a, env={"KV_CONFIG": str(b), "HOME": str(tmp_path)})
    assert s.log_level == "ERROR"


def test_missing_yaml_uses_defaults(tmp_path: Path) -> None:
    s = load_settings(path=tmp_path / "nope.yml", env={"HOME": str(tmp_path)})
    assert s == KvSettings(home=tmp_path)


def test_non_mapping_yaml_logs_error(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    cfg = tmp_path / "kv.yml"
    cfg.write_text("- a\n- b\n", encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="infra.settings"):
        s = load_settings(path=cfg, env={"HOME": str(tmp_path)})
    assert s.log_level == "WARNING"
    assert any("not a mapping" in m for m in caplog.messages)


def test_invalid_values_fall_back_but_keep_paths(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="infra.settings"):
        s = load_settings(
            env={"HOME": str(tmp_path), "XDG_DATA_HOME": str(tmp_path / "d"), "KV_LOG_FORMAT": "xml"}
        )
    assert s.log_format == "text"
    assert s.data_home == tmp_path / "d"
    assert any("Invalid config" in m for m in caplog.messages)


def test_dotenv_in_cwd_never_overrides_real_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("KV_LOG_LEVEL=ERROR\nKV_ATOMIC_WRITE=1\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("KV_LOG_LEVEL", "INFO")
    # setenv first so monkeypatch restores the variable .env is about to add
    monkeypatch.setenv("KV_ATOMIC_WRITE", "0")
    monkeypatch.delenv("KV_ATOMIC_WRITE")
    monkeypatch.delenv("KV_CONFIG", raising=False)

    s = load_settings()
    assert s.log_level == "INFO"
    assert s.atomic_write is True
