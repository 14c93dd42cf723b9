from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Literal, Mapping, Optional

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from infra.logging_std import get_logger

logger = get_logger(__name__)

_TRUE = {"1", "true", "yes", "y", "on"}

# env var -> settings field
_ENV_FIELDS = {
    "XDG_DATA_HOME": "data_home",
    "HOME": "home",
    "KV_LOG_LEVEL": "log_level",
    "KV_LOG_FORMAT": "log_format",
    "KV_ATOMIC_WRITE": "atomic_write",
}


class KvSettings(BaseModel):
    """
    Config de una invocación de `kv`.

    Prioridad: defaults < YAML ($KV_CONFIG) < variables de entorno.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    data_home: Optional[Path] = None
    home: Path = Field(default_factory=Path.home)
    log_level: str = "WARNING"
    log_format: Literal["text", "json"] = "text"
    atomic_write: bool = False


def _read_raw_yaml(path: Path) -> Dict[str, Any]:
    """Lee YAML de forma segura. Si truena, regresa dict vacío."""
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.debug("Config file not found, using defaults", extra={"extra_data": {"config_path": str(path)}})
        return {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        logger.error(
            "Error reading config file, using defaults",
            extra={"extra_data": {"config_path": str(path), "error": str(exc)}},
        )
        return {}

    if not isinstance(data, dict):
        logger.error(
            "Config YAML root is not a mapping, falling back to defaults",
            extra={"extra_data": {"config_path": str(path)}},
        )
        return {}
    return data


def _env_overrides(env: Mapping[str, str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for name, field in _ENV_FIELDS.items():
        raw = env.get(name)
        if raw is None or raw.strip() == "":
            continue
        if field == "atomic_write":
            out[field] = raw.strip().lower() in _TRUE
        else:
            out[field] = raw.strip()
    return out


def load_settings(path: Optional[Path] = None, env: Optional[Mapping[str, str]] = None) -> KvSettings:
    """
    Build settings from defaults, an optional YAML file and the environment.

    - Sin archivo → defaults.
    - Archivo mal formado o inválido → se ignora (se loguea el error).
    - `env=None` means the process environment, after loading a local `.env`
      (real environment variables always win over `.env`).
    """
    if env is None:
        load_dotenv(find_dotenv(usecwd=True), override=False)
        env = os.environ

    config_path = Path(path) if path is not None else None
    if config_path is None and env.get("KV_CONFIG"):
        config_path = Path(env["KV_CONFIG"])

    file_section = _read_raw_yaml(config_path) if config_path is not None else {}
    overrides = _env_overrides(env)

    try:
        return KvSettings(**{**file_section, **overrides})
    except ValidationError as exc:
        logger.error(
            "Invalid config, using defaults",
            extra={"extra_data": {"config_path": str(config_path), "error": str(exc)}},
        )

    # Paths always validate; keep them so the store does not move.
    paths = {k: v for k, v in overrides.items() if k in ("data_home", "home")}
    return KvSettings(**paths)
