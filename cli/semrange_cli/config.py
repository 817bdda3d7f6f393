from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from semrange import parse

from .logging_ import LogLevel, parse_log_level

APP_NAME = "semrange"
CONFIG_FILENAME = "config.toml"
LOG_LEVEL_DEFAULT = LogLevel.WARN.value
ENV_LOG_LEVEL = "SEMRANGE_LOG_LEVEL"


class ConfigError(ValueError):
    """Config file cannot be read or a setting is invalid."""


@dataclass
class AppConfig:
    log_level: str | None = None
    upgrade_steps: list[str] = field(default_factory=list)


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(log_level=None, upgrade_steps=[])


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def normalize_log_level(raw: str | None) -> str:
    level = parse_log_level(raw)
    if level is None:
        raise ConfigError(f"Unknown log level: {raw!r}. Use one of: {', '.join(lv.value for lv in LogLevel)}")
    return level.value


def normalize_upgrade_steps(steps: list[str]) -> list[str]:
    bad = [s for s in steps if parse(s) is None]
    if bad:
        raise ConfigError(f"Not a version: {', '.join(bad)}")
    return list(steps)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return _prune_none(
        {
            "log_level": cfg.log_level,
            "upgrade_steps": list(cfg.upgrade_steps),
        }
    )


def _prune_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _prune_none(v) for k, v in value.items() if v is not None}
    return value


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    level = parse_log_level(str(data.get("log_level") or ""))
    if level is not None:
        cfg.log_level = level.value
    steps_raw = data.get("upgrade_steps") or []
    if isinstance(steps_raw, list):
        cfg.upgrade_steps = [s.strip() for s in steps_raw if isinstance(s, str) and s.strip()]
    return cfg


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return default_config()
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid config file {path}: {exc}") from exc
    return from_toml(data)


def resolve_log_level(cfg: AppConfig) -> str | None:
    """Environment override first, then the configured level (None when unset)."""
    env_value = os.getenv(ENV_LOG_LEVEL, "").strip()
    if parse_log_level(env_value) is not None:
        return env_value
    return cfg.log_level


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
