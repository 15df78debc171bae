"""Runtime settings: defaults, then an optional YAML file, then environment."""
from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from .exceptions import ConfigError


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = ".waybar-openweathermap.yaml"
ENV_PREFIX = "WAYBAR_OWM_"

# config-file key -> (dataclass field, environment variable)
_KEYS = {
    "base_url": ("base_url", f"{ENV_PREFIX}BASE_URL"),
    "timeout": ("timeout", f"{ENV_PREFIX}TIMEOUT"),
    "lang": ("lang", f"{ENV_PREFIX}LANG"),
    "timezone": ("timezone", f"{ENV_PREFIX}TIMEZONE"),
    "class": ("css_class", f"{ENV_PREFIX}CLASS"),
}


@dataclass(frozen=True)
class Settings:
    base_url: str = "https://api.openweathermap.org/data/2.5/weather"
    timeout: float = 10.0
    lang: str = "en"
    timezone: Optional[str] = None
    css_class: str = "weather"

    @property
    def tzinfo(self) -> Optional[ZoneInfo]:
        """The zone for sunrise/sunset, or ``None`` for the local zone."""
        if not self.timezone:
            return None
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ConfigError(f"Unknown timezone {self.timezone!r}") from exc

    @classmethod
    def load(
        cls,
        config_path: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
        home: Optional[Path] = None,
    ) -> "Settings":
        environ = os.environ if environ is None else environ
        settings = cls()

        path = _resolve_config_path(config_path, home)
        if path is not None:
            settings = settings._merge(load_config(path), source=str(path))

        overrides = {key: environ[env_name] for key, (_, env_name) in _KEYS.items() if environ.get(env_name)}
        if overrides:
            settings = settings._merge(overrides, source="environment")
        return settings

    def _merge(self, values: Mapping[str, Any], *, source: str) -> "Settings":
        changes = {}
        for key, value in values.items():
            if key not in _KEYS:
                logger.warning("Ignoring unknown setting %r from %s", key, source)
                continue
            field, _ = _KEYS[key]
            changes[field] = _coerce(key, value, source)
        return replace(self, **changes)


def load_config(path: Path) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    logger.warning("Using config file: %s", path)
    return data


def _resolve_config_path(config_path: Optional[str], home: Optional[Path]) -> Optional[Path]:
    if config_path:
        path = Path(config_path).expanduser()
        if not path.is_file():
            raise ConfigError(f"Config file {path} does not exist")
        return path
    path = (home or Path.home()) / DEFAULT_CONFIG_NAME
    if path.is_file():
        return path
    return None


def _coerce(key: str, value: Any, source: str) -> Any:
    if key == "timeout":
        if isinstance(value, bool):
            raise ConfigError(f"timeout from {source} must be a number, got {value!r}")
        try:
            timeout = float(value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"timeout from {source} must be a number, got {value!r}") from exc
        if not math.isfinite(timeout) or timeout <= 0:
            raise ConfigError(f"timeout from {source} must be a positive number, got {value!r}")
        return timeout
    if value is None or value == "":
        if key == "timezone":
            return None
        raise ConfigError(f"{key} from {source} must not be empty")
    # YAML 1.1 turns bare no/on/123 into bool or int; only accept real strings.
    if not isinstance(value, str):
        raise ConfigError(f"{key} from {source} must be a string, got {value!r}; quote it in the config file")
    return value


__all__ = ["Settings", "load_config", "DEFAULT_CONFIG_NAME", "ENV_PREFIX"]
