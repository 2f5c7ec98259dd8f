"""Configuration loading helpers for getver."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..errors import ConfigError
from .models import GlobalConfig

CONFIG_EXTENSIONS = (".yaml", ".yml", ".json")
CONFIG_FILENAME = "config.yaml"
HOME_ENV = "GETVER_HOME"


def _read_file(path: Path) -> dict:
    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(text) or {}
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Cannot parse configuration file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file must contain a mapping: {path}")
    return data


def _validate(payload: dict[str, Any], origin: str) -> GlobalConfig:
    try:
        return GlobalConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration ({origin}): {exc}") from exc


@dataclass(slots=True)
class ConfigLocator:
    """Resolve the getver home directory and the paths below it."""

    home: Path | None = None
    logs_dir: Path | None = None

    def __post_init__(self) -> None:
        env_home = os.environ.get(HOME_ENV)
        if self.home is not None:
            root = Path(self.home).expanduser()
        elif env_home:
            root = Path(env_home).expanduser()
        else:
            root = Path.home() / ".getver"
        self.home = root.resolve()
        self.logs_dir = (self.home / "logs").resolve()
        self.ensure_directories()

    def ensure_directories(self) -> None:
        for directory in (self.home, self.logs_dir):
            directory.mkdir(parents=True, exist_ok=True)

    def config_path(self) -> Path:
        """Return the first existing config file, defaulting to ``config.yaml``."""

        for suffix in CONFIG_EXTENSIONS:
            candidate = self.home / f"config{suffix}"
            if candidate.exists():
                return candidate
        return self.home / CONFIG_FILENAME


class ConfigRepository:
    """Repository encapsulating config IO and schema validation."""

    def __init__(self, locator: ConfigLocator | None = None) -> None:
        self.locator = locator or ConfigLocator()
        self._cache: GlobalConfig | None = None

    def load(self) -> GlobalConfig:
        if self._cache is not None:
            return self._cache
        path = self.locator.config_path()
        if path.exists():
            config = _validate(_read_file(path), str(path))
        else:
            config = GlobalConfig()
        self._cache = config
        return config

    def with_overrides(self, **overrides: Any) -> GlobalConfig:
        """Return the loaded config updated with non-``None`` overrides."""

        base = self.load().model_dump()
        base.update({key: value for key, value in overrides.items() if value is not None})
        return _validate(base, "command line")


__all__ = ["CONFIG_EXTENSIONS", "ConfigLocator", "ConfigRepository", "HOME_ENV"]
