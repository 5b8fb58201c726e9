"""Settings for recent-file tracking and persistence.

Settings are read from a JSON config file and merged over the defaults.
Reading is defensive; validation of the merged values is strict.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "recentfiles"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_MAX_HISTORY = 10


class ConfigError(ValueError):
    """Raised when a setting has an unusable value."""


@dataclass(frozen=True)
class PersistentSettings:
    enabled: bool = False
    save_on_change: bool = True
    global_list: bool = False
    path: Path | None = None


@dataclass(frozen=True)
class Settings:
    max_history: int = DEFAULT_MAX_HISTORY
    ignore_patterns: tuple[str, ...] = ()
    persistent: PersistentSettings = field(default_factory=PersistentSettings)


def validate_max_history(value: object) -> int:
    """Return ``value`` as a capacity, raising ``ConfigError`` unless it is a positive int."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"max_history must be a positive integer, got {value!r}")
    if value <= 0:
        raise ConfigError(f"max_history must be >= 1, got {value}")
    return value


def _bool_setting(data: dict[str, object], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"persistent.{key} must be a boolean, got {value!r}")
    return value


def _ignore_patterns(value: object) -> tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        raise ConfigError(f"ignore_patterns must be a list of strings, got {value!r}")
    for pattern in value:
        if not isinstance(pattern, str):
            raise ConfigError(f"ignore_patterns entries must be strings, got {pattern!r}")
    return tuple(value)


def _persistent_settings(value: object) -> PersistentSettings:
    if not isinstance(value, dict):
        raise ConfigError(f"persistent must be an object, got {value!r}")
    defaults = PersistentSettings()
    raw_path = value.get("path")
    if raw_path is not None and (not isinstance(raw_path, str) or not raw_path):
        raise ConfigError(f"persistent.path must be a non-empty string, got {raw_path!r}")
    return PersistentSettings(
        enabled=_bool_setting(value, "enabled", defaults.enabled),
        save_on_change=_bool_setting(value, "save_on_change", defaults.save_on_change),
        global_list=_bool_setting(value, "global_list", defaults.global_list),
        path=Path(raw_path).expanduser() if raw_path else None,
    )


def settings_from_mapping(data: dict[str, object]) -> Settings:
    """Build validated settings from a user mapping merged over the defaults.

    Keys that are absent keep their default; unknown keys are ignored. A
    partial ``persistent`` object only overrides the flags it names.
    """
    defaults = Settings()
    max_history = validate_max_history(data.get("max_history", defaults.max_history))
    ignore_patterns = _ignore_patterns(data.get("ignore_patterns", list(defaults.ignore_patterns)))
    persistent = _persistent_settings(data.get("persistent", {}))
    return Settings(
        max_history=max_history,
        ignore_patterns=ignore_patterns,
        persistent=persistent,
    )


def load_config_file(path: Path | None = None) -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = CONFIG_PATH if path is None else path
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_settings(path: Path | None = None) -> Settings:
    """Read and validate settings from ``path`` (the user config file by default)."""
    return settings_from_mapping(load_config_file(path))
