"""Global configuration data structures and loading.

Provides immutable config data loaded from ~/.wtswitch/config.toml at the CLI
entry point. Missing file means defaults.
"""

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

import tomlkit

from wtswitch.core.constants import (
    DEFAULT_EDITOR,
    DEFAULT_NETWORK_TIMEOUT,
    DEFAULT_REMOTE,
    WORKTREES_DIR_NAME,
)

CONFIG_PATH_ENV_VAR = "WTS_CONFIG"

# Keys accepted in config.toml, in display order
CONFIG_KEYS = ("editor", "remote", "network_timeout")


@dataclass(frozen=True)
class WtsConfig:
    """Immutable configuration.

    worktrees_dir_name is not read from the config file; it is carried here so
    every component receives it explicitly instead of importing a constant.
    """

    editor: str = DEFAULT_EDITOR
    remote: str = DEFAULT_REMOTE
    network_timeout: int = DEFAULT_NETWORK_TIMEOUT
    worktrees_dir_name: str = WORKTREES_DIR_NAME

    @property
    def timeout_seconds(self) -> float | None:
        """Timeout for network operations, or None when disabled."""
        if self.network_timeout == 0:
            return None
        return float(self.network_timeout)


def config_path() -> Path:
    """Get the path to the config file.

    Honors the WTS_CONFIG environment variable, falling back to
    ~/.wtswitch/config.toml.
    """
    override = os.environ.get(CONFIG_PATH_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".wtswitch" / "config.toml"


def _parse_timeout(value: object, source: Path) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'network_timeout' must be an integer in {source}, got {value!r}")
    if value < 0:
        raise ValueError(f"'network_timeout' must not be negative in {source}, got {value}")
    return value


def _parse_str(data: dict, key: str, default: str, source: Path) -> str:
    value = data.get(key, default)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"'{key}' must be a non-empty string in {source}, got {value!r}")
    return value


def load_config(path: Path | None = None) -> WtsConfig:
    """Load config from ~/.wtswitch/config.toml.

    Args:
        path: Config file path (defaults to config_path())

    Returns:
        WtsConfig with loaded values, or defaults if the file does not exist

    Raises:
        ValueError: If the file is malformed or a value has the wrong type
    """
    cfg_path = path if path is not None else config_path()
    if not cfg_path.exists():
        return WtsConfig()

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {cfg_path}: {e}") from e

    return WtsConfig(
        editor=_parse_str(data, "editor", DEFAULT_EDITOR, cfg_path),
        remote=_parse_str(data, "remote", DEFAULT_REMOTE, cfg_path),
        network_timeout=_parse_timeout(
            data.get("network_timeout", DEFAULT_NETWORK_TIMEOUT), cfg_path
        ),
    )


def update_config_value(key: str, value: str, path: Path | None = None) -> WtsConfig:
    """Set a single key in the config file, preserving formatting.

    Creates the config directory and file if they don't exist.
    Uses tomlkit to preserve TOML formatting and comments.

    Args:
        key: One of CONFIG_KEYS
        value: Raw string value from the command line
        path: Config file path (defaults to config_path())

    Returns:
        The config as it reads after the update

    Raises:
        KeyError: If key is not a known config key
        ValueError: If value cannot be converted for key
    """
    if key not in CONFIG_KEYS:
        raise KeyError(key)

    cfg_path = path if path is not None else config_path()

    current = load_config(cfg_path)
    if key == "network_timeout":
        try:
            parsed: str | int = int(value)
        except ValueError as e:
            raise ValueError(f"'network_timeout' must be an integer, got {value!r}") from e
        if parsed < 0:
            raise ValueError(f"'network_timeout' must not be negative, got {parsed}")
    else:
        if not value.strip():
            raise ValueError(f"'{key}' must be a non-empty string")
        parsed = value
    updated = replace(current, **{key: parsed})

    if cfg_path.exists():
        doc = tomlkit.parse(cfg_path.read_text(encoding="utf-8"))
    else:
        doc = tomlkit.document()
        doc.add(tomlkit.comment("wtswitch configuration"))
    doc[key] = parsed

    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    cfg_path.write_text(tomlkit.dumps(doc), encoding="utf-8")
    return updated
