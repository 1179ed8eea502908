"""Configuration management for tmuxrunner.

Loads tmuxrunner.toml into immutable RunnerConfig snapshots and reloads them
when the file changes.

PUBLIC API:
  - RunnerConfig: Resolved configuration snapshot
  - CustomProgram: Templates for the "custom" terminal
  - ConfigManager: Loads and reloads the snapshot
  - get_config_manager: Get or create the global config manager
"""

import logging
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Optional

from .paths import CONFIG_PATH
from .types import FLAG_ALIASES

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when the config file cannot be read or parsed."""

    pass


@dataclass(frozen=True)
class CustomProgram:
    """User supplied terminal for the "custom" identifier.

    Templates use %name for the session and %path for the start directory.
    """

    program: str = ""
    attach_template: str = ""
    create_template: str = ""


@dataclass(frozen=True)
class RunnerConfig:
    """Configuration snapshot consumed by the query core.

    Mappings are read-only views, a snapshot never changes once built.
    """

    trigger: str = "tmux"
    default_program: str = "konsole"
    enable_flags: bool = True
    enable_subtool: bool = True
    enable_new_by_partial_match: bool = False
    subtool_program: str = "tmuxinator"
    subtool_trigger: str = "inator"
    path_shortcuts: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    custom: CustomProgram = field(default_factory=CustomProgram)
    flag_aliases: Mapping[str, str] = field(default_factory=lambda: MappingProxyType(dict(FLAG_ALIASES)))


def _find_config_file() -> Path:
    """Get config path, honoring TMUXRUNNER_CONFIG."""
    override = os.environ.get("TMUXRUNNER_CONFIG")
    if override:
        return Path(override).expanduser()
    return CONFIG_PATH


def _load_config(path: Optional[Path] = None) -> dict:
    """Load raw configuration from file.

    Raises:
        ConfigError: If the file exists but cannot be read or parsed.
    """
    if path is None:
        path = _find_config_file()

    if not path.exists():
        return {}

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot load {path}: {e}") from e


def _table(data: dict, name: str) -> dict:
    value = data.get(name, {})
    if not isinstance(value, dict):
        logger.warning(f"Ignoring [{name}]: expected a table")
        return {}
    return value


def _read_bool(table: dict, key: str, default: bool) -> bool:
    value = table.get(key, default)
    if not isinstance(value, bool):
        logger.warning(f"Ignoring non-boolean value for {key}: {value!r}")
        return default
    return value


def _read_str(table: dict, key: str, default: str) -> str:
    value = table.get(key, default)
    if not isinstance(value, str):
        logger.warning(f"Ignoring non-string value for {key}: {value!r}")
        return default
    return value


def parse_config(data: dict) -> RunnerConfig:
    """Build a snapshot from raw TOML data, falling back to defaults per key.

    Args:
        data: Parsed TOML document.

    Returns:
        RunnerConfig with every missing or invalid entry at its default.
    """
    defaults = RunnerConfig()
    runner = _table(data, "runner")
    subtool = _table(data, "subtool")
    custom = _table(data, "custom")

    # Preserve file order, later shortcuts apply to earlier results
    shortcuts = {}
    for key, value in _table(data, "shortcuts").items():
        if isinstance(value, str):
            shortcuts[key] = value
        else:
            logger.warning(f"Ignoring shortcut {key!r}: replacement must be a string")

    return RunnerConfig(
        trigger=_read_str(runner, "trigger", defaults.trigger),
        default_program=_read_str(runner, "program", defaults.default_program),
        enable_flags=_read_bool(runner, "enable_flags", defaults.enable_flags),
        enable_subtool=_read_bool(runner, "enable_subtool", defaults.enable_subtool),
        enable_new_by_partial_match=_read_bool(
            runner, "new_session_on_partial_match", defaults.enable_new_by_partial_match
        ),
        subtool_program=_read_str(subtool, "program", defaults.subtool_program),
        subtool_trigger=_read_str(subtool, "trigger", defaults.subtool_trigger),
        path_shortcuts=MappingProxyType(shortcuts),
        custom=CustomProgram(
            program=_read_str(custom, "program", ""),
            attach_template=_read_str(custom, "attach", ""),
            create_template=_read_str(custom, "create", ""),
        ),
    )


class ConfigManager:
    """Manages configuration for tmuxrunner.

    Holds the current snapshot and swaps in a new one whenever the file's
    modification time changes. Snapshots themselves are never modified.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = path or _find_config_file()
        self._mtime: float | None = None
        self.config = self._read()

    def _stat_mtime(self) -> float | None:
        try:
            return self.path.stat().st_mtime
        except OSError:
            return None

    def _read(self) -> RunnerConfig:
        self._mtime = self._stat_mtime()
        try:
            data = _load_config(self.path)
        except ConfigError as e:
            logger.warning(f"{e} - using defaults")
            return RunnerConfig()
        return parse_config(data)

    def reload(self) -> RunnerConfig:
        """Re-read the file unconditionally."""
        self.config = self._read()
        logger.info(f"Loaded configuration from {self.path}")
        return self.config

    def reload_if_changed(self) -> bool:
        """Reload when the file was created, edited, replaced or removed.

        Returns:
            True if a new snapshot was loaded.
        """
        if self._stat_mtime() == self._mtime:
            return False
        self.reload()
        return True


# Global instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
