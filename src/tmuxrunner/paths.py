"""Filesystem locations and start-directory resolution.

PUBLIC API:
  - CONFIG_DIR: Directory holding tmuxrunner.toml
  - CONFIG_PATH: Default config file location
  - resolve_path: Expand a typed path using shortcuts and home conventions
"""

import os
from collections.abc import Mapping
from pathlib import Path

__all__ = ["CONFIG_DIR", "CONFIG_PATH", "resolve_path"]

CONFIG_DIR = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config") / "tmuxrunner"
CONFIG_PATH = CONFIG_DIR / "tmuxrunner.toml"


def resolve_path(raw_path: str, shortcuts: Mapping[str, str] | None = None, home: str | None = None) -> str:
    """Expand a start directory typed into a query.

    Shortcuts are applied in order, each replacing the first occurrence of its
    key in the result of the previous ones. A leading "~" becomes the home
    directory and relative paths are taken relative to it. The filesystem is
    never consulted.

    Args:
        raw_path: Path as typed, may be empty.
        shortcuts: Ordered substring replacements.
        home: Home directory, defaults to the current user's.

    Returns:
        Absolute path string.
    """
    if home is None:
        home = str(Path.home())

    if not raw_path:
        return home

    path = raw_path
    for key, replacement in (shortcuts or {}).items():
        if key:
            path = path.replace(key, replacement, 1)

    if path.startswith("~"):
        return home + path[1:]
    if not path.startswith("/"):
        return f"{home}/{path}"
    return path
