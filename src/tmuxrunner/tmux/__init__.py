"""External tmux collaborators - live state in, processes out.

PUBLIC API:
  - run_tmux: Run tmux command and return result
  - list_session_names: Names of running sessions
  - subtool_installed: Check if the sub-tool binary exists
  - list_project_names: Sub-tool project names
  - spawn_detached: Fire-and-forget process launch
  - TmuxError: Base exception for tmux operations
"""

from .core import run_tmux
from .exceptions import TmuxError, TmuxNotRunningError, TmuxTimeoutError
from .session import list_session_names
from .spawn import spawn_detached
from .subtool import list_project_names, subtool_installed

__all__ = [
    "run_tmux",
    "list_session_names",
    "subtool_installed",
    "list_project_names",
    "spawn_detached",
    "TmuxError",
    "TmuxNotRunningError",
    "TmuxTimeoutError",
]
