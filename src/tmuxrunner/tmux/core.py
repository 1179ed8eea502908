"""Core tmux operations - shared utilities for all tmux modules.

PUBLIC API:
  - run_tmux: Execute tmux command and return result
  - run_command: Execute any command with a timeout
"""

import subprocess
from typing import List, Tuple

from .exceptions import TmuxError, TmuxNotRunningError, TmuxTimeoutError

DEFAULT_TIMEOUT = 1.0


def run_command(cmd: List[str], timeout: float = DEFAULT_TIMEOUT) -> Tuple[int, str, str]:
    """Run a command, return (returncode, stdout, stderr).

    Raises:
        TmuxNotRunningError: If the executable is missing or cannot be run.
        TmuxTimeoutError: If the command exceeds timeout.
        TmuxError: If the output is not valid UTF-8.
    """
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    except FileNotFoundError as e:
        raise TmuxNotRunningError(f"{cmd[0]} not found") from e
    except OSError as e:
        raise TmuxNotRunningError(f"Cannot run {cmd[0]}: {e}") from e
    except subprocess.TimeoutExpired as e:
        raise TmuxTimeoutError(f"{' '.join(cmd)} timed out after {timeout}s") from e
    except UnicodeDecodeError as e:
        raise TmuxError(f"{cmd[0]} printed undecodable output: {e}") from e
    return result.returncode, result.stdout, result.stderr


def run_tmux(args: List[str], timeout: float = DEFAULT_TIMEOUT) -> Tuple[int, str, str]:
    """Run tmux command, return (returncode, stdout, stderr)."""
    return run_command(["tmux"] + args, timeout=timeout)
