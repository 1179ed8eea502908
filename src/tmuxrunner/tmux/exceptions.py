"""Tmux-specific exceptions.

PUBLIC API:
  - TmuxError: Base exception for all tmux operations
  - TmuxNotRunningError: No tmux server or binary available
  - TmuxTimeoutError: Command did not finish in time
"""


class TmuxError(Exception):
    """Base exception for all tmux operations."""

    pass


class TmuxNotRunningError(TmuxError):
    """Raised when tmux is not installed or no server is running."""

    pass


class TmuxTimeoutError(TmuxError):
    """Raised when a tmux or sub-tool command exceeds its timeout."""

    pass
