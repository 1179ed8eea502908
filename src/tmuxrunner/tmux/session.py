"""Session listing for tmux.

PUBLIC API:
  - list_session_names: Get names of all running tmux sessions
"""

import logging
from typing import List

from .core import run_tmux
from .exceptions import TmuxError

logger = logging.getLogger(__name__)


def list_session_names() -> List[str]:
    """Get names of all running tmux sessions.

    Returns:
        Session names in tmux order, empty if no server is running.
    """
    try:
        code, out, err = run_tmux(["list-sessions", "-F", "#{session_name}"])
    except TmuxError as e:
        logger.warning(f"Cannot list tmux sessions: {e}")
        return []

    if code != 0:
        # "no server running" is the normal case without sessions
        logger.debug(f"tmux list-sessions exited {code}: {err.strip()}")
        return []

    names = [line.strip() for line in out.splitlines() if line.strip()]
    logger.debug(f"Found {len(names)} tmux sessions")
    return names
