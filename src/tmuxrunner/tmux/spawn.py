"""Detached process launch for terminal emulators.

PUBLIC API:
  - spawn_detached: Start a program without waiting for it
"""

import logging
import subprocess
from typing import Sequence

logger = logging.getLogger(__name__)


def spawn_detached(program: str, args: Sequence[str]) -> bool:
    """Start a program in its own session, detached from our stdio.

    Args:
        program: Executable name or path.
        args: Arguments.

    Returns:
        True if the process was started.
    """
    if not program:
        logger.warning("No program configured - nothing to launch")
        return False

    try:
        subprocess.Popen(
            [program, *args],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        logger.warning(f"Failed to launch {program}: {e}")
        return False
    return True
