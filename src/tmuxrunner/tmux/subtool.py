"""Project listing for the session manager sub-tool (tmuxinator).

PUBLIC API:
  - subtool_installed: Check if the sub-tool binary is on PATH
  - list_project_names: Get the sub-tool's project names
"""

import logging
import shutil
from typing import List

from .core import run_command
from .exceptions import TmuxError

logger = logging.getLogger(__name__)

LIST_TIMEOUT = 5.0


def subtool_installed(program: str) -> bool:
    """Check if the sub-tool binary is on PATH."""
    return shutil.which(program) is not None


def parse_project_list(output: str) -> List[str]:
    """Parse "<program> ls" output.

    The first line is a heading such as "tmuxinator projects:", project
    names follow separated by whitespace, possibly over several lines.
    """
    lines = output.splitlines()
    return [name for line in lines[1:] for name in line.split()]


def list_project_names(program: str = "tmuxinator") -> List[str]:
    """Get the sub-tool's project names.

    Args:
        program: Sub-tool executable.

    Returns:
        Project names, empty if the sub-tool is missing or fails.
    """
    try:
        code, out, err = run_command([program, "ls"], timeout=LIST_TIMEOUT)
    except TmuxError as e:
        logger.warning(f"Cannot list {program} projects: {e}")
        return []

    if code != 0:
        logger.warning(f"{program} ls exited {code}: {err.strip()}")
        return []

    projects = parse_project_list(out)
    logger.debug(f"Found {len(projects)} {program} projects")
    return projects
