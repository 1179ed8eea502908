"""Shared error handling utilities for tmuxrunner commands.

Queries never fail - these helpers only cover the REPL surface, where a
command can be called with arguments that make no sense (e.g. launching an
entry that was never listed).

PUBLIC API:
  - table_error_response: Create error response for table display
  - string_error_response: Create error response for string display
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)


def table_error_response(message: str) -> list[dict[str, Any]]:
    """Create error response for table display commands.

    Args:
        message: The error message (will be logged)

    Returns:
        Empty list (tables show nothing on error)
    """
    logger.warning(f"Command failed: {message}")
    return []


def string_error_response(message: str) -> str:
    """Create error response for string display commands.

    Args:
        message: The error message to display

    Returns:
        Formatted error string
    """
    return f"Error: {message}"
