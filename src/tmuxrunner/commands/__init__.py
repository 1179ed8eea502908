"""tmuxrunner commands."""

from .query import query, launch
from .sessions import sessions, projects
from .reload import reload

__all__ = ["query", "launch", "sessions", "projects", "reload"]
