"""Launcher plugin for attaching to and creating tmux sessions.

Parses launcher queries like "tmux work -k" or "tmuxinator blog", matches
them against running sessions and tmuxinator projects, and builds the
terminal command for the selected entry.

PUBLIC API:
  - TmuxRunner: Plugin object (prepare, match, run)
  - parse_query: Query text to ParsedQuery
  - compute_matches: ParsedQuery to candidate list
  - build_command: Candidate to LaunchCommand
  - resolve_path: Start directory expansion
"""

from .launch import build_command
from .matching import compute_matches
from .paths import resolve_path
from .query import parse_query
from .runner import TmuxRunner

__version__ = "0.1.0"
__all__ = ["TmuxRunner", "parse_query", "compute_matches", "build_command", "resolve_path"]
