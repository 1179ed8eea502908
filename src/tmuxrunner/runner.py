"""Launcher plugin binding - prepare, match, run.

The host calls prepare() when a query session starts, match() for every
typed query and run() for the selected entry. Live state is refreshed only
in prepare(); match() works on that snapshot.

PUBLIC API:
  - TmuxRunner: Plugin object for the host's query protocol
"""

import logging
from collections.abc import Callable, Sequence

from .config import ConfigManager, RunnerConfig, get_config_manager
from .launch import build_command
from .matching import compute_matches
from .query import parse_query, strip_trigger
from .tmux import list_project_names, list_session_names, spawn_detached, subtool_installed
from .types import LaunchCommand, MatchCandidate

logger = logging.getLogger(__name__)


class TmuxRunner:
    """Plugin object answering launcher queries for tmux sessions."""

    def __init__(
        self,
        config_manager: ConfigManager | None = None,
        fetch_sessions: Callable[[], Sequence[str]] = list_session_names,
        fetch_projects: Callable[[str], Sequence[str]] = list_project_names,
        spawn: Callable[[str, Sequence[str]], bool] = spawn_detached,
        is_installed: Callable[[str], bool] = subtool_installed,
    ):
        """Initialize TmuxRunner.

        Args:
            config_manager: Source of configuration snapshots, global one by default.
            fetch_sessions: Lists running session names.
            fetch_projects: Lists sub-tool project names for a sub-tool program.
            spawn: Starts a program detached, returns success.
            is_installed: Checks for the sub-tool program.
        """
        self.config_manager = config_manager or get_config_manager()
        self._fetch_sessions = fetch_sessions
        self._fetch_projects = fetch_projects
        self._spawn = spawn
        self._is_installed = is_installed
        self._missing_subtool: str | None = None
        self.sessions: tuple[str, ...] = ()
        self.projects: tuple[str, ...] = ()

    @property
    def config(self) -> RunnerConfig:
        return self.config_manager.config

    def _subtool_available(self, config: RunnerConfig) -> bool:
        if not config.enable_subtool:
            return False
        if self._is_installed(config.subtool_program):
            self._missing_subtool = None
            return True
        if self._missing_subtool != config.subtool_program:
            logger.warning(f"{config.subtool_program} is not installed - sub-tool matches disabled")
            self._missing_subtool = config.subtool_program
        return False

    def prepare(self) -> None:
        """Reload changed configuration and refresh the live snapshot."""
        self.config_manager.reload_if_changed()
        config = self.config
        self.sessions = tuple(self._fetch_sessions())
        if self._subtool_available(config):
            self.projects = tuple(self._fetch_projects(config.subtool_program))
        else:
            self.projects = ()
        logger.debug(f"Prepared {len(self.sessions)} sessions, {len(self.projects)} projects")

    def match(self, query: str) -> list[MatchCandidate]:
        """Candidates for a raw query, empty if it lacks the trigger word."""
        config = self.config
        term = strip_trigger(query, config.trigger)
        if term is None:
            return []

        parsed = parse_query(
            term,
            flags_enabled=config.enable_flags,
            subtool_enabled=config.enable_subtool and bool(self.projects),
            subtool_trigger=config.subtool_trigger,
            flag_aliases=config.flag_aliases,
        )
        return compute_matches(parsed, self.sessions, self.projects, config)

    def run(self, match: MatchCandidate) -> LaunchCommand:
        """Launch the terminal for a selected candidate.

        Returns:
            The command that was spawned.
        """
        command = build_command(match, self.config)
        if self._spawn(command.program, command.args):
            logger.info(f"Launched: {command.display}")
        return command
