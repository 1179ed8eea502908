from __future__ import annotations

from pathlib import Path

from tmuxrunner.config import ConfigManager
from tmuxrunner.runner import TmuxRunner
from tmuxrunner.types import Action


class FakeHost:
    """Collaborators standing in for tmux, tmuxinator and process launch."""

    def __init__(self, sessions=(), projects=(), installed=True):
        self.sessions = list(sessions)
        self.projects = list(projects)
        self.installed = installed
        self.spawned = []
        self.project_calls = 0

    def fetch_projects(self, program: str):
        self.project_calls += 1
        return self.projects

    def spawn(self, program: str, args) -> bool:
        self.spawned.append((program, list(args)))
        return True

    def runner(self, manager: ConfigManager) -> TmuxRunner:
        return TmuxRunner(
            manager,
            fetch_sessions=lambda: self.sessions,
            fetch_projects=self.fetch_projects,
            spawn=self.spawn,
            is_installed=lambda program: self.installed,
        )


def test_query_without_trigger_has_no_matches(config_manager: ConfigManager) -> None:
    runner = FakeHost(sessions=["work"]).runner(config_manager)
    runner.prepare()

    assert runner.match("work") == []


def test_attach_round_trip(config_manager: ConfigManager) -> None:
    host = FakeHost(sessions=["work", "workspace"])
    runner = host.runner(config_manager)
    runner.prepare()

    matches = runner.match("tmux work -s")
    assert [m.target for m in matches] == ["work", "workspace"]

    command = runner.run(matches[0])
    assert host.spawned == [("st", ["tmux", "attach-session", "-t", "work"])]
    assert command.program == "st"


def test_flag_only_query(config_manager: ConfigManager) -> None:
    runner = FakeHost().runner(config_manager)
    runner.prepare()

    matches = runner.match("tmux -k")
    assert len(matches) == 1
    assert matches[0].action is Action.NEW
    assert matches[0].target == ""
    assert matches[0].program == "konsole"


def test_subtool_round_trip(config_manager: ConfigManager) -> None:
    host = FakeHost(projects=["blog"])
    runner = host.runner(config_manager)
    runner.prepare()

    matches = runner.match("tmuxinator blog --debug -t")
    assert matches[0].action is Action.NEW_VIA_SUBTOOL

    runner.run(matches[0])
    assert host.spawned == [("terminator", ["-x", "tmuxinator", "blog", "--debug"])]


def test_missing_subtool_disables_projects(config_manager: ConfigManager) -> None:
    host = FakeHost(projects=["blog"], installed=False)
    runner = host.runner(config_manager)
    runner.prepare()

    assert runner.projects == ()
    assert host.project_calls == 0
    assert all(m.action is not Action.NEW_VIA_SUBTOOL for m in runner.match("tmuxinator"))


def test_prepare_picks_up_config_changes(config_file: Path, config_manager: ConfigManager) -> None:
    host = FakeHost()
    runner = host.runner(config_manager)
    runner.prepare()
    assert runner.match("tmux api")[0].program == "konsole"

    config_file.write_text('[runner]\nprogram = "st"\nenable_subtool = false\n', encoding="utf-8")
    runner.prepare()

    assert runner.match("tmux api")[0].program == "st"
    assert host.project_calls == 1


def test_new_session_with_path(config_manager: ConfigManager, monkeypatch) -> None:
    monkeypatch.setenv("HOME", "/home/user")
    host = FakeHost(sessions=["work"])
    runner = host.runner(config_manager)
    runner.prepare()

    matches = runner.match("tmux api ~/src")
    runner.run(matches[0])

    assert host.spawned == [("konsole", ["-e", "tmux", "new-session", "-s", "api", "-c", "/home/user/src"])]
