"""Launch command synthesis - terminal program and arguments per action.

Each known terminal has one attach and one create template; unknown
identifiers use the generic "-e tmux ..." form that konsole and most
emulators accept. The "custom" terminal takes its program and templates
from configuration.

PUBLIC API:
  - TerminalTemplate: Attach/create argument templates for one terminal
  - TEMPLATES: Known terminal templates
  - build_attach_command: Command attaching to a running session
  - build_create_command: Command creating a session, directly or via the sub-tool
  - build_command: Command for a selected match
"""

from typing import NamedTuple

from .config import RunnerConfig
from .paths import resolve_path
from .types import Action, LaunchCommand, MatchCandidate, ProgramId, Terminal

__all__ = ["TerminalTemplate", "TEMPLATES", "build_attach_command", "build_create_command", "build_command"]

TARGET = "{target}"


class TerminalTemplate(NamedTuple):
    """Argument templates, TARGET tokens are replaced by the session name."""

    attach: tuple[str, ...]
    create: tuple[str, ...]


FALLBACK_TEMPLATE = TerminalTemplate(
    attach=("-e", "tmux", "a", "-t", TARGET),
    create=("-e", "tmux", "new-session", "-s", TARGET),
)

TEMPLATES: dict[Terminal, TerminalTemplate] = {
    Terminal.KONSOLE: FALLBACK_TEMPLATE,
    Terminal.YAKUAKE: TerminalTemplate(
        attach=("-t", TARGET, "-e", "tmux", "attach-session", "-t", TARGET),
        create=("-t", TARGET, "-e", "tmux", "new-session", "-s", TARGET),
    ),
    Terminal.TERMINATOR: TerminalTemplate(
        attach=("-x", "tmux", "a", "-t", TARGET),
        create=("-x", "tmux", "new-session", "-s", TARGET),
    ),
    Terminal.ST: TerminalTemplate(
        attach=("tmux", "attach-session", "-t", TARGET),
        create=("tmux", "new-session", "-s", TARGET),
    ),
}


def _fill(template: tuple[str, ...], target: str) -> list[str]:
    return [target if token == TARGET else token for token in template]


def _expand_custom(template: str, target: str, path: str) -> list[str]:
    """Substitute %name and %path, then split into arguments."""
    return template.replace("%name", target).replace("%path", path).split()


def build_attach_command(
    program: ProgramId, target: str, config: RunnerConfig, home: str | None = None
) -> LaunchCommand:
    """Build the command attaching a terminal to a running session.

    Args:
        program: Terminal identifier.
        target: Session name.
        config: Configuration snapshot, used for the custom terminal.
        home: Home directory substituted for %path.

    Returns:
        LaunchCommand to spawn.
    """
    if Terminal.lookup(program) is Terminal.CUSTOM:
        custom = config.custom
        args = _expand_custom(custom.attach_template, target, resolve_path("", home=home))
        return LaunchCommand(custom.program, args)

    template = TEMPLATES.get(Terminal.lookup(program), FALLBACK_TEMPLATE)
    return LaunchCommand(program, [arg for arg in _fill(template.attach, target) if arg])


def build_create_command(
    program: ProgramId,
    target: str,
    action: Action,
    path: str | None,
    subtool_args: str | None,
    config: RunnerConfig,
    home: str | None = None,
) -> LaunchCommand:
    """Build the command opening a terminal on a new session.

    For the sub-tool the template is cut at its "tmux" token and the
    sub-tool invocation appended instead, so the terminal specific prefix
    is kept. An empty target leaves tmux to pick the session name.

    Args:
        program: Terminal identifier.
        target: Session or project name, empty for an unnamed session.
        action: Action.NEW or Action.NEW_VIA_SUBTOOL.
        path: Resolved start directory, None for the home directory.
        subtool_args: Extra whitespace separated sub-tool arguments.
        config: Configuration snapshot.
        home: Home directory, defaults to the user's.

    Returns:
        LaunchCommand to spawn.
    """
    start_dir = path or resolve_path("", home=home)

    if Terminal.lookup(program) is Terminal.CUSTOM:
        program = config.custom.program
        args = _expand_custom(config.custom.create_template, target, start_dir)
    else:
        template = TEMPLATES.get(Terminal.lookup(program), FALLBACK_TEMPLATE)
        args = _fill(template.create, target)
        args.extend(["-c", start_dir])

    if action is Action.NEW_VIA_SUBTOOL:
        # Without a "tmux" token nothing of the template is kept
        args = args[: args.index("tmux")] if "tmux" in args else []
        args.extend([config.subtool_program, target])
        args.extend((subtool_args or "").split())

    if not target:
        for flag in ("-s", "-t"):
            if flag in args:
                args.remove(flag)

    return LaunchCommand(program, [arg for arg in args if arg])


def build_command(match: MatchCandidate, config: RunnerConfig, home: str | None = None) -> LaunchCommand:
    """Build the command for a selected match."""
    if match.action is Action.ATTACH:
        return build_attach_command(match.program, match.target, config, home)
    return build_create_command(
        match.program, match.target, match.action, match.path, match.subtool_args, config, home
    )
