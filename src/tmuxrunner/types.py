"""Type definitions for tmuxrunner - query in, launch command out.

A query is parsed once into a ParsedQuery, matched against the live session
snapshot into MatchCandidates, and the selected candidate becomes a
LaunchCommand. Nothing here holds state between queries.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


type SessionName = str  # e.g., "work" - tmux session name
type ProjectName = str  # e.g., "blog" - tmuxinator project name
type ProgramId = str  # Terminal emulator identifier, may be outside Terminal


class Terminal(str, Enum):
    """Terminal emulators with a known argument template."""

    KONSOLE = "konsole"
    YAKUAKE = "yakuake-session"
    TERMINATOR = "terminator"
    ST = "st"
    CUSTOM = "custom"

    @classmethod
    def lookup(cls, program: ProgramId) -> "Terminal | None":
        """Get the variant for a program identifier, None if unknown."""
        try:
            return cls(program)
        except ValueError:
            return None


class Action(str, Enum):
    """What a match does when selected."""

    ATTACH = "attach"
    NEW = "new"
    NEW_VIA_SUBTOOL = "subtool"


# Single-letter query flags selecting a terminal for one query
FLAG_ALIASES: dict[str, str] = {
    "k": Terminal.KONSOLE.value,
    "y": Terminal.YAKUAKE.value,
    "t": Terminal.TERMINATOR.value,
    "s": Terminal.ST.value,
    "c": Terminal.CUSTOM.value,
}


@dataclass(frozen=True)
class ParsedQuery:
    """Structured intent of one query.

    Attributes:
        filter_text: Text left for session matching after flag and sub-tool parsing.
        terminal_override: Terminal picked with a trailing flag, None for the default.
        display_suffix: Human readable flag annotation, e.g. " in konsole".
        subtool_mode: Whether the query started with the sub-tool trigger word.
        subtool_filter: Project name prefix, empty matches every project.
        subtool_args: Extra arguments passed through to the sub-tool.
        name: Session name for a new session.
        path_suffix: Start directory for a new session, as typed.
    """

    filter_text: str = ""
    terminal_override: ProgramId | None = None
    display_suffix: str = ""
    subtool_mode: bool = False
    subtool_filter: str | None = None
    subtool_args: str | None = None
    name: str = ""
    path_suffix: str | None = None

    @property
    def attach_key(self) -> str:
        """First whitespace-delimited token of the remaining text.

        Leading whitespace gives an empty key, which matches every session.
        """
        for index, char in enumerate(self.filter_text):
            if char.isspace():
                return self.filter_text[:index]
        return self.filter_text


@dataclass(frozen=True)
class MatchCandidate:
    """One selectable entry of the match list."""

    text: str
    relevance: float
    action: Action
    target: str
    program: ProgramId
    path: str | None = None  # Already resolved
    subtool_args: str | None = None


class LaunchCommand(NamedTuple):
    """Program and argument vector to spawn.

    Attributes:
        program: Executable name.
        args: Arguments, never containing empty strings.
    """

    program: str
    args: list[str]

    @property
    def display(self) -> str:
        """Command line for logs and REPL output."""
        return " ".join([self.program, *self.args])
