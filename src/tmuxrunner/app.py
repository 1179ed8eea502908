"""tmuxrunner ReplKit2 application.

Exposes the launcher plugin as REPL commands and MCP tools, so queries can
be tried out and sessions launched without a launcher host.
"""

from dataclasses import dataclass, field

from replkit2 import App

from .runner import TmuxRunner
from .types import MatchCandidate


@dataclass
class TmuxRunnerState:
    """Application state for the runner.

    Attributes:
        runner: Plugin object answering queries.
        matches: Candidates of the last query, addressed by index in launch().
    """

    runner: TmuxRunner = field(default_factory=TmuxRunner)
    matches: list[MatchCandidate] = field(default_factory=list)


# Must be created before command imports for decorator registration
app = App(
    "tmuxrunner",
    TmuxRunnerState,
    uri_scheme="tmuxrunner",
    fastmcp={
        "description": "Attach to or create tmux sessions in a terminal",
        "tags": {"terminal", "tmux", "launcher"},
    },
)


# Command imports trigger @app.command decorator registration
from .commands import query  # noqa: E402, F401
from .commands import sessions  # noqa: E402, F401
from .commands import reload  # noqa: E402, F401
