"""Live state commands - running sessions and sub-tool projects."""

from ..app import app
from ..errors import table_error_response


@app.command(
    display="table",
    headers=["Session", "Project"],
    fastmcp={"type": "tool", "description": "List running tmux sessions"},
)
def sessions(state) -> list[dict]:
    """List running tmux sessions."""
    state.runner.prepare()
    projects = set(state.runner.projects)
    return [
        {"Session": name, "Project": "yes" if name in projects else "-"}
        for name in state.runner.sessions
    ]


@app.command(
    display="table",
    headers=["Project", "Running"],
    fastmcp={"type": "tool", "description": "List tmuxinator projects"},
)
def projects(state) -> list[dict]:
    """List sub-tool projects and whether each one is running."""
    state.runner.prepare()
    if not state.runner.projects:
        program = state.runner.config.subtool_program
        return table_error_response(f"No {program} projects available")

    running = set(state.runner.sessions)
    return [
        {"Project": name, "Running": "yes" if name in running else "no"}
        for name in state.runner.projects
    ]
