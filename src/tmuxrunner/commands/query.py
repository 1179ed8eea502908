"""Query and launch commands - the launcher round trip from the REPL."""

from ..app import app
from ..errors import string_error_response


@app.command(
    display="table",
    headers=["#", "Match", "Action", "Relevance", "Program"],
    fastmcp={"type": "tool", "description": "List launcher matches for a query like 'tmux work -k'"},
)
def query(state, term: str) -> list[dict]:
    """Show the matches a launcher would list for a query."""
    state.runner.prepare()
    state.matches = state.runner.match(term)

    return [
        {
            "#": index,
            "Match": match.text,
            "Action": match.action.value,
            "Relevance": f"{match.relevance:.2f}",
            "Program": match.program,
        }
        for index, match in enumerate(state.matches)
    ]


@app.command(
    display="text",
    fastmcp={"type": "tool", "description": "Launch a match from the last query by index"},
)
def launch(state, index: int = 0) -> str:
    """Launch the terminal for a match of the last query."""
    if not state.matches:
        return string_error_response("No matches - run query() first")
    if not 0 <= index < len(state.matches):
        return string_error_response(f"No match #{index}, last query had {len(state.matches)}")

    command = state.runner.run(state.matches[index])
    return f"Launched: {command.display}"
