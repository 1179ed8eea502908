"""Command line entry for trying tmuxrunner outside a launcher host.

The REPL runs the same prepare/match/run cycle a launcher would: query()
lists the matches for "tmux work -k", launch() opens the chosen one. With
--mcp the commands are served as MCP tools instead. --debug shows session
refreshes and the exact terminal command lines.
"""

import logging
import sys


def configure_logging(argv: list[str]) -> int:
    """Set up logging for the run, DEBUG with --debug, INFO otherwise.

    Returns:
        The configured level.
    """
    level = logging.DEBUG if "--debug" in argv else logging.INFO
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S", force=True
    )
    return level


def main():
    """Run tmuxrunner as REPL or MCP server based on command line arguments."""
    configure_logging(sys.argv)

    # Importing the app registers commands and builds the runner state
    from .app import app

    if "--mcp" in sys.argv:
        app.mcp.run()
    else:
        app.run(title="tmuxrunner - type query('tmux <name>') then launch(0)")


if __name__ == "__main__":
    main()
