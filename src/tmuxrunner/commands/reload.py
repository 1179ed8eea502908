"""Reload command - re-read the configuration file."""

from ..app import app


@app.command(
    display="text",
    fastmcp={"type": "tool", "description": "Reload tmuxrunner configuration"},
)
def reload(state) -> str:
    """Re-read tmuxrunner.toml and show the active settings."""
    manager = state.runner.config_manager
    config = manager.reload()
    subtool = config.subtool_program if config.enable_subtool else "disabled"
    return f"Loaded {manager.path}: program={config.default_program}, sub-tool={subtool}"
