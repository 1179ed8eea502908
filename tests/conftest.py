from __future__ import annotations

from pathlib import Path

import pytest

from tmuxrunner.config import ConfigManager, CustomProgram, RunnerConfig

HOME = "/home/user"


@pytest.fixture()
def home() -> str:
    return HOME


@pytest.fixture()
def config() -> RunnerConfig:
    return RunnerConfig()


@pytest.fixture()
def custom_config() -> RunnerConfig:
    return RunnerConfig(
        default_program="custom",
        custom=CustomProgram(
            program="alacritty",
            attach_template="-e tmux attach-session -t %name",
            create_template="--working-directory %path -e tmux new-session -s %name",
        ),
    )


@pytest.fixture()
def config_file(tmp_path: Path) -> Path:
    return tmp_path / "tmuxrunner.toml"


@pytest.fixture()
def config_manager(config_file: Path) -> ConfigManager:
    return ConfigManager(config_file)
