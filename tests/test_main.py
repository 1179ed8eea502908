from __future__ import annotations

import logging

import pytest

from tmuxrunner.__main__ import configure_logging


@pytest.fixture(autouse=True)
def restore_root_level():
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield
    root.setLevel(level)
    root.handlers[:] = handlers


def test_default_log_level_is_info() -> None:
    assert configure_logging(["tmuxrunner"]) == logging.INFO
    assert logging.getLogger().level == logging.INFO


def test_debug_flag_enables_debug_logging() -> None:
    assert configure_logging(["tmuxrunner", "--debug"]) == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG
