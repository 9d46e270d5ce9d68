"""Shared pytest fixtures for rangezip tests."""

from __future__ import annotations

from pathlib import Path
import logging
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast in-process tests")
    config.addinivalue_line("markers", "integration: tests that drive the CLI end to end")


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def _clear_settings_env(monkeypatch: pytest.MonkeyPatch):
    from rangezip.config import MAX_RUN_LENGTH_ENV

    monkeypatch.delenv(MAX_RUN_LENGTH_ENV, raising=False)


@pytest.fixture
def mixed_chain():
    from rangezip.range import NumberRange, Range

    return (
        Range()
        .append_step(1)
        .append_step(10)
        .append_stop(-17)
        .append_stop(2, [0, 1, 34231])
        .append_stop(2, NumberRange(1, 10))
        .append_step(21)
        .append_step(30)
    )
