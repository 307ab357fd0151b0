"""Shared pytest fixtures and test helpers for hkgshell tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from hkgshell import identity
from hkgshell.config.settings import ShellSettings
from hkgshell.plugins import hookimpl
from hkgshell.plugins.manager import ListenerManager
from hkgshell.shell import Shell

BUILD_ENV_VARS = (
    "BUILD_MINUTES",
    "GITHUB_SHA",
    "GIT_COMMIT",
    "GITHUB_ENV",
    "HKGSHELL_CONFIG",
)


class RecordingListener:
    """Front-end listener that records every event it receives."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str | None]] = []

    @hookimpl
    def on_frontend_event(self, event: str, payload: str | None) -> None:
        self.events.append((event, payload))


@pytest.fixture(autouse=True)
def _clean_build_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate every test from the host's build environment and baked state.

    Also moves CWD to a temp directory so no stray ``hkgshell.toml`` is
    discovered.
    """
    for name in BUILD_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(identity, "_baked", None)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def recorder() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def listeners(recorder: RecordingListener) -> ListenerManager:
    """ListenerManager with a recording listener registered."""
    manager = ListenerManager()
    manager.register_listener(recorder, name="recorder")
    return manager


@pytest.fixture
def shell(listeners: ListenerManager) -> Shell:
    """Shell on a desktop platform with a fixed build stamp."""
    return Shell(
        ShellSettings(),
        listeners=listeners,
        platform="linux",
        environ={"BUILD_MINUTES": "28401120", "GITHUB_SHA": "abc1234"},
    )
