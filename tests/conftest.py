"""Shared pytest fixtures and test helpers for remotectl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pluggy
import pytest
from click.testing import CliRunner

from remotectl.domain.devices import DeviceStatus, Light, Thermostat

hookimpl = pluggy.HookimplMarker("remotectl")


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore logger state after each test.

    The CLI reconfigures logging on every invocation.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("remotectl")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no config overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` so no
    ``remotectl.toml`` above the test directory leaks in.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("REMOTECTL_CONFIG", str(tmp_path / "absent.toml"))


@pytest.fixture
def statuses() -> list[DeviceStatus]:
    """Collects every DeviceStatus emitted by the ``light``/``thermostat`` fixtures."""
    return []


@pytest.fixture
def light(statuses: list[DeviceStatus]) -> Light:
    return Light(on_status=statuses.append)


@pytest.fixture
def thermostat(statuses: list[DeviceStatus]) -> Thermostat:
    return Thermostat(on_status=statuses.append)


class RecordingPlugin:
    """Plugin that records every post_device_action call."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []

    @hookimpl
    def post_device_action(
        self,
        device: str,
        action: str,
        message: str,
        state: dict[str, Any],
    ) -> None:
        self.calls.append({"device": device, "action": action, "message": message, "state": state})


class FailingPlugin:
    """Plugin whose hook always raises."""

    @hookimpl
    def post_device_action(
        self,
        device: str,
        action: str,
        message: str,
        state: dict[str, Any],
    ) -> None:
        raise RuntimeError("boom")


@pytest.fixture
def recording_plugin() -> RecordingPlugin:
    return RecordingPlugin()


@pytest.fixture
def failing_plugin() -> FailingPlugin:
    return FailingPlugin()
