"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from remotectl.config.logging import configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("remotectl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("remotectl").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("remotectl.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "remotectl.test"
        assert "timestamp" in parsed

    def test_device_debug_logs_are_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        from remotectl.domain.devices import Light

        configure_logging(verbose=True, log_json=True)
        Light().turn_on()

        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "light: Light is ON"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "remotectl.domain.devices"

    def test_quiet_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        from remotectl.domain.devices import Light

        configure_logging(verbose=False, log_json=True)
        Light().turn_on()
        assert capfd.readouterr().err == ""

    def test_service_logs_carry_op(self, capfd: pytest.CaptureFixture[str]) -> None:
        from remotectl.services.remote import RemoteService

        configure_logging(verbose=True, log_json=True)
        RemoteService().run_demo()

        lines = capfd.readouterr().err.strip().splitlines()
        device_lines = [
            json.loads(line)
            for line in lines
            if json.loads(line)["logger"] == "remotectl.domain.devices"
        ]
        assert len(device_lines) == 6
        assert {entry["op"] for entry in device_lines} == {"demo"}

    def test_op_unbound_after_service_call(self, capfd: pytest.CaptureFixture[str]) -> None:
        from remotectl.domain.devices import Light
        from remotectl.services.remote import RemoteService

        configure_logging(verbose=True, log_json=True)
        RemoteService().run_actions(["light-on"], batch=True)
        capfd.readouterr()

        Light().turn_on()
        parsed = json.loads(capfd.readouterr().err.strip())
        assert "op" not in parsed
