"""Tests for PluginManager — registration, discovery, and hook relay."""

from __future__ import annotations

from typing import Any

import pytest

from remotectl.plugins.builtins.console import ConsoleStatusPlugin
from remotectl.plugins.manager import PluginManager


class TestPluginManager:
    def test_hook_relay_accessible(self) -> None:
        pm = PluginManager()
        assert hasattr(pm.hook, "post_device_action")

    def test_register_plugin(self, recording_plugin: Any) -> None:
        pm = PluginManager()
        pm.register_plugin(recording_plugin, name="recorder")
        assert "recorder" in pm.list_plugin_names()
        assert recording_plugin in pm.get_plugins()

    def test_default_name_is_class_name(self, recording_plugin: Any) -> None:
        pm = PluginManager()
        pm.register_plugin(recording_plugin)
        assert pm.list_plugin_names() == ["RecordingPlugin"]

    def test_unregister(self, recording_plugin: Any) -> None:
        pm = PluginManager()
        pm.register_plugin(recording_plugin)
        pm.unregister(recording_plugin)
        assert pm.get_plugins() == []

    def test_hook_dispatch(self, recording_plugin: Any) -> None:
        pm = PluginManager()
        pm.register_plugin(recording_plugin)
        pm.hook.post_device_action(
            device="light", action="turn_on", message="Light is ON", state={"is_on": True}
        )
        assert recording_plugin.calls == [
            {
                "device": "light",
                "action": "turn_on",
                "message": "Light is ON",
                "state": {"is_on": True},
            }
        ]

    def test_discover_and_load(self, monkeypatch: pytest.MonkeyPatch) -> None:
        pm = PluginManager()
        groups: list[str] = []
        monkeypatch.setattr(pm._pm, "load_setuptools_entrypoints", groups.append)
        assert pm.is_loaded is False
        pm.discover_and_load()
        assert groups == ["remotectl.plugins"]
        assert pm.is_loaded is True

    def test_entry_point_class_is_instantiated(
        self, monkeypatch: pytest.MonkeyPatch, recording_plugin: Any
    ) -> None:
        pm = PluginManager()
        plugin_cls = type(recording_plugin)

        def fake_load(group: str) -> int:
            pm._pm.register(plugin_cls, name="from-entry-point")
            return 1

        monkeypatch.setattr(pm._pm, "load_setuptools_entrypoints", fake_load)
        pm.discover_and_load()
        [plugin] = pm.get_plugins()
        assert isinstance(plugin, plugin_cls)
        assert pm.list_plugin_names() == ["from-entry-point"]


class TestConsoleStatusPlugin:
    def test_echoes_message(self, capsys: pytest.CaptureFixture[str]) -> None:
        pm = PluginManager()
        pm.register_plugin(ConsoleStatusPlugin(), name="console")
        pm.hook.post_device_action(
            device="thermostat",
            action="increase_temperature",
            message="Thermostat temperature increased to 1",
            state={"temperature": 1},
        )
        assert capsys.readouterr().out == "Thermostat temperature increased to 1\n"
