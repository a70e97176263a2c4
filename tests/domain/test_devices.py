"""Tests for the simulated Light and Thermostat."""

from __future__ import annotations

import itertools

import pytest
from pydantic import ValidationError

from remotectl.domain.devices import DeviceStatus, Light, Thermostat


class TestLight:
    def test_starts_off(self) -> None:
        assert Light().is_on is False

    def test_turn_on(self, light: Light) -> None:
        light.turn_on()
        assert light.is_on is True

    def test_turn_off(self, light: Light) -> None:
        light.turn_on()
        light.turn_off()
        assert light.is_on is False

    @pytest.mark.parametrize("calls", list(itertools.product(["on", "off"], repeat=3)))
    def test_state_follows_last_call(self, calls: tuple[str, ...]) -> None:
        light = Light()
        for call in calls:
            if call == "on":
                light.turn_on()
            else:
                light.turn_off()
        assert light.is_on is (calls[-1] == "on")

    def test_status_messages(self, light: Light, statuses: list[DeviceStatus]) -> None:
        light.turn_on()
        light.turn_off()
        assert [s.message for s in statuses] == ["Light is ON", "Light is OFF"]
        assert statuses[0].device == "light"
        assert statuses[0].action == "turn_on"
        assert statuses[0].state == {"is_on": True}
        assert statuses[1].state == {"is_on": False}

    def test_reading_state_emits_nothing(self, light: Light, statuses: list[DeviceStatus]) -> None:
        _ = light.is_on
        assert statuses == []

    def test_no_listener(self) -> None:
        light = Light("porch")
        light.turn_on()
        assert light.is_on is True
        assert light.name == "porch"


class TestThermostat:
    def test_starts_at_zero(self) -> None:
        assert Thermostat().temperature == 0

    @pytest.mark.parametrize(("ups", "downs"), [(0, 0), (3, 1), (1, 4), (10, 10)])
    def test_net_change(self, ups: int, downs: int) -> None:
        thermostat = Thermostat()
        for _ in range(ups):
            thermostat.increase_temperature()
        for _ in range(downs):
            thermostat.decrease_temperature()
        assert thermostat.temperature == ups - downs

    def test_goes_negative(self, thermostat: Thermostat) -> None:
        thermostat.decrease_temperature()
        thermostat.decrease_temperature()
        assert thermostat.temperature == -2

    def test_status_messages(
        self, thermostat: Thermostat, statuses: list[DeviceStatus]
    ) -> None:
        thermostat.increase_temperature()
        thermostat.increase_temperature()
        thermostat.decrease_temperature()
        assert [s.message for s in statuses] == [
            "Thermostat temperature increased to 1",
            "Thermostat temperature increased to 2",
            "Thermostat temperature decreased to 1",
        ]
        assert statuses[-1].state == {"temperature": 1}

    def test_repr(self) -> None:
        assert repr(Thermostat("hall")) == "Thermostat(name='hall', state={'temperature': 0})"


class TestDeviceStatus:
    def test_frozen(self) -> None:
        status = DeviceStatus(device="light", action="turn_on", message="Light is ON")
        with pytest.raises(ValidationError):
            status.message = "changed"  # type: ignore[misc]
