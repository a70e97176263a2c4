"""Simulated receivers: a light and a thermostat.

Each device owns its state and mutates it only through its own
operations.  Every mutation produces a human-readable status message
that is handed to the device's status listener (if any) as a
:class:`DeviceStatus`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class DeviceStatus(BaseModel):
    """Status notification emitted after a device state change."""

    model_config = {"frozen": True}

    device: str
    action: str
    message: str
    state: dict[str, Any] = Field(default_factory=dict)


StatusListener = Callable[[DeviceStatus], None]


class Device:
    """Base for stateful receivers.

    Args:
        name: Identifier reported in status notifications.
        on_status: Called with a :class:`DeviceStatus` after every
            state change.  ``None`` means nobody is listening.
    """

    def __init__(self, name: str, *, on_status: StatusListener | None = None) -> None:
        self.name = name
        self.on_status = on_status

    def snapshot(self) -> dict[str, Any]:
        """Return a copy of the device state."""
        return {}

    def _announce(self, action: str, message: str) -> None:
        status = DeviceStatus(
            device=self.name,
            action=action,
            message=message,
            state=self.snapshot(),
        )
        logger.debug("%s: %s", self.name, message)
        if self.on_status is not None:
            self.on_status(status)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, state={self.snapshot()!r})"


class Light(Device):
    """On/off light.  Starts switched off."""

    def __init__(self, name: str = "light", *, on_status: StatusListener | None = None) -> None:
        super().__init__(name, on_status=on_status)
        self._on = False

    @property
    def is_on(self) -> bool:
        return self._on

    def turn_on(self) -> None:
        self._on = True
        self._announce("turn_on", "Light is ON")

    def turn_off(self) -> None:
        self._on = False
        self._announce("turn_off", "Light is OFF")

    def snapshot(self) -> dict[str, Any]:
        return {"is_on": self._on}


class Thermostat(Device):
    """Integer thermostat moved one degree at a time.

    No bounds are enforced: the temperature may go arbitrarily high or
    below zero.
    """

    def __init__(
        self, name: str = "thermostat", *, on_status: StatusListener | None = None
    ) -> None:
        super().__init__(name, on_status=on_status)
        self._temperature = 0

    @property
    def temperature(self) -> int:
        return self._temperature

    def increase_temperature(self) -> None:
        self._temperature += 1
        self._announce(
            "increase_temperature",
            f"Thermostat temperature increased to {self._temperature}",
        )

    def decrease_temperature(self) -> None:
        self._temperature -= 1
        self._announce(
            "decrease_temperature",
            f"Thermostat temperature decreased to {self._temperature}",
        )

    def snapshot(self) -> dict[str, Any]:
        return {"temperature": self._temperature}
