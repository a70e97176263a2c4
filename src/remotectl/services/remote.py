"""RemoteService — drives the remote controller against fresh devices.

Three operations:

- ``run_demo``: the fixed demonstration sequence.
- ``run_actions``: press the button for each named action, or once for
  a composite of all of them.
- ``list_actions``: describe the registered actions.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import structlog

from remotectl.domain.commands import (
    ACTION_REGISTRY,
    CompositeCommand,
    LightCommand,
    LightOffCommand,
    LightOnCommand,
    ThermostatDecreaseCommand,
    ThermostatIncreaseCommand,
    create_command,
)
from remotectl.domain.remote import RemoteController
from remotectl.services.base import BaseService
from remotectl.services.result import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)


class RemoteService(BaseService):
    """Assemble devices, commands, and the remote, then press buttons."""

    def run_demo(self) -> ServiceResult:
        """Run the demonstration sequence.

        Binds and presses light-on, then thermostat-up, then a composite
        of on, off, up, down.
        """
        started = time.perf_counter()
        messages: list[str] = []
        warnings: list[str] = []
        light, thermostat = self._build_devices(messages, warnings)

        light_on = LightOnCommand(light)
        light_off = LightOffCommand(light)
        thermostat_up = ThermostatIncreaseCommand(thermostat)
        thermostat_down = ThermostatDecreaseCommand(thermostat)
        all_commands = CompositeCommand([light_on, light_off, thermostat_up, thermostat_down])

        remote = RemoteController()
        presses = 0
        with structlog.contextvars.bound_contextvars(op="demo"):
            for command in (light_on, thermostat_up, all_commands):
                remote.set_command(command)
                remote.press_button()
                presses += 1

        return ServiceResult(
            ok=True,
            op="demo",
            data={
                "light_on": light.is_on,
                "temperature": thermostat.temperature,
                "messages": messages,
            },
            warnings=warnings,
            meta=_meta(started, presses),
        )

    def run_actions(self, actions: list[str], *, batch: bool = False) -> ServiceResult:
        """Press the remote for each action in *actions*, in order.

        With *batch*, all actions are bundled into one
        :class:`CompositeCommand` and the button is pressed once.
        Unknown action names fail the whole run before any device
        changes state.
        """
        op = "run_batch" if batch else "run"
        unknown = [name for name in actions if name not in ACTION_REGISTRY]
        if unknown:
            return ServiceResult.failure(
                op,
                ErrorCode.UNKNOWN_ACTION,
                f"Unknown action(s): {', '.join(unknown)}",
                unknown=unknown,
                available=sorted(ACTION_REGISTRY),
            )

        started = time.perf_counter()
        messages: list[str] = []
        warnings: list[str] = []
        light, thermostat = self._build_devices(messages, warnings)
        commands = [create_command(name, light=light, thermostat=thermostat) for name in actions]

        remote = RemoteController()
        with structlog.contextvars.bound_contextvars(op=op):
            if batch:
                remote.set_command(CompositeCommand(commands))
                remote.press_button()
                presses = 1
            else:
                for command in commands:
                    remote.set_command(command)
                    remote.press_button()
                presses = len(commands)
            logger.debug("Ran %d action(s) in %d press(es)", len(commands), presses)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "actions": list(actions),
                "light_on": light.is_on,
                "temperature": thermostat.temperature,
                "messages": messages,
            },
            warnings=warnings,
            meta=_meta(started, presses),
        )

    def list_actions(self) -> ServiceResult:
        """Describe every registered action."""
        items = [
            {
                "name": name,
                "device": "light" if issubclass(cls, LightCommand) else "thermostat",
                "description": cls.description,
            }
            for name, cls in ACTION_REGISTRY.items()
        ]
        return ServiceResult(
            ok=True,
            op="list_actions",
            data={"items": items, "count": len(items)},
        )


def _meta(started: float, presses: int) -> dict[str, Any]:
    return {
        "presses": presses,
        "duration_ms": round((time.perf_counter() - started) * 1000, 2),
    }
