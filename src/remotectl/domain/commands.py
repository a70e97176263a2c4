"""Command ABC, the four device commands, and the composite command.

A command captures its target device at construction and performs
exactly one action when executed.  :class:`CompositeCommand` presents an
ordered, fixed sequence of commands as a single command.

Primitive commands are registered by action name in
:data:`ACTION_REGISTRY` so callers can build them from text
(e.g. ``"light-on"``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import ClassVar

from remotectl.domain.devices import Light, Thermostat


class Command(ABC):
    """An encapsulated, parameterless action."""

    name: ClassVar[str] = "command"
    description: ClassVar[str] = ""

    @abstractmethod
    def execute(self) -> None:
        """Perform the action."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class LightCommand(Command):
    """Base for commands targeting a :class:`Light`."""

    def __init__(self, light: Light) -> None:
        if light is None:
            raise ValueError(f"{type(self).__name__} requires a light")
        self._light = light

    @property
    def light(self) -> Light:
        return self._light

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._light.name!r})"


class ThermostatCommand(Command):
    """Base for commands targeting a :class:`Thermostat`."""

    def __init__(self, thermostat: Thermostat) -> None:
        if thermostat is None:
            raise ValueError(f"{type(self).__name__} requires a thermostat")
        self._thermostat = thermostat

    @property
    def thermostat(self) -> Thermostat:
        return self._thermostat

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._thermostat.name!r})"


class LightOnCommand(LightCommand):
    name = "light-on"
    description = "Turn the light on."

    def execute(self) -> None:
        self._light.turn_on()


class LightOffCommand(LightCommand):
    name = "light-off"
    description = "Turn the light off."

    def execute(self) -> None:
        self._light.turn_off()


class ThermostatIncreaseCommand(ThermostatCommand):
    name = "thermostat-up"
    description = "Raise the thermostat by one degree."

    def execute(self) -> None:
        self._thermostat.increase_temperature()


class ThermostatDecreaseCommand(ThermostatCommand):
    name = "thermostat-down"
    description = "Lower the thermostat by one degree."

    def execute(self) -> None:
        self._thermostat.decrease_temperature()


class CompositeCommand(Command):
    """Executes a fixed sequence of commands in order.

    Every contained command runs; there is no short-circuiting.  An
    empty sequence is valid and does nothing.  Composites may nest.
    """

    name = "composite"
    description = "Run several commands as one."

    def __init__(self, commands: Iterable[Command]) -> None:
        self._commands: tuple[Command, ...] = tuple(commands)
        if any(cmd is None for cmd in self._commands):
            raise ValueError("CompositeCommand cannot contain None")

    @property
    def commands(self) -> tuple[Command, ...]:
        return self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def execute(self) -> None:
        for command in self._commands:
            command.execute()

    def __repr__(self) -> str:
        inner = ", ".join(repr(c) for c in self._commands)
        return f"CompositeCommand([{inner}])"


# --- Action registry ---

ACTION_REGISTRY: dict[str, type[LightCommand] | type[ThermostatCommand]] = {
    cls.name: cls
    for cls in (
        LightOnCommand,
        LightOffCommand,
        ThermostatIncreaseCommand,
        ThermostatDecreaseCommand,
    )
}


def create_command(action: str, *, light: Light, thermostat: Thermostat) -> Command:
    """Build the primitive command registered under *action*.

    Raises:
        ValueError: If *action* is not a registered action name.
    """
    cls = ACTION_REGISTRY.get(action)
    if cls is None:
        msg = f"Unknown action: {action!r}"
        raise ValueError(msg)
    if issubclass(cls, LightCommand):
        return cls(light)
    return cls(thermostat)
