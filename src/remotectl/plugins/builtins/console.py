"""Built-in plugin that echoes device status lines to stdout."""

from __future__ import annotations

from typing import Any

import click
import pluggy

hookimpl = pluggy.HookimplMarker("remotectl")


class ConsoleStatusPlugin:
    """Print each device status message as it happens."""

    @hookimpl
    def post_device_action(
        self,
        device: str,
        action: str,
        message: str,
        state: dict[str, Any],
    ) -> None:
        click.echo(message)
