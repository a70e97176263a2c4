"""Command: the fixed remote-control demonstration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from remotectl.commands._base import RemoteCommand

if TYPE_CHECKING:
    from remotectl.commands._context import AppContext


@click.command(
    cls=RemoteCommand,
    examples="""\
  remotectl demo
  remotectl --json demo
  remotectl -v demo""",
)
@click.pass_obj
def demo(app: AppContext) -> None:
    """Press light-on, thermostat-up, then a composite of all four actions."""
    app.emit(app.remote_service().run_demo())
