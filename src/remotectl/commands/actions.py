"""Command: list the actions the remote can bind."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from remotectl.commands._base import RemoteCommand

if TYPE_CHECKING:
    from remotectl.commands._context import AppContext


@click.command(
    cls=RemoteCommand,
    examples="""\
  remotectl actions
  remotectl -q actions
  remotectl --json actions""",
)
@click.pass_obj
def actions(app: AppContext) -> None:
    """List registered actions."""
    from remotectl.services.remote import RemoteService

    app.emit(RemoteService(app.settings.devices).list_actions())
