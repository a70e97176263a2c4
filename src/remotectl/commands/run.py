"""Command: press the remote for named actions on fresh devices."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from remotectl.commands._base import RemoteCommand

if TYPE_CHECKING:
    from remotectl.commands._context import AppContext


@click.command(
    cls=RemoteCommand,
    examples="""\
  remotectl run light-on
  remotectl run light-on thermostat-up thermostat-up
  remotectl run --batch light-on light-off thermostat-up
  remotectl --json run thermostat-down""",
)
@click.argument("actions", nargs=-1, required=True)
@click.option("--batch", is_flag=True, help="Bundle all actions into one button press.")
@click.pass_obj
def run(app: AppContext, actions: tuple[str, ...], batch: bool) -> None:
    """Bind and press each ACTION in order (see `remotectl actions`)."""
    app.emit(app.remote_service().run_actions(list(actions), batch=batch))
