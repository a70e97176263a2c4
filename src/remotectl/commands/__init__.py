"""Subcommand modules for remotectl.

Provides register_commands() which uses deferred imports to keep
``remotectl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from remotectl.commands.actions import actions
    from remotectl.commands.demo import demo
    from remotectl.commands.run import run

    cli.add_command(demo)
    cli.add_command(run)
    cli.add_command(actions)
