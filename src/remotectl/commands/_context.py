"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy plugin loading and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from remotectl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from remotectl.config.settings import RemoteSettings
    from remotectl.plugins.manager import PluginManager
    from remotectl.services.remote import RemoteService
    from remotectl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Plugins are loaded on first use so ``--help`` and ``--version``
    never touch entry points.
    """

    def __init__(self, settings: RemoteSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None

        from remotectl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def plugins(self) -> PluginManager:
        """The plugin manager (created lazily on first access).

        The console plugin is skipped in JSON mode so stdout stays a
        single JSON document.
        """
        if self._plugins is None:
            from remotectl.plugins.builtins.console import ConsoleStatusPlugin
            from remotectl.plugins.manager import PluginManager

            pm = PluginManager()
            if not self.settings.json_output:
                pm.register_plugin(ConsoleStatusPlugin(), name="console")
            if self.settings.plugins.enabled and not self.settings.no_plugins:
                pm.discover_and_load()
            self._plugins = pm
        return self._plugins

    def remote_service(self) -> RemoteService:
        from remotectl.services.remote import RemoteService

        return RemoteService(self.settings.devices, self.plugins)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
