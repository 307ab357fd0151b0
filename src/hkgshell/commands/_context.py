"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy Shell initialization and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hkgshell.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from hkgshell.config.settings import ShellSettings
    from hkgshell.services.result import ServiceResult
    from hkgshell.shell import Shell


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The shell is created on first use so ``--help`` and ``--version``
    never bake the build identity or load listeners.
    """

    def __init__(self, settings: ShellSettings) -> None:
        self.settings = settings
        self._shell: Shell | None = None

        from hkgshell.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def shell(self) -> Shell:
        """The shell instance (created lazily on first access)."""
        if self._shell is None:
            from hkgshell.shell import Shell

            self._shell = Shell(self.settings, discover_listeners=True)
        return self._shell

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
