"""Subcommand modules for hkgshell.

Provides register_commands() which uses deferred imports to keep
``hkgshell --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups on the root CLI group."""
    from hkgshell.commands.build import build
    from hkgshell.commands.menu import menu

    cli.add_command(build)
    cli.add_command(menu)
