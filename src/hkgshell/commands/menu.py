"""Command group: native menu inspection and activation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hkgshell.commands._base import ShellGroup

if TYPE_CHECKING:
    from hkgshell.commands._context import AppContext


@click.group(
    cls=ShellGroup,
    examples="""\
  hkgshell menu list
  hkgshell menu activate set_layout_sphere
  hkgshell --json menu activate toggle_xray""",
)
def menu() -> None:
    """Native menu entries and the events they emit."""


@menu.command("list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List menu entries in display order."""
    from hkgshell.services.menu import MenuService

    app.emit(MenuService(app.shell).list_items())


@menu.command()
@click.argument("identifier")
@click.pass_obj
def activate(app: AppContext, identifier: str) -> None:
    """Activate a menu entry by IDENTIFIER and report the emitted event."""
    from hkgshell.services.menu import MenuService

    app.emit(MenuService(app.shell).activate(identifier))
