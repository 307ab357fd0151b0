"""Command group: build identity."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from hkgshell.commands._base import ShellGroup

if TYPE_CHECKING:
    from hkgshell.commands._context import AppContext


@click.group(
    cls=ShellGroup,
    examples="""\
  hkgshell build info
  hkgshell --json build info
  hkgshell build metadata
  hkgshell build metadata --json --output dist/build-meta.json""",
)
def build() -> None:
    """Build identity and build-step metadata."""


@build.command()
@click.pass_obj
def info(app: AppContext) -> None:
    """Show the baked build identity (the get_build_info query)."""
    from hkgshell.services.build import BuildService

    app.emit(BuildService(app.shell).info())


@build.command(
    examples="""\
  hkgshell build metadata > build.env
  hkgshell build metadata --json
  hkgshell build metadata --output dist/build-meta.json""",
)
@click.option(
    "--json", "as_json", is_flag=True, help="Print the JSON payload instead of KEY=value lines."
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write the JSON payload to this file.",
)
@click.pass_obj
def metadata(app: AppContext, as_json: bool, output: Path | None) -> None:
    """Compute build metadata for the current minute.

    Appends the KEY=value lines to $GITHUB_ENV when it is set.
    """
    from hkgshell.services.build import BuildService

    result = BuildService.metadata(output=output)
    if as_json and result.ok:
        payload = {k: v for k, v in result.data.items() if k not in ("env", "output", "github_env")}
        click.echo(json.dumps(payload, indent=2))
        return
    app.emit(result)
