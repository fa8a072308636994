from pathlib import Path
from typing import Optional

import typer

from ownerfile.common import bus
from ownerfile.config import ConfigError
from ownerfile.needle import L, needle
from ownerfile.cli.factories import make_app


def create_command(
    directory: Optional[Path] = typer.Argument(
        None,
        file_okay=False,
        dir_okay=True,
        help=needle.get(L.cli.option.directory.help),
    ),
):
    try:
        app_instance = make_app()
    except ConfigError as e:
        bus.error(L.error.config, error=str(e))
        raise typer.Exit(code=1)

    target_dir = directory or Path.cwd()
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        path = app_instance.run_create(target_dir)
    except OSError as e:
        bus.error(L.error.generic, error=str(e))
        raise typer.Exit(code=1)

    typer.echo(str(path))
