import logging

import typer

from ownerfile.common import bus
from ownerfile.needle import L, needle
from .rendering import CliRenderer

from .commands.append import append_command
from .commands.create import create_command

app = typer.Typer(
    name="ownerfile",
    help=needle.get(L.cli.app.description),
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help=needle.get(L.cli.option.verbose.help)
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help=needle.get(L.cli.option.quiet.help)
    ),
):
    # The CLI is the composition root: it picks the renderer and log level.
    bus.set_renderer(CliRenderer(verbose=verbose, quiet=quiet))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="append", help=needle.get(L.cli.command.append.help))(append_command)
app.command(name="create", help=needle.get(L.cli.command.create.help))(create_command)


if __name__ == "__main__":
    app()
