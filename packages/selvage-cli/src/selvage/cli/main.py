import typer

from selvage.common import bus, needle
from selvage.needle import L
from .rendering import CliRenderer, enable_debug_logging

from .commands.check import check_command
from .commands.sync import sync_command

app = typer.Typer(
    name="selvage",
    help=needle.get(L.cli.app.description),
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help=needle.get(L.cli.option.verbose.help)
    ),
):
    # The CLI is the composition root: it picks the renderer and the log level.
    bus.set_renderer(CliRenderer(verbose=verbose))
    if verbose:
        enable_debug_logging()


app.command(name="sync", help=needle.get(L.cli.command.sync.help))(sync_command)
app.command(name="check", help=needle.get(L.cli.command.check.help))(check_command)


if __name__ == "__main__":
    app()
