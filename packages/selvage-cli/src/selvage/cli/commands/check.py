from pathlib import Path
from typing import Optional

import typer

from selvage.common import needle
from selvage.needle import L
from selvage.cli.factories import make_app, make_pairs


def check_command(
    proposed: Optional[Path] = typer.Argument(
        None, help=needle.get(L.cli.argument.proposed.help)
    ),
    target: Optional[Path] = typer.Argument(
        None, help=needle.get(L.cli.argument.target.help)
    ),
):
    pairs = make_pairs(proposed, target)
    app_instance = make_app()
    if not app_instance.run_check(pairs=pairs):
        raise typer.Exit(code=1)
