from pathlib import Path
from typing import Optional

import typer

from selvage.common import needle
from selvage.needle import L
from selvage.cli.factories import make_app, make_pairs


def sync_command(
    proposed: Optional[Path] = typer.Argument(
        None, help=needle.get(L.cli.argument.proposed.help)
    ),
    target: Optional[Path] = typer.Argument(
        None, help=needle.get(L.cli.argument.target.help)
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help=needle.get(L.cli.option.dry_run.help)
    ),
):
    pairs = make_pairs(proposed, target)
    app_instance = make_app()
    result = app_instance.run_sync(pairs=pairs, dry_run=dry_run)
    if not result.success:
        raise typer.Exit(code=1)
