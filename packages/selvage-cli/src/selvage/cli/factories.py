from pathlib import Path
from typing import List, Optional, Tuple

import typer

from selvage.app import SelvageApp
from selvage.common import bus
from selvage.config import ConfigError, load_config_from_path
from selvage.needle import L


def get_project_root() -> Path:
    return Path.cwd()


def make_app() -> SelvageApp:
    cwd = get_project_root()
    try:
        config = load_config_from_path(cwd)
    except ConfigError as e:
        bus.error(L.error.config, error=e)
        raise typer.Exit(code=1)

    # Configured document paths are relative to the directory holding
    # pyproject.toml, which may sit above the working directory.
    return SelvageApp(root_path=config.root_path or cwd, config=config)


def make_pairs(
    proposed: Optional[Path], target: Optional[Path]
) -> Optional[List[Tuple[Path, Path]]]:
    """
    Turns the optional PROPOSED/TARGET arguments into an explicit pair list,
    or None to fall back to the configured documents.
    """
    if proposed is None and target is None:
        return None
    if proposed is None or target is None:
        bus.error(L.error.arguments)
        raise typer.Exit(code=1)

    cwd = get_project_root()
    return [(cwd / proposed, cwd / target)]
