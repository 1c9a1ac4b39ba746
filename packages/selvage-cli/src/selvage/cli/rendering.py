import logging

import typer
from selvage.common.messaging import protocols


class CliRenderer(protocols.Renderer):
    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def render(self, message: str, level: str):
        if level == "debug" and not self.verbose:
            return

        color = None
        if level == "success":
            color = typer.colors.GREEN
        elif level == "warning":
            color = typer.colors.YELLOW
        elif level == "error":
            color = typer.colors.RED
        elif level == "debug":
            color = typer.colors.BRIGHT_BLACK

        typer.secho(message, fg=color, err=(level == "error"))


class EchoLogHandler(logging.Handler):
    """Routes library log records through typer, so they share the CLI's streams."""

    def emit(self, record: logging.LogRecord) -> None:
        typer.secho(self.format(record), fg=typer.colors.BRIGHT_BLACK, err=True)


def enable_debug_logging() -> None:
    logger = logging.getLogger("selvage")
    if not any(isinstance(h, EchoLogHandler) for h in logger.handlers):
        handler = EchoLogHandler()
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
