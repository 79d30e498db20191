import logging
import logging.handlers

from rich.console import Console
from rich.logging import RichHandler

from .config import Settings

# Driver command lines are logged at debug level; the file always keeps them
FILE_LOG_LEVEL = logging.DEBUG
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(module)s.%(funcName)s: %(message)s"


def _console_handler(level: str) -> RichHandler:
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=True,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    return handler


def _file_handler(settings: Settings) -> logging.Handler:
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=settings.log_file_path,
        when="midnight",
        backupCount=settings.log_retention_days,
        encoding="utf-8",
    )
    handler.setLevel(FILE_LOG_LEVEL)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logging(settings: Settings) -> None:
    """
    Console logging at ``settings.log_level`` and a daily rotated log file.

    The file records debug messages regardless of the console level, so the
    exact GCSDokan, gcsfuse, df and unmount invocations can be read back
    after a failed mount.
    """
    settings.log_directory.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(FILE_LOG_LEVEL)
    root_logger.handlers.clear()
    root_logger.addHandler(_console_handler(settings.log_level))
    root_logger.addHandler(_file_handler(settings))

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.info(
        f"[bold green]Logging initialized[/] - "
        f"console level [yellow]{settings.log_level}[/], "
        f"driver commands in [cyan]{settings.log_file_path}[/]"
    )
