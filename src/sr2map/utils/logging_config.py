"""
Logging configuration for SR2 Interactive Map.

Console output is colored and short. The optional file log is CSV so that
user data activity can be filtered in a spreadsheet; every file, including
rotated ones, starts with a header row.
"""

import csv
import io
import logging
import logging.handlers
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..settings import AppSettings

CSV_COLUMNS = ("time", "level", "elapsed", "logger", "line", "message")

CONSOLE_FORMAT = "%(asctime)s : %(levelname)-8s : %(message)s"

MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    LEVEL_COLORS = {
        logging.DEBUG: "36",  # cyan
        logging.INFO: "32",  # green
        logging.WARNING: "33",  # yellow
        logging.ERROR: "31",  # red
        logging.CRITICAL: "35",  # magenta
    }

    def formatMessage(self, record: logging.LogRecord) -> str:
        # Tracebacks are appended after this, so they stay uncolored
        text = super().formatMessage(record)
        code = self.LEVEL_COLORS.get(record.levelno)
        if code is None:
            return text
        return text.replace(record.levelname, f"\033[{code}m{record.levelname}\033[0m", 1)


def _csv_row(values: Any) -> str:
    buffer = io.StringIO()
    csv.writer(
        buffer, delimiter=";", quoting=csv.QUOTE_ALL, lineterminator=""
    ).writerow(values)
    return buffer.getvalue()


class CSVFormatter(logging.Formatter):
    """One quoted, semicolon separated row per record."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        return _csv_row(
            (
                self.formatTime(record, self.datefmt),
                record.levelname,
                f"{int(record.relativeCreated)} ms",
                record.name,
                record.lineno,
                message,
            )
        )


class CSVRotatingFileHandler(logging.handlers.RotatingFileHandler):
    """Rotating handler that writes the column header into each new file."""

    def _open(self) -> IO[str]:
        stream = super()._open()
        if stream.tell() == 0:
            stream.write(_csv_row(CSV_COLUMNS) + self.terminator)
        return stream


def _console_handler(settings: "AppSettings") -> logging.Handler:
    formatter: logging.Formatter
    if settings.logging.console_use_colors:
        formatter = ColoredFormatter(fmt=CONSOLE_FORMAT, datefmt="%H:%M:%S")
    else:
        formatter = logging.Formatter(fmt=CONSOLE_FORMAT, datefmt="%H:%M:%S")

    handler = logging.StreamHandler()
    handler.setLevel(getattr(logging, settings.logging.console_log_level, logging.INFO))
    handler.setFormatter(formatter)
    return handler


def _file_handler(log_path: Path) -> logging.Handler:
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = CSVRotatingFileHandler(
        log_path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(CSVFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(settings: "AppSettings") -> None:
    """
    Setup application logging with console and file handlers.

    Replaces any handlers already on the root logger.

    Args:
        settings: AppSettings instance for all logging configuration
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    logging.getLogger("sr2map").setLevel(logging.DEBUG)
    userdata_level = settings.logging.userdata_log_level
    logging.getLogger("sr2map.userdata").setLevel(
        getattr(logging, userdata_level, logging.INFO)
    )

    if settings.logging.console_logging:
        root_logger.addHandler(_console_handler(settings))

    log_path = None
    if settings.logging.file_logging:
        log_path = Path(settings.logging.log_file_path)
        try:
            root_logger.addHandler(_file_handler(log_path))
        except OSError as e:
            # Console logging still works without the file
            root_logger.warning(f"Could not setup file logging: {e}")
            log_path = None

    logger = logging.getLogger(__name__)
    logger.info("Logging initialized")
    if settings.logging.console_logging:
        logger.debug(
            f"Console logging: {settings.logging.console_log_level} "
            f"(colors: {settings.logging.console_use_colors})"
        )
    if log_path:
        logger.debug(f"File logging: DEBUG at {log_path.absolute()}")
    logger.debug(f"User data logging: {userdata_level}")
