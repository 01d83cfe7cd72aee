import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from doc_namer.core.config import settings

LOG_FILE_NAME = "doc_namer.log"


def setup_logging(level: str | None = None, log_dir: Path | None = None) -> Path:
    """Configure root logging: console (stderr) plus a rotating log file.

    stdout is left alone so the CLI can print the filename as its only output.
    """

    target_dir = log_dir or settings.log_dir
    target_dir.mkdir(parents=True, exist_ok=True)
    log_file = target_dir / LOG_FILE_NAME
    log_level = logging.getLevelName((level or settings.log_level).upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    # time | level | module:line | message
    log_format = logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s")

    # 5 MB per file, 5 backups
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(log_format)
    file_handler.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(log_format)
    console_handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # drop old handlers to avoid duplicate lines
    root_logger.handlers = []
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        logger = logging.getLogger(logger_name)
        logger.handlers = [file_handler, console_handler]
        logger.propagate = False

    logging.debug("Logging initialized. Logs will be written to: %s", log_file.absolute())
    return log_file
