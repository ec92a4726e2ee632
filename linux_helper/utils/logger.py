import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_NAME = "linux_helper"


def setup_logging(settings, console: bool = False) -> logging.Logger:
    """
    Configure the package logger.

    The TUI owns the terminal, so stderr output is only attached when
    ``console`` is true (plain mode). A file handler is attached when
    LOG_FILE is set.
    """
    logger = logging.getLogger(_ROOT_NAME)
    logger.setLevel(settings.log_level_number)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_path), mode="a", encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console:
        stream = logging.StreamHandler(sys.stderr)
        stream.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(stream)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
