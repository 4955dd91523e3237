"""Logging configuration shared by all sproduce modules."""

import logging
import sys
from datetime import datetime
from pathlib import Path

# pylint: disable=assignment-from-no-return

start = datetime.now()
LOG_INFO_FORMATTER = logging.Formatter(
    fmt="[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s", datefmt="%a, %d %b %Y %H:%M:%S"
)
LOG_ERROR_FORMATTER = logging.Formatter(
    fmt="[%(asctime)s] [%(levelname)-8s] [%(name)s] [%(filename)s] [%(lineno)s] %(message)s",
    datefmt="%a, %d %b %Y %H:%M:%S",
)

LOGGER_NAME = "sproduce"
LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def setup_logger(log_name: str = LOGGER_NAME, log_dir: str | Path | None = None) -> logging.Logger:
    """
    Logger setup.

    Called once from ``sproduce/__init__.py`` when the package is imported. Output goes to three places, general
    messages to ``stdout``, errors to ``stderr`` with the more detailed formatter that includes the file and line number
    and everything to a timestamped log file. Handlers are only attached the first time so repeated calls return the
    same, already configured, logger.

    Parameters
    ----------
    log_name : str
        Name under which logging information occurs.
    log_dir : str | Path | None
        Directory the log file is written to, defaults to the current working directory.

    Returns
    -------
    logging.Logger
        Logger object.

    Examples
    --------
    Sub-modules should not call this function, they retrieve the configured logger by name.

        import logging
        from sproduce.logs.logs import LOGGER_NAME

        LOGGER = logging.getLogger(LOGGER_NAME)

        LOGGER.info('Surface generated.')
    """
    out_stream_handler = logging.StreamHandler(sys.stdout)
    out_stream_handler.setLevel(logging.DEBUG)
    out_stream_handler.setFormatter(LOG_INFO_FORMATTER)

    err_stream_handler = logging.StreamHandler(sys.stderr)
    err_stream_handler.setLevel(logging.ERROR)
    err_stream_handler.setFormatter(LOG_ERROR_FORMATTER)

    log_dir = Path.cwd() if log_dir is None else Path(log_dir)
    file_handler = logging.FileHandler(log_dir / f"{log_name}-{start.strftime('%Y-%m-%d-%H-%M-%S')}.log")
    file_handler.setFormatter(LOG_ERROR_FORMATTER)

    logger = logging.getLogger(log_name)
    logger.setLevel(logging.INFO)
    logger.propagate = True
    if not logger.handlers:
        logger.addHandler(out_stream_handler)
        logger.addHandler(err_stream_handler)
        logger.addHandler(file_handler)
    else:
        file_handler.close()

    return logger


def set_log_level(log_level: str | None, log_name: str = LOGGER_NAME) -> None:
    """
    Set the level of the package logger.

    Parameters
    ----------
    log_level : str | None
        One of 'debug', 'info', 'warning' or 'error'. Anything else (including ``None``) falls back to 'info'.
    log_name : str
        Name of the logger to adjust.
    """
    logging.getLogger(log_name).setLevel(LOG_LEVELS.get(log_level, logging.INFO))
