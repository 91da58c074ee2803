import logging
import os
from logging import handlers

LOG_FORMAT = "%(asctime)s [%(levelname)s] - %(filename)s - %(message)s"


def make_logger(
    name: str,
    filename: str,
    *,
    level: int = logging.DEBUG,
    stream_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    backup_count: int = 0,
) -> logging.Logger:
    """Attach the console and rotating file handlers used across the app.

    ``filename`` is relative to ``logs/`` in the working directory.
    """
    path = os.path.join(os.getcwd(), "logs", filename)
    os.makedirs(os.path.dirname(path), exist_ok=True)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    stream_handler.setLevel(stream_level)
    file_handler = handlers.TimedRotatingFileHandler(
        filename=path,
        when="midnight",
        backupCount=backup_count,
        encoding="utf-8",
        utc=True,
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    file_handler.setLevel(file_level)

    logger = logging.getLogger(name)
    logger.addHandler(stream_handler)
    logger.addHandler(file_handler)
    logger.setLevel(level)
    return logger
