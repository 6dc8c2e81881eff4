# services/logging_config.py
import logging
import os
from logging.handlers import RotatingFileHandler

# Todos los loggers del servidor cuelgan de aquí: notes.cache, notes.store, notes.http, notes.server
LOGGER_NAME = "notes"


def setup_logging() -> logging.Logger:
    """
    Configura el logger "notes":
    - nivel desde LOG_LEVEL (INFO por defecto)
    - consola siempre; archivo rotativo si LOG_FILE_PATH está definido
    Llamarla dos veces no duplica handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler()
    console.setFormatter(fmt)
    logger.addHandler(console)

    log_file = os.getenv("LOG_FILE_PATH")
    if log_file:
        fh = RotatingFileHandler(log_file, maxBytes=2_000_000, backupCount=2, encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger
