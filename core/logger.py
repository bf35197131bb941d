import logging
import sys

from core.settings import settings


def setup_logger(name: str = settings.APP_NAME) -> logging.Logger:
    """
    Логгер приложения.

    Пишет в stderr: stdout занят отчётом о структуре компании.
    """
    logger = logging.getLogger(name)
    logger.setLevel(settings.LOG_LEVEL)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(settings.LOG_FORMAT))
        logger.addHandler(handler)

    logger.propagate = False
    return logger


logger = setup_logger()
