"""Настройка логирования приложения."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Настраивает корневой логгер один раз при старте приложения.

    Args:
        level: Уровень логирования (DEBUG, INFO, WARNING, ERROR).
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # SQL-запросы логируются только при DB_ECHO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
