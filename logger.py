import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from config import LOG_DIR, LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColorFormatter(logging.Formatter):
    """Цветной вывод в консоль."""

    grey = "\x1b[38;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"

    FORMATS = {
        logging.DEBUG: grey + LOG_FORMAT + reset,
        logging.INFO: grey + LOG_FORMAT + reset,
        logging.WARNING: yellow + LOG_FORMAT + reset,
        logging.ERROR: red + LOG_FORMAT + reset,
        logging.CRITICAL: bold_red + LOG_FORMAT + reset,
    }

    def format(self, record):
        formatter = logging.Formatter(self.FORMATS.get(record.levelno), datefmt=DATE_FORMAT)
        return formatter.format(record)


def setup_logger(name: str = None, log_level: str = LOG_LEVEL, log_dir: str = LOG_DIR) -> logging.Logger:
    """
    Настраивает логгер: цветная консоль + файл с ротацией (5 МБ, 5 копий).
    Без имени настраивается корневой логгер, т.е. логи всех модулей.
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Не добавляем обработчики повторно
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(ColorFormatter())
    logger.addHandler(console_handler)

    logs_path = Path(log_dir)
    logs_path.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        logs_path / "app.log",
        maxBytes=5 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(file_handler)

    return logger
