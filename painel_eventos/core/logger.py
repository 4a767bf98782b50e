"""
Logging estruturado com loguru.
O objeto `log` é exportado para uso global; `setup_logger` reconfigura os sinks.
"""
import sys

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function}:{line} - {message}"


def setup_logger(level: str = "INFO", arquivo: str | None = None):
    logger.remove()

    # Console
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level.upper())

    # Arquivo (opcional)
    if arquivo:
        logger.add(
            arquivo,
            rotation="10 MB",
            retention="7 days",
            compression="zip",
            level="DEBUG",
            format=FILE_FORMAT,
        )
    return logger


log = setup_logger()
