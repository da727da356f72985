import sys

from loguru import logger


def setup_logger(level="INFO"):
    """Console with colors, full trace to a rotating file, errors to a separate file."""
    format_info = "<green>{time:HH:mm:ss.SS}</green> | <blue>{level}</blue> | <level>{message}</level>"
    logger.remove()

    logger.add(sys.stdout, colorize=True, format=format_info, level=level)
    logger.add("logs/daily_sender.log", format="{time} {level} {message}", level="DEBUG",
               rotation="10 MB", compression="zip")
    logger.add("logs/error.log", format="{time} {level} {message}", level="ERROR", rotation="10 MB")
