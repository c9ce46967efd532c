import logging
import sys
from typing import Union


def get_logger(
    name: str = __name__, level: Union[int, str] = logging.INFO
) -> logging.Logger:
    """
    Create and configure a logger.

    Args:
        name (str): The name of the logger. Defaults to the module name.
        level (int | str): Level for the logger and its console handler.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler.setFormatter(formatter)

    # Add the handler only once per logger
    if not logger.handlers:
        logger.addHandler(console_handler)
    else:
        for handler in logger.handlers:
            handler.setLevel(level)

    return logger


logger = get_logger("BBBClient")
