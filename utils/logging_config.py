"""
Logging Configuration
Sets up the application loggers.
"""
import logging
import sys

# Top-level packages and modules whose loggers are configured
LOGGER_NAMES = ("renderer3d", "game", "main", "__main__")


def setup_logging(level=logging.INFO, log_file=None):
    """
    Configures the loggers of the raycaster packages.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.

    Returns:
        list of configured logging.Logger instances
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    loggers = []
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Avoid duplicate output when called more than once
        if logger.hasHandlers():
            logger.handlers.clear()

        for handler in handlers:
            logger.addHandler(handler)
        loggers.append(logger)

    logging.getLogger("renderer3d").info("Logging initialized.")
    return loggers
