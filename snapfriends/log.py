import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """
    Sets up root logging and returns the package logger
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger = logging.getLogger("snapfriends")
    logger.setLevel(level)
    return logger
