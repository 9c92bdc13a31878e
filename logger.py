import logging
import sys

from flask.logging import default_handler

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(app):
    """Swap Flask's default stderr handler for a formatted stdout one."""
    logger = app.logger
    logger.removeHandler(default_handler)
    if not any(getattr(h, "_job_board", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handler._job_board = True
        logger.addHandler(handler)

    level = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    logger.setLevel(getattr(logging, level, logging.INFO))
    return logger
