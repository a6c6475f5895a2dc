"""Logging configuration for the BGIN multi-agent hub."""

import logging
import sys

logger = logging.getLogger("bgin_server")


def configure_logging(level: int = logging.INFO) -> None:
    """Set up logging configuration."""

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('[%(asctime)s][%(levelname)s] %(message)s'))

    root_logger.addHandler(console_handler)

    # Package loggers (bgin_server.*) hang off this one
    logger.handlers.clear()
    logger.addHandler(console_handler)
    logger.setLevel(level)
    logger.propagate = False

    # uvicorn installs its own handlers; keep its access log at our level
    for logger_name in ["uvicorn.error", "uvicorn.access"]:
        logging.getLogger(logger_name).setLevel(level)


def get_logger(name: str = "bgin_server") -> logging.Logger:
    """Get logger instance."""
    return logging.getLogger(name)
