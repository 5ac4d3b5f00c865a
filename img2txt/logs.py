"""Logging setup for applications that embed the client."""
import logging

from rich.logging import RichHandler


def setup_logging(level: str, name: str | None = None) -> logging.Logger:
    """Route a logger (root by default) through Rich. Unknown levels fall back to INFO."""
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(logger.removeHandler, logger.handlers[:]))
    logger.addHandler(RichHandler(rich_tracebacks=True))
    return logger
