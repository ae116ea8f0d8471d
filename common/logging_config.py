import logging
import os
import re
import sys
from pathlib import Path
from typing import Optional


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class PathRedactionFilter(logging.Filter):
    """Filter that shortens the user's home directory to '~' in log records."""

    def __init__(self, home: Optional[str] = None):
        super().__init__()
        home = home if home is not None else str(Path.home())
        home = home.rstrip('/\\')
        self.pattern = re.compile(re.escape(home) + r'(?![\w.-])') if home else None

    def filter(self, record: logging.LogRecord) -> bool:
        """Redact the home directory in the message and its arguments."""
        if self.pattern is None:
            return True

        if isinstance(record.msg, str):
            record.msg = self.pattern.sub('~', record.msg)

        if record.args:
            if isinstance(record.args, dict):
                record.args = {k: self._redact(v) for k, v in record.args.items()}
            elif isinstance(record.args, tuple):
                record.args = tuple(self._redact(arg) for arg in record.args)

        return True

    def _redact(self, value):
        if isinstance(value, str):
            return self.pattern.sub('~', value)
        return value


def setup_logging(
    component_name: str,
    log_level: Optional[str] = None
) -> logging.Logger:
    """
    Set up logging configuration for a component.

    Args:
        component_name: Name of the top-level logger (e.g., 'cli', 'session')
        log_level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to LOG_LEVEL env var or INFO

    Returns:
        Configured logger instance
    """
    if log_level is None:
        log_level = os.getenv('LOG_LEVEL', 'INFO')

    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(component_name)
    logger.setLevel(level)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    handler.addFilter(PathRedactionFilter())

    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
