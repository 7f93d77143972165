"""Logging setup shared by the API server and the command-line client."""
import logging
import os
from typing import Optional

LOGGER_NAME = 'catalogue'

CONSOLE_FORMAT = '[%(levelname)s] %(name)s: %(message)s'
FILE_FORMAT = '[%(asctime)s] %(levelname)s %(name)s: %(message)s'


def setup_logging(level: str = 'WARNING', log_file: Optional[str] = None) -> logging.Logger:
    """Configure the ``catalogue`` logger tree.

    A console handler is attached once; repeated calls only change the level.
    When *log_file* is given, a timestamped file handler for that path is
    added as well (once per path). A log file that cannot be created is
    reported as a warning and the console handler keeps working.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL. Unknown names mean WARNING.
        log_file: Optional path of a log file; missing directories are created.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console)

    if log_file:
        path = os.path.abspath(log_file)
        if not any(getattr(h, 'baseFilename', None) == path for h in logger.handlers):
            try:
                os.makedirs(os.path.dirname(path), exist_ok=True)
                fh = logging.FileHandler(path)
            except OSError as exc:
                logger.warning('Could not create log file %s: %s', path, exc)
            else:
                fh.setFormatter(logging.Formatter(FILE_FORMAT))
                logger.addHandler(fh)
    return logger
