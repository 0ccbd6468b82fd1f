"""
Utility functions for the crag sync tool.

This module contains helper functions that are used across the tool but
are not directly related to parsing or diffing climbing records.
"""

import os
import pathlib
import logging

from cragsync.constants import FILE_ENCODINGS
from cragsync.errors import FileReadError

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def resolve_log_level(debug=False, log_level='info'):
    """Map the command line flags to a logging level; unknown names mean INFO."""
    if debug:
        return logging.DEBUG
    return getattr(logging, log_level.upper(), logging.INFO)

def setup_logging(debug=False, log_level='info', log_file=None):
    """Attach file and console handlers to the cragsync package logger.

    Calling it again replaces the handlers of the previous call, so repeated
    runs in one process never log a message twice. Libraries such as pandas
    keep their own configuration.

    Args:
        debug (bool): Force DEBUG level regardless of log_level
        log_level (str): Name of the level to use otherwise
        log_file (str, optional): Log file path; defaults to $LOG_FILE or debug.log

    Returns:
        str: Path of the log file
    """
    log_file = log_file or os.getenv('LOG_FILE', 'debug.log')
    pathlib.Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    package_logger = logging.getLogger('cragsync')
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    # stderr, stdout only carries results
    for handler in [logging.FileHandler(log_file, encoding='utf-8'), logging.StreamHandler()]:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
    package_logger.setLevel(resolve_log_level(debug, log_level))

    return log_file

def read_text_file(file_path):
    """Read a whole text file, trying the supported encodings in order.

    Args:
        file_path (str or pathlib.Path): Path to the file

    Returns:
        str: File contents

    Raises:
        FileReadError: If the file is missing, is a directory, or cannot be
            decoded with any supported encoding
    """
    path = pathlib.Path(file_path)

    if not path.exists():
        raise FileReadError(f"File not found: {path}")

    if path.is_dir():
        raise FileReadError(f"Path is a directory: {path}")

    logger.debug(f"Reading file: {path}")
    for encoding in FILE_ENCODINGS:
        try:
            text = path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            logger.debug(f"Could not decode {path} as {encoding}")
            continue
        except OSError as e:
            raise FileReadError(f"Cannot read file {path}: {e}") from e
        logger.debug(f"Successfully read {path} with encoding: {encoding}")
        return text

    raise FileReadError(f"Could not read {path} with any supported encoding")
