"""
Logging setup for the ChessPro console.

Library modules only create module-level loggers
(``logging.getLogger(__name__)``); handlers are installed here, once, by the
front end. Output goes to a file so it never interleaves with the board
printed on stdout.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_DIR = Path.home() / ".chesspro"
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(message)s'


def setup_logger(debug: bool = False, log_file: Optional[Path] = None) -> logging.Logger:
    """
    Setup file-based logger for the ``chesspro`` package.

    Args:
        debug: If True, log at DEBUG level; otherwise INFO level
        log_file: Destination file (default: ~/.chesspro/chesspro.log)

    Returns:
        Configured package logger
    """
    if log_file is None:
        LOG_DIR.mkdir(exist_ok=True)
        log_file = LOG_DIR / "chesspro.log"
    else:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("chesspro")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    logger.handlers.clear()

    handler = logging.FileHandler(log_file, mode='w')
    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
