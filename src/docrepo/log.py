"""Process-wide logging setup.

Modules obtain loggers with:
    from docrepo.log import get_logger
    logger = get_logger(__name__)

configure_logging() is called once by the entry point (the CLI); library
code never configures handlers itself.
"""

import logging
import sys


DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level="WARNING", fmt: str = DEFAULT_FORMAT, stream=sys.stderr) -> None:
    """Install one stream handler on the root logger and set its level.

    Repeat calls only adjust the level. Accepts a level name or number.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
