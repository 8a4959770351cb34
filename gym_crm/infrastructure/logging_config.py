"""Root logger setup driven by the ``logging`` section of the YAML config.

Repositories and storage log through module loggers
(``logging.getLogger(__name__)``); this module only decides where those
records go.
"""
import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: str) -> int:
    """Map a level name such as "debug" to its number; unknown names give INFO."""
    numeric_level = logging.getLevelName(level.upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send gym CRM log records to stderr and, optionally, a file.

    Does nothing when the root logger already has handlers, so building
    several containers in one process never duplicates output.

    Args:
        level: Level name from ``LoggingConfig.level``, case insensitive
        logfile: Value of ``LoggingConfig.file``; None disables file output
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(_resolve_level(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
