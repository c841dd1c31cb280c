"""Logging utilities."""

import logging
import sys
import traceback
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
ERROR_LOG_NAME = "gramwallet_error.log"


def resolve_level(level: str) -> Optional[int]:
    """Numeric value of a level name such as ``"debug"``, or None if unknown."""
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else None


def setup_logging(level: str = "INFO"):
    """Send log records to stdout."""
    numeric = resolve_level(level)
    logging.basicConfig(
        level=numeric if numeric is not None else logging.INFO,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    if numeric is None:
        logging.getLogger(__name__).warning(f"Unknown log level {level!r}, using INFO")


def log_error(msg: str, exc: Optional[BaseException] = None, log_dir: Optional[Path] = None):
    """Append an error to a file for post-mortem debugging.

    Used when startup fails badly enough that stdout may never be seen.
    """
    log_file = Path(log_dir or Path.home()) / ERROR_LOG_NAME
    try:
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(f"{msg}\n")
            if exc is not None:
                f.write("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))
            f.write("-" * 50 + "\n")
    except OSError:
        pass  # Can't log if logging fails
