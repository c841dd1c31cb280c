"""Runtime check whether a directory can hold persistent data."""

import logging
import os
from pathlib import Path
from typing import Union

from .models import PathCandidate

logger = logging.getLogger(__name__)

SALT_FILE_NAME = "salt"
TEMP_FILE_PREFIX = "temp"
DEFAULT_MAX_ATTEMPTS = 2 ** 31 - 1


class WritabilityProbe:
    """Tests a directory by creating and removing a numbered temp file.

    A ``salt`` file left by an earlier run marks the directory as already
    writable and skips the active test. ``max_attempts`` only bounds the
    loop when every ``tempN`` name is taken.
    """

    def __init__(self, max_attempts: int = DEFAULT_MAX_ATTEMPTS):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")
        self.max_attempts = max_attempts

    def probe(self, directory: Union[str, Path]) -> PathCandidate:
        """Return the directory together with its writability verdict."""
        return PathCandidate(path=str(directory), writable=self.can_write_to(directory))

    def can_write_to(self, directory: Union[str, Path]) -> bool:
        directory = Path(directory)
        if not directory.is_dir():
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                logger.debug(f"Cannot create {directory}: {e}")
                return False

        if (directory / SALT_FILE_NAME).exists():
            logger.debug(f"Found {SALT_FILE_NAME} in {directory}, trusting it as writable")
            return True

        for index in range(1, self.max_attempts + 1):
            temp = directory / f"{TEMP_FILE_PREFIX}{index}"
            try:
                # O_EXCL so that an existing file is never truncated
                fd = os.open(temp, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
            except FileExistsError:
                continue
            except OSError as e:
                if temp.exists():
                    continue
                logger.debug(f"Cannot write to {directory}: {e}")
                return False

            os.close(fd)
            try:
                temp.unlink()
            except OSError as e:
                logger.warning(f"Could not remove probe file {temp}: {e}")
            logger.debug(f"{directory} is writable")
            return True

        logger.warning(f"Gave up probing {directory} after {self.max_attempts} attempts")
        return False
