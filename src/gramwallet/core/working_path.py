"""Choice of the directory that holds the application data."""

import logging
from pathlib import Path
from typing import Optional

from .locations import SEPARATOR, with_trailing_separator
from .models import BuildProfile, DistributionKind, PlatformTarget
from .probe import WritabilityProbe

logger = logging.getLogger(__name__)

PORTABLE_MARKER = "WalletForcePortable"
DATA_DIRECTORY = "data"


class PortableModeDetector:
    """Looks for the marker directory that forces portable mode."""

    def __init__(self, marker: str = PORTABLE_MARKER):
        self.marker = marker

    def check(self, executable_path: str) -> Optional[str]:
        """Return the marker directory with a trailing '/', or None."""
        if not executable_path:
            return None
        portable = Path(executable_path) / self.marker
        if portable.is_dir():
            return with_trailing_separator(portable)
        return None


class WorkingPathResolver:
    """Combines the resolved locations into one working directory."""

    def __init__(self, executable_path: str, app_data_path: str, target: PlatformTarget,
                 probe: Optional[WritabilityProbe] = None,
                 portable: Optional[PortableModeDetector] = None):
        self.executable_path = executable_path
        self.app_data_path = app_data_path
        self.target = target
        self.probe = probe or WritabilityProbe()
        self.portable = portable or PortableModeDetector()

    def compute_working_path_base(self) -> str:
        portable = self.portable.check(self.executable_path)
        if portable:
            logger.info(f"Portable mode forced by {portable}")
            return portable

        if not self.executable_path:
            return self.app_data_path

        target = self.target
        if not target.os_family.is_unix_like and target.distribution is DistributionKind.DIRECT:
            if self.can_work_in_executable_path():
                return self.executable_path
            return self.app_data_path

        # Unix-like systems and store packages: only debug builds keep data
        # next to the binary.
        if target.build_profile is BuildProfile.DEBUG:
            return self.executable_path
        return self.app_data_path

    def can_work_in_executable_path(self) -> bool:
        return self.probe.can_write_to(self.executable_path + DATA_DIRECTORY)

    def compute_working_path(self) -> str:
        """Return ``<base>data/``."""
        base = self.compute_working_path_base()
        if not base.endswith(SEPARATOR):
            base += SEPARATOR
        working_path = base + DATA_DIRECTORY + SEPARATOR
        logger.info(f"Working path: {working_path}")
        return working_path
