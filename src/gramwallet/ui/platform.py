"""Platform start and finish hooks run around the sandbox."""

import logging
import os
import platform
import shutil
from pathlib import Path
from typing import Mapping

logger = logging.getLogger(__name__)

FONTCONFIG_VARIABLE = "FONTCONFIG_FILE"


class DesktopPlatform:
    """Applies the startup options to the process before the UI starts.

    Whatever :meth:`start` changes in the process is undone by :meth:`finish`.
    """

    def __init__(self):
        self._font_config = None
        self._previous_font_config = None

    def start(self, options: Mapping[str, str]):
        # A private fontconfig file is only meaningful on Linux desktops
        if platform.system() != "Linux":
            return
        src = options.get("custom_font_config_src")
        dst = options.get("custom_font_config_dst")
        if not src or not dst or not Path(src).exists():
            return
        try:
            shutil.copyfile(src, dst)
        except OSError as e:
            logger.warning(f"Could not install font config to {dst}: {e}")
            return
        self._previous_font_config = os.environ.get(FONTCONFIG_VARIABLE)
        os.environ[FONTCONFIG_VARIABLE] = dst
        self._font_config = Path(dst)
        logger.debug(f"Using font config {dst}")

    def finish(self):
        if self._font_config is None:
            return
        if self._previous_font_config is None:
            os.environ.pop(FONTCONFIG_VARIABLE, None)
        else:
            os.environ[FONTCONFIG_VARIABLE] = self._previous_font_config
        try:
            self._font_config.unlink()
        except OSError as e:
            logger.debug(f"Could not remove {self._font_config}: {e}")
        self._font_config = None
        self._previous_font_config = None
