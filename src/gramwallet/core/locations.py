"""Executable and application data directory resolution."""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional, Union

from .models import ExecutableLocation, OperatingSystemFamily

logger = logging.getLogger(__name__)

SEPARATOR = "/"


def with_trailing_separator(path: Union[str, Path]) -> str:
    """Absolute, '/'-separated form of ``path`` ending with '/'."""
    absolute = Path(os.path.abspath(path)).as_posix()
    return absolute if absolute.endswith(SEPARATOR) else absolute + SEPARATOR


def _symlink_target(link: Path) -> Path:
    # One level only: a link pointing at another link is not followed further.
    target = Path(os.readlink(link))
    if not target.is_absolute():
        target = link.parent / target
    return Path(os.path.abspath(target))


def resolve_executable_location(path: Optional[Union[str, Path]]) -> ExecutableLocation:
    """Resolve the directory and file name of the running executable.

    A symbolic link is resolved one level to its target. If nothing usable
    exists at the end of that, an empty location is returned and the caller
    is expected to continue without an executable directory.
    """
    if not path:
        logger.warning("Executable path is unknown")
        return ExecutableLocation()

    info = Path(os.path.abspath(path))
    try:
        if info.is_symlink():
            info = _symlink_target(info)
        exists = info.exists()
    except OSError as e:
        logger.warning(f"Could not inspect executable path {info}: {e}")
        return ExecutableLocation()

    if not exists:
        logger.warning(f"Executable path does not exist: {info}")
        return ExecutableLocation()

    return ExecutableLocation(
        directory=with_trailing_separator(info.parent),
        name=info.name,
    )


def standard_app_data_path(app_name: str,
                           os_family: OperatingSystemFamily,
                           environ: Optional[Mapping[str, str]] = None,
                           home: Optional[Union[str, Path]] = None) -> str:
    """Return the per-user application data directory for ``app_name``.

    Windows uses the roaming ``%APPDATA%`` folder, macOS uses
    ``~/Library/Application Support`` and everything else follows the XDG
    base directory rules. The directory is not created here.
    """
    environ = os.environ if environ is None else environ
    home = Path(home) if home is not None else Path.home()

    if os_family is OperatingSystemFamily.WINDOWS:
        appdata = environ.get("APPDATA")
        base = Path(appdata) if appdata else home / "AppData" / "Roaming"
    elif os_family is OperatingSystemFamily.MACOS:
        base = home / "Library" / "Application Support"
    else:
        xdg = environ.get("XDG_DATA_HOME", "")
        # XDG only accepts absolute paths here
        base = Path(xdg) if xdg and os.path.isabs(xdg) else home / ".local" / "share"

    return with_trailing_separator(base / app_name)
