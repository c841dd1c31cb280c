"""Detection of the platform the launcher runs on."""

import os
import platform
from pathlib import PureWindowsPath
from typing import Mapping, Optional

from .models import BuildProfile, DistributionKind, OperatingSystemFamily, PlatformTarget

# Set by macOS for processes running inside the App Sandbox
MAC_SANDBOX_VARIABLE = "APP_SANDBOX_CONTAINER_ID"
# MSIX / Microsoft Store packages are installed below this folder
WINDOWS_STORE_FOLDER = "windowsapps"


def detect_os_family(system: Optional[str] = None) -> OperatingSystemFamily:
    system = (system if system is not None else platform.system()).lower()
    if system == "windows" or system.startswith(("cygwin", "msys")):
        return OperatingSystemFamily.WINDOWS
    if system == "darwin":
        return OperatingSystemFamily.MACOS
    return OperatingSystemFamily.LINUX


def detect_distribution(os_family: OperatingSystemFamily,
                        executable_path: str,
                        environ: Optional[Mapping[str, str]] = None) -> DistributionKind:
    environ = os.environ if environ is None else environ
    if os_family is OperatingSystemFamily.MACOS and environ.get(MAC_SANDBOX_VARIABLE):
        return DistributionKind.STORE
    if os_family is OperatingSystemFamily.WINDOWS and executable_path:
        parts = [part.lower() for part in PureWindowsPath(executable_path).parts]
        if WINDOWS_STORE_FOLDER in parts:
            return DistributionKind.STORE
    return DistributionKind.DIRECT


def detect_build_profile(frozen: bool, from_source: bool = True) -> BuildProfile:
    """Only runs from a source checkout are debug builds.

    Frozen executables and regular package installs are release builds.
    """
    if frozen or not from_source:
        return BuildProfile.RELEASE
    return BuildProfile.DEBUG


def detect_platform_target(executable_path: str,
                           frozen: bool,
                           from_source: bool = True,
                           environ: Optional[Mapping[str, str]] = None,
                           system: Optional[str] = None,
                           os_family: Optional[OperatingSystemFamily] = None,
                           distribution: Optional[DistributionKind] = None,
                           build_profile: Optional[BuildProfile] = None) -> PlatformTarget:
    """Fill in every value not given explicitly from the running process."""
    os_family = os_family or detect_os_family(system)
    return PlatformTarget(
        os_family=os_family,
        distribution=distribution or detect_distribution(os_family, executable_path, environ),
        build_profile=build_profile or detect_build_profile(frozen, from_source),
    )
