"""Data models for the launch bootstrap."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class OperatingSystemFamily(Enum):
    """Operating system the launcher decides paths for."""
    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"

    @property
    def is_unix_like(self) -> bool:
        return self in (OperatingSystemFamily.LINUX, OperatingSystemFamily.MACOS)


class DistributionKind(Enum):
    """How the application was installed."""
    DIRECT = "direct"  # conventional installer or unpacked archive
    STORE = "store"    # locked-down store / sandboxed package


class BuildProfile(Enum):
    DEBUG = "debug"
    RELEASE = "release"


@dataclass(frozen=True)
class PlatformTarget:
    """Explicit inputs of the working path decision table."""
    os_family: OperatingSystemFamily
    distribution: DistributionKind
    build_profile: BuildProfile


@dataclass(frozen=True)
class ExecutableLocation:
    """Directory (with trailing '/') and file name of the running executable.

    Both are empty strings when the executable could not be resolved.
    """
    directory: str = ""
    name: str = ""

    @property
    def resolved(self) -> bool:
        return bool(self.directory)


@dataclass(frozen=True)
class PathCandidate:
    """A directory checked by the writability probe."""
    path: str
    writable: bool


@dataclass(frozen=True)
class FilteredArguments:
    """Bounded prefix of the raw argument vector forwarded to the runtime."""
    values: Tuple[str, ...] = ()
    capacity: int = 1

    @property
    def count(self) -> int:
        return len(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self):
        return iter(self.values)


@dataclass(frozen=True)
class LaunchContext:
    """Resolved startup state, built once and handed to the runtime read-only."""
    app_name: str
    executable_path: str
    executable_name: str
    app_data_path: str
    working_path: str
    target: PlatformTarget
    arguments: Tuple[str, ...] = field(default_factory=tuple)
    opened_url: Optional[str] = None

    @property
    def arguments_string(self) -> str:
        return " ".join(self.arguments)
