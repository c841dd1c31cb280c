"""Core path and argument resolution for Gram Wallet startup."""

from .models import (
    BuildProfile,
    DistributionKind,
    ExecutableLocation,
    FilteredArguments,
    LaunchContext,
    OperatingSystemFamily,
    PathCandidate,
    PlatformTarget,
)
from .arguments import decode_argument, filter_arguments, parse_opened_url, read_arguments
from .locations import resolve_executable_location, standard_app_data_path, with_trailing_separator
from .probe import WritabilityProbe
from .target import detect_platform_target
from .working_path import PortableModeDetector, WorkingPathResolver

__all__ = [
    "BuildProfile",
    "DistributionKind",
    "ExecutableLocation",
    "FilteredArguments",
    "LaunchContext",
    "OperatingSystemFamily",
    "PathCandidate",
    "PlatformTarget",
    "decode_argument",
    "filter_arguments",
    "parse_opened_url",
    "read_arguments",
    "resolve_executable_location",
    "standard_app_data_path",
    "with_trailing_separator",
    "WritabilityProbe",
    "detect_platform_target",
    "PortableModeDetector",
    "WorkingPathResolver",
]
