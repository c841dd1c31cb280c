"""Startup orchestration: resolve paths and arguments, then hand off."""

import logging
import tempfile
from pathlib import Path
from typing import Callable, Mapping, Optional, Sequence

from .core.arguments import (
    FORWARD_ARGUMENT_COUNT,
    RawArgument,
    filter_arguments,
    parse_opened_url,
    read_arguments,
)
from .core.locations import resolve_executable_location, standard_app_data_path, with_trailing_separator
from .core.models import FilteredArguments, LaunchContext, PlatformTarget
from .core.probe import DEFAULT_MAX_ATTEMPTS, WritabilityProbe
from .core.target import detect_platform_target
from .core.working_path import PortableModeDetector, WorkingPathResolver
from .utils.config import Config
from .utils.paths import current_executable_path, is_frozen, resource_path, running_from_source

logger = logging.getLogger(__name__)

FONT_CONFIG_RESOURCE = "fc/fc-custom.conf"
FONT_CONFIG_TEMP_NAME = "fc-custom-1.conf"

SandboxFactory = Callable[[LaunchContext, FilteredArguments], object]


def _default_sandbox(context: LaunchContext, arguments: FilteredArguments):
    from .ui.sandbox import Sandbox
    return Sandbox(context, arguments)


def _default_platform():
    from .ui.platform import DesktopPlatform
    return DesktopPlatform()


class Launcher:
    """Runs the bootstrap once and starts the application runtime.

    Everything is resolved in :meth:`init` before any runtime object is
    created. The sandbox receives an immutable :class:`LaunchContext` and a
    filtered argument list, never the raw process arguments.
    """

    def __init__(self, argv: Sequence[RawArgument],
                 config: Optional[Config] = None,
                 sandbox_factory: Optional[SandboxFactory] = None,
                 platform=None,
                 target: Optional[PlatformTarget] = None,
                 environ: Optional[Mapping[str, str]] = None,
                 executable_path: Optional[str] = None,
                 app_data_path: Optional[str] = None):
        self.argv = list(argv)
        self.config = config or Config(environ=environ)
        self.sandbox_factory = sandbox_factory or _default_sandbox
        self.platform = platform
        self.environ = environ
        self._target = target
        self._executable_path = executable_path
        self._app_data_path = app_data_path
        self._context: Optional[LaunchContext] = None

    @classmethod
    def create(cls, argv: Sequence[RawArgument]) -> "Launcher":
        return cls(argv)

    @property
    def context(self) -> Optional[LaunchContext]:
        return self._context

    def init(self) -> LaunchContext:
        """Resolve the launch context. Later calls return the same value."""
        if self._context is not None:
            return self._context

        arguments = read_arguments(self.argv)
        app_name = self.config.app_name

        location = resolve_executable_location(
            self._executable_path or current_executable_path(arguments))
        target = self._target or self._detect_target(location.directory)
        if self._app_data_path:
            app_data_path = with_trailing_separator(self._app_data_path)
        else:
            app_data_path = standard_app_data_path(app_name, target.os_family, self.environ)
        opened_url = parse_opened_url(arguments)

        resolver = WorkingPathResolver(
            executable_path=location.directory,
            app_data_path=app_data_path,
            target=target,
            probe=WritabilityProbe(self._probe_max_attempts()),
            portable=PortableModeDetector(self.config.portable_marker),
        )
        working_path = resolver.compute_working_path()

        self._context = LaunchContext(
            app_name=app_name,
            executable_path=location.directory,
            executable_name=location.name,
            app_data_path=app_data_path,
            working_path=working_path,
            target=target,
            arguments=tuple(arguments),
            opened_url=opened_url,
        )
        logger.debug(f"Launch arguments: {self._context.arguments_string}")
        return self._context

    def startup_options(self) -> dict:
        """Options handed to the platform layer before the runtime starts."""
        return {
            "custom_font_config_src": str(resource_path(FONT_CONFIG_RESOURCE)),
            "custom_font_config_dst": str(Path(tempfile.gettempdir()) / FONT_CONFIG_TEMP_NAME),
        }

    def exec(self) -> int:
        context = self.init()

        platform = self.platform or _default_platform()
        platform.start(self.startup_options())
        try:
            return self.execute_application(context)
        finally:
            platform.finish()

    def execute_application(self, context: LaunchContext) -> int:
        arguments = filter_arguments(self.argv, self._forward_argument_count())
        logger.info(f"Starting {context.app_name} with {arguments.count} forwarded argument(s)")
        sandbox = self.sandbox_factory(context, arguments)
        return sandbox.exec()

    def _detect_target(self, executable_path: str) -> PlatformTarget:
        overrides = {}
        for key in ("os_family", "distribution", "build_profile"):
            try:
                overrides[key] = getattr(self.config, key)
            except ValueError as e:
                logger.warning(f"Ignoring {key} override: {e}")
        return detect_platform_target(
            executable_path, is_frozen(), from_source=running_from_source(),
            environ=self.environ, **overrides)

    def _probe_max_attempts(self) -> int:
        try:
            return self.config.probe_max_attempts
        except ValueError as e:
            logger.warning(f"Using default probe limit: {e}")
            return DEFAULT_MAX_ATTEMPTS

    def _forward_argument_count(self) -> int:
        try:
            return self.config.forward_argument_count
        except ValueError as e:
            logger.warning(f"Forwarding only the executable path: {e}")
            return FORWARD_ARGUMENT_COUNT
