"""Launcher configuration."""

import json
import logging
import os
from pathlib import Path
from typing import Mapping, Optional, Type, TypeVar

from ..core.models import BuildProfile, DistributionKind, OperatingSystemFamily

logger = logging.getLogger(__name__)

ENV_PREFIX = "GRAMWALLET_"

DEFAULTS = {
    "app_name": "Gram Wallet",
    "portable_marker": "WalletForcePortable",
    "forward_argument_count": 1,
    "probe_max_attempts": 2 ** 31 - 1,
    "build_profile": None,
    "distribution": None,
    "os_family": None,
    "log_level": "INFO",
}

E = TypeVar("E", BuildProfile, DistributionKind, OperatingSystemFamily)


class Config:
    """Launcher settings: defaults, then the JSON file, then environment."""

    def __init__(self, config_file: Path = None, environ: Optional[Mapping[str, str]] = None):
        if config_file is None:
            config_file = Path.home() / "gramwallet_launcher.json"
        self.file = Path(config_file)
        self.environ = os.environ if environ is None else environ
        self.data = dict(DEFAULTS)
        self.load()

    def load(self):
        """Load configuration from file and environment overrides."""
        if self.file.exists():
            try:
                with open(self.file, 'r', encoding='utf-8') as f:
                    loaded = json.load(f)
                if isinstance(loaded, dict):
                    self.data.update({k: v for k, v in loaded.items() if k in DEFAULTS and v is not None})
                else:
                    logger.warning(f"Ignoring {self.file}: top level is not an object")
            except (OSError, ValueError) as e:
                logger.warning(f"Ignoring unreadable config {self.file}: {e}")

        for key in DEFAULTS:
            value = self.environ.get(ENV_PREFIX + key.upper())
            if value:
                self.data[key] = value
        # FORWARD_ARGUMENTS is shorter than the key name
        forward = self.environ.get(ENV_PREFIX + "FORWARD_ARGUMENTS")
        if forward:
            self.data["forward_argument_count"] = forward

    @property
    def app_name(self) -> str:
        return str(self.data["app_name"])

    @property
    def portable_marker(self) -> str:
        return str(self.data["portable_marker"])

    @property
    def forward_argument_count(self) -> int:
        return self._int("forward_argument_count", minimum=0)

    @property
    def probe_max_attempts(self) -> int:
        return self._int("probe_max_attempts", minimum=1)

    @property
    def log_level(self) -> str:
        return str(self.data["log_level"]).upper()

    @property
    def build_profile(self) -> Optional[BuildProfile]:
        return self._enum("build_profile", BuildProfile)

    @property
    def distribution(self) -> Optional[DistributionKind]:
        return self._enum("distribution", DistributionKind)

    @property
    def os_family(self) -> Optional[OperatingSystemFamily]:
        return self._enum("os_family", OperatingSystemFamily)

    def _int(self, key: str, minimum: int) -> int:
        try:
            value = int(self.data[key])
        except (TypeError, ValueError):
            raise ValueError(f"{key} must be an integer, got {self.data[key]!r}")
        if value < minimum:
            raise ValueError(f"{key} must be at least {minimum}, got {value}")
        return value

    def _enum(self, key: str, enum_type: Type[E]) -> Optional[E]:
        value = self.data.get(key)
        if value is None or value == "":
            return None
        try:
            return enum_type(str(value).lower())
        except ValueError:
            choices = ", ".join(member.value for member in enum_type)
            raise ValueError(f"{key} must be one of {choices}, got {value!r}")
