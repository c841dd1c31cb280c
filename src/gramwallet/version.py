"""Version management for Gram Wallet."""

from importlib import metadata
from pathlib import Path

try:
    import tomllib
except ImportError:
    # Python < 3.11 fallback
    import tomli as tomllib  # type: ignore

DISTRIBUTION_NAME = "gramwallet"


def get_version() -> str:
    """Installed package version, or the one in pyproject.toml for source runs."""
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        pass

    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    try:
        with open(pyproject_path, "rb") as f:
            return tomllib.load(f)["project"]["version"]
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        return "0.0.0"


__version__ = get_version()
