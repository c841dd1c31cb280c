"""Path resolution utilities."""

import os
import sys
from pathlib import Path
from typing import Optional, Sequence

PACKAGE_DIR = Path(__file__).resolve().parent.parent


def is_frozen() -> bool:
    """True when running as a PyInstaller compiled executable."""
    return bool(getattr(sys, "frozen", False))


def running_from_source(package_dir: Path = PACKAGE_DIR) -> bool:
    """True when the package is imported from a checkout (``src/`` next to ``pyproject.toml``).

    Editable installs count as source runs; a regular pip install does not.
    """
    src_dir = package_dir.parent
    return src_dir.name == "src" and (src_dir.parent / "pyproject.toml").is_file()


def current_executable_path(argv: Sequence[str]) -> Optional[str]:
    """Best-effort path of the program the user launched.

    A compiled build is the interpreter binary itself. From source the
    launched script (``argv[0]``) stands in for the executable.
    """
    if is_frozen():
        return sys.executable or None
    if not argv:
        return None
    first = os.fsdecode(argv[0])
    if not first or first in ("-c", "-m"):
        return None
    return os.path.abspath(first)


def resource_path(relative_path: str) -> Path:
    """Resolve bundled resources for PyInstaller / standalone builds."""
    if is_frozen():
        # Onefile builds unpack into _MEIPASS, onedir builds sit next to the exe
        if hasattr(sys, "_MEIPASS"):
            base_path = Path(sys._MEIPASS) / "gramwallet" / "resources"
        else:
            base_path = Path(sys.executable).parent / "gramwallet" / "resources"
        return base_path / relative_path
    return Path(__file__).parent.parent / "resources" / relative_path
