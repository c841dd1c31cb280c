"""Utility functions and classes for Gram Wallet."""

from .config import Config
from .paths import current_executable_path, is_frozen, resource_path
from .logging import log_error, setup_logging

__all__ = [
    "Config",
    "current_executable_path",
    "is_frozen",
    "resource_path",
    "log_error",
    "setup_logging",
]
