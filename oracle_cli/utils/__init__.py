"""Utility functions and helpers for oracle_cli."""

from .logging import logger
from .helpers import (
    get_default_shell,
    ensure_directory_exists,
    safe_file_write,
    atomic_file_write,
)

__all__ = [
    "logger",
    "get_default_shell",
    "ensure_directory_exists",
    "safe_file_write",
    "atomic_file_write",
]
