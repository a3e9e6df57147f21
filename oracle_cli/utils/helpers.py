"""Helper utility functions for oracle_cli."""

import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from ..constants import DEFAULT_SHELL
from ..utils.logging import logger


def get_default_shell(configured: Optional[str] = None) -> str:
    """Return the shell used to run commands.

    The configured shell wins, then ``$SHELL``, then ``/bin/sh``.
    """
    if configured:
        return configured
    return os.environ.get("SHELL") or DEFAULT_SHELL


def ensure_directory_exists(directory: Path) -> None:
    """Ensure a directory exists, creating it if necessary."""
    try:
        directory.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Directory ensured: {directory}")
    except Exception as e:
        logger.error(f"Failed to create directory {directory}: {e}")
        raise


def safe_file_write(file_path: Path, content: str, description: str = None) -> bool:
    """Safely write content to a file with error handling."""
    desc = description or f"file {file_path}"
    try:
        file_path.write_text(content)
        logger.debug(f"Wrote {desc}")
        return True
    except Exception as e:
        logger.error(f"Failed to write {desc}: {e}")
        return False


def atomic_file_write(file_path: Path, content: str, mode: int = 0o600) -> bool:
    """Write a file through a temporary file in the same directory, then move it in place."""
    temp_name = None
    try:
        with tempfile.NamedTemporaryFile('w', delete=False, dir=file_path.parent, suffix='.tmp') as tmp_f:
            tmp_f.write(content)
            temp_name = tmp_f.name
        os.chmod(temp_name, mode)
        shutil.move(temp_name, str(file_path))
        return True
    except OSError as e:
        logger.error(f"Failed to write {file_path}: {e}")
        if temp_name and Path(temp_name).exists():
            Path(temp_name).unlink()
        return False
