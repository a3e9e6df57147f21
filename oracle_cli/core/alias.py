"""Installation of the 'oa' shell alias."""

import os
from pathlib import Path
from typing import Optional, Tuple

from ..constants import ALIAS_LINE, ALIAS_NAME
from ..utils.logging import logger


class AliasSetupError(Exception):
    """Raised when the alias cannot be installed automatically."""


def resolve_shell_config(shell: str, home: Path) -> Path:
    """Return the rc file that should hold the alias for the given shell path."""
    if "zsh" in shell:
        return home / ".zshrc"
    if "bash" in shell:
        bashrc = home / ".bashrc"
        return bashrc if bashrc.exists() else home / ".bash_profile"
    if "fish" in shell:
        return home / ".config" / "fish" / "config.fish"
    raise AliasSetupError(f"unsupported shell: {shell or '(unset)'}")


def alias_exists(config_file: Path) -> bool:
    """Whether the rc file already defines the alias."""
    if not config_file.exists():
        return False
    marker = f"alias {ALIAS_NAME}="
    with open(config_file, 'r', errors='replace') as f:
        return any(marker in line for line in f)


def setup_alias(shell: Optional[str] = None, home: Optional[Path] = None) -> Tuple[Path, bool]:
    """Append the alias to the operator's shell configuration.

    Args:
        shell: Shell path, defaults to $SHELL
        home: Home directory, defaults to the current user's

    Returns:
        Tuple of (config_file, added); added is False when the alias was already present

    Raises:
        AliasSetupError: If the shell is unsupported or the file cannot be written
    """
    shell = shell if shell is not None else os.environ.get("SHELL", "")
    home = home or Path.home()
    config_file = resolve_shell_config(shell, home)

    try:
        if alias_exists(config_file):
            logger.debug(f"Alias '{ALIAS_NAME}' already present in {config_file}")
            return config_file, False

        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, 'a') as f:
            f.write(f"\n# Oracle CLI alias\n{ALIAS_LINE}\n")
    except OSError as e:
        raise AliasSetupError(f"failed to update {config_file}: {e}") from e

    return config_file, True


def alias_instructions() -> str:
    """Manual setup instructions shown when automatic setup is declined or fails."""
    return (
        "To add the alias manually, put this line in your shell configuration file:\n"
        f"  {ALIAS_LINE}\n"
        "then restart your shell or source the file."
    )
