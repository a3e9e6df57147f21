"""Core application logic for oracle_cli."""

from .application import Oracle, create_application
from .alias import AliasSetupError, setup_alias

__all__ = [
    "Oracle",
    "create_application",
    "AliasSetupError",
    "setup_alias",
]
