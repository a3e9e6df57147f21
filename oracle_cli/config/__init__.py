"""Configuration management for oracle_cli."""

from .manager import ConfigManager, create_config_manager
from .templates import CONFIG_TEMPLATE, SYSTEM_PROMPT

__all__ = [
    "ConfigManager",
    "create_config_manager",
    "CONFIG_TEMPLATE",
    "SYSTEM_PROMPT",
]
