"""
oracle - AI-powered terminal assistant with command execution.

This package asks a Gemini model a question, prints the answer, and can pick the
shell commands out of that answer, filter out destructive ones, and run the ones
the user confirms.
"""

__version__ = "1.0.0"
__author__ = "oracle Team"

# Main API imports
from .core.application import Oracle, create_application
from .commands.pipeline import extract_commands
from .config.manager import ConfigManager, create_config_manager

__all__ = [
    "Oracle",
    "create_application",
    "extract_commands",
    "ConfigManager",
    "create_config_manager",
    "__version__",
]
