"""Command safety checks for oracle_cli."""

from typing import List, Optional, Tuple

from ..constants import DANGEROUS_COMMANDS, MAX_COMMAND_LENGTH
from ..utils.logging import logger


class CommandSafetyChecker:
    """Accepts or rejects command candidates using a deny-list and structural heuristics.

    The checks are coarse and can reject harmless commands. Accepted commands
    still require operator confirmation before they run.
    """

    def __init__(self, extra_patterns: Optional[List[str]] = None):
        """Initialize safety checker with the default destructive patterns.

        Args:
            extra_patterns: Additional substrings to reject, matched case-insensitively
        """
        self.dangerous_patterns = list(DANGEROUS_COMMANDS)
        self.max_length = MAX_COMMAND_LENGTH
        for pattern in extra_patterns or []:
            self.add_dangerous_pattern(pattern)

    def check(self, command: str) -> Tuple[bool, str]:
        """Check a command candidate.

        Args:
            command: Candidate command text

        Returns:
            Tuple of (is_safe, reason); reason is empty for safe commands
        """
        command_lower = command.lower()
        for pattern in self.dangerous_patterns:
            if pattern in command_lower:
                return False, f"matches dangerous pattern '{pattern}'"

        if len(command) > self.max_length:
            return False, f"longer than {self.max_length} characters"

        if "&&" in command and "rm" in command:
            return False, "chains a removal with '&&'"

        return True, ""

    def is_safe(self, command: str) -> bool:
        """Whether a candidate may be offered for execution."""
        safe, reason = self.check(command)
        if not safe:
            logger.debug(f"Rejected command '{command[:60]}': {reason}")
        return safe

    def add_dangerous_pattern(self, pattern: str) -> None:
        """Add a custom dangerous pattern."""
        pattern = pattern.lower()
        if pattern and pattern not in self.dangerous_patterns:
            self.dangerous_patterns.append(pattern)
            logger.debug(f"Added dangerous pattern: {pattern}")


def create_safety_checker(extra_patterns: Optional[List[str]] = None) -> CommandSafetyChecker:
    """Create a command safety checker with default patterns."""
    return CommandSafetyChecker(extra_patterns)
