"""Turns an LLM response into the ordered set of commands offered to the operator."""

from typing import List, Optional

from ..utils.logging import logger
from .dedupe import dedupe
from .extractor import Candidate, CommandExtractor, create_command_extractor
from .relevance import looks_like_command
from .safety import CommandSafetyChecker, create_safety_checker


class CommandPipeline:
    """Extraction, safety filtering, relevance filtering and deduplication."""

    def __init__(self,
                 extractor: Optional[CommandExtractor] = None,
                 safety_checker: Optional[CommandSafetyChecker] = None):
        self.extractor = extractor or create_command_extractor()
        self.safety_checker = safety_checker or create_safety_checker()

    def _accept(self, candidate: Candidate) -> bool:
        if not self.safety_checker.is_safe(candidate.text):
            return False
        if candidate.needs_relevance_check and not looks_like_command(candidate.text):
            logger.debug(f"Ignoring inline reference: {candidate.text}")
            return False
        return True

    def extract_commands(self, text: str) -> List[str]:
        """Extract the distinct, safety-approved commands from a response.

        Args:
            text: Complete LLM response

        Returns:
            Commands in first-seen order; empty when nothing executable was found
        """
        candidates = self.extractor.extract(text)
        accepted = [candidate for candidate in candidates if self._accept(candidate)]
        commands = dedupe(accepted)
        logger.debug(f"Extracted {len(commands)} command(s) from {len(candidates)} candidate(s)")
        return commands


def create_command_pipeline(extra_patterns: Optional[List[str]] = None) -> CommandPipeline:
    """Create a pipeline using the default detectors and the given extra deny patterns."""
    return CommandPipeline(safety_checker=create_safety_checker(extra_patterns))


def extract_commands(text: str) -> List[str]:
    """Extract commands from a response with the default pipeline."""
    return create_command_pipeline().extract_commands(text)
