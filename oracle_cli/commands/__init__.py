"""Command extraction, safety and execution for oracle_cli."""

from .extractor import Candidate, CommandExtractor, Source, create_command_extractor
from .safety import CommandSafetyChecker, create_safety_checker
from .relevance import looks_like_command
from .dedupe import dedupe
from .executor import (
    CommandExecutor,
    ExecutionOutcome,
    OutcomeStatus,
    RunDisposition,
    RunReport,
    create_command_executor,
)
from .pipeline import CommandPipeline, create_command_pipeline, extract_commands

__all__ = [
    "Candidate",
    "CommandExtractor",
    "Source",
    "create_command_extractor",
    "CommandSafetyChecker",
    "create_safety_checker",
    "looks_like_command",
    "dedupe",
    "CommandExecutor",
    "ExecutionOutcome",
    "OutcomeStatus",
    "RunDisposition",
    "RunReport",
    "create_command_executor",
    "CommandPipeline",
    "create_command_pipeline",
    "extract_commands",
]
