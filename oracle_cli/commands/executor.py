"""Command execution utilities for oracle_cli."""

import subprocess
from enum import Enum
from typing import Callable, List, Optional, Sequence

from ..utils.helpers import get_default_shell
from ..utils.logging import logger


class OutcomeStatus(Enum):
    """Result of a single command in a run."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED = "skipped"


class RunDisposition(Enum):
    """Terminal state of a batch execution run."""

    COMPLETED_ALL = "completed_all"
    STOPPED_BY_USER = "stopped_by_user"


class ExecutionOutcome:
    """Represents the result of one command considered during a run."""

    def __init__(self,
                 command: str,
                 status: OutcomeStatus,
                 exit_code: Optional[int] = None,
                 error_message: str = ""):
        self.command = command
        self.status = status
        self.exit_code = exit_code
        self.error_message = error_message

    @property
    def success(self) -> bool:
        """Whether the command ran and exited with status 0."""
        return self.status is OutcomeStatus.SUCCEEDED

    @property
    def launch_failed(self) -> bool:
        """Whether the shell could not be started at all."""
        return self.status is OutcomeStatus.FAILED and self.exit_code is None

    @property
    def detail(self) -> str:
        """Human readable exit detail."""
        if self.status is OutcomeStatus.SKIPPED:
            return "skipped"
        if self.launch_failed:
            return f"failed to start: {self.error_message}"
        return f"exit code {self.exit_code}"

    def __repr__(self) -> str:
        return f"ExecutionOutcome({self.command!r}, {self.status.value}, {self.detail})"


class RunReport:
    """Ordered outcomes of a run plus its disposition."""

    def __init__(self, outcomes: List[ExecutionOutcome], disposition: RunDisposition):
        self.outcomes = outcomes
        self.disposition = disposition

    @property
    def executed(self) -> List[ExecutionOutcome]:
        """Outcomes of commands that were actually attempted."""
        return [o for o in self.outcomes if o.status is not OutcomeStatus.SKIPPED]

    @property
    def failures(self) -> List[ExecutionOutcome]:
        return [o for o in self.outcomes if o.status is OutcomeStatus.FAILED]

    @property
    def completed(self) -> bool:
        return self.disposition is RunDisposition.COMPLETED_ALL


class CommandExecutor:
    """Runs confirmed shell commands one at a time on the operator's terminal."""

    def __init__(self, shell: Optional[str] = None):
        """Initialize command executor.

        Args:
            shell: Shell executable; falls back to $SHELL, then /bin/sh
        """
        self.shell = get_default_shell(shell)

    def execute(self, command: str) -> ExecutionOutcome:
        """Execute a single command with inherited stdin, stdout and stderr.

        There is no timeout; an interactive or hung program holds the run until it exits.

        Args:
            command: Shell command to execute

        Returns:
            ExecutionOutcome describing the exit status or launch failure
        """
        logger.command(f"Executing: {command}")

        try:
            process = subprocess.run([self.shell, "-c", command])
        except (OSError, ValueError) as e:
            error_msg = f"could not start {self.shell}: {e}"
            logger.error(error_msg)
            return ExecutionOutcome(command, OutcomeStatus.FAILED, error_message=error_msg)

        if process.returncode != 0:
            logger.command(f"Command failed with exit code {process.returncode}")
            return ExecutionOutcome(command, OutcomeStatus.FAILED, exit_code=process.returncode)

        logger.command("Command completed successfully")
        return ExecutionOutcome(command, OutcomeStatus.SUCCEEDED, exit_code=0)

    def run(self,
            commands: Sequence[str],
            confirm: Callable[[str], bool],
            on_failure: Callable[[], bool],
            on_start: Optional[Callable[[int, int, str], None]] = None,
            on_result: Optional[Callable[[ExecutionOutcome], None]] = None) -> RunReport:
        """Confirm and execute commands in order.

        Args:
            commands: Distinct commands in the order they should run
            confirm: Asked once per command; False skips that command
            on_failure: Asked after a failed command; False stops the run
            on_start: Optional progress callback taking (position, total, command)
            on_result: Optional callback receiving each executed command's outcome

        Returns:
            RunReport with one outcome per command reached
        """
        outcomes: List[ExecutionOutcome] = []
        total = len(commands)

        for position, command in enumerate(commands, 1):
            if not confirm(command):
                logger.debug(f"Skipped by operator: {command}")
                outcomes.append(ExecutionOutcome(command, OutcomeStatus.SKIPPED))
                continue

            if on_start:
                on_start(position, total, command)

            outcome = self.execute(command)
            outcomes.append(outcome)
            if on_result:
                on_result(outcome)

            if not outcome.success and not on_failure():
                logger.system("Execution stopped by user")
                return RunReport(outcomes, RunDisposition.STOPPED_BY_USER)

        return RunReport(outcomes, RunDisposition.COMPLETED_ALL)


def create_command_executor(shell: Optional[str] = None) -> CommandExecutor:
    """Create a command executor for the given (or default) shell."""
    return CommandExecutor(shell)
