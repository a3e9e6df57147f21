"""Main application class for oracle_cli."""

from typing import Optional
from pathlib import Path

from ..commands import (
    CommandExecutor,
    CommandPipeline,
    RunReport,
    create_command_executor,
    create_command_pipeline,
)
from ..config.manager import create_config_manager
from ..constants import API_KEY_ENV_VAR, CLR_BOLD_CYAN, CLR_DIM, CLR_RESET
from ..llm import create_llm_client
from ..utils.logging import logger
from . import prompts
from .alias import AliasSetupError, alias_instructions, setup_alias


class Oracle:
    """Asks questions, shows the answer and offers to run the commands it contains."""

    def __init__(self,
                 config_dir: Optional[str] = None,
                 debug: bool = False,
                 model: Optional[str] = None):
        """Initialize the oracle application.

        Args:
            config_dir: Custom configuration directory path
            debug: Enable debug logging
            model: Model name overriding the configured one
        """
        logger.set_debug(debug)

        config_path = Path(config_dir) if config_dir else None
        self.config_manager = create_config_manager(config_path)
        self.config = self.config_manager.config

        if not debug and self.config.get("enable_debug", False):
            logger.set_debug(True)

        if model:
            self.config["model"] = model

        self.pipeline: CommandPipeline = create_command_pipeline(self.config.get("extra_dangerous_patterns"))
        self.executor: CommandExecutor = create_command_executor(self.config.get("shell"))

        logger.debug("Application initialization complete")

    @property
    def commands_enabled(self) -> bool:
        return bool(self.config.get("enable_commands", False))

    def run_first_run_setup(self) -> None:
        """Offer alias installation the first time oracle runs, then record that it ran."""
        if not self.config_manager.is_first_run():
            return

        print(f"{CLR_BOLD_CYAN}Welcome to Oracle!{CLR_RESET} "
              "You can install the 'oa' alias as a shortcut for 'oracle ask'.")
        if prompts.ask_yes_no("Set up the 'oa' alias now?"):
            self.install_alias()
        else:
            logger.system(alias_instructions())

        if not self.config_manager.mark_first_run_complete():
            logger.warning("Could not mark first run as complete")
        print()

    def install_alias(self) -> bool:
        """Install the shell alias, reporting manual instructions on failure."""
        try:
            config_file, added = setup_alias()
        except AliasSetupError as e:
            logger.error(f"Failed to set up alias automatically: {e}")
            logger.system(alias_instructions())
            return False

        if added:
            logger.system(f"Alias added to {config_file}. Restart your shell or run: source {config_file}")
        else:
            logger.system(f"Alias already exists in {config_file}")
        return True

    def resolve_api_key(self, flag_api_key: Optional[str] = None) -> str:
        """Find the API key, prompting for it and saving it when none is configured."""
        api_key = self.config_manager.get_api_key(flag_api_key)
        if api_key:
            return api_key

        logger.system("A Google AI API key is required "
                      "(get one from https://ai.google.dev/gemini-api/docs/api-key).")
        logger.system(f"You can also set the {API_KEY_ENV_VAR} environment variable.")
        api_key = prompts.prompt_for_text("Enter your Google AI API key: ")
        if not api_key:
            logger.error("API key cannot be empty")
            return ""

        if self.config_manager.set_api_key(api_key):
            logger.system(f"API key saved to {self.config_manager.config_file}")
        else:
            logger.warning("API key could not be saved; it will be used for this session only")
        return api_key

    def ask(self, question: str, execute: bool = False, api_key: Optional[str] = None) -> bool:
        """Answer a question and optionally run the commands found in the answer.

        Args:
            question: The user's question
            execute: Offer to run detected commands (also enabled by config)
            api_key: API key passed on the command line

        Returns:
            True if an answer was obtained and no executed command failed
        """
        try:
            resolved_key = self.resolve_api_key(api_key)
            if not resolved_key:
                return False

            client = create_llm_client(self.config, resolved_key)
            print(f"{CLR_DIM}> {question}{CLR_RESET}\n")
            answer = client.ask(question)
            if answer is None:
                return False

            if not (execute or self.commands_enabled):
                return True

            report = self.run_commands(answer)
            return report is None or not report.failures
        except KeyboardInterrupt:
            logger.system("Interrupted by user")
            return False

    def run_commands(self, answer: str) -> Optional[RunReport]:
        """Extract commands from an answer and run the ones the operator confirms.

        Returns:
            The run report, or None when the answer contained no commands
        """
        commands = self.pipeline.extract_commands(answer)
        if not commands:
            logger.debug("No executable commands detected")
            return None

        prompts.show_commands_detected(commands)

        report = self.executor.run(
            commands,
            confirm=prompts.confirm_execution,
            on_failure=prompts.confirm_continue_on_error,
            on_start=prompts.show_command_progress,
            on_result=lambda outcome: prompts.show_command_result(outcome.success, outcome.detail),
        )

        for outcome in report.executed:
            logger.debug(f"{outcome.command}: {outcome.detail}")

        prompts.show_execution_summary(report.completed, len(report.executed), len(report.failures))
        return report


def create_application(config_dir: Optional[str] = None,
                       debug: bool = False,
                       model: Optional[str] = None) -> Oracle:
    """Create and initialize an Oracle application instance.

    Args:
        config_dir: Custom configuration directory path
        debug: Enable debug logging
        model: Model name overriding the configured one

    Returns:
        Initialized Oracle instance
    """
    return Oracle(config_dir, debug, model)
