"""Command-line interface for oracle_cli."""

import argparse
import sys
from typing import List, Optional

from colorama import init as colorama_init

from .core.application import create_application
from .core import prompts
from .utils.logging import logger
from . import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="oracle",
        description="Oracle: ask an AI model questions and run the shell commands it suggests.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  oracle ask "What is the meaning of life?"
  oracle ask "how do I list open ports" -x     # Offer to run suggested commands
  oracle ask "Explain quantum computing" --model gemini-pro
  oracle ask  # Prompt for the question

API key lookup order: --api-key, GOOGLE_AI_API_KEY, ~/.oracle/config.yaml
        """
    )

    parser.add_argument(
        'question',
        nargs='*',
        help="Question to ask (an optional leading 'ask' is ignored). If empty, you are prompted for one."
    )

    parser.add_argument(
        '-k', '--api-key',
        help="Google AI API key (can also use GOOGLE_AI_API_KEY env var)"
    )

    parser.add_argument(
        '-m', '--model',
        help="AI model to use (default from config, gemini-2.0-flash-exp)"
    )

    parser.add_argument(
        '-x', '--execute',
        action='store_true',
        help="Enable command execution (allows Oracle to run shell commands after confirmation)"
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'oracle {__version__}'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="Enable debug logging output"
    )

    parser.add_argument(
        '--config-dir',
        type=str,
        help="Custom configuration directory path"
    )

    parser.add_argument(
        '--setup-alias',
        action='store_true',
        help="Install the 'oa' shell alias and exit"
    )

    return parser


def main(args: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI."""
    colorama_init(autoreset=True)

    parser = create_parser()
    parsed_args = parser.parse_args(args)

    try:
        app = create_application(
            config_dir=parsed_args.config_dir,
            debug=parsed_args.debug,
            model=parsed_args.model,
        )
    except Exception as e:
        logger.error(f"Failed to initialize oracle: {e}")
        sys.exit(1)

    if parsed_args.setup_alias:
        sys.exit(0 if app.install_alias() else 1)

    app.run_first_run_setup()

    words = list(parsed_args.question)
    if words and words[0] == "ask":
        words = words[1:]
    question = " ".join(words).strip()
    if not question:
        question = prompts.prompt_for_text("What would you like to ask? ")
    if not question:
        logger.error("No question provided")
        sys.exit(1)

    success = app.ask(question, execute=parsed_args.execute, api_key=parsed_args.api_key)
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
