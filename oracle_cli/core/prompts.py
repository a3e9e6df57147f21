"""Operator prompts: confirmation of suggested commands and continue-on-error decisions."""

from typing import List

from ..constants import (
    CLR_BOLD_CYAN, CLR_BOLD_GREEN, CLR_BOLD_RED, CLR_BOLD_YELLOW, CLR_CYAN,
    CLR_DIM, CLR_GREEN, CLR_RED, CLR_RESET, CLR_YELLOW
)


def ask_yes_no(prompt: str) -> bool:
    """Ask a y/N question; anything but 'y'/'yes' (including EOF or Ctrl+C) is no."""
    try:
        answer = input(f"{prompt} (y/N): ")
    except (EOFError, KeyboardInterrupt):
        print()
        return False
    return answer.strip().lower() in ("y", "yes")


def prompt_for_text(prompt: str) -> str:
    """Read one line of input; returns an empty string on EOF or Ctrl+C."""
    try:
        return input(prompt).strip()
    except (EOFError, KeyboardInterrupt):
        print()
        return ""


def show_commands_detected(commands: List[str]) -> None:
    """Print the numbered list of detected commands."""
    print(f"\n{CLR_BOLD_YELLOW}⚡ Detected Executable Commands:{CLR_RESET}")
    width = len(str(len(commands)))
    for index, command in enumerate(commands, 1):
        print(f"  {CLR_BOLD_CYAN}{index:>{width}}{CLR_RESET}  {command}")
    print()


def confirm_execution(command: str) -> bool:
    """Show a command in full and ask whether to run it."""
    print(f"{CLR_YELLOW}Command:{CLR_RESET} {CLR_BOLD_GREEN}{command}{CLR_RESET}")
    return ask_yes_no(f"{CLR_YELLOW}Execute this command?{CLR_RESET}")


def confirm_continue_on_error() -> bool:
    """Ask whether to keep going after a failed command."""
    return ask_yes_no(f"{CLR_BOLD_RED}Command failed!{CLR_RESET} {CLR_YELLOW}Continue with remaining commands?{CLR_RESET}")


def show_command_progress(position: int, total: int, command: str) -> None:
    print(f"\n{CLR_CYAN}[{position}/{total}]{CLR_RESET} {CLR_DIM}$ {command}{CLR_RESET}")


def show_command_result(success: bool, detail: str) -> None:
    if success:
        print(f"{CLR_GREEN}✅ Command completed successfully{CLR_RESET}")
    else:
        print(f"{CLR_RED}❌ Command failed ({detail}){CLR_RESET}")


def show_execution_summary(completed: bool, executed: int, failed: int) -> None:
    if completed:
        print(f"\n{CLR_BOLD_GREEN}🎉 Execution complete: {executed} command(s) run, {failed} failed{CLR_RESET}")
    else:
        print(f"\n{CLR_BOLD_YELLOW}⚠️  Execution stopped after {executed} command(s){CLR_RESET}")
