"""Heuristic for telling inline code references apart from shell commands."""

from ..constants import COMMON_COMMANDS

_COMMAND_WORDS = frozenset(COMMON_COMMANDS)

# A path separator or shell operator is enough to treat a span as a command
_SHELL_SIGNAL_CHARS = ("/", "|", ">", "<")


def looks_like_command(text: str) -> bool:
    """Decide whether an inline code span plausibly is a shell command.

    True when the first word is a well-known command name, or the text contains
    a path separator or redirection/pipe character. Variable names, file names
    and similar references such as ``README.md`` return False.
    """
    words = text.split()
    if not words:
        return False

    if words[0].lower() in _COMMAND_WORDS:
        return True

    return any(char in text for char in _SHELL_SIGNAL_CHARS)
