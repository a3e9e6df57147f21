"""Constants used throughout the oracle_cli package."""

from pathlib import Path
from colorama import Fore, Style

# Package information
PACKAGE_NAME = "oracle"

# Configuration paths
CONFIG_DIR = Path.home() / ".oracle"

# ANSI Color Codes (using colorama)
CLR_RESET = Style.RESET_ALL
CLR_RED = Fore.RED
CLR_BOLD_RED = Style.BRIGHT + Fore.RED
CLR_GREEN = Fore.GREEN
CLR_BOLD_GREEN = Style.BRIGHT + Fore.GREEN
CLR_YELLOW = Fore.YELLOW
CLR_BOLD_YELLOW = Style.BRIGHT + Fore.YELLOW
CLR_BLUE = Fore.BLUE
CLR_BOLD_BLUE = Style.BRIGHT + Fore.BLUE
CLR_MAGENTA = Fore.MAGENTA
CLR_BOLD_MAGENTA = Style.BRIGHT + Fore.MAGENTA
CLR_CYAN = Fore.CYAN
CLR_BOLD_CYAN = Style.BRIGHT + Fore.CYAN
CLR_WHITE = Fore.WHITE
CLR_BOLD_WHITE = Style.BRIGHT + Fore.WHITE
CLR_DIM = Style.DIM

# Default configuration values
DEFAULT_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.0-flash-exp"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_REQUEST_TIMEOUT = 60
DEFAULT_ENABLE_COMMANDS = False
DEFAULT_ENABLE_DEBUG = False
DEFAULT_SHELL = "/bin/sh"

# Environment variables
API_KEY_ENV_VAR = "GOOGLE_AI_API_KEY"

# Shell alias installed on first run
ALIAS_NAME = "oa"
ALIAS_LINE = f"alias {ALIAS_NAME}='oracle ask'"

# Command extraction limits
MAX_COMMAND_LENGTH = 200

# Substrings that mark a candidate as destructive (matched case-insensitively)
DANGEROUS_COMMANDS = [
    "rm -rf",
    "sudo rm",
    "dd if=",
    ":(){ :|:& };:",
    "chmod 777",
    "chown",
    "mkfs",
    "fdisk",
    "shutdown",
    "reboot",
    "halt",
    "poweroff",
]

# First words that identify an inline code span as a shell command
COMMON_COMMANDS = [
    "ls", "cd", "pwd", "mkdir", "rmdir", "touch", "cp", "mv", "rm", "ln",
    "cat", "less", "more", "head", "tail", "echo", "printf", "find", "grep",
    "egrep", "rg", "sed", "awk", "sort", "uniq", "wc", "cut", "tr", "xargs",
    "tee", "diff", "chmod", "tar", "zip", "unzip", "gzip", "gunzip",
    "curl", "wget", "ssh", "scp", "rsync", "ping", "dig", "nslookup",
    "ps", "top", "htop", "kill", "killall", "df", "du", "free", "uname",
    "whoami", "which", "whereis", "man", "env", "export", "source",
    "git", "docker", "docker-compose", "kubectl", "helm", "terraform",
    "npm", "npx", "yarn", "pnpm", "node", "deno", "bun",
    "python", "python3", "pip", "pip3", "pipx", "poetry", "uv",
    "go", "cargo", "rustc", "make", "cmake", "gcc", "java", "mvn", "gradle",
    "brew", "apt", "apt-get", "yum", "dnf", "pacman", "snap",
    "systemctl", "journalctl", "sudo", "code", "vim", "nano", "open",
]
