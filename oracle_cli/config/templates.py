"""Configuration templates for oracle_cli."""

CONFIG_TEMPLATE = """\
# config.yaml - oracle configuration
# Ensure this is valid YAML.
# api_key: Your Google AI API key. The --api-key flag and the GOOGLE_AI_API_KEY
#   environment variable take precedence over this value.
# model: Gemini model used to answer questions.
# endpoint: Base URL of the Generative Language API.
# temperature: Sampling temperature sent with each request.
# request_timeout: Seconds to wait for the API before giving up.
# shell: Shell used to run confirmed commands. Defaults to $SHELL, then /bin/sh.
# enable_commands: Offer to run commands found in answers without passing --execute.
# enable_debug: Set to true for verbose debugging output.
# extra_dangerous_patterns: Additional substrings that block a suggested command.
#   Example:
#     - "git push --force"
#     - "docker system prune"

# api_key: "YOUR_API_KEY_HERE"

model: "gemini-2.0-flash-exp"
endpoint: "https://generativelanguage.googleapis.com/v1beta"
temperature: 0.7
request_timeout: 60

# shell: "/bin/bash"

enable_commands: false
enable_debug: false

extra_dangerous_patterns: []
"""

SYSTEM_PROMPT = """\
You are Oracle, an AI assistant that provides answers and executable shell commands.
Format commands clearly using:
- Code blocks with triple backticks for multi-line commands
- Inline backticks for single commands
- Prefix with $ for commands

Explain what commands do before suggesting them. Avoid dangerous commands and keep responses concise. \
Again, keep the response length to a maximum of 3 sentences."""
