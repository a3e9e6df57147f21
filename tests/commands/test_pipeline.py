from __future__ import annotations

from oracle_cli.commands.pipeline import create_command_pipeline, extract_commands

ANSWER = """\
To check the state of your repository run `git status`.

```bash
git status --short
sudo rm -rf /
```

Details are in `README.md`.
$ npm install
"""


def test_fenced_block_example() -> None:
    assert extract_commands("```bash\nls -la\n# comment\necho done\n```") == ["ls -la", "echo done"]


def test_full_answer_is_filtered_and_deduplicated() -> None:
    assert extract_commands(ANSWER) == ["npm install", "git status --short"]


def test_unsafe_commands_never_come_out() -> None:
    commands = extract_commands(ANSWER)
    assert not any("rm -rf" in command for command in commands)


def test_prompt_line_is_kept_without_relevance_check() -> None:
    assert extract_commands("$ frobnicate --all") == ["frobnicate --all"]


def test_inline_reference_is_dropped() -> None:
    assert extract_commands("Open `settings.json` and set `debug`.") == []


def test_conversational_answer() -> None:
    assert extract_commands("Quantum computers use qubits.") == []


def test_duplicate_across_sources_appears_once() -> None:
    text = "Run `npm test`:\n\n```\nnpm test\n```\n$ npm test"
    assert extract_commands(text) == ["npm test"]


def test_extra_patterns_from_config() -> None:
    pipeline = create_command_pipeline(["npm"])
    assert pipeline.extract_commands(ANSWER) == ["git status --short"]


def test_output_is_stable_under_second_pass() -> None:
    commands = extract_commands(ANSWER)
    assert extract_commands("\n".join(f"$ {c}" for c in commands)) == commands
