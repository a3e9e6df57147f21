from __future__ import annotations

from pathlib import Path
from typing import Optional

import pytest

from oracle_cli.commands.executor import CommandExecutor, RunDisposition
from oracle_cli.core import application as application_module
from oracle_cli.core import prompts
from oracle_cli.core.application import Oracle


class _FakeClient:
    def __init__(self, answer: Optional[str]) -> None:
        self.answer = answer
        self.questions: list[str] = []

    def ask(self, question: str) -> Optional[str]:
        self.questions.append(question)
        return self.answer


@pytest.fixture()
def app(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Oracle:
    monkeypatch.setenv("GOOGLE_AI_API_KEY", "env-key")
    oracle = Oracle(config_dir=str(tmp_path / "config"))
    oracle.executor = CommandExecutor(shell="/bin/sh")
    return oracle


def _use_answer(monkeypatch: pytest.MonkeyPatch, answer: Optional[str]) -> _FakeClient:
    fake = _FakeClient(answer)
    monkeypatch.setattr(application_module, "create_llm_client", lambda config, api_key: fake)
    return fake


def test_ask_without_execution_only_answers(app: Oracle, monkeypatch: pytest.MonkeyPatch) -> None:
    fake = _use_answer(monkeypatch, "$ ls -la")
    confirmations: list[str] = []
    monkeypatch.setattr(prompts, "confirm_execution", lambda cmd: confirmations.append(cmd) or True)

    assert app.ask("list files")
    assert fake.questions == ["list files"]
    assert confirmations == []


def test_ask_runs_confirmed_commands(app: Oracle, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    marker = tmp_path / "created"
    _use_answer(monkeypatch, f"Create it with:\n$ touch {marker}\n")
    monkeypatch.setattr(prompts, "confirm_execution", lambda cmd: True)

    assert app.ask("make a file", execute=True)
    assert marker.exists()


def test_failed_command_and_stop(app: Oracle, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    marker = tmp_path / "never"
    _use_answer(monkeypatch, f"```bash\ntrue\nfalse\ntouch {marker}\n```")
    monkeypatch.setattr(prompts, "confirm_execution", lambda cmd: True)
    monkeypatch.setattr(prompts, "confirm_continue_on_error", lambda: False)

    report = app.run_commands(f"```bash\ntrue\nfalse\ntouch {marker}\n```")

    assert report is not None
    assert report.disposition is RunDisposition.STOPPED_BY_USER
    assert not marker.exists()
    assert not app.ask("do things", execute=True)


def test_unsafe_command_is_never_offered(app: Oracle, monkeypatch: pytest.MonkeyPatch) -> None:
    offered: list[str] = []
    monkeypatch.setattr(prompts, "confirm_execution", lambda cmd: offered.append(cmd) or False)

    app.run_commands("$ sudo rm -rf /\n$ echo safe")

    assert offered == ["echo safe"]


def test_answer_without_commands(app: Oracle) -> None:
    assert app.run_commands("Nothing to run here.") is None


def test_enable_commands_in_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_text("enable_commands: true\n")
    monkeypatch.setenv("GOOGLE_AI_API_KEY", "env-key")
    oracle = Oracle(config_dir=str(config_dir))
    assert oracle.commands_enabled


def test_model_override(tmp_path: Path) -> None:
    oracle = Oracle(config_dir=str(tmp_path), model="gemini-pro")
    assert oracle.config["model"] == "gemini-pro"


def test_failed_request(app: Oracle, monkeypatch: pytest.MonkeyPatch) -> None:
    _use_answer(monkeypatch, None)
    assert not app.ask("hello")


def test_missing_api_key_is_prompted_and_saved(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GOOGLE_AI_API_KEY", raising=False)
    oracle = Oracle(config_dir=str(tmp_path))
    monkeypatch.setattr(prompts, "prompt_for_text", lambda prompt: "typed-key")

    assert oracle.resolve_api_key() == "typed-key"
    assert oracle.config_manager.get_api_key() == "typed-key"
    assert "typed-key" in oracle.config_manager.config_file.read_text()


def test_empty_api_key_aborts(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GOOGLE_AI_API_KEY", raising=False)
    oracle = Oracle(config_dir=str(tmp_path))
    monkeypatch.setattr(prompts, "prompt_for_text", lambda prompt: "")
    _use_answer(monkeypatch, "unused")

    assert not oracle.ask("hello")


def test_first_run_setup_declined(app: Oracle, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(prompts, "ask_yes_no", lambda prompt: False)
    assert app.config_manager.is_first_run()

    app.run_first_run_setup()

    assert not app.config_manager.is_first_run()


def test_first_run_setup_installs_alias(app: Oracle, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(prompts, "ask_yes_no", lambda prompt: True)
    monkeypatch.setenv("SHELL", "/bin/zsh")
    monkeypatch.setenv("HOME", str(tmp_path))

    app.run_first_run_setup()

    assert (tmp_path / ".zshrc").exists()
