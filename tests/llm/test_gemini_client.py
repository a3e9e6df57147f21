from __future__ import annotations

import json
from typing import Any

import pytest
import requests

from oracle_cli.llm import client as client_module
from oracle_cli.llm.client import GeminiClient
from oracle_cli.llm.parsers import extract_chunk_text, get_nested_value, parse_sse_line


def _sse(text: str) -> str:
    return "data: " + json.dumps({"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]})


class _FakeResponse:
    def __init__(self, lines: list[str], status_code: int = 200, body: Any = None) -> None:
        self._lines = lines
        self.status_code = status_code
        self._body = body
        self.reason = "Bad Request"
        self.text = json.dumps(body) if body is not None else ""

    def iter_lines(self, decode_unicode: bool = False):
        yield from self._lines

    def json(self) -> Any:
        if self._body is None:
            raise ValueError("no body")
        return self._body

    def __enter__(self) -> "_FakeResponse":
        return self

    def __exit__(self, *exc: Any) -> None:
        return None


@pytest.fixture()
def config() -> dict:
    return {
        "model": "gemini-test",
        "endpoint": "https://example.test/v1beta/",
        "temperature": 0.2,
        "request_timeout": 5,
    }


def test_ask_streams_and_assembles_answer(monkeypatch: pytest.MonkeyPatch, config: dict) -> None:
    captured: dict = {}

    def fake_post(url: str, **kwargs: Any) -> _FakeResponse:
        captured["url"] = url
        captured.update(kwargs)
        return _FakeResponse([_sse("Run "), "", ": keep-alive", _sse("`ls -la`")])

    monkeypatch.setattr(client_module.requests, "post", fake_post)
    chunks: list[str] = []

    answer = GeminiClient(config, "key-123").ask("list files", on_chunk=chunks.append)

    assert answer == "Run `ls -la`"
    assert chunks == ["Run ", "`ls -la`", "\n"]
    assert captured["url"] == "https://example.test/v1beta/models/gemini-test:streamGenerateContent"
    assert captured["params"] == {"alt": "sse"}
    assert captured["headers"]["x-goog-api-key"] == "key-123"
    assert captured["stream"] is True
    assert captured["timeout"] == 5
    prompt = captured["json"]["contents"][0]["parts"][0]["text"]
    assert prompt.endswith("User question: list files")
    assert "You are Oracle" in prompt
    assert captured["json"]["generationConfig"] == {"temperature": 0.2}


def test_http_error_returns_none(monkeypatch: pytest.MonkeyPatch, config: dict) -> None:
    body = {"error": {"code": 400, "message": "API key not valid"}}
    monkeypatch.setattr(client_module.requests, "post", lambda url, **kw: _FakeResponse([], 400, body))
    assert GeminiClient(config, "bad").ask("hi", on_chunk=None) is None


def test_connection_error_returns_none(monkeypatch: pytest.MonkeyPatch, config: dict) -> None:
    def fake_post(url: str, **kwargs: Any) -> _FakeResponse:
        raise requests.exceptions.ConnectionError("offline")

    monkeypatch.setattr(client_module.requests, "post", fake_post)
    assert GeminiClient(config, "key").ask("hi", on_chunk=None) is None


def test_error_event_in_stream_returns_none(monkeypatch: pytest.MonkeyPatch, config: dict) -> None:
    lines = [_sse("partial"), "data: " + json.dumps({"error": {"message": "quota exceeded"}})]
    monkeypatch.setattr(client_module.requests, "post", lambda url, **kw: _FakeResponse(lines))
    assert GeminiClient(config, "key").ask("hi", on_chunk=None) is None


def test_missing_api_key_skips_request(monkeypatch: pytest.MonkeyPatch, config: dict) -> None:
    def fake_post(url: str, **kwargs: Any) -> _FakeResponse:
        raise AssertionError("request should not be sent")

    monkeypatch.setattr(client_module.requests, "post", fake_post)
    assert GeminiClient(config, "").ask("hi", on_chunk=None) is None


def test_parse_sse_line() -> None:
    assert parse_sse_line("data: {\"a\": 1}") == {"a": 1}
    assert parse_sse_line("") is None
    assert parse_sse_line(": comment") is None
    assert parse_sse_line("event: message") is None
    assert parse_sse_line("data: [DONE]") is None
    assert parse_sse_line("data: {not json") is None


def test_extract_chunk_text_joins_parts() -> None:
    chunk = {"candidates": [{"content": {"parts": [{"text": "a"}, {"inlineData": {}}, {"text": "b"}]}}]}
    assert extract_chunk_text(chunk) == "ab"
    assert extract_chunk_text({"candidates": []}) == ""
    assert extract_chunk_text({}) == ""


def test_get_nested_value() -> None:
    data = {"a": [{"b": "c"}]}
    assert get_nested_value(data, "a.0.b") == "c"
    assert get_nested_value(data, "a.1.b", "missing") == "missing"
    assert get_nested_value(data, "a.x") is None
