"""Gemini API client for oracle_cli."""

import sys
from typing import Any, Callable, Dict, Optional

import requests

from ..config.templates import SYSTEM_PROMPT
from ..constants import (
    DEFAULT_ENDPOINT, DEFAULT_MODEL, DEFAULT_REQUEST_TIMEOUT, DEFAULT_TEMPERATURE
)
from ..utils.logging import logger
from .parsers import extract_chunk_text, extract_error_message, parse_sse_line


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


class GeminiClient:
    """Streams answers from the Google Generative Language API."""

    def __init__(self, config: Dict[str, Any], api_key: str):
        """Initialize the client.

        Args:
            config: Application configuration
            api_key: Resolved Google AI API key
        """
        self.api_key = api_key
        self.model = config.get("model") or DEFAULT_MODEL
        self.endpoint = (config.get("endpoint") or DEFAULT_ENDPOINT).rstrip("/")
        self.temperature = config.get("temperature", DEFAULT_TEMPERATURE)
        self.timeout = config.get("request_timeout", DEFAULT_REQUEST_TIMEOUT)
        self.system_prompt = SYSTEM_PROMPT

    @property
    def stream_url(self) -> str:
        return f"{self.endpoint}/models/{self.model}:streamGenerateContent"

    def build_payload(self, question: str) -> Dict[str, Any]:
        """Build the request body for a question."""
        return {
            "contents": [
                {
                    "role": "user",
                    "parts": [{"text": f"{self.system_prompt}\n\nUser question: {question}"}],
                }
            ],
            "generationConfig": {"temperature": self.temperature},
        }

    def ask(self, question: str, on_chunk: Optional[Callable[[str], None]] = _write_stdout) -> Optional[str]:
        """Send a question and stream the answer.

        Args:
            question: The user's question
            on_chunk: Called with each piece of text as it arrives; None disables streaming output

        Returns:
            The complete answer, or None if the request failed
        """
        if not self.api_key:
            logger.error("No API key configured")
            return None

        logger.debug(f"Sending question to {self.model}")
        try:
            response = requests.post(
                self.stream_url,
                params={"alt": "sse"},
                headers={"Content-Type": "application/json", "x-goog-api-key": self.api_key},
                json=self.build_payload(question),
                stream=True,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"LLM API request failed: {e}")
            return None

        with response:
            if response.status_code != 200:
                try:
                    detail = extract_error_message(response.json())
                except ValueError:
                    detail = response.text
                logger.error(f"LLM API returned HTTP {response.status_code}: {detail or response.reason}")
                return None

            pieces = []
            try:
                for line in response.iter_lines(decode_unicode=True):
                    if not line:
                        continue
                    chunk = parse_sse_line(line)
                    if chunk is None:
                        continue
                    if "error" in chunk:
                        logger.error(f"Error generating content: {extract_error_message(chunk)}")
                        return None
                    text = extract_chunk_text(chunk)
                    if text:
                        pieces.append(text)
                        if on_chunk:
                            on_chunk(text)
            except requests.exceptions.RequestException as e:
                logger.error(f"LLM response stream interrupted: {e}")
                return None

        if on_chunk:
            on_chunk("\n")

        answer = "".join(pieces)
        if not answer.strip():
            logger.warning("The model returned an empty answer")
        return answer


def create_llm_client(config: Dict[str, Any], api_key: str) -> GeminiClient:
    """Create a configured Gemini client instance."""
    return GeminiClient(config, api_key)
