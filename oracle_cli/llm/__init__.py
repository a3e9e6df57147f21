"""LLM integration for oracle_cli."""

from .client import GeminiClient, create_llm_client
from .parsers import (
    get_nested_value,
    extract_chunk_text,
    parse_sse_line,
    extract_error_message,
)

__all__ = [
    "GeminiClient",
    "create_llm_client",
    "get_nested_value",
    "extract_chunk_text",
    "parse_sse_line",
    "extract_error_message",
]
