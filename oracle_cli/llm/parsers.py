"""LLM response parsing utilities for oracle_cli."""

import json
from typing import Any, Dict, Optional

from ..utils.logging import logger

SSE_DATA_PREFIX = "data:"


def get_nested_value(data: Any, path: str, default: Any = None) -> Any:
    """Access a nested value using a dot-separated path; numeric parts index lists."""
    current = data
    for key in path.split('.'):
        if isinstance(current, dict) and key in current:
            current = current[key]
        elif isinstance(current, list):
            try:
                idx = int(key)
            except ValueError:
                return default
            if 0 <= idx < len(current):
                current = current[idx]
            else:
                return default
        else:
            return default
    return current


def extract_chunk_text(chunk: Dict[str, Any]) -> str:
    """Concatenate the text parts of the first candidate in a generateContent chunk."""
    parts = get_nested_value(chunk, "candidates.0.content.parts", [])
    if not isinstance(parts, list):
        return ""
    return "".join(part.get("text", "") for part in parts if isinstance(part, dict))


def parse_sse_line(line: str) -> Optional[Dict[str, Any]]:
    """Decode one server-sent-events line into a JSON chunk.

    Returns:
        The decoded chunk, or None for blank lines, comments and non-data fields
    """
    line = line.strip()
    if not line.startswith(SSE_DATA_PREFIX):
        return None

    payload = line[len(SSE_DATA_PREFIX):].strip()
    if not payload or payload == "[DONE]":
        return None

    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        logger.warning(f"Skipping malformed stream chunk: {e}")
        logger.debug(f"Raw chunk: {payload}")
        return None

    return data if isinstance(data, dict) else None


def extract_error_message(response_data: Any) -> str:
    """Pull the error message out of an API error body, if present."""
    message = get_nested_value(response_data, "error.message")
    return str(message) if message else ""
