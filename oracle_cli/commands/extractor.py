"""Detection of shell command candidates in free-form LLM responses."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from ..utils.logging import logger


class Source(Enum):
    """Structural origin of a candidate within the response text."""

    PROMPT_LINE = "prompt_line"
    BLOCKQUOTE_LINE = "blockquote_line"
    FENCED_BLOCK = "fenced_block"
    INLINE_SPAN = "inline_span"


@dataclass(frozen=True)
class Candidate:
    """A trimmed, non-empty string believed to be a shell command."""

    text: str
    source: Source

    @property
    def needs_relevance_check(self) -> bool:
        """Inline spans are the only source that may be ordinary code references."""
        return self.source is Source.INLINE_SPAN


Detector = Callable[[str], List[Candidate]]

# Fence annotations that mark a block as shell input; an empty annotation counts too
SHELL_FENCE_LANGUAGES = {"", "bash", "sh", "shell", "zsh"}

PROMPT_LINE_RE = re.compile(r"^[ \t]*\$ (.+)$", re.MULTILINE)
BLOCKQUOTE_LINE_RE = re.compile(r"^> (.+)$", re.MULTILINE)
FENCE_OPEN_RE = re.compile(r"^[ \t]*```[ \t]*([\w+-]*)[ \t\r]*$")
FENCE_CLOSE_RE = re.compile(r"^[ \t]*```[ \t\r]*$")
INLINE_SPAN_RE = re.compile(r"`([^`\n]+)`")


def _strip_prompt(text: str) -> str:
    """Remove one leading '$ ' prompt marker."""
    text = text.strip()
    if text.startswith("$ "):
        text = text[2:]
    return text.strip()


def _make_candidates(raw_texts: List[str], source: Source) -> List[Candidate]:
    candidates = []
    for raw in raw_texts:
        text = raw.strip()
        if text:
            candidates.append(Candidate(text, source))
    return candidates


def split_fences(text: str) -> Tuple[List[Tuple[str, List[str]]], List[str]]:
    """Split text into closed fenced blocks and the lines outside of them.

    Returns:
        Tuple of (blocks, outside_lines) where each block is (language, body_lines).
        A fence that is never closed is not a block; its lines stay outside.
    """
    blocks: List[Tuple[str, List[str]]] = []
    outside: List[str] = []

    lines = text.split("\n")
    opening: Optional[int] = None
    language = ""

    for index, line in enumerate(lines):
        if opening is None:
            match = FENCE_OPEN_RE.match(line)
            if match:
                opening = index
                language = match.group(1).lower()
            else:
                outside.append(line)
        elif FENCE_CLOSE_RE.match(line):
            blocks.append((language, lines[opening + 1:index]))
            opening = None
            language = ""

    if opening is not None:
        outside.extend(lines[opening:])

    return blocks, outside


def detect_prompt_lines(text: str) -> List[Candidate]:
    """Lines written as '$ command', optionally indented."""
    return _make_candidates(PROMPT_LINE_RE.findall(text), Source.PROMPT_LINE)


def detect_blockquote_lines(text: str) -> List[Candidate]:
    """Lines written as '> command'."""
    return _make_candidates(BLOCKQUOTE_LINE_RE.findall(text), Source.BLOCKQUOTE_LINE)


def detect_fenced_blocks(text: str) -> List[Candidate]:
    """Every non-comment line of a shell (or unannotated) fenced block."""
    blocks, _ = split_fences(text)
    lines = []
    for language, body in blocks:
        if language not in SHELL_FENCE_LANGUAGES:
            logger.debug(f"Skipping fenced block annotated '{language}'")
            continue
        for line in body:
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            lines.append(_strip_prompt(stripped))
    return _make_candidates(lines, Source.FENCED_BLOCK)


def detect_inline_spans(text: str) -> List[Candidate]:
    """Single-backtick spans on one line, ignoring anything inside fences."""
    _, outside = split_fences(text)
    spans = INLINE_SPAN_RE.findall("\n".join(outside))
    return _make_candidates([_strip_prompt(span) for span in spans], Source.INLINE_SPAN)


DEFAULT_DETECTORS: List[Detector] = [
    detect_prompt_lines,
    detect_blockquote_lines,
    detect_fenced_blocks,
    detect_inline_spans,
]


class CommandExtractor:
    """Runs an ordered list of detectors over a response and concatenates their matches."""

    def __init__(self, detectors: Optional[List[Detector]] = None):
        self.detectors = list(detectors) if detectors is not None else list(DEFAULT_DETECTORS)

    def extract(self, text: str) -> List[Candidate]:
        """Extract raw command candidates from response text.

        Args:
            text: Complete LLM response

        Returns:
            Candidates in detector order; empty when the response holds no commands
        """
        candidates: List[Candidate] = []
        if not text:
            return candidates

        for detector in self.detectors:
            found = detector(text)
            logger.debug(f"{detector.__name__} found {len(found)} candidate(s)")
            candidates.extend(found)

        return candidates


def create_command_extractor() -> CommandExtractor:
    """Create a command extractor with the default detectors."""
    return CommandExtractor()
