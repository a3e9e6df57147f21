"""Duplicate and subsumed command removal."""

from typing import Iterable, List, Union

from .extractor import Candidate


def _is_strict_word_prefix(shorter: List[str], longer: List[str]) -> bool:
    return len(shorter) < len(longer) and longer[:len(shorter)] == shorter


def dedupe(candidates: Iterable[Union[Candidate, str]]) -> List[str]:
    """Reduce candidates to an ordered list of distinct commands.

    Exact duplicates keep their first occurrence. A command whose words are a
    strict prefix of another command's words is dropped in favour of the longer,
    more specific one (``git status`` gives way to ``git status --short``).
    Commands where neither is a prefix of the other are both kept, in first-seen order.
    """
    unique: List[str] = []
    seen = set()
    for candidate in candidates:
        text = candidate.text if isinstance(candidate, Candidate) else candidate
        text = text.strip()
        if not text or text in seen:
            continue
        seen.add(text)
        unique.append(text)

    words = [text.split() for text in unique]
    return [
        text for i, text in enumerate(unique)
        if not any(_is_strict_word_prefix(words[i], other) for j, other in enumerate(words) if j != i)
    ]
