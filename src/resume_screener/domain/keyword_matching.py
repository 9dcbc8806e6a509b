"""Case-insensitive keyword search over resume text.

All matching is plain substring containment: there is no tokenisation and no
word-boundary check, so "go" matches inside "good". Rule authors pick keywords
with that in mind.

Usage example:
    from resume_screener.domain.keyword_matching import extract_matched_keywords

    found = extract_matched_keywords("Built apps in React and TypeScript", ["react", "vue"])
    assert found == ["react"]
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

CONTEXT_RADIUS = 50


@dataclass(frozen=True)
class KeywordMatch:
    """Every occurrence of one keyword, with 1-based line numbers and context."""

    keyword: str
    occurrences: int
    line_numbers: tuple[int, ...]
    contexts: tuple[str, ...]


def has_any_keyword(text: str, keywords: Sequence[str]) -> bool:
    text_lower = text.lower()
    return any(keyword.lower() in text_lower for keyword in keywords)


def has_all_keywords(text: str, keywords: Sequence[str]) -> bool:
    text_lower = text.lower()
    return all(keyword.lower() in text_lower for keyword in keywords)


def count_keywords(text: str, keywords: Sequence[str]) -> int:
    """Count how many of the keywords appear at least once."""
    return len(extract_matched_keywords(text, keywords))


def extract_matched_keywords(text: str, keywords: Sequence[str]) -> list[str]:
    """Return the keywords present in text, in input order and original casing."""
    text_lower = text.lower()
    return [keyword for keyword in keywords if keyword.lower() in text_lower]


def match_keywords(text: str, keywords: Sequence[str]) -> list[KeywordMatch]:
    """Locate every occurrence of each keyword.

    Args:
        text: Text to search, split on newlines for line numbering.
        keywords: Keywords to look for.

    Returns:
        One entry per keyword with at least one occurrence. Each occurrence
        records its 1-based line number and up to ``CONTEXT_RADIUS`` characters
        either side of the hit.
    """
    lines = text.split("\n")
    matches: list[KeywordMatch] = []
    for keyword in keywords:
        keyword_lower = keyword.lower()
        if not keyword_lower:
            continue
        line_numbers: list[int] = []
        contexts: list[str] = []
        for line_number, line in enumerate(lines, start=1):
            line_lower = line.lower()
            index = line_lower.find(keyword_lower)
            while index != -1:
                line_numbers.append(line_number)
                start = max(0, index - CONTEXT_RADIUS)
                end = min(len(line), index + len(keyword) + CONTEXT_RADIUS)
                contexts.append(line[start:end].strip())
                index = line_lower.find(keyword_lower, index + len(keyword_lower))
        if line_numbers:
            matches.append(
                KeywordMatch(
                    keyword=keyword,
                    occurrences=len(line_numbers),
                    line_numbers=tuple(line_numbers),
                    contexts=tuple(contexts),
                )
            )
    return matches
