"""Text matchers used by classification rules."""

from __future__ import annotations

import re
from typing import Pattern, Protocol, Sequence

from rapidfuzz import fuzz


class Matcher(Protocol):
    """Anything that can decide whether a transcript matches."""

    label: str

    def matches(self, text: str) -> bool:
        ...


class RegexMatcher:
    """Case-insensitive regex searched anywhere in the text."""

    def __init__(self, pattern: str) -> None:
        self.label = pattern
        self._regex: Pattern[str] = re.compile(pattern, re.IGNORECASE)

    def matches(self, text: str) -> bool:
        return self._regex.search(text) is not None

    def __repr__(self) -> str:
        return f"RegexMatcher({self.label!r})"


class KeywordMatcher:
    """Match when every keyword appears as a whole word, in any order."""

    def __init__(self, keywords: Sequence[str]) -> None:
        self.keywords = tuple(keyword.lower() for keyword in keywords if keyword.strip())
        if not self.keywords:
            raise ValueError("KeywordMatcher needs at least one keyword")
        self.label = "+".join(self.keywords)

    def matches(self, text: str) -> bool:
        words = set(re.findall(r"[a-z0-9']+", text.lower()))
        return all(keyword in words for keyword in self.keywords)

    def __repr__(self) -> str:
        return f"KeywordMatcher({list(self.keywords)!r})"


class FuzzyMatcher:
    """Match a phrase approximately using rapidfuzz partial ratio (0-100)."""

    def __init__(self, phrase: str, threshold: float = 85) -> None:
        if not 0 <= threshold <= 100:
            raise ValueError(f"Fuzzy threshold must be within 0-100, got {threshold}")
        self.phrase = phrase.lower()
        self.threshold = float(threshold)
        self.label = f"~{self.phrase} (>={threshold:g})"

    def score(self, text: str) -> float:
        if not text:
            return 0.0
        lowered = text.lower()
        # partial_ratio scores any fragment of the phrase as a full match.
        if len(lowered) < len(self.phrase):
            return float(fuzz.ratio(self.phrase, lowered))
        return float(fuzz.partial_ratio(self.phrase, lowered))

    def matches(self, text: str) -> bool:
        return bool(text) and self.score(text) >= self.threshold

    def __repr__(self) -> str:
        return f"FuzzyMatcher({self.phrase!r}, threshold={self.threshold:g})"
