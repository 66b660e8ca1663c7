"""
Profanity screening for submitted quotes.

The word classifier is pluggable: anything with ``classify(text) -> bool`` can
stand in for the default word-list matcher, so ``validate_quote`` never needs to
know how words are detected.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Protocol

from app.core.config import settings
from app.data.profanity_words import DISALLOWED_WORDS

DEFAULT_DISALLOWED_WORDS = DISALLOWED_WORDS

TEXT_REJECTION_REASON = "Quote contains inappropriate language"
AUTHOR_REJECTION_REASON = "Author name contains inappropriate language"


@dataclass(frozen=True)
class ModerationResult:
    is_valid: bool
    reason: str | None = None


class WordClassifier(Protocol):
    def classify(self, text: str) -> bool:
        ...


class ProfanityFilter:
    """Case-insensitive whole-word matcher over a fixed word list."""

    def __init__(self, words: Iterable[str] = DEFAULT_DISALLOWED_WORDS):
        normalized = sorted({str(w).strip().lower() for w in words if str(w).strip()}, key=len, reverse=True)
        self.words = frozenset(normalized)
        if normalized:
            self._pattern = re.compile(
                r"(?<![A-Za-z0-9])(?:" + "|".join(re.escape(w) for w in normalized) + r")(?![A-Za-z0-9])",
                re.IGNORECASE,
            )
        else:
            self._pattern = None

    def classify(self, text: str) -> bool:
        if not text or self._pattern is None:
            return False
        return self._pattern.search(text) is not None


def build_profanity_filter(extra_words: Iterable[str] | None = None) -> ProfanityFilter:
    extra = settings.moderation_extra_words_list if extra_words is None else list(extra_words)
    return ProfanityFilter(DEFAULT_DISALLOWED_WORDS | set(extra))


def validate_quote(classifier: WordClassifier, text: str, author: str) -> ModerationResult:
    if classifier.classify(text):
        return ModerationResult(False, TEXT_REJECTION_REASON)
    if classifier.classify(author):
        return ModerationResult(False, AUTHOR_REJECTION_REASON)
    return ModerationResult(True)
