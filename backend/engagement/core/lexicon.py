"""
Fixed word tables used by the analyzer.

All tables are frozen at import time and shared by every request.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Pattern, Tuple


# Common English function words (social media context)
STOPWORDS: frozenset[str] = frozenset([
    "a", "an", "the", "and", "or", "but", "if", "in", "on", "with", "to", "for",
    "of", "is", "are", "was", "were", "be", "by", "this", "that", "it", "as",
    "at", "from", "i", "you", "he", "she", "we", "they", "me", "my", "your",
    "his", "her", "our", "their", "us", "them", "what", "when", "where", "why",
    "how", "all", "any", "both", "each", "few", "more", "most", "other", "some",
    "such", "no", "nor", "not", "only", "own", "same", "so", "than", "too",
    "very", "s", "t", "can", "will", "just", "don", "should", "now",
])

POSITIVE_WORDS: frozenset[str] = frozenset([
    "good", "great", "excellent", "happy", "love", "like", "success", "improve",
    "positive", "best", "awesome", "amazing", "fantastic", "wonderful",
    "brilliant", "perfect", "outstanding", "superb", "delightful", "joyful",
    "pleased", "satisfied", "thrilled", "excited", "proud", "grateful",
    "blessed", "fortunate", "lucky", "cheerful",
])

NEGATIVE_WORDS: frozenset[str] = frozenset([
    "bad", "poor", "failed", "sad", "hate", "problem", "negative", "worse",
    "issue", "angry", "terrible", "awful", "horrible", "disgusting", "annoying",
    "frustrating", "disappointing", "upset", "worried", "stressed", "depressed",
    "miserable", "unhappy", "dissatisfied", "regretful", "sorry", "guilty",
    "ashamed", "embarrassed", "humiliated",
])


@dataclass(frozen=True)
class CallToAction:
    """A call-to-action entry.

    Single words are matched by token membership, phrases by a
    whitespace-tolerant regex over the normalized text.
    """

    text: str
    pattern: Optional[Pattern[str]] = field(default=None, compare=False, repr=False)

    @classmethod
    def word(cls, text: str) -> "CallToAction":
        return cls(text=text)

    @classmethod
    def phrase(cls, text: str) -> "CallToAction":
        body = r"\s+".join(re.escape(part) for part in text.split())
        return cls(text=text, pattern=re.compile(rf"\b{body}\b", re.IGNORECASE))

    @property
    def is_phrase(self) -> bool:
        return self.pattern is not None


# Order here is the order of AnalysisResult.found_ctas
CTA_CATALOG: Tuple[CallToAction, ...] = (
    CallToAction.word("follow"),
    CallToAction.word("like"),
    CallToAction.word("subscribe"),
    CallToAction.word("comment"),
    CallToAction.word("share"),
    CallToAction.word("dm"),
    CallToAction.word("visit"),
    CallToAction.word("join"),
    CallToAction.word("click"),
    CallToAction.word("buy"),
    CallToAction.word("learn"),
    CallToAction.word("watch"),
    CallToAction.phrase("check the link"),
)


__all__ = [
    "STOPWORDS",
    "POSITIVE_WORDS",
    "NEGATIVE_WORDS",
    "CallToAction",
    "CTA_CATALOG",
]
