"""
File: engagement/models.py
Internal data structures produced by the analysis core.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class Sentiment(str, Enum):
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


class RuleSet(str, Enum):
    """Which suggestion rules run."""

    MINIMAL = "minimal"
    EXTENDED = "extended"


@dataclass(frozen=True)
class KeywordCount:
    word: str
    count: int


@dataclass(frozen=True)
class TextMetrics:
    """Surface heuristics over the normalized text.

    Defaults describe empty input.
    """

    sentence_count: int = 0
    mention_count: int = 0
    url_count: int = 0
    has_emoji: bool = False
    has_question: bool = False
    has_numbers: bool = False
    ends_with_punctuation: bool = False


@dataclass(frozen=True)
class AnalysisResult:
    """Complete analysis of one document's text.

    Every field is populated even for empty input so consumers never need
    to special-case missing data.
    """

    word_count: int = 0
    top_words: Tuple[KeywordCount, ...] = ()  # up to 10, most frequent first
    sentiment: Sentiment = Sentiment.NEUTRAL
    hashtag_count: int = 0
    found_ctas: Tuple[str, ...] = ()  # catalog order
    engagement_score: int = 0  # [0, 100]
    metrics: TextMetrics = field(default_factory=TextMetrics)


__all__ = ["Sentiment", "RuleSet", "KeywordCount", "TextMetrics", "AnalysisResult"]
