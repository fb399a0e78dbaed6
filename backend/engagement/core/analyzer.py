"""
Heuristic engagement analysis of post text.

This module turns normalized text into an AnalysisResult: keyword frequency,
word-list sentiment, call-to-action and hashtag detection, surface metrics and
an aggregate engagement score. Everything here is pure and safe to call
concurrently.
"""
from __future__ import annotations

import re
from collections import Counter
from typing import Callable, Iterable, List, Sequence, Tuple

from engagement.core.lexicon import (
    CTA_CATALOG,
    NEGATIVE_WORDS,
    POSITIVE_WORDS,
    STOPWORDS,
    CallToAction,
)
from engagement.core.tokenizer import normalize, tokenize
from engagement.models import AnalysisResult, KeywordCount, Sentiment, TextMetrics

TOP_WORDS_LIMIT = 10
LONG_POST_WORDS = 50

# Precompiled surface patterns
_RE_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_RE_MENTION = re.compile(r"(^|\s)@\w+")
_RE_URL = re.compile(r"https?://[^\s)]+", re.IGNORECASE)
_RE_EMOJI = re.compile("[\u203c-\u3299\U0001f000-\U0001faff]")
_RE_QUESTION_WORD = re.compile(r"(\?|^|\s)(what|how|why|which|who|when|where)\b", re.IGNORECASE)
_RE_NUMBER = re.compile(r"\b\d+(\.\d+)?%?\b")
_RE_TERMINAL_PUNCTUATION = re.compile(r"[.!?]$")

Scorer = Callable[[int, int, Sentiment, int], int]


def top_keywords(tokens: Sequence[str], limit: int = TOP_WORDS_LIMIT) -> List[KeywordCount]:
    """
    Rank content words by frequency.

    Stopwords and single-character tokens are skipped. Equal counts keep the
    order in which the words first appear.

    Args:
        tokens: Token sequence in document order
        limit: Maximum number of entries to return

    Returns:
        KeywordCount entries, most frequent first
    """
    # Counter keeps first-insertion order, and sorted() is stable
    frequency = Counter(tok for tok in tokens if len(tok) > 1 and tok not in STOPWORDS)
    ranked = sorted(frequency.items(), key=lambda pair: -pair[1])
    return [KeywordCount(word=word, count=count) for word, count in ranked[:limit]]


def _lexicon_key(token: str) -> str:
    """Word-list lookup key: ``#excited`` matches ``excited`` and ``#follow`` matches ``follow``."""
    return token.lstrip("#")


def count_sentiment_words(tokens: Iterable[str]) -> Tuple[int, int]:
    """Count positive and negative list hits, hashtags included."""
    positive = negative = 0
    for tok in tokens:
        key = _lexicon_key(tok)
        if key in POSITIVE_WORDS:
            positive += 1
        elif key in NEGATIVE_WORDS:
            negative += 1
    return positive, negative


def classify_sentiment(positive: int, negative: int) -> Sentiment:
    """
    Map word-list hit counts to a label.

    One side has to lead by more than one hit, so close calls stay Neutral.
    """
    if positive > negative + 1:
        return Sentiment.POSITIVE
    if negative > positive + 1:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL


def find_ctas(
    tokens: Sequence[str],
    text: str,
    catalog: Sequence[CallToAction] = CTA_CATALOG,
) -> Tuple[str, ...]:
    """
    Detect calls to action.

    Single-word CTAs match tokens with any leading ``#`` removed, the same
    lookup the sentiment lists use.

    Args:
        tokens: Token sequence of the text
        text: Normalized text, searched for phrase CTAs
        catalog: CTA entries in reporting order

    Returns:
        Matched CTA texts in catalog order
    """
    token_set = {_lexicon_key(tok) for tok in tokens}
    found: List[str] = []
    for cta in catalog:
        if cta.is_phrase:
            if cta.pattern.search(text):
                found.append(cta.text)
        elif cta.text in token_set:
            found.append(cta.text)
    return tuple(found)


def count_hashtags(tokens: Iterable[str]) -> int:
    return sum(1 for tok in tokens if tok.startswith("#"))


def measure_text(text: str) -> TextMetrics:
    """
    Compute surface heuristics used by the extended suggestion rules.

    Args:
        text: Normalized text

    Returns:
        TextMetrics for the text
    """
    if not text:
        return TextMetrics()

    sentences = [part for part in _RE_SENTENCE_SPLIT.split(text) if part.strip()]
    return TextMetrics(
        sentence_count=len(sentences),
        mention_count=len(_RE_MENTION.findall(text)),
        url_count=len(_RE_URL.findall(text)),
        has_emoji=has_emoji(text),
        has_question=bool(_RE_QUESTION_WORD.search(text)),
        has_numbers=bool(_RE_NUMBER.search(text)),
        ends_with_punctuation=ends_with_punctuation(text),
    )


def has_emoji(text: str) -> bool:
    return bool(_RE_EMOJI.search(text))


def ends_with_punctuation(text: str) -> bool:
    return bool(_RE_TERMINAL_PUNCTUATION.search(text.strip()))


def engagement_score(cta_count: int, hashtag_count: int, sentiment: Sentiment, word_count: int) -> int:
    """
    Heuristic 0-100 engagement score.

    20 points per call to action, 10 per hashtag, 20 for a positive tone and
    10 for posts longer than 50 words, capped at 100.

    Args:
        cta_count: Number of distinct CTAs found
        hashtag_count: Number of hashtag tokens
        sentiment: Sentiment label of the text
        word_count: Number of tokens

    Returns:
        Score clamped to [0, 100]
    """
    score = cta_count * 20 + hashtag_count * 10
    if sentiment == Sentiment.POSITIVE:
        score += 20
    if word_count > LONG_POST_WORDS:
        score += 10
    return max(0, min(100, score))


def analyze(text: str, *, scorer: Scorer = engagement_score) -> AnalysisResult:
    """
    Analyze post text for engagement signals.

    Never raises for string input; empty text yields a zero-valued,
    Neutral result.

    Args:
        text: Raw or normalized text
        scorer: Engagement scoring policy, ``engagement_score`` by default

    Returns:
        Immutable AnalysisResult
    """
    normalized = normalize(text)
    tokens = tokenize(normalized)

    positive, negative = count_sentiment_words(tokens)
    sentiment = classify_sentiment(positive, negative)
    found_ctas = find_ctas(tokens, normalized)
    hashtag_count = count_hashtags(tokens)
    word_count = len(tokens)

    return AnalysisResult(
        word_count=word_count,
        top_words=tuple(top_keywords(tokens)),
        sentiment=sentiment,
        hashtag_count=hashtag_count,
        found_ctas=found_ctas,
        engagement_score=scorer(len(found_ctas), hashtag_count, sentiment, word_count),
        metrics=measure_text(normalized),
    )

