"""
Rule-based improvement suggestions for analyzed posts.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple, Union

from engagement.core.analyzer import ends_with_punctuation, has_emoji
from engagement.models import AnalysisResult, RuleSet, Sentiment

# Rule thresholds
MIN_WORDS = 50
MAX_WORDS = 220
MAX_SENTENCES = 6
MAX_HASHTAGS = 6

Check = Callable[[AnalysisResult, str], bool]


@dataclass(frozen=True)
class SuggestionRule:
    """A single threshold check and the message it contributes when it fires."""

    name: str
    message: str
    check: Check


def _missing_emoji(result: AnalysisResult, text: str) -> bool:
    return not (has_emoji(text) if text else result.metrics.has_emoji)


def _missing_punctuation(result: AnalysisResult, text: str) -> bool:
    return not (ends_with_punctuation(text) if text else result.metrics.ends_with_punctuation)


MINIMAL_RULES: Tuple[SuggestionRule, ...] = (
    SuggestionRule(
        "no_cta",
        "Add a call-to-action (e.g., follow, share, comment) to encourage engagement.",
        lambda result, text: not result.found_ctas,
    ),
    SuggestionRule(
        "no_hashtags",
        "Add 1–3 relevant #hashtags to increase discoverability.",
        lambda result, text: result.hashtag_count == 0,
    ),
    SuggestionRule(
        "negative_tone",
        "Consider a more positive tone; upbeat posts tend to get more interaction.",
        lambda result, text: result.sentiment == Sentiment.NEGATIVE,
    ),
    SuggestionRule(
        "too_short",
        "Expand your content with more context or detail (aim for 50+ words).",
        lambda result, text: result.word_count < MIN_WORDS,
    ),
)

EXTENDED_RULES: Tuple[SuggestionRule, ...] = MINIMAL_RULES + (
    SuggestionRule(
        "too_long",
        "Consider shortening to keep it scannable (aim < 200 words).",
        lambda result, text: result.word_count > MAX_WORDS,
    ),
    SuggestionRule(
        "too_many_sentences",
        "Break long paragraphs into shorter sentences for readability.",
        lambda result, text: result.metrics.sentence_count > MAX_SENTENCES,
    ),
    SuggestionRule(
        "too_many_hashtags",
        "Reduce hashtags to avoid spammy appearance (try 1–5).",
        lambda result, text: result.hashtag_count > MAX_HASHTAGS,
    ),
    SuggestionRule(
        "no_mentions",
        "Tag collaborators or brands using @mentions when relevant.",
        lambda result, text: result.metrics.mention_count == 0,
    ),
    SuggestionRule(
        "no_url",
        "If referencing resources, include a short link.",
        lambda result, text: result.metrics.url_count == 0,
    ),
    SuggestionRule(
        "no_question",
        "Ask a question to invite responses and boost engagement.",
        lambda result, text: not result.metrics.has_question,
    ),
    SuggestionRule(
        "no_emoji",
        "Consider 1–2 tasteful emojis to add personality.",
        _missing_emoji,
    ),
    SuggestionRule(
        "no_numbers",
        "Cite specific numbers, stats, or results to build credibility.",
        lambda result, text: not result.metrics.has_numbers,
    ),
    SuggestionRule(
        "no_terminal_punctuation",
        "Finish with punctuation for a polished tone.",
        _missing_punctuation,
    ),
)

RULE_SETS: Dict[RuleSet, Tuple[SuggestionRule, ...]] = {
    RuleSet.MINIMAL: MINIMAL_RULES,
    RuleSet.EXTENDED: EXTENDED_RULES,
}


def suggest(
    result: AnalysisResult,
    normalized_text: str = "",
    rule_set: Union[RuleSet, str] = RuleSet.MINIMAL,
) -> List[str]:
    """
    Generate improvement suggestions for an analyzed post.

    Rules run in a fixed order and each adds at most one message.

    Args:
        result: Output of ``analyze``
        normalized_text: Text the result was computed from; the emoji and
            punctuation rules read it directly when given
        rule_set: ``minimal`` (4 rules) or ``extended`` (13 rules)

    Returns:
        Suggestion messages in rule order

    Raises:
        ValueError: If ``rule_set`` is not a known rule set name
    """
    rules = RULE_SETS[RuleSet(rule_set)]
    return [rule.message for rule in rules if rule.check(result, normalized_text)]
