"""
Shared utility functions for the engagement analysis service.
"""
from __future__ import annotations

from dataclasses import asdict
from datetime import datetime, timezone
from typing import List

from engagement.core.analyzer import analyze
from engagement.core.suggestions import suggest
from engagement.core.tokenizer import normalize
from engagement.models import AnalysisResult, RuleSet
from engagement.schemas import AnalysisOut, AnalyzeResponse


def now_utc() -> datetime:
    """
    Get current UTC datetime with timezone information.

    Returns:
        Current UTC datetime
    """
    return datetime.now(timezone.utc)


def to_analysis_out(result: AnalysisResult) -> AnalysisOut:
    """
    Convert the core's AnalysisResult into its API schema.

    Args:
        result: Analysis produced by ``analyze``

    Returns:
        AnalysisOut with every field populated
    """
    return AnalysisOut(
        word_count=result.word_count,
        top_words=[asdict(entry) for entry in result.top_words],
        sentiment=result.sentiment.value,
        hashtag_count=result.hashtag_count,
        found_ctas=list(result.found_ctas),
        engagement_score=result.engagement_score,
        metrics=asdict(result.metrics),
    )


def build_analyze_response(text: str, rule_set: RuleSet) -> AnalyzeResponse:
    """
    Run the analysis pipeline over extracted text and build the API response.

    Args:
        text: Extracted document text
        rule_set: Suggestion rule set to apply

    Returns:
        AnalyzeResponse with the original text, analysis and suggestions
    """
    normalized = normalize(text)
    result = analyze(normalized)
    suggestions: List[str] = suggest(result, normalized, rule_set)

    return AnalyzeResponse(
        text=text,
        analysis=to_analysis_out(result),
        suggestions=suggestions,
        rule_set=rule_set.value,
    )
