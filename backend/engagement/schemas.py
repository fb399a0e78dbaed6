# engagement/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Literal

SentimentLabel = Literal["Positive", "Negative", "Neutral"]
RuleSetName = Literal["minimal", "extended"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class KeywordCountOut(CamelModel):
    word: str
    count: int


class TextMetricsOut(CamelModel):
    sentence_count: int = 0
    mention_count: int = 0
    url_count: int = 0
    has_emoji: bool = False
    has_question: bool = False
    has_numbers: bool = False
    ends_with_punctuation: bool = False


class AnalysisOut(CamelModel):
    word_count: int = 0
    top_words: list[KeywordCountOut] = Field(default_factory=list)   # up to 10; UI shows the first 5
    sentiment: SentimentLabel = "Neutral"
    hashtag_count: int = 0
    found_ctas: list[str] = Field(default_factory=list, alias="foundCTAs")
    engagement_score: int = Field(default=0, ge=0, le=100)
    metrics: TextMetricsOut = Field(default_factory=TextMetricsOut)


class AnalyzeRequest(CamelModel):
    text: str = ""
    rule_set: RuleSetName | None = None


class AnalyzeResponse(CamelModel):
    text: str
    analysis: AnalysisOut
    suggestions: list[str]
    rule_set: RuleSetName
