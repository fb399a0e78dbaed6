"""
Test the engagement analyzer
"""

import dataclasses

import pytest

from engagement.core.analyzer import (
    analyze,
    classify_sentiment,
    engagement_score,
    find_ctas,
    measure_text,
    top_keywords,
)
from engagement.core.lexicon import STOPWORDS
from engagement.core.tokenizer import tokenize
from engagement.models import KeywordCount, Sentiment


@pytest.mark.unit
class TestDegenerateInput:
    def test_empty_text(self):
        result = analyze("")

        assert result.word_count == 0
        assert result.hashtag_count == 0
        assert result.sentiment == Sentiment.NEUTRAL
        assert result.engagement_score == 0
        assert result.top_words == ()
        assert result.found_ctas == ()
        assert result.metrics.sentence_count == 0

    @pytest.mark.parametrize("text", [
        "\x00\x01\x02 garbage ��",
        "\ud800 lone surrogate",
        "😀" * 500,
        "word " * 50000,
    ])
    def test_never_raises(self, text):
        result = analyze(text)
        assert 0 <= result.engagement_score <= 100

    def test_result_is_immutable(self):
        result = analyze("hello world")
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.word_count = 5


@pytest.mark.unit
class TestTopWords:
    def test_excludes_stopwords_and_single_characters(self):
        result = analyze("The cat and a dog, I think the cat is x y z and the dog")
        words = [entry.word for entry in result.top_words]

        assert words == ["cat", "dog", "think"]
        assert not any(w in STOPWORDS or len(w) == 1 for w in words)

    def test_sorted_by_count_then_first_occurrence(self):
        tokens = tokenize("zebra apple mango apple zebra kiwi mango apple")
        ranked = top_keywords(tokens)

        assert ranked == [
            KeywordCount("apple", 3),
            KeywordCount("zebra", 2),
            KeywordCount("mango", 2),
            KeywordCount("kiwi", 1),
        ]

    def test_returns_ten_entries(self):
        text = " ".join(f"word{i}" for i in range(15))
        result = analyze(text)

        assert len(result.top_words) == 10
        assert result.top_words[0].word == "word0"

    def test_word_count_includes_stopwords(self):
        assert analyze("the a an of cat").word_count == 5


@pytest.mark.unit
class TestSentiment:
    def test_three_positive_is_positive(self):
        assert analyze("good great awesome day").sentiment == Sentiment.POSITIVE

    def test_tie_is_neutral(self):
        assert analyze("good great but bad awful").sentiment == Sentiment.NEUTRAL

    def test_two_negative_is_negative(self):
        assert analyze("terrible and awful service").sentiment == Sentiment.NEGATIVE

    def test_one_word_margin_stays_neutral(self):
        assert classify_sentiment(1, 0) == Sentiment.NEUTRAL
        assert classify_sentiment(0, 1) == Sentiment.NEUTRAL
        assert classify_sentiment(3, 1) == Sentiment.POSITIVE
        assert classify_sentiment(1, 3) == Sentiment.NEGATIVE

    def test_hashtagged_words_count(self):
        assert analyze("#happy #blessed day").sentiment == Sentiment.POSITIVE


@pytest.mark.unit
class TestCallsToAction:
    def test_single_word_ctas(self):
        result = analyze("please follow and share this post")

        assert "follow" in result.found_ctas
        assert "share" in result.found_ctas
        assert "subscribe" not in result.found_ctas

    def test_catalog_order(self):
        assert analyze("watch then subscribe then follow").found_ctas == ("follow", "subscribe", "watch")

    def test_requires_exact_token(self):
        assert analyze("our followers shared it").found_ctas == ()

    def test_phrase_cta_matches_whole_phrase(self):
        text = "New drop is live. Check   the\nlink in bio"
        tokens = tokenize(text)

        assert find_ctas(tokens, text) == ("check the link",)
        assert find_ctas(tokenize("check the linked post"), "check the linked post") == ()

    def test_duplicates_reported_once(self):
        assert analyze("follow follow follow").found_ctas == ("follow",)


@pytest.mark.unit
class TestHashtags:
    def test_counts_hashtags(self):
        assert analyze("Check this #new #launch today").hashtag_count == 2

    def test_mentions_are_not_hashtags(self):
        assert analyze("@brand #one").hashtag_count == 1


@pytest.mark.unit
class TestEngagementScore:
    def test_formula(self):
        assert engagement_score(1, 2, Sentiment.POSITIVE, 10) == 60
        assert engagement_score(0, 0, Sentiment.NEUTRAL, 51) == 10
        assert engagement_score(0, 0, Sentiment.NEUTRAL, 50) == 0
        assert engagement_score(2, 0, Sentiment.NEGATIVE, 0) == 40

    def test_capped_at_100(self):
        assert engagement_score(5, 10, Sentiment.POSITIVE, 500) == 100

    def test_scorer_can_be_swapped(self):
        result = analyze("follow #one", scorer=lambda ctas, tags, sentiment, words: 7)
        assert result.engagement_score == 7


@pytest.mark.unit
class TestMetrics:
    def test_surface_metrics(self):
        metrics = measure_text(
            "Hey @sam and @lee! We grew 45% this year. What's next? See https://example.com/x 🚀"
        )

        assert metrics.mention_count == 2
        assert metrics.url_count == 1
        assert metrics.has_numbers is True
        assert metrics.has_question is True
        assert metrics.has_emoji is True
        assert metrics.ends_with_punctuation is False

    def test_sentence_count(self):
        assert measure_text("One. Two! Three? Four").sentence_count == 4

    def test_plain_text(self):
        metrics = measure_text("just words here.")

        assert metrics.mention_count == 0
        assert metrics.url_count == 0
        assert metrics.has_numbers is False
        assert metrics.has_question is False
        assert metrics.has_emoji is False
        assert metrics.ends_with_punctuation is True


@pytest.mark.unit
def test_launch_post_end_to_end(launch_post):
    tokens = tokenize(launch_post)
    result = analyze(launch_post)

    for expected in ["great", "news", "follow", "us", "check", "out", "our", "new", "#launch", "#excited"]:
        assert expected in tokens
    assert result.hashtag_count == 2
    assert result.found_ctas == ("follow",)
    assert result.sentiment == Sentiment.POSITIVE
    assert result.word_count < 50
    assert result.engagement_score == 60


@pytest.mark.unit
class TestQuotedWords:
    def test_quoted_words_still_count(self):
        result = analyze("Please 'follow' us, it's 'great', 'amazing' and 'awesome'")

        assert result.found_ctas == ("follow",)
        assert result.sentiment == Sentiment.POSITIVE
        assert [entry.word for entry in result.top_words] == [
            "please", "follow", "it's", "great", "amazing", "awesome",
        ]

    def test_apostrophes_alone_are_empty(self):
        result = analyze("' ' '")

        assert result.word_count == 0
        assert result.top_words == ()


@pytest.mark.unit
def test_hashtagged_cta_counts_as_cta_and_hashtag():
    result = analyze("New drop today #follow")

    assert result.found_ctas == ("follow",)
    assert result.hashtag_count == 1


@pytest.mark.unit
def test_question_mark_alone_is_not_a_question():
    assert measure_text("Is this cool?").has_question is False
    assert measure_text("So, what do you think").has_question is True
