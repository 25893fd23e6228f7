import pytest

from src.analyzer.models import NEGATIVE, NEUTRAL, POSITIVE, NewsArticle
from src.analyzer.sentiment.aggregator import aggregate, percent, sentiment_word


def _articles(*sentiments):
    return [
        NewsArticle(
            title=f"headline {i}",
            source="Wire",
            sentiment=s,
            published_date="2024-03-01",
        )
        for i, s in enumerate(sentiments)
    ]


def test_empty_is_neutral_no_data():
    assert aggregate([]).label == "Neutral (No data)"
    assert aggregate(None).label == "Neutral (No data)"


def test_even_split_reads_positive():
    result = aggregate(_articles(POSITIVE, NEGATIVE))

    assert result.label == "Positive (50%)"
    assert result.positive_pct == 50
    assert result.negative_pct == 50


@pytest.mark.parametrize("n", [1, 2, 3, 5, 8])
def test_all_positive_is_very_positive(n):
    assert aggregate(_articles(*[POSITIVE] * n)).label == "Very Positive (100%)"


@pytest.mark.parametrize(
    "sentiments, expected",
    [
        ((POSITIVE, POSITIVE, NEGATIVE), "Very Positive (67%)"),
        ((POSITIVE, POSITIVE, NEUTRAL, NEUTRAL, NEGATIVE), "Positive (40%)"),
        ((NEGATIVE, NEGATIVE, NEGATIVE, POSITIVE, NEUTRAL), "Very Negative (60%)"),
        ((NEGATIVE, NEGATIVE, POSITIVE, NEUTRAL, NEUTRAL), "Negative (40%)"),
        ((POSITIVE, NEGATIVE, NEUTRAL, NEUTRAL, NEUTRAL), "Mixed (20% pos, 20% neg)"),
        ((POSITIVE, NEUTRAL, NEUTRAL), "Mixed (33% pos, 0% neg)"),
        ((NEUTRAL, NEUTRAL), "Mixed (0% pos, 0% neg)"),
    ],
)
def test_bands(sentiments, expected):
    assert aggregate(_articles(*sentiments)).label == expected


def test_percent_rounds_half_up():
    assert percent(1, 8) == 13
    assert percent(1, 3) == 33
    assert percent(2, 3) == 67
    assert percent(0, 4) == 0


def test_unknown_labels_count_towards_total_only():
    result = aggregate(_articles(POSITIVE, "Bogus", "Bogus", "Bogus"))

    assert result.total == 4
    assert result.label == "Mixed (25% pos, 0% neg)"


def test_str_is_label():
    assert str(aggregate(_articles(NEGATIVE))) == "Very Negative (100%)"


@pytest.mark.parametrize(
    "label, word",
    [
        ("Very Positive (100%)", "positive"),
        ("Positive (50%)", "positive"),
        ("Negative (40%)", "negative"),
        ("Mixed (20% pos, 20% neg)", "mixed"),
        ("Neutral (No data)", "mixed"),
    ],
)
def test_sentiment_word(label, word):
    assert sentiment_word(label) == word
