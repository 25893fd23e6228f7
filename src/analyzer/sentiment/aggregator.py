import math
from collections import Counter
from typing import Iterable

from src.analyzer.models import (
    NEGATIVE,
    NEUTRAL,
    POSITIVE,
    NewsArticle,
    OverallSentiment,
)

NO_DATA_LABEL = "Neutral (No data)"


def percent(count: int, total: int) -> int:
    # round half up, e.g. 2/3 -> 67, 1/8 -> 13
    return int(math.floor(100 * count / total + 0.5))


def aggregate(articles: Iterable[NewsArticle]) -> OverallSentiment:
    """
    Reduce per-article sentiment into one banded label.

    Bands are checked in a fixed order and the first match wins, so an even
    positive/negative split reads as "Positive (50%)":
      positive >= 60 -> Very Positive
      positive >= 40 -> Positive
      negative >= 60 -> Very Negative
      negative >= 40 -> Negative
      otherwise      -> Mixed
    """
    articles = list(articles or [])
    if not articles:
        return OverallSentiment(label=NO_DATA_LABEL)

    counts = Counter(a.sentiment for a in articles)
    total = len(articles)
    pos = percent(counts.get(POSITIVE, 0), total)
    neg = percent(counts.get(NEGATIVE, 0), total)
    neu = percent(counts.get(NEUTRAL, 0), total)

    if pos >= 60:
        label = f"Very Positive ({pos}%)"
    elif pos >= 40:
        label = f"Positive ({pos}%)"
    elif neg >= 60:
        label = f"Very Negative ({neg}%)"
    elif neg >= 40:
        label = f"Negative ({neg}%)"
    else:
        label = f"Mixed ({pos}% pos, {neg}% neg)"

    return OverallSentiment(
        label=label,
        positive_pct=pos,
        negative_pct=neg,
        neutral_pct=neu,
        total=total,
    )


def sentiment_word(label: str) -> str:
    if "Positive" in label:
        return "positive"
    if "Negative" in label:
        return "negative"
    return "mixed"
