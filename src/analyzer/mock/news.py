import random
from datetime import datetime, timedelta, timezone
from typing import Optional

from src.analyzer.models import NEUTRAL, POSITIVE, NewsArticle

# (title template, source, sentiment). Sentiment is authored with the
# template and passed through as-is; it is not re-scored by the classifier.
NEWS_TEMPLATES = (
    (
        "{symbol} reports strong quarterly earnings, beats analyst expectations",
        "Financial Times",
        POSITIVE,
    ),
    (
        "Analysts upgrade {symbol} price target following strong performance",
        "MarketWatch",
        POSITIVE,
    ),
    (
        "{symbol} announces strategic partnership to expand market reach",
        "Reuters",
        POSITIVE,
    ),
    (
        "Market volatility creates uncertainty for {symbol} investors",
        "Bloomberg",
        NEUTRAL,
    ),
    (
        "{symbol} stock shows resilience despite broader market concerns",
        "Yahoo Finance",
        POSITIVE,
    ),
    (
        "Institutional investors increase holdings in {symbol}",
        "Seeking Alpha",
        POSITIVE,
    ),
)

MIN_ARTICLES = 3
MAX_ARTICLES = 5
MAX_AGE_DAYS = 7


class MockNewsGenerator:
    """
    Placeholder news feed used when the provider is unavailable.
    Returns 3-5 templated headlines dated within the last week.
    """

    def __init__(self, rng: Optional[random.Random] = None, templates=NEWS_TEMPLATES):
        self.rng = rng or random.Random()
        self.templates = tuple(templates)

    def generate(self, symbol: str, now: Optional[datetime] = None) -> list[NewsArticle]:
        now = now or datetime.now(timezone.utc)

        shuffled = list(self.templates)
        self.rng.shuffle(shuffled)
        count = self.rng.randint(MIN_ARTICLES, MAX_ARTICLES)

        articles = []
        for title, source, sentiment in shuffled[:count]:
            age = timedelta(seconds=self.rng.random() * MAX_AGE_DAYS * 86400)
            articles.append(
                NewsArticle(
                    title=title.format(symbol=symbol),
                    source=source,
                    sentiment=sentiment,
                    url=f"https://example.com/news/{symbol.lower()}",
                    published_date=(now - age).date().isoformat(),
                )
            )
        return articles
