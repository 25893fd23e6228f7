from typing import Sequence

from src.analyzer.models import CompanyProfile, NewsArticle
from src.analyzer.sentiment.aggregator import aggregate, sentiment_word


def compose(profile: CompanyProfile, articles: Sequence[NewsArticle]) -> str:
    """
    Plain-language paragraph for the dashboard. Missing profile fields fall
    back to "Unknown"/"N/A" or drop their clause.
    """
    overall = aggregate(articles)
    word = sentiment_word(overall.label)

    name = profile.name or "Unknown"
    symbol = profile.symbol or "N/A"
    sector = profile.sector or "Unknown"

    sector_clause = f"The company operates in the {sector} sector"
    if profile.industry:
        sector_clause += f" focusing on {profile.industry.lower()}"

    return (
        f"{name} ({symbol}) is showing {word} market sentiment based on recent news analysis. "
        f"{sector_clause}. "
        f"Current analysis suggests {overall.label.lower()} investor outlook. "
        f"This assessment is based on {len(articles)} recent news articles and market data."
    )
