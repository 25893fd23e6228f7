from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, List, Optional, Union

import requests
from loguru import logger

from src.analyzer.errors import SymbolNotFound, UpstreamUnavailable
from src.analyzer.models import CompanyProfile, NewsArticle, PricePoint
from src.analyzer.sentiment.keyword_model import KeywordSentimentModel


@dataclass(frozen=True)
class ProviderData:
    profile: CompanyProfile
    # None when only the news call failed; the caller substitutes mock news
    news: Optional[List[NewsArticle]]
    news_error: str = ""


@dataclass(frozen=True)
class Ok:
    data: ProviderData


@dataclass(frozen=True)
class Fallback:
    reason: str


ProviderResult = Union[Ok, Fallback]


class FmpAdapter:
    """
    Financial Modeling Prep client.

    Profile and news are fetched with independent failure handling: a failed
    profile call yields ``Fallback``, a failed news call only drops the news.
    Provider headlines are scored with the keyword classifier.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://financialmodelingprep.com/api/v3",
        timeout_s: float = 5.0,
        news_limit: int = 5,
        classifier: Optional[KeywordSentimentModel] = None,
        enabled: bool = True,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.news_limit = news_limit
        self.classifier = classifier or KeywordSentimentModel()
        self.enabled = enabled

    def _get(self, path: str, **params) -> Any:
        params["apikey"] = self.api_key
        url = f"{self.base_url}/{path}"
        try:
            response = requests.get(url, params=params, timeout=self.timeout_s)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise UpstreamUnavailable(f"FMP request failed ({path}): {e}") from e
        except ValueError as e:
            raise UpstreamUnavailable(f"FMP returned invalid JSON ({path}): {e}") from e

    def fetch_profile(self, symbol: str) -> CompanyProfile:
        data = self._get(f"profile/{symbol}")
        if not data:
            raise SymbolNotFound(symbol)

        try:
            stock = data[0]
            return CompanyProfile(
                symbol=stock.get("symbol") or symbol,
                name=stock.get("companyName") or f"{symbol} Corporation",
                price=float(stock["price"]),
                market_cap=int(stock.get("mktCap") or 0),
                sector=stock.get("sector") or None,
                industry=stock.get("industry") or None,
                description=stock.get("description") or "",
                website=stock.get("website") or None,
            )
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
            raise UpstreamUnavailable(f"Unexpected FMP profile payload for {symbol}: {e}") from e

    def fetch_news(self, symbol: str) -> list[NewsArticle]:
        data = self._get("stock_news", tickers=symbol, limit=self.news_limit)

        try:
            articles = []
            for item in list(data)[: self.news_limit]:
                title = item.get("title") or ""
                articles.append(
                    NewsArticle(
                        title=title,
                        source=item.get("site") or "Financial News",
                        sentiment=self.classifier.classify(title),
                        url=item.get("url") or None,
                        published_date=str(item.get("publishedDate") or "")[:10],
                    )
                )
            return articles
        except (TypeError, AttributeError) as e:
            raise UpstreamUnavailable(f"Unexpected FMP news payload for {symbol}: {e}") from e

    def fetch_price_series(self, symbol: str, days: int = 30) -> list[PricePoint]:
        data = self._get(f"historical-price-full/{symbol}", timeseries=days + 1)

        try:
            rows = data.get("historical") or []
            points = [
                PricePoint(
                    date=date.fromisoformat(str(row["date"])[:10]),
                    price=round(float(row["close"]), 2),
                    volume=int(row.get("volume") or 0),
                    high=round(float(row["high"]), 2),
                    low=round(float(row["low"]), 2),
                )
                for row in rows
            ]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise UpstreamUnavailable(f"Unexpected FMP history payload for {symbol}: {e}") from e

        if not points:
            raise SymbolNotFound(symbol)

        points.sort(key=lambda p: p.date)
        return points

    def load(self, symbol: str) -> ProviderResult:
        if not self.enabled:
            return Fallback("No API key configured - using mock data")

        try:
            profile = self.fetch_profile(symbol)
        except UpstreamUnavailable as e:
            logger.warning(f"Profile fetch failed for {symbol}: {e}")
            return Fallback(str(e))

        try:
            news = self.fetch_news(symbol)
            news_error = ""
        except UpstreamUnavailable as e:
            logger.warning(f"News fetch failed for {symbol}: {e}")
            news, news_error = None, str(e)

        return Ok(ProviderData(profile=profile, news=news, news_error=news_error))
