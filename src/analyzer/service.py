from __future__ import annotations

import random
from typing import Optional

from loguru import logger

from src.analyzer.config import Settings
from src.analyzer.errors import SymbolValidationError, UpstreamUnavailable
from src.analyzer.mock.news import MockNewsGenerator
from src.analyzer.mock.quotes import MockQuoteGenerator
from src.analyzer.mock.series import MockSeriesGenerator
from src.analyzer.models import (
    FMP_DATA_SOURCE,
    MOCK_DATA_SOURCE,
    AnalysisResult,
    PricePoint,
)
from src.analyzer.providers.fmp import FmpAdapter, Ok
from src.analyzer.sentiment.aggregator import aggregate
from src.analyzer.summary import compose


def normalize_symbol(symbol: Optional[str]) -> str:
    cleaned = (symbol or "").strip().upper()
    if not cleaned:
        raise SymbolValidationError()
    return cleaned


class AnalysisService:
    """
    Builds one AnalysisResult per request.

    Provider data is used when the adapter returns ``Ok``; otherwise every
    part of the result comes from the mock generators. A provider result
    without news keeps the real profile and fills the news with mock items.
    """

    def __init__(
        self,
        adapter: FmpAdapter,
        rng: Optional[random.Random] = None,
        chart_days: int = 30,
    ):
        rng = rng or random.Random()
        self.adapter = adapter
        self.quotes = MockQuoteGenerator(rng)
        self.news = MockNewsGenerator(rng)
        self.series = MockSeriesGenerator(rng, days=chart_days)
        self.chart_days = chart_days

    @classmethod
    def from_settings(cls, settings: Settings, rng: Optional[random.Random] = None):
        adapter = FmpAdapter(
            api_key=settings.fmp_api_key,
            base_url=settings.fmp_base_url,
            timeout_s=settings.request_timeout_s,
            news_limit=settings.news_limit,
            enabled=not settings.uses_mock_data,
        )
        return cls(adapter, rng=rng, chart_days=settings.chart_days)

    def analyze(self, symbol: str) -> AnalysisResult:
        symbol = normalize_symbol(symbol)
        logger.info(f"Analyzing stock: {symbol}")

        result = self.adapter.load(symbol)
        if isinstance(result, Ok):
            profile = result.data.profile
            news = result.data.news
            if news is None:
                logger.warning(f"Using mock news for {symbol}: {result.data.news_error}")
                news = self.news.generate(symbol)
            source = FMP_DATA_SOURCE
        else:
            logger.info(f"Generating mock data for {symbol} ({result.reason})")
            profile = self.quotes.generate(symbol)
            news = self.news.generate(symbol)
            source = MOCK_DATA_SOURCE

        return AnalysisResult(
            profile=profile,
            news=news,
            sentiment=aggregate(news),
            summary=compose(profile, news),
            data_source=source,
        )

    def price_series(self, symbol: str) -> list[PricePoint]:
        symbol = normalize_symbol(symbol)

        if self.adapter.enabled:
            try:
                return self.adapter.fetch_price_series(symbol, days=self.chart_days)
            except UpstreamUnavailable as e:
                logger.warning(f"Chart data unavailable for {symbol}, using mock series: {e}")

        return self.series.generate(symbol)
